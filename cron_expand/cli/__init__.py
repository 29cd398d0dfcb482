"""
Command-line entry points for cron-expand.
"""
