"""
cron-expand: expand cron-style schedule fields into explicit value tables.
"""

__version__ = "0.1.0"
