"""Allow running the package with ``python -m cron_expand``."""

from .cli.expand import main

main()
