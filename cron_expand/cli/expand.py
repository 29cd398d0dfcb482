"""
CLI for expanding a cron-style schedule line into a field table.
"""

import logging
import sys

from ..utils import setup_logging, BaseArgumentParser, validate_common_arguments, configure_logging_level
from ..parsing import CronFieldError
from ..report import render_report
from ..schedule import expand_schedule
from .. import config


EPILOG = """Examples:
  cron-expand "*/15 0 1,15 * 1-5 /usr/bin/find"
  cron-expand "0 0 1 1 1 run-backup"
"""


def create_parser():
    """Create argument parser for the expand command."""
    parser = BaseArgumentParser.create_base_parser(
        prog="cron-expand",
        description="Expand the minute, hour, day of month, month and day of week fields "
                    "of a schedule line into the values they match.",
        epilog=EPILOG
    )

    BaseArgumentParser.add_schedule_line_argument(
        parser,
        help="Six space-separated fields: minute hour day-of-month month day-of-week command"
    )
    BaseArgumentParser.add_verbose_quiet_arguments(parser)

    return parser


def main():
    """Main entry point for cron-expand command."""
    setup_logging()
    parser = create_parser()
    args, extra = parser.parse_known_args()

    if args.schedule_line is None:
        print(config.MISSING_ARGUMENT_MESSAGE)
        sys.exit(config.MISSING_ARGUMENT_EXIT_CODE)

    if not validate_common_arguments(args):
        sys.exit(config.FAILURE_EXIT_CODE)

    configure_logging_level(args)

    if extra:
        logging.warning(f"Ignoring extra arguments: {' '.join(extra)}")

    try:
        schedule = expand_schedule(args.schedule_line)
    except CronFieldError as e:
        logging.error(f"Err: {e}")
        sys.exit(config.FAILURE_EXIT_CODE)

    for line in render_report(schedule):
        print(line)


if __name__ == "__main__":
    main()
