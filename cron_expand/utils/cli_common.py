"""
Common CLI utilities.

This module provides the logging setup and argument parsing helpers used by
the command-line entry points.
"""

import argparse
import logging
from typing import Optional


def setup_logging() -> None:
    """
    Configure logging for CLI usage.

    Log records go to standard error with timestamp, level and message, so
    they never mix with the report on standard output.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s"
    )


class BaseArgumentParser:
    """
    Base argument parser class that provides common CLI argument patterns.
    """

    @staticmethod
    def create_base_parser(prog: str, description: str, epilog: Optional[str] = None) -> argparse.ArgumentParser:
        """
        Create a base argument parser with standard configuration.

        Args:
            prog: Program name for the parser
            description: Description of the command
            epilog: Optional epilog text with examples

        Returns:
            Configured ArgumentParser instance
        """
        return argparse.ArgumentParser(
            prog=prog,
            description=description,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog=epilog
        )

    @staticmethod
    def add_schedule_line_argument(parser: argparse.ArgumentParser,
                                   help: str = "Schedule line to expand") -> None:
        """
        Add the optional schedule line positional argument to parser.

        The argument defaults to None so the caller can report a missing line
        with its own message and exit status.

        Args:
            parser: ArgumentParser to add argument to
            help: Help text for the argument
        """
        parser.add_argument("schedule_line", nargs='?', help=help)

    @staticmethod
    def add_verbose_quiet_arguments(parser: argparse.ArgumentParser) -> None:
        """
        Add verbose and quiet logging arguments.

        Args:
            parser: ArgumentParser to add arguments to
        """
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Log how every term is resolved"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only log warnings and errors"
        )


def validate_common_arguments(args: argparse.Namespace) -> bool:
    """
    Validate common argument patterns.

    Args:
        args: Parsed arguments namespace

    Returns:
        True if arguments are valid, False otherwise
    """
    if getattr(args, 'verbose', False) and getattr(args, 'quiet', False):
        logging.error("--verbose and --quiet cannot be used together")
        return False

    return True


def configure_logging_level(args: argparse.Namespace) -> None:
    """
    Configure logging level based on verbose/quiet arguments.

    Args:
        args: Parsed arguments with potential verbose/quiet flags
    """
    if getattr(args, 'quiet', False):
        logging.getLogger().setLevel(logging.WARNING)
    elif getattr(args, 'verbose', False):
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)
