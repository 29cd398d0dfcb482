"""
Unit tests for CLI commands.
"""

import logging
import pytest
import os
import sys
from argparse import Namespace
from unittest.mock import patch

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from cron_expand.cli import expand
from cron_expand.utils import validate_common_arguments, configure_logging_level


class TestCLICommands:
    """Test cases for the cron-expand command."""

    def test_expand_create_parser(self):
        """Test expand command parser creation."""
        parser = expand.create_parser()
        assert parser is not None
        assert parser.prog == 'cron-expand'

    def test_expand_help_functionality(self):
        """Test that expand command can show help without errors."""
        parser = expand.create_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(['--help'])
        assert exc_info.value.code == 0

    def test_schedule_line_defaults_to_none(self):
        args = expand.create_parser().parse_args([])
        assert args.schedule_line is None

    def test_validate_verbose_and_quiet(self):
        args = Namespace(verbose=True, quiet=True)
        assert validate_common_arguments(args) is False

    def test_validate_defaults(self):
        args = Namespace(verbose=False, quiet=False)
        assert validate_common_arguments(args) is True

    def test_main_prints_report(self, capsys, sample_line, sample_report):
        with patch('sys.argv', ['cron-expand', sample_line]):
            expand.main()

        captured = capsys.readouterr()
        assert captured.out.splitlines() == sample_report

    def test_main_missing_argument(self, capsys):
        with patch('sys.argv', ['cron-expand']):
            with pytest.raises(SystemExit) as exc_info:
                expand.main()
            assert exc_info.value.code == 2

        captured = capsys.readouterr()
        assert captured.out == "Err: Couldn't parse input argument\n"

    def test_main_out_of_bounds(self, capsys, caplog):
        with patch('sys.argv', ['cron-expand', '60 0 1 1 1 cmd']):
            with pytest.raises(SystemExit) as exc_info:
                expand.main()
            assert exc_info.value.code == 1

        assert capsys.readouterr().out == ""
        assert "Range 60-60 is outside the bounds 0-59" in caplog.text

    def test_main_malformed_token(self, capsys, caplog):
        with patch('sys.argv', ['cron-expand', '0 0 1 1 mon cmd']):
            with pytest.raises(SystemExit) as exc_info:
                expand.main()
            assert exc_info.value.code == 1

        assert capsys.readouterr().out == ""
        assert "'mon'" in caplog.text

    def test_main_incomplete_line(self, capsys):
        with patch('sys.argv', ['cron-expand', '0 0 1 1']):
            with pytest.raises(SystemExit) as exc_info:
                expand.main()
            assert exc_info.value.code == 1

        assert capsys.readouterr().out == ""

    def test_main_verbose_and_quiet(self):
        with patch('sys.argv', ['cron-expand', '-v', '-q', '0 0 1 1 1 cmd']):
            with pytest.raises(SystemExit) as exc_info:
                expand.main()
            assert exc_info.value.code == 1

    def test_main_ignores_extra_arguments(self, capsys, caplog, sample_line, sample_report):
        """Arguments after the schedule line are ignored, not rejected."""
        with patch('sys.argv', ['cron-expand', sample_line, 'extra']):
            expand.main()

        assert capsys.readouterr().out.splitlines() == sample_report
        assert "Ignoring extra arguments: extra" in caplog.text


class TestLoggingFlags:
    """Test cases for --verbose/--quiet handling."""

    def setup_method(self):
        """Remember the root logger level."""
        self.root_level = logging.getLogger().level

    def teardown_method(self):
        """Restore the root logger level."""
        logging.getLogger().setLevel(self.root_level)

    def test_verbose_sets_debug(self):
        configure_logging_level(Namespace(verbose=True, quiet=False))
        assert logging.getLogger().level == logging.DEBUG

    def test_quiet_sets_warning(self):
        configure_logging_level(Namespace(verbose=False, quiet=True))
        assert logging.getLogger().level == logging.WARNING

    def test_default_sets_info(self):
        configure_logging_level(Namespace(verbose=False, quiet=False))
        assert logging.getLogger().level == logging.INFO

    def test_main_verbose_logs_term_resolution(self, capsys, caplog):
        with patch('sys.argv', ['cron-expand', '-v', '*/30 0 1 1 1 x']):
            expand.main()

        assert capsys.readouterr().out.splitlines()[0] == "minute        0 30 "
        assert any("resolved" in record.getMessage() for record in caplog.records)
        assert "minute: resolved 0-59 step 30" in caplog.text

    def test_main_quiet_keeps_warnings_only(self, capsys, caplog):
        """A reversed range still warns under --quiet; nothing below WARNING is logged."""
        with patch('sys.argv', ['cron-expand', '-q', '0 0 1 1 5-2 cmd']):
            expand.main()

        assert capsys.readouterr().out.splitlines()[4] == "day of week   "
        assert "is empty" in caplog.text
        assert all(record.levelno >= logging.WARNING for record in caplog.records)

    def test_main_default_hides_debug(self, capsys, caplog):
        with patch('sys.argv', ['cron-expand', '*/30 0 1 1 1 x']):
            expand.main()

        capsys.readouterr()
        assert not any(record.levelno == logging.DEBUG for record in caplog.records)
