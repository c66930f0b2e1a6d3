"""
CLI tests — argument handling, configuration errors and deletion outcome.
Configuration errors must never touch the filesystem.
"""
import logging
import sys
import pytest
from pathlib import Path
from unittest import mock
from hashpurge.cli import CLIApplication, main
from hashpurge.commands import HashPurgeCommand
from hashpurge.core.models import HashType


class TestArgumentParsing:
    """Test argparse setup."""

    def test_defaults(self):
        args = CLIApplication.parse_args(["/data", "-H", "abc"])

        assert args.path == "/data"
        assert args.hashes == ["abc"]
        assert args.algorithm is None
        assert not (args.ignore_symlinks or args.recursive or args.interactive or args.verbose)

    def test_short_flags(self):
        args = CLIApplication.parse_args(["/data", "-H", "abc", "-s", "-r", "-i", "-v", "-a", "SHA256"])

        assert args.ignore_symlinks and args.recursive and args.interactive and args.verbose
        assert args.algorithm == "sha256"

    def test_multiple_hashes(self):
        args = CLIApplication.parse_args(["/data", "-H", "a", "b", "--hash", "c"])
        assert args.hashes == ["a", "b", "c"]

    def test_hash_is_required(self, capsys):
        with pytest.raises(SystemExit):
            CLIApplication.parse_args(["/data"])

    def test_algorithm_alias(self, test_tree, digest_d1):
        app = CLIApplication()
        args = app.parse_args([str(test_tree["root"]), "-H", digest_d1, "-a", "md5"])
        assert app.create_config(args).hash_type == HashType.MD5


class TestRun:
    """Test complete runs through the CLI."""

    def test_recursive_run_prints_count(self, test_tree, digest_d1, capsys):
        deleted = CLIApplication().run([str(test_tree["root"]), "-r", "-H", digest_d1])

        assert deleted == 2
        assert "Deleted 2 file(s)" in capsys.readouterr().out
        assert test_tree["b"].exists()

    def test_non_recursive_run(self, test_tree, digest_d1, capsys):
        deleted = CLIApplication().run([str(test_tree["root"]), "-H", digest_d1])

        assert deleted == 1
        assert test_tree["c"].exists()
        assert "Deleted 1 file(s)" in capsys.readouterr().out

    def test_verbose_run_enables_info_logging(self, test_tree, digest_d1):
        root_logger = logging.getLogger()
        previous = root_logger.level
        try:
            app = CLIApplication()
            app.run([str(test_tree["root"]), "-v", "-H", digest_d1])
            assert root_logger.level == logging.INFO
            assert vars(app) == {}
        finally:
            root_logger.setLevel(previous)

    def test_uppercase_target_matches(self, test_tree, digest_d1):
        assert CLIApplication().run([str(test_tree["root"]), "-H", digest_d1.upper()]) == 1

    def test_run_from_sys_argv(self, test_tree, digest_d1, capsys):
        with mock.patch.object(sys, "argv", ["hashpurge", str(test_tree["root"]), "-r", "-H", digest_d1]):
            main()
        assert "Deleted 2 file(s)" in capsys.readouterr().out

    def test_interactive_run_asks_each_match(self, test_tree, digest_d1, capsys):
        with mock.patch("builtins.input", side_effect=["y", "n"]) as mock_input:
            deleted = CLIApplication().run([str(test_tree["root"]), "-r", "-i", "-H", digest_d1])

        assert deleted == 1
        assert mock_input.call_count == 2
        assert not test_tree["a"].exists()
        assert test_tree["c"].exists()


class TestConfigurationErrors:
    """Invalid input is reported once and nothing is scanned."""

    def test_invalid_hash_length_aborts(self, test_tree, capsys):
        with mock.patch.object(HashPurgeCommand, "execute") as mock_execute:
            with pytest.raises(SystemExit) as exc_info:
                CLIApplication().run([str(test_tree["root"]), "-r", "-H", "a" * 20])

        assert exc_info.value.code == 1
        mock_execute.assert_not_called()
        assert "Invalid hash" in capsys.readouterr().err
        assert all(test_tree[key].exists() for key in ("a", "b", "c"))

    def test_missing_directory_aborts(self, tmp_path, digest_d1, capsys):
        with mock.patch.object(HashPurgeCommand, "execute") as mock_execute:
            with pytest.raises(SystemExit) as exc_info:
                CLIApplication().run([str(tmp_path / "missing"), "-H", digest_d1])

        assert exc_info.value.code == 1
        mock_execute.assert_not_called()
        assert "Directory does not exist" in capsys.readouterr().err

    def test_file_instead_of_directory_aborts(self, test_tree, digest_d1, capsys):
        with pytest.raises(SystemExit):
            CLIApplication().run([str(test_tree["a"]), "-H", digest_d1])

        assert test_tree["a"].exists()
        assert "Directory does not exist" in capsys.readouterr().err

    def test_unlistable_root_reports_scan_failure(self, test_tree, digest_d1, capsys):
        with mock.patch("hashpurge.core.scanner.os.scandir", side_effect=PermissionError("denied")):
            with pytest.raises(SystemExit) as exc_info:
                CLIApplication().run([str(test_tree["root"]), "-H", digest_d1])

        assert exc_info.value.code == 1
        assert "Scan failed" in capsys.readouterr().err

    def test_unexpected_error_exit_code(self, capsys, monkeypatch):
        monkeypatch.delenv("DEBUG", raising=False)
        with mock.patch.object(CLIApplication, "run", side_effect=ValueError("boom")):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    def test_keyboard_interrupt_exit_code(self):
        with mock.patch.object(CLIApplication, "run", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 130
