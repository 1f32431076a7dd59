"""Tests for the CLI runner and entry point."""

import sys
from pathlib import Path

import orjson
import pytest

from gpgv_trust.cli import CLIParser, CLIRunner
from gpgv_trust.config import GlobalConfigManager
from gpgv_trust.exceptions import VerificationSetupError
from gpgv_trust.logger import (
    ConfigurationError,
    _state,
    flush_all_handlers,
)
from gpgv_trust.main import main
from tests.core.verification.conftest import (
    FPR_A,
    FPR_B,
    KEYID_A,
    SHA1,
    signature_lines,
)


@pytest.fixture
def cli_runner(tmp_path: Path) -> CLIRunner:
    """CLI runner using settings from a temporary directory."""
    return CLIRunner(GlobalConfigManager(config_dir=tmp_path / "config"))


@pytest.fixture
def status_file(tmp_path: Path):
    """Factory writing recorded gpgv status output to a file."""

    def write(lines: list[str]) -> str:
        path = tmp_path / "status.log"
        path.write_text("".join(lines), encoding="utf-8")
        return str(path)

    return write


@pytest.fixture
def restore_handler_levels():
    """Restore the log handler levels a test run changed."""
    listener = _state.queue_listener
    handlers = listener.handlers if listener is not None else ()
    original = [handler.level for handler in handlers]
    yield
    for handler, level in zip(handlers, original, strict=True):
        handler.setLevel(level)


class TestCLIParser:
    """Test CLIParser."""

    def test_verify_defaults(self) -> None:
        """Test the verify command defaults."""
        args = CLIParser().parse_args(["verify", "InRelease"])

        assert args.command == "verify"
        assert args.source == "InRelease"
        assert args.destination is None
        assert args.signed_by == ""
        assert args.exit_code == 0
        assert not args.json
        assert not args.debug

    def test_command_required(self) -> None:
        """Test running without a command is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            CLIParser().parse_args([])

        assert exc_info.value.code == 2


class TestCLIRunner:
    """Test CLIRunner.run() with replayed status output."""

    def test_accepted_prints_signers(
        self, cli_runner: CLIRunner, status_file, capsys
    ) -> None:
        """Test an accepted file prints its good signers."""
        path = status_file(signature_lines(KEYID_A, FPR_A))

        code = cli_runner.run(["verify", "InRelease", "--status-file", path])

        assert code == 0
        assert capsys.readouterr().out == f"GOODSIG {KEYID_A}\n"

    def test_rejected_prints_error(
        self, cli_runner: CLIRunner, status_file, capsys
    ) -> None:
        """Test a rejected file prints its diagnostic."""
        path = status_file(signature_lines(KEYID_A, FPR_A))

        code = cli_runner.run(
            [
                "verify",
                "InRelease",
                "--status-file",
                path,
                "--signed-by",
                FPR_B,
            ]
        )

        out = capsys.readouterr().out
        assert code == 1
        assert out.startswith("E: The following signatures couldn't")
        assert out.endswith(f"GOODSIG {KEYID_A}\n")

    def test_weak_digest_warning(
        self, cli_runner: CLIRunner, status_file, capsys
    ) -> None:
        """Test weak digest warnings are printed before the signers."""
        path = status_file(signature_lines(KEYID_A, FPR_A, SHA1))

        code = cli_runner.run(["verify", "InRelease", "--status-file", path])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0].startswith("W: Signature by key")
        assert lines[1] == f"GOODSIG {KEYID_A}"

    def test_json_output(
        self, cli_runner: CLIRunner, status_file, capsys
    ) -> None:
        """Test --json prints the verdict dictionary."""
        path = status_file(["[GNUPG:] NEWSIG\n"])

        code = cli_runner.run(
            [
                "verify",
                "Release.gpg",
                "Release",
                "--status-file",
                path,
                "--exit-code",
                "111",
                "--json",
            ]
        )

        verdict = orjson.loads(capsys.readouterr().out)
        assert code == 1
        assert verdict["accepted"] is False
        assert verdict["exit_code"] == 111
        assert verdict["message"].startswith("Could not execute 'gpgv'")

    @pytest.mark.usefixtures("restore_handler_levels")
    def test_debug_traces_status_lines_on_stderr(
        self, cli_runner: CLIRunner, status_file, capsys
    ) -> None:
        """Test --debug shows each status line read on stderr."""
        path = status_file(signature_lines(KEYID_A, FPR_A))

        code = cli_runner.run(
            ["verify", "InRelease", "--status-file", path, "--debug"]
        )
        flush_all_handlers()

        captured = capsys.readouterr()
        assert code == 0
        assert "Read: [GNUPG:] NEWSIG" in captured.err
        assert captured.out == f"GOODSIG {KEYID_A}\n"

    def test_quiet_without_debug(
        self, cli_runner: CLIRunner, status_file, capsys
    ) -> None:
        """Test status lines are not traced on stderr by default."""
        path = status_file(signature_lines(KEYID_A, FPR_A))

        cli_runner.run(["verify", "InRelease", "--status-file", path])
        flush_all_handlers()

        assert "Read:" not in capsys.readouterr().err

    def test_missing_status_file(
        self, tmp_path: Path, cli_runner: CLIRunner
    ) -> None:
        """Test an unreadable status file is a setup error."""
        missing = str(tmp_path / "absent.log")

        with pytest.raises(VerificationSetupError) as exc_info:
            cli_runner.run(["verify", "InRelease", "--status-file", missing])

        assert exc_info.value.target == missing
        assert "Cannot read status file" in exc_info.value.message

    def test_settings_file_created(
        self, tmp_path: Path, cli_runner: CLIRunner
    ) -> None:
        """Test the runner loads settings from its config directory."""
        assert (tmp_path / "config" / "settings.conf").exists()
        assert cli_runner.global_config["gpgv"]["binary"] == "gpgv"


class TestMain:
    """Test the main() entry point."""

    def test_exit_status(self, mocker) -> None:
        """Test main exits with the runner's status."""
        runner = mocker.patch("gpgv_trust.main.CLIRunner")
        runner.return_value.run.return_value = 1

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_setup_error_exits(self, mocker) -> None:
        """Test a setup failure is reported and exits with 1."""
        runner = mocker.patch("gpgv_trust.main.CLIRunner")
        runner.return_value.run.side_effect = VerificationSetupError("boom")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_logging_error_exits(self, mocker) -> None:
        """Test a logging setup failure exits with 1 instead of a traceback."""
        runner = mocker.patch("gpgv_trust.main.CLIRunner")
        runner.side_effect = ConfigurationError("Cannot open log file")

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_missing_status_file_exits(self, tmp_path: Path, mocker) -> None:
        """Test a missing --status-file exits with 1."""
        argv = ["gpgv-trust", "verify", "InRelease"]
        argv += ["--status-file", str(tmp_path / "absent.log")]
        mocker.patch.object(sys, "argv", argv)
        mocker.patch(
            "gpgv_trust.main.CLIRunner",
            return_value=CLIRunner(
                GlobalConfigManager(config_dir=tmp_path / "config")
            ),
        )

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1
