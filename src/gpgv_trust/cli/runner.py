"""CLI runner for gpgv-trust.

Loads configuration, runs the requested verification and reports the
verdict.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path

from gpgv_trust.cli.parser import CLIParser
from gpgv_trust.config import GlobalConfigManager
from gpgv_trust.core.verification import (
    SignatureVerificationService,
    StaticStatusChannel,
    Verdict,
)
from gpgv_trust.core.verification.service import make_request
from gpgv_trust.exceptions import VerificationSetupError
from gpgv_trust.logger import (
    get_logger,
    set_console_level,
    update_logger_from_config,
)

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner."""

    def __init__(
        self, config_manager: GlobalConfigManager | None = None
    ) -> None:
        """Initialize CLI runner with configuration.

        Args:
            config_manager: Settings source; the user's settings file
                when omitted

        """
        self.config_manager = config_manager or GlobalConfigManager()
        self.global_config = self.config_manager.load_global_config()
        update_logger_from_config(self.global_config)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Run the CLI application.

        Args:
            argv: Command-line arguments; defaults to ``sys.argv[1:]``

        Returns:
            Process exit status: 0 when the file is trusted, 1 otherwise

        """
        args = CLIParser().parse_args(argv)
        verdict = self._verify(args)
        self._report(verdict, as_json=args.json)
        return 0 if verdict.accepted else 1

    def _verify(self, args: Namespace) -> Verdict:
        """Run the verify command."""
        gpgv_config = dict(self.global_config["gpgv"])
        if args.debug:
            gpgv_config["debug"] = True
        if gpgv_config["debug"]:
            set_console_level("DEBUG")
        service = SignatureVerificationService(gpgv_config)

        if args.status_file is None:
            return service.verify(
                args.source, args.destination, args.signed_by
            )

        request = make_request(args.source, args.destination, args.signed_by)
        try:
            lines = Path(args.status_file).read_text(
                encoding="utf-8", errors="replace"
            )
        except OSError as e:
            msg = f"Cannot read status file: {e.strerror or e}"
            raise VerificationSetupError(msg, target=args.status_file) from e
        channel = StaticStatusChannel(lines.splitlines(), args.exit_code)
        with channel:
            return service.verify_channel(channel, request)

    def _report(self, verdict: Verdict, *, as_json: bool) -> None:
        """Write the verdict to stdout."""
        if as_json:
            sys.stdout.write(verdict.to_json().decode() + "\n")
            return

        for warning in verdict.warnings:
            sys.stdout.write(f"W: {warning}\n")
        if verdict.accepted:
            for line in verdict.output:
                sys.stdout.write(f"{line}\n")
        else:
            sys.stdout.write(f"E: {verdict.message.rstrip()}\n")
