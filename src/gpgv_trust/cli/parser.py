"""CLI argument parser for gpgv-trust."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from gpgv_trust import __version__
from gpgv_trust.constants import EXIT_SUCCESS


class CLIParser:
    """Command-line argument parser for gpgv-trust."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse; defaults to ``sys.argv[1:]``

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        args = parser.parse_args(argv)
        if args.command is None:
            parser.error("a command is required")
        return args

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser with its subcommands."""
        parser = argparse.ArgumentParser(
            prog="gpgv-trust",
            description="Decide whether downloaded files can be trusted "
            "from their OpenPGP signatures",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Verify a clear-signed file against the default keyring
  %(prog)s verify InRelease

  # Verify a detached signature, accepting only one key
  %(prog)s verify Release.gpg Release --signed-by 0123456789ABCDEF0123456789ABCDEF01234567

  # Verify against a specific keyring and print the verdict as JSON
  %(prog)s verify InRelease --signed-by /usr/share/keyrings/archive.gpg --json

  # Replay recorded gpgv status output
  %(prog)s verify InRelease --status-file status.log --exit-code 0
            """,
        )
        parser.add_argument(
            "--version", action="version", version=f"%(prog)s {__version__}"
        )

        subparsers = parser.add_subparsers(dest="command")
        verify = subparsers.add_parser(
            "verify", help="Verify the signature(s) on a file"
        )
        verify.add_argument(
            "source", help="Detached signature or clear-signed file"
        )
        verify.add_argument(
            "destination",
            nargs="?",
            help="Signed content (omit for clear-signed files)",
        )
        verify.add_argument(
            "--signed-by",
            default="",
            help="Fingerprint the file must be signed by, or keyring path",
        )
        verify.add_argument(
            "--json",
            action="store_true",
            help="Print the verdict as JSON",
        )
        verify.add_argument(
            "--status-file",
            help="Read gpgv status lines from a file instead of running gpgv",
        )
        verify.add_argument(
            "--exit-code",
            type=int,
            default=EXIT_SUCCESS,
            help="gpgv exit status to assume with --status-file "
            "(default: %(default)s)",
        )
        verify.add_argument(
            "--debug",
            action="store_true",
            help="Trace every status line read from gpgv",
        )
        return parser
