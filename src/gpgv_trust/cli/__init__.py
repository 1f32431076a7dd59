"""Command-line interface for gpgv-trust."""

from gpgv_trust.cli.parser import CLIParser
from gpgv_trust.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
