"""Main CLI entry point for gpgv-trust."""

import sys

from gpgv_trust.cli import CLIRunner
from gpgv_trust.exceptions import GpgvTrustError
from gpgv_trust.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status."""
    try:
        sys.exit(CLIRunner().run())
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except GpgvTrustError as e:
        logger.error("%s", e)  # noqa: TRY400
        sys.exit(1)


if __name__ == "__main__":
    main()
