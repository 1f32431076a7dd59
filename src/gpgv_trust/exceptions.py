"""Exception classes for gpgv-trust operations."""


class GpgvTrustError(Exception):
    """Base exception for gpgv-trust operations."""

    error_prefix: str = "Verification failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path of the file that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class VerificationSetupError(GpgvTrustError):
    """Raised when the status channel or verifier process cannot be set up."""

    error_prefix = "Verification setup failed"


class MalformedStatusLineError(GpgvTrustError):
    """Raised when a status line lacks the fields its tag requires."""

    error_prefix = "Malformed status line"
