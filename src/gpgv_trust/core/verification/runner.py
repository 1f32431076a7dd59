"""Verifier process and status channel plumbing.

The classifier only sees a StatusChannel: an iterable of status lines
plus the verifier's exit status. GpgvRunner obtains one by spawning gpgv
with a pipe as its status file descriptor; StaticStatusChannel replays
recorded status output.
"""

from __future__ import annotations

import os
import subprocess
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Self

from gpgv_trust.constants import (
    CLEARSIGN_HEADER,
    EXIT_EXEC_FAILED,
    EXIT_NODATA,
)
from gpgv_trust.exceptions import VerificationSetupError
from gpgv_trust.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path
    from types import TracebackType
    from typing import TextIO

    from gpgv_trust.core.verification.results import VerificationRequest
    from gpgv_trust.types import GpgvConfig

logger = get_logger(__name__)


class StatusChannel(ABC):
    """Readable status lines of one verifier run.

    Channels are single use: ``lines()`` may be consumed once, then
    ``wait()`` returns the exit status. Used as a context manager the
    channel is closed on every exit path.
    """

    @abstractmethod
    def lines(self) -> Iterator[str]:
        """Yield status lines until the channel reaches end of stream."""

    @abstractmethod
    def wait(self) -> int:
        """Release the channel and return the verifier's exit status."""

    def close(self) -> None:
        """Release resources held by the channel."""

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class StaticStatusChannel(StatusChannel):
    """Channel over already collected status lines."""

    def __init__(self, lines: Iterable[str], exit_code: int) -> None:
        self._lines = list(lines)
        self._exit_code = exit_code

    def lines(self) -> Iterator[str]:
        yield from self._lines

    def wait(self) -> int:
        return self._exit_code


class ProcessStatusChannel(StatusChannel):
    """Status pipe of a running verifier process."""

    def __init__(self, process: subprocess.Popen, reader: TextIO) -> None:
        self._process = process
        self._reader = reader

    def lines(self) -> Iterator[str]:
        yield from self._reader

    def wait(self) -> int:
        self._reader.close()
        return self._process.wait()

    def close(self) -> None:
        # Closing the read end first lets a still-writing child exit
        self._reader.close()
        if self._process.poll() is None:
            self._process.wait()


def has_clearsign_header(path: Path) -> bool:
    """Check that ``path`` holds a clear-signed OpenPGP message."""
    try:
        with path.open(encoding="utf-8", errors="replace") as f:
            return any(line.rstrip() == CLEARSIGN_HEADER for line in f)
    except OSError as e:
        logger.warning("Cannot read %s: %s", path, e)
        return False


class GpgvRunner:
    """Spawns gpgv for a verification request."""

    def __init__(self, config: GpgvConfig) -> None:
        """Initialize the runner.

        Args:
            config: Verifier settings (binary and debug flag)

        """
        self.binary = config["binary"]
        self.debug = config["debug"]

    def build_command(
        self, request: VerificationRequest, status_fd: int
    ) -> list[str]:
        """Build the gpgv command line for ``request``.

        Args:
            request: File to verify and optional key specifier
            status_fd: Descriptor number gpgv writes status lines to

        Returns:
            Command arguments

        """
        command = [self.binary, "--status-fd", str(status_fd)]
        if request.signed_by and not request.key_is_id:
            command.extend(["--keyring", request.signed_by])
        command.append(str(request.source))
        if not request.is_clearsigned:
            command.append(str(request.destination))
        return command

    def open(self, request: VerificationRequest) -> StatusChannel:
        """Start verifying ``request`` and return its status channel.

        A clear-signed file without a signed message header is never
        handed to gpgv and reports the NODATA exit status. A verifier
        binary that cannot be executed reports the exec failure status.

        Raises:
            VerificationSetupError: If the status pipe cannot be created
                or the process cannot be started

        """
        if request.is_clearsigned and not has_clearsign_header(
            request.source
        ):
            logger.debug("%s is not a clear-signed message", request.source)
            return StaticStatusChannel([], EXIT_NODATA)

        try:
            read_fd, write_fd = os.pipe()
        except OSError as e:
            msg = f"Couldn't create pipe: {e}"
            raise VerificationSetupError(
                msg, target=str(request.source)
            ) from e

        command = self.build_command(request, write_fd)
        if self.debug:
            logger.debug("Running: %s", " ".join(command))

        try:
            process = subprocess.Popen(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                pass_fds=(write_fd,),
            )
        except (FileNotFoundError, PermissionError) as e:
            os.close(read_fd)
            logger.debug("Cannot execute %s: %s", self.binary, e)
            return StaticStatusChannel([], EXIT_EXEC_FAILED)
        except OSError as e:
            os.close(read_fd)
            msg = f"Couldn't spawn new process: {e}"
            raise VerificationSetupError(
                msg, target=str(request.source)
            ) from e
        finally:
            os.close(write_fd)

        reader = os.fdopen(read_fd, encoding="utf-8", errors="replace")
        return ProcessStatusChannel(process, reader)
