"""Process-wide logger state.

Every gpgv_trust module shares one root logger; the state below records
whether it has been wired up and owns the queue and listener thread that
drain it.
"""

import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


@dataclass(slots=True)
class _LoggerState:
    """Mutable logger bookkeeping.

    Attributes:
        lock: Serializes root logger initialization
        root_initialized: Whether the root handlers are attached
        config_applied: Whether settings.conf levels were applied
        queue_listener: Thread writing queued records to the handlers
        log_queue: Queue between the QueueHandler and the listener

    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: "QueueListener | None" = None
    log_queue: "queue.Queue | None" = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the shared logger state."""
    return _state
