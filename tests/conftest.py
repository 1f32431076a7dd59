"""Pytest configuration and fixtures for gpgv-trust tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep test logs out of the user's config directory; must be set before
# any gpgv_trust module creates its logger
os.environ.setdefault(
    "GPGV_TRUST_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "gpgv-trust-test-logs"),
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("gpgv_trust"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value
