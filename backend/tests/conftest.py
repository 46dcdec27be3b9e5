"""Root conftest — shared test configuration."""

import os

# Keep test runs independent of a developer's .env
os.environ.setdefault("MEDIA_LOG_FORMAT", "text")
os.environ.setdefault("MEDIA_STRICT_NOT_FOUND", "false")


import logging

import pytest

from media_api.infrastructure import observability


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """Undo root-logger handlers attached by setup_logging (e.g. via lifespan)."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    previous = observability._handler
    yield
    for handler in list(logging.root.handlers):
        if handler not in handlers:
            logging.root.removeHandler(handler)
    logging.root.setLevel(level)
    observability._handler = previous
