"""Form-session ID logging context for tracing one booking form's lifecycle.

Every controller stamps its form-session ID into a context variable before
submitting. Records that pass through a session handler carry that ID and
render it, so edits, validation passes and submissions belonging to one
form instance can be followed in a shared log.

Usage:
    from booking_intake.logging_context import get_session_logger, set_session_id

    set_session_id("FORM-abc123")
    logger = get_session_logger(__name__)
    logger.info("Submitting booking")  # -> ... [FORM-abc123] Submitting booking
"""

import logging
import uuid
from contextvars import ContextVar
from typing import IO, Optional

SESSION_LOG_FORMAT = "%(asctime)s [%(session_id)s] [%(name)s] %(levelname)s: %(message)s"
SESSION_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_session_id: ContextVar[str] = ContextVar("session_id", default="-")


def new_session_id() -> str:
    """Generate a fresh form-session ID."""
    return f"FORM-{uuid.uuid4().hex[:8]}"


def set_session_id(session_id: str) -> None:
    _session_id.set(session_id)


def get_session_id() -> str:
    return _session_id.get()


class SessionIdFilter(logging.Filter):
    """Stamps the current form-session ID on records that lack one."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session_id"):
            record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True


def session_log_handler(stream: Optional[IO[str]] = None) -> logging.Handler:
    """Build a stream handler that renders ``[session_id]`` on every line.

    The filter sits on the handler, so records from loggers outside this
    package (httpx, asyncio) format cleanly with the fallback ID ``-``.
    """
    handler = logging.StreamHandler(stream)
    handler.addFilter(SessionIdFilter())
    handler.setFormatter(logging.Formatter(SESSION_LOG_FORMAT, SESSION_DATE_FORMAT))
    return handler


def get_session_logger(name: str) -> logging.Logger:
    """Return a logger whose records carry the form-session ID."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, SessionIdFilter) for f in logger.filters):
        logger.addFilter(SessionIdFilter())
    return logger
