"""
General logging utilities for per-file log context and timing.

Provides:
- Song context (dir, source_file) carried across calls via a ContextVar, so
  concurrent reads on different threads or tasks keep their own context
- log_with_context() and level helpers that prefix messages with that context
- TimingSpan for measuring operation durations
"""

import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Dict, Iterator, Optional

# Context variable to store the file currently being read
_song_context: ContextVar[Optional[Dict[str, str]]] = ContextVar('song_context', default=None)

logger = logging.getLogger(__name__)


def set_song_context(dir: str, source_file: str) -> Token:
    """Set the current song file in context; returns a token for reset."""
    return _song_context.set({"dir": dir, "source_file": source_file})


def get_song_context() -> Optional[Dict[str, str]]:
    """Get the current song file context."""
    return _song_context.get()


def clear_song_context(token: Optional[Token] = None):
    """Restore the previous context, or clear it if no token is given."""
    if token is not None:
        _song_context.reset(token)
    else:
        _song_context.set(None)


@contextmanager
def song_context(dir: str, source_file: str) -> Iterator[None]:
    """
    Attach dir and source_file to every message logged through log_with_context.

    Usage:
        with song_context("Artist - Title", "song.txt"):
            log_warning("unknown tag", tag="FOO")
    """
    token = set_song_context(dir, source_file)
    try:
        yield
    finally:
        clear_song_context(token)


def log_with_context(level: int, message: str, log: Optional[logging.Logger] = None, **kwargs):
    """
    Log a message with song context if available.

    Args:
        level: Logging level (e.g., logging.INFO)
        message: Log message
        log: Logger to emit on; defaults to this module's logger
        **kwargs: Additional context to include in log
    """
    target = log or logger
    if not target.isEnabledFor(level):
        return

    context = dict(get_song_context() or {})
    context.update(kwargs)

    if context:
        context_str = " ".join(f"{key}={value}" for key, value in context.items())
        target.log(level, f"[{context_str}] {message}")
    else:
        target.log(level, message)


def log_info(message: str, log: Optional[logging.Logger] = None, **kwargs):
    """Log INFO message with context."""
    log_with_context(logging.INFO, message, log, **kwargs)


def log_debug(message: str, log: Optional[logging.Logger] = None, **kwargs):
    """Log DEBUG message with context."""
    log_with_context(logging.DEBUG, message, log, **kwargs)


def log_warning(message: str, log: Optional[logging.Logger] = None, **kwargs):
    """Log WARNING message with context."""
    log_with_context(logging.WARNING, message, log, **kwargs)


def log_error(message: str, log: Optional[logging.Logger] = None, **kwargs):
    """Log ERROR message with context."""
    log_with_context(logging.ERROR, message, log, **kwargs)


class TimingSpan:
    """
    Context manager for timing operations and logging duration.

    Usage:
        with TimingSpan("load_song", path=path):
            # ... expensive operation ...
            pass
    """

    def __init__(self, operation: str, log: Optional[logging.Logger] = None, **extra_context):
        """
        Initialize timing span.

        Args:
            operation: Name of the operation being timed
            log: Logger to emit on
            **extra_context: Additional context to include in logs
        """
        self.operation = operation
        self.log = log
        self.extra_context = extra_context
        self.start_time = None
        self.end_time = None

    def __enter__(self):
        """Start timing."""
        self.start_time = time.perf_counter()
        log_debug(f"{self.operation} - started", self.log, **self.extra_context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """End timing and log duration."""
        self.end_time = time.perf_counter()
        duration_ms = (self.end_time - self.start_time) * 1000

        if exc_type is not None:
            log_error(
                f"{self.operation} - failed after {duration_ms:.0f}ms",
                self.log,
                error=str(exc_val),
                **self.extra_context
            )
        else:
            log_debug(
                f"{self.operation} - completed",
                self.log,
                duration_ms=f"{duration_ms:.0f}",
                **self.extra_context
            )

        return False  # Don't suppress exceptions

    def get_duration_ms(self) -> Optional[float]:
        """Get duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000
        return None
