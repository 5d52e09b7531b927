"""Structured logging utilities for u8scan.

Records carry the emitting component and an optional correlation ID as
``extra`` fields, so scan summaries and access failures can be traced back to
the call that produced them. Handlers and formatting are left to the
application; ``configure_logging`` is a convenience for the command line.
"""

import logging
from typing import Any, Dict, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

LogExtra = Optional[Dict[str, Any]]


class CorrelationLogger:
    """Wrapper around a stdlib logger that tags records with call context.

    Attributes:
        logger: Underlying ``logging.Logger``
        correlation_id: ID attached to every record (may be None)
        component: Short subsystem name, e.g. ``"scanner"`` or ``"access"``
    """

    def __init__(
        self,
        name: str,
        correlation_id: Optional[str] = None,
        component: Optional[str] = None
    ) -> None:
        self.logger = logging.getLogger(name)
        self.correlation_id = correlation_id
        self.component = component or name.rsplit(".", 1)[-1]

    def _log(self, level: int, message: str, extra: LogExtra, **kwargs: Any) -> None:
        fields: Dict[str, Any] = {
            "component": self.component,
            "correlation_id": self.correlation_id,
        }
        fields.update(extra or {})
        # Report the caller of the public method, not this wrapper
        self.logger.log(level, message, extra=fields, stacklevel=3, **kwargs)

    def is_debug_enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, extra: LogExtra = None) -> None:
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: LogExtra = None) -> None:
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: LogExtra = None) -> None:
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: LogExtra = None, exc_info: bool = True) -> None:
        """Log at ERROR; the active exception is included unless ``exc_info`` is False."""
        self._log(logging.ERROR, message, extra, exc_info=exc_info)

    def exception(self, message: str, extra: LogExtra = None) -> None:
        self._log(logging.ERROR, message, extra, exc_info=True)


def get_logger(
    name: str,
    correlation_id: Optional[str] = None,
    component: Optional[str] = None
) -> CorrelationLogger:
    """Return a ``CorrelationLogger`` for ``name`` (usually ``__name__``)."""
    return CorrelationLogger(name, correlation_id, component)


def configure_logging(level: str = "WARNING") -> None:
    """Install a basic stderr handler and set the ``u8scan`` logger level."""
    numeric_level = getattr(logging, level)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("u8scan").setLevel(numeric_level)
