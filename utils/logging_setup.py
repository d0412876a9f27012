from __future__ import annotations

import logging
import sys
from typing import Any, Dict, Optional, TextIO

from config.settings import get_settings


# Structured fields every record/storage log line carries
OP_FIELDS = ("op", "status", "path", "count")

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s %(message)s "
    "op=%(op)s status=%(status)s path=%(path)s count=%(count)s"
)

_HANDLER: Optional[logging.Handler] = None


class SafeExtraFormatter(logging.Formatter):
    """Formatter that fills in '-' for any op field a record did not set."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        for key in OP_FIELDS:
            if not hasattr(record, key):
                setattr(record, key, "-")
        return super().format(record)


def op_extra(
    op: str,
    status: str,
    path: Any = None,
    count: Optional[int] = None,
) -> Dict[str, Any]:
    """Build the ``extra=`` mapping for a store or file operation log line."""
    extra: Dict[str, Any] = {"op": op, "status": status}
    if path is not None:
        extra["path"] = str(path)
    if count is not None:
        extra["count"] = count
    return extra


def resolve_level(name: Optional[str]) -> int:
    """Map a level name like 'debug' to its number; unknown names give INFO."""
    level = logging.getLevelName((name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def init_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Handler:
    """Attach the op-field handler to the root logger once and return it.

    Later calls only adjust the level; the handler is never added twice.
    """
    global _HANDLER
    log_level = resolve_level(level or get_settings().log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if _HANDLER is None:
        # stderr keeps menu prompts on stdout readable
        _HANDLER = logging.StreamHandler(stream or sys.stderr)
        _HANDLER.setFormatter(SafeExtraFormatter(fmt=LOG_FORMAT))
        root_logger.addHandler(_HANDLER)
    _HANDLER.setLevel(log_level)
    return _HANDLER
