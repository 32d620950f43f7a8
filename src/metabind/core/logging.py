"""Logging setup for hosts that want metabind diagnostics on stderr."""

import sys

from loguru import logger

_handler_id: int | None = None


def configure_logging(level: str = "WARNING") -> int:
    """Install (or replace) a stderr sink for metabind records.

    The library itself never adds sinks; hosts call this once at startup.

    Args:
        level: Minimum level name, e.g. "DEBUG" or "WARNING".

    Returns:
        The loguru handler id of the installed sink.
    """
    global _handler_id

    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            pass

    _handler_id = logger.add(
        sys.stderr,
        level=level.upper(),
        filter=lambda record: record["name"].startswith("metabind"),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}",
    )
    return _handler_id
