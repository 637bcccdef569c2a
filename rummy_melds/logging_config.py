"""Logging helpers shared by the meld engine and its CLI."""

from __future__ import annotations

import logging
import sys
from typing import Any, MutableMapping, Union

__all__ = ["LoggerLike", "SlotLoggerAdapter", "setup_logging"]

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


class SlotLoggerAdapter(logging.LoggerAdapter):
    """Prefix records with the slot name and attach it as ``record.slot``."""

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> tuple[Any, MutableMapping[str, Any]]:
        slot = (self.extra or {}).get("slot", "?")
        extra = dict(kwargs.get("extra") or {})
        extra.setdefault("slot", slot)
        kwargs["extra"] = extra
        return f"[{slot}] {msg}", kwargs
