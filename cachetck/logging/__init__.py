from __future__ import annotations

from .logging_config import (
    add_context,
    get_logger,
    reset_logging,
    set_global_level,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "add_context",
    "set_global_level",
    "reset_logging",
]
