"""
Logging for engine events under the ``moxie`` logger namespace.

Engines emit one JSON line per ``stub``/``record``/``consume``/``miss`` event, at
DEBUG normally and at INFO when ``MoxieConfig.verbose`` is set. Every field is
rendered to text by the caller, so encoding a payload never depends on what a
test passed as an argument or return value.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from moxie.config import MoxieConfig

PACKAGE_LOGGER = "moxie"
_OWNED_HANDLER_ATTR = "_moxie_owned"


def event_level(config: MoxieConfig | None) -> int:
    return logging.INFO if config is not None and config.verbose else logging.DEBUG


def _event_formatter() -> logging.Formatter:
    return logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )


def _owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _OWNED_HANDLER_ATTR, True)
    return handler


def configure_logging(config: MoxieConfig | None = None, *, log_file: Path | None = None) -> logging.Logger:
    """Show engine events for engines built with ``config``.

    With ``config.verbose`` the events (logged at INFO) reach the console;
    otherwise only warnings do. ``log_file`` always receives everything down to
    DEBUG. Handlers added by an earlier call are replaced, others are left alone.
    """
    config = config or MoxieConfig()
    console_level = event_level(config) if config.verbose else logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, _OWNED_HANDLER_ATTR, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = _event_formatter()
    console_handler = _owned(logging.StreamHandler())
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        file_handler = _owned(logging.FileHandler(log_file, encoding="utf-8"))
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if log_file is not None else console_level)
    logger.propagate = False
    return logger


def log_event(logger: logging.Logger, event: str, *, level: int = logging.DEBUG, **fields: Any) -> None:
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **fields}
    try:
        message = json.dumps(payload, ensure_ascii=False, sort_keys=True, default=repr)
    except (TypeError, ValueError):
        message = repr(payload)
    logger.log(level, message)


__all__ = ["PACKAGE_LOGGER", "configure_logging", "event_level", "log_event"]
