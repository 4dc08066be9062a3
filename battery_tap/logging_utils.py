from __future__ import annotations

import logging

from colorlog import ColoredFormatter

TRACE_LEVEL = 5


def configure_logging(level: int) -> None:
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    formatter = ColoredFormatter(
        "%(log_color)s%(asctime)s %(levelname)s %(name)s %(message)s",
        log_colors={
            "TRACE": "cyan",
            "DEBUG": "blue",
            "INFO": "green",
            "WARNING": "yellow",
            "ERROR": "red",
            "CRITICAL": "red,bg_white",
        },
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=[handler])


def resolve_log_level(verbosity: int, fallback: str) -> int:
    if verbosity >= 2:
        return TRACE_LEVEL
    if verbosity == 1:
        return logging.DEBUG
    return logging._nameToLevel.get(fallback.upper(), logging.INFO)
