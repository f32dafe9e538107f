import logging
import sys
from typing import IO, Any, Optional

from colorlog import ColoredFormatter

from ..enum import DateFormat


LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


def color_formatter(
    stream: Optional[IO[str]] = None,
    date_format: Optional[str] = None, **_: Any
) -> logging.Handler:
    if date_format is None:
        date_format = DateFormat.color.value

    handler = logging.StreamHandler(stream or sys.stderr)

    fmt = "%(log_color)s%(levelname)s:%(name)s%(reset)s: %(message)s"
    if date_format:
        fmt = "%(bold_white)s%(asctime)s%(reset)s " + fmt

    handler.setFormatter(
        ColoredFormatter(
            fmt,
            log_colors=LOG_COLORS,
            datefmt=date_format,
            reset=True,
            style="%",
        ),
    )
    return handler
