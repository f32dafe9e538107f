import logging
from typing import Any, Optional, Union

from .enum import DateFormat, LogFormat, LogLevel
from .formatter import color_formatter, json_handler


DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def create_logging_handler(
    log_format: LogFormat = LogFormat.color,
    date_format: Optional[str] = None, **kwargs: Any
) -> logging.Handler:
    """
    ``date_format=None`` picks the :class:`DateFormat` default of
    the format, an empty string drops timestamps.
    """

    if log_format == LogFormat.stream:
        if date_format is None:
            date_format = DateFormat.stream.value

        handler: logging.Handler = logging.StreamHandler(
            kwargs.get("stream"),
        )
        if date_format:
            formatter = logging.Formatter(
                "%(asctime)s " + DEFAULT_FORMAT, datefmt=date_format,
            )
        else:
            formatter = logging.Formatter(DEFAULT_FORMAT)

        handler.setFormatter(formatter)
        return handler
    elif log_format == LogFormat.json:
        return json_handler(date_format=date_format, **kwargs)
    elif log_format == LogFormat.color:
        return color_formatter(date_format=date_format, **kwargs)
    elif log_format == LogFormat.plain:
        handler = logging.StreamHandler(kwargs.get("stream"))
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    raise NotImplementedError(log_format)


def basic_config(
    level: Union[int, str] = LogLevel.info,
    log_format: Union[str, LogFormat] = LogFormat.color,
    **kwargs: Any
) -> None:

    if isinstance(level, str):
        level = LogLevel[level]

    if isinstance(log_format, str):
        log_format = LogFormat[log_format]

    logging.basicConfig(handlers=[], level=logging.NOTSET)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = create_logging_handler(log_format, **kwargs)

    # noinspection PyArgumentList
    logging.basicConfig(level=int(level), handlers=[handler])


__all__ = (
    "DateFormat",
    "LogFormat",
    "LogLevel",
    "basic_config",
    "create_logging_handler",
)
