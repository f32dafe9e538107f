import logging
import os
import sys
from enum import Enum, IntEnum, unique
from typing import Tuple


def _is_tty() -> bool:
    try:
        return os.isatty(sys.stderr.fileno())
    except (AttributeError, ValueError, OSError):
        return False


@unique
class LogFormat(IntEnum):
    stream = 0
    color = 1
    json = 2
    plain = 3

    @classmethod
    def choices(cls) -> Tuple[str, ...]:
        return tuple(cls._member_names_)

    @classmethod
    def default(cls) -> str:
        env_format = os.getenv("PREFIXTREE_LOG_FORMAT")
        if env_format in cls._member_names_:
            return env_format

        if not _is_tty():
            return cls.plain.name

        return cls.color.name


class LogLevel(IntEnum):
    critical = logging.CRITICAL
    error = logging.ERROR
    warning = logging.WARNING
    info = logging.INFO
    debug = logging.DEBUG
    notset = logging.NOTSET

    @classmethod
    def choices(cls) -> Tuple[str, ...]:
        return tuple(cls._member_names_)

    @classmethod
    def default(cls) -> str:
        env_level = os.getenv("PREFIXTREE_LOG_LEVEL", "").lower()
        if env_level in cls._member_names_:
            return env_level
        return cls.info.name


class DateFormat(Enum):
    color = "%Y-%m-%d %H:%M:%S"
    stream = "[%Y-%m-%d %H:%M:%S]"

    # ``%s`` keeps the raw record creation time
    json = "%s"
