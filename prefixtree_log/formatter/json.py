import json
import logging
import sys
from types import MappingProxyType
from typing import IO, Any, Dict, Optional, Union

from ..enum import DateFormat


class JSONLogFormatter(logging.Formatter):
    LEVELS = MappingProxyType({
        logging.CRITICAL: "crit",
        logging.ERROR: "error",
        logging.WARNING: "warn",
        logging.INFO: "info",
        logging.DEBUG: "debug",
        logging.NOTSET: None,
    })

    FIELD_MAPPING = MappingProxyType({
        "funcName": "code_func",
        "lineno": "code_line",
        "module": "code_module",
        "name": "identifier",
        "process": "pid",
        "threadName": "thread_name",
    })

    def format(self, record: logging.LogRecord) -> str:
        fields: Dict[str, Any] = {
            target: getattr(record, source, None)
            for source, target in self.FIELD_MAPPING.items()
        }

        payload: Dict[str, Any] = {
            "@fields": fields,
            "msg": record.getMessage(),
            "level": self.LEVELS.get(record.levelno),
        }

        if self.datefmt:
            payload["@timestamp"] = self.formatTime(record, self.datefmt)

        if record.exc_info:
            payload["stackTrace"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=repr, ensure_ascii=False)

    def formatTime(     # type: ignore
        self, record: logging.LogRecord, datefmt: Optional[str] = None,
    ) -> Union[float, str]:
        if datefmt == "%s":
            return record.created
        return super().formatTime(record, datefmt=datefmt)


def json_handler(
    stream: Optional[IO[str]] = None,
    date_format: Optional[str] = None,
    **_: Any
) -> logging.Handler:
    if date_format is None:
        date_format = DateFormat.json.value

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(JSONLogFormatter(datefmt=date_format))
    return handler
