from .color import color_formatter
from .json import json_handler


__all__ = ("color_formatter", "json_handler")
