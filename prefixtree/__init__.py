from .cursor import Cursor, KeyCursor, ValueCursor
from .map import Entry, PrefixMap
from .node import NOTHING, RadixNode, common_prefix
from .set import PrefixSet
from .version import __version__, version_info


__all__ = (
    "Cursor",
    "Entry",
    "KeyCursor",
    "NOTHING",
    "PrefixMap",
    "PrefixSet",
    "RadixNode",
    "ValueCursor",
    "__version__",
    "common_prefix",
    "version_info",
)
