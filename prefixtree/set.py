from typing import Any, Iterable, Optional

from .cursor import KeyCursor
from .map import PrefixMap
from .node import KeyType


class PrefixSet:
    """
    A set of sequences implemented as a :class:`PrefixMap`
    where every value is ``None``

    >>> prefix_set = PrefixSet()
    >>> prefix_set.insert("1")
    True
    >>> prefix_set.insert("1")
    False
    >>> prefix_set.contains("1"), prefix_set.contains("2")
    (True, False)
    """

    __slots__ = ("_map",)

    def __init__(self, keys: Optional[Iterable[KeyType]] = None):
        self._map: PrefixMap[None] = PrefixMap()

        if keys is not None:
            self.update(keys)

    @classmethod
    def from_iterable(cls, keys: Iterable[KeyType]) -> "PrefixSet":
        return cls(keys)

    def insert(self, key: KeyType) -> bool:
        """ Returns ``True`` when the key was not in the set yet """
        before = len(self._map)
        self._map.insert(key, None)
        return len(self._map) != before

    def add(self, key: KeyType) -> None:
        self.insert(key)

    def update(self, keys: Iterable[KeyType]) -> None:
        for key in keys:
            self.insert(key)

    def contains(self, key: KeyType) -> bool:
        return self._map.contains_key(key)

    def clear(self) -> None:
        self._map.clear()

    def is_empty(self) -> bool:
        return self._map.is_empty()

    def iter(self) -> KeyCursor[None]:
        return self._map.keys()

    def node_count(self) -> int:
        return self._map.node_count()

    def depth(self) -> int:
        return self._map.depth()

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> KeyCursor[None]:
        return self.iter()

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, PrefixSet):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        keys = ", ".join(repr(key) for key in self)
        return f"{self.__class__.__name__}({{{keys}}})"
