import logging
from typing import (
    Any, Generic, Iterable, Mapping, Optional, Sequence, Tuple, Type,
    TypeVar, Union,
)

from .cursor import Cursor, GuardType, KeyCursor, ValueCursor
from .node import NOTHING, KeyType, RadixNode


log = logging.getLogger(__name__)

V = TypeVar("V", bound=Any)
ItemsType = Union[Mapping[Any, V], Iterable[Tuple[KeyType, V]]]


def check_key(key: Any) -> KeyType:
    # Keys are rebuilt from fragments with ``+`` during iteration
    if not isinstance(key, Sequence) or not hasattr(type(key), "__add__"):
        raise TypeError(
            f"Key must be a concatenable sequence, "
            f"not {type(key).__name__!r}",
        )
    return key


class Entry(Generic[V]):
    """
    Writable handle to a stored value returned by
    :meth:`PrefixMap.get_mut`. Assigning ``value`` replaces the stored
    value in place.
    """

    __slots__ = ("key", "_node")

    def __init__(self, key: KeyType, node: RadixNode[V]):
        self.key = key
        self._node = node

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} key={self.key!r} "
            f"value={self._node.value!r}>"
        )

    @property
    def value(self) -> V:
        return self._node.value

    @value.setter
    def value(self, value: V) -> None:
        self._node.value = value


class PrefixMap(Generic[V]):
    """
    Mapping of sequence keys to values stored in a radix tree

    >>> prefix_map = PrefixMap([("foo", 0), ("foobar", 1)])
    >>> prefix_map.get("foobar")
    1
    >>> prefix_map.get("fo") is None
    True
    >>> prefix_map.insert("foo", 2)
    0
    >>> list(prefix_map.items())
    [('foo', 2), ('foobar', 1)]
    """

    __slots__ = ("_root", "_length", "_version")

    NODE_CLASS: Type[RadixNode] = RadixNode

    _root: RadixNode[V]

    def __init__(self, items: Optional[ItemsType] = None):
        self._version = 0
        self._reset()

        if items is not None:
            self.update(items)

    @classmethod
    def from_iterable(cls, items: ItemsType) -> "PrefixMap[V]":
        return cls(items)

    def _reset(self) -> None:
        self._root = self.NODE_CLASS()
        self._length = 0

    def _guard(self) -> GuardType:
        version = self._version

        def check() -> None:
            if self._version != version:
                raise RuntimeError("PrefixMap changed during iteration")

        return check

    def _find(self, key: Any) -> Optional[RadixNode[V]]:
        return self._root.find(check_key(key))

    def insert(self, key: KeyType, value: V) -> Optional[V]:
        """
        Stores ``value`` under ``key``. Returns the replaced value
        or ``None`` when the key is new.
        """
        check_key(key)

        if not key:
            # The root fragment follows the type of the keys
            self._root.fragment = key[:0]

        previous = self._root.insert(key, value)

        if previous is NOTHING:
            self._length += 1
            self._version += 1
            return None

        return previous

    def get(self, key: KeyType, default: Any = None) -> Optional[V]:
        node = self._find(key)
        if node is None:
            return default
        return node.value

    def get_mut(self, key: KeyType) -> Optional[Entry[V]]:
        node = self._root.find_mut(check_key(key))
        if node is None:
            return None
        return Entry(key, node)

    def contains_key(self, key: KeyType) -> bool:
        return self._find(key) is not None

    def setdefault(self, key: KeyType, default: Any = None) -> V:
        node = self._find(key)
        if node is not None:
            return node.value

        self.insert(key, default)
        return default

    def update(self, items: ItemsType) -> None:
        if isinstance(items, (Mapping, PrefixMap)):
            items = items.items()

        for key, value in items:
            self.insert(key, value)

    def clear(self) -> None:
        log.debug("Clearing %r entries", self._length)
        self._reset()
        self._version += 1

    def is_empty(self) -> bool:
        return self._length == 0

    def iter(self) -> Cursor[V]:
        return Cursor(self._root, self._length, self._guard())

    def items(self) -> Cursor[V]:
        return self.iter()

    def keys(self) -> KeyCursor[V]:
        return KeyCursor(self._root, self._length, self._guard())

    def values(self) -> ValueCursor[V]:
        return ValueCursor(self._root, self._length, self._guard())

    def node_count(self) -> int:
        """ Number of tree nodes including the root """
        return sum(1 for _ in self._root.walk())

    def depth(self) -> int:
        """ Number of edges on the longest root-to-leaf path """
        return max(depth for depth, _ in self._root.walk())

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> KeyCursor[V]:
        return self.keys()

    def __contains__(self, key: Any) -> bool:
        return self.contains_key(key)

    def __getitem__(self, key: KeyType) -> V:
        node = self._find(key)
        if node is None:
            raise KeyError(key)
        return node.value

    def __setitem__(self, key: KeyType, value: V) -> None:
        self.insert(key, value)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, PrefixMap):
            other = other.items()
            expected = len(other)
        elif isinstance(other, Mapping):
            expected = len(other)
            other = other.items()
        else:
            return NotImplemented

        if expected != self._length:
            return False

        for key, value in other:
            if not isinstance(key, Sequence):
                return False

            node = self._root.find(key)
            if node is None or node.value != value:
                return False
        return True

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{key!r}: {value!r}" for key, value in self.items()
        )
        return f"{self.__class__.__name__}({{{entries}}})"
