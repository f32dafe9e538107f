import logging
import operator
from functools import reduce
from typing import (
    Any, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar,
)


log = logging.getLogger(__name__)

KeyType = Sequence[Any]
V = TypeVar("V", bound=Any)

# Marks an empty value slot, ``None`` is a legal value
NOTHING: Any = object()


def common_prefix(left: KeyType, right: KeyType) -> int:
    """
    Returns the length of the longest leading run shared by two sequences

    >>> common_prefix("foobar", "fo0bar")
    2
    >>> common_prefix((1, 2, 3), ())
    0
    """
    length = 0
    for left_item, right_item in zip(left, right):
        if left_item != right_item:
            break
        length += 1
    return length


def concat(fragments: Sequence[KeyType]) -> KeyType:
    """
    Builds a new key from the fragments on a root-to-node path.
    The result never shares memory with the fragments.
    """
    parts = [fragment for fragment in fragments if fragment]
    if not parts:
        return fragments[0][:0]

    head = parts[0]
    if isinstance(head, (str, bytes, bytearray)):
        return head[:0].join(parts)
    return reduce(operator.add, parts, head[:0])


class RadixNode(Generic[V]):
    """
    Compressed trie node. ``fragment`` is the label of the edge
    from the parent, ``children`` never contains two nodes whose
    fragments start with the same symbol.
    """

    __slots__ = ("fragment", "value", "children")

    fragment: KeyType
    value: Any
    children: List["RadixNode[V]"]

    def __init__(self, fragment: KeyType = (), value: Any = NOTHING):
        self.fragment = fragment
        self.value = value
        self.children = []

    def __repr__(self) -> str:
        value = "-" if self.value is NOTHING else repr(self.value)
        return (
            f"<{self.__class__.__name__} fragment={self.fragment!r} "
            f"value={value} children={len(self.children)}>"
        )

    @property
    def has_value(self) -> bool:
        return self.value is not NOTHING

    def common_prefix(self, key: KeyType) -> int:
        return common_prefix(self.fragment, key)

    def child_for(self, key: KeyType) -> Optional["RadixNode[V]"]:
        """ Returns the only child sharing a leading symbol with ``key`` """
        if not key:
            return None

        head = key[0]
        for child in self.children:
            if child.fragment[0] == head:
                return child
        return None

    def find(self, key: KeyType) -> Optional["RadixNode[V]"]:
        node: Optional[RadixNode[V]] = self

        while node is not None:
            prefix = node.common_prefix(key)

            if prefix < len(node.fragment):
                return None

            if prefix == len(key):
                return node if node.has_value else None

            key = key[prefix:]
            node = node.child_for(key)

        return None

    def find_mut(self, key: KeyType) -> Optional["RadixNode[V]"]:
        """
        Same lookup as :meth:`find`. Callers may rebind ``value`` on
        the returned node, the fragment and children must stay untouched.
        """
        return self.find(key)

    def split(self, prefix: int) -> "RadixNode[V]":
        """
        Moves ``fragment[prefix:]``, the value and the children
        into a new single child

        before:

            [foo=0] -> [bar=1], [d=2]

        after ``split(2)``:

            [fo] -> [o=0] -> [bar=1], [d=2]

        """
        log.debug("Splitting fragment %r at %d", self.fragment, prefix)

        child: RadixNode[V] = self.__class__(
            self.fragment[prefix:], self.value,
        )
        child.children = self.children

        self.fragment = self.fragment[:prefix]
        self.value = NOTHING
        self.children = [child]
        return child

    def insert(self, key: KeyType, value: V) -> Any:
        """
        Stores ``value`` under ``key`` relative to this node.
        Returns the replaced value or :data:`NOTHING`.
        """
        node: RadixNode[V] = self

        while True:
            prefix = node.common_prefix(key)

            if prefix < len(node.fragment):
                node.split(prefix)

            if prefix == len(key):
                previous, node.value = node.value, value
                return previous

            key = key[prefix:]
            child = node.child_for(key)

            if child is None:
                log.debug("Appending leaf %r", key)
                node.children.append(self.__class__(key[:], value))
                return NOTHING

            node = child

    def walk(self) -> Iterator[Tuple[int, "RadixNode[V]"]]:
        """ Yields ``(depth, node)`` pairs in pre-order """
        stack = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend(
                (depth + 1, child) for child in reversed(node.children)
            )
