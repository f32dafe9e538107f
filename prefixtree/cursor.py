from typing import (
    Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar,
)

from .node import KeyType, RadixNode, concat


V = TypeVar("V", bound=Any)
Frame = Tuple[Iterator[RadixNode], KeyType]
GuardType = Callable[[], None]


class Cursor(Generic[V]):
    """
    Depth-first walk over a subtree yielding ``(key, value)`` pairs.

    The stack mirrors the path from the subtree root to the current
    node, so the full key is the concatenation of the stacked fragments.
    The subtree root's own value goes first, then children in storage
    order. ``guard`` is called before every step and may raise to
    interrupt the walk.
    """

    __slots__ = ("_stack", "_pending", "_remaining", "_guard")

    def __init__(
        self, root: RadixNode[V], length: Optional[int] = None,
        guard: Optional[GuardType] = None,
    ):
        if length is None:
            length = sum(1 for _, node in root.walk() if node.has_value)

        self._stack: List[Frame] = [(iter(root.children), root.fragment)]
        self._pending: Optional[RadixNode[V]] = (
            root if root.has_value else None
        )
        self._remaining = length
        self._guard = guard

    def __iter__(self) -> "Cursor[V]":
        return self

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining

    def _key(self) -> KeyType:
        return concat([fragment for _, fragment in self._stack])

    def _advance(self) -> RadixNode[V]:
        if not self._stack:
            raise StopIteration

        if self._guard is not None:
            self._guard()

        if self._pending is not None:
            node, self._pending = self._pending, None
            self._remaining -= 1
            return node

        while self._stack:
            children, _ = self._stack[-1]
            child = next(children, None)

            if child is None:
                self._stack.pop()
                continue

            self._stack.append((iter(child.children), child.fragment))

            if child.has_value:
                self._remaining -= 1
                return child

        self._remaining = 0
        raise StopIteration

    def __next__(self) -> Tuple[KeyType, V]:
        node = self._advance()
        return self._key(), node.value


class KeyCursor(Cursor[V]):
    __slots__ = ()

    def __next__(self) -> KeyType:     # type: ignore
        self._advance()
        return self._key()


class ValueCursor(Cursor[V]):
    __slots__ = ()

    def __next__(self) -> V:     # type: ignore
        return self._advance().value
