from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
L = TypeVar('L')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
OrderPredicate = Callable[[T, T], bool]
JoinPredicate = Callable[[T, U], bool]
Merger = Callable[[T, U], V]


class Pair(Generic[L, R]):
    """one matched (left, right) pair produced by a pair join"""

    __slots__ = ('left', 'right')

    def __init__(self, left: L, right: R):
        self.left = left
        self.right = right

    def __iter__(self) -> Iterator[Any]:
        # allows `left, right = pair`
        yield self.left
        yield self.right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair): return NotImplemented
        return self.left == other.left and self.right == other.right

    __hash__ = None

    def __repr__(self) -> str:
        return f"Pair(left={self.left!r}, right={self.right!r})"


class _SortOrder:
    """
    a stateless binary predicate naming a standard comparison.
    `reverse` tells orderby it can hand the work to list.sort directly.
    """

    __slots__ = ('_name', 'reverse')

    def __init__(self, name: str, reverse: bool):
        self._name = name
        self.reverse = reverse

    def __call__(self, left: Any, right: Any) -> bool:
        return left > right if self.reverse else left < right

    def __repr__(self) -> str:
        return self._name


ascending = _SortOrder('ascending', reverse=False)
descending = _SortOrder('descending', reverse=True)
