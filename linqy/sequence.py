from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operator mixins ---
from .extensions.core import _CoreOperations
from .extensions.join import _JoinOperations
from .extensions.grouping import _GroupingOperations
from .extensions.terminal import _TerminalOperations

# --- abstract base class ---

class ISequence(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying storage as a list"""
        pass

# --- owning storage ---

class _BaseSeq(ISequence[T]):
    def __init__(self, data: Optional[Iterable[T]] = None):
        """copy the given elements (any iterable) into owned storage"""
        self._data: List[T] = list(data) if data is not None else []

    @classmethod
    def _adopt(cls, data: List[T]) -> 'Seq[T]':
        """wrap a freshly built list without copying it again"""
        instance = cls.__new__(cls)
        instance._data = data
        return instance

    def _get_data(self) -> List[T]:
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._adopt(self._data[index])
        return self._data[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _BaseSeq): return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

# --- main sequence class ---

class Seq(
    _BaseSeq[T],
    _CoreOperations[T],
    _JoinOperations[T],
    _GroupingOperations[T],
    _TerminalOperations[T]
):
    """an ordered, finite, owning sequence with eager linq-style operators."""

    @classmethod
    def with_size(cls, count: int, default: Optional[T] = None,
                  factory: Optional[Callable[[], T]] = None) -> 'Seq[T]':
        """
        a sequence of `count` elements, each equal to default,
        or a fresh factory() per slot when a factory is given.
        """
        if count < 0: raise ValueError("count must be non-negative")
        if factory is not None:
            return cls._adopt([factory() for _ in range(count)])
        return cls._adopt([default] * count)
