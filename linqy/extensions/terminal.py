from __future__ import annotations
import typing
import logging
import numpy as np
import pandas as pd
from ..types import *
from ..errors import EmptySequenceError, NoMatchError

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)

# marks "nothing found" so a stored None is still a legitimate hit
_MISSING = object()


class _TerminalOperations(Generic[T]):
    # --- element lookup ---

    def _scan(self: 'Seq[T]', condition: Optional[Predicate[T]], from_end: bool) -> Any:
        """the first qualifying element in the requested direction, or _MISSING"""
        data = self._get_data()
        if not data: return _MISSING
        if condition is None: return data[-1] if from_end else data[0]
        for item in (reversed(data) if from_end else data):
            if condition(item): return item
        return _MISSING

    def _require(self: 'Seq[T]', condition: Optional[Predicate[T]], from_end: bool) -> T:
        found = self._scan(condition, from_end)
        if found is not _MISSING: return found
        if condition is None: raise EmptySequenceError()
        raise NoMatchError()

    def _or_default(self: 'Seq[T]', default: Any, condition: Optional[Predicate[T]], from_end: bool) -> Any:
        found = self._scan(condition, from_end)
        if found is _MISSING:
            logger.debug(f"{'last' if from_end else 'first'}_or_default: no element, returning default")
            return default
        return found

    def first(self: 'Seq[T]', condition: Optional[Predicate[T]] = None) -> T:
        """
        first element, or first element satisfying the condition.
        raises EmptySequenceError on an empty sequence without a condition,
        NoMatchError when a condition is given and nothing qualifies.
        """
        return self._require(condition, from_end=False)

    def first_or_default(self: 'Seq[T]', default: Optional[T] = None,
                         condition: Optional[Predicate[T]] = None) -> Optional[T]:
        """like first(), but returns default instead of raising"""
        return self._or_default(default, condition, from_end=False)

    def last(self: 'Seq[T]', condition: Optional[Predicate[T]] = None) -> T:
        """last element, or the last element satisfying the condition (scanning from the end)"""
        return self._require(condition, from_end=True)

    def last_or_default(self: 'Seq[T]', default: Optional[T] = None,
                        condition: Optional[Predicate[T]] = None) -> Optional[T]:
        """like last(), but returns default instead of raising"""
        return self._or_default(default, condition, from_end=True)

    # --- predicates and reductions ---

    def any(self: 'Seq[T]', condition: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._get_data()
        if condition is None: return len(data) > 0
        return any(condition(x) for x in data)

    def all(self: 'Seq[T]', condition: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(condition(x) for x in self._get_data())

    def count(self: 'Seq[T]', condition: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if condition is None: return len(self._get_data())
        return sum(1 for x in self._get_data() if condition(x))

    def sum(self: 'Seq[T]', project: Optional[Selector[T, Any]] = None, start: Any = 0) -> Any:
        """
        start + project(e0) + project(e1) + ... accumulated in index order.
        an empty sequence sums to start.
        """
        total = start
        for item in self._get_data():
            total = total + (project(item) if project is not None else item)
        return total

    # --- conversions ---

    def to_vector(self: 'Seq[T]') -> List[T]:
        """an independent list copy"""
        return list(self._get_data())

    to_list = to_vector

    def to_map(self: 'Seq[T]', key_selector: KeySelector[T, K],
               value_selector: Optional[Selector[T, V]] = None) -> Dict[K, Any]:
        """convert to dictionary; on duplicate keys the later element wins"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._get_data()}

    def to_array(self: 'Seq[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._get_data())

    def to_series(self: 'Seq[T]') -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._get_data())

    def to_df(self: 'Seq[T]') -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._get_data())
