from __future__ import annotations
import typing
import logging
from functools import cmp_to_key
from ..types import *
from ..types import _SortOrder

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)


def _compare_with(pred: OrderPredicate[Any]) -> Callable[[Any, Any], int]:
    """turn a 'left precedes right' predicate into a three-way comparison"""
    def compare(left, right) -> int:
        if pred(left, right): return -1
        if pred(right, left): return 1
        return 0
    return compare


class _CoreOperations(Generic[T]):
    def select(self: 'Seq[T]', selector: Selector[T, U]) -> 'Seq[U]':
        """project each element to a new form, keeping positions"""
        from ..sequence import Seq
        data = self._get_data()
        result: List[Any] = [None] * len(data)
        for index, item in enumerate(data):
            result[index] = selector(item)
        return Seq._adopt(result)

    def where(self: 'Seq[T]', condition: Predicate[T]) -> 'Seq[T]':
        """keep the elements satisfying the condition, in their original order"""
        from ..sequence import Seq
        data = self._get_data()
        # first pass decides, second pass copies survivors into an exact-size result
        keep = [index for index, item in enumerate(data) if condition(item)]
        return Seq._adopt([data[index] for index in keep])

    def orderby(self: 'Seq[T]', pred: OrderPredicate[Any] = ascending,
                key: Optional[KeySelector[T, K]] = None) -> 'Seq[T]':
        """
        sort this sequence in place and return it for chaining.
        pred is `ascending`, `descending` or any strict weak order meaning
        "left precedes right"; when key is given, pred compares key(item).
        the underlying sort is stable, so equal elements keep their relative order.
        if pred or key raises, the error propagates and the sequence may be
        left partially reordered.
        """
        data = self._get_data()
        if isinstance(pred, _SortOrder):
            logger.debug(f"orderby: native sort of {len(data)} items ({pred!r})")
            data.sort(key=key, reverse=pred.reverse)
            return self

        logger.debug(f"orderby: predicate sort of {len(data)} items")
        wrapper = cmp_to_key(_compare_with(pred))
        if key is None:
            data.sort(key=wrapper)
        else:
            data.sort(key=lambda item: wrapper(key(item)))
        return self

    def select_many(self: 'Seq[T]', selector: Selector[T, Iterable[U]]) -> 'Seq[U]':
        """project and flatten sequences"""
        from ..sequence import Seq
        return Seq._adopt([item for item_group in map(selector, self._get_data()) for item in item_group])

    def reverse(self: 'Seq[T]') -> 'Seq[T]':
        """a new sequence with the elements in reverse order"""
        from ..sequence import Seq
        return Seq._adopt(self._get_data()[::-1])
