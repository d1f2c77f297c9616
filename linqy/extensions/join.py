from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

logger = logging.getLogger(__name__)


class _JoinOperations(Generic[T]):
    def merge_join(self: 'Seq[T]', other: Iterable[U], merge: Merger[T, U, V],
                   on: JoinPredicate[T, U]) -> 'Seq[V]':
        """
        nested-loop join that builds merge(left, right) for every pair where on(left, right) holds.
        output is left-major: all matches of self[0] (in other's order), then self[1], ...
        """
        from ..sequence import Seq
        left_data = self._get_data()
        # other may be a one-shot iterable, so it is materialized once up front
        right_data = list(other)
        logger.debug(f"join: {len(left_data)} x {len(right_data)} candidate pairs")
        merged = []
        for left in left_data:
            for right in right_data:
                if on(left, right):
                    merged.append(merge(left, right))
        return Seq._adopt(merged)

    def pair_join(self: 'Seq[T]', other: Iterable[U], on: JoinPredicate[T, U]) -> 'Seq[Pair[T, U]]':
        """nested-loop join keeping both sides of each matching pair as a Pair"""
        return self.merge_join(other, Pair, on)

    def join(self: 'Seq[T]', other: Iterable[U], *args: Callable[..., Any],
             merge: Optional[Merger[T, U, V]] = None) -> 'Seq[Any]':
        """
        join(other, on)          -> pair join
        join(other, merge, on)   -> merge join
        join(other, on, merge=m) -> merge join
        """
        if merge is not None:
            if len(args) != 1: raise TypeError("join with merge= takes exactly one 'on' predicate")
            return self.merge_join(other, merge, args[0])
        if len(args) == 1: return self.pair_join(other, args[0])
        if len(args) == 2: return self.merge_join(other, args[0], args[1])
        raise TypeError(f"join expects (other, on) or (other, merge, on), got {len(args)} callables")
