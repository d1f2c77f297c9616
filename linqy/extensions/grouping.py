from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Seq

class _GroupingOperations(Generic[T]):
    def group_by(self: 'Seq[T]', key_selector: KeySelector[T, K]) -> Dict[K, 'Seq[T]']:
        """group elements by a key; keys in first-seen order, groups in source order"""
        from ..sequence import Seq
        groups = defaultdict(list)
        for item in self._get_data():
            groups[key_selector(item)].append(item)
        return {key: Seq._adopt(items) for key, items in groups.items()}

    def partition(self: 'Seq[T]', condition: Predicate[T]) -> Tuple['Seq[T]', 'Seq[T]']:
        """split into (matching, non-matching), both in source order"""
        from ..sequence import Seq
        true_items, false_items = [], []
        for item in self._get_data():
            (true_items if condition(item) else false_items).append(item)
        return Seq._adopt(true_items), Seq._adopt(false_items)
