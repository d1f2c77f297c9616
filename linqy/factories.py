import typing
import logging
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Seq

logger = logging.getLogger(__name__)


def from_iterable(data: Iterable[T]) -> 'Seq[T]':
    """copy the elements of any container or iterable, in order"""
    from .sequence import Seq
    return Seq(data)

def from_buffer(buffer: Sequence[T], count: int) -> 'Seq[T]':
    """copy buffer[0:count] (list, tuple, array.array, memoryview, numpy array, ...)"""
    from .sequence import Seq
    if count < 0: raise ValueError("count must be non-negative")
    logger.debug(f"from_buffer: copying {count} items from {type(buffer).__name__}")
    return Seq._adopt([buffer[index] for index in range(count)])

def from_seq(seq: 'Seq[T]') -> 'Seq[T]':
    """an independent copy of an existing sequence"""
    from .sequence import Seq
    return Seq._adopt(list(seq._get_data()))

def from_(source: Union[Iterable[T], Sequence[T]], count: Optional[int] = None) -> 'Seq[T]':
    """
    lift a data source into a sequence.

    from_(seq)            -> copy of an existing Seq
    from_(container)      -> elements of any iterable, in order
    from_(buffer, count)  -> the first `count` items of an indexable buffer
    """
    from .sequence import Seq
    if count is not None: return from_buffer(source, count)
    if isinstance(source, Seq): return from_seq(source)
    return from_iterable(source)

def empty() -> 'Seq[Any]':
    """create empty sequence"""
    from .sequence import Seq
    return Seq()

def from_range(start: int, count: int) -> 'Seq[int]':
    """create sequence of `count` consecutive integers"""
    from .sequence import Seq
    if count < 0: raise ValueError("count must be non-negative")
    return Seq(range(start, start + count))

def repeat(item: T, count: int) -> 'Seq[T]':
    """create sequence with repeated item"""
    from .sequence import Seq
    return Seq.with_size(count, item)

# --- aliases ---
Q = from_
