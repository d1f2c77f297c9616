r"""
'    .__  .__
'    |  | |__| ____   ______.__.
'    |  | |  |/    \ / ____<   |  |
'    |  |_|  |   |  < <_|  |\___  |
'    |____/__|___|  /\__   |/ ____|
'                 \/    |__|\/
"""

# expose the main classes
from .sequence import Seq, ISequence

# expose the adapters
from .factories import (
    from_,
    from_iterable,
    from_buffer,
    from_seq,
    empty,
    from_range,
    repeat,
    Q
)

# expose supporting types and sort-order tokens
from .types import Pair, ascending, descending

# expose error types
from .errors import QueryError, EmptySequenceError, NoMatchError

# define what `import *` does
__all__ = [
    "Seq",
    "ISequence",
    "from_",
    "from_iterable",
    "from_buffer",
    "from_seq",
    "empty",
    "from_range",
    "repeat",
    "Q",
    "Pair",
    "ascending",
    "descending",
    "QueryError",
    "EmptySequenceError",
    "NoMatchError"
]
