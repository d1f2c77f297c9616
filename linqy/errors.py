class QueryError(ValueError):
    """base class for failures raised by the query operators themselves."""


class EmptySequenceError(QueryError):
    """first() or last() was asked for an element of an empty sequence."""

    def __init__(self, message: str = "sequence contains no elements"):
        super().__init__(message)


class NoMatchError(QueryError):
    """a predicated first() or last() found no qualifying element."""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)
