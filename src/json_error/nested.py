"""Exception type that carries its cause as a ``nested`` attribute.

``NestedError`` is the chained variant the codec restores on deserialization.
Its ``nested`` attribute is the standard ``__cause__`` link, so
``raise NestedError("outer") from exc`` and ``NestedError("outer", exc)``
build the same chain, and tracebacks print it the usual way.
"""

from typing import Any, Optional


class NestedError(Exception):
    """Exception wrapping an underlying cause.

    Attributes:
        message: Human-readable error message
        nested: The underlying cause, or None at the end of a chain

    Example:
        try:
            open(path)
        except OSError as exc:
            raise NestedError("Could not load settings", exc)
    """

    # Causes that are not exceptions (a restored plain record, say) cannot
    # live in __cause__
    _nested_value: Any = None

    def __init__(self, message: str = "", nested: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        if nested is not None:
            self.nested = nested

    @property
    def nested(self) -> Any:
        if self.__cause__ is not None:
            return self.__cause__
        return self._nested_value

    @nested.setter
    def nested(self, value: Any) -> None:
        if value is None or isinstance(value, BaseException):
            self.__cause__ = value
            self._nested_value = None
        else:
            self.__cause__ = None
            self._nested_value = value

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, nested={self.nested!r})"
