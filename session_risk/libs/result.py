"""
Result type shared by use cases.

Use cases never raise for expected business failures; they return
``Return.ok(value)`` or ``Return.err(Error(code, message))`` and the API layer
maps error codes to HTTP responses.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Error:
    """Business error with a stable machine-readable code"""

    code: str
    message: str


class Result(Generic[T]):
    """Either a value or an Error, never both"""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    @property
    def value(self) -> T:
        if self._error is not None:
            raise ValueError(f"Result holds error {self._error.code}, not a value")
        return self._value

    @property
    def error(self) -> Optional[Error]:
        return self._error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def __repr__(self) -> str:
        if self.is_err():
            return f"Result(error={self._error!r})"
        return f"Result(value={self._value!r})"


class Return:
    """Constructors for Result"""

    @staticmethod
    def ok(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
