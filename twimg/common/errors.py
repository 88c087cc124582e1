"""
Validation error kinds and the result type returned by parsing and rendering.

Per-element failures are returned as values so a host can decide whether to
fail the whole render or degrade gracefully. Hosts that want an exception
call `Result.value_unwrap()`, which raises `ResponsiveImageError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

__all__ = [
    "ErrorKind",
    "RenderError",
    "ResponsiveImageError",
    "Result",
]

T = TypeVar("T")


class ErrorKind(Enum):
    """Kinds of per-element validation failure"""

    MALFORMED_ATTRIBUTE_NAME = "malformed_attribute_name"
    NON_NUMERIC_VALUE = "non_numeric_value"
    OUT_OF_RANGE_VALUE = "out_of_range_value"


@dataclass(frozen=True)
class RenderError:
    """A single validation failure tied to the offending attribute"""

    kind: ErrorKind
    attribute_name: str
    attribute_value: Optional[str]
    message: str

    def __str__(self) -> str:
        return f"{self.attribute_name}={self.attribute_value!r}: {self.message}"


class ResponsiveImageError(ValueError):
    """Raised when a host chooses to fail the render on a RenderError"""

    def __init__(self, error: RenderError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a RenderError, never both"""

    value: Optional[T] = None
    error: Optional[RenderError] = None

    @staticmethod
    def ok(value: T) -> "Result[T]":
        """Wrap a successful value"""
        return Result(value=value)

    @staticmethod
    def fail(error: RenderError) -> "Result[T]":
        """Wrap a failure"""
        return Result(error=error)

    def isOk(self) -> bool:
        """Check if this result carries a value"""
        return self.error is None

    def value_unwrap(self) -> T:
        """
        Return the value or raise the carried error

        Returns:
            The successful value

        Raises:
            ResponsiveImageError: If the result is a failure
        """
        if self.error is not None:
            raise ResponsiveImageError(self.error)
        return self.value  # type: ignore[return-value]
