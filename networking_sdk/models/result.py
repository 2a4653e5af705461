"""Outcome of a callback-style call."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from networking_sdk.exceptions import NetworkError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a decoded value or the classified error of one call."""

    value: T | None = None
    error: NetworkError | None = None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: NetworkError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True when the call succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, or raise the carried error.

        Raises:
            NetworkError: The classified error of a failed call.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
