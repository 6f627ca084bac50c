"""
Success/Failure result values.

Every fallible path operation returns a Result. Chained operations use
flat_map, which skips the remaining steps once a Failure has been produced.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class Result(ABC, Generic[T]):
    """Outcome of an operation that may fail."""

    @abstractmethod
    def is_success(self) -> bool:
        pass

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def get(self) -> T:
        """
        Unwrap the value.

        Raises:
            The stored exception if this is a Failure
        """
        pass

    @abstractmethod
    def get_or_else(self, default: U) -> Any:
        pass

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        pass

    @abstractmethod
    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        pass

    @property
    @abstractmethod
    def error(self) -> Optional[Exception]:
        pass


@dataclass(frozen=True)
class Success(Result[T]):
    """A successful result holding a value."""
    value: T

    def is_success(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def get_or_else(self, default: U) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        return Success(fn(self.value))

    def flat_map(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return fn(self.value)

    @property
    def error(self) -> Optional[Exception]:
        return None


@dataclass(frozen=True)
class Failure(Result[T]):
    """A failed result holding the exception that describes the failure."""
    exception: Exception

    def is_success(self) -> bool:
        return False

    def get(self) -> T:
        raise self.exception

    def get_or_else(self, default: U) -> U:
        return default

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        return self

    def flat_map(self, fn: Callable[[T], Result[U]]) -> Result[U]:
        return self

    @property
    def error(self) -> Optional[Exception]:
        return self.exception
