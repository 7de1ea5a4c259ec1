# ABOUTME: Success/Failure result container used for token status queries
# ABOUTME: Tagged union with map/and_/or_/bind combinators and structural pattern matching support

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class ResultStatus(str, Enum):
    """
    Result status enumeration.

    This enum names the two branches of a `Result`.
    """

    SUCCESS = "success"
    FAILURE = "failure"


class Result(ABC, Generic[T, E]):
    """
    A value that is either a `Success` carrying an outcome or a `Failure`
    carrying an error.

    Results are inspected explicitly instead of raising. Both branches are
    immutable. Combinators never mutate; they return either `self` or a new
    result.

    `and_` and `or_` follow left-operand precedence: `a.and_(b)` returns `a`
    when `a` is a failure (even if `b` is a failure too), otherwise `b`.

    Example:
        >>> match token.usable():
        ...     case Success(token):
        ...         use(token)
        ...     case Failure(error):
        ...         log(error.message)
    """

    __slots__ = ()

    @property
    @abstractmethod
    def status(self) -> ResultStatus:
        """The branch this result is on."""
        ...

    def is_success(self) -> bool:
        """
        Check if this result is a success.

        Returns:
            bool: True if this is a `Success`, False otherwise.
        """
        return self.status == ResultStatus.SUCCESS

    def is_failure(self) -> bool:
        """
        Check if this result is a failure.

        Returns:
            bool: True if this is a `Failure`, False otherwise.
        """
        return self.status == ResultStatus.FAILURE

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Transform the success value, leaving a failure untouched."""
        ...

    @abstractmethod
    def map_error(self, fn: Callable[[E], F]) -> Result[T, F]:
        """Transform the failure error, leaving a success untouched."""
        ...

    @abstractmethod
    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a result-returning function onto a success."""
        ...

    @abstractmethod
    def and_(self, other: Result[U, E]) -> Result[U, E] | Result[T, E]:
        """Return `other` if this is a success, else this failure."""
        ...

    @abstractmethod
    def or_(self, other: Result[T, F]) -> Result[T, F] | Result[T, E]:
        """Return this success, else `other`."""
        ...

    @abstractmethod
    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        """Fold both branches into a single value."""
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Return the success value.

        Raises:
            The carried error if it is an exception, otherwise `ValueError`,
            when called on a failure.
        """
        ...

    @abstractmethod
    def unwrap_error(self) -> E:
        """
        Return the failure error.

        Raises:
            ValueError: When called on a success.
        """
        ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        """Return the success value, or `default` on a failure."""
        ...


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """Success branch of a `Result`."""

    value: T

    @property
    def status(self) -> ResultStatus:
        return ResultStatus.SUCCESS

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return Success(fn(self.value))

    def map_error(self, fn: Callable[[E], F]) -> Result[T, F]:
        return self  # type: ignore[return-value]

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.value)

    def and_(self, other: Result[U, E]) -> Result[U, E]:
        return other

    def or_(self, other: Result[T, F]) -> Result[T, E]:
        return self

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        return on_success(self.value)

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        raise ValueError("Called unwrap_error() on a Success")

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """Failure branch of a `Result`."""

    error: E

    @property
    def status(self) -> ResultStatus:
        return ResultStatus.FAILURE

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def map_error(self, fn: Callable[[E], F]) -> Result[T, F]:
        return Failure(fn(self.error))

    def bind(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return self  # type: ignore[return-value]

    def and_(self, other: Result[U, E]) -> Result[T, E]:
        return self

    def or_(self, other: Result[T, F]) -> Result[T, F]:
        return other

    def match(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        return on_failure(self.error)

    def unwrap(self) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Called unwrap() on a Failure: {self.error!r}")

    def unwrap_error(self) -> E:
        return self.error

    def unwrap_or(self, default: Any) -> Any:
        return default

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"
