from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from typing import (
    Any,
    Final,
    Generic,
    Literal,
    NoReturn,
    TypeIs,
    TypeVar,
)

################################################################
# Rust-flavoured Result type. Ok/Err follow the shape of
# https://github.com/rustedpy/result, trimmed to what the stores
# use, with succeed/fail/handle_result/chain on top.
################################################################

T = TypeVar("T", covariant=True)  # Success type  # noqa: PLC0105
E = TypeVar("E", covariant=True)  # Error type  # noqa: PLC0105
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")


class Ok(Generic[T]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __match_args__ = ("ok_value",)
    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        """Return the contained value."""
        return self._value

    def err(self) -> None:
        """Return `None`, there is no error on an `Ok`."""
        return None

    @property
    def ok_value(self) -> T:
        """
        The contained value, used by structural pattern matching:

        ```python
        match result:
            case Ok(value):
                ...
            case Err(failure):
                ...
        ```
        """
        return self._value

    def expect(self, _: str) -> T:
        return self._value

    def expect_err(self, message: str) -> NoReturn:
        raise UnwrapError(self, message)

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, "Called `Result.unwrap_err()` on an `Ok` value")

    def unwrap_or(self, _: object) -> T:
        return self._value

    def unwrap_or_else(self, _: object) -> T:
        return self._value

    def map(self, op: Callable[[T], U]) -> Ok[U]:
        """
        Map `Result[T, E]` to `Result[U, E]` by applying `op` to the contained value.

        ```python
        assert Ok(2).map(lambda n: n * 2) == Ok(4)
        assert Err("error").map(lambda n: n * 2) == Err("error")
        ```
        """
        return Ok(op(self._value))

    def map_err(self, _: object) -> Ok[T]:
        return self

    def and_then(self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Call `op` with the contained value; `Err` short-circuits and skips `op`.

        ```python
        def positive(x: int) -> Result[int, str]:
            return Ok(x) if x > 0 else Err("negative number")

        assert Ok(5).and_then(positive) == Ok(5)
        assert Ok(-5).and_then(positive) == Err("negative number")
        ```
        """
        return op(self._value)

    def or_else(self, _: object) -> Ok[T]:
        return self

    def inspect(self, op: Callable[[T], Any]) -> Result[T, E]:
        """
        Calls a function with the contained value if `Ok`. Returns the original result.
        """
        op(self._value)
        return self

    def inspect_err(self, _: Callable[[E], Any]) -> Result[T, E]:
        return self


class Err(Generic[E]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __match_args__ = ("err_value",)
    __slots__ = ("_value",)

    def __init__(self, value: E) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Err({self._value!r})"

    def __eq__(self, other: Any) -> bool:  # noqa: ANN401
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: Any) -> bool:  # noqa: ANN401
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        return None

    def err(self) -> E:
        """Return the contained error."""
        return self._value

    @property
    def err_value(self) -> E:
        return self._value

    def expect(self, message: str) -> NoReturn:
        exc = UnwrapError(self, f"{message}: {self._value!r}")
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def expect_err(self, _: str) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        exc = UnwrapError(self, f"Called `Result.unwrap()` on an `Err` value: {self._value!r}")
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_else(self, op: Callable[[E], U]) -> U:
        return op(self._value)

    def map(self, _: object) -> Err[E]:
        return self

    def map_err(self, op: Callable[[E], F]) -> Err[F]:
        """
        Map `Result[T, E]` to `Result[T, F]` by applying `op` to the contained error.

        ```python
        assert Err("not found").map_err(lambda e: f"Error: {e}") == Err("Error: not found")
        ```
        """
        return Err(op(self._value))

    def and_then(self, _: object) -> Err[E]:
        return self

    def or_else(self, op: Callable[[E], Result[U, F]]) -> Result[U, F]:
        """
        Call `op` with the contained error, typically to recover or re-label it.

        ```python
        def fallback(e: str) -> Result[int, str]:
            return Ok(0) if e == "empty" else Err("invalid")

        assert Err("empty").or_else(fallback) == Ok(0)
        assert Err("error").or_else(fallback) == Err("invalid")
        ```
        """
        return op(self._value)

    def inspect(self, _: Callable[[T], Any]) -> Result[T, E]:
        return self

    def inspect_err(self, op: Callable[[E], Any]) -> Result[T, E]:
        """
        Calls a function with the contained value if `Err`. Returns the original result.
        """
        op(self._value)
        return self


"""
A simple `Result` type inspired by Rust.
"""
type Result[T, E] = Ok[T] | Err[E]

"""
A type to use in `isinstance` checks.
"""
OkErr: Final = (Ok, Err)


class UnwrapError(Exception):
    """
    Exception raised from ``.unwrap_<...>`` and ``.expect_<...>`` calls.

    The original ``Result`` can be accessed via the ``.result`` attribute.
    """

    _result: Result[object, object]

    def __init__(self, result: Result[object, object], message: str) -> None:
        self._result = result
        super().__init__(message)

    @property
    def result(self) -> Result[Any, Any]:
        return self._result


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    """A type guard to check if a result is an Ok"""
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    """A type guard to check if a result is an Err"""
    return result.is_err()


def succeed(value: U = None) -> Ok[U]:
    return Ok(value)


def fail(failure: F) -> Err[F]:
    return Err(failure)


def handle_result(
    result: Result[T, E],
    on_success: Callable[[T], R],
    on_failure: Callable[[E], R],
) -> R:
    """Dispatch to the handler matching the variant and return its output."""
    match result:
        case Ok(value):
            return on_success(value)
        case Err(failure):
            return on_failure(failure)


type _Stage = Callable[[Any], Result[Any, Any] | Awaitable[Result[Any, Any]]]


class Chain:
    """
    An awaitable pipeline over a `Result`.

    `then` stages receive the success value, `catch` stages receive the failure.
    Each stage returns a `Result` (or an awaitable of one). The first failure
    skips every later `then` stage until a `catch` handles it:

    ```python
    result = await (
        chain(await store.read(key))
        .then(lambda text: parse(text))
        .catch(lambda failure: relabel(failure))
        .result()
    )
    ```
    """

    __slots__ = ("_initial", "_stages")

    def __init__(self, initial: Result[Any, Any], stages: tuple[tuple[bool, _Stage], ...] = ()) -> None:
        self._initial = initial
        self._stages = stages

    def then(self, op: _Stage) -> Chain:
        return Chain(self._initial, (*self._stages, (True, op)))

    def catch(self, op: _Stage) -> Chain:
        return Chain(self._initial, (*self._stages, (False, op)))

    async def result(self) -> Result[Any, Any]:
        current = self._initial
        for on_success, op in self._stages:
            if current.is_ok() != on_success:
                continue
            outcome = op(current.ok_value if on_success else current.err_value)
            if inspect.isawaitable(outcome):
                outcome = await outcome
            current = outcome
        return current


def chain(result: Result[Any, Any]) -> Chain:
    return Chain(result)
