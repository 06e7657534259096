from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Literal, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """成功値を保持する Result"""

    value: T

    @property
    def success(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Err(Generic[E]):
    """失敗値（エラー）を保持する Result"""

    error: E

    @property
    def success(self) -> Literal[False]:
        return False


Result = Union[Ok[T], Err[E]]


def map_ok(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:
    """成功値のみを変換する"""
    if isinstance(result, Ok):
        return Ok(fn(result.value))
    return result


def map_err(result: Result[T, E], fn: Callable[[E], F]) -> Result[T, F]:
    """エラーのみを変換する"""
    if isinstance(result, Err):
        return Err(fn(result.error))
    return result


def unwrap(result: Result[T, E]) -> T:
    """成功値を取り出す。失敗の場合はエラーを送出する"""
    if isinstance(result, Ok):
        return result.value
    error = result.error
    if isinstance(error, BaseException):
        raise error
    raise ValueError(f"Called unwrap on an Err value: {error!r}")


def unwrap_or(result: Result[T, E], default: T) -> T:
    """成功値を取り出す。失敗の場合は default を返す"""
    if isinstance(result, Ok):
        return result.value
    return default
