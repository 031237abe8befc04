"""
expression の Option / Result との相互変換。

expression はオプションの依存関係であり、パッケージ本体からは
このモジュールをインポートしない。
"""

from typing import TypeVar

from expression import Error, Nothing, Ok, Option, Result, Some

from .optional import OptionalValue

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


def to_option(optional: OptionalValue[T]) -> Option[T]:
    if optional.is_absent():
        return Nothing
    return Some(optional.get())


def from_option(option: Option[T]) -> OptionalValue[T]:
    if option.is_none():
        return OptionalValue[T].empty()
    return OptionalValue[T].of_value(option.value)


def ok_or(optional: OptionalValue[T], error: E) -> Result[T, E]:
    if optional.is_absent():
        return Error(error)
    return Ok(optional.get())
