"""
値の有無を明示するためのコンテナを提供するモジュール。

OptionalValueは「T型の値がひとつある」か「何もない」かのどちらかを表す。
Noneをそのまま受け渡す代わりに、取り出し・変換・代替値の供給を安全に行える。
"""

from dataclasses import dataclass
from typing import Callable, Generic, Iterator, TypeVar

from typing_extensions import override

from .errors import EmptyValueAccess, InvariantViolation

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True, repr=False)
class OptionalValue(Generic[T]):
    _value: T | None = None

    @classmethod
    def of_value(cls, value: T) -> "OptionalValue[T]":
        if value is None:
            raise InvariantViolation()
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> "OptionalValue[T]":
        return cls(value)

    @classmethod
    def empty(cls) -> "OptionalValue[T]":
        return cls(None)

    def is_present(self) -> bool:
        return self._value is not None

    def is_absent(self) -> bool:
        return self._value is None

    def get(self) -> T:
        """
        値を取り出す。

        空の場合はEmptyValueAccessを送出する。値があることが確定している
        場面以外では or_else / or_else_compute / if_present を使うこと。
        """
        if self._value is None:
            raise EmptyValueAccess()
        return self._value

    def or_else(self, fallback: T) -> T:
        """
        値があればその値を、なければfallbackを返す。

        fallbackは値の有無にかかわらず呼び出し側で評価される。生成コストが
        高い場合は or_else_compute を使うこと。
        """
        return self._value if self._value is not None else fallback

    def or_else_compute(self, supplier: Callable[[], T]) -> T:
        if self._value is not None:
            return self._value
        return supplier()

    def or_else_fail(
        self,
        error_supplier: Callable[[], BaseException] | None = None,
    ) -> T:
        if self._value is not None:
            return self._value
        if error_supplier is None:
            raise EmptyValueAccess()
        raise error_supplier()

    def or_else_optional(
        self,
        supplier: Callable[[], "OptionalValue[T]"],
    ) -> "OptionalValue[T]":
        if self._value is not None:
            return self
        return supplier()

    def map(self, fn: Callable[[T], U | None]) -> "OptionalValue[U]":
        if self._value is None:
            return OptionalValue[U](None)
        return OptionalValue[U](fn(self._value))

    def flat_map(self, fn: Callable[[T], "OptionalValue[U]"]) -> "OptionalValue[U]":
        if self._value is None:
            return OptionalValue[U](None)
        result = fn(self._value)
        if not isinstance(result, OptionalValue):
            raise TypeError(
                "flat_map function must return OptionalValue, "
                f"got {type(result).__name__}"
            )
        return result

    def filter(self, predicate: Callable[[T], bool]) -> "OptionalValue[T]":
        if self._value is None:
            return self
        return self if predicate(self._value) else OptionalValue[T](None)

    def if_present(self, action: Callable[[T], object]) -> None:
        if self._value is not None:
            action(self._value)

    def if_present_or_else(
        self,
        action: Callable[[T], object],
        absent_action: Callable[[], object],
    ) -> None:
        if self._value is not None:
            action(self._value)
        else:
            absent_action()

    def to_sequence(self) -> Iterator[T]:
        if self._value is not None:
            yield self._value

    def __iter__(self) -> Iterator[T]:
        return self.to_sequence()

    @override
    def __repr__(self) -> str:
        if self._value is None:
            return "OptionalValue.empty"
        return f"OptionalValue[{self._value!r}]"
