from .optional import OptionalValue


class User:
    def __init__(self, age: int, name: str, email: str | None = None):
        self.age = age
        self.name = name
        self._email = email

    @classmethod
    def default(cls) -> "User":
        return cls(age=23, name="zccc")

    @property
    def email(self) -> OptionalValue[str]:
        return OptionalValue.of_nullable(self._email)

    @email.setter
    def email(self, value: str | None) -> None:
        self._email = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return (self.age, self.name, self._email) == (
            other.age,
            other.name,
            other._email,
        )

    # Mutable fields take part in __eq__, so instances are unhashable.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"User(age={self.age}, name={self.name!r})"
