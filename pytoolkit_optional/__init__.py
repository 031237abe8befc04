from .errors import EmptyValueAccess, InvariantViolation
from .optional import OptionalValue
from .user import User

__all__ = [
    "OptionalValue",
    "User",
    "InvariantViolation",
    "EmptyValueAccess",
]
