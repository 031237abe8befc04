class InvariantViolation(ValueError):
    """Noneを値として包もうとしたときに送出される。"""

    def __init__(self, message: str = "Called of_value with None"):
        super().__init__(message)


class EmptyValueAccess(ValueError):
    """空のOptionalValueから値を取り出そうとしたときに送出される。"""

    def __init__(self, message: str = "Called get on an empty OptionalValue"):
        super().__init__(message)
