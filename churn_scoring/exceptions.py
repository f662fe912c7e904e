"""Exceptions raised at the scoring engine boundary."""


class InvalidInput(ValueError):
    """
    Raised when a customer record falls outside the input domain.

    Attributes:
        field: Name of the offending field
        constraint: Description of the violated constraint
    """

    def __init__(self, field: str, constraint: str):
        super().__init__(f"{field}: {constraint}")
        self.field = field
        self.constraint = constraint

    def __str__(self) -> str:
        return f"Invalid input for field [{self.field}]: {self.constraint}"
