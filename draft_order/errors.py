"""Error types raised by the draft order engine."""


class InvalidInputError(ValueError):
    """Required input for a draft order operation is missing or malformed.

    Attributes:
        method: Policy or operation that rejected the input
        field: Name of the missing or malformed input
    """

    def __init__(self, method: str, field: str, detail: str = "") -> None:
        self.method = method
        self.field = field
        message = f"{method}: invalid or missing '{field}'"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
