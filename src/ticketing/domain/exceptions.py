"""Domain-level exceptions.

Every rejected purchase is reported through InvalidPurchaseException so
callers (and the CLI layer) can catch one type and show its message.
"""


class InvalidPurchaseException(Exception):
    """A ticket purchase request broke a validation or business rule."""

    def __init__(self, message: str = "Invalid purchase") -> None:
        super().__init__(message)
        self.message = message
