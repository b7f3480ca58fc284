"""Domain errors."""


class StoreDecodeError(ValueError):
    """Raised when a stored document cannot be decoded."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Cannot decode stored document {key!r}: {reason}")
        self.key = key
        self.reason = reason
