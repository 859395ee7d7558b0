"""Error types shared across the tracker."""


class InvalidInputError(ValueError):
    """Raised when a profile or log violates its invariants."""


class CooldownActiveError(RuntimeError):
    """Raised when a log is saved before the save cooldown has elapsed."""

    def __init__(self, retry_after_seconds: int) -> None:
        super().__init__(f"Please wait {retry_after_seconds}s before saving again")
        self.retry_after_seconds = retry_after_seconds


class StorageError(RuntimeError):
    """Raised when the backing store fails to read or write."""
