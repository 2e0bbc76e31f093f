"""Custom exception hierarchy for wordwalk model and generation errors."""

from pathlib import Path


class WordWalkError(Exception):
    """Base exception for all wordwalk errors."""


class InternerCapacityError(WordWalkError):
    """Raised when the interner hash index has no free slot left."""

    def __init__(self, message: str, *, capacity: int | None = None) -> None:
        """Initialize with optional capacity that gets appended to the message."""
        extra = " "
        if capacity is not None:
            extra += f"(capacity: {capacity}) "
        super().__init__(message + extra)
        self.capacity = capacity


class CorpusError(WordWalkError):
    """Raised when loading the source text fails."""

    def __init__(
        self,
        message: str,
        *,
        path: str | Path | None = None,
        os_err: OSError | None = None,
    ) -> None:
        """
        Initialize CorpusError with file details.

        Args:
            message: Error message.
            path: The corpus path that could not be read.
            os_err: The underlying error raised by the filesystem.
        """
        extra = " "
        if path:
            extra += f"(path: {path}) "
        if os_err:
            extra += f"(reason: {os_err.strerror or os_err}) "
        super().__init__(message + extra)
        self.path = str(path) if path else None
        self.os_err = os_err


class GenerationError(WordWalkError):
    """Raised when sentence generation is configured with invalid arguments."""

    def __init__(
        self,
        message: str,
        *,
        param: str | None = None,
        value: object | None = None,
    ) -> None:
        extra = " "
        if param:
            extra += f"({param}: {value!r}) "
        super().__init__(message + extra)
        self.param = param
        self.value = value


class ModelFrozenError(WordWalkError):
    """Raised when a built model is asked to intern or record anything new."""
