"""Exceptions raised while processing shipment files."""


class TransTrackError(Exception):
    """Base error for shipment file processing."""

    def __init__(
        self,
        message: str,
        component: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.component:
            return f"{self.message} (component: {self.component})"
        return self.message


class UploadError(TransTrackError):
    """The archive store was unreachable or rejected the file."""


class SourceDeletionError(TransTrackError):
    """A source file could not be removed from the incoming directory."""
