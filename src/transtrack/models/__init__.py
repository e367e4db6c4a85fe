"""Models package."""

from transtrack.models.exceptions import SourceDeletionError, TransTrackError, UploadError
from transtrack.models.parser import RecordParser
from transtrack.models.schemas import (
    BatchSummary,
    FileState,
    ProcessingResult,
    ProcessingSummary,
    ShipmentRecord,
    ValidationResult,
    Warehouse,
)
from transtrack.models.uploader import ArchiveUploader
from transtrack.models.validator import DateParser, RecordValidator

__all__ = [
    "ArchiveUploader",
    "BatchSummary",
    "DateParser",
    "FileState",
    "ProcessingResult",
    "ProcessingSummary",
    "RecordParser",
    "RecordValidator",
    "ShipmentRecord",
    "SourceDeletionError",
    "TransTrackError",
    "UploadError",
    "ValidationResult",
    "Warehouse",
]
