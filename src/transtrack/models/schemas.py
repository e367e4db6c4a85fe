"""Pydantic models for shipment records and processing outcomes."""

from datetime import datetime
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Warehouse(str, Enum):
    """Warehouse profiles with their own file grammar and rule set."""

    NORTH = "north"
    SOUTH = "south"

    @property
    def extension(self) -> str:
        """Extension of the files this warehouse drops."""
        return ".csv" if self is Warehouse.NORTH else ".txt"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ShipmentRecord(BaseModel):
    """One parsed line of a shipment file.

    Fields not used by a profile stay empty: North fills ``origin`` and
    ``weight``, South fills ``region`` and ``load_type``.
    """

    model_config = ConfigDict(frozen=True)

    shipment_id: str = ""
    origin: str = ""
    region: str = ""
    destination: str = ""
    date: str = ""
    weight: str = ""
    load_type: str = ""


class ValidationResult(BaseModel):
    """Outcome of validating every record of one file."""

    model_config = ConfigDict(frozen=True)

    is_valid: bool
    reason: str = ""

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "ValidationResult":
        return cls(is_valid=False, reason=reason)


class ProcessingSummary(BaseModel):
    """Summary of a successfully archived file."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    total_records: int
    file_url: str
    date_processed: datetime


class FileState(str, Enum):
    """Where a source file ends up after one processing attempt."""

    INCOMING = "incoming"
    ARCHIVED = "archived"
    REJECTED = "rejected"


class ProcessingResult(BaseModel):
    """Result of running the pipeline over a single source file."""

    file_name: str
    state: FileState
    reason: str | None = None
    archive_url: str | None = None
    report_path: Path | None = None
    faulted: bool = False

    @property
    def success(self) -> bool:
        return self.state is FileState.ARCHIVED


class BatchSummary(BaseModel):
    """Counts and per-file results for one pass over an incoming directory."""

    results: list[ProcessingResult] = []

    @property
    def archived(self) -> int:
        return sum(1 for r in self.results if r.state is FileState.ARCHIVED)

    @property
    def rejected(self) -> int:
        return sum(1 for r in self.results if r.state is FileState.REJECTED)

    @property
    def pending(self) -> int:
        return sum(1 for r in self.results if r.state is FileState.INCOMING)
