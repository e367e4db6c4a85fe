"""Abstract record validator and the date parsing hook it depends on."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable

from transtrack.models.schemas import ShipmentRecord, ValidationResult

DateParser = Callable[[str], datetime | None]

NO_RECORDS_REASON = "No records found"


class RecordValidator(ABC):
    """Validates all records of one file as a unit."""

    def __init__(self, date_parser: DateParser):
        self._parse_date = date_parser

    def validate(
        self,
        records: list[ShipmentRecord],
        now: datetime | None = None,
    ) -> ValidationResult:
        """
        Validate records in order, stopping at the first failing rule.

        Args:
            records: Parsed records of a single file.
            now: Processing instant used by time-dependent rules.

        Returns:
            ValidationResult for the whole file.
        """
        if not records:
            return ValidationResult.invalid(NO_RECORDS_REASON)

        now = now or datetime.now()
        for record in records:
            reason = self.check_record(record, now)
            if reason:
                return ValidationResult.invalid(reason)

        return ValidationResult.valid()

    @abstractmethod
    def check_record(self, record: ShipmentRecord, now: datetime) -> str | None:
        """Return the reason the record fails, or None if it passes."""
        pass
