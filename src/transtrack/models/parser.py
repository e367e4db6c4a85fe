"""Abstract record parser for delimited shipment files."""

from abc import ABC, abstractmethod
from pathlib import Path

from transtrack.models.schemas import ShipmentRecord


class RecordParser(ABC):
    """Turns the text of a shipment file into records.

    Lines that are blank, or that do not split into exactly
    ``field_count`` fields, are dropped without raising.
    """

    field_count = 5

    @property
    @abstractmethod
    def delimiter(self) -> str:
        """Field separator for this file format (e.g., ',' or '|')."""
        pass

    @abstractmethod
    def to_record(self, fields: list[str]) -> ShipmentRecord:
        """Map trimmed fields positionally onto a record."""
        pass

    def parse(self, content: str) -> list[ShipmentRecord]:
        """
        Parse file content into shipment records.

        Args:
            content: Full text of the file.

        Returns:
            Records in the order their lines appear.
        """
        records = []
        for line in content.replace("\r\n", "\n").replace("\r", "\n").split("\n"):
            if not line.strip():
                continue

            parts = line.split(self.delimiter)
            if len(parts) != self.field_count:
                continue

            records.append(self.to_record([part.strip() for part in parts]))
        return records

    def parse_file(self, file_path: Path) -> list[ShipmentRecord]:
        """Read a file as UTF-8 text, replacing undecodable bytes, and parse it."""
        content = Path(file_path).read_text(encoding="utf-8-sig", errors="replace")
        return self.parse(content)
