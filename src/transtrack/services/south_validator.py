"""Validation rules for South warehouse shipments."""

from datetime import datetime

from transtrack.models.schemas import ShipmentRecord
from transtrack.models.validator import DateParser, RecordValidator
from transtrack.services.date_parser import parse_calendar_date

VALID_REGIONS = ("North", "South", "East", "West")
VALID_LOAD_TYPES = ("Fragile", "Bulk", "Liquid")

SATURDAY = 5
SUNDAY = 6


def _matches_any(value: str, allowed: tuple[str, ...]) -> bool:
    return value.casefold() in {item.casefold() for item in allowed}


class SouthValidator(RecordValidator):
    """
    Checks South records in this order:

    1. ShipmentId is present and starts with 'S-'.
    2. Region is one of North, South, East, West (any case).
    3. Destination is present.
    4. Date parses.
    5. Date falls on a weekday.
    6. LoadType is one of Fragile, Bulk, Liquid (any case).
    """

    def __init__(self, date_parser: DateParser = parse_calendar_date):
        super().__init__(date_parser)

    def check_record(self, record: ShipmentRecord, now: datetime) -> str | None:
        if not record.shipment_id.strip() or not record.shipment_id.startswith("S-"):
            return f"Invalid ShipmentId: {record.shipment_id}"

        if not _matches_any(record.region, VALID_REGIONS):
            return f"Invalid region: {record.region}"

        if not record.destination.strip():
            return "Destination cannot be empty"

        ship_date = self._parse_date(record.date)
        if ship_date is None:
            return f"Invalid date: {record.date}"

        if ship_date.weekday() in (SATURDAY, SUNDAY):
            return f"Date cannot be a weekend: {ship_date:%Y-%m-%d}"

        if not _matches_any(record.load_type, VALID_LOAD_TYPES):
            return f"Invalid load type: {record.load_type}"

        return None
