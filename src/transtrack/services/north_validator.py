"""Validation rules for North warehouse shipments."""

import re
from datetime import datetime
from decimal import Decimal

from transtrack.models.schemas import ShipmentRecord
from transtrack.models.validator import DateParser, RecordValidator
from transtrack.services.date_parser import parse_calendar_date

# Optional sign and a plain decimal number; no exponent or digit separators
WEIGHT_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)", re.ASCII)


def _parse_weight(value: str) -> Decimal | None:
    value = value.strip()
    if not WEIGHT_PATTERN.fullmatch(value):
        return None
    return Decimal(value)


class NorthValidator(RecordValidator):
    """
    Checks North records in this order:

    1. ShipmentId is present and alphanumeric.
    2. Origin is present.
    3. Destination is present.
    4. Date parses.
    5. Date is not after the processing instant.
    6. Weight is a decimal greater than zero.
    """

    def __init__(self, date_parser: DateParser = parse_calendar_date):
        super().__init__(date_parser)

    def check_record(self, record: ShipmentRecord, now: datetime) -> str | None:
        if not record.shipment_id.strip() or not record.shipment_id.isalnum():
            return f"Invalid ShipmentId: {record.shipment_id}"

        if not record.origin.strip():
            return "Origin cannot be empty"

        if not record.destination.strip():
            return "Destination cannot be empty"

        ship_date = self._parse_date(record.date)
        if ship_date is None:
            return f"Invalid date: {record.date}"

        if ship_date > now:
            return f"Date cannot be in the future: {ship_date:%Y-%m-%d %H:%M:%S}"

        weight = _parse_weight(record.weight)
        if weight is None or weight <= 0:
            return f"Invalid weight: {record.weight}"

        return None
