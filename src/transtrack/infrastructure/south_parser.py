"""Pipe-delimited parser for South warehouse files."""

from transtrack.models.parser import RecordParser
from transtrack.models.schemas import ShipmentRecord


class SouthRecordParser(RecordParser):
    """Parses ``id|region|destination|date|load_type`` lines."""

    @property
    def delimiter(self) -> str:
        return "|"

    def to_record(self, fields: list[str]) -> ShipmentRecord:
        shipment_id, region, destination, date, load_type = fields
        return ShipmentRecord(
            shipment_id=shipment_id,
            region=region,
            destination=destination,
            date=date,
            load_type=load_type,
        )
