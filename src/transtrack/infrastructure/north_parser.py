"""Comma-delimited parser for North warehouse files."""

from transtrack.models.parser import RecordParser
from transtrack.models.schemas import ShipmentRecord


class NorthRecordParser(RecordParser):
    """Parses ``id,origin,destination,date,weight`` lines."""

    @property
    def delimiter(self) -> str:
        return ","

    def to_record(self, fields: list[str]) -> ShipmentRecord:
        shipment_id, origin, destination, date, weight = fields
        return ShipmentRecord(
            shipment_id=shipment_id,
            origin=origin,
            destination=destination,
            date=date,
            weight=weight,
        )
