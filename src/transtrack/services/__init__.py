from .date_parser import parse_calendar_date
from .file_operations import delete_source_file
from .north_validator import NorthValidator
from .outcome_writer import OutcomeWriter
from .s3_uploader import S3Uploader
from .south_validator import SouthValidator

__all__ = [
    "parse_calendar_date",
    "delete_source_file",
    "NorthValidator",
    "OutcomeWriter",
    "S3Uploader",
    "SouthValidator",
]
