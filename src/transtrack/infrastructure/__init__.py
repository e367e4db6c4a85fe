"""Infrastructure package."""

from transtrack.infrastructure.dependency_injection import DependenciesContainer
from transtrack.infrastructure.north_parser import NorthRecordParser
from transtrack.infrastructure.s3_client import S3Client
from transtrack.infrastructure.south_parser import SouthRecordParser

__all__ = [
    "DependenciesContainer",
    "NorthRecordParser",
    "S3Client",
    "SouthRecordParser",
]
