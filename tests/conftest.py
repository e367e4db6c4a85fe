from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from transtrack.infrastructure.north_parser import NorthRecordParser
from transtrack.infrastructure.south_parser import SouthRecordParser
from transtrack.handlers.pipeline import ProcessingPipeline
from transtrack.models.uploader import ArchiveUploader
from transtrack.services.north_validator import NorthValidator
from transtrack.services.outcome_writer import OutcomeWriter
from transtrack.services.south_validator import SouthValidator

FIXED_NOW = datetime(2024, 12, 8, 10, 30, 45)
ARCHIVE_URL = "https://transtrack-archive.s3.us-east-1.amazonaws.com/shipments.csv"


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def folders(tmp_path: Path) -> dict[str, Path]:
    paths = {
        "incoming": tmp_path / "Incoming",
        "processed": tmp_path / "Processed",
        "errors": tmp_path / "Errors",
    }
    paths["incoming"].mkdir()
    return paths


@pytest.fixture()
def uploader() -> MagicMock:
    mock_uploader = MagicMock(spec=ArchiveUploader)
    mock_uploader.upload.return_value = ARCHIVE_URL
    return mock_uploader


@pytest.fixture()
def north_pipeline(folders: dict[str, Path], uploader: MagicMock) -> ProcessingPipeline:
    return ProcessingPipeline(
        parser=NorthRecordParser(),
        validator=NorthValidator(),
        uploader=uploader,
        outcome_writer=OutcomeWriter(clock=lambda: FIXED_NOW),
        processed_dir=folders["processed"],
        errors_dir=folders["errors"],
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture()
def south_pipeline(folders: dict[str, Path], uploader: MagicMock) -> ProcessingPipeline:
    return ProcessingPipeline(
        parser=SouthRecordParser(),
        validator=SouthValidator(),
        uploader=uploader,
        outcome_writer=OutcomeWriter(clock=lambda: FIXED_NOW),
        processed_dir=folders["processed"],
        errors_dir=folders["errors"],
        clock=lambda: FIXED_NOW,
    )
