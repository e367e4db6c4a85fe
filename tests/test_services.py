"""Tests for services layer."""

from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from transtrack.infrastructure.s3_client import S3Client
from transtrack.models.exceptions import SourceDeletionError, UploadError
from transtrack.models.schemas import ProcessingSummary, ShipmentRecord
from transtrack.services.date_parser import parse_calendar_date
from transtrack.services.file_operations import delete_source_file
from transtrack.services.north_validator import NorthValidator
from transtrack.services.outcome_writer import OutcomeWriter
from transtrack.services.s3_uploader import S3Uploader
from transtrack.services.south_validator import SouthValidator

NOW = datetime(2024, 12, 8, 10, 30, 45)


def north_record(**overrides) -> ShipmentRecord:
    fields = {
        "shipment_id": "SH1001",
        "origin": "Accra",
        "destination": "Tema",
        "date": "2024-10-12",
        "weight": "150.5",
    }
    fields.update(overrides)
    return ShipmentRecord(**fields)


def south_record(**overrides) -> ShipmentRecord:
    fields = {
        "shipment_id": "S-55221",
        "region": "North",
        "destination": "Takoradi",
        "date": "2024-11-13",
        "load_type": "Bulk",
    }
    fields.update(overrides)
    return ShipmentRecord(**fields)


class TestParseCalendarDate:
    """Tests for parse_calendar_date."""

    def test_iso_date(self):
        """Test ISO dates parse to midnight."""
        assert parse_calendar_date("2024-10-12") == datetime(2024, 10, 12)

    def test_iso_datetime(self):
        """Test ISO datetimes keep their time."""
        assert parse_calendar_date("2024-10-12T08:15:00") == datetime(2024, 10, 12, 8, 15)

    def test_surrounding_whitespace(self):
        """Test whitespace around the literal is ignored."""
        assert parse_calendar_date("  2024-10-12 ") == datetime(2024, 10, 12)

    @pytest.mark.parametrize(
        "value",
        ["2024/10/12", "12 Oct 2024", "October 12, 2024", "12.10.2024"],
    )
    def test_common_layouts(self, value):
        """Test common calendar layouts are accepted."""
        assert parse_calendar_date(value) == datetime(2024, 10, 12)

    @pytest.mark.parametrize("value", ["", "invalid-date", "2024-13-01", "2024-02-30"])
    def test_invalid(self, value):
        """Test non-dates return None."""
        assert parse_calendar_date(value) is None


class TestNorthValidator:
    """Tests for NorthValidator."""

    def test_valid_record(self):
        """Test a well-formed record is valid."""
        result = NorthValidator().validate([north_record()], NOW)

        assert result.is_valid is True

    def test_multiple_valid_records(self):
        """Test several well-formed records are valid."""
        records = [
            north_record(),
            north_record(shipment_id="SH1002", origin="Kumasi", date="2024-10-15", weight="200"),
        ]

        assert NorthValidator().validate(records, NOW).is_valid is True

    def test_date_equal_to_now_is_valid(self):
        """Test a date equal to the processing instant is not in the future."""
        record = north_record(date="2024-12-08T10:30:45")

        assert NorthValidator().validate([record], NOW).is_valid is True

    def test_empty_records(self):
        """Test no records is invalid."""
        result = NorthValidator().validate([], NOW)

        assert result.is_valid is False
        assert result.reason == "No records found"

    @pytest.mark.parametrize("shipment_id", ["", "   ", "SH-1001", "SH 1001"])
    def test_invalid_shipment_id(self, shipment_id):
        """Test blank or non-alphanumeric ids are rejected."""
        result = NorthValidator().validate([north_record(shipment_id=shipment_id)], NOW)

        assert result.is_valid is False
        assert "ShipmentId" in result.reason

    def test_empty_origin(self):
        """Test a blank origin is rejected."""
        result = NorthValidator().validate([north_record(origin="")], NOW)

        assert result.is_valid is False
        assert "Origin" in result.reason

    def test_empty_destination(self):
        """Test a blank destination is rejected."""
        result = NorthValidator().validate([north_record(destination="")], NOW)

        assert result.is_valid is False
        assert "Destination" in result.reason

    def test_invalid_date(self):
        """Test an unparseable date is rejected with the literal."""
        result = NorthValidator().validate([north_record(date="invalid-date")], NOW)

        assert result.is_valid is False
        assert result.reason == "Invalid date: invalid-date"

    def test_future_date(self):
        """Test a date after the processing instant is rejected."""
        result = NorthValidator().validate([north_record(date="2024-12-09")], NOW)

        assert result.is_valid is False
        assert "future" in result.reason

    @pytest.mark.parametrize("weight", ["150", "150.5", "0.25", ".5", "+12", " 42 "])
    def test_valid_weight_forms(self, weight):
        """Test plain decimal weights are accepted."""
        assert NorthValidator().validate([north_record(weight=weight)], NOW).is_valid is True

    @pytest.mark.parametrize(
        "weight",
        ["0", "-50", "ABC", "", "NaN", "Infinity", "0.00", "1e2", "1E-1", "1_0", "\u0661\u0662"],
    )
    def test_invalid_weight(self, weight):
        """Test non-positive or non-numeric weights are rejected."""
        result = NorthValidator().validate([north_record(weight=weight)], NOW)

        assert result.is_valid is False
        assert "weight" in result.reason

    def test_first_failing_rule_wins(self):
        """Test the reason comes from the first rule the record breaks."""
        record = north_record(origin="", date="invalid-date", weight="0")

        result = NorthValidator().validate([record], NOW)

        assert result.reason == "Origin cannot be empty"

    def test_first_failing_record_wins(self):
        """Test later invalid records do not change the reason."""
        records = [
            north_record(),
            north_record(shipment_id="SH1002", weight="0"),
            north_record(shipment_id="SH-3"),
        ]

        result = NorthValidator().validate(records, NOW)

        assert result.reason == "Invalid weight: 0"

    def test_injected_date_parser(self):
        """Test the validator uses the injected date parser."""
        date_parser = MagicMock(return_value=datetime(2024, 1, 1))

        result = NorthValidator(date_parser=date_parser).validate(
            [north_record(date="yesterday")], NOW
        )

        assert result.is_valid is True
        date_parser.assert_called_once_with("yesterday")


class TestSouthValidator:
    """Tests for SouthValidator."""

    def test_valid_record(self):
        """Test a well-formed record is valid."""
        records = [south_record(), south_record(shipment_id="S-55222", region="East", date="2024-11-11")]

        assert SouthValidator().validate(records, NOW).is_valid is True

    def test_case_insensitive_lists(self):
        """Test region and load type match regardless of case."""
        record = south_record(region="wEST", load_type="liquid")

        assert SouthValidator().validate([record], NOW).is_valid is True

    def test_empty_records(self):
        """Test no records is invalid."""
        result = SouthValidator().validate([], NOW)

        assert result.is_valid is False
        assert result.reason == "No records found"

    @pytest.mark.parametrize("shipment_id", ["", "55221", "s-55221", "SH1001"])
    def test_invalid_shipment_id(self, shipment_id):
        """Test ids without the S- prefix are rejected."""
        result = SouthValidator().validate([south_record(shipment_id=shipment_id)], NOW)

        assert result.is_valid is False
        assert "ShipmentId" in result.reason

    def test_invalid_region(self):
        """Test an unknown region is rejected."""
        result = SouthValidator().validate([south_record(region="Central")], NOW)

        assert result.is_valid is False
        assert result.reason == "Invalid region: Central"

    def test_empty_destination(self):
        """Test a blank destination is rejected."""
        result = SouthValidator().validate([south_record(destination=" ")], NOW)

        assert result.is_valid is False
        assert "Destination" in result.reason

    def test_invalid_date(self):
        """Test an unparseable date is rejected."""
        result = SouthValidator().validate([south_record(date="13/45/2024")], NOW)

        assert result.is_valid is False
        assert "Invalid date" in result.reason

    @pytest.mark.parametrize("date", ["2024-11-16", "2024-11-17"])
    def test_weekend_date(self, date):
        """Test Saturday and Sunday dates are rejected."""
        result = SouthValidator().validate([south_record(date=date)], NOW)

        assert result.is_valid is False
        assert "weekend" in result.reason
        assert date in result.reason

    def test_future_date_allowed(self):
        """Test South does not reject future weekdays."""
        record = south_record(date="2025-01-06")

        assert SouthValidator().validate([record], NOW).is_valid is True

    def test_invalid_load_type(self):
        """Test an unknown load type is rejected."""
        result = SouthValidator().validate([south_record(load_type="Frozen")], NOW)

        assert result.is_valid is False
        assert result.reason == "Invalid load type: Frozen"


class TestS3Uploader:
    """Tests for S3Uploader."""

    def test_upload_returns_object_url(self, tmp_path):
        """Test upload stores the file and returns its S3 URL."""
        mock_s3_client = MagicMock(spec=S3Client)
        mock_s3_client.object_url.return_value = (
            "https://archive.s3.us-east-1.amazonaws.com/shipments/north.csv"
        )
        local_path = tmp_path / "north.csv"
        local_path.write_text("SH1001,Accra,Tema,2024-10-12,150.5")

        uploader = S3Uploader(mock_s3_client, bucket="archive", prefix="shipments/")
        result = uploader.upload(local_path)

        assert result == "https://archive.s3.us-east-1.amazonaws.com/shipments/north.csv"
        mock_s3_client.upload_file.assert_called_once_with(
            local_path=local_path,
            bucket="archive",
            key="shipments/north.csv",
            content_type="text/csv",
            metadata={"source_file": "north.csv"},
        )
        mock_s3_client.object_url.assert_called_once_with("archive", "shipments/north.csv")

    def test_upload_with_public_base_url(self, tmp_path):
        """Test a configured public base URL is used for the returned URL."""
        mock_s3_client = MagicMock(spec=S3Client)
        local_path = tmp_path / "south.txt"
        local_path.write_text("S-55221|North|Takoradi|2024-11-13|Bulk")

        uploader = S3Uploader(
            mock_s3_client,
            bucket="archive",
            prefix="",
            public_base_url="https://cdn.example.com/",
        )

        assert uploader.upload(local_path) == "https://cdn.example.com/south.txt"
        assert mock_s3_client.upload_file.call_args.kwargs["content_type"] == "text/plain"
        mock_s3_client.object_url.assert_not_called()

    def test_public_base_url_quotes_key(self, tmp_path):
        """Test spaces in the object key are percent-encoded in the public URL."""
        local_path = tmp_path / "north shipments.csv"
        local_path.write_text("SH1001,Accra,Tema,2024-10-12,150.5")

        uploader = S3Uploader(
            MagicMock(spec=S3Client),
            bucket="archive",
            prefix="daily/",
            public_base_url="https://cdn.example.com",
        )

        assert uploader.upload(local_path) == "https://cdn.example.com/daily/north%20shipments.csv"

    @patch.dict("os.environ", {"ARCHIVE_BUCKET": "env-bucket", "ARCHIVE_PREFIX": "in/"})
    def test_bucket_from_environment(self):
        """Test bucket falls back to ARCHIVE_BUCKET."""
        uploader = S3Uploader(MagicMock(spec=S3Client))

        assert uploader.bucket == "env-bucket"

    @patch.dict("os.environ", {"ARCHIVE_BUCKET": ""})
    def test_missing_bucket(self, tmp_path):
        """Test upload fails when no bucket is configured."""
        mock_s3_client = MagicMock(spec=S3Client)
        local_path = tmp_path / "north.csv"
        local_path.write_text("x")

        with pytest.raises(UploadError):
            S3Uploader(mock_s3_client).upload(local_path)

        mock_s3_client.upload_file.assert_not_called()

    def test_missing_file(self, tmp_path):
        """Test upload fails when the local file is gone."""
        mock_s3_client = MagicMock(spec=S3Client)

        with pytest.raises(UploadError):
            S3Uploader(mock_s3_client, bucket="archive").upload(tmp_path / "missing.csv")

    def test_client_error_propagates(self, tmp_path):
        """Test UploadError from the client is not swallowed."""
        mock_s3_client = MagicMock(spec=S3Client)
        mock_s3_client.upload_file.side_effect = UploadError("Access Denied", component="s3")
        local_path = tmp_path / "north.csv"
        local_path.write_text("x")

        with pytest.raises(UploadError, match="Access Denied"):
            S3Uploader(mock_s3_client, bucket="archive").upload(local_path)


class TestOutcomeWriter:
    """Tests for OutcomeWriter."""

    def test_success_report_format(self, tmp_path):
        """Test the processed report layout and name."""
        summary = ProcessingSummary(
            file_name="test_shipment.csv",
            total_records=5,
            file_url="https://archive.example.com/test_shipment.csv",
            date_processed=NOW,
        )

        path = OutcomeWriter().write_success_report(summary, tmp_path / "Processed")

        assert path == tmp_path / "Processed" / "test_shipment_processed.csv"
        assert path.read_text(encoding="utf-8") == (
            "ProcessedFile: test_shipment.csv\n"
            "TotalRecords: 5\n"
            "FileUrl:\n"
            "https://archive.example.com/test_shipment.csv\n"
            "DateProcessed: 2024-12-08 10:30:45"
        )

    def test_error_report_format(self, tmp_path):
        """Test the error report layout uses the writer clock."""
        writer = OutcomeWriter(clock=lambda: NOW)

        path = writer.write_error_report("south.txt", "Invalid region: Central", tmp_path)

        assert path == tmp_path / "south_error.txt"
        assert path.read_text(encoding="utf-8") == (
            "FileName: south.txt\n"
            "Reason: Invalid region: Central\n"
            "Timestamp: 2024-12-08 10:30:45"
        )

    def test_creates_missing_directory(self, tmp_path):
        """Test the target directory is created when missing."""
        target = tmp_path / "nested" / "Errors"

        OutcomeWriter(clock=lambda: NOW).write_error_report("a.csv", "reason", target)

        assert (target / "a_error.csv").exists()

    def test_overwrites_existing_report(self, tmp_path):
        """Test writing twice keeps only the latest report."""
        writer = OutcomeWriter(clock=lambda: NOW)
        writer.write_error_report("a.csv", "first", tmp_path)

        path = writer.write_error_report("a.csv", "second", tmp_path)

        assert "Reason: second" in path.read_text(encoding="utf-8")
        assert "first" not in path.read_text(encoding="utf-8")


class TestDeleteSourceFile:
    """Tests for delete_source_file."""

    def test_deletes_file(self, tmp_path):
        """Test an existing file is removed."""
        file_path = tmp_path / "north.csv"
        file_path.write_text("x")

        delete_source_file(file_path)

        assert not file_path.exists()

    def test_missing_file_is_ignored(self, tmp_path):
        """Test deleting a file that is already gone does not fail."""
        delete_source_file(tmp_path / "missing.csv")

    def test_os_error_raised_as_deletion_error(self, tmp_path):
        """Test an OSError surfaces as SourceDeletionError."""
        file_path = tmp_path / "north.csv"
        file_path.write_text("x")

        with patch.object(Path, "unlink", side_effect=PermissionError("locked")):
            with pytest.raises(SourceDeletionError, match="locked"):
                delete_source_file(file_path)

        assert file_path.exists()
