"""Writes processed-summary and error reports for shipment files."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from transtrack.models.schemas import ProcessingSummary

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def report_path(file_name: str, suffix: str, target_dir: Path) -> Path:
    """Build ``<target_dir>/<stem><suffix><ext>`` for a source file name."""
    source = Path(file_name)
    return Path(target_dir) / f"{source.stem}{suffix}{source.suffix}"


def format_success_report(summary: ProcessingSummary) -> str:
    lines = [
        f"ProcessedFile: {summary.file_name}",
        f"TotalRecords: {summary.total_records}",
        "FileUrl:",
        summary.file_url,
        f"DateProcessed: {summary.date_processed.strftime(TIMESTAMP_FORMAT)}",
    ]
    return "\n".join(lines)


def format_error_report(file_name: str, reason: str, timestamp: datetime) -> str:
    lines = [
        f"FileName: {file_name}",
        f"Reason: {reason}",
        f"Timestamp: {timestamp.strftime(TIMESTAMP_FORMAT)}",
    ]
    return "\n".join(lines)


class OutcomeWriter:
    """Persists one report per processed file. Existing reports are overwritten."""

    def __init__(self, clock: Callable[[], datetime] = datetime.now):
        self._clock = clock

    def write_success_report(self, summary: ProcessingSummary, target_dir: Path) -> Path:
        """
        Write the ``_processed`` report of an archived file.

        Args:
            summary: Summary of the archived file.
            target_dir: Processed-reports directory (created if missing).

        Returns:
            Path of the written report.
        """
        output_path = report_path(summary.file_name, "_processed", target_dir)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(format_success_report(summary), encoding="utf-8")
        logger.debug("Wrote processed report %s", output_path)
        return output_path

    def write_error_report(self, file_name: str, reason: str, target_dir: Path) -> Path:
        """
        Write the ``_error`` report of a rejected or faulted file.

        Args:
            file_name: Name of the source file.
            reason: Why the file was not archived.
            target_dir: Errors directory (created if missing).

        Returns:
            Path of the written report.
        """
        output_path = report_path(file_name, "_error", target_dir)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(
            format_error_report(file_name, reason, self._clock()),
            encoding="utf-8",
        )
        logger.debug("Wrote error report %s", output_path)
        return output_path
