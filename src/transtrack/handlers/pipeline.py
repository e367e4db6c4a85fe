"""Per-file processing pipeline: parse, validate, archive, report, dispose."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from transtrack.models.exceptions import UploadError
from transtrack.models.parser import RecordParser
from transtrack.models.schemas import FileState, ProcessingResult, ProcessingSummary
from transtrack.models.uploader import ArchiveUploader
from transtrack.models.validator import RecordValidator
from transtrack.services.file_operations import delete_source_file
from transtrack.services.outcome_writer import OutcomeWriter

logger = logging.getLogger(__name__)

SYSTEM_ERROR_PREFIX = "System error: "


class ProcessingPipeline:
    """Runs one source file through the pipeline and disposes of it.

    Every path writes a report before the source is deleted. A failure
    after a report was written leaves the source in place for manual
    inspection instead of writing a second report.
    """

    def __init__(
        self,
        parser: RecordParser,
        validator: RecordValidator,
        uploader: ArchiveUploader,
        outcome_writer: OutcomeWriter,
        processed_dir: Path,
        errors_dir: Path,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """
        Initialize the pipeline for one warehouse profile.

        Args:
            parser: Profile-specific record parser.
            validator: Profile-specific record validator.
            uploader: Archive store for valid files.
            outcome_writer: Writer for processed and error reports.
            processed_dir: Directory receiving ``_processed`` reports.
            errors_dir: Directory receiving ``_error`` reports.
            clock: Source of the processing instant.
        """
        self._parser = parser
        self._validator = validator
        self._uploader = uploader
        self._outcome_writer = outcome_writer
        self._processed_dir = Path(processed_dir)
        self._errors_dir = Path(errors_dir)
        self._clock = clock

    def process_file(self, file_path: Path) -> ProcessingResult:
        """
        Process a single shipment file.

        Args:
            file_path: Source file in the incoming directory.

        Returns:
            ProcessingResult describing where the file ended up.
        """
        file_path = Path(file_path)
        file_name = file_path.name
        report = None
        logger.info("Processing file: %s", file_name)

        try:
            records = self._parser.parse_file(file_path)
            logger.info("Parsed %d record(s) from %s", len(records), file_name)

            now = self._clock()
            validation = self._validator.validate(records, now)

            if not validation.is_valid:
                report = self._outcome_writer.write_error_report(
                    file_name, validation.reason, self._errors_dir
                )
                delete_source_file(file_path)
                logger.warning(
                    "File validation failed: %s - %s", file_name, validation.reason
                )
                return ProcessingResult(
                    file_name=file_name,
                    state=FileState.REJECTED,
                    reason=validation.reason,
                    report_path=report,
                )

            logger.info("Uploading %s to archive...", file_name)
            file_url = self._uploader.upload(file_path)
            logger.info("File uploaded successfully: %s", file_url)

            summary = ProcessingSummary(
                file_name=file_name,
                total_records=len(records),
                file_url=file_url,
                date_processed=now,
            )
            report = self._outcome_writer.write_success_report(summary, self._processed_dir)
            delete_source_file(file_path)

            logger.info(
                "File processed successfully: %s (%d records) -> %s",
                file_name,
                len(records),
                file_url,
            )
            return ProcessingResult(
                file_name=file_name,
                state=FileState.ARCHIVED,
                archive_url=file_url,
                report_path=report,
            )

        except Exception as e:
            if report is not None:
                return self._leave_in_place(file_path, report, e)
            return self._handle_fault(file_path, e)

    def _leave_in_place(
        self, file_path: Path, report: Path, error: Exception
    ) -> ProcessingResult:
        logger.error(
            "Report %s was written but %s could not be removed: %s",
            report.name,
            file_path.name,
            error,
        )
        logger.warning(
            "Manual remediation required: %s remains in %s",
            file_path.name,
            file_path.parent,
        )
        return ProcessingResult(
            file_name=file_path.name,
            state=FileState.INCOMING,
            reason=str(error),
            report_path=report,
            faulted=True,
        )

    def _handle_fault(self, file_path: Path, error: Exception) -> ProcessingResult:
        file_name = file_path.name
        reason = f"{SYSTEM_ERROR_PREFIX}{error}"
        if isinstance(error, UploadError):
            logger.error("Archive upload failed for %s: %s", file_name, error)
        else:
            logger.error("Error processing %s: %s", file_name, error, exc_info=True)

        report = None
        try:
            report = self._outcome_writer.write_error_report(
                file_name, reason, self._errors_dir
            )
            delete_source_file(file_path)
        except Exception as cleanup_error:
            logger.error(
                "Failed to report and delete faulted file %s: %s",
                file_name,
                cleanup_error,
            )
            logger.warning(
                "Manual remediation required: %s remains in %s",
                file_name,
                file_path.parent,
            )
            return ProcessingResult(
                file_name=file_name,
                state=FileState.INCOMING,
                reason=reason,
                report_path=report,
                faulted=True,
            )

        logger.error("File deleted due to processing error: %s", file_name)
        return ProcessingResult(
            file_name=file_name,
            state=FileState.REJECTED,
            reason=reason,
            report_path=report,
            faulted=True,
        )
