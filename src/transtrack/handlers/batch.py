"""Batch driver that feeds an incoming directory through the pipeline."""

import logging
import time
from pathlib import Path

from transtrack.handlers.pipeline import ProcessingPipeline
from transtrack.models.schemas import BatchSummary, FileState

logger = logging.getLogger(__name__)


def list_incoming_files(incoming_dir: Path, extension: str) -> list[Path]:
    """
    List candidate files in directory listing order.

    Args:
        incoming_dir: Directory to scan.
        extension: File extension to match (e.g., '.csv'), any case.

    Returns:
        Regular files with the given extension.
    """
    incoming_dir = Path(incoming_dir)
    if not incoming_dir.is_dir():
        logger.warning("Incoming directory does not exist: %s", incoming_dir)
        return []

    return [
        path
        for path in incoming_dir.iterdir()
        if path.suffix.lower() == extension.lower() and path.is_file()
    ]


def run_batch(
    pipeline: ProcessingPipeline,
    incoming_dir: Path,
    extension: str,
) -> BatchSummary:
    """
    Process every file present in the incoming directory once.

    Args:
        pipeline: Pipeline configured for the warehouse profile.
        incoming_dir: Directory holding unprocessed files.
        extension: Extension of the profile's files.

    Returns:
        BatchSummary with one result per file.
    """
    files = list_incoming_files(incoming_dir, extension)
    summary = BatchSummary()

    if not files:
        logger.info("No files to process")
        return summary

    logger.info("Found %d file(s) to process", len(files))

    for i, file_path in enumerate(files, start=1):
        logger.info("[%d/%d] %s", i, len(files), file_path.name)
        result = pipeline.process_file(file_path)
        summary.results.append(result)

        if result.state is FileState.ARCHIVED:
            logger.info("✓ Processed: %s", result.file_name)
        elif result.state is FileState.REJECTED:
            logger.info("✗ Invalid: %s - %s", result.file_name, result.reason)
        else:
            logger.info("✗ Error: %s - left in incoming folder", result.file_name)

    logger.info(
        "Completed: %d archived, %d rejected, %d pending",
        summary.archived,
        summary.rejected,
        summary.pending,
    )
    return summary


def run_watch_loop(
    pipeline: ProcessingPipeline,
    incoming_dir: Path,
    extension: str,
    poll_interval: float,
    max_iterations: int | None = None,
) -> None:
    """
    Keep scanning the incoming directory until interrupted.

    Args:
        pipeline: Pipeline configured for the warehouse profile.
        incoming_dir: Directory holding unprocessed files.
        extension: Extension of the profile's files.
        poll_interval: Seconds to sleep between scans.
        max_iterations: Stop after this many scans (unbounded if None).
    """
    logger.info("Watching %s every %ss...", incoming_dir, poll_interval)

    iteration = 0
    while max_iterations is None or iteration < max_iterations:
        run_batch(pipeline, incoming_dir, extension)
        iteration += 1
        if max_iterations is None or iteration < max_iterations:
            time.sleep(poll_interval)
