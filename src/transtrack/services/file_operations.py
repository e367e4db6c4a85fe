import logging
from pathlib import Path

from transtrack.models.exceptions import SourceDeletionError

logger = logging.getLogger(__name__)


def delete_source_file(file_path: Path) -> None:
    """Remove a source file from the incoming directory.

    A file that is already gone is not an error.

    Raises:
        SourceDeletionError: If the file exists but could not be removed.
    """
    try:
        Path(file_path).unlink(missing_ok=True)
        logger.debug("Deleted %s", file_path)
    except OSError as e:
        raise SourceDeletionError(
            f"Failed to delete file {file_path}: {e}",
            component="file_operations",
            original_error=e,
        ) from e
