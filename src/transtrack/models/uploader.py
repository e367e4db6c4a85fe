from abc import ABC, abstractmethod
from pathlib import Path


class ArchiveUploader(ABC):
    """Abstract base class for archive stores."""

    @abstractmethod
    def upload(self, local_path: Path) -> str:
        """Store a local file and return its permanent URL.

        Args:
            local_path: File to archive.

        Returns:
            URL the archived copy can be fetched from.

        Raises:
            UploadError: If the file could not be stored.
        """
        pass
