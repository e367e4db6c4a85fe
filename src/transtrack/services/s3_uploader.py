"""S3 archive service for shipment files."""

import logging
import os
from pathlib import Path
from urllib.parse import quote

from dotenv import load_dotenv

from transtrack.infrastructure.s3_client import S3Client
from transtrack.models.exceptions import UploadError
from transtrack.models.uploader import ArchiveUploader

load_dotenv()
logger = logging.getLogger(__name__)

CONTENT_TYPES = {
    ".csv": "text/csv",
    ".txt": "text/plain",
}


class S3Uploader(ArchiveUploader):
    """Archives raw shipment files to S3."""

    def __init__(
        self,
        s3_client: S3Client,
        bucket: str | None = None,
        prefix: str | None = None,
        public_base_url: str | None = None,
    ):
        """
        Initialize S3 uploader.

        Args:
            s3_client: S3Client instance.
            bucket: Archive bucket. Falls back to ARCHIVE_BUCKET.
            prefix: Key prefix. Falls back to ARCHIVE_PREFIX.
            public_base_url: Base URL for archived objects (e.g., a CDN).
                Falls back to ARCHIVE_PUBLIC_URL, then the bucket's S3 URL.
        """
        self._s3_client = s3_client
        self._bucket = bucket or os.getenv("ARCHIVE_BUCKET", "")
        self._prefix = prefix if prefix is not None else os.getenv("ARCHIVE_PREFIX", "")
        self._public_base_url = public_base_url or os.getenv("ARCHIVE_PUBLIC_URL", "")

    @property
    def bucket(self) -> str:
        """Get the archive bucket name."""
        return self._bucket

    def upload(self, local_path: Path) -> str:
        """
        Upload a shipment file and return its URL.

        Args:
            local_path: Path to the local file.

        Returns:
            URL of the archived object.

        Raises:
            UploadError: If the bucket is not configured, the file is
                missing, or S3 rejected the upload.
        """
        local_path = Path(local_path)
        if not self._bucket:
            raise UploadError("ARCHIVE_BUCKET is not configured", component="s3")

        if not local_path.is_file():
            raise UploadError(f"Local file does not exist: {local_path}", component="s3")

        key = f"{self._prefix}{local_path.name}"
        content_type = CONTENT_TYPES.get(local_path.suffix.lower(), "application/octet-stream")

        self._s3_client.upload_file(
            local_path=local_path,
            bucket=self._bucket,
            key=key,
            content_type=content_type,
            metadata={"source_file": local_path.name},
        )

        if self._public_base_url:
            return f"{self._public_base_url.rstrip('/')}/{quote(key)}"
        return self._s3_client.object_url(self._bucket, key)
