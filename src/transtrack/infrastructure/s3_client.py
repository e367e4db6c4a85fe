"""S3 client wrapper for archive operations."""

import logging
from pathlib import Path
from typing import Any
from urllib.parse import quote

from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from transtrack.models.exceptions import UploadError

logger = logging.getLogger(__name__)


class S3Client:
    """Thin wrapper over a boto3 S3 client used by the archive uploader."""

    def __init__(self, client: Any):
        """
        Wrap a boto3 client.

        Args:
            client: Client created with session.client("s3").
        """
        self._client = client

    @property
    def region(self) -> str:
        """Region the underlying boto3 client talks to."""
        return self._client.meta.region_name or "us-east-1"

    def upload_file(
        self,
        local_path: Path,
        bucket: str,
        key: str,
        content_type: str | None = None,
        metadata: dict | None = None,
    ) -> None:
        """
        Put a shipment file into the archive bucket.

        Args:
            local_path: Shipment file on disk.
            bucket: Archive bucket.
            key: Object key, including any prefix.
            content_type: Content-Type stored with the object.
            metadata: User metadata stored with the object.

        Raises:
            UploadError: If S3 rejected the upload or could not be reached.
        """
        extra_args = {}
        if content_type:
            extra_args["ContentType"] = content_type
        if metadata:
            extra_args["Metadata"] = metadata

        logger.debug("Archiving %s as s3://%s/%s", local_path.name, bucket, key)
        try:
            self._client.upload_file(
                str(local_path),
                bucket,
                key,
                ExtraArgs=extra_args if extra_args else None,
            )
        except (ClientError, BotoCoreError, S3UploadFailedError, OSError) as e:
            logger.error("S3 rejected %s: %s", local_path.name, e)
            raise UploadError(
                f"Upload of {local_path.name} to s3://{bucket}/{key} failed: {e}",
                component="s3",
                original_error=e,
            ) from e
        logger.info("Archived s3://%s/%s", bucket, key)

    def object_url(self, bucket: str, key: str) -> str:
        """Virtual-hosted style URL of an object."""
        return f"https://{bucket}.s3.{self.region}.amazonaws.com/{quote(key)}"
