"""Configuration management for the shipment processors."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from transtrack.models.schemas import Warehouse

# Load .env file from project root
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(env_path)


@dataclass
class ProfileSettings:
    """Directories and log file of one warehouse profile."""

    warehouse: Warehouse
    incoming_dir: Path
    processed_dir: Path
    errors_dir: Path
    log_file: Path

    @property
    def extension(self) -> str:
        return self.warehouse.extension


@dataclass
class Config:
    """Processor configuration loaded from environment variables."""

    # AWS
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")
    aws_profile: str = os.getenv("AWS_PROFILE", "")

    # Archive bucket
    archive_bucket: str = os.getenv("ARCHIVE_BUCKET", "")
    archive_prefix: str = os.getenv("ARCHIVE_PREFIX", "")
    archive_public_url: str = os.getenv("ARCHIVE_PUBLIC_URL", "")

    # Local folders
    data_root: str = os.getenv("DATA_ROOT", "./data")

    # Watch mode
    poll_interval: float = float(os.getenv("POLL_INTERVAL", "30"))

    def profile_settings(self, warehouse: Warehouse) -> ProfileSettings:
        """
        Resolve folders for a warehouse.

        ``<PROFILE>_INCOMING_DIR`` and friends override the defaults under
        ``DATA_ROOT``.

        Args:
            warehouse: Warehouse profile.

        Returns:
            ProfileSettings for the warehouse.
        """
        prefix = warehouse.value.upper()
        base = Path(self.data_root) / warehouse.value

        def _path(name: str, default: Path) -> Path:
            value = os.getenv(f"{prefix}_{name}")
            return Path(value) if value else default

        return ProfileSettings(
            warehouse=warehouse,
            incoming_dir=_path("INCOMING_DIR", base / "incoming"),
            processed_dir=_path("PROCESSED_DIR", base / "processed"),
            errors_dir=_path("ERRORS_DIR", base / "errors"),
            log_file=_path(
                "LOG_FILE", Path(self.data_root) / "logs" / f"{warehouse.value}.log"
            ),
        )

    def validate(self) -> None:
        """Validate required configuration."""
        if not self.archive_bucket:
            raise ValueError("ARCHIVE_BUCKET environment variable is required")
        if self.poll_interval <= 0:
            raise ValueError("POLL_INTERVAL must be greater than zero")


config = Config()
