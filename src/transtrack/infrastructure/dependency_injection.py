"""Dependency injection container for the application."""

import boto3
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from transtrack.config import Config, ProfileSettings, config
from transtrack.infrastructure.north_parser import NorthRecordParser
from transtrack.infrastructure.s3_client import S3Client
from transtrack.infrastructure.south_parser import SouthRecordParser
from transtrack.models.schemas import Warehouse


def _create_session(region: str, profile: str) -> boto3.Session:
    """Create boto3 session, using a named profile when one is configured."""
    if profile:
        return boto3.Session(profile_name=profile, region_name=region)
    return boto3.Session(region_name=region)


def _create_s3_uploader(
    s3_client: S3Client, bucket: str, prefix: str, public_base_url: str
):
    """Factory for S3Uploader to avoid circular import."""
    from transtrack.services.s3_uploader import S3Uploader

    return S3Uploader(
        s3_client, bucket=bucket, prefix=prefix, public_base_url=public_base_url
    )


def _create_north_validator():
    """Factory for NorthValidator to avoid circular import."""
    from transtrack.services.north_validator import NorthValidator

    return NorthValidator()


def _create_south_validator():
    """Factory for SouthValidator to avoid circular import."""
    from transtrack.services.south_validator import SouthValidator

    return SouthValidator()


def _create_outcome_writer():
    """Factory for OutcomeWriter to avoid circular import."""
    from transtrack.services.outcome_writer import OutcomeWriter

    return OutcomeWriter()


def _resolve_profile_settings(settings: Config, warehouse: str) -> ProfileSettings:
    return settings.profile_settings(Warehouse(warehouse))


def _create_pipeline(
    parser,
    validator,
    uploader,
    outcome_writer,
    profile_settings: ProfileSettings,
):
    """Factory for ProcessingPipeline to avoid circular import."""
    from transtrack.handlers.pipeline import ProcessingPipeline

    return ProcessingPipeline(
        parser=parser,
        validator=validator,
        uploader=uploader,
        outcome_writer=outcome_writer,
        processed_dir=profile_settings.processed_dir,
        errors_dir=profile_settings.errors_dir,
    )


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    # Override with "south" to wire the South warehouse
    warehouse = providers.Object(Warehouse.NORTH.value)

    settings = providers.Object(config)

    session = providers.Singleton(
        _create_session,
        region=settings.provided.aws_region,
        profile=settings.provided.aws_profile,
    )

    # S3 dependency chain
    s3_boto_client = providers.Singleton(
        lambda session: session.client("s3"),
        session=session,
    )

    s3_client = providers.Singleton(
        S3Client,
        client=s3_boto_client,
    )

    archive_uploader = providers.Singleton(
        _create_s3_uploader,
        s3_client=s3_client,
        bucket=settings.provided.archive_bucket,
        prefix=settings.provided.archive_prefix,
        public_base_url=settings.provided.archive_public_url,
    )

    # Profile-specific parsing and validation
    record_parser = providers.Selector(
        warehouse,
        north=providers.Singleton(NorthRecordParser),
        south=providers.Singleton(SouthRecordParser),
    )

    record_validator = providers.Selector(
        warehouse,
        north=providers.Singleton(_create_north_validator),
        south=providers.Singleton(_create_south_validator),
    )

    outcome_writer = providers.Singleton(_create_outcome_writer)

    profile_settings = providers.Factory(
        _resolve_profile_settings,
        settings=settings,
        warehouse=warehouse,
    )

    pipeline = providers.Factory(
        _create_pipeline,
        parser=record_parser,
        validator=record_validator,
        uploader=archive_uploader,
        outcome_writer=outcome_writer,
        profile_settings=profile_settings,
    )
