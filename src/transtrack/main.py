"""Main entry point for the warehouse shipment processors."""

import argparse
import logging
import sys
from pathlib import Path

from transtrack.config import ProfileSettings, config
from transtrack.handlers.batch import run_batch, run_watch_loop
from transtrack.infrastructure import DependenciesContainer
from transtrack.models.schemas import BatchSummary, Warehouse

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger(__name__)


def create_file_handler(log_file: Path) -> logging.FileHandler:
    """Append-only log file sink, one timestamped line per record."""
    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logging(log_file: Path | None = None) -> None:
    """Configure console logging, plus the log file when one is given."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(create_file_handler(log_file))

    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        handlers=handlers,
        force=True,
    )


def build_arg_parser(warehouse: Warehouse | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate, archive and dispose of warehouse shipment files"
    )
    if warehouse is None:
        parser.add_argument(
            "warehouse",
            choices=[w.value for w in Warehouse],
            help="Warehouse profile to process",
        )
    parser.add_argument("--incoming", type=Path, help="Folder with new shipment files")
    parser.add_argument("--processed", type=Path, help="Folder for processed reports")
    parser.add_argument("--errors", type=Path, help="Folder for error reports")
    parser.add_argument("--log-file", type=Path, help="Log file to append to")
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep polling the incoming folder instead of exiting after one pass",
    )
    parser.add_argument(
        "--poll-interval",
        type=float,
        default=None,
        help="Seconds between scans in watch mode",
    )
    return parser


def resolve_settings(args: argparse.Namespace, warehouse: Warehouse) -> ProfileSettings:
    """Apply command line overrides on top of the configured folders."""
    settings = config.profile_settings(warehouse)
    if args.incoming:
        settings.incoming_dir = args.incoming
    if args.processed:
        settings.processed_dir = args.processed
    if args.errors:
        settings.errors_dir = args.errors
    if args.log_file:
        settings.log_file = args.log_file
    return settings


def run_processor(
    warehouse: Warehouse,
    settings: ProfileSettings,
    container: DependenciesContainer,
    watch: bool = False,
    poll_interval: float | None = None,
) -> BatchSummary | None:
    """
    Process the incoming folder of a warehouse.

    Args:
        warehouse: Warehouse profile.
        settings: Resolved folders for the profile.
        container: DI container providing the pipeline collaborators.
        watch: Keep polling until interrupted.
        poll_interval: Seconds between scans in watch mode.

    Returns:
        BatchSummary of the single pass, or None in watch mode.
    """
    logger.info("=" * 60)
    logger.info("%s Warehouse Processor started", warehouse.label)
    logger.info("=" * 60)

    config.validate()

    container.warehouse.override(warehouse.value)
    pipeline = container.pipeline(profile_settings=settings)

    if watch:
        run_watch_loop(
            pipeline,
            settings.incoming_dir,
            settings.extension,
            poll_interval or config.poll_interval,
        )
        return None

    summary = run_batch(pipeline, settings.incoming_dir, settings.extension)
    logger.info("%s Warehouse Processor completed", warehouse.label)
    return summary


def main(argv: list[str] | None = None, warehouse: Warehouse | None = None) -> None:
    """Entry point with CLI argument parsing."""
    args = build_arg_parser(warehouse).parse_args(argv)
    warehouse = warehouse or Warehouse(args.warehouse)
    settings = resolve_settings(args, warehouse)

    setup_logging(settings.log_file)

    try:
        run_processor(
            warehouse,
            settings,
            DependenciesContainer(),
            watch=args.watch,
            poll_interval=args.poll_interval,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except Exception as e:
        logger.error("%s Warehouse Processor failed: %s", warehouse.label, e, exc_info=True)
        sys.exit(1)


def north() -> None:
    main(warehouse=Warehouse.NORTH)


def south() -> None:
    main(warehouse=Warehouse.SOUTH)


if __name__ == "__main__":
    main()
