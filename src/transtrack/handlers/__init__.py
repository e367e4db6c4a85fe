"""Handlers package."""

from transtrack.handlers.batch import list_incoming_files, run_batch, run_watch_loop
from transtrack.handlers.pipeline import ProcessingPipeline

__all__ = ["ProcessingPipeline", "list_incoming_files", "run_batch", "run_watch_loop"]
