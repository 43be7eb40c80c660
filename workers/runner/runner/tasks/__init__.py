"""Tasks run by the command-line runner."""

from runner.tasks.import_pages import build_sink, build_source, run_import_task

__all__ = ["build_sink", "build_source", "run_import_task"]
