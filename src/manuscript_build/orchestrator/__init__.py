"""In-repo task runner for the manuscript build.

Provides TaskSpec, TaskGraph and Pipeline primitives, depth-first dependency
resolution, and a Typer CLI.
"""

from .core import TaskSpec, TaskGraph, Pipeline, task  # re-export for convenience

__all__ = ["TaskSpec", "TaskGraph", "Pipeline", "task"]
