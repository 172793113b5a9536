"""Build pipeline for the manuscript: staging, conversion and stats tasks.

Task modules live in `manuscript_build.tasks`; the runner and CLI live in
`manuscript_build.orchestrator`.
"""

__version__ = "0.1.0"
