"""Blocking invocation of external programs."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Sequence

from .errors import ExternalToolFailure
from .orchestrator.logging import get_logger


log = get_logger("manuscript_build.tools")

_STDERR_TAIL = 20


def _tail(text: str | None) -> str:
    if not text:
        return ""
    return "\n".join(text.strip().splitlines()[-_STDERR_TAIL:])


def run_tool(
    args: Sequence[str | Path], cwd: Path | None = None, capture: bool = False
) -> str:
    """Run `args` to completion; nonzero exit raises ExternalToolFailure.

    Returns stdout when `capture` is set, otherwise an empty string.
    """
    argv = [str(a) for a in args]
    log.debug("Exec: %s", " ".join(argv))
    try:
        result = subprocess.run(
            argv,
            cwd=str(cwd) if cwd else None,
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise ExternalToolFailure(argv, None, str(e)) from e
    if result.returncode != 0:
        raise ExternalToolFailure(argv, result.returncode, _tail(result.stderr))
    return result.stdout if capture else ""
