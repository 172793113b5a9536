"""Task modules live here, one per namespace (`building.py` -> `build:*`).

Decorate task functions with `@orchestrator.task(name=..., prerequisites=[...])`.
Shared lookups of runtime collaborators stay in this file.
"""

from __future__ import annotations

from ..converters import CommandConverter, Converter
from ..orchestrator.utils import _get
from ..tools import run_tool


def converter(params: dict) -> Converter:
    conv = _get(params, "runtime", "converter")
    if conv is None:
        conv = CommandConverter.from_params(params, runner=tool_runner(params))
    return conv


def tool_runner(params: dict):
    return _get(params, "runtime", "run_tool", default=run_tool)
