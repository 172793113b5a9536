from __future__ import annotations

from typing import Sequence


class BuildError(Exception):
    """Base class for every failure surfaced by the build pipeline."""


class DuplicateTaskError(BuildError):
    def __init__(self, name: str):
        super().__init__(f"Task already defined: {name}")
        self.name = name


class UnknownTaskError(BuildError):
    def __init__(self, name: str, required_by: str | None = None):
        msg = f"Unknown task: {name}"
        if required_by:
            msg += f" (required by {required_by})"
        super().__init__(msg)
        self.name = name
        self.required_by = required_by


class CyclicDependencyError(BuildError):
    def __init__(self, cycle: Sequence[str]):
        super().__init__("Cycle detected in task graph: " + " -> ".join(cycle))
        self.cycle = list(cycle)


class MissingAssetError(BuildError):
    def __init__(self, path, what: str = "file"):
        super().__init__(f"Missing required {what}: {path}")
        self.path = path


class ExternalToolFailure(BuildError):
    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = ""):
        cmd = " ".join(str(a) for a in args)
        if returncode is None:
            msg = f"Could not start external tool: {cmd}"
        else:
            msg = f"External tool exited with status {returncode}: {cmd}"
        if stderr:
            msg += f"\n{stderr}"
        super().__init__(msg)
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr


class ParseError(BuildError):
    """Tool output did not match the expected format."""


class ConfigError(BuildError):
    """Configuration value that cannot be used as given."""
