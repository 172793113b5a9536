"""Document converters: merged manuscript to HTML, PDF and LaTeX."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Protocol

from .errors import ConfigError
from .orchestrator import utils
from .orchestrator.logging import get_logger
from .tools import run_tool


log = get_logger("manuscript_build.converters")

ToolRunner = Callable[..., str]


class Converter(Protocol):
    def to_html(self, source: Path, target: Path) -> None: ...

    def to_pdf(self, source: Path, target: Path) -> None: ...

    def to_latex(self, source: Path, target: Path) -> None: ...

    def html_to_pdf(self, source: Path, target: Path) -> None: ...


def render_command(template: List[str], source: Path, target: Path) -> List[str]:
    """Fill `{input}`/`{output}`; literal braces must be doubled (`{{`, `}}`)."""
    try:
        return [part.format(input=source, output=target) for part in template]
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise ConfigError(f"Bad converter template {template!r}: {e!r}") from e


class CommandConverter:
    """Converter backed by external programs, one argument template per direction.

    Templates use `{input}` and `{output}` placeholders. Commands run with
    `cwd` as working directory, which is where the LaTeX toolchain looks for
    the staged preamble.
    """

    def __init__(
        self,
        commands: Dict[str, List[str]],
        cwd: Path | None = None,
        runner: ToolRunner = run_tool,
    ):
        self.commands = commands
        self.cwd = cwd
        self.runner = runner

    @classmethod
    def from_params(cls, params: dict, runner: ToolRunner = run_tool) -> "CommandConverter":
        return cls(utils.converter_commands(params), cwd=utils.root(params), runner=runner)

    def _convert(self, kind: str, source: Path, target: Path) -> None:
        argv = render_command(self.commands[kind], source, target)
        log.info("Converting %s -> %s (%s)", source, target, kind)
        self.runner(argv, cwd=self.cwd)

    def to_html(self, source: Path, target: Path) -> None:
        self._convert("html", source, target)

    def to_pdf(self, source: Path, target: Path) -> None:
        self._convert("pdf", source, target)

    def to_latex(self, source: Path, target: Path) -> None:
        self._convert("latex", source, target)

    def html_to_pdf(self, source: Path, target: Path) -> None:
        self._convert("html_pdf", source, target)
