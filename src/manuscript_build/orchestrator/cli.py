from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from ..errors import BuildError
from .core import Pipeline, TaskGraph, TaskSpec
from .logging import detach, get_logger, log_to_file


app = typer.Typer(add_completion=False, help="Manuscript build and stats tasks")
log = get_logger("orchestrator.cli")

DEFAULT_CONFIG = "configs/build.yaml"


def load_config(path: str | Path, required: bool = True) -> dict:
    p = Path(path)
    if not p.exists() and not required:
        log.debug("No config at %s, using defaults", p)
        return {}
    with open(p, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def discover_tasks(tasks_pkg: str = "manuscript_build.tasks") -> TaskGraph:
    """Import all modules in the tasks package and collect decorated functions."""
    graph = TaskGraph()
    try:
        pkg = importlib.import_module(tasks_pkg)
    except ModuleNotFoundError:
        log.warning("No tasks package found.")
        return graph
    for m in pkgutil.iter_modules(pkg.__path__, prefix=f"{tasks_pkg}."):
        try:
            mod = importlib.import_module(m.name)
        except Exception as e:  # noqa: BLE001
            log.warning("Failed to import %s: %s", m.name, e)
            continue
        for attr_name in dir(mod):
            obj = getattr(mod, attr_name)
            spec = getattr(obj, "_task_spec", None)
            if isinstance(spec, TaskSpec) and graph.tasks.get(spec.name) is not spec:
                graph.add(spec)
    return graph


def build_params(config: str | None, root: str) -> dict:
    # An explicit --config must exist; the default one under --root is optional
    root_path = Path(root).resolve()
    if config is None:
        params = dict(load_config(root_path / DEFAULT_CONFIG, required=False))
    else:
        params = dict(load_config(config))
    runtime = dict(params.get("runtime") or {})
    runtime["root"] = root_path
    params["runtime"] = runtime
    return params



def load_graph() -> TaskGraph:
    try:
        return discover_tasks()
    except BuildError as e:
        typer.echo(f"Cannot load tasks: {e}", err=True)
        raise typer.Exit(code=1)

@app.command("list")
def list_tasks():
    """List discovered tasks and their prerequisites."""
    graph = load_graph()
    if not len(graph):
        typer.echo("No tasks discovered.")
        raise typer.Exit(code=0)
    for name in sorted(graph.tasks):
        prereqs = graph.tasks[name].qualified_prerequisites
        suffix = f" => {', '.join(prereqs)}" if prereqs else ""
        typer.echo(f"- {name}{suffix}")


@app.command()
def plan(
    targets: List[str] = typer.Argument(..., help="Tasks to resolve, e.g. build:all"),
):
    """Print the execution order for TARGETS without running anything."""
    graph = load_graph()
    try:
        order = graph.resolve(*targets)
    except BuildError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    for i, name in enumerate(order, 1):
        typer.echo(f"{i:2d}. {name}")


@app.command()
def run(
    targets: List[str] = typer.Argument(..., help="Tasks to run, e.g. build:html stats:report"),
    config: Optional[str] = typer.Option(
        None, help=f"Path to YAML config [default: <root>/{DEFAULT_CONFIG}]"
    ),
    root: str = typer.Option(".", help="Project root holding text/ and src/"),
    log_file: Optional[Path] = typer.Option(None, help="Also log to this file"),
):
    """Run TARGETS and their prerequisites, each task at most once."""
    graph = load_graph()
    try:
        params = build_params(config, root)
    except (OSError, yaml.YAMLError) as e:
        typer.echo(f"Cannot load config {config or DEFAULT_CONFIG}: {e}", err=True)
        raise typer.Exit(code=1)
    handler = log_to_file(log_file) if log_file else None
    pipe = Pipeline(graph, params=params, name="run")
    try:
        pipe.invoke(*targets)
    except Exception as e:  # noqa: BLE001
        # Anything raised inside a task is reported against that task
        if pipe.failed is None and not isinstance(e, (BuildError, OSError)):
            raise
        where = f"Task {pipe.failed} failed" if pipe.failed else "Error"
        typer.echo(f"{where}: {e}", err=True)
        raise typer.Exit(code=1)
    finally:
        if handler is not None:
            detach(handler)


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
