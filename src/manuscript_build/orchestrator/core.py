from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Sequence

from ..errors import CyclicDependencyError, DuplicateTaskError, UnknownTaskError
from .logging import get_logger


SEP = ":"


def _noop(params: dict) -> None:
    return None


def qualify(name: str, namespace: str) -> str:
    """Resolve a prerequisite name relative to the namespace of its dependent."""
    if SEP in name or not namespace:
        return name
    return f"{namespace}{SEP}{name}"


@dataclass
class TaskSpec:
    name: str
    prerequisites: list[str] = field(default_factory=list)
    fn: Callable[..., None] = _noop

    @property
    def namespace(self) -> str:
        return self.name.rpartition(SEP)[0]

    @property
    def qualified_prerequisites(self) -> list[str]:
        return [qualify(p, self.namespace) for p in self.prerequisites]


def task(name: str, prerequisites: Sequence[str] = ()):
    """Decorator to declare a task on a function.

    `name` is qualified by namespace (`build:html`). Prerequisites without a
    namespace refer to tasks in the same namespace. The wrapped function
    receives a single dict `params` (parsed config plus `runtime` objects).
    """

    def deco(fn: Callable[..., None]):
        spec = TaskSpec(name=name, prerequisites=list(prerequisites), fn=fn)
        setattr(fn, "_task_spec", spec)
        return fn

    return deco


class TaskGraph:
    """Registry of tasks keyed by qualified name."""

    def __init__(self, specs: Iterable[TaskSpec] = ()):
        self.tasks: dict[str, TaskSpec] = {}
        for spec in specs:
            self.add(spec)

    def __contains__(self, name: str) -> bool:
        return name in self.tasks

    def __len__(self) -> int:
        return len(self.tasks)

    def add(self, spec: TaskSpec) -> TaskSpec:
        if spec.name in self.tasks:
            raise DuplicateTaskError(spec.name)
        self.tasks[spec.name] = spec
        return spec

    def define(
        self,
        name: str,
        prerequisites: Sequence[str] = (),
        fn: Callable[..., None] | None = None,
    ) -> TaskSpec:
        return self.add(
            TaskSpec(name=name, prerequisites=list(prerequisites), fn=fn or _noop)
        )

    def get(self, name: str) -> TaskSpec:
        try:
            return self.tasks[name]
        except KeyError:
            raise UnknownTaskError(name) from None

    def resolve(self, *names: str) -> list[str]:
        """Linear execution order for `names` and everything they require.

        Depth-first: each prerequisite is emitted before its dependents and
        every task at most once. Raises before anything runs.
        """
        order: list[str] = []
        done: set[str] = set()
        in_progress: list[str] = []

        def visit(name: str, required_by: str | None) -> None:
            if name in done:
                return
            if name in in_progress:
                start = in_progress.index(name)
                raise CyclicDependencyError(in_progress[start:] + [name])
            spec = self.tasks.get(name)
            if spec is None:
                raise UnknownTaskError(name, required_by)
            in_progress.append(name)
            for prereq in spec.qualified_prerequisites:
                visit(prereq, name)
            in_progress.pop()
            done.add(name)
            order.append(name)

        for name in names:
            visit(name, None)
        return order


class Pipeline:
    """Runs tasks from a graph; owns the run state of one invocation."""

    def __init__(self, graph: TaskGraph, params: dict | None = None, name: str = "pipeline"):
        self.name = name
        self.graph = graph
        self.params = params if params is not None else {}
        self.executed: list[str] = []
        self.failed: str | None = None
        self.logger = get_logger(f"orchestrator.{self.name}")

    def invoke(self, *names: str) -> list[str]:
        """Run `names` with their prerequisites. Returns the tasks run by this call."""
        order = self.graph.resolve(*names)
        pending = [n for n in order if n not in self.executed]
        if not pending:
            self.logger.debug("Nothing to do for %s", ", ".join(names))
            return []
        self.logger.info("Selected steps: %s", " → ".join(pending))

        ran: list[str] = []
        for step_name in pending:
            spec = self.graph.tasks[step_name]
            step_logger = get_logger(f"orchestrator.{self.name}.{step_name}")
            step_logger.debug("Run: %s", step_name)
            try:
                spec.fn(params=self.params)
            except Exception:
                self.failed = step_name
                step_logger.error("Step failed: %s", step_name)
                raise
            self.executed.append(step_name)
            ran.append(step_name)
        return ran
