"""In-process task registry used as the host for category tasks."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple


@dataclass
class Task:
    name: str
    dependencies: List[str]
    body: Optional[Callable[[], None]] = None


@dataclass
class TaskGraph:
    tasks: Dict[str, Task] = field(default_factory=dict)

    def task(
        self,
        name: str,
        dependencies: Optional[Sequence[str]] = None,
        body: Optional[Callable[[], None]] = None,
    ) -> Task:
        if name in self.tasks:
            raise ValueError(f"Task {name} already exists")
        registered = Task(name=name, dependencies=list(dependencies or []), body=body)
        self.tasks[name] = registered
        return registered

    def format_graph(self) -> List[str]:
        lines = []
        for task_name, task in self.tasks.items():
            dependencies = ", ".join(task.dependencies) or "(no deps)"
            lines.append(f"{task_name} <- {dependencies}")
        return lines

    def missing_dependencies(self) -> List[Tuple[str, str]]:
        return [
            (task.name, dependency)
            for task in self.tasks.values()
            for dependency in task.dependencies
            if dependency not in self.tasks
        ]
