# tests/test_graph.py

from __future__ import annotations

import pytest

from task_categorizer.categorizer import TaskCategorizer
from task_categorizer.graph import TaskGraph


def test_duplicate_task_rejected() -> None:
    graph = TaskGraph()
    graph.task("build")

    with pytest.raises(ValueError, match="already exists"):
        graph.task("build")


def test_format_graph_and_missing_dependencies() -> None:
    graph = TaskGraph()
    graph.task("fmt")
    graph.task("lint", ["fmt", "typecheck"])

    assert graph.format_graph() == ["fmt <- (no deps)", "lint <- fmt, typecheck"]
    assert graph.missing_dependencies() == [("lint", "typecheck")]


def test_categorizer_wrapping_graph() -> None:
    graph = TaskGraph()
    categorizer = TaskCategorizer(graph.task)

    handle = categorizer.task("test:unit", [])
    categorizer.task("test:e2e", [])
    categorizer.finalize()

    assert handle is graph.tasks["test:unit"]
    assert graph.tasks["test"].dependencies == ["test:unit", "test:e2e"]
    assert graph.missing_dependencies() == []
