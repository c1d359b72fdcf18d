#!/usr/bin/env python3
"""CLI entry point: categorize the tasks of a YAML task file."""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from task_categorizer.categorizer import TaskCategorizer
from task_categorizer.config_loader import load_options
from task_categorizer.errors import NamingConflictError
from task_categorizer.graph import TaskGraph
from task_categorizer.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Infer category tasks from delimited task names")
    parser.add_argument("command", choices=["list", "graph", "categories"], help="Command to execute")
    parser.add_argument("tasks_file", type=Path, help="YAML file with a 'tasks' mapping of name -> dependencies")
    parser.add_argument("--config", type=Path, help="YAML file with a 'categorizer' section")
    parser.add_argument("--separator", dest="separator", help="Override the category separator")
    parser.add_argument("--debug", action="store_true", help="Trace category linkage")
    return parser.parse_args(argv)


def read_tasks(path: Path) -> Dict[str, List[str]]:
    with path.open("r", encoding="utf-8") as handle:
        document = yaml.safe_load(handle) or {}
    if not isinstance(document, dict):
        raise ValueError(f"{path} must contain a mapping")
    tasks = document.get("tasks") or {}
    if not isinstance(tasks, dict):
        raise ValueError(f"'tasks' in {path} must be a mapping")
    return {str(name): _dependency_list(path, name, deps) for name, deps in tasks.items()}


def _dependency_list(path: Path, name: object, deps: object) -> List[str]:
    if deps is None:
        return []
    if isinstance(deps, str):
        return [deps]
    if not isinstance(deps, list):
        raise ValueError(f"Dependencies of '{name}' in {path} must be a list or a task name")
    return [str(dep) for dep in deps]


def build_graph(tasks: Dict[str, List[str]], categorizer: TaskCategorizer, graph: TaskGraph) -> List[str]:
    with categorizer:
        for name, dependencies in tasks.items():
            categorizer.task(name, dependencies)
        created = categorizer.finalize()
    for task_name, dependency in graph.missing_dependencies():
        logger.warning("Task '%s' depends on unknown task '%s'", task_name, dependency)
    return created


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.WARNING)

    try:
        options = load_options(args.config)
        if args.separator:
            options = replace(options, category_separator=args.separator)
        if args.debug:
            options = replace(options, debug=True)
        tasks = read_tasks(args.tasks_file)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    graph = TaskGraph()
    categorizer = TaskCategorizer(graph.task, options)
    try:
        created = build_graph(tasks, categorizer, graph)
    except NamingConflictError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.command == "list":
        for task_name in sorted(graph.tasks):
            print(task_name)
        return 0

    if args.command == "graph":
        for line in graph.format_graph():
            print(line)
        return 0

    if args.command == "categories":
        for category in created:
            print(f"{category}: {', '.join(graph.tasks[category].dependencies)}")
        return 0

    raise ValueError(f"Unhandled command {args.command}")


if __name__ == "__main__":
    sys.exit(main())
