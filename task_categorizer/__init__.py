"""Infer category tasks from delimited task names."""
from __future__ import annotations

from task_categorizer.categories import CategoryRegistry
from task_categorizer.categorizer import TaskCategorizer
from task_categorizer.config_loader import CategorizerOptions, load_options
from task_categorizer.errors import LifecycleWarning, NamingConflictError
from task_categorizer.graph import Task, TaskGraph
from task_categorizer.names import all_ancestor_categories, parent_category

__all__ = [
    "CategorizerOptions",
    "CategoryRegistry",
    "LifecycleWarning",
    "NamingConflictError",
    "Task",
    "TaskCategorizer",
    "TaskGraph",
    "all_ancestor_categories",
    "load_options",
    "parent_category",
]
