"""Drop-in wrapper for a task registration function that infers category tasks.

Registering ``js:foo``, ``js:bar`` and ``css:blah`` links each task into the
category named by its prefix. Once every task is registered, ``finalize``
registers ``js`` (depending on ``js:foo`` and ``js:bar``) and ``css``
(depending on ``css:blah``). A category that is registered explicitly, e.g.
``task("js")``, keeps its own dependencies and gains the inferred members.
"""
from __future__ import annotations

import logging
import warnings
from typing import Any, Callable, List, Optional, Tuple

from task_categorizer.categories import CategoryRegistry
from task_categorizer.config_loader import CategorizerOptions
from task_categorizer.errors import LifecycleWarning
from task_categorizer.names import all_ancestor_categories, parent_category

logger = logging.getLogger(__name__)

RegisterTask = Callable[..., Any]


def _noop() -> None:
    return None


class TaskCategorizer:
    def __init__(
        self,
        register_task: RegisterTask,
        options: Optional[CategorizerOptions] = None,
        registry: Optional[CategoryRegistry] = None,
    ) -> None:
        if not callable(register_task):
            raise TypeError("register_task must be a callable taking (name, dependencies, body)")
        self._register_task = register_task
        self.options = options or CategorizerOptions()
        self.registry = registry if registry is not None else CategoryRegistry()
        self.finalized = False

    def __enter__(self) -> "TaskCategorizer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self._warn_unfinalized(stacklevel=3)

    @property
    def separator(self) -> str:
        return self.options.category_separator

    def parent_category(self, name: str) -> Optional[str]:
        return parent_category(name, self.separator)

    def all_ancestor_categories(self, name: str) -> List[str]:
        return all_ancestor_categories(name, self.separator)

    def add_member(self, category: str, member: str) -> bool:
        added = self.registry.add_member(category, member)
        if added:
            self._trace("added '%s' to category '%s'", member, category)
        return added

    def register(
        self,
        name: str,
        dependencies: Any = None,
        body: Optional[Callable[..., Any]] = None,
    ) -> Any:
        """Register ``name`` with the wrapped function, linking it into its categories.

        ``register(name, body)`` is accepted as well as
        ``register(name, dependencies, body)``. A single dependency may be
        given as a plain string. Raises ``NamingConflictError``
        without touching any state when one of the categories of ``name`` is
        already a registered task.
        """
        if callable(dependencies) and body is None:
            body, dependencies = dependencies, None
        if isinstance(dependencies, str):
            dependencies = [dependencies]
        deps: List[str] = list(dependencies or [])

        if self.finalized:
            warnings.warn(
                f"Task '{name}' registered after category tasks were finalized; "
                "it will not be added to any category task.",
                LifecycleWarning,
                stacklevel=2,
            )

        links = self._category_links(name)
        for category, member in links:
            self.registry.check_member(category, member)

        inherited = self.registry.take_pending_members(name)
        if inherited is not None:
            self._trace("merging category '%s' into explicit task: %s", name, inherited)
            deps.extend(inherited)

        for category, member in links:
            self.add_member(category, member)

        self.registry.mark_registered(name)
        return self._register_task(name, deps, body)

    task = register

    def finalize(self) -> List[str]:
        """Register every pending category as a task depending on its members."""
        if self.finalized:
            warnings.warn(
                "Category tasks were already finalized; finalize() should be called once.",
                LifecycleWarning,
                stacklevel=2,
            )
            return []
        self.finalized = True

        created = []
        for category in self.registry.pending_categories():
            members = self.registry.take_pending_members(category) or []
            self._trace("creating category task '%s' with %s", category, members)
            self.registry.mark_registered(category)
            self._register_task(category, members, _noop)
            created.append(category)
        return created

    make_category_tasks = finalize

    def close(self) -> None:
        """Warn about categories left pending because ``finalize`` never ran."""
        self._warn_unfinalized(stacklevel=3)

    def _warn_unfinalized(self, stacklevel: int) -> None:
        if self.finalized or not len(self.registry):
            return
        lines = [
            f"  '{category}' <- {', '.join(self.registry.members(category))}"
            for category in self.registry.pending_categories()
        ]
        warnings.warn(
            "finalize() was never called; these categories were not created as tasks:\n"
            + "\n".join(lines),
            LifecycleWarning,
            stacklevel=stacklevel,
        )

    def pending(self) -> List[Tuple[str, List[str]]]:
        return [
            (category, self.registry.members(category))
            for category in self.registry.pending_categories()
        ]

    def _category_links(self, name: str) -> List[Tuple[str, str]]:
        categories = self.all_ancestor_categories(name)
        links = list(zip(categories, categories[1:]))
        if categories:
            links.append((categories[-1], name))
        return links

    def _trace(self, msg: str, *args: Any) -> None:
        if self.options.debug:
            logger.debug(msg, *args)
