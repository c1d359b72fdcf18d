"""Errors and warnings raised while categorizing tasks."""
from __future__ import annotations


class NamingConflictError(ValueError):
    """A category name collides with a task that is already registered."""

    def __init__(self, category: str, member: str) -> None:
        self.category = category
        self.member = member
        super().__init__(
            f"Cannot add '{member}' to category '{category}', "
            "because a task with the name of the category already exists!"
        )


class LifecycleWarning(UserWarning):
    """Finalization ran twice, too early, or not at all."""
