"""Pending category membership and registered task names."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from task_categorizer.errors import NamingConflictError


@dataclass
class CategoryRegistry:
    """Maps each pending category to its ordered, duplicate-free members.

    Also tracks every name already registered as a real task so that such a
    name can never be reused as a category.
    """

    pending: Dict[str, List[str]] = field(default_factory=dict)
    registered: Set[str] = field(default_factory=set)

    def __len__(self) -> int:
        return len(self.pending)

    def __contains__(self, category: object) -> bool:
        return category in self.pending

    def check_member(self, category: str, member: str) -> None:
        if category in self.registered:
            raise NamingConflictError(category, member)

    def add_member(self, category: str, member: str) -> bool:
        """Add ``member`` to ``category``; return False if it was already there."""
        self.check_member(category, member)
        members = self.pending.setdefault(category, [])
        if member in members:
            return False
        members.append(member)
        return True

    def take_pending_members(self, category: str) -> Optional[List[str]]:
        return self.pending.pop(category, None)

    def pending_categories(self) -> List[str]:
        return list(self.pending)

    def members(self, category: str) -> List[str]:
        return list(self.pending.get(category, []))

    def mark_registered(self, name: str) -> None:
        self.registered.add(name)

    def is_registered(self, name: str) -> bool:
        return name in self.registered
