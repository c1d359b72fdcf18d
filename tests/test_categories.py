# tests/test_categories.py

from __future__ import annotations

import pytest

from task_categorizer.categories import CategoryRegistry
from task_categorizer.errors import NamingConflictError


def test_add_member_is_idempotent() -> None:
    registry = CategoryRegistry()

    assert registry.add_member("js", "js:lint") is True
    assert registry.add_member("js", "js:lint") is False
    assert registry.members("js") == ["js:lint"]


def test_members_keep_first_registration_order() -> None:
    registry = CategoryRegistry()
    for member in ["js:b", "js:a", "js:b", "js:c"]:
        registry.add_member("js", member)

    assert registry.members("js") == ["js:b", "js:a", "js:c"]


def test_add_member_to_registered_name_fails() -> None:
    registry = CategoryRegistry()
    registry.mark_registered("js")

    with pytest.raises(NamingConflictError) as excinfo:
        registry.add_member("js", "js:lint")

    assert excinfo.value.category == "js"
    assert excinfo.value.member == "js:lint"
    assert "js" not in registry


def test_take_pending_members_removes_category() -> None:
    registry = CategoryRegistry()
    registry.add_member("css", "css:min")
    registry.add_member("js", "js:min")

    assert registry.pending_categories() == ["css", "js"]
    assert registry.take_pending_members("css") == ["css:min"]
    assert registry.take_pending_members("css") is None
    assert registry.pending_categories() == ["js"]
    assert len(registry) == 1
