# tests/conftest.py

from __future__ import annotations

import pytest

from task_categorizer.categorizer import TaskCategorizer
from task_categorizer.config_loader import CategorizerOptions

from .fakes import RecordingRegistrar


def noop() -> None:
    return None


@pytest.fixture()
def registrar() -> RecordingRegistrar:
    return RecordingRegistrar()


@pytest.fixture()
def categorizer(registrar: RecordingRegistrar) -> TaskCategorizer:
    """Categorizer with debug tracing on, wrapping a recording registrar."""
    return TaskCategorizer(registrar, CategorizerOptions(debug=True))
