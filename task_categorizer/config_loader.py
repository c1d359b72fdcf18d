"""Categorizer options and their YAML loading."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from task_categorizer.names import DEFAULT_SEPARATOR

CONFIG_SECTION = "categorizer"


@dataclass(frozen=True)
class CategorizerOptions:
    category_separator: str = DEFAULT_SEPARATOR
    debug: bool = False

    def __post_init__(self) -> None:
        if not self.category_separator:
            raise ValueError("category_separator must be a non-empty string")

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "CategorizerOptions":
        separator = raw.get("category_separator", raw.get("categorySeparator"))
        return cls(
            category_separator=DEFAULT_SEPARATOR if separator is None else str(separator),
            debug=bool(raw.get("debug", False)),
        )


def load_options(path: Optional[Path] = None) -> CategorizerOptions:
    if path is None:
        return CategorizerOptions()
    section = _read_yaml(path).get(CONFIG_SECTION) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{CONFIG_SECTION}' in {path} must be a mapping")
    return CategorizerOptions.from_mapping(section)


def _read_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        document = yaml.safe_load(handle) or {}
    if not isinstance(document, dict):
        raise ValueError(f"{path} must contain a mapping")
    return document
