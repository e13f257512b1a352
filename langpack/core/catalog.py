# langpack/core/catalog.py

"""
Static catalog of installable language packs.

The catalog is built once at startup and never changes afterwards.
Required components are always listed first, the rest keep their
declared order.
"""

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

import yaml
from pydantic import ValidationError

from langpack.core.models import Component
from langpack.core.exceptions import CatalogError, UnknownComponentError

DEFAULT_COMPONENTS: List[Dict[str, Any]] = [
    {"id": "id", "displayName": "Indonesian", "sizeEstimate": "~95 MB", "required": True, "defaultSelected": True},
    {"id": "zh", "displayName": "Chinese", "sizeEstimate": "~110 MB", "defaultSelected": True},
    {"id": "ja", "displayName": "Japanese", "sizeEstimate": "~105 MB", "defaultSelected": True},
    {"id": "ko", "displayName": "Korean", "sizeEstimate": "~100 MB"},
    {"id": "es", "displayName": "Spanish", "sizeEstimate": "~95 MB", "defaultSelected": True},
    {"id": "fr", "displayName": "French", "sizeEstimate": "~95 MB"},
    {"id": "de", "displayName": "German", "sizeEstimate": "~95 MB"},
    {"id": "pt", "displayName": "Portuguese", "sizeEstimate": "~95 MB"},
    {"id": "ru", "displayName": "Russian", "sizeEstimate": "~100 MB"},
    {"id": "ar", "displayName": "Arabic", "sizeEstimate": "~100 MB", "defaultSelected": True},
]

# ==============================================================
# CATALOG CLASS
# ==============================================================

class Catalog:
    """Immutable, ordered set of components."""

    def __init__(self, components: Iterable[Component]):
        components = list(components)
        seen: set[str] = set()
        for c in components:
            if c.id in seen:
                raise CatalogError(f"duplicate component id '{c.id}'")
            seen.add(c.id)

        required = [c for c in components if c.required]
        optional = [c for c in components if not c.required]
        self._components: Tuple[Component, ...] = tuple(required + optional)
        self._by_id: Dict[str, Component] = {c.id: c for c in self._components}

    @classmethod
    def from_dicts(cls, entries: Iterable[Dict[str, Any]]) -> "Catalog":
        try:
            return cls(Component.model_validate(e) for e in entries)
        except ValidationError as e:
            raise CatalogError(str(e))

    @classmethod
    def from_yaml(cls, path: Path) -> "Catalog":
        """Load a catalog from a YAML file with a top-level `components` list."""
        try:
            data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(f"cannot read {path}: {e}")

        if not isinstance(data, dict) or not isinstance(data.get("components"), list):
            raise CatalogError(f"{path} must define a 'components' list")
        return cls.from_dicts(data["components"])

    def list_components(self) -> Tuple[Component, ...]:
        return self._components

    def get(self, component_id: str) -> Component:
        component = self._by_id.get(component_id)
        if component is None:
            raise UnknownComponentError(component_id, self.ids())
        return component

    def ids(self) -> List[str]:
        return [c.id for c in self._components]

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._by_id

    def __iter__(self):
        return iter(self._components)

    def __len__(self) -> int:
        return len(self._components)


def default_catalog(catalog_file: Optional[Path] = None) -> Catalog:
    """Return the catalog from `catalog_file` if given, else the built-in one."""
    if catalog_file:
        return Catalog.from_yaml(catalog_file)
    return Catalog.from_dicts(DEFAULT_COMPONENTS)
