# langpack/core/selection.py

from typing import Dict, Iterable, List, Tuple

from langpack.core.catalog import Catalog
from langpack.core.models import Component
from langpack.core.exceptions import EmptySelectionError, ImmutableComponentError

# ==============================================================
# SELECTION MODEL
# ==============================================================

class Selection:
    """
    User choices over a catalog.

    Required components start checked and can never be unchecked. The
    "at least one selected" rule is only checked by validate(), i.e. when
    leaving the selection step, not on every toggle.
    """

    def __init__(self, catalog: Catalog, defaults: bool = True):
        self.catalog: Catalog = catalog
        self._checked: Dict[str, bool] = {
            c.id: c.required or (defaults and c.default_selected)
            for c in catalog.list_components()
        }

    def toggle(self, component_id: str, checked: bool) -> None:
        component = self.catalog.get(component_id)
        if component.required and not checked:
            raise ImmutableComponentError(component_id)
        self._checked[component.id] = checked

    def select(self, component_ids: Iterable[str]) -> None:
        for component_id in component_ids:
            self.toggle(component_id, True)

    def deselect(self, component_ids: Iterable[str]) -> None:
        for component_id in component_ids:
            self.toggle(component_id, False)

    def is_selected(self, component_id: str) -> bool:
        return self._checked[self.catalog.get(component_id).id]

    def selected_ids(self) -> List[str]:
        """Selected ids in catalog order."""
        return [c.id for c in self.catalog.list_components() if self._checked[c.id]]

    def validate(self) -> None:
        if not any(self._checked.values()):
            raise EmptySelectionError()

    def snapshot(self) -> Tuple[Component, ...]:
        """Validate, then freeze the selected components in catalog order."""
        self.validate()
        return tuple(c for c in self.catalog.list_components() if self._checked[c.id])
