"""Row actions offered by the emission table.

The action set is static: every row gets the same two actions.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .interfaces import RECORD_EDIT, RECORD_VIEW


@dataclass(frozen=True)
class RowAction:
    label: str
    name: str
    icon: str

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "name": self.name, "icon": self.icon}


VIEW_ACTION = RowAction("View Details", "view", ":material/visibility:")
EDIT_ACTION = RowAction("Edit Record", "edit", ":material/edit:")

# Action name -> navigation kind
ROW_ACTION_TO_NAVIGATION: Dict[str, str] = {
    VIEW_ACTION.name: RECORD_VIEW,
    EDIT_ACTION.name: RECORD_EDIT,
}


def get_row_actions(row: Optional[Any] = None) -> List[RowAction]:
    """Return the actions for a table row. `row` does not affect the result."""
    return [VIEW_ACTION, EDIT_ACTION]


__all__ = [
    "RowAction",
    "VIEW_ACTION",
    "EDIT_ACTION",
    "ROW_ACTION_TO_NAVIGATION",
    "get_row_actions",
]
