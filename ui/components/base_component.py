from __future__ import annotations

"""Base component class for the tracker's Streamlit UI.

All components inherit from `BaseComponent` and implement `render()`.
Components receive the emission state store (and any host services they
need) through their constructor to keep them decoupled and testable.
"""

from dataclasses import dataclass

from emission_tracker.ui_logic import EmissionStateStore


@dataclass
class BaseComponent:
    """Base class for all UI components.

    Attributes:
        state: Emission state store the component reads from and drives
    """

    state: EmissionStateStore

    def render(self) -> None:
        """Render the component.

        Subclasses must override this method to draw Streamlit widgets
        and forward user input to the store.
        """
        raise NotImplementedError("Subclasses must implement render()")
