"""UI components for the emission tracker Streamlit app.

Each component defines a class inheriting from `BaseComponent` with a
`render()` method, plus a `render_*` function the app calls.
"""

from .base_component import BaseComponent  # re-export for convenience

__all__ = [
    "BaseComponent",
]
