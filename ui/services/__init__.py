"""Service layer for the Streamlit host.

These services implement the tracker's host collaborators (data gateway,
notifier, navigator) so UI components can remain thin and focused on
presentation.
"""

from .emission_service import EmissionService
from .notifier import StreamlitNotifier
from .navigator import QueryParamNavigator

__all__ = [
    "EmissionService",
    "StreamlitNotifier",
    "QueryParamNavigator",
]
