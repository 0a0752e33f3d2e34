from __future__ import annotations

"""Query-parameter navigator.

Navigation targets are written into the page's query parameters
(`view`, `object`, `record_id`, `filter`); `ui/app.py` reads them back on
the next run to decide which page to render.
"""

from typing import MutableMapping, Optional
import logging

import streamlit as st

from emission_tracker.ui_logic.interfaces import NAVIGATION_KINDS, NavigationTarget

logger = logging.getLogger(__name__)


class QueryParamNavigator:
    """Navigator that routes through `st.query_params` (or any mutable mapping)."""

    def __init__(self, params: Optional[MutableMapping[str, str]] = None) -> None:
        self._params = params if params is not None else st.query_params

    def navigate(self, target: NavigationTarget) -> None:
        logger.info(f"Navigating to {target.kind} {target.object_type} {target.record_id or ''}".rstrip())
        self._params.clear()
        self._params["view"] = target.kind
        self._params["object"] = target.object_type
        if target.record_id:
            self._params["record_id"] = target.record_id
        if target.list_filter:
            self._params["filter"] = target.list_filter

    def current_target(self) -> Optional[NavigationTarget]:
        """Return the target encoded in the query parameters, if any."""
        kind = self._params.get("view")
        obj = self._params.get("object")
        if not kind or not obj or kind not in NAVIGATION_KINDS:
            return None
        return NavigationTarget(
            kind=kind,
            object_type=obj,
            record_id=self._params.get("record_id") or None,
            list_filter=self._params.get("filter") or None,
        )

    def back(self) -> None:
        """Return to the tracker page."""
        self._params.clear()
