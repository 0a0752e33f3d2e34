from __future__ import annotations

"""Streamlit notifier: shows store notifications as toasts."""

from typing import Callable, Optional
import logging

import streamlit as st

from emission_tracker.ui_logic.interfaces import normalize_severity

logger = logging.getLogger(__name__)

_ICONS = {"success": "✅", "error": "❌", "info": "ℹ️"}


class StreamlitNotifier:
    """Notifier backed by `st.toast`. Every message is also logged."""

    def __init__(self, toast: Optional[Callable[..., object]] = None) -> None:
        self._toast = toast or st.toast

    def notify(self, title: str, message: str, severity: str) -> None:
        severity = normalize_severity(severity)
        if severity == "error":
            logger.error(f"{title}: {message}")
        else:
            logger.info(f"{title}: {message}")
        self._toast(f"**{title}** {message}", icon=_ICONS[severity])
