"""
Framework-agnostic business logic for the emission tracker widget.

Nothing in this package imports a UI framework. Host services (data
gateway, notifier, navigator) are passed in, so the same store can back a
Streamlit page, a test harness or any other frontend.
"""

from .state_manager import EmissionStateStore
from .events import EventEmitter, WidgetEvent, EVENT_CONTRACT
from .observable import RecordStream, Subscription
from .validation_manager import ValidationManager
from .interfaces import GatewayError, NavigationTarget, LoggingNotifier
from .row_actions import RowAction, get_row_actions

__all__ = [
    "EmissionStateStore",
    "EventEmitter",
    "WidgetEvent",
    "EVENT_CONTRACT",
    "RecordStream",
    "Subscription",
    "ValidationManager",
    "GatewayError",
    "NavigationTarget",
    "LoggingNotifier",
    "RowAction",
    "get_row_actions",
]
