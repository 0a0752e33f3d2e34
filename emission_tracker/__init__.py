"""Carbon footprint tracker: emission list/create widget core.

Re-exports the data model and the state store for convenient imports.
"""

from .models import (  # noqa: F401
    EmissionSource,
    EmissionRecord,
    EmissionInput,
    FormState,
    ListStatus,
    ListViewState,
    source_options,
)
from .config import TrackerConfig, FormResetPolicy, UnknownRowActionPolicy, load_config  # noqa: F401
from .ui_logic import EmissionStateStore, EventEmitter, GatewayError  # noqa: F401

__all__ = [
    "EmissionSource",
    "EmissionRecord",
    "EmissionInput",
    "FormState",
    "ListStatus",
    "ListViewState",
    "source_options",
    "TrackerConfig",
    "FormResetPolicy",
    "UnknownRowActionPolicy",
    "load_config",
    "EmissionStateStore",
    "EventEmitter",
    "GatewayError",
]
