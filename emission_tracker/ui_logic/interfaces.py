"""
Host collaborator interfaces for the emission tracker.

The state store never imports a UI framework. The data gateway, notifier
and navigator are injected at construction time and only need to satisfy
these protocols.
"""

from dataclasses import dataclass
from typing import Optional, Protocol
import logging

from ..models import EmissionInput
from .observable import RecordStream

logger = logging.getLogger(__name__)


RECORD_VIEW = "record-view"
RECORD_EDIT = "record-edit"
OBJECT_LIST = "object-list"

NAVIGATION_KINDS = (RECORD_VIEW, RECORD_EDIT, OBJECT_LIST)
SEVERITIES = ("success", "error", "info")


def normalize_severity(severity: str) -> str:
    """Return `severity` if it is a known notification severity, else "info"."""
    if severity in SEVERITIES:
        return severity
    logger.warning(f"Unknown notification severity '{severity}', showing as info")
    return "info"


class GatewayError(Exception):
    """Raised by a data gateway when a create call is rejected.

    `message` is the optional human-readable reason.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "")
        self.message = message


@dataclass(frozen=True)
class NavigationTarget:
    """Where the navigator should go."""
    kind: str
    object_type: str
    record_id: Optional[str] = None
    list_filter: Optional[str] = None

    def __post_init__(self):
        if self.kind not in NAVIGATION_KINDS:
            raise ValueError(f"Unknown navigation kind: {self.kind}")


class DataGateway(Protocol):
    """Read/write access to emission records."""

    def list(self) -> RecordStream:
        ...

    async def create(self, emission: EmissionInput) -> str:
        ...


class Notifier(Protocol):
    """Transient status messages. Fire-and-forget."""

    def notify(self, title: str, message: str, severity: str) -> None:
        ...


class Navigator(Protocol):
    """Opens record views by id and object type."""

    def navigate(self, target: NavigationTarget) -> None:
        ...


class LoggingNotifier:
    """Notifier that writes messages to the log. Used when no UI is attached."""

    _LEVELS = {"success": logging.INFO, "info": logging.INFO, "error": logging.ERROR}

    def notify(self, title: str, message: str, severity: str) -> None:
        logger.log(self._LEVELS[normalize_severity(severity)], f"{title}: {message}")


__all__ = [
    "RECORD_VIEW",
    "RECORD_EDIT",
    "OBJECT_LIST",
    "NAVIGATION_KINDS",
    "SEVERITIES",
    "normalize_severity",
    "GatewayError",
    "NavigationTarget",
    "DataGateway",
    "Notifier",
    "Navigator",
    "LoggingNotifier",
]
