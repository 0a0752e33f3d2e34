"""
Outward event contract of the emission tracker widget.

Every event the widget publishes is declared in `EVENT_CONTRACT` together
with its payload keys and visibility scope:

- `bubbles`: the event propagates from the emitting widget to its parent emitters
- `composed`: the event also crosses encapsulation boundaries on the way up

Emitters form a tree through `parent`. An emitter created with
`encapsulated=True` sits behind a boundary: only composed events travel
from it to its parent.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

logger = logging.getLogger(__name__)


MODAL_STATE_CHANGE = "modalstatechange"
BEFORE_SAVE = "beforesave"
EMISSION_CREATED = "emissioncreated"
SAVE_ERROR = "saveerror"
ROW_ACTION = "rowaction"


@dataclass(frozen=True)
class EventSpec:
    """Declared shape and scope of one widget event."""
    name: str
    payload_keys: Tuple[str, ...]
    bubbles: bool = False
    composed: bool = False


EVENT_CONTRACT: Dict[str, EventSpec] = {
    MODAL_STATE_CHANGE: EventSpec(MODAL_STATE_CHANGE, ("isOpen",), bubbles=True),
    BEFORE_SAVE: EventSpec(BEFORE_SAVE, ("source", "amount", "date")),
    EMISSION_CREATED: EventSpec(
        EMISSION_CREATED,
        ("emissionId", "source", "amount", "timestamp"),
        bubbles=True,
        composed=True,
    ),
    SAVE_ERROR: EventSpec(SAVE_ERROR, ("error",)),
    ROW_ACTION: EventSpec(ROW_ACTION, ("action", "recordId", "recordName"), bubbles=True),
}


@dataclass(frozen=True)
class WidgetEvent:
    """A dispatched event. `detail` carries the payload."""
    name: str
    detail: Dict[str, Any] = field(default_factory=dict)
    bubbles: bool = False
    composed: bool = False


Listener = Callable[[WidgetEvent], None]


class EventEmitter:
    """Publishes widget events to local listeners and up the emitter tree."""

    def __init__(self, parent: Optional["EventEmitter"] = None, encapsulated: bool = False):
        self.parent = parent
        self.encapsulated = encapsulated
        self._listeners: Dict[str, List[Listener]] = {}
        self._any_listeners: List[Listener] = []

    def add_listener(self, event: str, callback: Listener) -> None:
        """Add a listener for one event name."""
        if event not in self._listeners:
            self._listeners[event] = []
        self._listeners[event].append(callback)

    def remove_listener(self, event: str, callback: Listener) -> None:
        """Remove a listener; unknown callbacks are ignored."""
        if event in self._listeners:
            try:
                self._listeners[event].remove(callback)
            except ValueError:
                pass

    def add_any_listener(self, callback: Listener) -> None:
        """Add a listener that receives every event reaching this emitter."""
        self._any_listeners.append(callback)

    def emit(self, name: str, detail: Optional[Dict[str, Any]] = None) -> WidgetEvent:
        """Build an event from the contract and dispatch it.

        Raises:
            KeyError: if `name` is not part of the event contract
        """
        spec = EVENT_CONTRACT[name]
        event = WidgetEvent(
            name=name,
            detail=dict(detail or {}),
            bubbles=spec.bubbles,
            composed=spec.composed,
        )
        logger.debug(f"Emitting {name}: {event.detail}")
        self.dispatch(event)
        return event

    def dispatch(self, event: WidgetEvent) -> None:
        """Deliver to local listeners, then propagate according to scope."""
        self._notify_listeners(event)
        if not event.bubbles or self.parent is None:
            return
        if self.encapsulated and not event.composed:
            return
        self.parent.dispatch(event)

    def _notify_listeners(self, event: WidgetEvent) -> None:
        for callback in list(self._listeners.get(event.name, [])) + list(self._any_listeners):
            try:
                callback(event)
            except Exception as e:
                logger.error(f"Error in {event.name} listener callback: {e}")


__all__ = [
    "MODAL_STATE_CHANGE",
    "BEFORE_SAVE",
    "EMISSION_CREATED",
    "SAVE_ERROR",
    "ROW_ACTION",
    "EventSpec",
    "EVENT_CONTRACT",
    "WidgetEvent",
    "EventEmitter",
]
