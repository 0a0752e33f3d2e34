"""
Push-based record list publisher.

`RecordStream` replaces a framework-managed data wire: the state store
subscribes to it at mount, unsubscribes at teardown, and asks it to
`refetch()` when the list must be reloaded. Subscribers always receive a
`ListViewState`; loader failures are published as error states.
"""

from typing import Callable, List, Sequence
import logging

from ..models import EmissionRecord, ListViewState

logger = logging.getLogger(__name__)

Loader = Callable[[], Sequence[EmissionRecord]]
StateCallback = Callable[[ListViewState], None]


class Subscription:
    """Handle returned by `RecordStream.subscribe`."""

    def __init__(self, stream: "RecordStream", callback: StateCallback):
        self._stream = stream
        self._callback = callback
        self.closed = False

    def unsubscribe(self) -> None:
        if not self.closed:
            self._stream._remove(self._callback)
            self.closed = True


class RecordStream:
    """Typed publisher of `ListViewState` snapshots backed by a loader."""

    def __init__(self, loader: Loader, fetch_on_subscribe: bool = True):
        self._loader = loader
        self._fetch_on_subscribe = fetch_on_subscribe
        self._subscribers: List[StateCallback] = []
        self._state = ListViewState.loading()
        self._fetched = False

    @property
    def state(self) -> ListViewState:
        return self._state

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, callback: StateCallback) -> Subscription:
        """Register `callback` and push the current state to it immediately.

        The first subscription triggers the initial fetch unless the stream
        was created with `fetch_on_subscribe=False`.
        """
        self._subscribers.append(callback)
        self._deliver(callback, self._state)
        if self._fetch_on_subscribe and not self._fetched:
            self.refetch()
        return Subscription(self, callback)

    def refetch(self) -> ListViewState:
        """Reload the records and publish the outcome. Returns the new state."""
        self._fetched = True
        self._publish(ListViewState.loading())
        try:
            records = list(self._loader())
        except Exception as e:
            logger.warning(f"Emission list fetch failed: {e}")
            self._publish(ListViewState.failed(e))
        else:
            logger.debug(f"Emission list fetched: {len(records)} records")
            self._publish(ListViewState.loaded(records))
        return self._state

    def push(self, state: ListViewState) -> None:
        """Publish an externally produced state (e.g. from a live feed)."""
        self._publish(state)

    def _publish(self, state: ListViewState) -> None:
        self._state = state
        for callback in list(self._subscribers):
            self._deliver(callback, state)

    def _deliver(self, callback: StateCallback, state: ListViewState) -> None:
        try:
            callback(state)
        except Exception as e:
            logger.error(f"Error in record stream subscriber: {e}")

    def _remove(self, callback: StateCallback) -> None:
        try:
            self._subscribers.remove(callback)
        except ValueError:
            pass


__all__ = ["RecordStream", "Subscription"]
