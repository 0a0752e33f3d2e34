"""
Pytest configuration for ensuring the project root is on sys.path.

This allows test modules to import the in-repo package layout like:
    from emission_tracker.ui_logic import EmissionStateStore

Without relying on external environment variables. Shared fakes for the
store's host collaborators live here as fixtures.
"""

import os
import sys
from datetime import date, datetime, timezone
from unittest.mock import Mock

import pytest

# Insert the repository root (one directory up from tests/) at the
# beginning of sys.path to prioritize local modules over site-packages.
REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from emission_tracker.models import EmissionRecord  # noqa: E402
from emission_tracker.ui_logic import EmissionStateStore, EventEmitter, RecordStream  # noqa: E402

FIXED_NOW = datetime(2024, 3, 1, 9, 30, 0, tzinfo=timezone.utc)


class FakeGateway:
    """In-memory gateway recording every call into a shared timeline."""

    def __init__(self, records=(), create_result="e-99", create_error=None, timeline=None):
        self.records = list(records)
        self.create_result = create_result
        self.create_error = create_error
        self.timeline = timeline if timeline is not None else []
        self.create_calls = []
        self.load_count = 0
        self.stream = RecordStream(self._load)

    def _load(self):
        self.load_count += 1
        self.timeline.append("list")
        return list(self.records)

    def list(self):
        return self.stream

    async def create(self, emission):
        self.timeline.append("create")
        self.create_calls.append(emission)
        if self.create_error is not None:
            raise self.create_error
        return self.create_result


@pytest.fixture
def sample_records():
    return [
        EmissionRecord(id="id123", name="Row A", source="Energy", amount=12.5, date=date(2024, 3, 1), status="Draft"),
        EmissionRecord(id="id456", name="Row B", source="Food", amount=3.0, date=date(2024, 2, 1), status="Verified"),
    ]


@pytest.fixture
def timeline():
    return []


@pytest.fixture
def gateway(timeline):
    return FakeGateway(timeline=timeline)


@pytest.fixture
def events(timeline):
    """Emitter whose events are appended to the shared timeline as (name, detail)."""
    emitter = EventEmitter()
    emitter.add_any_listener(lambda event: timeline.append((event.name, event.detail)))
    return emitter


@pytest.fixture
def make_store(gateway, events):
    def _make(config=None, gw=None):
        return EmissionStateStore(
            gateway=gw or gateway,
            notifier=Mock(),
            navigator=Mock(),
            emitter=events,
            config=config,
            clock=lambda: FIXED_NOW,
        )
    return _make
