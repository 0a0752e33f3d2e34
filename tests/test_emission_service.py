"""Tests for the YAML-file emission gateway."""

import asyncio
from datetime import date
from unittest.mock import Mock

import pytest

from emission_tracker.models import EmissionInput, EmissionRecord, ListStatus
from emission_tracker.ui_logic import EmissionStateStore, GatewayError
from emission_tracker.ui_logic.interfaces import LoggingNotifier
from ui.services.emission_service import DEFAULT_STATUS, EmissionService


@pytest.fixture
def service(tmp_path):
    return EmissionService(tmp_path / "data")


def test_empty_store_lists_nothing(service):
    assert service.load_records() == []
    assert service.list().refetch().status is ListStatus.LOADED


def test_create_persists_record(service):
    emission_id = asyncio.run(service.create(EmissionInput("Energy", 12.5, date(2024, 3, 1))))

    records = service.load_records()
    assert [r.id for r in records] == [emission_id]
    assert emission_id.startswith("e-")
    assert records[0].name == "EM-0001"
    assert records[0].status == DEFAULT_STATUS
    assert records[0].amount == 12.5
    assert service.path.exists()


def test_records_sorted_newest_first(service):
    asyncio.run(service.create(EmissionInput("Food", 1.0, date(2024, 1, 1))))
    asyncio.run(service.create(EmissionInput("Waste", 2.0, date(2024, 6, 1))))

    assert [r.source for r in service.load_records()] == ["Waste", "Food"]


def test_negative_amount_rejected(service):
    with pytest.raises(GatewayError) as exc:
        asyncio.run(service.create(EmissionInput("Food", -1.0, date(2024, 1, 1))))
    assert exc.value.message == "Amount cannot be negative."


@pytest.mark.parametrize("amount", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_amount_rejected(service, amount):
    with pytest.raises(GatewayError) as exc:
        asyncio.run(service.create(EmissionInput("Food", amount, date(2024, 1, 1))))
    assert exc.value.message == "Amount must be a finite number."
    assert not service.path.exists()


def test_unreadable_file_becomes_error_state(service):
    service.path.write_text("emissions: {not: [valid", encoding="utf-8")

    state = service.list().refetch()

    assert state.status is ListStatus.ERROR


def test_update_record(service):
    emission_id = asyncio.run(service.create(EmissionInput("Food", 1.0, date(2024, 1, 1))))
    seen = Mock()
    service.list().subscribe(seen)

    updated = service.update_record(emission_id, status="Verified", amount=2.5)

    assert updated.status == "Verified"
    assert service.get_record(emission_id) == updated
    assert seen.call_args[0][0].records == (updated,)


def test_update_missing_record(service):
    with pytest.raises(KeyError):
        service.update_record("e-missing", status="Verified")


def test_store_round_trip_through_service(service):
    store = EmissionStateStore(gateway=service, notifier=LoggingNotifier(), navigator=Mock())
    store.mount()
    assert store.has_no_emissions

    store.set_field("source", "Transportation")
    store.set_field("amount", "40")
    store.set_field("date", "2024-02-02")
    assert asyncio.run(store.submit())

    assert len(store.records) == 1
    assert store.records[0] == EmissionRecord.from_dict(store.records[0].to_dict())
