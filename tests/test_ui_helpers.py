"""Tests for UI table helpers."""

from datetime import date

from emission_tracker.models import LISTING_COLUMNS, TRACKER_COLUMNS, EmissionRecord
from ui.utils.helpers import record_labels, records_to_dataframe


RECORDS = [
    EmissionRecord(id="e-1", name="EM-0001", source="Energy", amount=12.5, date=date(2024, 3, 1), status="Draft"),
    EmissionRecord(id="e-2", name="EM-0002", source="Food", amount=3.0, date=date(2024, 2, 1), status="Verified"),
]


def test_tracker_table_columns_and_values():
    frame = records_to_dataframe(RECORDS, TRACKER_COLUMNS)
    assert list(frame.columns) == ["Name", "Source", "Amount (CO₂e)", "Date", "Status"]
    assert frame["Amount (CO₂e)"].sum() == 15.5
    assert frame.iloc[0]["Date"] == date(2024, 3, 1)


def test_listing_table_omits_source():
    frame = records_to_dataframe(RECORDS, LISTING_COLUMNS)
    assert "Source" not in frame.columns
    assert list(frame["Name"]) == ["EM-0001", "EM-0002"]


def test_empty_table_keeps_headers():
    frame = records_to_dataframe([], TRACKER_COLUMNS)
    assert frame.empty
    assert len(frame.columns) == len(TRACKER_COLUMNS)


def test_record_labels():
    assert record_labels(RECORDS[:1]) == ["EM-0001 · Energy · 2024-03-01"]
