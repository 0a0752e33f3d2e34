from __future__ import annotations

"""General-purpose helpers for the UI."""

from typing import Iterable, List, Sequence

import pandas as pd

from emission_tracker.models import ColumnSpec, EmissionRecord


def records_to_dataframe(records: Iterable[EmissionRecord], columns: Sequence[ColumnSpec]) -> pd.DataFrame:
    """Build a display table with one column per `ColumnSpec`, headed by its label."""
    rows = [{col.label: getattr(record, col.field_name) for col in columns} for record in records]
    frame = pd.DataFrame(rows, columns=[col.label for col in columns])
    for col in columns:
        if col.type == "number":
            frame[col.label] = pd.to_numeric(frame[col.label])
        elif col.type == "date":
            frame[col.label] = pd.to_datetime(frame[col.label]).dt.date
    return frame


def record_labels(records: Iterable[EmissionRecord]) -> List[str]:
    """Labels for a record picker, e.g. `EM-0001 · Energy · 2024-03-01`."""
    return [f"{r.name} · {r.source} · {r.date.isoformat()}" for r in records]
