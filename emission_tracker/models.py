from __future__ import annotations

"""
Data model for the emission tracker widget.

Read models (`EmissionRecord`) are immutable snapshots owned by the data
gateway. The write model (`EmissionInput`) is built from `FormState` at
submit time. `ListViewState` is the tri-state view of the record list that
the state store derives its loading/error/empty flags from.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple


class EmissionSource(Enum):
    """Source categories an emission can be attributed to."""
    TRANSPORTATION = "Transportation"
    ENERGY = "Energy"
    FOOD = "Food"
    WASTE = "Waste"
    OTHER = "Other"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


def source_options() -> List[Dict[str, str]]:
    """Return `{label, value}` pairs for source select widgets."""
    return [{"label": s.value, "value": s.value} for s in EmissionSource]


def today_iso(now: Optional[datetime] = None) -> str:
    """Return today's calendar date as `YYYY-MM-DD`, taken in UTC."""
    current = now or datetime.now(timezone.utc)
    return current.astimezone(timezone.utc).date().isoformat()


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """Return an ISO-8601 UTC timestamp with milliseconds, e.g. `2024-03-01T10:00:00.000Z`."""
    current = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return current.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class EmissionRecord:
    """A persisted observation of a CO₂e amount tied to a source and date."""
    id: str
    name: str
    source: str
    amount: float
    date: date
    status: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EmissionRecord":
        raw_date = data.get("date")
        if isinstance(raw_date, date):
            parsed_date = raw_date
        else:
            parsed_date = date.fromisoformat(str(raw_date))
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            source=str(data.get("source") or ""),
            amount=float(data.get("amount") or 0.0),
            date=parsed_date,
            status=str(data.get("status") or ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "source": self.source,
            "amount": self.amount,
            "date": self.date.isoformat(),
            "status": self.status,
        }


@dataclass(frozen=True)
class EmissionInput:
    """Write model sent to the gateway's `create` call."""
    source: str
    amount: float
    date: date

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.source, "amount": self.amount, "date": self.date.isoformat()}


@dataclass
class FormState:
    """Draft of an emission to be created, plus modal visibility.

    - `amount` holds the raw input value; it is parsed only at submit time
    - `date` is an ISO calendar date string, pre-filled at mount
    - `selected_record_id` is the target of the last row action
    """
    is_modal_open: bool = False
    source: Optional[str] = None
    amount: Optional[Any] = None
    date: Optional[str] = None
    description: str = ""
    selected_record_id: Optional[str] = None

    # Attributes `set_field` may assign from raw input
    EDITABLE_FIELDS = ("source", "amount", "date", "description", "selected_record_id")

    def snapshot(self) -> "FormState":
        return replace(self)


class ListStatus(Enum):
    """Which of the three list view states is active."""
    LOADING = "loading"
    ERROR = "error"
    LOADED = "loaded"


@dataclass(frozen=True)
class ListViewState:
    """Tri-state union of the record list: loading, error, or loaded records.

    Exactly one state is active; "empty" is LOADED with no records.
    """
    status: ListStatus = ListStatus.LOADING
    records: Tuple[EmissionRecord, ...] = ()
    error: Optional[Any] = None

    @classmethod
    def loading(cls) -> "ListViewState":
        return cls(status=ListStatus.LOADING)

    @classmethod
    def failed(cls, error: Any) -> "ListViewState":
        return cls(status=ListStatus.ERROR, error=error)

    @classmethod
    def loaded(cls, records: Sequence[EmissionRecord]) -> "ListViewState":
        return cls(status=ListStatus.LOADED, records=tuple(records))

    @property
    def error_message(self) -> str:
        """Message field of the error payload, or an empty string."""
        if self.status is not ListStatus.ERROR or self.error is None:
            return ""
        if isinstance(self.error, dict):
            return str(self.error.get("message") or "")
        return str(getattr(self.error, "message", None) or "")


@dataclass(frozen=True)
class ColumnSpec:
    """A data table column: header label, record field and display type."""
    label: str
    field_name: str
    type: str = "text"


TRACKER_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("Name", "name", "text"),
    ColumnSpec("Source", "source", "text"),
    ColumnSpec("Amount (CO₂e)", "amount", "number"),
    ColumnSpec("Date", "date", "date"),
    ColumnSpec("Status", "status", "text"),
]

# The read-only listing omits the source column
LISTING_COLUMNS: List[ColumnSpec] = [
    ColumnSpec("Name", "name", "text"),
    ColumnSpec("Amount (CO₂e)", "amount", "number"),
    ColumnSpec("Date", "date", "date"),
    ColumnSpec("Status", "status", "text"),
]


__all__ = [
    "EmissionSource",
    "source_options",
    "today_iso",
    "iso_timestamp",
    "EmissionRecord",
    "EmissionInput",
    "FormState",
    "ListStatus",
    "ListViewState",
    "ColumnSpec",
    "TRACKER_COLUMNS",
    "LISTING_COLUMNS",
]
