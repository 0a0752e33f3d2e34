from __future__ import annotations

"""Emission service: YAML-file data gateway for the Streamlit host.

Records are kept in `data/emissions.yaml` under the configured data
directory. The service satisfies the `DataGateway` protocol: `list()`
returns a push-based `RecordStream` and `create()` is a coroutine that
resolves to the new record id or raises `GatewayError`.
"""

from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging
import math
import uuid

import yaml

from emission_tracker.io_paths import DATA_DIR
from emission_tracker.models import EmissionInput, EmissionRecord
from emission_tracker.ui_logic.interfaces import GatewayError
from emission_tracker.ui_logic.observable import RecordStream

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Draft"
STATUSES = ("Draft", "Submitted", "Verified")


class EmissionService:
    """High-level emission record file operations."""

    def __init__(self, data_dir: Path | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir is not None else DATA_DIR
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.data_dir / "emissions.yaml"
        self._stream = RecordStream(self.load_records)

    # --- DataGateway ---
    def list(self) -> RecordStream:
        """Return the record stream shared by all subscribers of this service."""
        return self._stream

    async def create(self, emission: EmissionInput) -> str:
        """Append a new record and return its id."""
        if not math.isfinite(emission.amount):
            raise GatewayError("Amount must be a finite number.")
        if emission.amount < 0:
            raise GatewayError("Amount cannot be negative.")
        try:
            rows = self._read_rows()
            record = EmissionRecord(
                id=f"e-{uuid.uuid4().hex[:12]}",
                name=f"EM-{len(rows) + 1:04d}",
                source=emission.source,
                amount=float(emission.amount),
                date=emission.date,
                status=DEFAULT_STATUS,
            )
            rows.append(record.to_dict())
            self._write_rows(rows)
        except (OSError, yaml.YAMLError) as exc:
            logger.error(f"Could not save emission to {self.path}: {exc}")
            raise GatewayError(f"Could not save emission: {exc}") from exc
        logger.info(f"Saved emission {record.id} ({record.source}, {record.amount})")
        return record.id

    # --- Read helpers ---
    def load_records(self) -> List[EmissionRecord]:
        """Load all records, newest date first."""
        records = [EmissionRecord.from_dict(row) for row in self._read_rows()]
        return sorted(records, key=lambda r: (r.date, r.name), reverse=True)

    def get_record(self, record_id: str) -> Optional[EmissionRecord]:
        for record in self.load_records():
            if record.id == record_id:
                return record
        return None

    def update_record(self, record_id: str, **changes: Any) -> EmissionRecord:
        """Replace fields of a stored record and republish the list.

        Raises:
            KeyError: if no record has `record_id`
            GatewayError: on storage failure
        """
        rows = self._read_rows()
        for index, row in enumerate(rows):
            if str(row.get("id")) == record_id:
                updated = replace(EmissionRecord.from_dict(row), **changes)
                rows[index] = updated.to_dict()
                break
        else:
            raise KeyError(f"Emission record not found: {record_id}")
        try:
            self._write_rows(rows)
        except OSError as exc:
            raise GatewayError(f"Could not update emission: {exc}") from exc
        self._stream.refetch()
        return updated

    # --- File I/O ---
    def _read_rows(self) -> List[Dict[str, Any]]:
        if not self.path.exists():
            return []
        with self.path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        rows = data.get("emissions") or []
        if not isinstance(rows, list):
            raise ValueError(f"Malformed emissions file: {self.path}")
        return [dict(row) for row in rows if isinstance(row, dict)]

    def _write_rows(self, rows: List[Dict[str, Any]]) -> None:
        with self.path.open("w", encoding="utf-8") as f:
            yaml.safe_dump({"emissions": rows}, f, sort_keys=False, allow_unicode=True)
