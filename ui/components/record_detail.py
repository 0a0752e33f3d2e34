from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from .base_component import BaseComponent
from emission_tracker.models import TRACKER_COLUMNS, EmissionSource
from emission_tracker.ui_logic.interfaces import OBJECT_LIST, RECORD_EDIT, GatewayError, NavigationTarget
from ui.services import EmissionService, QueryParamNavigator
from ui.services.emission_service import STATUSES
from ui.utils.helpers import records_to_dataframe


@dataclass
class RecordPage(BaseComponent):
    """Page opened by the navigator: record view, record edit, or the full list."""

    target: Optional[NavigationTarget] = None
    service: Optional[EmissionService] = None
    navigator: Optional[QueryParamNavigator] = None

    def render(self) -> None:
        if st.button("← Back to tracker", key="record_back"):
            self.navigator.back()
            st.rerun()

        if self.target.kind == OBJECT_LIST:
            self._render_list()
            return

        record = self.service.get_record(self.target.record_id or "")
        if record is None:
            st.error(f"Record {self.target.record_id} was not found.")
            return

        st.header(record.name)
        st.caption(f"{self.target.object_type} · {record.id}")
        if self.target.kind == RECORD_EDIT:
            self._render_edit(record)
        else:
            for col in TRACKER_COLUMNS:
                st.write(f"**{col.label}:** {getattr(record, col.field_name)}")

    def _render_list(self) -> None:
        st.header(f"All {self.target.object_type} records")
        if self.target.list_filter:
            st.caption(f"Filter: {self.target.list_filter}")
        st.dataframe(records_to_dataframe(self.service.load_records(), TRACKER_COLUMNS), hide_index=True)

    def _render_edit(self, record) -> None:
        sources = EmissionSource.values()
        with st.form("record_edit_form"):
            source = st.selectbox("Source", options=sources, index=sources.index(record.source) if record.source in sources else 0)
            amount = st.number_input("Amount (CO₂e)", min_value=0.0, value=float(record.amount), step=0.01)
            emission_date = st.date_input("Date", value=record.date)
            status = st.selectbox("Status", options=list(STATUSES), index=STATUSES.index(record.status) if record.status in STATUSES else 0)
            saved = st.form_submit_button("Save", type="primary")
        if saved:
            try:
                self.service.update_record(record.id, source=source, amount=float(amount), date=emission_date, status=status)
            except (KeyError, GatewayError) as exc:
                st.error(str(exc))
            else:
                st.success("Record updated.")


def render_record_page(state, target: NavigationTarget, service: EmissionService, navigator: QueryParamNavigator) -> None:
    RecordPage(state, target=target, service=service, navigator=navigator).render()
