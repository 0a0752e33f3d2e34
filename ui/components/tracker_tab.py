from __future__ import annotations

import asyncio
from datetime import date

import streamlit as st

from .base_component import BaseComponent
from emission_tracker.models import TRACKER_COLUMNS, source_options
from emission_tracker.ui_logic.row_actions import get_row_actions
from ui.utils.helpers import record_labels, records_to_dataframe


class CarbonFootprintTracker(BaseComponent):
    """Emission list with a creation form.

    - Header actions: new emission (opens the form), refresh, view all records
    - Loading, error and empty states from the store's derived flags
    - Data table plus View/Edit actions for a picked record
    - Form panel shown while the store's modal flag is set
    """

    def render(self) -> None:
        st.header("Carbon Footprint Tracker")
        st.caption("Record emissions by source and review what has been logged.")

        col_a, col_b, col_c = st.columns([1, 1, 1])
        with col_a:
            if st.button("New Emission", type="primary", key="tracker_new"):
                self.state.open_modal()
        with col_b:
            if st.button("Refresh", key="tracker_refresh"):
                self.state.refresh()
        with col_c:
            if st.button("View All Records", key="tracker_view_all"):
                self.state.navigate_to_list_view()
                st.rerun()

        if self.state.form.is_modal_open:
            self._render_form()

        st.divider()
        self._render_list()

    def _render_list(self) -> None:
        if self.state.is_loading:
            st.info("Loading emissions…")
            return
        if self.state.has_error:
            st.error(f"Could not load emissions: {self.state.error_message or 'unknown error'}")
            return
        if self.state.has_no_emissions:
            st.info("No emissions recorded yet. Use New Emission to add one.")
            return

        records = self.state.records
        st.dataframe(records_to_dataframe(records, TRACKER_COLUMNS), hide_index=True, use_container_width=True)

        labels = record_labels(records)
        picked = st.selectbox("Record", options=list(range(len(records))), format_func=lambda i: labels[i], key="tracker_row")
        record = records[picked]
        action_cols = st.columns(len(get_row_actions(record)))
        for col, action in zip(action_cols, get_row_actions(record)):
            with col:
                if st.button(action.label, icon=action.icon, key=f"tracker_action_{action.name}"):
                    self.state.handle_row_action(action.name, record.id, record.name)
                    st.rerun()

    def _render_form(self) -> None:
        form = self.state.form
        sources = [option["value"] for option in source_options()]
        with st.container(border=True):
            st.subheader("New Emission")
            with st.form("emission_form"):
                source = st.selectbox(
                    "Source",
                    options=[""] + sources,
                    index=(sources.index(form.source) + 1) if form.source in sources else 0,
                )
                amount = st.text_input("Amount (CO₂e)", value="" if form.amount is None else str(form.amount))
                emission_date = st.date_input("Date", value=_parse_date(form.date))
                description = st.text_area("Description", value=form.description)
                col_save, col_cancel = st.columns(2)
                with col_save:
                    save = st.form_submit_button("Save", type="primary")
                with col_cancel:
                    cancel = st.form_submit_button("Cancel")

        if cancel:
            self.state.close_modal()
            st.rerun()
        if save:
            self.state.set_field("source", source or None)
            self.state.set_field("amount", amount)
            self.state.set_field("date", emission_date.isoformat() if emission_date else None)
            self.state.set_field("description", description)
            if asyncio.run(self.state.submit()):
                st.rerun()


def _parse_date(value) -> date:
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value))
    except ValueError:
        return date.today()


def render_tracker_tab(state) -> None:
    CarbonFootprintTracker(state).render()
