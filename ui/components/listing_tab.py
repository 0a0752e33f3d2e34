from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

import streamlit as st

from .base_component import BaseComponent
from emission_tracker.models import LISTING_COLUMNS, EmissionSource, FormState, today_iso
from emission_tracker.ui_logic.state_manager import SAVE_FALLBACK_ERROR
from ui.utils.helpers import records_to_dataframe

logger = logging.getLogger(__name__)

LISTING_MODAL_KEY = "listing_modal"


@dataclass
class ListingModal:
    """Visibility of the listing's own create form.

    Local to the listing: opening or closing it never touches the shared
    store, so no `modalstatechange` event is published.
    """
    is_open: bool = False

    def open(self) -> None:
        self.is_open = True
        logger.info("Emission form opened from listing")

    def close(self) -> None:
        self.is_open = False


async def save_listing_draft(state, modal: ListingModal, draft: FormState) -> Optional[str]:
    """Persist `draft` straight through the gateway, as a record form does.

    On success the local modal closes and the store finishes the create via
    `handle_success`. Returns the new record id, or None if nothing was saved.
    """
    result = state.validation_manager.validate_form(draft)
    if not result.is_valid:
        state.notifier.notify("Error", result.summary, "error")
        return None
    try:
        emission_id = await state.gateway.create(state.validation_manager.build_input(draft))
    except Exception as e:
        message = getattr(e, "message", None) or SAVE_FALLBACK_ERROR
        logger.warning(f"Listing create failed: {message}")
        state.notifier.notify("Error", message, "error")
        return None
    logger.info(f"Emission created from listing: {emission_id}")
    modal.close()
    state.handle_success()
    return emission_id


class EmissionListing(BaseComponent):
    """Read-only emission listing with a reduced column set.

    Shares the tracker's store, so it shows whatever the last fetch produced
    and logs each render of loaded data.
    """

    def render(self) -> None:
        st.header("Emissions")
        modal = st.session_state.setdefault(LISTING_MODAL_KEY, ListingModal())

        if st.button("New Emission", key="listing_new"):
            modal.open()
        if modal.is_open:
            self._render_form(modal)

        list_state = self.state.list_state
        logger.debug(f"Emissions data: {list_state.status.value}, {len(list_state.records)} records")

        if self.state.is_loading:
            st.info("Loading emissions…")
        elif self.state.has_error:
            st.error(self.state.error_message or "Could not load emissions.")
        else:
            st.dataframe(records_to_dataframe(self.state.records, LISTING_COLUMNS), hide_index=True)

    def _render_form(self, modal: ListingModal) -> None:
        with st.container(border=True):
            with st.form("listing_emission_form"):
                source = st.selectbox("Source", options=[""] + EmissionSource.values())
                amount = st.text_input("Amount (CO₂e)")
                emission_date = st.date_input("Date", value=date.fromisoformat(today_iso(self.state.clock())))
                col_save, col_cancel = st.columns(2)
                with col_save:
                    save = st.form_submit_button("Save", type="primary")
                with col_cancel:
                    cancel = st.form_submit_button("Cancel")

        if cancel:
            modal.close()
            st.rerun()
        if save:
            draft = FormState(
                source=source or None,
                amount=amount,
                date=emission_date.isoformat() if emission_date else None,
            )
            if asyncio.run(save_listing_draft(self.state, modal, draft)):
                st.rerun()


def render_listing_tab(state) -> None:
    EmissionListing(state).render()
