"""
Tests for UI component logic that runs without a Streamlit session.

Covers the listing's own create form, which keeps its modal flag locally
and finishes a create through the store's record-form success path, and
the record page's optional collaborators.
"""

import asyncio
import logging
from typing import Optional, get_type_hints
from unittest.mock import Mock

from emission_tracker.models import FormState
from emission_tracker.ui_logic import GatewayError, NavigationTarget
from emission_tracker.ui_logic.state_manager import RECORD_CREATED_MESSAGE, SAVE_FALLBACK_ERROR
from emission_tracker.ui_logic.validation_manager import REQUIRED_FIELDS_MESSAGE
from ui.components.listing_tab import ListingModal, save_listing_draft
from ui.components.record_detail import RecordPage
from ui.services import EmissionService, QueryParamNavigator

from conftest import FakeGateway


def draft(source="Food", amount="3", emission_date="2024-02-01"):
    return FormState(source=source, amount=amount, date=emission_date)


class TestListingModal:
    def test_open_is_local_and_logged(self, make_store, timeline, caplog):
        store = make_store()
        store.mount()
        modal = ListingModal()

        with caplog.at_level(logging.INFO, logger="ui.components.listing_tab"):
            modal.open()

        assert modal.is_open
        assert not store.form.is_modal_open
        assert [e for e in timeline if isinstance(e, tuple)] == []
        assert "Emission form opened from listing" in caplog.text

    def test_close(self):
        modal = ListingModal(is_open=True)
        modal.close()
        assert not modal.is_open


class TestSaveListingDraft:
    def test_success_closes_modal_and_reloads(self, make_store, gateway, timeline):
        store = make_store()
        store.mount()
        modal = ListingModal(is_open=True)

        assert asyncio.run(save_listing_draft(store, modal, draft())) == "e-99"

        assert not modal.is_open
        assert [c.source for c in gateway.create_calls] == ["Food"]
        assert [e for e in timeline if isinstance(e, tuple)] == []
        store.notifier.notify.assert_called_once_with("Success", RECORD_CREATED_MESSAGE, "success")
        assert gateway.load_count == 2

    def test_invalid_draft_is_not_sent(self, make_store, gateway):
        store = make_store()
        store.mount()
        modal = ListingModal(is_open=True)

        assert asyncio.run(save_listing_draft(store, modal, draft(source=None))) is None

        assert gateway.create_calls == []
        assert modal.is_open
        store.notifier.notify.assert_called_once_with("Error", REQUIRED_FIELDS_MESSAGE, "error")

    def test_gateway_failure_keeps_modal_open(self, make_store, timeline):
        gw = FakeGateway(create_error=GatewayError(), timeline=timeline)
        store = make_store(gw=gw)
        store.mount()
        modal = ListingModal(is_open=True)

        assert asyncio.run(save_listing_draft(store, modal, draft())) is None

        assert modal.is_open
        assert gw.load_count == 1
        store.notifier.notify.assert_called_once_with("Error", SAVE_FALLBACK_ERROR, "error")


class TestRecordPage:
    def test_collaborators_are_optional(self):
        hints = get_type_hints(RecordPage)
        assert hints["target"] == Optional[NavigationTarget]
        assert hints["service"] == Optional[EmissionService]
        assert hints["navigator"] == Optional[QueryParamNavigator]

    def test_defaults_to_no_collaborators(self):
        page = RecordPage(Mock())
        assert page.target is None
        assert page.service is None
        assert page.navigator is None
