"""Tests for row actions: the fixed action set, events and navigation."""

from emission_tracker.config import TrackerConfig, UnknownRowActionPolicy
from emission_tracker.ui_logic import NavigationTarget, get_row_actions


class TestGetRowActions:
    def test_fixed_actions_for_any_row(self, sample_records):
        for row in [None, sample_records[0], {"anything": 1}]:
            actions = get_row_actions(row)
            assert [(a.label, a.name) for a in actions] == [
                ("View Details", "view"),
                ("Edit Record", "edit"),
            ]

    def test_to_dict(self):
        view = get_row_actions()[0]
        assert view.to_dict() == {"label": "View Details", "name": "view", "icon": view.icon}


class TestHandleRowAction:
    def test_view_emits_and_navigates(self, make_store, timeline):
        store = make_store()

        store.handle_row_action("view", "id123", "Row A")

        assert timeline == [("rowaction", {"action": "view", "recordId": "id123", "recordName": "Row A"})]
        store.navigator.navigate.assert_called_once_with(
            NavigationTarget(kind="record-view", object_type="Carbon_Emission__c", record_id="id123")
        )
        assert store.form.selected_record_id == "id123"

    def test_edit_navigates_to_edit_page(self, make_store):
        store = make_store(config=TrackerConfig(object_api_name="Emission"))

        store.handle_row_action("edit", "id456", "Row B")

        store.navigator.navigate.assert_called_once_with(
            NavigationTarget(kind="record-edit", object_type="Emission", record_id="id456")
        )

    def test_unknown_action_emits_but_does_not_navigate(self, make_store, timeline):
        store = make_store()

        store.handle_row_action("archive", "id123", "Row A")

        assert timeline == [("rowaction", {"action": "archive", "recordId": "id123", "recordName": "Row A"})]
        store.navigator.navigate.assert_not_called()
        store.notifier.notify.assert_not_called()

    def test_unknown_action_warn_policy_notifies(self, make_store):
        store = make_store(config=TrackerConfig(unknown_row_action=UnknownRowActionPolicy.WARN))

        store.handle_row_action("archive", "id123", "Row A")

        store.navigator.navigate.assert_not_called()
        store.notifier.notify.assert_called_once_with("Info", "Unsupported action: archive", "info")


class TestListNavigation:
    def test_navigate_to_list_view(self, make_store):
        store = make_store()

        store.navigate_to_list_view()

        store.navigator.navigate.assert_called_once_with(
            NavigationTarget(kind="object-list", object_type="Carbon_Emission__c", list_filter="Recent")
        )
