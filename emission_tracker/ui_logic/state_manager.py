"""
Framework-agnostic state management for the emission tracker widget.

`EmissionStateStore` holds the draft form and the record list view state,
derives the loading/error/empty flags a UI needs, and runs the single
stateful workflow: validate, create through the gateway, then refresh the
list through its read path. Host services are injected so the store can be
driven by Streamlit, by tests, or by any other frontend.
"""

from datetime import datetime, timezone
from typing import Any, Callable, Optional, Tuple
import logging

from ..config import FormResetPolicy, TrackerConfig, UnknownRowActionPolicy
from ..models import EmissionRecord, FormState, ListStatus, ListViewState, iso_timestamp, today_iso
from .events import (
    BEFORE_SAVE,
    EMISSION_CREATED,
    MODAL_STATE_CHANGE,
    ROW_ACTION,
    SAVE_ERROR,
    EventEmitter,
)
from .interfaces import OBJECT_LIST, DataGateway, NavigationTarget, Navigator, Notifier
from .observable import RecordStream, Subscription
from .row_actions import ROW_ACTION_TO_NAVIGATION
from .validation_manager import ValidationManager, ValidationResult

logger = logging.getLogger(__name__)

SAVE_SUCCESS_MESSAGE = "Carbon emission recorded successfully!"
SAVE_FALLBACK_ERROR = "Error creating emission"
REFRESH_MESSAGE = "Data refreshed!"
RECORD_CREATED_MESSAGE = "Emission record created!"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EmissionStateStore:
    """
    State store for the emission list/create widget.

    Operations are not guarded against overlap: two `submit()` calls awaiting
    the gateway at the same time each run their own beforesave/outcome pair.
    """

    def __init__(
        self,
        gateway: DataGateway,
        notifier: Notifier,
        navigator: Navigator,
        emitter: Optional[EventEmitter] = None,
        config: Optional[TrackerConfig] = None,
        clock: Callable[[], datetime] = _utc_now,
        validation_manager: Optional[ValidationManager] = None,
    ):
        self.gateway = gateway
        self.notifier = notifier
        self.navigator = navigator
        self.emitter = emitter or EventEmitter()
        self.config = config or TrackerConfig()
        self.clock = clock
        self.validation_manager = validation_manager or ValidationManager()
        self.form = FormState()
        self._list_state = ListViewState.loading()
        self._stream: Optional[RecordStream] = None
        self._subscription: Optional[Subscription] = None

    # --- lifecycle ---------------------------------------------------------

    def mount(self) -> None:
        """Pre-fill the form date and subscribe to the gateway's record list."""
        if not self.form.date:
            self.form.date = today_iso(self.clock())
        if self._subscription is not None:
            return
        self._stream = self.gateway.list()
        self._subscription = self._stream.subscribe(self._on_list_state)
        logger.debug("Emission tracker mounted")

    def unmount(self) -> None:
        """Drop the list subscription. The cached list state is kept."""
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None
            logger.debug("Emission tracker unmounted")

    @property
    def is_mounted(self) -> bool:
        return self._subscription is not None

    def _on_list_state(self, state: ListViewState) -> None:
        self._list_state = state

    # --- derived state -----------------------------------------------------

    @property
    def list_state(self) -> ListViewState:
        return self._list_state

    @property
    def is_loading(self) -> bool:
        return self._list_state.status is ListStatus.LOADING

    @property
    def has_error(self) -> bool:
        return self._list_state.status is ListStatus.ERROR

    @property
    def error_message(self) -> str:
        return self._list_state.error_message

    @property
    def has_data(self) -> bool:
        return self._list_state.status is ListStatus.LOADED

    @property
    def has_no_emissions(self) -> bool:
        return self.has_data and len(self._list_state.records) == 0

    @property
    def records(self) -> Tuple[EmissionRecord, ...]:
        return self._list_state.records if self.has_data else ()

    # --- modal and form ----------------------------------------------------

    def open_modal(self) -> None:
        self.form.is_modal_open = True
        self.emitter.emit(MODAL_STATE_CHANGE, {"isOpen": True})

    def close_modal(self) -> None:
        self.form.is_modal_open = False
        self.emitter.emit(MODAL_STATE_CHANGE, {"isOpen": False})
        if self.config.form_reset_policy is FormResetPolicy.ON_CLOSE:
            self.reset_form()

    def set_field(self, field: str, value: Any) -> None:
        """Assign one form attribute from a raw input value.

        Raises:
            KeyError: if `field` is not an editable form attribute
        """
        if field not in FormState.EDITABLE_FIELDS:
            raise KeyError(f"Unknown form field: {field}")
        setattr(self.form, field, value)

    def reset_form(self) -> None:
        """Clear the draft, keeping modal visibility and re-filling today's date."""
        self.form = FormState(
            is_modal_open=self.form.is_modal_open,
            date=today_iso(self.clock()),
        )

    # --- create workflow ---------------------------------------------------

    def validate(self) -> ValidationResult:
        return self.validation_manager.validate_form(self.form)

    async def submit(self) -> bool:
        """Validate the form, create the record and refresh the list.

        Returns True if the record was created.
        """
        result = self.validate()
        if not result.is_valid:
            self.notifier.notify("Error", result.summary, "error")
            return False

        source, amount, emission_date = self.form.source, self.form.amount, self.form.date
        emission = self.validation_manager.build_input(self.form)

        self.emitter.emit(BEFORE_SAVE, {"source": source, "amount": amount, "date": emission_date})

        try:
            emission_id = await self.gateway.create(emission)
        except Exception as e:
            message = getattr(e, "message", None) or SAVE_FALLBACK_ERROR
            logger.warning(f"Emission create failed: {message}")
            self.emitter.emit(SAVE_ERROR, {"error": message})
            self.notifier.notify("Error", message, "error")
            return False

        logger.info(f"Emission created: {emission_id}")
        self.emitter.emit(EMISSION_CREATED, {
            "emissionId": emission_id,
            "source": source,
            "amount": amount,
            "timestamp": iso_timestamp(self.clock()),
        })
        self.notifier.notify("Success", SAVE_SUCCESS_MESSAGE, "success")
        self.close_modal()
        if self.config.form_reset_policy is FormResetPolicy.ON_SUCCESS:
            self.reset_form()
        self._refetch()
        return True

    def handle_success(self) -> None:
        """Finish a create that a host-side record form persisted itself.

        No create events are emitted since the record already exists.
        Closes the modal if it is open, then notifies and reloads the list.
        """
        if self.form.is_modal_open:
            self.close_modal()
        self.notifier.notify("Success", RECORD_CREATED_MESSAGE, "success")
        self._refetch()

    # --- list --------------------------------------------------------------

    def refresh(self) -> None:
        """Reload the record list and tell the user."""
        self._refetch()
        self.notifier.notify("Info", REFRESH_MESSAGE, "info")

    def _refetch(self) -> None:
        stream = self._stream or self.gateway.list()
        state = stream.refetch()
        if self._subscription is None:
            self._list_state = state

    # --- row actions and navigation ---------------------------------------

    def handle_row_action(self, action_name: str, record_id: str, record_name: str) -> None:
        """Publish a row action and navigate for `view` and `edit`."""
        self.form.selected_record_id = record_id
        self.emitter.emit(ROW_ACTION, {
            "action": action_name,
            "recordId": record_id,
            "recordName": record_name,
        })

        kind = ROW_ACTION_TO_NAVIGATION.get(action_name)
        if kind is None:
            if self.config.unknown_row_action is UnknownRowActionPolicy.WARN:
                logger.warning(f"Unsupported row action '{action_name}' for record {record_id}")
                self.notifier.notify("Info", f"Unsupported action: {action_name}", "info")
            else:
                logger.debug(f"Ignoring row action '{action_name}'")
            return

        self.navigator.navigate(NavigationTarget(
            kind=kind,
            object_type=self.config.object_api_name,
            record_id=record_id,
        ))

    def navigate_to_list_view(self) -> None:
        """Open the platform list of emission records with the configured filter."""
        self.navigator.navigate(NavigationTarget(
            kind=OBJECT_LIST,
            object_type=self.config.object_api_name,
            list_filter=self.config.list_view_filter,
        ))


__all__ = [
    "SAVE_SUCCESS_MESSAGE",
    "SAVE_FALLBACK_ERROR",
    "REFRESH_MESSAGE",
    "RECORD_CREATED_MESSAGE",
    "EmissionStateStore",
]
