"""
Carbon Footprint Tracker - Streamlit host

Wires the framework-agnostic emission state store to Streamlit services:
a YAML-file gateway, toast notifications and query-parameter navigation.
"""

from pathlib import Path
import sys
import streamlit as st

# Ensure project root is on sys.path to enable emission_tracker imports
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from emission_tracker.config import load_config
from emission_tracker.ui_logic import EmissionStateStore, EventEmitter, WidgetEvent
from emission_tracker.utils_logging import configure_logging
from ui.services import EmissionService, StreamlitNotifier, QueryParamNavigator
from ui.components.tracker_tab import render_tracker_tab
from ui.components.listing_tab import render_listing_tab
from ui.components.record_detail import render_record_page


st.set_page_config(page_title="Carbon Footprint Tracker", page_icon="🌱", layout="wide", initial_sidebar_state="collapsed")

MAX_EVENT_LOG = 50


def _init_session() -> None:
    config = load_config()
    configure_logging(config.log_dir, debug=config.debug)

    service = EmissionService(config.data_dir)
    page_events = EventEmitter()
    page_events.add_any_listener(_record_event)
    store = EmissionStateStore(
        gateway=service,
        notifier=StreamlitNotifier(),
        navigator=QueryParamNavigator(),
        emitter=EventEmitter(parent=page_events),
        config=config,
    )
    store.mount()

    st.session_state["event_log"] = []
    st.session_state["emission_service"] = service
    st.session_state["tracker_store"] = store


def _record_event(event: WidgetEvent) -> None:
    log = st.session_state.setdefault("event_log", [])
    log.insert(0, {"event": event.name, **event.detail})
    del log[MAX_EVENT_LOG:]


def main() -> None:
    if "tracker_store" not in st.session_state:
        _init_session()
    store: EmissionStateStore = st.session_state["tracker_store"]
    service: EmissionService = st.session_state["emission_service"]
    navigator = QueryParamNavigator()

    with st.sidebar:
        st.subheader("Widget events")
        st.write(st.session_state.get("event_log", []))

    target = navigator.current_target()
    if target is not None:
        render_record_page(store, target, service, navigator)
        return

    st.title("🌱 Carbon Footprint Tracker")
    tabs = st.tabs(["Tracker", "Listing"])
    with tabs[0]:
        render_tracker_tab(store)
    with tabs[1]:
        render_listing_tab(store)


if __name__ == "__main__":
    main()
