import streamlit as st
import streamlit.components.v1 as components

# Import your modules
from ridegenie.agents.pricing import get_estimates
from ridegenie.components.cards import (
    CARD_CSS,
    comparison_table,
    render_analysis,
    render_map_overlay,
    render_ride_card,
)
from ridegenie.models import TransportMode
from ridegenie.session import SearchState
from ridegenie.utils.booking import build_booking_url
from ridegenie.utils.geolocation import LocationUnavailable, detect_current_location
from ridegenie.utils.maps import build_map_embed_url

MODE_ICONS = {TransportMode.CAB: "🚕", TransportMode.AUTO: "🛺", TransportMode.BIKE: "🏍️"}

# --- PAGE CONFIG ---
st.set_page_config(page_title="RideGenie", page_icon="🚕", layout="wide")

# --- CSS FOR STYLING ---
st.markdown(CARD_CSS, unsafe_allow_html=True)

if "search" not in st.session_state:
    st.session_state["search"] = SearchState()
state: SearchState = st.session_state["search"]


def use_current_location():
    """Button callback: fills the pickup box before the widgets are drawn."""
    try:
        st.session_state["pickup_input"] = detect_current_location()
        st.session_state.pop("location_error", None)
    except LocationUnavailable as e:
        print(f"❌ Geolocation Error: {e}")
        st.session_state["location_error"] = "Could not access location. Please enter manually."


def run_search(pickup: str, dropoff: str, mode: TransportMode):
    token = state.begin_search(pickup, dropoff, mode)
    if token is None:
        st.warning("Enter both pickup and dropoff to compare prices.")
        return

    with st.spinner("Checking Live Rates..."):
        try:
            result = get_estimates(pickup, dropoff, mode)
        except Exception as e:
            print(f"❌ Search Error: {e}")
            state.fail_search(token)
            return
    state.complete_search(token, result)


left, right = st.columns([1, 1.4], gap="large")

# ==========================================
# LEFT PANEL: INPUT & RESULTS
# ==========================================
with left:
    st.title("RideGenie")
    st.caption("LIVE PRICE AGGREGATOR")

    # --- Mode Selector ---
    mode = st.radio(
        "Mode",
        list(TransportMode),
        index=list(TransportMode).index(state.mode),
        format_func=lambda m: f"{MODE_ICONS[m]} {m.value.upper()}",
        horizontal=True,
        label_visibility="collapsed",
    )
    if state.change_mode(mode):
        # Already showing prices, refresh them for the new mode
        run_search(state.pickup, state.dropoff, state.mode)

    # --- Search Inputs ---
    st.button("📍 Use Current Location", on_click=use_current_location)
    if "location_error" in st.session_state:
        st.error(st.session_state.pop("location_error"))

    with st.form("search_form"):
        pickup = st.text_input("Pickup Location", key="pickup_input", placeholder="Pickup Location")
        dropoff = st.text_input("Dropoff Location", key="dropoff_input", placeholder="Dropoff Location")
        submitted = st.form_submit_button("🔍 Compare Prices", disabled=state.loading)

    if submitted:
        state.pickup, state.dropoff = pickup, dropoff
        run_search(pickup, dropoff, state.mode)

    # --- AI Analysis Section ---
    result = state.result
    if result:
        st.markdown(render_analysis(result), unsafe_allow_html=True)

        col_title, col_note = st.columns([2, 1])
        with col_title:
            st.subheader("Live Estimates")
        with col_note:
            st.caption("Real-time data simulated")

        for idx, option in enumerate(result.estimates):
            st.markdown(render_ride_card(option), unsafe_allow_html=True)
            st.link_button(
                "Book Now ➜",
                build_booking_url(option.provider, state.pickup, state.dropoff),
                width="stretch",
            )

        with st.expander("📊 Compare side by side"):
            st.dataframe(comparison_table(result), hide_index=True, width="stretch")
    elif not state.loading:
        st.markdown("### 📍 Plan your route")
        st.caption("Enter pickup and dropoff to see the route and live prices.")

# ==========================================
# RIGHT PANEL: MAP VISUALIZATION
# ==========================================
with right:
    # Map fields only change when a search starts
    components.iframe(build_map_embed_url(state.map_pickup, state.map_dropoff), height=640)
    st.markdown(render_map_overlay(state.map_pickup, state.map_dropoff), unsafe_allow_html=True)
    st.caption("🟢 LIVE TRAFFIC")
