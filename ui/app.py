"""Streamlit UI for the travel planner - form, itinerary list, map, export and share.

Run with: streamlit run ui/app.py
"""

# Add project root to sys.path for imports to work when run via streamlit
import sys
from pathlib import Path

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import pydeck as pdk  # noqa: E402
import streamlit as st  # noqa: E402

from backend.app.config import get_settings  # noqa: E402
from backend.app.itinerary.sharing import encode, token_from_query  # noqa: E402
from backend.app.models.common import format_money, transport_icon  # noqa: E402
from backend.app.utils.logging import configure_logging  # noqa: E402
from ui.helpers import (  # noqa: E402
    build_map_points,
    build_move_options,
    build_route_paths,
    call_export_pdf,
    call_generate,
    error_message,
    format_activity_line,
    format_transport_line,
    map_center,
)
from ui.session import PlannerSession  # noqa: E402

settings = get_settings()
configure_logging(settings.log_level)

# Page config
st.set_page_config(
    page_title="AI Travel Planner",
    page_icon="🌍",
    layout="wide",
)

# Initialize session state
if "planner" not in st.session_state:
    st.session_state.planner = PlannerSession()
    shared_token = token_from_query(st.query_params.to_dict(), param=settings.share_query_param)
    if shared_token and not st.session_state.planner.load_shared(shared_token):
        st.session_state.share_warning = "The shared trip link is invalid and was ignored."

session: PlannerSession = st.session_state.planner

# Title
st.title("AI Travel Planner 🌍🗺️")
st.divider()

col_left, col_right = st.columns([1, 2])

# =============================================================================
# LEFT COLUMN - TRIP FORM + ITINERARY
# =============================================================================
with col_left:
    if st.session_state.get("share_warning"):
        st.warning(st.session_state.share_warning)

    with st.form("trip_form"):
        city = st.text_input("Destination City *", value="Paris")
        budget = st.number_input("Budget (USD) *", min_value=1, value=1000, step=50)
        days = st.number_input("Days *", min_value=1, max_value=14, value=2, step=1)
        preferences = st.text_input("Preferences", value="culture, food", help="Add 'surprise' for a bonus pick")

        submitted = st.form_submit_button(
            "Generate Itinerary", type="primary", use_container_width=True, disabled=session.loading
        )

        if submitted:
            if not city.strip():
                session.fail("City is required")
            elif session.begin_request(
                "generate",
                city=city.strip(),
                budget=float(budget),
                days=int(days),
                preferences=preferences,
            ):
                st.rerun()

    if session.error and not session.loading:
        st.error(f"❌ {session.error}")

    itinerary = session.itinerary
    if itinerary is not None:
        st.subheader(f"Your Trip to {itinerary.city}")
        st.caption(f"Total Estimated Cost: **{format_money(itinerary.summary.total_cost)}**")

        for day_plan in itinerary.itinerary:
            with st.container(border=True):
                st.markdown(f"### Day {day_plan.day}")
                if day_plan.hotel is not None:
                    st.info(f"🏨 Hotel: **{day_plan.hotel.name}** - {format_money(day_plan.hotel.price)}")

                st.markdown("**Activities:**")
                if not day_plan.activities:
                    st.caption("_No activities - move one here_")
                for activity in day_plan.activities:
                    st.markdown(format_activity_line(activity))

                if day_plan.transport:
                    st.markdown("**Transport:**")
                    for leg in day_plan.transport:
                        st.caption(format_transport_line(leg))

        # --- MOVE ACTIVITY ---
        move_options = build_move_options(itinerary)
        if move_options:
            with st.form("move_form"):
                st.markdown("#### Reorder")
                activity_id = st.selectbox(
                    "Activity",
                    options=list(move_options),
                    format_func=lambda key: move_options[key],
                )
                dest_day = st.selectbox("Move to day", options=[d.day for d in itinerary.itinerary])
                position = st.number_input("Position (1 = first)", min_value=1, value=1, step=1)
                if st.form_submit_button("Move", use_container_width=True, disabled=session.loading):
                    if session.relocate_by_id(activity_id, int(dest_day), int(position) - 1):
                        st.rerun()

        # --- EXPORT + SHARE ---
        col_pdf, col_share = st.columns(2)
        with col_pdf:
            if st.button("Download PDF Guide", disabled=session.loading, use_container_width=True):
                if session.begin_request("export"):
                    st.rerun()
            if session.pdf_url:
                st.link_button("Open PDF in new tab", session.pdf_url, use_container_width=True)
        with col_share:
            if st.button("Share Trip", use_container_width=True):
                st.query_params[settings.share_query_param] = encode(itinerary)
                st.session_state.share_link = session.share_url(settings.ui_origin, settings.share_query_param)
            if st.session_state.get("share_link"):
                st.code(st.session_state.share_link, language=None)

# =============================================================================
# RIGHT COLUMN - MAP
# =============================================================================
with col_right:
    points = build_map_points(session.itinerary)
    if points:
        center_lat, center_lon = map_center(points)
        layers = [
            pdk.Layer(
                "PathLayer",
                data=build_route_paths(session.itinerary),
                get_path="path",
                get_color="color",
                width_min_pixels=3,
            ),
            pdk.Layer(
                "ScatterplotLayer",
                data=points,
                get_position=["lon", "lat"],
                get_fill_color="color",
                get_radius=60,
                radius_min_pixels=6,
                pickable=True,
            ),
        ]
        deck = pdk.Deck(
            map_style=None,
            initial_view_state=pdk.ViewState(latitude=center_lat, longitude=center_lon, zoom=12),
            layers=layers,
            tooltip={"text": "{tooltip}"},
        )
        st.pydeck_chart(deck)
        st.caption("*Lines follow each day's visit order. Hover a marker for details.*")
        with st.expander("Legend"):
            for point in points:
                st.caption(f"{point['label']} ({point['kind']})")
            st.caption(f"{transport_icon('walk')} walk · {transport_icon('bus')} bus · "
                       f"{transport_icon('train')} train · {transport_icon('taxi')} taxi")
    else:
        st.info("👈 Fill out the trip form and hit **Generate Itinerary** to see your trip on the map.")

# =============================================================================
# IN-FLIGHT REQUEST - runs after the page rendered with controls disabled
# =============================================================================
request = session.pending
if request is not None:
    with st.spinner("Generating itinerary..." if request["action"] == "generate" else "Building PDF guide..."):
        try:
            if request["action"] == "generate":
                session.apply_generated(
                    call_generate(
                        backend_url=settings.backend_url,
                        city=request["city"],
                        budget=request["budget"],
                        days=request["days"],
                        preferences=request["preferences"],
                    )
                )
                st.query_params.clear()
                st.session_state.share_link = None
            elif session.itinerary is not None:
                session.pdf_url = call_export_pdf(settings.backend_url, session.itinerary)
        except Exception as e:
            session.fail(error_message(e))
        finally:
            session.finish_request()
    st.rerun()
