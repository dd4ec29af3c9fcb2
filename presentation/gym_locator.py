# streamlit run presentation/gym_locator.py
import sys
from pathlib import Path

import streamlit as st
from streamlit_folium import st_folium

# Ensure the repository root is on the import path so absolute imports work
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.append(str(REPO_ROOT))

from core.config import configure_logging
from core.exceptions import LocatorError
from domain.models import Coordinate, DistanceUnit
from infrastructure.db import SqlGymRepository
from presentation.common import gym_map, listings_frame
from usecases.gyms import locate_gyms

DEFAULT_CENTER = Coordinate(37.7749, -122.4194)

configure_logging()
st.set_page_config(page_title="Gym Locator", page_icon="🏋️", layout="wide")
st.title("Gym Locator")
st.caption("Find gyms near you")

if "gym_origin" not in st.session_state:
    st.session_state["gym_origin"] = None

with st.form("gym_locator_form"):
    col1, col2 = st.columns(2)
    with col1:
        lat = st.number_input("Latitude", value=DEFAULT_CENTER.latitude, format="%.6f")
    with col2:
        lon = st.number_input("Longitude", value=DEFAULT_CENTER.longitude, format="%.6f")
    term = st.text_input("Search gyms by name, address, or city")
    unit = st.radio("Units", [u.value for u in DistanceUnit], horizontal=True)
    submitted = st.form_submit_button("Search")

if submitted:
    st.session_state["gym_origin"] = Coordinate(lat, lon)

origin = st.session_state["gym_origin"]

try:
    with SqlGymRepository() as repo:
        listings = locate_gyms(repo, origin=origin, search_term=term, unit=unit)
except LocatorError as exc:  # pragma: no cover - UI feedback
    st.error(f"Gym directory unavailable: {exc.message}")
    st.stop()

if not listings:
    st.info("No gyms found.")
else:
    left, right = st.columns(2)
    with left:
        st.dataframe(listings_frame(listings), use_container_width=True, hide_index=True)
    with right:
        fmap = gym_map(origin or DEFAULT_CENTER, listings, origin)
        st_folium(fmap, width=700, height=500, returned_objects=[], key="gym_locator_map")
