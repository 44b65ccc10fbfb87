import os
import streamlit as st

from frontend.controllers.dashboard_controller import DashboardController
from frontend.controllers.view_state import ViewState
from frontend.views.financial_view import FinancialView
from frontend.views.search_view import SearchView

# --- 1. Base configuration ---
BACKEND_URL = os.getenv("BACKEND_URL", "http://backend:8000")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

st.set_page_config(page_title="Financial Viewer", layout="wide")
if "view_state" not in st.session_state:
    st.session_state.view_state = ViewState()

state: ViewState = st.session_state.view_state
controller = DashboardController(BACKEND_URL, timeout=REQUEST_TIMEOUT)

FinancialView.inject_css()

# --- 2. Search bar ---
symbol, clicked, button_slot = SearchView.render_search_bar(state)
if clicked:
    state.begin_fetch(symbol)
    button_slot.button(state.button_label, disabled=True, use_container_width=True, key="fetch_button_busy")
    with st.spinner(f"Fetching {state.symbol}..."):
        controller.load(state, symbol)
    st.rerun()

SearchView.render_error(state)

# --- 3. Panel ---
if state.data is not None:
    FinancialView.render(state.data, state.symbol)
