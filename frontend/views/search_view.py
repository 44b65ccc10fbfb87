# frontend/views/search_view.py
import streamlit as st

from frontend.controllers.view_state import ViewState


class SearchView:
    @staticmethod
    def render_search_bar(state: ViewState):
        """
        Ticker input and fetch button.
        Returns (symbol, clicked, button slot); the slot lets the app swap in the busy label.
        """
        col_input, col_button = st.columns([4, 1])
        symbol = col_input.text_input(
            "Stock symbol",
            value=state.symbol,
            placeholder="Enter stock symbol (e.g. AAPL)",
            label_visibility="collapsed",
        )
        button_slot = col_button.empty()
        clicked = button_slot.button(
            state.button_label,
            disabled=not state.can_fetch(symbol),
            use_container_width=True,
            type="primary",
            key="fetch_button",
        )
        return symbol, clicked, button_slot

    @staticmethod
    def render_error(state: ViewState):
        if state.error:
            st.error(state.error, icon="⚠️")
