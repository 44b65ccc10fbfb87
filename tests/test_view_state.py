"""Tests for the dashboard fetch/display state machine."""

from frontend.controllers.view_state import ERROR, IDLE, LOADING, SUCCESS, ViewState


def test_idle_until_symbol_entered():
    state = ViewState()
    assert state.status == IDLE
    assert not state.can_fetch("")
    assert not state.can_fetch("   ")
    assert state.can_fetch("aapl")
    assert state.button_label == "Fetch Data"


def test_loading_disables_fetch():
    state = ViewState()
    state.begin_fetch(" aapl ")

    assert state.status == LOADING
    assert state.symbol == "AAPL"
    assert not state.can_fetch("AAPL")
    assert state.button_label == "Loading..."


def test_success():
    state = ViewState()
    state.begin_fetch("AAPL")
    state.succeed({"quote": {}})

    assert state.status == SUCCESS
    assert state.data == {"quote": {}}
    assert state.error == ""


def test_error_clears_stale_data():
    state = ViewState()
    state.begin_fetch("AAPL")
    state.succeed({"quote": {}})
    state.begin_fetch("ZZZZ")
    state.fail("Failed to fetch stock data")

    assert state.status == ERROR
    assert state.data is None
    assert state.error == "Failed to fetch stock data"


def test_retry_from_error_goes_through_loading():
    state = ViewState(error="boom")
    state.begin_fetch("AAPL")

    assert state.status == LOADING
    assert state.error == ""
