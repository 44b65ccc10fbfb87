import logging
import requests
from typing import Any, Dict

from frontend.controllers.view_state import ViewState

FALLBACK_ERROR = "Failed to fetch data"
UNEXPECTED_ERROR = "An unexpected error occurred"


class BackendRequestError(Exception):
    """Backend unreachable or answered with a non-200 status."""


class DashboardController:
    """
    Frontend controller:
    handles the backend request and drives the ViewState of the dashboard.
    """
    def __init__(self, backend_url: str, timeout: float = 30):
        self.backend_url = backend_url.rstrip("/")
        self.timeout = timeout

    def fetch_financial_data(self, symbol: str) -> Dict[str, Any]:
        """
        Request the financial panel data for one symbol.
        Raises BackendRequestError with the backend's error text when there is one.
        """
        try:
            response = requests.get(
                f"{self.backend_url}/api/financial",
                params={"symbol": symbol.strip().upper()},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise BackendRequestError(str(e) or UNEXPECTED_ERROR) from e

        try:
            result = response.json()
        except ValueError:
            result = {}

        if not response.ok:
            message = result.get("error") if isinstance(result, dict) else None
            raise BackendRequestError(message or FALLBACK_ERROR)
        if not isinstance(result, dict):
            raise BackendRequestError(UNEXPECTED_ERROR)
        return result

    def load(self, state: ViewState, symbol: str) -> ViewState:
        """One full fetch cycle: loading, then success or error."""
        state.begin_fetch(symbol)
        try:
            state.succeed(self.fetch_financial_data(state.symbol))
        except BackendRequestError as e:
            logging.warning(f"Fetch failed for {state.symbol}: {e}")
            state.fail(str(e) or UNEXPECTED_ERROR)
        finally:
            state.loading = False
        return state
