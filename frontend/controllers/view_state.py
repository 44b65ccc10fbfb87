from dataclasses import dataclass
from typing import Any, Dict, Optional

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


@dataclass
class ViewState:
    """
    Fetch/display cycle of the dashboard, kept in st.session_state.
    idle -> loading -> success | error, and back through loading on every fetch.
    """
    symbol: str = ""
    data: Optional[Dict[str, Any]] = None
    loading: bool = False
    error: str = ""

    @property
    def status(self) -> str:
        if self.loading:
            return LOADING
        if self.error:
            return ERROR
        if self.data is not None:
            return SUCCESS
        return IDLE

    def can_fetch(self, symbol: str) -> bool:
        return bool(symbol.strip()) and not self.loading

    @property
    def button_label(self) -> str:
        return "Loading..." if self.loading else "Fetch Data"

    def begin_fetch(self, symbol: str):
        self.symbol = symbol.strip().upper()
        self.loading = True
        self.error = ""

    def succeed(self, data: Dict[str, Any]):
        self.data = data
        self.loading = False

    def fail(self, message: str):
        # stale data must never render next to an error
        self.data = None
        self.error = message
        self.loading = False
