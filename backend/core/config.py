import os
from typing import List


class Settings:
    """Backend configuration, read once from the environment."""

    API_TITLE: str = os.getenv("API_TITLE", "Financial Viewer API")
    API_VERSION: str = "1.0.0"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Comma separated, e.g. "http://localhost:8501,http://frontend:8501"
    CORS_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]


settings = Settings()
