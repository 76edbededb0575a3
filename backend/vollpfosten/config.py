import os
from pathlib import Path


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev")

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Reverse proxy / IP headers
    TRUST_PROXY_HEADERS = os.environ.get("TRUST_PROXY_HEADERS", "1") == "1"

    # Category collections
    CATEGORIES_DIR = os.environ.get(
        "CATEGORIES_DIR",
        str(Path(__file__).resolve().parent / "game" / "categories"),
    )
    # Comma separated preset names loaded into the session at startup
    DEFAULT_COLLECTIONS = os.environ.get("DEFAULT_COLLECTIONS", "")

    # Round
    ROUND_DURATION_SEC = int(os.environ.get("ROUND_DURATION_SEC", "60"))
    CARD_SIZE = int(os.environ.get("CARD_SIZE", "6"))

    # Ticker
    ENABLE_TICKER = os.environ.get("ENABLE_TICKER", "1") == "1"
    TICK_INTERVAL_SEC = float(os.environ.get("TICK_INTERVAL_SEC", "1.0"))
