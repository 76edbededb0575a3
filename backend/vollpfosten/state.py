from __future__ import annotations

from flask import Flask, current_app

from .game.service import SessionStore
from .game.ticker import TimeoutTicker

EXTENSION_KEY = "vollpfosten"


def init_state(app: Flask, store: SessionStore, ticker: TimeoutTicker) -> None:
    app.extensions[EXTENSION_KEY] = {"store": store, "ticker": ticker}


def get_store(app: Flask | None = None) -> SessionStore:
    return (app or current_app).extensions[EXTENSION_KEY]["store"]


def get_ticker(app: Flask | None = None) -> TimeoutTicker:
    return (app or current_app).extensions[EXTENSION_KEY]["ticker"]
