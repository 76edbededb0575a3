from __future__ import annotations

import logging

from flask import Flask
from flask_socketio import SocketIO, emit

from ..game import service
from ..state import get_store

logger = logging.getLogger(__name__)

TICK_EVENT = "round:tick"
SYNC_EVENT = "round:sync"
STATE_EVENT = "round:state"


def make_tick_broadcaster(socketio: SocketIO):
    """Builds the ticker callback that pushes the countdown to every client."""

    def _broadcast(remaining: int | None) -> None:
        if remaining is None:
            return
        socketio.emit(TICK_EVENT, {"remainingSeconds": remaining})

    return _broadcast


def register_socketio_handlers(socketio: SocketIO, app: Flask) -> None:
    @socketio.on("connect")
    def on_connect():
        emit(STATE_EVENT, service.round_public_state(get_store(app).read_round_state()))

    @socketio.on(SYNC_EVENT)
    def round_sync(data=None):
        return service.round_public_state(get_store(app).read_round_state())
