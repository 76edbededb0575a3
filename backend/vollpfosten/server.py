from __future__ import annotations

import logging
import os
import sys

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from werkzeug.middleware.proxy_fix import ProxyFix

from .config import Config
from .game import service
from .game.errors import RoundError
from .game.service import SessionStore
from .game.ticker import TimeoutTicker
from .realtime.handlers import make_tick_broadcaster, register_socketio_handlers
from .routes.categories import bp as categories_bp
from .routes.health import bp as health_bp
from .routes.rounds import bp as rounds_bp
from .state import init_state

logger = logging.getLogger(__name__)


def _preload_collections(app: Flask, store: SessionStore) -> None:
    names = [n.strip() for n in app.config.get("DEFAULT_COLLECTIONS", "").split(",") if n.strip()]
    for name in names:
        # A broken preset at startup is fatal: let the error propagate.
        service.add_collection(store, name, app.config["CATEGORIES_DIR"])


def create_app(config_class=Config) -> tuple[Flask, SocketIO]:
    app = Flask(__name__)
    app.config.from_object(config_class)

    if app.config.get("TRUST_PROXY_HEADERS", False):
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1, x_port=1)

    cors_origins = app.config.get("CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    env_async_mode = os.environ.get("SOCKETIO_ASYNC_MODE", "").strip()
    if env_async_mode:
        async_mode = env_async_mode
    elif app.config.get("TESTING"):
        async_mode = "threading"
    else:
        # Default choice:
        # - Windows: threading (eventlet has known compatibility issues on newer Python)
        # - Python >= 3.13: threading (safer default)
        # - Otherwise: eventlet
        if sys.platform.startswith("win") or sys.version_info >= (3, 13):
            async_mode = "threading"
        else:
            async_mode = "eventlet"

    socketio = SocketIO(
        app,
        cors_allowed_origins=cors_origins,
        async_mode=async_mode,
    )

    store = SessionStore()
    ticker = TimeoutTicker(
        store,
        interval=float(app.config.get("TICK_INTERVAL_SEC", 1.0)),
        on_tick=make_tick_broadcaster(socketio),
        sleep=socketio.sleep,
    )
    init_state(app, store, ticker)

    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(categories_bp, url_prefix="/api")
    app.register_blueprint(rounds_bp, url_prefix="/api")

    @app.errorhandler(RoundError)
    def handle_round_error(exc: RoundError):
        if exc.status >= 500:
            logger.error("round error: %s", exc)
        return jsonify(exc.to_dict()), exc.status

    register_socketio_handlers(socketio, app)

    _preload_collections(app, store)

    if app.config.get("ENABLE_TICKER", True):
        ticker.start(spawn=socketio.start_background_task)

    return app, socketio
