import os
import random
import sys

import pytest

# Ensure the backend root (containing the `vollpfosten` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from vollpfosten.config import Config
from vollpfosten.game.service import SessionStore
from vollpfosten.server import create_app
from vollpfosten.state import get_store


class TestConfig:
    TESTING = True
    SECRET_KEY = 'test-secret'
    CORS_ORIGINS = '*'
    TRUST_PROXY_HEADERS = False
    CATEGORIES_DIR = Config.CATEGORIES_DIR
    DEFAULT_COLLECTIONS = ''
    ROUND_DURATION_SEC = 60
    CARD_SIZE = 6
    ENABLE_TICKER = False
    TICK_INTERVAL_SEC = 0.01


@pytest.fixture()
def app_and_socketio():
    return create_app(TestConfig)


@pytest.fixture()
def flask_app(app_and_socketio):
    return app_and_socketio[0]


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(app_and_socketio):
    flask_app, socketio = app_and_socketio
    test_client = socketio.test_client(flask_app, flask_test_client=flask_app.test_client())
    yield test_client
    try:
        test_client.disconnect()
    except Exception:
        pass


@pytest.fixture()
def app_store(flask_app):
    return get_store(flask_app)


@pytest.fixture()
def store():
    return SessionStore()


@pytest.fixture()
def rng():
    return random.Random(1234)
