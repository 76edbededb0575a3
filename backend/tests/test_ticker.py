import time

import pytest

from vollpfosten.game import service
from vollpfosten.game.models import RoundState
from vollpfosten.game.ticker import TimeoutTicker
from vollpfosten.server import create_app
from vollpfosten.state import get_store, get_ticker


def _with_timer(store, seconds):
    store.replace_round_state(lambda s: RoundState(letter='T', remaining_seconds=seconds))
    return store


def test_tick_decrements_k_times(store):
    _with_timer(store, 10)
    ticker = TimeoutTicker(store)
    for _ in range(4):
        ticker.tick()
    assert store.read_round_state().remaining_seconds == 6


def test_tick_never_goes_negative(store):
    _with_timer(store, 3)
    ticker = TimeoutTicker(store)
    for _ in range(10):
        ticker.tick()
    assert store.read_round_state().remaining_seconds == 0


def test_tick_without_timer_changes_nothing(store):
    ticker = TimeoutTicker(store)
    assert ticker.tick() is None
    assert store.read_round_state() == RoundState()


def test_tick_only_touches_the_timer(store, rng):
    store.append_collection(['Animal', 'City', 'River'])
    service.roll_letter(store, rng=rng)
    before = service.start_timer(store, timeout=5, card_size=3, rng=rng)
    TimeoutTicker(store).tick()
    after = store.read_round_state()
    assert after.remaining_seconds == 4
    assert after.full_card == before.full_card
    assert after.active_card == before.active_card
    assert after.current_index == before.current_index
    assert after.letter == before.letter


def test_callback_receives_remaining_and_failures_are_contained(store):
    _with_timer(store, 2)
    seen = []

    def _callback(remaining):
        seen.append(remaining)
        raise RuntimeError('broken client')

    ticker = TimeoutTicker(store, on_tick=_callback)
    assert ticker.tick() == 1
    assert ticker.tick() == 0
    assert seen == [1, 0]


def test_background_ticker_counts_down_and_stops(store):
    _with_timer(store, 1000)
    ticker = TimeoutTicker(store, interval=0.01)
    ticker.start()
    assert ticker.running

    deadline = time.time() + 2.0
    while store.read_round_state().remaining_seconds > 995 and time.time() < deadline:
        time.sleep(0.01)
    ticker.stop(timeout=1.0)
    assert not ticker.running

    stopped_at = store.read_round_state().remaining_seconds
    assert stopped_at <= 995
    time.sleep(0.05)
    assert store.read_round_state().remaining_seconds == stopped_at


def test_start_with_custom_spawn(store):
    spawned = []

    class _Task:
        def join(self, timeout=None):
            spawned.append('joined')

    def _spawn(fn):
        spawned.append(fn)
        return _Task()

    ticker = TimeoutTicker(store)
    ticker.start(spawn=_spawn)
    ticker.start(spawn=_spawn)
    assert spawned == [ticker.run]
    ticker.stop()
    assert spawned[-1] == 'joined'


def test_run_sleeps_through_injected_function(store):
    _with_timer(store, 10)
    naps = []

    def _sleep(seconds):
        naps.append(seconds)
        if len(naps) == 4:
            ticker.stop()

    ticker = TimeoutTicker(store, interval=0.5, sleep=_sleep)
    ticker.run()

    assert naps == [0.5, 0.5, 0.5, 0.5]
    # the fourth nap ended with the stop signal, so only three ticks ran
    assert store.read_round_state().remaining_seconds == 7


def test_ticker_yields_to_eventlet_hub(monkeypatch):
    eventlet = pytest.importorskip('eventlet')
    from conftest import TestConfig

    monkeypatch.setenv('SOCKETIO_ASYNC_MODE', 'eventlet')

    class EventletConfig(TestConfig):
        ENABLE_TICKER = True
        TICK_INTERVAL_SEC = 0.05

    app, socketio = create_app(EventletConfig)
    assert socketio.async_mode == 'eventlet'
    store = get_store(app)
    store.replace_round_state(lambda s: RoundState(letter='E', remaining_seconds=100))

    started = time.monotonic()
    eventlet.sleep(0.3)
    elapsed = time.monotonic() - started
    get_ticker(app).stop()

    assert elapsed < 2.0
    assert store.read_round_state().remaining_seconds < 100
