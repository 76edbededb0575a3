from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

from . import rounds
from .service import SessionStore

logger = logging.getLogger(__name__)


class TimeoutTicker:
    """Counts the round timer down once per ``interval`` seconds.

    The ticker only ever touches ``remaining_seconds``. It does not end the
    round at zero; readers poll for ``remaining_seconds == 0``.
    """

    def __init__(
        self,
        store: SessionStore,
        interval: float = 1.0,
        on_tick: Callable[[int | None], None] | None = None,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        self.store = store
        self.interval = interval
        self.on_tick = on_tick
        # socketio.sleep under eventlet so the loop yields to the hub
        self.sleep = sleep
        self._stop = threading.Event()
        self._task: Any = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._stop.is_set()

    def tick(self) -> int | None:
        state = self.store.replace_round_state(rounds.tick)
        remaining = state.remaining_seconds

        if self.on_tick is not None:
            try:
                self.on_tick(remaining)
            except Exception:
                logger.exception("tick callback failed")

        return remaining

    def run(self) -> None:
        logger.info("timeout ticker started (interval=%ss)", self.interval)
        while not self._stop.is_set():
            self.sleep(self.interval)
            if self._stop.is_set():
                break
            self.tick()
        logger.info("timeout ticker stopped")

    def start(self, spawn: Callable[..., Any] | None = None) -> None:
        """Runs the ticker in the background.

        ``spawn`` receives ``run`` and must start it, e.g.
        ``socketio.start_background_task``. A daemon thread is used otherwise.
        """
        if self._task is not None:
            return
        self._stop.clear()
        if spawn is None:
            thread = threading.Thread(target=self.run, name="timeout-ticker", daemon=True)
            thread.start()
            self._task = thread
        else:
            self._task = spawn(self.run)

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        task, self._task = self._task, None
        join = getattr(task, "join", None)
        if join is None:
            return
        # eventlet background tasks take no join timeout
        if timeout is None:
            join()
        else:
            join(timeout)
