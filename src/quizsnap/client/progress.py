# src/quizsnap/client/progress.py

import random
import threading
from typing import Callable, Optional

from src.quizsnap import config


class ProgressTicker:
    """
    Repeating timer that feeds random increments to `on_tick` until cancelled.

    The value it drives is for display only; it knows nothing about the request
    it accompanies.
    """

    def __init__(self, on_tick: Callable[[float], None], interval: Optional[float] = None,
                 max_increment: Optional[float] = None, rng: Optional[random.Random] = None):
        self.on_tick = on_tick
        self.interval = config.PROGRESS_INTERVAL_SECONDS if interval is None else interval
        self.max_increment = config.PROGRESS_MAX_INCREMENT if max_increment is None else max_increment
        self._rng = rng or random.Random()
        self._stopped = threading.Event()
        self._thread = threading.Thread(target=self._run, name="progress-ticker", daemon=True)

    def start(self):
        self._thread.start()

    def cancel(self):
        """Stop ticking. No tick is delivered once this returns."""
        self._stopped.set()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def _run(self):
        while not self._stopped.wait(self.interval):
            self.on_tick(self._rng.uniform(0, self.max_increment))
