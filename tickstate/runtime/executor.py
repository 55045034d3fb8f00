# tickstate/runtime/executor.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
import threading
import time
from typing import Optional

from tickstate.core.machine import StateMachine

logger = logging.getLogger(__name__)


class Executor:
    """
    Runs the tick loop for a single state machine, calling ``update(dt)`` at a
    fixed rate until stopped.
    """

    def __init__(self, machine: StateMachine, tick_rate: float = 10.0) -> None:
        """
        Initialize with a state machine and a tick rate.

        :param machine: StateMachine instance to drive.
        :param tick_rate: Ticks per second.
        :raises ValueError: If tick_rate is not positive.
        """
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive, got {tick_rate!r}")
        self.machine = machine
        self.tick_rate = tick_rate
        self._interval = 1.0 / tick_rate
        self._ticks = 0
        self._running = False
        self._lock = threading.Lock()

    @property
    def interval(self) -> float:
        """Seconds between ticks; also the default ``dt``."""
        return self._interval

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def is_running(self) -> bool:
        with self._lock:
            return self._running

    def step(self, dt: Optional[float] = None) -> None:
        """
        Execute one tick, starting the machine first if necessary.

        :param dt: Elapsed time to report; defaults to the tick interval.
        """
        if not self.machine.is_started:
            self.machine.start()
        self.machine.update(self._interval if dt is None else dt)
        self._ticks += 1

    def run(self, max_ticks: Optional[int] = None) -> None:
        """
        Block, ticking the machine until ``stop()`` is called or ``max_ticks``
        ticks have run. Exceptions from the machine end the loop and propagate.
        """
        with self._lock:
            self._running = True

        logger.debug("Executor running at %s ticks/s", self.tick_rate)
        executed = 0
        try:
            while True:
                with self._lock:
                    if not self._running:
                        break
                if max_ticks is not None and executed >= max_ticks:
                    break

                started_at = time.monotonic()
                self.step()
                executed += 1

                remaining = self._interval - (time.monotonic() - started_at)
                if remaining > 0:
                    time.sleep(remaining)
        finally:
            with self._lock:
                self._running = False
            logger.debug("Executor stopped after %d ticks", executed)

    def stop(self) -> None:
        """
        Signal the loop to stop after the current tick.
        """
        with self._lock:
            self._running = False
