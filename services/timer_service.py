# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.clock_format import format_time
from core.period_timer import PeriodTimer
from domain.models import TimerSnapshot

logger = logging.getLogger(__name__)

Listener = Callable[[TimerSnapshot], None]


class TimerService:
    """
    Orchestrates:
    - PeriodTimer state
    - Callbacks for UI (time changed, state changed, phase ended, alarm)
    - Best-effort alarm emission
    """

    def __init__(self, engine: Optional[PeriodTimer] = None):
        self.engine = engine if engine is not None else PeriodTimer()

        self._on_tick: Optional[Listener] = None
        self._on_phase_change: Optional[Listener] = None
        self._on_state_change: Optional[Listener] = None
        self._on_alarm: Optional[Listener] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Listener) -> None:
        self._on_tick = fn

    def set_on_phase_change(self, fn: Listener) -> None:
        self._on_phase_change = fn

    def set_on_state_change(self, fn: Listener) -> None:
        self._on_state_change = fn

    def set_on_alarm(self, fn: Listener) -> None:
        self._on_alarm = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.engine.snapshot())

    def _emit_phase_change(self) -> None:
        if self._on_phase_change:
            self._on_phase_change(self.engine.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot())

    def _emit_alarm(self) -> None:
        if not self._on_alarm:
            return
        try:
            self._on_alarm(self.engine.snapshot())
        except Exception:
            # the alarm never feeds back into timer state
            logger.exception("Alarm signal failed")

    # ----- Public API -----
    def get_snapshot(self) -> TimerSnapshot:
        return self.engine.snapshot()

    def start(self) -> None:
        if not self.engine.is_running:
            logger.info(
                "Start %s at %s",
                self.engine.phase.value,
                format_time(self.engine.remaining_sec),
            )
        self.engine.start()
        self._emit_state_change()

    def stop(self) -> None:
        if self.engine.is_running:
            logger.info(
                "Stop %s at %s",
                self.engine.phase.value,
                format_time(self.engine.remaining_sec),
            )
        self.engine.stop()
        self._emit_state_change()

    def reset(self) -> None:
        self.engine.reset()
        logger.info("Reset %s", self.engine.phase.value)
        self._emit_state_change()

    def switch_phase(self) -> None:
        self.engine.switch_phase()
        logger.info("Switched to %s", self.engine.phase.value)
        self._emit_state_change()

    def tick(self) -> None:
        """
        Should be called once per second by UI loop while running.
        """
        if not self.engine.is_running:
            return

        phase_ended = self.engine.tick()
        logger.debug("Tick: %s left", format_time(self.engine.remaining_sec))

        # always emit tick
        self._emit_tick()

        if phase_ended:
            logger.info("Phase over, now %s", self.engine.phase.value)
            self._emit_phase_change()

    def alarm_tick(self) -> None:
        """
        Should be called once per second by UI loop while the alarm is active.
        """
        if self.engine.alarm_tick():
            self._emit_alarm()
