# -*- coding: utf-8 -*-

from domain.models import Phase, TimerSnapshot

WORK_SEC = 30 * 60
BREAK_SEC = 5 * 60


class PeriodTimer:
    """
    Work/break countdown state machine (no Tkinter).
    UI / Service triggers tick() and alarm_tick() each second.

    Every user command clears the alarm before doing anything else.
    """

    def __init__(self, work_sec: int = WORK_SEC, break_sec: int = BREAK_SEC):
        if int(work_sec) <= 0 or int(break_sec) <= 0:
            raise ValueError("Phase durations must be positive.")
        self.work_sec = int(work_sec)
        self.break_sec = int(break_sec)

        self.phase = Phase.WORK
        self.remaining_sec = self.work_sec
        self.is_running = False
        self.alarm_active = False

    def duration_of(self, phase: Phase) -> int:
        return self.work_sec if phase is Phase.WORK else self.break_sec

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.phase,
            remaining_sec=self.remaining_sec,
            is_running=self.is_running,
            alarm_active=self.alarm_active,
        )

    def start(self) -> None:
        # keeps remaining time, so this doubles as resume
        self.alarm_active = False
        self.is_running = True

    def stop(self) -> None:
        self.alarm_active = False
        self.is_running = False

    def reset(self) -> None:
        self.alarm_active = False
        self.remaining_sec = self.duration_of(self.phase)

    def switch_phase(self) -> None:
        self.alarm_active = False
        self.phase = self.phase.other()
        self.remaining_sec = self.duration_of(self.phase)

    def tick(self) -> bool:
        """
        Returns True if the phase ended on this tick.
        """
        if not self.is_running:
            return False

        if self.remaining_sec > 0:
            self.remaining_sec -= 1

        if self.remaining_sec <= 0:
            self.is_running = False
            self.switch_phase()
            self.alarm_active = True
            return True

        return False

    def alarm_tick(self) -> bool:
        """
        Returns True if the caller should emit one alarm signal now.
        """
        return self.alarm_active
