# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum


class Phase(Enum):
    WORK = "work"
    BREAK = "break"

    def other(self) -> "Phase":
        return Phase.BREAK if self is Phase.WORK else Phase.WORK


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Phase
    remaining_sec: int
    is_running: bool
    alarm_active: bool
