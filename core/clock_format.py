# -*- coding: utf-8 -*-

from domain.models import Phase

MIN_FONT_SIZE = 50


def format_time(seconds: int) -> str:
    m = max(0, seconds) // 60
    s = max(0, seconds) % 60
    return f"{m:02d}:{s:02d}"


def font_size_for_width(width: int) -> int:
    return max(int(width) // 10, MIN_FONT_SIZE)


def phase_label(phase: Phase) -> str:
    return "Work" if phase is Phase.WORK else "Break"
