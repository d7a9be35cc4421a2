# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import font as tkfont
from tkinter import ttk

from core.clock_format import MIN_FONT_SIZE, font_size_for_width, format_time, phase_label
from domain.models import TimerSnapshot
from services.timer_service import TimerService

TICK_MS = 1000


class TimerWidget(ttk.Frame):
    def __init__(self, master, timer_service: TimerService):
        super().__init__(master, padding=10)

        self.timer_service = timer_service

        self._tick_job = None
        self._alarm_job = None

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_phase_change(self._on_phase_change)
        self.timer_service.set_on_state_change(self._on_state_change)
        self.timer_service.set_on_alarm(self._on_alarm)

        self.winfo_toplevel().bind("<Configure>", self._on_resize, add="+")

        # initial render
        self._render(self.timer_service.get_snapshot())

    def _build_ui(self):
        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)

        self.phase_var = tk.StringVar(value="Work")
        self.time_var = tk.StringVar(value="30:00")

        self.time_font = tkfont.Font(family="Courier", size=MIN_FONT_SIZE, weight="bold")

        self.phase_lbl = ttk.Label(self, textvariable=self.phase_var)
        self.phase_lbl.grid(row=0, column=0, columnspan=2)

        self.time_label = ttk.Label(self, textvariable=self.time_var, font=self.time_font)
        self.time_label.grid(row=1, column=0, columnspan=2, padx=10, pady=10)

        self.start_btn = ttk.Button(self, text="Start", command=self._start)
        self.stop_btn = ttk.Button(self, text="Stop", command=self._stop)
        self.reset_btn = ttk.Button(self, text="Reset", command=self._reset)
        # always enabled: manual override mid-countdown
        self.switch_btn = ttk.Button(self, text="Switch", command=self._switch)

        self.start_btn.grid(row=2, column=0, padx=10, pady=(0, 6))
        self.stop_btn.grid(row=2, column=1, padx=10, pady=(0, 6))
        self.reset_btn.grid(row=3, column=0, padx=10)
        self.switch_btn.grid(row=3, column=1, padx=10)

    # ---- Commands (each one silences the alarm) ----
    def _start(self):
        self._stop_alarm_loop()
        self.timer_service.start()
        self._ensure_tick_loop()

    def _stop(self):
        self._stop_alarm_loop()
        self.timer_service.stop()
        self._stop_tick_loop()

    def _reset(self):
        self._stop_alarm_loop()
        self.timer_service.reset()

    def _switch(self):
        self._stop_alarm_loop()
        self.timer_service.switch_phase()

    # ---- Tick loop (UI-driven) ----
    def _ensure_tick_loop(self):
        if self._tick_job is None:
            self._tick_job = self.after(TICK_MS, self._tick_once)

    def _stop_tick_loop(self):
        if self._tick_job is not None:
            try:
                self.after_cancel(self._tick_job)
            except Exception:
                pass
            self._tick_job = None

    def _tick_once(self):
        self._tick_job = None
        snap = self.timer_service.get_snapshot()
        if snap.is_running:
            self.timer_service.tick()
            # phase end stops the engine, so no reschedule then
            snap = self.timer_service.get_snapshot()
        if snap.is_running:
            self._tick_job = self.after(TICK_MS, self._tick_once)

    # ---- Alarm loop ----
    def _ensure_alarm_loop(self):
        if self._alarm_job is None:
            self._alarm_job = self.after(TICK_MS, self._alarm_once)

    def _stop_alarm_loop(self):
        if self._alarm_job is not None:
            try:
                self.after_cancel(self._alarm_job)
            except Exception:
                pass
            self._alarm_job = None

    def _alarm_once(self):
        self._alarm_job = None
        self.timer_service.alarm_tick()
        if self.timer_service.get_snapshot().alarm_active:
            self._alarm_job = self.after(TICK_MS, self._alarm_once)

    def shutdown(self):
        self._stop_tick_loop()
        self._stop_alarm_loop()

    # ---- Service callbacks ----
    def _on_tick(self, snap: TimerSnapshot):
        self._render(snap)

    def _on_phase_change(self, snap: TimerSnapshot):
        self._stop_tick_loop()
        self._render(snap)
        self._ensure_alarm_loop()

    def _on_state_change(self, snap: TimerSnapshot):
        self._render(snap)

    def _on_alarm(self, snap: TimerSnapshot):
        self.bell()

    def _render(self, snap: TimerSnapshot):
        self.time_var.set(format_time(snap.remaining_sec))
        self.phase_var.set(phase_label(snap.phase))

    # ---- Resize ----
    def _on_resize(self, event):
        top = self.winfo_toplevel()
        if event.widget is not top:
            return
        size = font_size_for_width(event.width)
        if size != self.time_font.cget("size"):
            self.time_font.configure(size=size)
