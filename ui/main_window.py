# -*- coding: utf-8 -*-

import logging
import tkinter as tk

from services.timer_service import TimerService
from ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class MainWindow:
    def __init__(self, timer_service: TimerService, topmost: bool = True):
        self.timer_service = timer_service

        self.root = tk.Tk()
        self.root.title("Movement Reminder Timer")
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        self._build_ui()

        # size to content, then center on screen
        self.root.update_idletasks()
        w = self.root.winfo_reqwidth()
        h = self.root.winfo_reqheight()
        x = max(0, (self.root.winfo_screenwidth() - w) // 2)
        y = max(0, (self.root.winfo_screenheight() - h) // 2)
        self.root.geometry(f"{w}x{h}+{x}+{y}")

        self.root.attributes("-topmost", bool(topmost))

    def _build_ui(self):
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)

        self.timer_widget = TimerWidget(self.root, timer_service=self.timer_service)
        self.timer_widget.grid(row=0, column=0)

    def run(self):
        logger.info("Window open")
        self.root.mainloop()

    def _on_close(self):
        self.timer_widget.shutdown()
        self.root.destroy()
