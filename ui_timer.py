# ui_timer.py
from __future__ import annotations
import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from time_format import FormatError
from timer import CountdownTimer

logger = logging.getLogger(__name__)


class CountdownTab:
    """
    Countdown page:
    - Big clock in the shape of the entered duration (MM:SS or HH:MM:SS)
    - Duration entry
    - Start / Reset (a finished timer is replaced by a new one on reset)
    """
    def __init__(self, parent, duration: str, granularity: Optional[int] = None):
        self.frame = ttk.Frame(parent)
        self.granularity = granularity

        # ------- title -------
        tk.Label(self.frame, text="Countdown", font=("Segoe UI", 22, "bold")).pack(pady=(16, 8))

        # ------- big time display -------
        self.time_var = tk.StringVar()
        tk.Label(self.frame, textvariable=self.time_var, font=("Consolas", 52, "bold")).pack(pady=6)

        # ------- duration entry -------
        efrm = tk.Frame(self.frame); efrm.pack(pady=8)
        tk.Label(efrm, text="Duration:").grid(row=0, column=0, sticky="e", padx=(0, 6))
        self.duration_var = tk.StringVar(value=duration)
        self.duration_entry = ttk.Entry(efrm, textvariable=self.duration_var, width=10,
                                        font=("Segoe UI", 12))
        self.duration_entry.grid(row=0, column=1)

        # ------- controls -------
        bfrm = tk.Frame(self.frame); bfrm.pack(pady=12)
        self.btn_start = ttk.Button(bfrm, text="Start", command=self.on_start)
        self.btn_reset = ttk.Button(bfrm, text="Reset", command=self.on_reset)
        self.btn_start.grid(row=0, column=0, padx=6)
        self.btn_reset.grid(row=0, column=1, padx=6)

        self.status_var = tk.StringVar(value="")
        tk.Label(self.frame, textvariable=self.status_var,
                 font=("Segoe UI", 10), fg="#666").pack(pady=6)

        # hotkeys
        self.frame.bind_all("<space>", self._on_space)
        self.frame.bind_all("<Escape>", lambda e: self.on_reset())

        self.timer: Optional[CountdownTimer] = None
        self.on_reset()

    # ---------- timer callbacks ----------
    def _on_tick(self, remaining: int) -> None:
        self.time_var.set(self.timer.format(remaining))

    def _on_timer_finished(self) -> None:
        self.time_var.set(self.timer.format(0))
        self.status_var.set("Time's up!")
        self.btn_start.config(state="disabled")

    # ---------- events ----------
    def _build_timer(self) -> bool:
        """replace the timer with a fresh one for the entered duration"""
        try:
            # the Tk root schedules the ticks through after()
            timer = CountdownTimer(self.duration_var.get().strip(), self.granularity,
                                   scheduler=self.frame.winfo_toplevel())
        except FormatError as exc:
            self.status_var.set(str(exc))
            logger.info("rejected duration: %s", exc)
            return False
        self.timer = timer.on_tick(self._on_tick).on_stop(self._on_timer_finished)
        self.time_var.set(self.timer.format())
        self.status_var.set("")
        return True

    def _on_space(self, event=None):
        # a space typed into an entry is text, not the start hotkey
        if event is not None and isinstance(event.widget, (tk.Entry, ttk.Entry)):
            return
        self.on_start()

    def on_start(self):
        if self.timer is None or self.timer.running:
            return
        self.btn_start.config(state="disabled")
        self.timer.start()

    def on_reset(self):
        # a running countdown can not be cancelled
        if self.timer is not None and self.timer.running:
            self.status_var.set("Countdown in progress, it can not be cancelled.")
            return
        ok = self._build_timer()
        self.btn_start.config(state="normal" if ok else "disabled")
