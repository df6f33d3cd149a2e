# Password strength meter (Tkinter): re-classifies on every change to the input
# Requirements: Python 3.8+ with tkinter

import argparse
import tkinter as tk
from tkinter import ttk, messagebox
from typing import List, Optional

from .config import MeterOptions
from .errors import PassmeterError
from .logger import meter_logger
from .meter import MeterState, build_state
from .passmeter import add_common_arguments, resolve_options

MASK_CHAR = "•"
SEGMENT_HEIGHT = 8
UNLIT_COLOR = "#F5F5F5"


class App(tk.Tk):
    def __init__(self, options: Optional[MeterOptions] = None):
        super().__init__()
        self.title("Password Strength")
        self.geometry("460x170")
        self.minsize(380, 150)

        self.options = options or MeterOptions()
        self.meter_state: Optional[MeterState] = None

        self._build_ui()
        self._bind_events()
        self.refresh()

    # ----- UI build -----
    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        top = ttk.Frame(self)
        top.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        top.columnconfigure(1, weight=1)

        ttk.Label(top, text="Password").grid(row=0, column=0, sticky="w")
        self.var_password = tk.StringVar()
        self.entry_password = ttk.Entry(top, textvariable=self.var_password, show=MASK_CHAR)
        self.entry_password.grid(row=0, column=1, sticky="ew", padx=(8, 8))
        self.var_show = tk.BooleanVar(value=False)
        ttk.Checkbutton(top, text="Show", variable=self.var_show, command=self.toggle_reveal).grid(
            row=0, column=2, sticky="e")

        # Three-segment bar
        bar = ttk.Frame(self)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        self.segments = []
        for i in range(3):
            bar.columnconfigure(i, weight=1, uniform="segment")
            seg = tk.Frame(bar, height=SEGMENT_HEIGHT, bg=UNLIT_COLOR)
            seg.grid(row=0, column=i, sticky="ew", padx=(0 if i == 0 else 2, 0))
            self.segments.append(seg)

        bottom = ttk.Frame(self)
        bottom.grid(row=2, column=0, sticky="ew", padx=12)
        bottom.columnconfigure(0, weight=1)
        self.var_error = tk.StringVar()
        ttk.Label(bottom, textvariable=self.var_error, foreground="#B00020", wraplength=320).grid(
            row=0, column=0, sticky="w")
        self.var_label = tk.StringVar()
        ttk.Label(bottom, textvariable=self.var_label).grid(row=0, column=1, sticky="e")

    def _bind_events(self):
        self.var_password.trace_add("write", lambda *_: self.refresh())
        self.entry_password.focus_set()

    # ----- Meter -----
    def refresh(self):
        password = self.var_password.get()
        self.meter_state = build_state(password, self.options)
        meter_logger.log_evaluation(self.meter_state.label, len(password), self.options.is_custom)
        self._paint(self.meter_state)

    def _paint(self, state: MeterState):
        for seg, color in zip(self.segments, state.segments):
            seg.configure(bg=color or UNLIT_COLOR)
        self.var_label.set(state.label)
        self.var_error.set(state.error_text or "")

    def toggle_reveal(self):
        self.entry_password.config(show="" if self.var_show.get() else MASK_CHAR)


# ------------------------- Main -------------------------

def build_parser() -> argparse.ArgumentParser:
    return add_common_arguments(argparse.ArgumentParser(
        prog="passmeter-gui",
        description="Password strength meter window.",
    ))


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)

    if args.log_file:
        meter_logger.add_log_file(args.log_file)

    try:
        options = resolve_options(args.config)
    except PassmeterError as e:
        root = tk.Tk()
        root.withdraw()
        messagebox.showerror("Configuration error", str(e))
        root.destroy()
        meter_logger.close()
        return 1
    try:
        app = App(options)
        app.mainloop()
    finally:
        meter_logger.close()
    return 0

if __name__ == "__main__":
    main()
