# main.py
from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

import storage
import time_format
from time_format import FormatError
from timer import CountdownTimer

logger = logging.getLogger(__name__)


def build_parser(config: dict) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="countdown",
        description="Count a HH:MM:SS or MM:SS duration down to zero.")
    parser.add_argument("duration", nargs="?", default=config["default_duration"],
                        help="duration as HH:MM:SS or MM:SS (default: %(default)s)")
    parser.add_argument("-g", "--granularity", type=int, default=config["granularity_ms"],
                        help="milliseconds between ticks (default: %(default)s)")
    parser.add_argument("--console", action="store_true",
                        help="print the countdown in the terminal instead of opening a window")
    parser.add_argument("--log-level", default=config["log_level"], type=str.upper,
                        choices=storage.LOG_LEVELS,
                        help="logging level (default: %(default)s)")
    return parser


def run_console(timer: CountdownTimer, out=None) -> None:
    """drive the timer on its own scheduler, printing each tick"""
    out = out or sys.stdout
    timer.on_tick(lambda remaining: print(timer.format(remaining), file=out, flush=True))
    timer.on_stop(lambda: print("Time's up!", file=out, flush=True))
    timer.start()
    timer.scheduler.run()


def run_window(duration: str, granularity: int) -> None:
    import tkinter as tk
    from tkinter import ttk
    from ui_timer import CountdownTab

    root = tk.Tk()
    root.title("Countdown")
    style = ttk.Style()
    style.configure("TButton", padding=6)

    tab = CountdownTab(root, duration, granularity)
    tab.frame.pack(fill="both", expand=True, padx=16, pady=8)
    root.mainloop()


def main(argv: Optional[List[str]] = None) -> int:
    storage.ensure_data_files()
    config = storage.load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logger.debug("config %s: %s", storage.CONFIG_PATH, config)

    if args.granularity <= 0:
        parser.error(f"granularity must be positive, got {args.granularity}")
    try:
        time_format.parse(args.duration)
    except FormatError as exc:
        parser.error(str(exc))

    if args.console:
        run_console(CountdownTimer(args.duration, args.granularity))
    else:
        run_window(args.duration, args.granularity)
    return 0


if __name__ == "__main__":
    sys.exit(main())
