"""Command-line entry point that opens the overlay."""

from __future__ import annotations

import argparse
import logging
import tkinter as tk
from typing import Sequence

from .overlay import OverlayWidget
from .settings import APPLICATION, Settings
from .sysinfo import SysInfoMonitor

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """The command-line parser for the overlay."""
    parser = argparse.ArgumentParser(
        prog="winsys-overlay",
        description="A simple system information overlay.",
    )
    parser.add_argument(
        "--settings",
        metavar="PATH",
        default=None,
        help="settings file to use instead of the per-user default",
    )
    parser.add_argument(
        "--debug", action="store_true", help="log diagnostic messages"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Open the overlay and run until it is closed."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    settings = Settings(args.settings)
    log.debug("Settings file: %s", settings.path)
    log.debug("Tk version: %s", tk.TkVersion)

    root = tk.Tk(className=APPLICATION)
    monitor = SysInfoMonitor(settings)
    try:
        OverlayWidget(root, settings, monitor)
        root.mainloop()
    finally:
        monitor.stop()
        try:
            root.destroy()
        except tk.TclError:
            pass
    return 0