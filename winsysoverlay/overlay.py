"""The always-on-top overlay window that shows the system statistics."""

from __future__ import annotations

import queue
import tkinter as tk
from dataclasses import dataclass
from typing import Any

from .formatting import format_labels
from .icons import ICON_PATHS, ICON_SIZE, draw_icon
from .settings import Metric, Settings, parse_color
from .settings_dialog import SettingsDialog
from .sysinfo import SysInfo, SysInfoMonitor

FONT_FAMILY = "Helvetica"
CONTENT_MARGINS = (5, 2)
ICON_TEXT_SPACING = 5
DRAIN_INTERVAL_MS = 50

_PLACEHOLDERS: dict[Metric, str] = {
    Metric.CPU: "CPU: ...",
    Metric.MEM: "MEM: ...",
    Metric.RAM: "RAM: ...",
    Metric.DISK: "DSK: ...",
    Metric.GPU: "GPU: ...",
    Metric.FPS: "FPS: ...",
    Metric.NET_DOWN: "↓: ...",
    Metric.NET_UP: "↑: ...",
    Metric.DAILY_DATA: "Daily: ...",
    Metric.CPU_TEMP: "CPU°: ...",
    Metric.GPU_TEMP: "GPU°: ...",
    Metric.PROCESSES: "Proc: ...",
    Metric.UPTIME: "Up: ...",
}


def layout_spacing(orientation: str) -> int:
    """Gap in pixels between metrics; anything but 'Horizontal' is vertical."""
    return 8 if orientation == "Horizontal" else 2


def label_font(settings: Settings) -> tuple[str, int, str]:
    """The bold label font; a negative size means pixels to Tk."""
    return (FONT_FAMILY, -settings.get("appearance/fontSize"), "bold")


def background_color(settings: Settings) -> tuple[int, int, int, int]:
    """The background colour as (r, g, b, alpha)."""
    r, g, b = parse_color(settings.get("appearance/backgroundColor"))
    return (r, g, b, settings.get("appearance/backgroundOpacity"))


def _window_alpha(opacity: int) -> float:
    # Tk only has whole-window transparency, so the text stays legible by
    # never letting the window fade out completely.
    return 0.4 + 0.6 * (opacity / 255.0)


@dataclass
class _MetricRow:
    frame: tk.Frame
    canvas: tk.Canvas
    label: tk.Label


class OverlayWidget:
    """Frameless, draggable window listing the chosen metrics with icons."""

    def __init__(self, root: tk.Tk, settings: Settings, monitor: SysInfoMonitor) -> None:
        self.root = root
        self.settings = settings
        self.monitor = monitor
        self._updates: queue.Queue[SysInfo] = queue.Queue()
        self._drag_offset = (0, 0)

        root.overrideredirect(True)
        root.attributes("-topmost", True)

        self._body = tk.Frame(root)
        self._body.pack(fill="both", expand=True)
        self._rows: dict[Metric, _MetricRow] = {}
        for metric in Metric:
            frame = tk.Frame(self._body)
            canvas = tk.Canvas(
                frame, width=ICON_SIZE, height=ICON_SIZE, highlightthickness=0, bd=0
            )
            canvas.pack(side="left", padx=(0, ICON_TEXT_SPACING))
            label = tk.Label(frame, text=_PLACEHOLDERS[metric], anchor="w")
            label.pack(side="left")
            self._rows[metric] = _MetricRow(frame, canvas, label)

        root.bind("<ButtonPress-1>", self._on_press)
        root.bind("<B1-Motion>", self._on_motion)
        root.bind("<ButtonRelease-1>", self._on_release)
        root.bind("<Button-3>", self._on_context_menu)

        monitor.listener = self._updates.put
        self.apply_settings()
        self._drain_updates()
        monitor.start()

    def update_stats(self, info: SysInfo) -> None:
        """Show a new snapshot and keep the window above others."""
        for metric, text in format_labels(info).items():
            self._rows[metric].label.configure(text=text)
        self.root.attributes("-topmost", True)
        self.root.lift()

    def apply_settings(self) -> None:
        """Re-read position, colours, font, visible metrics and orientation."""
        settings = self.settings
        x, y = settings.get("window/pos")
        self.root.geometry(f"+{x}+{y}")

        font_color = settings.get("appearance/fontColor")
        r, g, b, opacity = background_color(settings)
        bg = f"#{r:02x}{g:02x}{b:02x}"
        self.root.configure(bg=bg)
        self.root.attributes("-alpha", _window_alpha(opacity))
        self._body.configure(bg=bg, padx=CONTENT_MARGINS[0], pady=CONTENT_MARGINS[1])

        font = label_font(settings)
        for metric, row in self._rows.items():
            row.frame.pack_forget()
            row.frame.configure(bg=bg)
            row.canvas.configure(bg=bg)
            row.canvas.delete("all")
            draw_icon(row.canvas, ICON_PATHS[metric], font_color)
            row.label.configure(fg=font_color, bg=bg, font=font)

        orientation = settings.get("appearance/layoutOrientation")
        spacing = layout_spacing(orientation)
        horizontal = orientation == "Horizontal"
        for index, metric in enumerate(settings.visible_metrics()):
            gap = 0 if index == 0 else spacing
            frame = self._rows[metric].frame
            if horizontal:
                frame.pack(side="left", padx=(gap, 0))
            else:
                frame.pack(side="top", anchor="w", pady=(gap, 0))

    def open_settings_dialog(self) -> None:
        """Pause sampling, run the settings dialog, then resume."""
        self.monitor.stop()
        try:
            SettingsDialog(self.root, self.settings, on_apply=self.apply_settings).run()
        finally:
            self.monitor.start()

    def _drain_updates(self) -> None:
        latest = None
        while True:
            try:
                latest = self._updates.get_nowait()
            except queue.Empty:
                break
        if latest is not None:
            self.update_stats(latest)
        self.root.after(DRAIN_INTERVAL_MS, self._drain_updates)

    def _on_press(self, event: Any) -> None:
        self._drag_offset = (
            event.x_root - self.root.winfo_x(),
            event.y_root - self.root.winfo_y(),
        )

    def _on_motion(self, event: Any) -> None:
        dx, dy = self._drag_offset
        self.root.geometry(f"+{event.x_root - dx}+{event.y_root - dy}")

    def _on_release(self, event: Any) -> None:
        self.settings.set("window/pos", (self.root.winfo_x(), self.root.winfo_y()))
        self.settings.save()

    def _on_context_menu(self, event: Any) -> None:
        menu = tk.Menu(self.root, tearoff=0)
        menu.add_command(label="Settings...", command=self.open_settings_dialog)
        menu.add_separator()
        menu.add_command(label="Close", command=self.root.quit)
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()