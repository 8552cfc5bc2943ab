"""The settings window and the values it edits."""

from __future__ import annotations

import tkinter as tk
from dataclasses import dataclass, field
from tkinter import colorchooser, ttk
from typing import Callable

from .settings import (
    FONT_SIZE_RANGE,
    OPACITY_RANGE,
    ORIENTATIONS,
    UPDATE_INTERVAL_RANGE,
    Metric,
    Settings,
)


@dataclass
class DialogValues:
    """Everything the dialog saves when applied."""

    layout_orientation: str = "Vertical"
    font_size: int = 11
    background_opacity: int = 120
    update_interval: int = 1000
    display: dict[Metric, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.layout_orientation not in ORIENTATIONS:
            raise ValueError(
                f"orientation must be one of {ORIENTATIONS}, "
                f"not {self.layout_orientation!r}"
            )


def load_values(settings: Settings) -> DialogValues:
    """Read the dialog's values from the settings."""
    return DialogValues(
        layout_orientation=settings.get("appearance/layoutOrientation"),
        font_size=settings.get("appearance/fontSize"),
        background_opacity=settings.get("appearance/backgroundOpacity"),
        update_interval=settings.get("behavior/updateInterval"),
        display={metric: settings.is_visible(metric) for metric in Metric},
    )


def save_values(settings: Settings, values: DialogValues) -> None:
    """Store the dialog's values and write the settings file."""
    settings.set("appearance/layoutOrientation", values.layout_orientation)
    settings.set("appearance/fontSize", values.font_size)
    settings.set("appearance/backgroundOpacity", values.background_opacity)
    settings.set("behavior/updateInterval", values.update_interval)
    for metric, visible in values.display.items():
        settings.set(metric.key, visible)
    settings.save()


def _read_int(var: tk.IntVar, fallback: int) -> int:
    try:
        return int(var.get())
    except (tk.TclError, ValueError):
        return fallback


class SettingsDialog:
    """Modal window for editing appearance, displayed metrics and behaviour."""

    def __init__(
        self,
        parent: tk.Misc | None,
        settings: Settings,
        on_apply: Callable[[], None] | None = None,
    ) -> None:
        self.parent = parent
        self.settings = settings
        self.on_apply = on_apply

        self.window = tk.Toplevel(parent)
        self.window.title("Settings")
        self.window.geometry("500x700")

        self._orientation = tk.StringVar(self.window)
        self._font_size = tk.IntVar(self.window)
        self._opacity = tk.IntVar(self.window)
        self._interval = tk.IntVar(self.window)
        self._display = {metric: tk.BooleanVar(self.window) for metric in Metric}

        self._build()
        self._load()

    def _build(self) -> None:
        body = ttk.Frame(self.window, padding=8)
        body.pack(fill="both", expand=True)

        appearance = ttk.LabelFrame(body, text="🎨 Appearance", padding=6)
        appearance.pack(fill="x", pady=4)

        ttk.Label(appearance, text="Layout Orientation:").grid(row=0, column=0, sticky="w")
        ttk.Combobox(
            appearance,
            textvariable=self._orientation,
            values=list(ORIENTATIONS),
            state="readonly",
            width=12,
        ).grid(row=0, column=1, sticky="w")

        ttk.Label(appearance, text="Font Size:").grid(row=1, column=0, sticky="w")
        ttk.Spinbox(
            appearance,
            textvariable=self._font_size,
            from_=FONT_SIZE_RANGE[0],
            to=FONT_SIZE_RANGE[1],
            width=8,
        ).grid(row=1, column=1, sticky="w")

        ttk.Label(appearance, text="Font Color:").grid(row=2, column=0, sticky="w")
        ttk.Button(
            appearance,
            text="Choose Color...",
            command=lambda: self._choose_color("appearance/fontColor", "Choose Font Color"),
        ).grid(row=2, column=1, sticky="w")

        ttk.Label(appearance, text="Background Color:").grid(row=3, column=0, sticky="w")
        ttk.Button(
            appearance,
            text="Choose Color...",
            command=lambda: self._choose_color(
                "appearance/backgroundColor", "Choose Background Color"
            ),
        ).grid(row=3, column=1, sticky="w")

        ttk.Label(appearance, text="Background Opacity:").grid(row=4, column=0, sticky="w")
        ttk.Spinbox(
            appearance,
            textvariable=self._opacity,
            from_=OPACITY_RANGE[0],
            to=OPACITY_RANGE[1],
            width=8,
        ).grid(row=4, column=1, sticky="w")
        ttk.Label(appearance, text="(0-255)").grid(row=4, column=2, sticky="w")

        display = ttk.LabelFrame(body, text="📊 Displayed Information", padding=6)
        display.pack(fill="x", pady=4)
        for metric, var in self._display.items():
            ttk.Checkbutton(display, text=metric.label, variable=var).pack(anchor="w")

        behavior = ttk.LabelFrame(body, text="⚙️ Behavior", padding=6)
        behavior.pack(fill="x", pady=4)
        ttk.Label(behavior, text="Update Interval:").grid(row=0, column=0, sticky="w")
        ttk.Spinbox(
            behavior,
            textvariable=self._interval,
            from_=UPDATE_INTERVAL_RANGE[0],
            to=UPDATE_INTERVAL_RANGE[1],
            increment=100,
            width=8,
        ).grid(row=0, column=1, sticky="w")
        ttk.Label(behavior, text="ms").grid(row=0, column=2, sticky="w")

        buttons = ttk.Frame(self.window, padding=8)
        buttons.pack(fill="x", side="bottom")
        ttk.Button(buttons, text="Apply", command=self._apply).pack(side="right")
        ttk.Button(buttons, text="Cancel", command=self._cancel).pack(side="right")
        ttk.Button(buttons, text="OK", command=self._accept).pack(side="right")
        self.window.protocol("WM_DELETE_WINDOW", self._cancel)

    def _load(self) -> None:
        values = load_values(self.settings)
        self._orientation.set(values.layout_orientation)
        self._font_size.set(values.font_size)
        self._opacity.set(values.background_opacity)
        self._interval.set(values.update_interval)
        for metric, var in self._display.items():
            var.set(values.display[metric])

    def _current_values(self) -> DialogValues:
        stored = load_values(self.settings)
        orientation = self._orientation.get()
        if orientation not in ORIENTATIONS:
            orientation = stored.layout_orientation
        return DialogValues(
            layout_orientation=orientation,
            font_size=_read_int(self._font_size, stored.font_size),
            background_opacity=_read_int(self._opacity, stored.background_opacity),
            update_interval=_read_int(self._interval, stored.update_interval),
            display={metric: bool(var.get()) for metric, var in self._display.items()},
        )

    def _apply(self) -> None:
        save_values(self.settings, self._current_values())
        if self.on_apply is not None:
            self.on_apply()

    def _accept(self) -> None:
        self._apply()
        self.window.destroy()

    def _cancel(self) -> None:
        self.window.destroy()

    def _choose_color(self, key: str, title: str) -> None:
        _, chosen = colorchooser.askcolor(
            color=self.settings.get(key), parent=self.window, title=title
        )
        if chosen:
            self.settings.set(key, chosen)
            self.settings.save()

    def run(self) -> None:
        """Show the dialog and wait until it is closed."""
        if self.parent is not None:
            self.window.transient(self.parent)
        self.window.grab_set()
        self.window.wait_window()