"""Persistent overlay settings stored as a JSON document."""

from __future__ import annotations

import json
import os
import tempfile
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from platformdirs import user_config_dir

ORGANIZATION = "WinSysOverlay"
APPLICATION = "WinSys-Overlay"

ORIENTATIONS = ("Vertical", "Horizontal")
FONT_SIZE_RANGE = (8, 24)
OPACITY_RANGE = (0, 255)
UPDATE_INTERVAL_RANGE = (250, 5000)


class Metric(Enum):
    """A value the overlay can show, with its settings key and label."""

    CPU = ("display/showCpu", "CPU Load", True)
    MEM = ("display/showMem", "Memory Usage %", True)
    RAM = ("display/showRam", "RAM Usage (MB)", True)
    DISK = ("display/showDisk", "Disk Activity", True)
    GPU = ("display/showGpu", "GPU Load", True)
    FPS = ("display/showFps", "FPS (Estimated)", False)
    NET_DOWN = ("display/showNetDown", "Network Download Speed", False)
    NET_UP = ("display/showNetUp", "Network Upload Speed", False)
    DAILY_DATA = ("display/showDailyData", "Daily Data Usage", False)
    CPU_TEMP = ("display/showCpuTemp", "CPU Temperature", False)
    GPU_TEMP = ("display/showGpuTemp", "GPU Temperature", False)
    PROCESSES = ("display/showProcesses", "Active Processes", False)
    UPTIME = ("display/showUptime", "System Uptime", False)

    def __init__(self, key: str, label: str, default_visible: bool) -> None:
        self.key = key
        self.label = label
        self.default_visible = default_visible


def default_settings_path() -> Path:
    """Return the per-user location of the settings file."""
    return Path(user_config_dir(APPLICATION, ORGANIZATION)) / "settings.json"


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse '#rgb', '#rrggbb' or '#aarrggbb' into an (r, g, b) tuple."""
    if not isinstance(text, str):
        raise TypeError(f"colour must be a string, not {type(text).__name__}")
    value = text.strip()
    if not value.startswith("#"):
        raise ValueError(f"invalid colour: {text!r}")
    digits = value[1:]
    if any(ch not in "0123456789abcdefABCDEF" for ch in digits):
        raise ValueError(f"invalid colour: {text!r}")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    elif len(digits) == 8:
        digits = digits[2:]
    elif len(digits) != 6:
        raise ValueError(f"invalid colour: {text!r}")
    return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))  # type: ignore[return-value]


def _format_color(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _to_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise TypeError(f"not an integer: {value!r}")
    return int(value)


def _ranged(low: int, high: int) -> Callable[[Any], int]:
    def coerce(value: Any) -> int:
        return min(max(_to_int(value), low), high)

    return coerce


def _non_negative(value: Any) -> int:
    number = _to_int(value)
    if number < 0:
        raise ValueError(f"must not be negative: {value!r}")
    return number


def _bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise TypeError(f"not a boolean: {value!r}")


def _orientation(value: Any) -> str:
    if value not in ORIENTATIONS:
        raise ValueError(f"orientation must be one of {ORIENTATIONS}, not {value!r}")
    return value


def _color(value: Any) -> str:
    if isinstance(value, (tuple, list)) and len(value) == 3:
        rgb = tuple(_ranged(0, 255)(part) for part in value)
        return _format_color(rgb)  # type: ignore[arg-type]
    return _format_color(parse_color(value))


def _point(value: Any) -> tuple[int, int]:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise TypeError(f"not a point: {value!r}")
    return (_to_int(value[0]), _to_int(value[1]))


def _date(value: Any) -> date | None:
    if value is None:
        return None
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value)
    raise TypeError(f"not a date: {value!r}")


_SPECS: dict[str, tuple[Any, Callable[[Any], Any]]] = {
    "appearance/layoutOrientation": ("Vertical", _orientation),
    "appearance/fontSize": (11, _ranged(*FONT_SIZE_RANGE)),
    "appearance/fontColor": ("#ffffff", _color),
    "appearance/backgroundColor": ("#000000", _color),
    "appearance/backgroundOpacity": (120, _ranged(*OPACITY_RANGE)),
    "behavior/updateInterval": (1000, _ranged(*UPDATE_INTERVAL_RANGE)),
    "window/pos": ((100, 100), _point),
    "network/dailyDataBytes": (0, _non_negative),
    "network/lastResetDate": (None, _date),
}
_SPECS.update({metric.key: (metric.default_visible, _bool) for metric in Metric})


def _serialize(value: Any) -> Any:
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, tuple):
        return list(value)
    return value


class Settings:
    """Typed access to the overlay's stored settings, with defaults."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else default_settings_path()
        self._data: dict[str, Any] = {}
        self.reload()

    def get(self, key: str) -> Any:
        """Return the stored value for ``key``, or its default."""
        try:
            default, coerce = _SPECS[key]
        except KeyError:
            raise KeyError(f"unknown setting: {key}") from None
        if key not in self._data:
            return default
        try:
            return coerce(self._data[key])
        except (TypeError, ValueError):
            return default

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``; ranged numbers are clamped."""
        try:
            _, coerce = _SPECS[key]
        except KeyError:
            raise KeyError(f"unknown setting: {key}") from None
        self._data[key] = _serialize(coerce(value))

    def save(self) -> None:
        """Write the settings to disk atomically."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=".settings-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(self._data, handle, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def reload(self) -> None:
        """Discard unsaved changes and read the file again."""
        try:
            text = self.path.read_text(encoding="utf-8")
            data = json.loads(text)
        except (OSError, ValueError):
            data = {}
        self._data = data if isinstance(data, dict) else {}

    def is_visible(self, metric: Metric) -> bool:
        """Whether ``metric`` is switched on for display."""
        return self.get(metric.key)

    def visible_metrics(self) -> list[Metric]:
        """The metrics switched on, in display order."""
        return [metric for metric in Metric if self.is_visible(metric)]