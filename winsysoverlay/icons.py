"""Small line-drawn icons shown next to each overlay metric."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from .settings import Metric, parse_color

ICON_SIZE = 16
PEN_WIDTH = 1.5

ICON_PATHS: dict[Metric, str] = {
    Metric.CPU: ":/icons/cpu.svg",
    Metric.MEM: ":/icons/memory.svg",
    Metric.RAM: ":/icons/ram.svg",
    Metric.DISK: ":/icons/disk.svg",
    Metric.GPU: ":/icons/gpu.svg",
    Metric.FPS: ":/icons/fps.svg",
    Metric.NET_DOWN: ":/icons/download.svg",
    Metric.NET_UP: ":/icons/upload.svg",
    Metric.DAILY_DATA: ":/icons/data.svg",
    Metric.CPU_TEMP: ":/icons/temp.svg",
    Metric.GPU_TEMP: ":/icons/temp.svg",
    Metric.PROCESSES: ":/icons/processes.svg",
    Metric.UPTIME: ":/icons/uptime.svg",
}


@dataclass(frozen=True)
class Shape:
    """One drawing primitive of an icon.

    ``rect``, ``ellipse`` and ``arc`` take ``(x, y, width, height)``;
    ``line`` takes ``(x1, y1, x2, y2)``; ``point`` takes ``(x, y)``.
    Arcs also carry a start angle and extent in degrees.
    """

    kind: str
    coords: tuple[float, ...]
    start: float = 0.0
    extent: float = 0.0


def _rect(x: float, y: float, w: float, h: float) -> Shape:
    return Shape("rect", (x, y, w, h))


def _ellipse(x: float, y: float, w: float, h: float) -> Shape:
    return Shape("ellipse", (x, y, w, h))


def _line(x1: float, y1: float, x2: float, y2: float) -> Shape:
    return Shape("line", (x1, y1, x2, y2))


_CPU = (
    _rect(2, 2, 12, 12),
    _rect(4, 4, 8, 8),
    _line(0, 4, 2, 4),
    _line(0, 8, 2, 8),
    _line(0, 12, 2, 12),
    _line(14, 4, 16, 4),
    _line(14, 8, 16, 8),
    _line(14, 12, 16, 12),
)
_MEMORY = (
    _rect(2, 2, 3, 12),
    _rect(6, 2, 3, 12),
    _rect(11, 2, 3, 12),
    _line(2, 6, 5, 6),
    _line(6, 6, 9, 6),
    _line(11, 6, 14, 6),
)
_DISK = (
    _rect(2, 4, 12, 8),
    _ellipse(4, 6, 4, 4),
    _ellipse(6, 8, 2, 2),
)
_GPU = (
    _rect(1, 4, 14, 8),
    _rect(3, 6, 10, 4),
    _line(15, 6, 16, 6),
    _line(15, 8, 16, 8),
    _line(15, 10, 16, 10),
)
_FPS = (
    _rect(2, 3, 12, 9),
    _rect(3, 4, 10, 7),
    _line(7, 12, 9, 12),
    _line(6, 13, 10, 13),
)
_DOWNLOAD = (
    _line(8, 2, 8, 12),
    _line(8, 12, 5, 9),
    _line(8, 12, 11, 9),
    _line(4, 14, 12, 14),
)
_UPLOAD = (
    _line(8, 14, 8, 4),
    _line(8, 4, 5, 7),
    _line(8, 4, 11, 7),
    _line(4, 2, 12, 2),
)
_DATA = (
    _ellipse(2, 2, 12, 12),
    _line(8, 8, 8, 2),
    _line(8, 8, 14, 8),
    Shape("arc", (2, 2, 12, 12), start=0.0, extent=90.0),
)
_TEMP = (
    _rect(7, 2, 2, 10),
    _ellipse(5, 10, 6, 6),
    _line(7, 4, 9, 4),
    _line(7, 6, 9, 6),
    _line(7, 8, 9, 8),
)
_PROCESSES = (
    _rect(2, 2, 6, 4),
    _rect(4, 5, 6, 4),
    _rect(6, 8, 6, 4),
    _rect(8, 11, 6, 4),
)
_UPTIME = (
    _ellipse(2, 2, 12, 12),
    _line(8, 8, 8, 5),
    _line(8, 8, 11, 8),
    Shape("point", (8, 8)),
)

# Checked in order; the first keyword found in the path wins.
_ICON_TABLE: tuple[tuple[tuple[str, ...], tuple[Shape, ...]], ...] = (
    (("cpu",), _CPU),
    (("memory", "ram"), _MEMORY),
    (("disk",), _DISK),
    (("gpu",), _GPU),
    (("fps",), _FPS),
    (("download",), _DOWNLOAD),
    (("upload",), _UPLOAD),
    (("data",), _DATA),
    (("temp",), _TEMP),
    (("processes",), _PROCESSES),
    (("uptime",), _UPTIME),
)


def icon_shapes(icon_path: str) -> list[Shape]:
    """Return the shapes of the icon named by ``icon_path``; unknown names give none."""
    for keywords, shapes in _ICON_TABLE:
        if any(word in icon_path for word in keywords):
            return list(shapes)
    return []


def _color_string(color: str | Sequence[int]) -> str:
    if isinstance(color, str):
        rgb = parse_color(color)
    else:
        parts = tuple(int(part) for part in color)
        if len(parts) != 3 or any(not 0 <= part <= 255 for part in parts):
            raise ValueError(f"invalid colour: {color!r}")
        rgb = parts  # type: ignore[assignment]
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def _box(coords: tuple[float, ...]) -> tuple[float, float, float, float]:
    x, y, w, h = coords
    return x, y, x + w, y + h


def draw_icon(canvas: Any, icon_path: str, color: str | Sequence[int]) -> list[Any]:
    """Draw the icon onto a Tk-style canvas in ``color``; return the item ids."""
    outline = _color_string(color)
    items = []
    for shape in icon_shapes(icon_path):
        if shape.kind == "rect":
            item = canvas.create_rectangle(
                *_box(shape.coords), outline=outline, width=PEN_WIDTH
            )
        elif shape.kind == "ellipse":
            item = canvas.create_oval(
                *_box(shape.coords), outline=outline, width=PEN_WIDTH
            )
        elif shape.kind == "line":
            item = canvas.create_line(*shape.coords, fill=outline, width=PEN_WIDTH)
        elif shape.kind == "arc":
            item = canvas.create_arc(
                *_box(shape.coords),
                start=shape.start,
                extent=shape.extent,
                style="arc",
                outline=outline,
                width=PEN_WIDTH,
            )
        elif shape.kind == "point":
            x, y = shape.coords
            radius = PEN_WIDTH / 2
            item = canvas.create_oval(
                x - radius, y - radius, x + radius, y + radius, fill=outline, outline=""
            )
        else:
            raise ValueError(f"unknown shape kind: {shape.kind!r}")
        items.append(item)
    return items