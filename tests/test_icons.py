import pytest

from winsysoverlay.icons import ICON_PATHS, ICON_SIZE, Shape, draw_icon, icon_shapes
from winsysoverlay.settings import Metric


class RecordingCanvas:
    def __init__(self):
        self.calls = []

    def _record(self, name, args, kwargs):
        self.calls.append((name, args, kwargs))
        return len(self.calls)

    def create_rectangle(self, *args, **kwargs):
        return self._record("rectangle", args, kwargs)

    def create_oval(self, *args, **kwargs):
        return self._record("oval", args, kwargs)

    def create_line(self, *args, **kwargs):
        return self._record("line", args, kwargs)

    def create_arc(self, *args, **kwargs):
        return self._record("arc", args, kwargs)


def test_cpu_icon_starts_with_chip_outline():
    shapes = icon_shapes(":/icons/cpu.svg")
    assert shapes[0] == Shape("rect", (2, 2, 12, 12))


def test_unknown_icon_has_no_shapes():
    assert icon_shapes(":/icons/unknown.svg") == []


def test_memory_and_ram_share_drawing():
    assert icon_shapes(":/icons/ram.svg") == icon_shapes(":/icons/memory.svg")


def test_both_temperature_metrics_share_icon():
    cpu_shapes = icon_shapes(ICON_PATHS[Metric.CPU_TEMP])
    gpu_shapes = icon_shapes(ICON_PATHS[Metric.GPU_TEMP])
    assert cpu_shapes
    assert cpu_shapes == gpu_shapes
    assert cpu_shapes == icon_shapes(":/icons/temp.svg")


def test_every_metric_has_a_drawable_icon():
    for metric in Metric:
        assert icon_shapes(ICON_PATHS[metric]), metric


def test_data_icon_has_quarter_arc():
    arcs = [s for s in icon_shapes(":/icons/data.svg") if s.kind == "arc"]
    assert len(arcs) == 1
    assert arcs[0].extent == 90.0


def test_uptime_icon_ends_with_center_point():
    shapes = icon_shapes(":/icons/uptime.svg")
    assert shapes[-1].kind == "point"


@pytest.mark.parametrize("metric", list(Metric))
def test_draw_icon_returns_one_item_per_shape(metric):
    canvas = RecordingCanvas()
    items = draw_icon(canvas, ICON_PATHS[metric], "#ffffff")
    assert len(items) == len(icon_shapes(ICON_PATHS[metric]))
    assert len(canvas.calls) == len(items)


@pytest.mark.parametrize("metric", list(Metric))
def test_drawing_stays_inside_icon_box(metric):
    canvas = RecordingCanvas()
    draw_icon(canvas, ICON_PATHS[metric], "#ffffff")
    for _, args, _ in canvas.calls:
        assert all(-1 <= value <= ICON_SIZE + 1 for value in args)


def test_draw_icon_uses_given_colour_string():
    canvas = RecordingCanvas()
    draw_icon(canvas, ":/icons/cpu.svg", "#ABCDEF")
    colours = {kw.get("outline") or kw.get("fill") for _, _, kw in canvas.calls}
    assert colours == {"#abcdef"}


def test_draw_icon_accepts_rgb_tuple():
    canvas = RecordingCanvas()
    draw_icon(canvas, ":/icons/disk.svg", (255, 255, 255))
    assert all(kw.get("outline") == "#ffffff" for _, _, kw in canvas.calls)


def test_arc_drawn_in_arc_style():
    canvas = RecordingCanvas()
    draw_icon(canvas, ":/icons/data.svg", "#000000")
    arcs = [kw for name, _, kw in canvas.calls if name == "arc"]
    assert arcs and arcs[0]["style"] == "arc"


def test_draw_icon_rejects_bad_colour():
    with pytest.raises(ValueError):
        draw_icon(RecordingCanvas(), ":/icons/cpu.svg", "white")


def test_draw_icon_rejects_out_of_range_tuple():
    with pytest.raises(ValueError):
        draw_icon(RecordingCanvas(), ":/icons/cpu.svg", (300, 0, 0))


def test_unknown_icon_draws_nothing():
    canvas = RecordingCanvas()
    assert draw_icon(canvas, "nothing", "#ffffff") == []
    assert canvas.calls == []