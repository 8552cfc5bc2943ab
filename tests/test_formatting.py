import pytest

from winsysoverlay.formatting import (
    format_daily,
    format_labels,
    format_speed,
    format_temperature,
    format_uptime,
)
from winsysoverlay.settings import Metric
from winsysoverlay.sysinfo import SysInfo


def _number(text, prefix, suffix):
    assert text.startswith(prefix)
    assert text.endswith(suffix)
    return float(text[len(prefix):-len(suffix)])


@pytest.mark.parametrize("speed", [0.0, 0.0009, -3.0])
def test_speed_below_threshold(speed):
    assert format_speed("↓", speed) == "↓: 0.00 KB/s"


@pytest.mark.parametrize("speed", [1.0, 2.5, 37.125])
def test_speed_in_megabytes(speed):
    value = _number(format_speed("↑", speed), "↑: ", " MB/s")
    assert value == pytest.approx(speed, abs=0.005)


@pytest.mark.parametrize("speed", [0.001, 0.5, 0.999])
def test_speed_in_kilobytes(speed):
    value = _number(format_speed("↓", speed), "↓: ", " KB/s")
    assert value / 1024 == pytest.approx(speed, abs=0.0001)


def test_daily_below_gigabyte():
    assert format_daily(1023) == "Daily: 1023 MB"


@pytest.mark.parametrize("megabytes", [1024, 2048, 5000])
def test_daily_in_gigabytes(megabytes):
    value = _number(format_daily(megabytes), "Daily: ", " GB")
    assert value * 1024 == pytest.approx(megabytes, abs=6)


def test_temperature_unknown():
    assert format_temperature("CPU°", -1.0) == "CPU°: N/A"
    assert format_temperature("GPU°", float("nan")) == "GPU°: N/A"


@pytest.mark.parametrize("celsius", [0.0, 45.25, 99.9])
def test_temperature_known(celsius):
    value = _number(format_temperature("GPU°", celsius), "GPU°: ", "°C")
    assert value == pytest.approx(celsius, abs=0.05)


def test_uptime_minutes():
    assert format_uptime(0.5) == "Up: 30m"


def test_uptime_hours():
    assert format_uptime(5) == "Up: 5.0h"


def test_uptime_whole_days():
    assert format_uptime(48.0) == "Up: 2d"


def test_uptime_days_and_hours():
    text = format_uptime(49.5)
    assert text.startswith("Up: 2d ")
    assert text.endswith("h")
    hours = int(text[len("Up: 2d "):-1])
    assert 1 <= hours <= 2


def test_labels_cover_every_metric():
    labels = format_labels(SysInfo())
    assert set(labels) == set(Metric)
    assert labels[Metric.FPS] == "FPS: N/A"
    assert labels[Metric.CPU_TEMP] == "CPU°: N/A"
    assert labels[Metric.GPU_TEMP] == "GPU°: N/A"
    assert labels[Metric.NET_DOWN] == "↓: 0.00 KB/s"
    assert labels[Metric.NET_UP] == "↑: 0.00 KB/s"


def test_labels_show_values():
    info = SysInfo(
        cpu_load=12.5,
        mem_usage=40,
        total_ram_mb=8192,
        avail_ram_mb=2048,
        active_processes=211,
        cpu_temp=55.0,
    )
    labels = format_labels(info)
    assert _number(labels[Metric.CPU], "CPU: ", "%") == pytest.approx(12.5)
    assert labels[Metric.MEM] == "MEM: 40%"
    assert labels[Metric.PROCESSES] == "Proc: 211"
    used_text = labels[Metric.RAM]
    assert used_text.startswith("RAM: ")
    assert used_text.endswith("/8192 MB")
    used = int(used_text[len("RAM: "):].split("/")[0])
    assert used + 2048 == 8192
    assert _number(labels[Metric.CPU_TEMP], "CPU°: ", "°C") == pytest.approx(55.0)