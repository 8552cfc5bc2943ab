# winsysoverlay

A small frameless, always-on-top window that shows live system figures next
to small line-drawn icons:

- CPU load, memory usage in percent and RAM in use (MB)
- disk activity
- network download and upload speed
- data transferred today, kept between runs and reset when the date changes
- number of running processes and system uptime

The figures are read with `psutil`. The window is drawn with Tkinter, so the
Python installation needs Tk.

## Installing

```
pip install .
```

## Running

```
winsys-overlay
```

Options:

- `--settings PATH`: use this settings file instead of the per-user default.
- `--debug`: log diagnostic messages.

The overlay opens at its saved position (100, 100 the first time). Drag it
with the left mouse button to move it. The position is saved when you let go.
Right-click it for a menu with **Settings...** and **Close**. Sampling pauses
while the settings window is open.

## Settings

The settings window has OK, Cancel and Apply buttons and controls:

- **Layout Orientation**: `Vertical` (default, 2 px between metrics) or
  `Horizontal` (8 px between metrics).
- **Font Size**: 8 to 24 px (default 11). Labels are bold.
- **Font Color** and **Background Color**: default white on black. A colour
  is saved as soon as it is picked, not only on Apply or OK.
- **Background Opacity**: 0 to 255 (default 120). Tk can only make the whole
  window transparent, so this sets the window's alpha between 0.4 and 1.0,
  text included.
- **Displayed Information**: one check box per metric. CPU Load, Memory
  Usage %, RAM Usage (MB), Disk Activity and GPU Load are on by default; FPS,
  network speeds, daily data usage, temperatures, active processes and system
  uptime are off.
- **Update Interval**: 250 to 5000 ms in steps of 100 (default 1000).

Settings are kept as JSON in the file that
`winsysoverlay.settings.default_settings_path()` returns, in the user's
configuration directory. The daily data counter and its date are stored in
the same file.

## How the figures are shown

- Speeds of 1 MB/s or more are shown in MB/s with two decimals, smaller ones
  in KB/s with one decimal, and anything under 0.001 MB/s as `0.00 KB/s`.
- Daily usage is counted in whole mebibytes and shown in GB from 1024 MB.
- Uptime is shown in minutes under an hour, in hours under a day, and in
  days and hours after that.
- A negative temperature reads as `N/A`.
- Network interfaces whose names contain "loopback", "teredo" or "isatap"
  (in any case) are not counted.
- Disk activity is the share of the sampling interval the disks spent busy,
  as reported by `psutil.disk_io_counters()`.

## Using it from Python

Collecting and formatting work without the window:

```python
import time

from winsysoverlay.formatting import format_labels
from winsysoverlay.settings import Settings
from winsysoverlay.sysinfo import SysInfoMonitor

settings = Settings()  # or Settings("path/to/settings.json")
monitor = SysInfoMonitor(settings)
time.sleep(1)
info = monitor.sample()
for metric, text in format_labels(info).items():
    print(metric.name, text)

# Poll on a background thread at the configured interval:
with SysInfoMonitor(settings, lambda info: print(format_labels(info))):
    time.sleep(3)
```

Other pieces:

- `winsysoverlay.settings`: `Settings` (`get`, `set`, `save`, `reload`,
  `is_visible`, `visible_metrics`), the `Metric` enum and `parse_color`.
  Numbers out of range are clamped on `set`; an unknown key raises `KeyError`.
- `winsysoverlay.sysinfo`: `SysInfo`, `SysInfoMonitor` (`start`, `stop`,
  `poll`, `sample`, `feed_temperature`), `DailyDataTracker`, `NetworkRate`
  and `parse_temp_line`.
- `winsysoverlay.formatting`: `format_speed`, `format_daily`,
  `format_temperature`, `format_uptime` and `format_labels`.
- `winsysoverlay.icons`: `icon_shapes` and `draw_icon`.

## What it does not do

- **GPU load** is always reported as 0.0 %; the package has no way to read it.
- **FPS** is always shown as `N/A`.
- **Temperatures** are never read from the hardware. They stay `N/A` unless
  readings of the form `CPU:<value>,GPU:<value>` are passed to
  `SysInfoMonitor.feed_temperature`, which nothing in the overlay does.

## Tests

```
pip install .[test]
pytest
```