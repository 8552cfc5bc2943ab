"""Collection of system statistics for the overlay."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from datetime import date
from typing import Callable

import psutil

from .settings import Settings

_MIB = 1024 * 1024
_EXCLUDED_INTERFACES = ("loopback", "teredo", "isatap")
_PROBE_ERRORS = (psutil.Error, OSError)


@dataclass
class SysInfo:
    """One snapshot of the values the overlay displays."""

    cpu_load: float = 0.0
    mem_usage: int = 0
    total_ram_mb: int = 0
    avail_ram_mb: int = 0
    disk_load: float = 0.0
    gpu_load: float = 0.0
    fps: float = 0.0
    network_download_speed: float = 0.0
    network_upload_speed: float = 0.0
    daily_data_usage_mb: int = 0
    cpu_temp: float = -1.0
    gpu_temp: float = -1.0
    active_processes: int = 0
    system_uptime: float = 0.0


def _to_float(text: str) -> float:
    try:
        return float(text.strip())
    except ValueError:
        return 0.0


def parse_temp_line(line: str | bytes) -> tuple[float, float] | None:
    """Parse a 'CPU:<c>,GPU:<g>' reading into (cpu, gpu), or None if it is not one.

    A value that is not a number reads as 0.0.
    """
    if isinstance(line, bytes):
        line = line.decode("utf-8", "replace")
    text = line.strip()
    if "CPU:" not in text or "GPU:" not in text:
        return None
    parts = text.split(",")
    if len(parts) != 2:
        return None
    return _to_float(parts[0][4:]), _to_float(parts[1][4:])


class DailyDataTracker:
    """Counts bytes transferred today and persists the count in the settings."""

    def __init__(self, settings: Settings, today: date | None = None) -> None:
        self._settings = settings
        today = today or date.today()
        saved = settings.get("network/lastResetDate") or today
        self.last_reset_date = today
        if saved != today:
            self.total_bytes = 0
            self.save()
        else:
            self.total_bytes = settings.get("network/dailyDataBytes")

    def add(self, nbytes: float, today: date | None = None) -> None:
        """Add transferred bytes, then start a fresh count if the day has changed."""
        if nbytes > 0:
            self.total_bytes = int(self.total_bytes + nbytes)
        today = today or date.today()
        if today != self.last_reset_date:
            self.total_bytes = 0
            self.last_reset_date = today
            self.save()

    def save(self) -> None:
        """Write the count and its date to the settings file."""
        self._settings.set("network/dailyDataBytes", self.total_bytes)
        self._settings.set("network/lastResetDate", self.last_reset_date)
        self._settings.save()

    def megabytes(self) -> int:
        """Today's transfer in whole mebibytes."""
        return self.total_bytes // _MIB


class NetworkRate:
    """Turns cumulative byte counters into transfer speeds."""

    def __init__(self, now: float | None = None) -> None:
        self.last_time = time.monotonic() if now is None else now
        self.last_bytes: tuple[float, float] | None = None

    def update(
        self, down_bytes: float, up_bytes: float, now: float | None = None
    ) -> tuple[float, float, float] | None:
        """Record new counter values.

        Returns (download MiB/s, upload MiB/s, bytes transferred since the last
        sample), or None when no rate can be computed yet.
        """
        now = time.monotonic() if now is None else now
        result = None
        elapsed = now - self.last_time
        if self.last_bytes is not None and elapsed > 0:
            last_down, last_up = self.last_bytes
            down_bps = (down_bytes - last_down) / elapsed
            up_bps = (up_bytes - last_up) / elapsed
            result = (
                max(0.0, down_bps / _MIB),
                max(0.0, up_bps / _MIB),
                max(0.0, down_bps + up_bps) * elapsed,
            )
        self.last_bytes = (down_bytes, up_bytes)
        self.last_time = now
        return result


def _counted_interface(name: str) -> bool:
    lowered = name.lower()
    return not any(word in lowered for word in _EXCLUDED_INTERFACES)


class SysInfoMonitor:
    """Samples system statistics on a background timer and reports them."""

    def __init__(
        self, settings: Settings, listener: Callable[[SysInfo], None] | None = None
    ) -> None:
        self.settings = settings
        self.listener = listener
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._cpu_temp = -1.0
        self._gpu_temp = -1.0
        self._down_speed = 0.0
        self._up_speed = 0.0
        self._daily = DailyDataTracker(settings)
        self._network = NetworkRate()
        self._last_disk: tuple[float, float] | None = None
        self._prime()

    def __enter__(self) -> SysInfoMonitor:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def running(self) -> bool:
        """Whether the background timer is active."""
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start polling at the configured update interval."""
        if self.running:
            return
        interval = self.settings.get("behavior/updateInterval") / 1000.0
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, args=(interval,), name="sysinfo-monitor", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Stop polling and persist today's data usage."""
        self._stop_event.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        with self._lock:
            self._daily.save()

    def poll(self) -> SysInfo:
        """Take one sample and hand it to the listener."""
        info = self.sample()
        if self.listener is not None:
            self.listener(info)
        return info

    def sample(self) -> SysInfo:
        """Read every statistic once and return the snapshot."""
        with self._lock:
            info = SysInfo(cpu_temp=self._cpu_temp, gpu_temp=self._gpu_temp)

            try:
                info.cpu_load = float(psutil.cpu_percent(interval=None))
            except _PROBE_ERRORS:
                info.cpu_load = 0.0

            try:
                memory = psutil.virtual_memory()
                info.mem_usage = int(memory.percent)
                info.total_ram_mb = memory.total // _MIB
                info.avail_ram_mb = memory.available // _MIB
            except _PROBE_ERRORS:
                info.mem_usage = info.total_ram_mb = info.avail_ram_mb = 0

            info.disk_load = self._read_disk_load()
            info.gpu_load = 0.0

            totals = self._network_totals()
            transferred = 0.0
            if totals is not None:
                rate = self._network.update(*totals)
                if rate is not None:
                    self._down_speed, self._up_speed, transferred = rate
                info.network_download_speed = self._down_speed
                info.network_upload_speed = self._up_speed
            self._daily.add(transferred)
            info.daily_data_usage_mb = self._daily.megabytes()

            try:
                info.active_processes = len(psutil.pids())
            except _PROBE_ERRORS:
                info.active_processes = 0

            try:
                info.system_uptime = (time.time() - psutil.boot_time()) / 3600.0
            except _PROBE_ERRORS:
                info.system_uptime = 0.0

            info.fps = 0.0
            return info

    def feed_temperature(self, line: str | bytes) -> bool:
        """Take a temperature reading line; return whether it was understood."""
        reading = parse_temp_line(line)
        if reading is None:
            return False
        with self._lock:
            self._cpu_temp, self._gpu_temp = reading
        return True

    def _run(self, interval: float) -> None:
        while not self._stop_event.wait(interval):
            self.poll()

    def _prime(self) -> None:
        try:
            psutil.cpu_percent(interval=None)
        except _PROBE_ERRORS:
            pass
        self._last_disk = self._disk_sample()
        totals = self._network_totals()
        if totals is not None:
            self._network.update(*totals)

    @staticmethod
    def _disk_sample() -> tuple[float, float] | None:
        try:
            counters = psutil.disk_io_counters()
        except _PROBE_ERRORS:
            return None
        if counters is None:
            return None
        busy = getattr(counters, "busy_time", None)
        if busy is None:
            busy = counters.read_time + counters.write_time
        return float(busy), time.monotonic()

    def _read_disk_load(self) -> float:
        current = self._disk_sample()
        previous, self._last_disk = self._last_disk, current
        if current is None or previous is None:
            return 0.0
        elapsed_ms = (current[1] - previous[1]) * 1000.0
        if elapsed_ms <= 0:
            return 0.0
        return max(0.0, current[0] - previous[0]) / elapsed_ms * 100.0

    @staticmethod
    def _network_totals() -> tuple[float, float] | None:
        try:
            per_nic = psutil.net_io_counters(pernic=True)
        except _PROBE_ERRORS:
            return None
        counted = [c for name, c in per_nic.items() if _counted_interface(name)]
        if not counted:
            return None
        return (
            float(sum(c.bytes_recv for c in counted)),
            float(sum(c.bytes_sent for c in counted)),
        )