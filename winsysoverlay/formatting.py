"""Text shown on the overlay for each metric."""

from __future__ import annotations

from .settings import Metric
from .sysinfo import SysInfo


def format_speed(arrow: str, mb_per_second: float) -> str:
    """Format a transfer speed given in MiB/s."""
    if mb_per_second >= 1.0:
        return f"{arrow}: {mb_per_second:.2f} MB/s"
    if mb_per_second >= 0.001:
        return f"{arrow}: {mb_per_second * 1024:.1f} KB/s"
    return f"{arrow}: 0.00 KB/s"


def format_daily(megabytes: float) -> str:
    """Format today's transfer, switching to GB from 1024 MB."""
    if megabytes >= 1024:
        return f"Daily: {megabytes / 1024.0:.2f} GB"
    return f"Daily: {megabytes:.0f} MB"


def format_temperature(prefix: str, celsius: float) -> str:
    """Format a temperature; negative readings mean unknown."""
    if celsius >= 0:
        return f"{prefix}: {celsius:.1f}°C"
    return f"{prefix}: N/A"


def format_uptime(hours: float) -> str:
    """Format uptime as minutes, hours, or days and hours."""
    if hours < 1:
        return f"Up: {hours * 60:.0f}m"
    if hours < 24:
        return f"Up: {hours:.1f}h"
    days = int(hours / 24)
    remaining = hours - days * 24
    if remaining < 0.1:
        return f"Up: {days}d"
    return f"Up: {days}d {remaining:.0f}h"


def format_labels(info: SysInfo) -> dict[Metric, str]:
    """Return the label text for every metric."""
    used = info.total_ram_mb - info.avail_ram_mb
    return {
        Metric.CPU: f"CPU: {info.cpu_load:.1f}%",
        Metric.MEM: f"MEM: {info.mem_usage}%",
        Metric.RAM: f"RAM: {used}/{info.total_ram_mb} MB",
        Metric.DISK: f"DSK: {info.disk_load:.1f}%",
        Metric.GPU: f"GPU: {info.gpu_load:.1f}%",
        Metric.FPS: "FPS: N/A",
        Metric.NET_DOWN: format_speed("↓", info.network_download_speed),
        Metric.NET_UP: format_speed("↑", info.network_upload_speed),
        Metric.DAILY_DATA: format_daily(info.daily_data_usage_mb),
        Metric.CPU_TEMP: format_temperature("CPU°", info.cpu_temp),
        Metric.GPU_TEMP: format_temperature("GPU°", info.gpu_temp),
        Metric.PROCESSES: f"Proc: {info.active_processes}",
        Metric.UPTIME: format_uptime(info.system_uptime),
    }