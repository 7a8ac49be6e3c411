"""Human-readable progress text for a running hash."""

from __future__ import annotations

_UNITS = ("kB", "MB", "GB", "TB", "PB", "EB")


def format_size(size: float) -> str:
    """Format a byte count with decimal (SI) units."""
    size = int(size)
    if size < 0:
        raise ValueError("size must not be negative")
    if size < 1000:
        return f"{size} byte" if size == 1 else f"{size} bytes"
    factor = 1000
    for unit in _UNITS:
        if size < factor * 1000 or unit == _UNITS[-1]:
            return f"{size / factor:.1f} {unit}"
        factor *= 1000
    raise AssertionError("unreachable")


def format_time_left(seconds: int) -> str:
    """Describe the remaining time in minutes, or in seconds up to a minute."""
    seconds = int(seconds)
    if seconds > 60:
        minutes = seconds // 60
        return f"{minutes} minute left" if minutes == 1 else f"{minutes} minutes left"
    return f"{seconds} second left" if seconds == 1 else f"{seconds} seconds left"


def format_progress(file_size: int, total_read: int, elapsed: float) -> str:
    """Describe how far a hash has got, how long is left and how fast it runs."""
    if file_size <= 0:
        raise ValueError("file_size must be positive")
    if total_read <= 0:
        raise ValueError("total_read must be positive")
    if elapsed <= 0:
        raise ValueError("elapsed must be positive")

    seconds_left = max(0, int(elapsed / total_read * (file_size - total_read)))
    return "{} of {} - {} ({}/sec)".format(
        format_size(total_read),
        format_size(file_size),
        format_time_left(seconds_left),
        format_size(total_read / elapsed),
    )