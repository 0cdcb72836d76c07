"""Formatting utilities for poster labels and the CLI report."""


def format_duration(seconds: float) -> str:
    """Format seconds as Xh YYm, or YYm ZZs under an hour."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes:02d}m {secs:02d}s"


def format_distance(meters: float) -> str:
    """Format a climb length: meters up to 1 km, then km with one decimal."""
    if meters > 1000:
        return f"{meters / 1000:.1f}km"
    return f"{meters:.0f}m"


def format_pace(speed_ms: float) -> str:
    """Format a speed in m/s as pace per km (M:SS); '-' when not moving."""
    if speed_ms <= 0:
        return "-"
    total_seconds = round(1000 / speed_ms)
    minutes, secs = divmod(total_seconds, 60)
    return f"{minutes}:{secs:02d}"


def format_power(watts: float) -> str:
    return f"{watts:.0f}W"


def format_gradient(percent: float) -> str:
    return f"{percent:.0f}%"
