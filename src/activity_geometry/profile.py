"""Elevation profile chart points for the rendering layer."""

import math

from activity_geometry.errors import InvalidParameterError
from activity_geometry.models import ChartPoint, ClimbSummary, ProfileRegion

# Keep every 25th sample; dense enough for poster-sized charts
DEFAULT_STRIDE = 25


def _validate_chart_args(max_width: float, max_height: float, stride: int) -> None:
    if max_width < 0 or max_height < 0:
        raise InvalidParameterError(
            f"Chart size must not be negative, got {max_width}x{max_height}"
        )
    if not isinstance(stride, int) or isinstance(stride, bool):
        raise InvalidParameterError(f"stride must be an integer, got {stride!r}")
    if stride <= 0:
        raise InvalidParameterError(f"stride must be positive, got {stride}")


def _normalizer(elevations: list[float], max_height: float):
    """Return a function mapping an elevation to a y coordinate.

    The lowest elevation maps to max_height and the highest to 0. A flat
    series maps every value to max_height.
    """
    lowest = min(elevations)
    elevation_range = max(elevations) - lowest

    def to_y(elevation: float) -> float:
        if elevation_range == 0:
            return max_height
        return max_height - (elevation - lowest) / elevation_range * max_height

    return to_y


def project_elevations(
    elevations: list[float],
    max_width: float,
    max_height: float,
    stride: int = DEFAULT_STRIDE,
) -> list[ChartPoint]:
    """Convert an elevation series to chart points.

    x is spaced evenly over max_width (max_width / (n - 1) per sample) and y
    is normalized to [0, max_height] against the series' own range. Only
    every stride-th sample is kept, starting with the first.

    Args:
        elevations: Elevation in meters for each sample
        max_width: Chart width
        max_height: Chart height
        stride: Keep one sample out of every stride

    Returns:
        ceil(n / stride) chart points, or an empty list for an empty series.

    Raises:
        InvalidParameterError: If stride is not positive or a size is negative.
    """
    _validate_chart_args(max_width, max_height, stride)
    n = len(elevations)
    if n == 0:
        return []

    step_x = max_width / (n - 1) if n > 1 else 0.0
    to_y = _normalizer(elevations, max_height)

    return [
        ChartPoint(x=i * step_x, y=to_y(elevations[i]))
        for i in range(0, n, stride)
    ]


def stride_for_points(sample_count: int, max_points: int) -> int:
    """Smallest stride that keeps a profile of sample_count samples at or below max_points.

    Raises:
        InvalidParameterError: If max_points is not positive.
    """
    if max_points <= 0:
        raise InvalidParameterError(f"max_points must be positive, got {max_points}")
    if sample_count <= max_points:
        return 1
    return math.ceil(sample_count / max_points)


def close_to_baseline(points: list[ChartPoint], baseline_y: float) -> list[ChartPoint]:
    """Append bottom-right and bottom-left corners so the profile can be filled."""
    if not points:
        return []
    return [
        *points,
        ChartPoint(x=points[-1].x, y=baseline_y),
        ChartPoint(x=points[0].x, y=baseline_y),
    ]


def _normalize_highlights(
    highlights: list[tuple[int, int]],
    start: int,
    end: int,
) -> list[tuple[int, int]]:
    """Clip highlight ranges to [start, end], drop empty ones and sort them.

    Raises:
        InvalidParameterError: If a range is reversed or two ranges overlap.
    """
    clipped = []
    for range_start, range_end in highlights:
        if range_start > range_end:
            raise InvalidParameterError(
                f"Highlight range ({range_start}, {range_end}) is reversed"
            )
        lo = max(range_start, start)
        hi = min(range_end, end)
        if hi > lo:
            clipped.append((lo, hi))

    clipped.sort()
    for (_, prev_end), (next_start, _) in zip(clipped, clipped[1:]):
        if next_start < prev_end:
            raise InvalidParameterError(
                f"Highlight ranges overlap at indices {next_start}..{prev_end}"
            )
    return clipped


def build_sliced_profile(
    elevations: list[float],
    start: int,
    end: int,
    highlights: list[tuple[int, int]],
    max_width: float,
    max_height: float,
    stride: int = DEFAULT_STRIDE,
) -> list[ProfileRegion]:
    """Split the chart of elevations[start..end] into highlighted and filler regions.

    All regions share one x scale and one y normalization computed over the
    whole slice, so they join into a single continuous profile. Indices are
    inclusive and refer to the ambient series. Highlight ranges are clipped
    to the slice. Each gap before, between or after highlights becomes a
    non-highlighted filler region; gaps of zero width produce nothing.
    Consecutive regions share their boundary sample, and every region keeps
    both its first and last sample.

    Returns:
        Regions ordered by start_index. A slice of a single sample has
        nothing to draw and yields an empty list.

    Raises:
        InvalidParameterError: If the slice is out of bounds or reversed,
            stride is not positive, or highlight ranges overlap.
    """
    _validate_chart_args(max_width, max_height, stride)
    if start < 0 or end >= len(elevations) or start > end:
        raise InvalidParameterError(
            f"Slice ({start}, {end}) is outside a series of {len(elevations)} samples"
        )
    ranges = _normalize_highlights(highlights, start, end)
    if start == end:
        return []

    step_x = max_width / (end - start)
    to_y = _normalizer(elevations[start:end + 1], max_height)

    def region(lo: int, hi: int, highlighted: bool) -> ProfileRegion:
        indices = list(range(lo, hi + 1, stride))
        if indices[-1] != hi:
            indices.append(hi)
        points = [ChartPoint(x=(i - start) * step_x, y=to_y(elevations[i])) for i in indices]
        return ProfileRegion(start_index=lo, end_index=hi, highlighted=highlighted, points=points)

    regions = []
    cursor = start
    for range_start, range_end in ranges:
        if range_start > cursor:
            regions.append(region(cursor, range_start, False))
        regions.append(region(range_start, range_end, True))
        cursor = range_end
    if cursor < end:
        regions.append(region(cursor, end, False))

    return regions


def climb_profile(
    elevations: list[float],
    climb: ClimbSummary,
    max_width: float,
    max_height: float,
    stride: int = DEFAULT_STRIDE,
) -> list[ChartPoint]:
    """Chart points for the elevation samples of a single climb (end inclusive).

    Raises:
        InvalidParameterError: If the climb does not fit inside elevations.
    """
    if climb.start_index < 0 or climb.end_index >= len(elevations):
        raise InvalidParameterError(
            f"Climb ({climb.start_index}, {climb.end_index}) is outside a series "
            f"of {len(elevations)} samples"
        )
    return project_elevations(
        elevations[climb.start_index:climb.end_index + 1], max_width, max_height, stride
    )


def climb_chart_sizes(
    climbs: list[ClimbSummary],
    max_width: float,
    max_height: float,
) -> list[tuple[float, float]]:
    """Width and height of each climb's mini chart, relative to the largest climb.

    Width scales with climb length and height with elevation gain, so the
    longest climb spans max_width and the biggest gain spans max_height.
    """
    max_length = max((c.length for c in climbs), default=0.0)
    max_gain = max((c.elevation_gain for c in climbs), default=0.0)

    sizes = []
    for climb in climbs:
        width = climb.length / max_length * max_width if max_length > 0 else 0.0
        height = climb.elevation_gain / max_gain * max_height if max_gain > 0 else 0.0
        sizes.append((width, height))
    return sizes


def highlight_ranges(climbs: list[ClimbSummary]) -> list[tuple[int, int]]:
    """(start_index, end_index) of each climb, for build_sliced_profile."""
    return [(c.start_index, c.end_index) for c in climbs]
