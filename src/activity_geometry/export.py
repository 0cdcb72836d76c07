"""Plain, JSON-serializable chart data for the poster rendering layer."""

from dataclasses import asdict

from activity_geometry.gradient import TwoStopGradient, gradient_for_region
from activity_geometry.models import Activity, ChartPoint, ClimbSummary, Split
from activity_geometry.profile import (
    build_sliced_profile,
    climb_chart_sizes,
    climb_profile,
    close_to_baseline,
    highlight_ranges,
    stride_for_points,
)
from activity_geometry.projection import project_to_fit

DEFAULT_CLIMB_CHART_WIDTH = 200.0
DEFAULT_CLIMB_CHART_HEIGHT = 60.0
DEFAULT_CLIMB_CHART_POINTS = 100


def _xy(points: list[ChartPoint]) -> list[list[float]]:
    return [[p.x, p.y] for p in points]


def _climb_charts(
    elevation: tuple[float, ...],
    climbs: list[ClimbSummary],
    max_width: float,
    max_height: float,
    max_points: int,
) -> list[dict]:
    """Filled mini profile of each climb, sized relative to the biggest climb."""
    charts = []
    for climb, (width, height) in zip(climbs, climb_chart_sizes(climbs, max_width, max_height)):
        stride = stride_for_points(climb.end_index - climb.start_index + 1, max_points)
        points = climb_profile(elevation, climb, width, height, stride)
        charts.append({
            "width": width,
            "height": height,
            "points": _xy(close_to_baseline(points, height)),
        })
    return charts


def build_poster_data(
    activity: Activity,
    climbs: list[ClimbSummary],
    chart_width: float,
    chart_height: float,
    stride: int,
    route_size: float,
    route_padding: float,
    fill: TwoStopGradient,
    unhighlighted_decay: float,
    splits: list[Split] | None = None,
    climb_chart_width: float = DEFAULT_CLIMB_CHART_WIDTH,
    climb_chart_height: float = DEFAULT_CLIMB_CHART_HEIGHT,
    climb_chart_points: int = DEFAULT_CLIMB_CHART_POINTS,
) -> dict:
    """Assemble route trace, climb-highlighted profile and climb summaries.

    Profile regions covering a climb get the fill gradient; the regions in
    between get its faded variant. Each climb carries a "chart" with its
    own filled mini profile, closed down to its height.
    """
    trace = project_to_fit(activity.points, route_size, route_padding)

    elevation = activity.streams.elevation
    regions = []
    if len(elevation) > 1:
        regions = build_sliced_profile(
            elevation, 0, len(elevation) - 1, highlight_ranges(climbs),
            chart_width, chart_height, stride,
        )

    profile = []
    for region in regions:
        region_fill = gradient_for_region(fill, region.highlighted, unhighlighted_decay)
        profile.append({
            "start_index": region.start_index,
            "end_index": region.end_index,
            "highlighted": region.highlighted,
            "fill": [region_fill.stop_a, region_fill.stop_b],
            "points": _xy(region.points),
        })

    charts = _climb_charts(elevation, climbs, climb_chart_width, climb_chart_height, climb_chart_points)
    climb_data = []
    for climb, chart in zip(climbs, charts):
        climb_data.append({**asdict(climb), "chart": chart})

    data = {
        "name": activity.name,
        "sport_type": activity.sport_type,
        "route": {"width": trace.width, "height": trace.height, "points": _xy(trace.points)},
        "profile": profile,
        "climbs": climb_data,
    }
    if splits is not None:
        data["splits"] = [asdict(split) for split in splits]
    return data
