"""Projection of geographic points into bounded 2-D drawing areas.

Longitude maps to x and latitude to y, with y inverted so north is up in a
top-left origin coordinate space. Both strategies use one uniform scale for
both axes so the route keeps its shape.
"""

from activity_geometry.errors import InvalidParameterError
from activity_geometry.models import Bounds, ChartPoint, GeoPoint, ProjectedTrace

DEFAULT_PADDING = 40.0


def get_bounds(points: list[GeoPoint]) -> Bounds:
    """Bounding box of a non-empty point set.

    Raises:
        InvalidParameterError: If points is empty.
    """
    if not points:
        raise InvalidParameterError("Cannot compute bounds of an empty point set")

    lats = [p.lat for p in points]
    lngs = [p.lng for p in points]
    return Bounds(min_lat=min(lats), max_lat=max(lats), min_lng=min(lngs), max_lng=max(lngs))


def project_to_canvas(
    points: list[GeoPoint],
    canvas_width: float,
    canvas_height: float,
) -> list[ChartPoint]:
    """Fit points into an exact canvas, letterboxing or pillarboxing as needed.

    The scale is min(canvas_width / lng_range, canvas_height / lat_range), so
    the binding axis fills the canvas and the other axis is centered. A
    zero-range axis does not constrain the scale and its points are centered
    on that axis. If every point is identical the scale is 1 and the single
    location lands in the middle of the canvas.

    Raises:
        InvalidParameterError: If either canvas dimension is not positive.
    """
    if canvas_width <= 0 or canvas_height <= 0:
        raise InvalidParameterError(
            f"Canvas size must be positive, got {canvas_width}x{canvas_height}"
        )
    if not points:
        return []

    bounds = get_bounds(points)
    data_width = bounds.lng_range
    data_height = bounds.lat_range

    candidate_scales = []
    if data_width > 0:
        candidate_scales.append(canvas_width / data_width)
    if data_height > 0:
        candidate_scales.append(canvas_height / data_height)
    scale = min(candidate_scales) if candidate_scales else 1.0

    # Zero on the binding axis, symmetric margin on the other
    x_offset = (canvas_width - data_width * scale) / 2
    y_offset = (canvas_height - data_height * scale) / 2

    return [
        ChartPoint(
            x=(p.lng - bounds.min_lng) * scale + x_offset,
            y=canvas_height - ((p.lat - bounds.min_lat) * scale + y_offset),
        )
        for p in points
    ]


def project_to_fit(
    points: list[GeoPoint],
    max_dimension: float,
    padding: float = DEFAULT_PADDING,
) -> ProjectedTrace:
    """Project points into an auto-sized area no larger than max_dimension square.

    The longer data axis spans max_dimension - 2 * padding; the other axis
    is sized by the same scale. The returned width and height include the
    padding on all sides. Zero-range axes contribute no scale, and points on
    them sit at the padding offset.

    Raises:
        InvalidParameterError: If max_dimension is not positive, padding is
            negative, or the padding leaves no drawing area.
    """
    if max_dimension <= 0:
        raise InvalidParameterError(f"max_dimension must be positive, got {max_dimension}")
    if padding < 0:
        raise InvalidParameterError(f"padding must not be negative, got {padding}")
    inner = max_dimension - 2 * padding
    if inner <= 0:
        raise InvalidParameterError(
            f"padding {padding} leaves no drawing area inside {max_dimension}"
        )
    if not points:
        return ProjectedTrace(points=[], width=0.0, height=0.0)

    bounds = get_bounds(points)
    data_width = bounds.lng_range
    data_height = bounds.lat_range

    if data_width >= data_height and data_width > 0:
        scale = inner / data_width
    elif data_height > 0:
        scale = inner / data_height
    else:
        scale = 1.0

    projected = [
        ChartPoint(
            x=(p.lng - bounds.min_lng) * scale + padding,
            y=(bounds.max_lat - p.lat) * scale + padding,
        )
        for p in points
    ]
    return ProjectedTrace(
        points=projected,
        width=data_width * scale + 2 * padding,
        height=data_height * scale + 2 * padding,
    )
