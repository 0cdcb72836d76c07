import logging
from bisect import bisect_left, bisect_right

from activity_geometry.errors import StreamLengthMismatchError

logger = logging.getLogger(__name__)


def _local_linear_regression(distances: list[float], elevations: list[float], target_dist: float) -> float:
    """Fit a local linear regression and return the fitted value at target_dist.

    Uses simple least squares: y = slope * x + intercept
    """
    n = len(distances)
    if n == 0:
        return 0.0
    if n == 1:
        return elevations[0]

    x_mean = sum(distances) / n
    y_mean = sum(elevations) / n

    numerator = sum((x - x_mean) * (y - y_mean) for x, y in zip(distances, elevations))
    denominator = sum((x - x_mean) ** 2 for x in distances)

    if denominator == 0:
        # All x values are the same
        return y_mean

    slope = numerator / denominator
    intercept = y_mean - slope * x_mean

    return slope * target_dist + intercept


def smooth_elevations(
    distance: list[float],
    elevation: list[float],
    radius_m: float = 50.0,
) -> list[float]:
    """Smooth an elevation stream using local linear regression.

    For each sample, fits a line to all samples within
    [distance - radius_m, distance + radius_m] and uses the fitted value at
    the center sample. This preserves local slopes while removing noise,
    which keeps short false descents from closing a climb.

    Args:
        distance: Cumulative distance in meters, non-decreasing
        elevation: Elevation in meters, same length as distance
        radius_m: Half-width of the regression window; <= 0 disables smoothing

    Returns:
        A new list of smoothed elevations; the inputs are not modified.

    Raises:
        StreamLengthMismatchError: If the streams differ in length.
    """
    if len(distance) != len(elevation):
        raise StreamLengthMismatchError(
            f"distance has {len(distance)} samples but elevation has {len(elevation)}"
        )
    if len(elevation) < 2 or radius_m <= 0:
        return list(elevation)

    logger.debug("Smoothing %d elevation samples with %.0fm radius", len(elevation), radius_m)

    smoothed = []
    for d in distance:
        lo = bisect_left(distance, d - radius_m)
        hi = bisect_right(distance, d + radius_m)
        smoothed.append(_local_linear_regression(distance[lo:hi], elevation[lo:hi], d))

    return smoothed
