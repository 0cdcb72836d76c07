"""Climb detection and classification for recorded activity streams.

Climbs are found in a single forward pass over consecutive sample pairs,
with hysteresis: a climb opens when the gradient reaches the minimum climbing
gradient, and once open it tolerates shallow dips down to the dip tolerance
before closing. This absorbs GPS and barometer noise inside a genuine climb.
"""

import logging
from dataclasses import dataclass

from activity_geometry.errors import InvalidParameterError
from activity_geometry.models import ActivityStreams, ClimbCategory, ClimbSummary

logger = logging.getLogger(__name__)

# Category score thresholds (gain * length in km), hardest first
CATEGORY_THRESHOLDS = [
    (8000.0, ClimbCategory.HC),
    (4000.0, ClimbCategory.CAT_1),
    (2000.0, ClimbCategory.CAT_2),
    (1000.0, ClimbCategory.CAT_3),
    (500.0, ClimbCategory.CAT_4),
]


@dataclass(frozen=True)
class ClimbParams:
    """Thresholds for climb detection. Hand-tuned defaults, not domain constants."""
    min_gradient_percent: float = 4.0   # gradient needed to open a climb, and minimum average
    min_length_m: float = 500.0         # shortest climb kept
    dip_tolerance_percent: float = -3.5  # steepest descent tolerated inside an open climb

    def validate(self) -> None:
        """Reject thresholds that would make the detector meaningless.

        Raises:
            InvalidParameterError: If a threshold is negative or the dip
                tolerance exceeds the minimum gradient.
        """
        if self.min_gradient_percent < 0:
            raise InvalidParameterError(
                f"min_gradient_percent must not be negative, got {self.min_gradient_percent}"
            )
        if self.min_length_m < 0:
            raise InvalidParameterError(
                f"min_length_m must not be negative, got {self.min_length_m}"
            )
        if self.dip_tolerance_percent > self.min_gradient_percent:
            raise InvalidParameterError(
                f"dip_tolerance_percent ({self.dip_tolerance_percent}) must not exceed "
                f"min_gradient_percent ({self.min_gradient_percent})"
            )


def classify_climb(length_m: float, elevation_gain_m: float) -> ClimbCategory:
    """Rate a climb by score = elevation gain * length in km."""
    score = elevation_gain_m * (length_m / 1000)
    for threshold, category in CATEGORY_THRESHOLDS:
        if score > threshold:
            return category
    return ClimbCategory.NONE


def time_weighted_average(
    values: list[float],
    time: list[float],
    start_index: int,
    end_index: int,
) -> float:
    """Average of a sample stream over (start_index, end_index], weighted by sample duration.

    Sample i covers the interval time[i-1]..time[i]. Intervals with a
    non-positive duration or a non-positive reading are ignored, so clock
    glitches and dropout zeros do not drag the average down.

    Returns:
        The weighted average, or 0 when the window has no usable duration
        (including when values or time were not recorded).

    Raises:
        InvalidParameterError: If the index range is reversed or outside
            the recorded streams.
    """
    if not values or not time:
        return 0.0
    if start_index < 0 or end_index < start_index or end_index >= min(len(values), len(time)):
        raise InvalidParameterError(
            f"Averaging window ({start_index}, {end_index}) is outside streams "
            f"of {min(len(values), len(time))} samples"
        )

    total = 0.0
    duration = 0.0
    for i in range(start_index + 1, end_index + 1):
        dt = time[i] - time[i - 1]
        if dt > 0 and values[i] > 0:
            total += values[i] * dt
            duration += dt

    return total / duration if duration > 0 else 0.0


def time_weighted_average_power(
    power: list[float],
    time: list[float],
    start_index: int,
    end_index: int,
) -> float:
    """Average power in watts over (start_index, end_index]; see time_weighted_average."""
    return time_weighted_average(power, time, start_index, end_index)


def _finalize(
    streams: ActivityStreams,
    params: ClimbParams,
    start: int,
    end: int,
    length: float,
    gain: float,
) -> ClimbSummary | None:
    """Apply the length and average-gradient filters to a closed climb."""
    if length < params.min_length_m or length <= 0:
        return None
    avg_gradient = gain / length * 100
    if avg_gradient < params.min_gradient_percent:
        return None

    return ClimbSummary(
        start_index=start,
        end_index=end,
        length=length,
        elevation_gain=gain,
        average_gradient_percent=avg_gradient,
        average_power_watts=time_weighted_average_power(streams.power, streams.time, start, end),
        category=classify_climb(length, gain),
    )


def detect_climbs(streams: ActivityStreams, params: ClimbParams | None = None) -> list[ClimbSummary]:
    """Detect sustained climbs in an activity.

    Algorithm:
    1. Walk consecutive sample pairs; skip pairs whose distance does not
       increase (treated as sensor noise, not a boundary)
    2. A pair is uphill if its gradient reaches min_gradient_percent, or a
       climb is open and its gradient is at least dip_tolerance_percent
    3. Uphill pairs open a climb at the earlier sample or extend the open
       one; only positive elevation deltas add to the gain
    4. The first non-uphill pair closes the open climb; it is kept only if
       it is at least min_length_m long and averages min_gradient_percent
    5. A climb still open at the end of the activity is closed the same way

    Args:
        streams: Activity streams; distance and elevation are required,
            time and power are used for average power when recorded
        params: Detection thresholds (defaults if None)

    Returns:
        Climbs ordered by start index; empty if distance or elevation is missing.

    Raises:
        InvalidParameterError: If params fail validation.
    """
    if params is None:
        params = ClimbParams()
    params.validate()

    distance = streams.distance
    elevation = streams.elevation
    if not distance or not elevation:
        return []

    climbs: list[ClimbSummary] = []
    start = end = 0
    length = gain = 0.0
    is_open = False
    skipped = 0

    for i in range(1, len(elevation)):
        d = distance[i] - distance[i - 1]
        if d <= 0:
            skipped += 1
            continue

        h = elevation[i] - elevation[i - 1]
        gradient = h / d * 100

        uphill = gradient >= params.min_gradient_percent or (
            is_open and gradient >= params.dip_tolerance_percent
        )

        if uphill:
            if not is_open:
                is_open = True
                start = i - 1
                length = gain = 0.0
            end = i
            length += d
            if h > 0:
                gain += h
        elif is_open:
            climb = _finalize(streams, params, start, end, length, gain)
            if climb is not None:
                climbs.append(climb)
            is_open = False

    if is_open:
        climb = _finalize(streams, params, start, end, length, gain)
        if climb is not None:
            climbs.append(climb)

    logger.debug(
        "Detected %d climbs in %d samples (%d non-increasing distance samples skipped)",
        len(climbs), len(elevation), skipped,
    )
    return climbs
