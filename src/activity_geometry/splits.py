"""Fixed-distance split summaries (per km by default) for the splits chart."""

from activity_geometry.climbs import time_weighted_average
from activity_geometry.errors import InvalidParameterError
from activity_geometry.models import ActivityStreams, Split

DEFAULT_SPLIT_DISTANCE_M = 1000.0


def _make_split(streams: ActivityStreams, index: int, start: int, end: int) -> Split:
    distance = streams.distance[end] - streams.distance[start]
    elapsed = streams.time[end] - streams.time[start] if streams.time else 0.0
    elevation_difference = (
        streams.elevation[end] - streams.elevation[start] if streams.elevation else 0.0
    )

    # Zero readings are sensor dropouts
    average_heartrate = None
    if streams.has_heartrate:
        average_heartrate = time_weighted_average(streams.heartrate, streams.time, start, end) or None

    return Split(
        index=index,
        distance_m=distance,
        elapsed_s=elapsed,
        average_speed_ms=distance / elapsed if elapsed > 0 else 0.0,
        elevation_difference_m=elevation_difference,
        average_heartrate=average_heartrate,
    )


def compute_splits(
    streams: ActivityStreams,
    split_distance_m: float = DEFAULT_SPLIT_DISTANCE_M,
) -> list[Split]:
    """Cut an activity into consecutive splits of split_distance_m.

    A split ends at the first sample reaching the next distance boundary, so
    split distances are at least split_distance_m (sample spacing decides by
    how much). A trailing partial split is included when it covers any
    distance.

    Raises:
        InvalidParameterError: If split_distance_m is not positive.
    """
    if split_distance_m <= 0:
        raise InvalidParameterError(f"split_distance_m must be positive, got {split_distance_m}")

    distance = streams.distance
    if len(distance) < 2:
        return []

    splits: list[Split] = []
    start = 0
    next_boundary = distance[0] + split_distance_m
    for i in range(1, len(distance)):
        if distance[i] >= next_boundary:
            splits.append(_make_split(streams, len(splits) + 1, start, i))
            start = i
            while next_boundary <= distance[i]:
                next_boundary += split_distance_m

    last = len(distance) - 1
    if start < last and distance[last] > distance[start]:
        splits.append(_make_split(streams, len(splits) + 1, start, last))

    return splits
