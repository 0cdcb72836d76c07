import pytest

from activity_geometry.errors import InvalidParameterError
from activity_geometry.models import ActivityStreams
from activity_geometry.splits import compute_splits


def ride_streams(heartrate=True, time=True) -> ActivityStreams:
    """2.5 km in 250 m samples, one minute and 2 m of climbing per sample."""
    n = 11
    return ActivityStreams(
        distance=[i * 250.0 for i in range(n)],
        elevation=[100.0 + i * 2 for i in range(n)],
        time=[i * 60.0 for i in range(n)] if time else [],
        heartrate=[150.0] * n if heartrate else [],
    )


class TestComputeSplits:
    def test_full_and_partial_splits(self):
        splits = compute_splits(ride_streams())
        assert [s.index for s in splits] == [1, 2, 3]
        assert [s.distance_m for s in splits] == pytest.approx([1000.0, 1000.0, 500.0])
        assert [s.elapsed_s for s in splits] == pytest.approx([240.0, 240.0, 120.0])
        assert [s.elevation_difference_m for s in splits] == pytest.approx([8.0, 8.0, 4.0])

    def test_average_speed(self):
        split = compute_splits(ride_streams())[0]
        assert split.average_speed_ms == pytest.approx(1000.0 / 240.0)

    def test_average_heartrate(self):
        splits = compute_splits(ride_streams())
        assert all(s.average_heartrate == pytest.approx(150.0) for s in splits)

    def test_no_heartrate(self):
        splits = compute_splits(ride_streams(heartrate=False))
        assert all(s.average_heartrate is None for s in splits)

    def test_no_time(self):
        splits = compute_splits(ride_streams(heartrate=False, time=False))
        assert len(splits) == 3
        assert splits[0].elapsed_s == 0.0
        assert splits[0].average_speed_ms == 0.0

    def test_custom_split_distance(self):
        splits = compute_splits(ride_streams(), split_distance_m=500.0)
        assert len(splits) == 5
        assert all(s.distance_m == pytest.approx(500.0) for s in splits)

    def test_split_ends_past_boundary(self):
        streams = ActivityStreams(
            distance=[0.0, 600.0, 1200.0, 1800.0],
            elevation=[0.0, 0.0, 0.0, 0.0],
        )
        splits = compute_splits(streams)
        assert [s.distance_m for s in splits] == pytest.approx([1200.0, 600.0])

    def test_short_activity(self):
        streams = ActivityStreams(distance=[0.0], elevation=[100.0])
        assert compute_splits(streams) == []

    def test_invalid_split_distance(self):
        with pytest.raises(InvalidParameterError):
            compute_splits(ride_streams(), split_distance_m=0.0)
