import pytest

from activity_geometry.errors import StreamLengthMismatchError
from activity_geometry.models import Activity, ActivityStreams, ClimbCategory, GeoPoint


class TestActivityStreams:
    def test_construction(self):
        streams = ActivityStreams(distance=[0, 100, 200], elevation=[10, 12, 15])
        assert streams.distance == (0.0, 100.0, 200.0)
        assert streams.elevation == (10.0, 12.0, 15.0)
        assert streams.time == ()
        assert len(streams) == 3

    def test_inputs_are_copied(self):
        distance = [0.0, 100.0]
        streams = ActivityStreams(distance=distance, elevation=[1.0, 2.0])
        distance.append(200.0)
        assert streams.distance == (0.0, 100.0)

    def test_optional_streams(self):
        streams = ActivityStreams(
            distance=[0.0, 100.0],
            elevation=[1.0, 2.0],
            time=[0.0, 20.0],
            power=[150.0, 180.0],
        )
        assert streams.has_power
        assert not streams.has_heartrate

    def test_length_mismatch_raises(self):
        with pytest.raises(StreamLengthMismatchError, match="power=2"):
            ActivityStreams(
                distance=[0.0, 100.0, 200.0],
                elevation=[1.0, 2.0, 3.0],
                power=[150.0, 180.0],
            )

    def test_length_mismatch_is_value_error(self):
        with pytest.raises(ValueError):
            ActivityStreams(distance=[0.0], elevation=[1.0, 2.0])

    def test_frozen(self):
        streams = ActivityStreams(distance=[0.0], elevation=[1.0])
        with pytest.raises(AttributeError):
            streams.distance = (5.0,)


class TestClimbCategory:
    def test_string_values(self):
        assert [c.value for c in ClimbCategory] == ["HC", "1", "2", "3", "4", "-"]

    def test_lookup_by_value(self):
        assert ClimbCategory("HC") is ClimbCategory.HC


class TestActivity:
    def test_is_ride(self):
        streams = ActivityStreams(distance=[0.0], elevation=[1.0])
        assert Activity("a", "VirtualRide", [GeoPoint(0.0, 0.0)], streams).is_ride
        assert not Activity("b", "Run", [GeoPoint(0.0, 0.0)], streams).is_ride
