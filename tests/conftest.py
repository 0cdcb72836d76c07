import pytest

from activity_geometry.models import Activity, ActivityStreams, GeoPoint


def make_streams(
    elevations: list[float],
    spacing_m: float = 100.0,
    seconds_per_sample: float | None = None,
    power: list[float] | None = None,
) -> ActivityStreams:
    """Build streams for evenly spaced samples with the given elevations."""
    n = len(elevations)
    time = [i * seconds_per_sample for i in range(n)] if seconds_per_sample else []
    return ActivityStreams(
        distance=[i * spacing_m for i in range(n)],
        elevation=elevations,
        time=time,
        power=power or [],
    )


@pytest.fixture
def constant_climb_streams():
    """1 km at a constant 5% grade, 10 s and 200 W per 100 m sample."""
    return make_streams(
        [i * 5.0 for i in range(11)],
        seconds_per_sample=10.0,
        power=[200.0] * 11,
    )


@pytest.fixture
def flat_streams():
    return make_streams([100.0] * 20)


@pytest.fixture
def sample_activity():
    """Short northbound ride: flat, one 600 m climb at 6%, then a 5% descent."""
    elevations = [100.0] * 5 + [100.0 + i * 6 for i in range(1, 7)] + [136.0 - i * 5 for i in range(1, 6)]
    points = [GeoPoint(lat=45.0 + i * 0.0009, lng=6.0) for i in range(len(elevations))]
    return Activity(
        name="Morning Ride",
        sport_type="Ride",
        points=points,
        streams=make_streams(elevations, seconds_per_sample=20.0),
    )
