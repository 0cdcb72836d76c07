from dataclasses import dataclass, field
from enum import Enum

from activity_geometry.errors import StreamLengthMismatchError


@dataclass(frozen=True)
class GeoPoint:
    lat: float  # degrees
    lng: float  # degrees


@dataclass(frozen=True)
class ChartPoint:
    x: float
    y: float  # grows downward, origin top-left


@dataclass(frozen=True)
class Bounds:
    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def lat_range(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lng_range(self) -> float:
        return self.max_lng - self.min_lng


@dataclass(frozen=True)
class ActivityStreams:
    """Index-aligned sample streams of one recorded activity.

    Index i refers to the same instant in every non-empty stream. Optional
    streams (time, power, heartrate) may be empty, meaning "not recorded".
    Inputs are copied into tuples so caller lists are never shared.
    """
    distance: tuple[float, ...]  # cumulative meters, non-decreasing
    elevation: tuple[float, ...]  # meters
    time: tuple[float, ...] = ()  # seconds since start, non-decreasing
    power: tuple[float, ...] = ()  # watts
    heartrate: tuple[float, ...] = ()  # beats per minute

    def __post_init__(self):
        lengths = {}
        for name in ("distance", "elevation", "time", "power", "heartrate"):
            values = tuple(float(v) for v in getattr(self, name))
            object.__setattr__(self, name, values)
            if values:
                lengths[name] = len(values)

        if len(set(lengths.values())) > 1:
            detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
            raise StreamLengthMismatchError(f"Activity streams differ in length: {detail}")

    def __len__(self) -> int:
        return max(len(self.distance), len(self.elevation), len(self.time),
                   len(self.power), len(self.heartrate))

    @property
    def has_power(self) -> bool:
        return bool(self.power)

    @property
    def has_heartrate(self) -> bool:
        return bool(self.heartrate)


class ClimbCategory(str, Enum):
    """Climb category, hardest first. NONE marks a climb too small to rate."""
    HC = "HC"
    CAT_1 = "1"
    CAT_2 = "2"
    CAT_3 = "3"
    CAT_4 = "4"
    NONE = "-"


@dataclass(frozen=True)
class ClimbSummary:
    """A detected climb, finalized after the length and gradient filters."""
    start_index: int                  # Sample index where the climb starts
    end_index: int                    # Sample index of the last climbing sample
    length: float                     # Horizontal distance (meters)
    elevation_gain: float             # Sum of positive elevation deltas (meters)
    average_gradient_percent: float   # elevation_gain / length * 100
    average_power_watts: float        # Time-weighted, 0 when power not recorded
    category: ClimbCategory


@dataclass(frozen=True)
class ProjectedTrace:
    """Route trace projected by the auto-size strategy, with its drawing size."""
    points: list[ChartPoint]
    width: float
    height: float


@dataclass(frozen=True)
class ProfileRegion:
    """One polygon of a sliced elevation chart."""
    start_index: int  # Inclusive, index into the ambient elevation series
    end_index: int    # Inclusive
    highlighted: bool
    points: list[ChartPoint] = field(default_factory=list)


@dataclass(frozen=True)
class Split:
    """Fixed-distance split of an activity."""
    index: int                      # 1-based split number
    distance_m: float
    elapsed_s: float
    average_speed_ms: float         # 0 when no time was recorded
    elevation_difference_m: float   # end elevation minus start elevation
    average_heartrate: float | None


@dataclass
class Activity:
    """An ingested activity: route geometry plus sample streams."""
    name: str
    sport_type: str
    points: list[GeoPoint]
    streams: ActivityStreams

    @property
    def is_ride(self) -> bool:
        return "Ride" in self.sport_type
