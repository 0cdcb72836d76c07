"""Build activities from local GPX files and downloaded Strava payloads."""

import json
import logging
from pathlib import Path

import gpxpy

from activity_geometry.distance import cumulative_distances
from activity_geometry.models import Activity, ActivityStreams, GeoPoint
from activity_geometry.polyline import decode_polyline

logger = logging.getLogger(__name__)


def _extension_value(point, name: str) -> float | None:
    """Numeric value of a GPX point extension tag such as <power> or <gpxtpx:hr>."""
    for extension in point.extensions:
        for element in extension.iter():
            tag = element.tag.rsplit("}", 1)[-1]
            if tag == name and element.text:
                try:
                    return float(element.text)
                except ValueError:
                    return None
    return None


def _optional_stream(values: list[float | None]) -> list[float]:
    """Recorded stream with gaps as 0, or empty if nothing was recorded."""
    if all(v is None for v in values):
        return []
    return [v if v is not None else 0.0 for v in values]


def parse_gpx(filepath: str) -> Activity:
    """Parse a GPX file into an Activity.

    Points without elevation are dropped. The time stream is kept only when
    every remaining point has a timestamp.
    """
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)

    gpx_points = []
    dropped = 0
    name = gpx.name or ""
    for track in gpx.tracks:
        name = name or track.name or ""
        for segment in track.segments:
            for pt in segment.points:
                if pt.elevation is None:
                    dropped += 1
                    continue
                gpx_points.append(pt)

    if dropped:
        logger.warning("Dropped %d GPX points without elevation from %s", dropped, filepath)

    points = [GeoPoint(lat=pt.latitude, lng=pt.longitude) for pt in gpx_points]

    times = []
    if gpx_points and all(pt.time is not None for pt in gpx_points):
        start = gpx_points[0].time
        times = [(pt.time - start).total_seconds() for pt in gpx_points]

    streams = ActivityStreams(
        distance=cumulative_distances(points),
        elevation=[pt.elevation for pt in gpx_points],
        time=times,
        power=_optional_stream([_extension_value(pt, "power") for pt in gpx_points]),
        heartrate=_optional_stream([_extension_value(pt, "hr") for pt in gpx_points]),
    )
    sport_type = (gpx.tracks[0].type or "") if gpx.tracks else ""
    return Activity(name=name, sport_type=sport_type, points=points, streams=streams)


def _stream_lookup(streams) -> dict:
    """Map stream type to its data, for list or keyed Strava stream responses."""
    if isinstance(streams, dict):
        return {key: value["data"] if isinstance(value, dict) else value for key, value in streams.items()}
    return {stream["type"]: stream["data"] for stream in streams}


def activity_from_strava(data: dict) -> Activity:
    """Map a downloaded Strava activity payload into an Activity.

    Args:
        data: Dict with 'metadata' (activity summary) and 'streams' keys

    Raises:
        ValueError: If the distance or altitude stream is missing.
        StreamLengthMismatchError: If the streams are not index-aligned.
        MalformedPolylineError: If the route falls back to a corrupt map polyline.
    """
    metadata = data.get("metadata", {})
    stream_data = _stream_lookup(data.get("streams", []))

    distance = stream_data.get("distance")
    altitude = stream_data.get("altitude")
    if not distance or not altitude:
        raise ValueError("Strava activity has no distance or altitude stream")

    latlng = stream_data.get("latlng", [])
    if latlng:
        points = [GeoPoint(lat=lat, lng=lng) for lat, lng in latlng]
    else:
        route_map = metadata.get("map") or {}
        encoded = route_map.get("polyline") or route_map.get("summary_polyline") or ""
        points = decode_polyline(encoded)

    streams = ActivityStreams(
        distance=distance,
        elevation=altitude,
        time=stream_data.get("time", []),
        power=[w if w is not None else 0.0 for w in stream_data.get("watts", [])],
        heartrate=[hr if hr is not None else 0.0 for hr in stream_data.get("heartrate", [])],
    )
    return Activity(
        name=metadata.get("name", ""),
        sport_type=metadata.get("sport_type") or metadata.get("type") or "",
        points=points,
        streams=streams,
    )


def load_activity(path: str) -> Activity:
    """Load a .gpx file or a Strava .json payload."""
    if Path(path).suffix.lower() == ".json":
        with open(path) as f:
            return activity_from_strava(json.load(f))
    return parse_gpx(path)
