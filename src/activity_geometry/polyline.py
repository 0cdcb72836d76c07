"""Encoded polyline decoding.

The format stores each point as a (lat, lng) delta from the previous point,
scaled by 1e5, zig-zag signed and split into 5-bit groups. Each group is
written as one ASCII character offset by 63; bit 0x20 marks that another
group follows.
"""

from activity_geometry.errors import MalformedPolylineError
from activity_geometry.models import GeoPoint

PRECISION = 1e5
_CHAR_OFFSET = 63
_CONTINUATION_BIT = 0x20
_CHUNK_MASK = 0x1F


def _decode_value(encoded: str, index: int) -> tuple[int, int]:
    """Decode one signed delta starting at index.

    Returns:
        Tuple of (delta, index of the next unread character)

    Raises:
        MalformedPolylineError: If the string ends before the continuation bit
            clears, or a character is outside the encoding alphabet.
    """
    result = 0
    shift = 0
    while True:
        if index >= len(encoded):
            raise MalformedPolylineError(
                f"Truncated polyline: value starting before offset {index} is incomplete"
            )
        chunk = ord(encoded[index]) - _CHAR_OFFSET
        if chunk < 0 or chunk > 0x3F:
            raise MalformedPolylineError(
                f"Invalid polyline character {encoded[index]!r} at offset {index}"
            )
        index += 1
        result |= (chunk & _CHUNK_MASK) << shift
        shift += 5
        if chunk < _CONTINUATION_BIT:
            break

    delta = ~(result >> 1) if result & 1 else result >> 1
    return delta, index


def decode_polyline(encoded: str) -> list[GeoPoint]:
    """Decode an encoded polyline into geographic points, preserving order.

    Raises:
        MalformedPolylineError: On truncated input, including a latitude
            with no matching longitude.
    """
    points: list[GeoPoint] = []
    index = 0
    lat = 0
    lng = 0

    while index < len(encoded):
        dlat, index = _decode_value(encoded, index)
        if index >= len(encoded):
            raise MalformedPolylineError(
                f"Truncated polyline: latitude at point {len(points)} has no longitude"
            )
        dlng, index = _decode_value(encoded, index)
        lat += dlat
        lng += dlng
        points.append(GeoPoint(lat=lat / PRECISION, lng=lng / PRECISION))

    return points
