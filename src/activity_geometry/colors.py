"""Color opacity helpers.

Hex and named colors are parsed with matplotlib and written back as
#rrggbbaa. CSS rgb()/rgba() strings keep their CSS form.
"""

import re

from matplotlib.colors import to_hex, to_rgba

from activity_geometry.errors import InvalidColorError, InvalidParameterError

DEFAULT_OPACITY_DECAY = 0.2

CSS_RGBA_PATTERN = re.compile(
    r"^\s*rgba?\(\s*([\d.]+)\s*,\s*([\d.]+)\s*,\s*([\d.]+)\s*(?:,\s*([\d.]+)\s*)?\)\s*$",
    re.IGNORECASE,
)


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


def decrease_opacity(color: str | None, amount: float = DEFAULT_OPACITY_DECAY) -> str | None:
    """Reduce the alpha channel of a color by amount.

    A color without an alpha channel starts from full opacity. The resulting
    alpha is clamped to [0, 1]. None (an unset gradient stop) stays None.

    Raises:
        InvalidParameterError: If amount is outside [0, 1].
        InvalidColorError: If the color cannot be parsed.
    """
    if amount < 0 or amount > 1:
        raise InvalidParameterError(f"Opacity decay must be within [0, 1], got {amount}")
    if color is None:
        return None

    match = CSS_RGBA_PATTERN.match(color)
    if match:
        r, g, b, a = match.groups()
        alpha = _clamp(float(a) if a is not None else 1.0)
        new_alpha = round(_clamp(alpha - amount), 4)
        return f"rgba({r}, {g}, {b}, {new_alpha:g})"

    try:
        r, g, b, a = to_rgba(color)
    except ValueError as e:
        raise InvalidColorError(f"Unsupported color {color!r}") from e

    return to_hex((r, g, b, _clamp(a - amount)), keep_alpha=True)
