"""Two-stop color gradients for chart fills and strokes.

A gradient holds a start and an end color. Either may be unset (None). The
first explicit color fills both stops, so a single-color input yields a flat
gradient instead of a color fading into nothing.
"""

from dataclasses import dataclass, field
from enum import Enum

from activity_geometry.colors import DEFAULT_OPACITY_DECAY, decrease_opacity
from activity_geometry.errors import InvalidParameterError

DEFAULT_STROKE_COLOR = "#fff"


class StopSide(Enum):
    A = 0  # start
    B = 1  # end

    @property
    def sibling(self) -> "StopSide":
        return StopSide.B if self is StopSide.A else StopSide.A


def _as_side(side: "StopSide | int") -> StopSide:
    if isinstance(side, StopSide):
        return side
    try:
        return StopSide(side)
    except ValueError as e:
        raise InvalidParameterError(f"Gradient stop must be 0 or 1, got {side!r}") from e


@dataclass
class TwoStopGradient:
    stop_a: str | None = None
    stop_b: str | None = None

    def get_stop(self, side: StopSide | int) -> str | None:
        """Raw stored color, None if never set and never inherited."""
        side = _as_side(side)
        return self.stop_a if side is StopSide.A else self.stop_b

    def _store(self, side: StopSide, color: str | None) -> None:
        if side is StopSide.A:
            self.stop_a = color
        else:
            self.stop_b = color

    def set_stop(self, side: StopSide | int, color: str) -> None:
        """Set one stop; an unset sibling takes the same color."""
        side = _as_side(side)
        self._store(side, color)
        if not self.get_stop(side.sibling):
            self._store(side.sibling, color)

    @property
    def is_empty(self) -> bool:
        return not self.stop_a and not self.stop_b

    def derive_unhighlighted(self, decay: float = DEFAULT_OPACITY_DECAY) -> "TwoStopGradient":
        """New gradient with both stops' opacity reduced by decay."""
        return TwoStopGradient(
            stop_a=decrease_opacity(self.stop_a, decay),
            stop_b=decrease_opacity(self.stop_b, decay),
        )

    def clone(self) -> "TwoStopGradient":
        return TwoStopGradient(stop_a=self.stop_a, stop_b=self.stop_b)


@dataclass
class FillStrokeGradient:
    """Fill and stroke gradient pair of one chart element.

    Unset stroke stops fall back to white; fill stops may stay unset, which
    means the element is drawn without a fill.
    """
    fill: TwoStopGradient = field(default_factory=TwoStopGradient)
    stroke: TwoStopGradient = field(default_factory=TwoStopGradient)

    def __post_init__(self):
        if not self.stroke.stop_a:
            self.stroke.stop_a = DEFAULT_STROKE_COLOR
        if not self.stroke.stop_b:
            self.stroke.stop_b = DEFAULT_STROKE_COLOR

    @classmethod
    def from_stops(
        cls,
        fill: list[str | None] | None = None,
        stroke: list[str | None] | None = None,
    ) -> "FillStrokeGradient":
        """Build from [start, end] lists as stored in a theme; missing entries are unset."""
        fill = list(fill or []) + [None, None]
        stroke = list(stroke or []) + [None, None]
        return cls(
            fill=TwoStopGradient(stop_a=fill[0], stop_b=fill[1]),
            stroke=TwoStopGradient(stop_a=stroke[0], stop_b=stroke[1]),
        )

    def fill_stops(self) -> tuple[str | None, str | None] | None:
        """Fill colors to draw, or None when no fill stop is set."""
        if self.fill.is_empty:
            return None
        return self.fill.stop_a, self.fill.stop_b

    def stroke_stops(self) -> tuple[str | None, str | None]:
        return self.stroke.stop_a, self.stroke.stop_b

    def derive_unhighlighted(self, decay: float = DEFAULT_OPACITY_DECAY) -> "FillStrokeGradient":
        return FillStrokeGradient(
            fill=self.fill.derive_unhighlighted(decay),
            stroke=self.stroke.derive_unhighlighted(decay),
        )

    def clone(self) -> "FillStrokeGradient":
        return FillStrokeGradient(fill=self.fill.clone(), stroke=self.stroke.clone())


def gradient_for_region(
    gradient: TwoStopGradient,
    highlighted: bool,
    decay: float = DEFAULT_OPACITY_DECAY,
) -> TwoStopGradient:
    """Gradient to fill a chart region with; non-highlighted regions are faded."""
    if highlighted:
        return gradient.clone()
    return gradient.derive_unhighlighted(decay)
