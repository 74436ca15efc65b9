"""Layout of the Argand diagram.

The layout engine turns a complex value into plain drawing primitives (lines,
one arc, circles and text labels) on a fixed square canvas.  It knows nothing
about SVG or the UI; :mod:`polarlab.rendering` turns the primitives into markup.
Everything here is a pure function of its arguments, so the same input always
produces an equal :class:`DiagramGeometry`.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Tuple, Union

from .config import CanvasConfig

XY = Tuple[float, float]

GRID_HALF_COUNT = 4
THETA_LABEL_FACTOR = 1.4
POINT_RADIUS = 6.0
HALO_RADIUS = 12.0


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Line:
    """Straight segment between two canvas points."""

    p0: XY
    p1: XY
    role: str
    dashed: bool = False
    arrow: bool = False


@dataclass(frozen=True)
class Arc:
    """Circular arc drawn from ``start`` to ``end`` around the origin."""

    start: XY
    end: XY
    radius: float
    large_arc: int
    sweep: int
    role: str = "arc"

    def path(self) -> str:
        """SVG path data for the arc."""
        return (
            f"M {_num(self.start[0])} {_num(self.start[1])} "
            f"A {_num(self.radius)} {_num(self.radius)} 0 {self.large_arc} {self.sweep} "
            f"{_num(self.end[0])} {_num(self.end[1])}"
        )


@dataclass(frozen=True)
class Circle:
    c: XY
    r: float
    role: str


@dataclass(frozen=True)
class Label:
    """Text anchored at a canvas point."""

    pos: XY
    text: str
    role: str
    anchor: str = "start"


Primitive = Union[Line, Arc, Circle, Label]


@dataclass(frozen=True)
class DiagramGeometry:
    """Everything needed to draw one Argand diagram."""

    width: float
    height: float
    origin: XY
    scale: float
    grid_step: int
    point: Optional[XY]
    lines: Tuple[Line, ...]
    arc: Optional[Arc]
    circles: Tuple[Circle, ...]
    labels: Tuple[Label, ...]

    @property
    def has_point(self) -> bool:
        return self.point is not None

    def primitives(self) -> Tuple[Primitive, ...]:
        """All primitives in paint order."""
        arc: Tuple[Primitive, ...] = (self.arc,) if self.arc is not None else ()
        return (*self.lines, *arc, *self.circles, *self.labels)

    def by_role(self, role: str) -> Tuple[Primitive, ...]:
        return tuple(p for p in self.primitives() if p.role == role)


# ---------------------------------------------------------------------------
# Number formatting
# ---------------------------------------------------------------------------


def format_number(value: float) -> str:
    """Print a number the way a browser prints it.

    Integral values lose the ``.0`` (``3``), exponents carry no padding
    (``1e-7``) and plain notation is used from ``1e-6`` up to ``1e21``.
    """

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign, digits, exponent = Decimal(repr(value)).normalize().as_tuple()
    s = "".join(str(d) for d in digits)
    k = len(s)
    n = exponent + k
    if k <= n <= 21:
        text = s + "0" * (n - k)
    elif 0 < n <= 21:
        text = s[:n] + "." + s[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + s
    else:
        e = n - 1
        mantissa = s[0] + ("." + s[1:] if k > 1 else "")
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"
    return "-" + text if sign else text


def _num(value: float) -> str:
    return f"{value:.2f}"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def auto_scale(re: Optional[float], im: Optional[float], canvas: CanvasConfig = CanvasConfig()) -> Tuple[float, float]:
    """Return ``(max_val, scale)`` so the point always fits on the canvas.

    ``max_val`` has a floor of 1, which keeps tiny or zero inputs from blowing
    up the scale.  The headroom factor keeps the point off the canvas edge.
    """

    max_val = max(abs(re or 0.0), abs(im or 0.0), 1.0)
    # divide in steps: max_val * headroom overflows near the float limit
    scale = (canvas.width / 2 - canvas.margin) / max_val / canvas.headroom
    return max_val, scale


def grid_step_for(max_val: float) -> int:
    return max(1, math.ceil(max_val / GRID_HALF_COUNT))


def to_canvas(x: float, y: float, scale: float, origin: XY) -> XY:
    """Map mathematical ``(x, y)`` to canvas coordinates (y axis flipped)."""
    cx, cy = origin
    return cx + x * scale, cy - y * scale


def _grid(canvas: CanvasConfig, origin: XY, scale: float, step: int) -> Tuple[Tuple[Line, ...], Tuple[Label, ...]]:
    cx, cy = origin
    lines = []
    labels = []
    for i in range(-GRID_HALF_COUNT, GRID_HALF_COUNT + 1):
        val = i * step
        gx, gy = to_canvas(val, val, scale, origin)
        lines.append(Line((gx, canvas.inset), (gx, canvas.height - canvas.inset), role="grid"))
        lines.append(Line((canvas.inset, gy), (canvas.width - canvas.inset, gy), role="grid"))
        if i != 0:
            labels.append(Label((gx, cy + 18), f"{val}", role="grid-label", anchor="middle"))
            labels.append(Label((cx - 18, gy + 4), f"{val}i", role="grid-label", anchor="end"))
    return tuple(lines), tuple(labels)


def _axes(canvas: CanvasConfig, origin: XY) -> Tuple[Tuple[Line, ...], Tuple[Label, ...]]:
    cx, cy = origin
    lines = (
        Line((canvas.inset, cy), (canvas.width - canvas.inset, cy), role="axis"),
        Line((cx, canvas.inset), (cx, canvas.height - canvas.inset), role="axis"),
    )
    labels = (
        Label((canvas.width - 15, cy - 8), "Re", role="axis-label"),
        Label((cx + 10, canvas.inset + 8), "Im", role="axis-label"),
        Label((cx - 15, cy + 18), "O", role="origin-label"),
    )
    return lines, labels


def angle_arc(re: float, im: float, argument_deg: float, origin: XY, radius: float) -> Arc:
    """Arc from the positive real axis to the direction of ``(re, im)``.

    The canvas flips the y axis, so an angle above the real axis is swept
    with flag 0 and one below it with flag 1.
    """

    cx, cy = origin
    angle = math.atan2(im, re)
    end = (cx + radius * math.cos(angle), cy - radius * math.sin(angle))
    return Arc(
        start=(cx + radius, cy),
        end=end,
        radius=radius,
        large_arc=1 if abs(argument_deg) > 180 else 0,
        sweep=0 if im >= 0 else 1,
    )


def layout_diagram(
    re: Optional[float],
    im: Optional[float],
    magnitude: float = 0.0,
    argument_deg: float = 0.0,
    canvas: CanvasConfig = CanvasConfig(),
) -> DiagramGeometry:
    """Compute the Argand diagram for ``re + im·i``.

    ``re`` and ``im`` may be ``None`` when nothing has been entered yet; a
    single ``None`` is drawn as zero.  The vector, projections, point marker
    and coordinate label need a point away from the origin.  The angle arc,
    the theta label and the magnitude label additionally need ``magnitude > 0``.
    """

    origin = canvas.center
    cx, cy = origin
    max_val, scale = auto_scale(re, im, canvas)
    step = grid_step_for(max_val)

    grid_lines, grid_labels = _grid(canvas, origin, scale, step)
    axis_lines, axis_labels = _axes(canvas, origin)
    lines = list(grid_lines + axis_lines)
    labels = list(grid_labels + axis_labels)
    circles = []
    arc = None
    point = None

    x = re or 0.0
    y = im or 0.0
    has_point = not (re is None and im is None) and (x != 0 or y != 0)

    if has_point:
        px, py = to_canvas(x, y, scale, origin)
        point = (px, py)
        lines.append(Line((px, py), (px, cy), role="projection", dashed=True))
        lines.append(Line((px, py), (cx, py), role="projection", dashed=True))
        lines.append(Line((cx, cy), (px, py), role="vector", arrow=True))

        if magnitude > 0:
            arc = angle_arc(x, y, argument_deg, origin, canvas.arc_radius)
            half = math.atan2(y, x) / 2
            reach = canvas.arc_radius * THETA_LABEL_FACTOR
            labels.append(
                Label((cx + reach * math.cos(half), cy - reach * math.sin(half)), "θ", role="theta-label", anchor="middle")
            )

        circles.append(Circle((px, py), POINT_RADIUS, role="point"))
        circles.append(Circle((px, py), HALO_RADIUS, role="halo"))
        labels.append(Label((px + 12, py - 12), f"({format_number(x)}, {format_number(y)}i)", role="coord-label"))

        if magnitude > 0:
            labels.append(
                Label(((cx + px) / 2 - 10, (cy + py) / 2 - 10), f"r = {magnitude:.2f}", role="magnitude-label")
            )

    return DiagramGeometry(
        width=canvas.width,
        height=canvas.height,
        origin=origin,
        scale=scale,
        grid_step=step,
        point=point,
        lines=tuple(lines),
        arc=arc,
        circles=tuple(circles),
        labels=tuple(labels),
    )


__all__ = [
    "XY",
    "Line",
    "Arc",
    "Circle",
    "Label",
    "Primitive",
    "DiagramGeometry",
    "auto_scale",
    "angle_arc",
    "format_number",
    "grid_step_for",
    "layout_diagram",
    "to_canvas",
]
