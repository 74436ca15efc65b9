"""SVG rendering for :class:`polarlab.geometry.DiagramGeometry`.

The layout engine produces primitives with a ``role``; this module maps roles
to colours and stroke styles and emits a standalone ``<svg>`` string that the
UI drops into an HTML element.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from html import escape
from typing import Dict, List

from .geometry import Arc, Circle, DiagramGeometry, Label, Line

MONO_FONT = "'JetBrains Mono', monospace"
SANS_FONT = "'Inter', sans-serif"

DEFAULT_ROLE_STYLES: Dict[str, Dict[str, str]] = {
    "grid": {"stroke": "rgba(0,240,255,0.07)", "stroke-width": "1"},
    "axis": {"stroke": "#334155", "stroke-width": "1.5"},
    "projection": {"stroke": "rgba(0,240,255,0.2)", "stroke-width": "1", "stroke-dasharray": "4,4"},
    "vector": {"stroke": "#00f0ff", "stroke-width": "2.5"},
    "arc": {"fill": "none", "stroke": "#39ff14", "stroke-width": "2", "stroke-dasharray": "3,3"},
    "point": {"fill": "#00f0ff"},
    "halo": {"fill": "none", "stroke": "rgba(0,240,255,0.3)", "stroke-width": "1.5"},
    "grid-label": {"fill": "#64748b", "font-size": "11", "font-family": MONO_FONT},
    "axis-label": {"fill": "#94a3b8", "font-size": "13", "font-weight": "600", "font-family": SANS_FONT},
    "origin-label": {"fill": "#64748b", "font-size": "12", "font-family": MONO_FONT},
    "theta-label": {"fill": "#39ff14", "font-size": "14", "font-weight": "700", "font-family": MONO_FONT},
    "coord-label": {"fill": "#e2e8f0", "font-size": "13", "font-weight": "600", "font-family": MONO_FONT},
    "magnitude-label": {
        "fill": "#00f0ff",
        "font-size": "12",
        "font-weight": "500",
        "font-family": MONO_FONT,
        "opacity": "0.8",
    },
}


@dataclass
class DiagramStyle:
    """Colours and strokes per primitive role."""

    roles: Dict[str, Dict[str, str]] = field(default_factory=lambda: {k: dict(v) for k, v in DEFAULT_ROLE_STYLES.items()})
    arrow_color: str = "#00f0ff"
    background: str = "none"
    animate_halo: bool = True

    def attrs(self, role: str) -> str:
        return "".join(f' {name}="{escape(value)}"' for name, value in self.roles.get(role, {}).items())


def _n(value: float) -> str:
    return f"{value:.2f}"


def _line(line: Line, style: DiagramStyle) -> str:
    marker = ' marker-end="url(#arrowhead)"' if line.arrow else ""
    return (
        f'<line x1="{_n(line.p0[0])}" y1="{_n(line.p0[1])}" x2="{_n(line.p1[0])}" y2="{_n(line.p1[1])}"'
        f"{style.attrs(line.role)}{marker} />"
    )


def _arc(arc: Arc, style: DiagramStyle) -> str:
    return f'<path d="{arc.path()}"{style.attrs(arc.role)} />'


def _circle(circle: Circle, style: DiagramStyle) -> str:
    head = f'<circle cx="{_n(circle.c[0])}" cy="{_n(circle.c[1])}" r="{_n(circle.r)}"{style.attrs(circle.role)}'
    if circle.role == "halo" and style.animate_halo:
        return (
            head + ">"
            '<animate attributeName="r" values="8;16;8" dur="2s" repeatCount="indefinite" />'
            '<animate attributeName="opacity" values="0.5;0;0.5" dur="2s" repeatCount="indefinite" />'
            "</circle>"
        )
    return head + " />"


def _label(label: Label, style: DiagramStyle) -> str:
    anchor = f' text-anchor="{label.anchor}"' if label.anchor != "start" else ""
    return (
        f'<text x="{_n(label.pos[0])}" y="{_n(label.pos[1])}"{style.attrs(label.role)}{anchor}>'
        f"{escape(label.text)}</text>"
    )


def render_svg(geometry: DiagramGeometry, style: DiagramStyle | None = None) -> str:
    """Render the diagram as an SVG document string."""

    style = style or DiagramStyle()
    width = geometry.width
    height = geometry.height
    elements: List[str] = []
    if style.background != "none":
        elements.append(f'<rect x="0" y="0" width="{_n(width)}" height="{_n(height)}" fill="{style.background}" />')
    elements.extend(_line(line, style) for line in geometry.lines)
    if geometry.arc is not None:
        elements.append(_arc(geometry.arc, style))
    elements.extend(_circle(circle, style) for circle in geometry.circles)
    elements.extend(_label(label, style) for label in geometry.labels)
    elements.append(
        "<defs>"
        '<marker id="arrowhead" markerWidth="10" markerHeight="7" refX="9" refY="3.5" '
        'orient="auto" markerUnits="strokeWidth">'
        f'<polygon points="0 0, 10 3.5, 0 7" fill="{style.arrow_color}" />'
        "</marker>"
        "</defs>"
    )
    svg = (
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {format(width, "g")} {format(height, "g")}" '
        f'width="100%" height="100%" preserveAspectRatio="xMidYMid meet" style="display:block">'
        + "".join(elements)
        + "</svg>"
    )
    return svg


__all__ = ["DiagramStyle", "DEFAULT_ROLE_STYLES", "render_svg"]
