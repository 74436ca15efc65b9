"""FastAPI reference implementation of the Polar Conversion Service.

The UI never imports this module; it talks to whatever URL is configured.
This app exists so the UI can be run locally and tested end to end.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def _fmt(value: float) -> str:
    """Shortest form of a float: ``3`` for 3.0, ``0.5`` for 0.5."""
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def determine_quadrant(a: float, b: float) -> str:
    if a > 0 and b >= 0:
        return "Quadrant I (0° ≤ θ < 90°)"
    if a < 0 and b >= 0:
        return "Quadrant II (90° < θ ≤ 180°)"
    if a < 0 and b < 0:
        return "Quadrant III (-180° < θ < -90°)"
    if a > 0 and b < 0:
        return "Quadrant IV (-90° < θ < 0°)"
    if a == 0 and b > 0:
        return "the positive imaginary axis (θ = 90°)"
    if a == 0 and b < 0:
        return "the negative imaginary axis (θ = -90°)"
    return "the origin"


def solution_steps(a: float, b: float, r: float, theta_rad: float, theta_deg: float) -> List[str]:
    return [
        f"📌 Step 1: z = {_fmt(a)} + {_fmt(b)}i (real part a = {_fmt(a)}, imaginary part b = {_fmt(b)})",
        "📐 Step 2: magnitude r = √(a² + b²)",
        f"   ➜ r = √(({_fmt(a)})² + ({_fmt(b)})²) = √({_fmt(a * a)} + {_fmt(b * b)}) = √{_fmt(a * a + b * b)} = {r:.4f}",
        "📏 Step 3: argument θ = atan2(b, a)",
        f"   ➜ θ = atan2({_fmt(b)}, {_fmt(a)}) = {theta_rad:.4f} rad = {theta_deg:.4f}°",
        f"🧭 Step 4: the point ({_fmt(a)}, {_fmt(b)}) lies in {determine_quadrant(a, b)}",
        "✅ Step 5: polar form",
        f"   ➜ z = {r:.4f}(cos {theta_deg:.4f}° + i sin {theta_deg:.4f}°)",
    ]


def calculate_polar(a: float, b: float) -> Dict[str, Any]:
    """Magnitude, argument and polar form of ``a + b·i``."""
    r = math.hypot(a, b)
    theta_rad = math.atan2(b, a)
    theta_deg = math.degrees(theta_rad)
    return {
        "re": a,
        "im": b,
        "magnitude": r,
        "argument_rad": theta_rad,
        "argument_deg": theta_deg,
        "polar_form": f"{r:.4f}(cos {theta_deg:.4f}° + i sin {theta_deg:.4f}°)",
        "steps": solution_steps(a, b, r, theta_rad, theta_deg),
    }


def _coordinate(payload: Dict[str, Any], key: str) -> float:
    value = payload.get(key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise HTTPException(status_code=400, detail=f"'{key}' must be a number")
    value = float(value)
    if not math.isfinite(value):
        raise HTTPException(status_code=400, detail=f"'{key}' must be finite")
    return value


app = FastAPI(title="Polar Conversion Service")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.get("/api/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.post("/calculate")
def calculate(payload: Dict[str, Any]) -> Dict[str, Any]:
    a = _coordinate(payload, "re")
    b = _coordinate(payload, "im")
    result = calculate_polar(a, b)
    logger.info("calculate re=%s im=%s -> r=%.4f", a, b, result["magnitude"])
    return result


__all__ = ["app", "calculate_polar", "determine_quadrant", "solution_steps"]
