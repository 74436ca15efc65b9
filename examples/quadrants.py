"""Example script that converts one point per quadrant and saves the diagrams."""
from __future__ import annotations

import sys
from pathlib import Path

from polarlab.client import PolarServiceClient, PolarServiceError
from polarlab.geometry import layout_diagram
from polarlab.rendering import render_svg

POINTS = [(3.0, 4.0), (-2.0, 1.5), (-1.0, -1.0), (5.0, -12.0)]


def main(url: str = "http://localhost:3000/calculate", out_dir: str = "diagrams") -> None:
    client = PolarServiceClient(url, timeout=5)
    target = Path(out_dir)
    target.mkdir(parents=True, exist_ok=True)
    for re, im in POINTS:
        try:
            result = client.calculate(re, im)
        except PolarServiceError as exc:
            print(f"{re} + {im}i: {exc.detail}")
            continue
        print(f"{re} + {im}i = {result.polar_form}")
        geometry = layout_diagram(result.re, result.im, result.magnitude, result.argument_deg)
        (target / f"z_{re:g}_{im:g}.svg").write_text(render_svg(geometry), encoding="utf-8")
    client.close()


if __name__ == "__main__":
    main(*sys.argv[1:])
