"""Top-level package for Complex Polar Lab.

The package contains the Argand diagram layout engine, the client and
controller that talk to the Polar Conversion Service, and the NiceGUI front-end.
"""

from .geometry import DiagramGeometry, layout_diagram
from .rendering import render_svg
from .client import PolarServiceClient
from .controller import PolarController
from .models import CalculationResult

__all__ = [
    "CalculationResult",
    "DiagramGeometry",
    "layout_diagram",
    "render_svg",
    "PolarServiceClient",
    "PolarController",
]
