"""Pure projection from controller state and diagram geometry to a view model.

The NiceGUI page in :mod:`polarlab.app` only copies these values into widgets,
so everything the user can see is decided here and can be tested without a
browser.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .geometry import DiagramGeometry, format_number
from .models import CalculationResult
from .rendering import DiagramStyle, render_svg
from .state import ControllerState

CALCULATE_LABEL = "Calculate"
LOADING_LABEL = "Calculating..."


@dataclass(frozen=True)
class ResultCard:
    label: str
    value: str


@dataclass(frozen=True)
class ShellView:
    expression: str
    button_label: str
    button_disabled: bool
    error: Optional[str]
    cards: Tuple[ResultCard, ...]
    polar_form: Optional[str]
    steps: Tuple[str, ...]
    svg: str

    @property
    def has_result(self) -> bool:
        return bool(self.cards)

    def card(self, label: str) -> Optional[str]:
        for card in self.cards:
            if card.label == label:
                return card.value
        return None


def expression_preview(re_text: str, im_text: str) -> str:
    return f"z = {re_text or '?'} + {im_text or '?'}i"


def result_cards(result: CalculationResult) -> Tuple[ResultCard, ...]:
    return (
        ResultCard("Magnitude (r)", f"{result.magnitude:.4f}"),
        ResultCard("θ (degrees)", f"{result.argument_deg:.4f}°"),
        ResultCard("θ (radians)", f"{result.argument_rad:.4f} rad"),
        ResultCard("z", f"{format_number(result.re)} + {format_number(result.im)}i"),
    )


def build_view(state: ControllerState, geometry: DiagramGeometry, style: Optional[DiagramStyle] = None) -> ShellView:
    result = state.result
    return ShellView(
        expression=expression_preview(*state.inputs),
        button_label=LOADING_LABEL if state.is_loading else CALCULATE_LABEL,
        button_disabled=state.is_loading,
        error=state.error,
        cards=result_cards(result) if result is not None else (),
        polar_form=result.polar_form if result is not None else None,
        steps=result.steps if result is not None else (),
        svg=render_svg(geometry, style),
    )


__all__ = ["ResultCard", "ShellView", "build_view", "expression_preview", "result_cards"]
