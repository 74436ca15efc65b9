"""Input/result controller: validates input, calls the service, keeps state."""
from __future__ import annotations

import asyncio
import itertools
import logging
import math
from typing import Callable, List, Optional, Tuple

from .client import PolarServiceClient, PolarServiceError
from .config import CanvasConfig
from .geometry import DiagramGeometry, layout_diagram
from .state import (
    CONNECTION_ERROR_TEMPLATE,
    ControllerState,
    Event,
    InputEdited,
    RequestFailed,
    RequestStarted,
    RequestSucceeded,
    ValidationFailed,
    reduce,
)

logger = logging.getLogger(__name__)

StateListener = Callable[[ControllerState], None]


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse user text as a finite float, or return ``None``."""
    if text is None:
        return None
    try:
        value = float(str(text).strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class PolarController:
    """Owns the two raw inputs and the last result or error.

    One shared :class:`ControllerState` value is replaced through
    :func:`polarlab.state.reduce` on every event and listeners are told
    after each change.  Service calls run in a worker thread so the UI
    event loop stays responsive.
    """

    def __init__(self, client: PolarServiceClient, *, discard_stale: bool = True) -> None:
        self.client = client
        self.discard_stale = discard_stale
        self._state = ControllerState()
        self._seq = itertools.count(1)
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # State plumbing
    # ------------------------------------------------------------------
    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, event: Event) -> ControllerState:
        previous = self._state
        self._state = reduce(previous, event, discard_stale=self.discard_stale)
        if self._state is previous:
            logger.debug("Ignored %s", type(event).__name__)
            return self._state
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------
    def edit(self, re_text: str, im_text: str) -> ControllerState:
        return self.dispatch(InputEdited(re_text or "", im_text or ""))

    async def submit(self, re_text: Optional[str] = None, im_text: Optional[str] = None) -> ControllerState:
        """Validate the inputs and, if they parse, run one service request.

        Without arguments the stored inputs are used.  Invalid input never
        reaches the network.
        """

        if re_text is not None or im_text is not None:
            stored_re, stored_im = self._state.inputs
            self.edit(stored_re if re_text is None else re_text, stored_im if im_text is None else im_text)
        raw_re, raw_im = self._state.inputs
        re = parse_number(raw_re)
        im = parse_number(raw_im)
        if re is None or im is None:
            logger.info("Rejected input re=%r im=%r", raw_re, raw_im)
            return self.dispatch(ValidationFailed())

        seq = next(self._seq)
        self.dispatch(RequestStarted(seq))
        try:
            result = await asyncio.to_thread(self.client.calculate, re, im)
        except PolarServiceError as exc:
            return self.dispatch(RequestFailed(seq, CONNECTION_ERROR_TEMPLATE.format(detail=exc.detail)))
        except Exception as exc:
            logger.exception("Unexpected failure calculating re=%s im=%s", re, im)
            return self.dispatch(RequestFailed(seq, CONNECTION_ERROR_TEMPLATE.format(detail=str(exc))))
        return self.dispatch(RequestSucceeded(seq, result))

    # ------------------------------------------------------------------
    # Diagram
    # ------------------------------------------------------------------
    def diagram_inputs(self) -> Tuple[Optional[float], Optional[float], float, float]:
        """Coordinates for the diagram: the last result, else the raw inputs."""
        result = self._state.result
        if result is not None:
            return result.re, result.im, result.magnitude, result.argument_deg
        raw_re, raw_im = self._state.inputs
        return parse_number(raw_re), parse_number(raw_im), 0.0, 0.0

    def geometry(self, canvas: CanvasConfig = CanvasConfig()) -> DiagramGeometry:
        re, im, magnitude, argument_deg = self.diagram_inputs()
        return layout_diagram(re, im, magnitude, argument_deg, canvas)


__all__ = ["PolarController", "parse_number"]
