"""NiceGUI application: complex number input, polar results and Argand diagram."""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional, Sequence

from nicegui import app, ui

from .client import PolarServiceClient
from .config import AppConfig, CanvasConfig
from .controller import PolarController
from .presentation import ShellView, build_view
from .state import ControllerState

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings shared by every page (populated by ``main``)
# ---------------------------------------------------------------------------
APP_CONFIG = AppConfig.from_env()


class PolarLabApp:
    """One browser tab: its own controller, inputs and widgets."""

    def __init__(self, config: AppConfig, *, client: Optional[PolarServiceClient] = None) -> None:
        self.config = config
        self.client = client or PolarServiceClient.from_config(config.service)
        self.controller = PolarController(self.client, discard_stale=config.discard_stale)
        self.re_input = None
        self.im_input = None
        self.expression_label = None
        self.calculate_button = None
        self.error_banner = None
        self.error_label = None
        self.results_column = None
        self.cards_row = None
        self.polar_form_label = None
        self.steps_card = None
        self.steps_column = None
        self.diagram = None
        self._unsubscribe = self.controller.subscribe(self._render)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Detach from the controller and release the HTTP session."""
        self._unsubscribe()
        self.client.close()

    def _on_input(self, _event=None) -> None:
        self.controller.edit(self._text(self.re_input), self._text(self.im_input))

    async def _calculate(self) -> None:
        if self.controller.is_loading:
            return
        await self.controller.submit(self._text(self.re_input), self._text(self.im_input))

    @staticmethod
    def _text(element) -> str:
        if element is None or element.value is None:
            return ""
        return str(element.value)

    # ------------------------------------------------------------------
    # Layout builders
    # ------------------------------------------------------------------
    def create(self) -> None:
        ui.page_title(self.config.title)
        ui.context.client.on_disconnect(self.close)
        with ui.column().classes("w-full max-w-6xl mx-auto p-4 gap-4"):
            with ui.column().classes("w-full items-center gap-1"):
                ui.label(f"⚡ {self.config.title}").classes("text-3xl font-bold")
                ui.label("Complex numbers in polar form: interactive visualization").classes("text-gray-500")
            with ui.row().classes("w-full gap-4 items-start no-wrap"):
                with ui.card().classes("flex-1 min-w-[320px] gap-3"):
                    self._build_input_panel()
                    self._build_results_panel()
                with ui.card().classes("flex-[1.2] min-w-[340px] p-3"):
                    self._build_diagram_panel()
            self._build_steps_panel()
        self._render(self.controller.state)

    def _build_input_panel(self) -> None:
        ui.label("🔢 Enter a complex number").classes("text-lg font-semibold")
        self.re_input = ui.input(label="Real part (a)", placeholder="e.g. 3", on_change=self._on_input)
        self.re_input.props("inputmode=decimal outlined dense").classes("w-full")
        self.re_input.on("keydown.enter", self._calculate)
        self.im_input = ui.input(label="Imaginary part (b)", placeholder="e.g. 4", on_change=self._on_input)
        self.im_input.props("inputmode=decimal outlined dense").classes("w-full")
        self.im_input.on("keydown.enter", self._calculate)
        self.expression_label = ui.label("").classes("text-xs font-mono text-gray-500")
        self.calculate_button = ui.button("Calculate", on_click=self._calculate).classes("w-full")
        self.error_banner = ui.card().classes("w-full p-2 bg-red-50 border border-red-300")
        with self.error_banner:
            self.error_label = ui.label("").classes("text-sm text-red-600")

    def _build_results_panel(self) -> None:
        self.results_column = ui.column().classes("w-full gap-2")
        with self.results_column:
            ui.label("📊 Result").classes("text-base font-semibold text-cyan-700")
            self.cards_row = ui.grid(columns=2).classes("w-full gap-2")
            with ui.card().classes("w-full p-2 bg-green-50"):
                ui.label("Polar form").classes("text-xs text-gray-500")
                self.polar_form_label = ui.label("").classes("font-mono")

    def _build_diagram_panel(self) -> None:
        ui.label("📐 Argand Diagram").classes("text-lg font-semibold")
        canvas = self.config.canvas
        self.diagram = ui.html(content="", sanitize=False).classes("w-full rounded-lg bg-slate-900").style(
            f"aspect-ratio:{canvas.width}/{canvas.height};"
        )
        ui.label("The point z on the complex plane with its vector r and angle θ.").classes(
            "text-xs text-gray-500 self-center"
        )

    def _build_steps_panel(self) -> None:
        self.steps_card = ui.card().classes("w-full gap-2")
        with self.steps_card:
            ui.label("📝 Step-by-step solution").classes("text-lg font-semibold")
            self.steps_column = ui.column().classes("w-full gap-1 font-mono text-sm")

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render(self, state: ControllerState) -> None:
        if self.diagram is None:
            return
        view = build_view(state, self.controller.geometry(self.config.canvas))
        self._apply_view(view)

    def _apply_view(self, view: ShellView) -> None:
        self.expression_label.text = view.expression
        self.calculate_button.text = view.button_label
        self.calculate_button.set_enabled(not view.button_disabled)

        self.error_banner.set_visibility(view.error is not None)
        self.error_label.text = f"❌ {view.error}" if view.error else ""

        self.results_column.set_visibility(view.has_result)
        self.cards_row.clear()
        with self.cards_row:
            for card in view.cards:
                with ui.card().classes("p-2 bg-cyan-50"):
                    ui.label(card.label).classes("text-[11px] text-gray-500")
                    ui.label(card.value).classes("font-mono")
        self.polar_form_label.text = view.polar_form or ""

        self.steps_card.set_visibility(bool(view.steps))
        self.steps_column.clear()
        with self.steps_column:
            for step in view.steps:
                ui.label(step).classes("whitespace-pre-wrap")

        self.diagram.content = view.svg


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@app.get("/api/status")
def api_status() -> Dict[str, Any]:
    canvas = APP_CONFIG.canvas
    return {
        "service_url": APP_CONFIG.service.url,
        "discard_stale": APP_CONFIG.discard_stale,
        "canvas": {"width": canvas.width, "height": canvas.height},
    }


@ui.page("/")
def index() -> None:
    PolarLabApp(APP_CONFIG).create()


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------


def _positive_size(value: str) -> float:
    try:
        size = float(value)
    except (TypeError, ValueError) as exc:
        raise argparse.ArgumentTypeError("Canvas size must be a number, e.g. 500") from exc
    if size <= 0:
        raise argparse.ArgumentTypeError("Canvas size must be positive.")
    return size


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Launch the Complex Polar Lab UI.")
    parser.add_argument("--service-url", "-s", dest="service_url", help="URL of the POST /calculate endpoint.")
    parser.add_argument("--timeout", type=float, default=None, help="Client timeout in seconds (default: none).")
    parser.add_argument("--host", default=None, help="Interface to bind the UI to.")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port for the UI.")
    parser.add_argument(
        "--canvas-size", type=_positive_size, default=None, metavar="N", help="Side of the square diagram canvas."
    )
    parser.add_argument(
        "--keep-stale-responses",
        action="store_true",
        help="Apply every response in arrival order instead of only the latest request's.",
    )
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG or INFO.")
    return parser


def configure(argv: Optional[Sequence[str]] = None, config: Optional[AppConfig] = None) -> AppConfig:
    """Apply command line flags on top of ``config`` (env based by default)."""
    args = build_parser().parse_args(argv)
    config = config or AppConfig.from_env()
    if args.service_url:
        config.service.url = args.service_url
    if args.timeout is not None:
        config.service.timeout = args.timeout
    if args.host:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.canvas_size is not None:
        config.canvas = CanvasConfig(width=args.canvas_size, height=args.canvas_size)
    if args.keep_stale_responses:
        config.discard_stale = False
    if args.log_level:
        config.log_level = args.log_level.upper()
    return config


def run(config: Optional[AppConfig] = None, **kwargs) -> None:
    global APP_CONFIG
    if config is not None:
        APP_CONFIG = config
    logger.info("Serving %s on %s:%s (service %s)", APP_CONFIG.title, APP_CONFIG.host, APP_CONFIG.port, APP_CONFIG.service.url)
    kwargs.setdefault("reload", False)
    kwargs.setdefault("show", False)
    ui.run(title=APP_CONFIG.title, host=APP_CONFIG.host, port=APP_CONFIG.port, **kwargs)


def main(argv: Optional[List[str]] = None) -> None:
    config = configure(argv)
    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    run(config)
