"""Terminal UI that shows the detected distribution."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from distroprobe.cli import format_distribution
from distroprobe.commands import SubprocessRunner
from distroprobe.constants import DEFAULT_DETECT_TIMEOUT
from distroprobe.context import DetectContext
from distroprobe.detector import Detector
from distroprobe.distribution import Distribution
from distroprobe.errors import DetectionError

log = logging.getLogger(__name__)

APP_CSS = """
#status {
    padding: 1 2;
    text-style: bold;
}
#summary {
    padding: 0 2;
    border: round $accent;
}
#summary.error {
    border: round $error;
}
"""


def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "distroprobe"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "distroprobe.log"


class DistroProbeApp(App):
    """Runs one detection and displays the result."""

    TITLE = "distroprobe"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("escape", "quit", "Quit", show=False),
        Binding("r", "redetect", "Re-detect", show=True),
    ]

    def __init__(
        self,
        detector: Detector | None = None,
        timeout: float = DEFAULT_DETECT_TIMEOUT,
        log_to_file: bool = True,
    ) -> None:
        super().__init__()
        self.detector = detector if detector is not None else Detector(runner=SubprocessRunner())
        self.detect_timeout = timeout
        self.distribution: Distribution | None = None
        self.last_error: DetectionError | None = None
        if log_to_file:
            logging.basicConfig(
                filename=str(_get_log_path()),
                level=logging.DEBUG,
                format="%(asctime)s - %(levelname)s - %(message)s",
            )

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical():
            yield Static("Detecting...", id="status")
            yield Static("", id="summary", markup=False)
        yield Footer()

    def on_mount(self) -> None:
        self.action_redetect()

    def action_redetect(self) -> None:
        self.query_one("#status", Static).update("Detecting...")
        self._run_detection()

    @work(thread=True, exclusive=True)
    def _run_detection(self) -> None:
        with DetectContext.with_timeout(self.detect_timeout) as ctx:
            try:
                dist = self.detector.detect(ctx)
            except DetectionError as e:
                log.warning("Detection failed: %s", e)
                self.call_from_thread(self._show_error, e)
                return
        self.call_from_thread(self._show_result, dist)

    def _show_result(self, dist: Distribution) -> None:
        self.distribution = dist
        self.last_error = None
        self.query_one("#status", Static).update("Detection complete")
        summary = self.query_one("#summary", Static)
        summary.remove_class("error")
        summary.update(format_distribution(dist))

    def _show_error(self, error: DetectionError) -> None:
        self.distribution = None
        self.last_error = error
        self.query_one("#status", Static).update("Detection failed")
        summary = self.query_one("#summary", Static)
        summary.add_class("error")
        summary.update(str(error))
