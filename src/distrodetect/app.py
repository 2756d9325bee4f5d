"""Interactive viewer for the detection result."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import DataTable, Footer, Header, Label, Static

from distrodetect.engine import detect
from distrodetect.model import Distro
from distrodetect.ui import ids
from distrodetect.ui.ids import css

log = logging.getLogger(__name__)

APP_CSS = """
#summary {
    padding: 1 2;
    text-style: bold;
}

#identity-table {
    height: auto;
    margin: 0 2;
}

#raw-label {
    padding: 1 2 0 2;
    color: $text-muted;
}

#raw-scroll {
    margin: 0 2;
    border: round $primary;
}
"""

FIELDS = (
    ("Platform", "platform"),
    ("Name", "name"),
    ("Codename", "codename"),
    ("Version", "version"),
)


def get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "distrodetect"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "distrodetect.log"


class DistroInfoApp(App):
    """Show the detected platform, distro and the release text behind it."""

    TITLE = "distrodetect"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("r", "refresh_identity", "Re-detect", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(self, identity: Distro | None = None, allow_remote: bool | None = None) -> None:
        super().__init__()
        self.allow_remote = allow_remote
        self.identity = identity if identity is not None else detect(allow_remote=allow_remote)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static("", id=ids.SUMMARY, markup=False)
        yield DataTable(id=ids.IDENTITY_TABLE, show_cursor=False)
        yield Label("Release metadata", id=ids.RAW_LABEL)
        with VerticalScroll(id=ids.RAW_SCROLL):
            yield Static("", id=ids.RAW_TEXT, markup=False)
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one(css(ids.IDENTITY_TABLE), DataTable)
        table.add_columns("Field", "Value")
        self._show_identity()

    def _show_identity(self) -> None:
        identity = self.identity
        self.query_one(css(ids.SUMMARY), Static).update(identity.summary())

        table = self.query_one(css(ids.IDENTITY_TABLE), DataTable)
        table.clear()
        for label, attr in FIELDS:
            table.add_row(label, getattr(identity, attr))

        raw = identity.raw_metadata or "(no release files found)"
        self.query_one(css(ids.RAW_TEXT), Static).update(raw)

    def action_refresh_identity(self) -> None:
        """Run detection again and redraw."""
        self.identity = detect(allow_remote=self.allow_remote)
        log.info("Re-detected: %s", self.identity)
        self._show_identity()


def run_app(allow_remote: bool | None = None) -> None:
    """Start the viewer, logging to the XDG state directory."""
    logging.basicConfig(
        filename=str(get_log_path()),
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    DistroInfoApp(allow_remote=allow_remote).run()
