"""
Textual application shell for tiles.
"""

import logging
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..layout import LayoutManager
from . import widget_ids
from .panels import TilingWorkspace

logger = logging.getLogger(__name__)


class TilesApp(App):
    """Full-screen tiling layout of Hello panels."""

    TITLE = "Tiles"

    CSS = """
    Screen {
        layout: vertical;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+n", "new_panel", "New panel", show=False),
    ]

    def __init__(self, manager: LayoutManager, theme_name: Optional[str] = None) -> None:
        super().__init__()
        self.manager = manager
        self._theme_name = theme_name

    def compose(self) -> ComposeResult:
        yield Header()
        yield TilingWorkspace(self.manager, id=widget_ids.WORKSPACE)
        yield Footer()

    def on_mount(self) -> None:
        if self._theme_name:
            if self._theme_name in self.available_themes:
                self.theme = self._theme_name
            else:
                logger.warning(f"Unknown theme '{self._theme_name}', keeping {self.theme}")
        logger.info(f"Tiles started with the {self.manager.representation} layout")

    @property
    def workspace(self) -> TilingWorkspace:
        return self.query_one(f"#{widget_ids.WORKSPACE}", TilingWorkspace)

    def on_tiling_workspace_layout_changed(self, message: TilingWorkspace.LayoutChanged) -> None:
        self._update_subtitle(message.leaf_count)

    async def action_new_panel(self) -> None:
        """Seed a panel when every panel has been closed."""
        if self.manager.reseed():
            await self.workspace.refresh_layout()

    def _update_subtitle(self, leaf_count: int) -> None:
        self.sub_title = f"{leaf_count} panel(s) - {self.manager.representation}"
