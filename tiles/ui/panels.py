"""
Widgets that render a projected layout.

build_view_widget() turns a view tree into nested Horizontal/Vertical
containers with a HelloPanel per leaf. TilingWorkspace owns the cycle:
it composes from a fresh projection, flushes the dispatcher when a panel
reports an action, and recomposes.
"""

import logging
from typing import Dict, Optional

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Label, Static

from ..config.constants import (
    CLOSE_LABEL,
    NEW_PANEL_LABEL,
    PANEL_BODY_TEXT,
    SPLIT_HORIZONTAL_LABEL,
    SPLIT_VERTICAL_LABEL,
)
from ..exceptions import LayoutError
from ..layout import LayoutManager, LeafView, PanelAction, SplitView, ViewNode, leaf_views
from . import widget_ids

logger = logging.getLogger(__name__)

BUTTON_LABELS: Dict[PanelAction, str] = {
    PanelAction.SPLIT_HORIZONTAL: SPLIT_HORIZONTAL_LABEL,
    PanelAction.SPLIT_VERTICAL: SPLIT_VERTICAL_LABEL,
    PanelAction.CLOSE: CLOSE_LABEL,
}


class HelloPanel(Vertical):
    """A leaf panel: title, three action buttons and a body."""

    class ActionRequested(Message):
        """Fired after one of the panel's buttons queued its action."""

        def __init__(self, panel_id: int, action: PanelAction) -> None:
            self.panel_id = panel_id
            self.action = action
            super().__init__()

    DEFAULT_CSS = """
    HelloPanel {
        background: $boost;
        border: round $primary 50%;
        padding: 0 1;
        margin: 0 1 1 0;
    }

    HelloPanel .panel-header {
        height: 1;
    }

    HelloPanel .panel-title {
        width: 1fr;
        text-style: bold;
    }

    HelloPanel .panel-header Button {
        min-width: 5;
        width: 5;
        height: 1;
        border: none;
        margin: 0;
    }

    HelloPanel .panel-body {
        height: 1fr;
        padding-top: 1;
    }
    """

    def __init__(self, view: LeafView, **kwargs) -> None:
        super().__init__(id=widget_ids.panel_id(view.panel_id), **kwargs)
        self.leaf_view = view

    def compose(self) -> ComposeResult:
        with Horizontal(classes="panel-header"):
            yield Label(self.leaf_view.title, classes="panel-title")
            for action, label in BUTTON_LABELS.items():
                yield Button(
                    label,
                    id=widget_ids.action_button_id(action, self.leaf_view.panel_id),
                    name=action.value,
                )
        yield Static(PANEL_BODY_TEXT, classes="panel-body")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        action = PanelAction(event.button.name)
        self.leaf_view.callback_for(action)()
        self.post_message(self.ActionRequested(self.leaf_view.panel_id, action))


class SplitPanel(Container):
    """Two child regions laid out along an axis with a fixed divider."""

    DEFAULT_CSS = """
    SplitPanel {
        height: 1fr;
        width: 1fr;
    }

    SplitPanel.horizontal {
        layout: horizontal;
    }

    SplitPanel.vertical {
        layout: vertical;
    }

    SplitPanel.horizontal > * {
        width: 1fr;
        height: 1fr;
    }

    SplitPanel.vertical > * {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self, view: SplitView, *children: Widget) -> None:
        super().__init__(*children, classes=view.axis.value)
        self.split_view = view


def build_view_widget(view: ViewNode) -> Widget:
    """Recursively build the widget tree for a view node."""
    if isinstance(view, SplitView):
        return SplitPanel(view, build_view_widget(view.lhs), build_view_widget(view.rhs))
    elif isinstance(view, LeafView):
        return HelloPanel(view)
    else:
        raise ValueError(f"Unknown view type: {type(view)}")


class EmptyWorkspace(Vertical):
    """Shown when the layout is empty and re-seeding is off."""

    DEFAULT_CSS = """
    EmptyWorkspace {
        align: center middle;
    }

    EmptyWorkspace Static {
        width: auto;
        margin-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("All panels closed")
        yield Button(NEW_PANEL_LABEL, id=widget_ids.NEW_PANEL_BUTTON, variant="primary")


class TilingWorkspace(Container):
    """Renders the managed layout and applies panel actions.

    Every HelloPanel.ActionRequested triggers one flush of the dispatcher
    followed by a full recompose from a new projection.
    """

    class LayoutChanged(Message):
        """Fired after the layout has been mutated and re-rendered."""

        def __init__(self, leaf_count: int) -> None:
            self.leaf_count = leaf_count
            super().__init__()

    DEFAULT_CSS = """
    TilingWorkspace {
        height: 1fr;
        width: 1fr;
        padding: 1 0 0 1;
    }
    """

    def __init__(self, manager: LayoutManager, **kwargs) -> None:
        super().__init__(**kwargs)
        self.manager = manager
        self._view: Optional[ViewNode] = None

    @property
    def current_view(self) -> Optional[ViewNode]:
        return self._view

    def compose(self) -> ComposeResult:
        self._view = self.manager.view()
        if self._view is None:
            yield EmptyWorkspace()
        else:
            yield build_view_widget(self._view)

    def on_mount(self) -> None:
        self.post_message(self.LayoutChanged(self.leaf_count))

    async def on_hello_panel_action_requested(self, message: HelloPanel.ActionRequested) -> None:
        message.stop()
        logger.debug(f"Panel {message.panel_id} requested {message.action.value}")
        try:
            self.manager.flush()
        except LayoutError as e:
            logger.error(f"Dropped {message.action.value} on panel {message.panel_id}: {e}")
        await self.refresh_layout()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id != widget_ids.NEW_PANEL_BUTTON:
            return
        event.stop()
        self.manager.reseed()
        await self.refresh_layout()

    async def refresh_layout(self) -> None:
        await self.recompose()
        self.post_message(self.LayoutChanged(self.leaf_count))

    @property
    def leaf_count(self) -> int:
        return len(leaf_views(self._view))
