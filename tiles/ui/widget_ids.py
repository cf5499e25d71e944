"""Centralized widget IDs to ensure consistency across the UI."""

from ..layout import PanelAction

# Container IDs
WORKSPACE = "workspace"                 # TilingWorkspace holding the layout

# Button IDs
NEW_PANEL_BUTTON = "new-panel"          # Re-seed button in the empty workspace


def panel_id(panel_id: int) -> str:
    """Widget id of the HelloPanel for a leaf."""
    return f"panel-{panel_id}"


def action_button_id(action: PanelAction, panel_id: int) -> str:
    """Widget id of a leaf's split/close button, e.g. "split-vertical-3"."""
    return f"{action.value}-{panel_id}"
