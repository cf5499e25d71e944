"""
Centralized constants for tiles.

Values shared between the layout core, the UI shell and the CLI live here
so the widgets and the tests agree on them.
"""

import os
from pathlib import Path

# =============================================================================
# PATHS
# =============================================================================

TILES_CONFIG_DIR = Path(
    os.environ.get("TILES_CONFIG_DIR", str(Path.home() / ".config" / "tiles"))
)

# =============================================================================
# LAYOUT
# =============================================================================

ROOT_ID = 0  # Reserved registry key for the root panel, never allocated
FIRST_ALLOCATED_ID = 1  # Allocator starts here so it never issues ROOT_ID

REPRESENTATION_REGISTRY = "registry"  # Flat id-keyed registry
REPRESENTATION_TREE = "tree"  # Owned recursive tree
REPRESENTATIONS = (REPRESENTATION_REGISTRY, REPRESENTATION_TREE)

INITIAL_LAYOUT_SINGLE = "single"  # One Hello panel
INITIAL_LAYOUT_PAIR = "pair"  # Two Hello panels side by side
INITIAL_LAYOUTS = (INITIAL_LAYOUT_SINGLE, INITIAL_LAYOUT_PAIR)

# Default start-up shape per representation
DEFAULT_INITIAL_LAYOUTS = {
    REPRESENTATION_REGISTRY: INITIAL_LAYOUT_SINGLE,
    REPRESENTATION_TREE: INITIAL_LAYOUT_PAIR,
}

# =============================================================================
# PANEL CONTENT
# =============================================================================

PANEL_TITLE_TEMPLATE = "Hello {panel_id}"
PANEL_BODY_TEXT = "Hello!"

SPLIT_HORIZONTAL_LABEL = "H"
SPLIT_VERTICAL_LABEL = "V"
CLOSE_LABEL = "X"
NEW_PANEL_LABEL = "New panel"

# =============================================================================
# LOGGING
# =============================================================================

LOG_FILE_NAME = "tiles.log"
MAX_LOG_BYTES = 5 * 1024 * 1024  # 5MB per log file
LOG_BACKUP_COUNT = 2
