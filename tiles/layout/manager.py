"""
Layout manager tying a layout, its dispatcher and the projector together.

The LayoutManager is responsible for:
- Creating the start-up layout for the chosen representation
- Projecting the layout into a view tree for the renderer
- Flushing queued leaf actions between two projections
- Re-seeding an emptied layout when the shell asks for it
"""

import logging
from typing import Optional

from ..config.constants import (
    DEFAULT_INITIAL_LAYOUTS,
    INITIAL_LAYOUT_PAIR,
    INITIAL_LAYOUTS,
    REPRESENTATION_REGISTRY,
    REPRESENTATION_TREE,
    REPRESENTATIONS,
)
from ..exceptions import ConfigurationError
from .actions import ActionDispatcher
from .projection import Layout, ViewNode, project
from .registry import PanelRegistry
from .tree import PanelTree
from .types import Axis

logger = logging.getLogger(__name__)


def create_layout(
    representation: str = REPRESENTATION_REGISTRY,
    initial_layout: Optional[str] = None,
    axis: Axis = Axis.HORIZONTAL,
) -> Layout:
    """Create a layout in its start-up shape.

    Args:
        representation: "registry" or "tree"
        initial_layout: "single", "pair", or None for the representation's default
        axis: Axis of the initial split when initial_layout is "pair"

    Returns:
        PanelRegistry or PanelTree

    Raises:
        ConfigurationError: If either name is unknown
    """
    if representation not in REPRESENTATIONS:
        raise ConfigurationError(
            f"Unknown representation '{representation}'. Must be one of: {REPRESENTATIONS}",
            setting="representation",
        )
    shape = initial_layout or DEFAULT_INITIAL_LAYOUTS[representation]
    if shape not in INITIAL_LAYOUTS:
        raise ConfigurationError(
            f"Unknown initial layout '{shape}'. Must be one of: {INITIAL_LAYOUTS}",
            setting="initial_layout",
        )

    layout_class = PanelTree if representation == REPRESENTATION_TREE else PanelRegistry
    if shape == INITIAL_LAYOUT_PAIR:
        layout = layout_class.pair(axis)
    else:
        layout = layout_class.single()
    logger.info(f"Created {representation} layout ({shape})")
    return layout


class LayoutManager:
    """Owns the live layout and drives one projection/mutation cycle at a time.

    Usage:
        manager = LayoutManager(create_layout("tree"))
        view = manager.view()
        view.lhs.on_close()   # queue
        manager.flush()       # mutate
        view = manager.view() # re-project
    """

    def __init__(self, layout: Layout, reseed_when_empty: bool = True) -> None:
        """Initialize the layout manager.

        Args:
            layout: The layout to manage
            reseed_when_empty: Create a fresh panel whenever the layout empties
        """
        self._layout = layout
        self._dispatcher = ActionDispatcher(layout)
        self.reseed_when_empty = reseed_when_empty
        self._generation = 0

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def dispatcher(self) -> ActionDispatcher:
        return self._dispatcher

    @property
    def representation(self) -> str:
        if isinstance(self._layout, PanelTree):
            return REPRESENTATION_TREE
        return REPRESENTATION_REGISTRY

    @property
    def generation(self) -> int:
        """Count of flushes that applied at least one action."""
        return self._generation

    def view(self) -> Optional[ViewNode]:
        """Project the current layout.

        Re-seeds an empty layout first when reseed_when_empty is set.
        """
        if self.reseed_when_empty and self._layout.is_empty():
            self.reseed()
        return project(self._layout, self._dispatcher)

    def flush(self) -> int:
        """Apply queued actions. Returns how many were applied."""
        applied = self._dispatcher.flush()
        if applied:
            self._generation += 1
            logger.debug(f"Flushed {applied} action(s), generation {self._generation}")
        return applied

    def reseed(self) -> bool:
        """Put a fresh panel into an empty layout."""
        seeded = self._layout.seed()
        if seeded:
            logger.info("Layout was empty, seeded a new panel")
        return seeded
