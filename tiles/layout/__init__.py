"""
Binary tiling layout core for tiles.

Provides two interchangeable layout representations:
- PanelRegistry: panels in an id-keyed registry, root id stable across splits
- PanelTree: an owned recursive tree addressed by NodePath

Both support split and close, are driven through an ActionDispatcher, and
are read through project(), which builds an immutable view tree.

Example usage:
    from tiles.layout import LayoutManager, create_layout

    manager = LayoutManager(create_layout("registry"))
    view = manager.view()
    view.on_split_vertical()
    manager.flush()
"""

from .actions import ActionDispatcher, ActionRequest, PanelAction
from .manager import LayoutManager, create_layout
from .projection import (
    LeafView,
    SplitView,
    ViewNode,
    leaf_titles,
    leaf_views,
    project,
    view_shape,
)
from .registry import (
    HelloState,
    IdAllocator,
    PanelRegistry,
    RegistryAddress,
    SplitState,
)
from .tree import LHS, RHS, Leaf, NodePath, PanelTree, Split, TreeAddress, prune
from .types import Axis

__all__ = [
    # Types
    "Axis",
    # Registry representation
    "HelloState",
    "IdAllocator",
    "PanelRegistry",
    "RegistryAddress",
    "SplitState",
    # Tree representation
    "LHS",
    "RHS",
    "Leaf",
    "NodePath",
    "PanelTree",
    "Split",
    "TreeAddress",
    "prune",
    # Dispatch
    "ActionDispatcher",
    "ActionRequest",
    "PanelAction",
    # Projection
    "LeafView",
    "SplitView",
    "ViewNode",
    "leaf_titles",
    "leaf_views",
    "project",
    "view_shape",
    # Manager
    "LayoutManager",
    "create_layout",
]
