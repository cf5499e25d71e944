"""
Projection of a layout into an immutable view tree.

The projector walks the current layout and builds SplitView/LeafView nodes
for the renderer. It never mutates the layout: the only thing it creates
besides views are the leaf callbacks, which merely queue actions on the
dispatcher. The view is rebuilt from scratch on every pass.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Union

from ..config.constants import PANEL_TITLE_TEMPLATE, ROOT_ID
from .actions import ActionDispatcher, PanelAction
from .registry import HelloState, PanelRegistry, RegistryAddress, SplitState
from .tree import LHS, RHS, Leaf, NodePath, PanelTree, Split, TreeAddress
from .types import Axis

Layout = Union[PanelRegistry, PanelTree]


def _noop() -> None:
    pass


@dataclass(frozen=True)
class LeafView:
    """A Hello panel as the renderer sees it."""

    panel_id: int
    title: str
    depth: int = 0
    on_split_horizontal: Callable[[], None] = field(default=_noop, compare=False)
    on_split_vertical: Callable[[], None] = field(default=_noop, compare=False)
    on_close: Callable[[], None] = field(default=_noop, compare=False)

    def callback_for(self, action: PanelAction) -> Callable[[], None]:
        if action is PanelAction.SPLIT_HORIZONTAL:
            return self.on_split_horizontal
        if action is PanelAction.SPLIT_VERTICAL:
            return self.on_split_vertical
        return self.on_close


@dataclass(frozen=True)
class SplitView:
    """A split region and its two child views.

    panel_id is the registry id of the split, or None for the owned tree.
    """

    axis: Axis
    lhs: "ViewNode"
    rhs: "ViewNode"
    panel_id: Optional[int] = None
    depth: int = 0


ViewNode = Union[LeafView, SplitView]


def panel_title(panel_id: int) -> str:
    return PANEL_TITLE_TEMPLATE.format(panel_id=panel_id)


def project(layout: Layout, dispatcher: ActionDispatcher) -> Optional[ViewNode]:
    """Build the view tree for layout, binding leaf actions to dispatcher.

    Returns:
        Root view, or None when the layout is empty
    """
    with dispatcher.projecting():
        if isinstance(layout, PanelRegistry):
            if layout.root_id is None:
                return None
            return _project_registry(layout, dispatcher, None, ROOT_ID, 0)
        elif isinstance(layout, PanelTree):
            if layout.root is None:
                return None
            return _project_tree(layout.root, dispatcher, NodePath())
        else:
            raise ValueError(f"Unknown layout type: {type(layout)}")


def _leaf_view(
    panel_id: int, depth: int, dispatcher: ActionDispatcher, address: Any
) -> LeafView:
    return LeafView(
        panel_id=panel_id,
        title=panel_title(panel_id),
        depth=depth,
        on_split_horizontal=dispatcher.bind(PanelAction.SPLIT_HORIZONTAL, address),
        on_split_vertical=dispatcher.bind(PanelAction.SPLIT_VERTICAL, address),
        on_close=dispatcher.bind(PanelAction.CLOSE, address),
    )


def _project_registry(
    registry: PanelRegistry,
    dispatcher: ActionDispatcher,
    parent_id: Optional[int],
    panel_id: int,
    depth: int,
) -> ViewNode:
    state = registry.get(panel_id)
    if isinstance(state, SplitState):
        return SplitView(
            axis=state.axis,
            lhs=_project_registry(registry, dispatcher, panel_id, state.lhs, depth + 1),
            rhs=_project_registry(registry, dispatcher, panel_id, state.rhs, depth + 1),
            panel_id=panel_id,
            depth=depth,
        )
    elif isinstance(state, HelloState):
        return _leaf_view(
            panel_id, depth, dispatcher, RegistryAddress(panel_id, parent_id)
        )
    else:
        raise ValueError(f"Dangling panel id {panel_id} under {parent_id}")


def _project_tree(
    node: Union[Leaf, Split], dispatcher: ActionDispatcher, path: NodePath
) -> ViewNode:
    if isinstance(node, Split):
        return SplitView(
            axis=node.axis,
            lhs=_project_tree(node.lhs, dispatcher, path.child(LHS)),
            rhs=_project_tree(node.rhs, dispatcher, path.child(RHS)),
            depth=path.depth,
        )
    elif isinstance(node, Leaf):
        return _leaf_view(
            node.panel_id, path.depth, dispatcher, TreeAddress(path, node)
        )
    else:
        raise ValueError(f"Unknown node type: {type(node)}")


def leaf_views(view: Optional[ViewNode]) -> List[LeafView]:
    """Collect leaf views left to right."""
    if view is None:
        return []
    if isinstance(view, LeafView):
        return [view]
    return leaf_views(view.lhs) + leaf_views(view.rhs)


def leaf_titles(view: Optional[ViewNode]) -> List[str]:
    return [leaf.title for leaf in leaf_views(view)]


def view_shape(view: Optional[ViewNode]) -> Any:
    """Reduce a view to nested tuples of axes and leaf titles.

    Two layouts with the same shape render identically apart from ids of
    split nodes.
    """
    if view is None:
        return None
    if isinstance(view, LeafView):
        return view.title
    return (view.axis.short, view_shape(view.lhs), view_shape(view.rhs))
