"""
Owned recursive panel tree.

Every Split owns its two children directly; there is no id table. A node is
located by a NodePath, the sequence of lhs/rhs steps from the root, which
offers a read/write pair for updating one nested slot.

Closing is two-phase. A close action only flags its leaf; collapse() then
folds the whole tree bottom-up, dropping flagged leaves and promoting the
surviving child of any split that lost one. A single pass handles closes
that ripple through several ancestors.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from ..exceptions import LayoutError, StaleAddressError
from .actions import ActionRequest, PanelAction
from .types import Axis

logger = logging.getLogger(__name__)

LHS = "lhs"
RHS = "rhs"


@dataclass(eq=False)
class Leaf:
    """A Hello panel.

    Attributes:
        panel_id: Display number shown in the panel title
        close_requested: Set by a close action, consumed by collapse()
    """

    panel_id: int
    close_requested: bool = False


@dataclass(eq=False)
class Split:
    """A panel divided in two along an axis. Owns both children."""

    axis: Axis
    lhs: "Node"
    rhs: "Node"


Node = Union[Leaf, Split]


@dataclass(frozen=True)
class NodePath:
    """Route from the root to a node as a tuple of "lhs"/"rhs" steps."""

    steps: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for step in self.steps:
            if step not in (LHS, RHS):
                raise ValueError(f"Invalid path step: {step!r}")

    def __str__(self) -> str:
        return "/".join(self.steps) or "<root>"

    @property
    def depth(self) -> int:
        return len(self.steps)

    @property
    def parent(self) -> Optional["NodePath"]:
        if not self.steps:
            return None
        return NodePath(self.steps[:-1])

    def child(self, side: str) -> "NodePath":
        return NodePath(self.steps + (side,))

    def read(self, root: Optional[Node]) -> Optional[Node]:
        """Follow the path from root. Returns None if it runs off the tree."""
        node = root
        for step in self.steps:
            if not isinstance(node, Split):
                return None
            node = getattr(node, step)
        return node

    def write(self, root: Optional[Node], node: Node) -> Node:
        """Put node at this path and return the (possibly new) root.

        Raises:
            StaleAddressError: If the path's parent is not a split
        """
        parent_path = self.parent
        if parent_path is None:
            return node

        parent = parent_path.read(root)
        if not isinstance(parent, Split) or root is None:
            raise StaleAddressError("Path has no split to write into", path=str(self))
        setattr(parent, self.steps[-1], node)
        return root


@dataclass(frozen=True)
class TreeAddress:
    """A leaf bound at projection time together with where it was found.

    Holding the leaf itself lets the tree detect a handle that outlived
    its node.
    """

    path: NodePath
    leaf: Leaf


def prune(node: Optional[Node]) -> Optional[Node]:
    """Drop flagged leaves and collapse the splits they leave behind.

    Returns the surviving subtree, or None if nothing under node survives.
    """
    if node is None:
        return None
    if isinstance(node, Leaf):
        return None if node.close_requested else node

    lhs = prune(node.lhs)
    rhs = prune(node.rhs)
    if lhs is not None and rhs is not None:
        node.lhs = lhs
        node.rhs = rhs
        return node
    # Zero or one survivor: promote it (or propagate absence upward)
    return lhs if lhs is not None else rhs


class PanelTree:
    """Panel layout stored as an owned recursive tree.

    Usage:
        tree = PanelTree.pair()
        new_leaf = tree.split(NodePath((LHS,)), Axis.VERTICAL)
        tree.close(tree.path_of(new_leaf))
    """

    def __init__(self, root: Optional[Node] = None) -> None:
        self._root = root
        self._next_panel_id = 1 + max(
            (leaf.panel_id for _, leaf in self.leaves()), default=-1
        )

    @classmethod
    def single(cls) -> "PanelTree":
        """Create a tree holding one Hello panel."""
        return cls(Leaf(0))

    @classmethod
    def pair(cls, axis: Axis = Axis.HORIZONTAL) -> "PanelTree":
        """Create the default two-panel layout."""
        return cls(Split(axis, Leaf(0), Leaf(1)))

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    def walk(self) -> Iterator[Tuple[NodePath, Node]]:
        """Yield (path, node) in pre-order."""
        if self._root is None:
            return
        stack: List[Tuple[NodePath, Node]] = [(NodePath(), self._root)]
        while stack:
            path, node = stack.pop()
            yield path, node
            if isinstance(node, Split):
                stack.append((path.child(RHS), node.rhs))
                stack.append((path.child(LHS), node.lhs))

    def leaves(self) -> Iterator[Tuple[NodePath, Leaf]]:
        """Yield (path, leaf) left to right."""
        for path, node in self.walk():
            if isinstance(node, Leaf):
                yield path, node

    def path_of(self, leaf: Leaf) -> Optional[NodePath]:
        for path, candidate in self.leaves():
            if candidate is leaf:
                return path
        return None

    def new_leaf(self) -> Leaf:
        leaf = Leaf(self._next_panel_id)
        self._next_panel_id += 1
        return leaf

    def resolve(self, path: NodePath, expected: Optional[Leaf] = None) -> Leaf:
        """Return the leaf at path.

        Raises:
            StaleAddressError: If path does not lead to a leaf, or leads to
                a different leaf than expected
        """
        node = path.read(self._root)
        if not isinstance(node, Leaf):
            raise StaleAddressError("Path does not lead to a leaf", path=str(path))
        if expected is not None and node is not expected:
            raise StaleAddressError(
                "Leaf has moved or been closed",
                path=str(path),
                panel_id=expected.panel_id,
            )
        return node

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def seed(self) -> bool:
        """Place a fresh leaf at the root of an empty tree."""
        if self._root is not None:
            return False
        self._root = self.new_leaf()
        logger.debug(f"Seeded root panel {self._root.panel_id}")
        return True

    def split(
        self, path: NodePath, axis: Axis, expected: Optional[Leaf] = None
    ) -> Optional[Leaf]:
        """Replace the leaf at path with a split holding it and a new leaf.

        A leaf already flagged for close is left alone, as the registry
        ignores a split of a panel it has already closed.

        Returns:
            The newly created right-hand leaf, or None if the leaf is
            flagged for close
        """
        leaf = self.resolve(path, expected)
        if leaf.close_requested:
            logger.debug(f"Ignoring split of panel {leaf.panel_id} at {path}: close pending")
            return None
        new_leaf = self.new_leaf()
        self._root = path.write(self._root, Split(axis, leaf, new_leaf))
        logger.debug(
            f"Split panel {leaf.panel_id} at {path} {axis.value}, new panel {new_leaf.panel_id}"
        )
        return new_leaf

    def request_close(self, path: NodePath, expected: Optional[Leaf] = None) -> Leaf:
        """Flag the leaf at path for removal by the next collapse()."""
        leaf = self.resolve(path, expected)
        leaf.close_requested = True
        logger.debug(f"Panel {leaf.panel_id} at {path} flagged for close")
        return leaf

    def collapse(self) -> bool:
        """Run the collapse pass over the whole tree.

        Returns:
            True if any leaf was removed
        """
        flagged = [leaf.panel_id for _, leaf in self.leaves() if leaf.close_requested]
        if not flagged:
            return False
        self._root = prune(self._root)
        logger.debug(f"Collapsed panels {flagged}, tree now has {len(self)} node(s)")
        return True

    def close(self, path: NodePath, expected: Optional[Leaf] = None) -> bool:
        """Flag the leaf at path and collapse immediately."""
        self.request_close(path, expected)
        return self.collapse()

    # ------------------------------------------------------------------
    # Dispatcher hooks
    # ------------------------------------------------------------------

    def apply(self, request: ActionRequest) -> bool:
        """Apply one queued action addressed by TreeAddress."""
        address = request.address
        if not isinstance(address, TreeAddress):
            raise LayoutError("Expected a tree address", address=address)

        if request.action is PanelAction.CLOSE:
            already_flagged = self.resolve(address.path, address.leaf).close_requested
            self.request_close(address.path, address.leaf)
            return not already_flagged
        return self.split(address.path, request.action.axis, address.leaf) is not None

    def commit(self) -> bool:
        return self.collapse()
