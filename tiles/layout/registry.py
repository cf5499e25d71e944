"""
Flat panel registry for the tiling layout.

Panels live in a dictionary keyed by integer id. A split node refers to its
children by id, so the registry is an index arena: nothing points upward and
the parent of a panel is re-derived by lookup when a close needs it.

Splitting panel X keeps X's id on the new split and moves X's content to a
freshly allocated id, so the root id never changes no matter how often the
layout below it is split. Ids are never reused once retired.
"""

import logging
from dataclasses import dataclass
from typing import Dict, FrozenSet, Iterator, List, Optional, Tuple, Union

from ..config.constants import FIRST_ALLOCATED_ID, ROOT_ID
from .actions import ActionRequest, PanelAction
from .types import Axis

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SplitState:
    """A split record: two child ids and the axis they are laid out on."""

    lhs: int
    rhs: int
    axis: Axis


@dataclass(eq=False)
class HelloState:
    """Content of a Hello leaf.

    Compared by identity so tests can follow one piece of content as it
    is relocated between ids.
    """


PanelState = Union[SplitState, HelloState]


@dataclass(frozen=True)
class RegistryAddress:
    """Where a leaf sits in the registry.

    The parent id travels with the panel id because close rewrites the
    parent's slot. parent_id is None only for the root.
    """

    panel_id: int
    parent_id: Optional[int] = None


class IdAllocator:
    """Issues strictly increasing panel ids. Nothing is ever handed back."""

    def __init__(self, start: int = FIRST_ALLOCATED_ID) -> None:
        self._next = start
        self._issued = 0

    def allocate(self) -> int:
        panel_id = self._next
        self._next += 1
        self._issued += 1
        return panel_id

    def peek(self) -> int:
        """Return the id the next allocate() call will produce."""
        return self._next

    @property
    def issued(self) -> int:
        return self._issued


class PanelRegistry:
    """Panel layout stored as an id-keyed registry.

    Usage:
        registry = PanelRegistry.single()
        new_id = registry.split(ROOT_ID, Axis.HORIZONTAL)
        registry.close(ROOT_ID, new_id)
    """

    def __init__(self, allocator: Optional[IdAllocator] = None) -> None:
        self._panels: Dict[int, PanelState] = {}
        self._allocator = allocator or IdAllocator()

    @classmethod
    def single(cls) -> "PanelRegistry":
        """Create a registry holding one Hello panel at the root."""
        registry = cls()
        registry.seed()
        return registry

    @classmethod
    def pair(cls, axis: Axis = Axis.HORIZONTAL) -> "PanelRegistry":
        """Create a registry whose root is already split into two panels."""
        registry = cls.single()
        registry.split(ROOT_ID, axis)
        return registry

    # ------------------------------------------------------------------
    # Read contract
    # ------------------------------------------------------------------

    @property
    def root_id(self) -> Optional[int]:
        return ROOT_ID if ROOT_ID in self._panels else None

    @property
    def allocator(self) -> IdAllocator:
        return self._allocator

    @property
    def retired(self) -> FrozenSet[int]:
        """Ids that were addressable once and never will be again.

        Derived from the allocator's high-water mark: every allocated id
        that is not live. ROOT_ID is never allocated, so it is never retired.
        """
        high_water = self._allocator.peek()
        allocated = range(high_water - self._allocator.issued, high_water)
        return frozenset(panel_id for panel_id in allocated if panel_id not in self._panels)

    def is_empty(self) -> bool:
        return not self._panels

    def __len__(self) -> int:
        return len(self._panels)

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._panels

    def get(self, panel_id: int) -> Optional[PanelState]:
        return self._panels.get(panel_id)

    def ids(self) -> List[int]:
        return sorted(self._panels)

    def walk(self) -> Iterator[Tuple[Optional[int], int, PanelState]]:
        """Yield (parent_id, panel_id, state) in pre-order from the root."""
        if self.root_id is None:
            return
        stack: List[Tuple[Optional[int], int]] = [(None, ROOT_ID)]
        while stack:
            parent_id, panel_id = stack.pop()
            state = self._panels[panel_id]
            yield parent_id, panel_id, state
            if isinstance(state, SplitState):
                stack.append((panel_id, state.rhs))
                stack.append((panel_id, state.lhs))

    def leaves(self) -> List[int]:
        """Return leaf ids in left-to-right order."""
        return [
            panel_id
            for _, panel_id, state in self.walk()
            if isinstance(state, HelloState)
        ]

    def parent_of(self, panel_id: int) -> Optional[int]:
        """Find the split that holds panel_id, or None for the root/unknown ids."""
        for candidate_id, state in self._panels.items():
            if isinstance(state, SplitState) and panel_id in (state.lhs, state.rhs):
                return candidate_id
        return None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def seed(self) -> bool:
        """Place a fresh Hello panel at the root of an empty registry.

        The allocator keeps counting, so child ids from before the registry
        was emptied are never handed out again.

        Returns:
            True if a panel was created
        """
        if self._panels:
            return False
        self._panels[ROOT_ID] = HelloState()
        logger.debug(f"Seeded root panel {ROOT_ID}")
        return True

    def split(self, panel_id: int, axis: Axis) -> Optional[int]:
        """Split a Hello panel in two.

        The panel's content moves to a new left-hand id, a new Hello panel
        takes the right-hand id, and panel_id becomes the split.

        Returns:
            Id of the new right-hand panel, or None if panel_id is not a leaf
        """
        original_state = self._panels.get(panel_id)
        if not isinstance(original_state, HelloState):
            logger.debug(f"Ignoring split of {panel_id}: not a leaf ({original_state!r})")
            return None

        lhs = self._allocator.allocate()
        self._panels[lhs] = original_state

        rhs = self._allocator.allocate()
        self._panels[rhs] = HelloState()

        self._panels[panel_id] = SplitState(lhs=lhs, rhs=rhs, axis=axis)
        logger.debug(f"Split {panel_id} {axis.value} into {lhs}, {rhs}")
        return rhs

    def close(self, parent_id: Optional[int], panel_id: int) -> bool:
        """Close a Hello panel and promote its sibling into the parent's slot.

        With no parent the panel must be the root, and closing it empties
        the registry. Every check runs before anything is touched, so a
        stale or mismatched address leaves the registry unchanged.

        Returns:
            True if the registry changed
        """
        if not isinstance(self._panels.get(panel_id), HelloState):
            logger.debug(f"Ignoring close of {panel_id}: not a leaf")
            return False

        if parent_id is None:
            if panel_id != ROOT_ID:
                logger.debug(f"Ignoring close of {panel_id}: no parent given for non-root")
                return False
            self._panels.clear()
            logger.debug("Closed root panel, layout is now empty")
            return True

        parent = self._panels.get(parent_id)
        if not isinstance(parent, SplitState):
            logger.debug(f"Ignoring close of {panel_id}: parent {parent_id} is not a split")
            return False

        if parent.lhs == panel_id:
            sibling_id = parent.rhs
        elif parent.rhs == panel_id:
            sibling_id = parent.lhs
        else:
            logger.debug(f"Ignoring close of {panel_id}: not a child of {parent_id}")
            return False

        if sibling_id not in self._panels:
            logger.debug(f"Ignoring close of {panel_id}: sibling {sibling_id} missing")
            return False

        del self._panels[panel_id]
        remaining_state = self._panels.pop(sibling_id)
        self._panels[parent_id] = remaining_state
        logger.debug(f"Closed {panel_id}, promoted {sibling_id} into {parent_id}")
        return True

    def close_leaf(self, panel_id: int) -> bool:
        """Close a panel, looking up its parent first."""
        return self.close(self.parent_of(panel_id), panel_id)

    # ------------------------------------------------------------------
    # Dispatcher hooks
    # ------------------------------------------------------------------

    def apply(self, request: ActionRequest) -> bool:
        """Apply one queued action addressed by RegistryAddress."""
        address = request.address
        if not isinstance(address, RegistryAddress):
            logger.debug(f"Ignoring {request.action}: {address!r} is not a registry address")
            return False

        if request.action is PanelAction.CLOSE:
            return self.close(address.parent_id, address.panel_id)
        return self.split(address.panel_id, request.action.axis) is not None

    def commit(self) -> bool:
        """Registry mutations take effect immediately, nothing to settle."""
        return False


