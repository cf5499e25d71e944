"""
Action dispatch for leaf panels.

Each leaf offers three actions: split horizontally, split vertically and
close. The projector binds every action to the leaf's address and hands the
renderer a zero-argument callback. Invoking a callback only queues a
request; the queue is flushed against the layout between two projection
passes, never while a projection is reading the tree.
"""

import logging
from collections import deque
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Deque, Iterator, List, Optional, Protocol

from ..exceptions import LayoutError, ProjectionInProgressError
from .types import Axis

logger = logging.getLogger(__name__)


class PanelAction(Enum):
    """User actions available on a leaf panel."""

    SPLIT_HORIZONTAL = "split-horizontal"
    SPLIT_VERTICAL = "split-vertical"
    CLOSE = "close"

    @property
    def axis(self) -> Optional[Axis]:
        """Axis for split actions, None for close."""
        if self is PanelAction.SPLIT_HORIZONTAL:
            return Axis.HORIZONTAL
        if self is PanelAction.SPLIT_VERTICAL:
            return Axis.VERTICAL
        return None

    @classmethod
    def split_for(cls, axis: Axis) -> "PanelAction":
        if axis is Axis.HORIZONTAL:
            return cls.SPLIT_HORIZONTAL
        return cls.SPLIT_VERTICAL


@dataclass(frozen=True)
class ActionRequest:
    """A queued action and the address of the leaf it targets.

    The address type belongs to the layout: RegistryAddress for the
    registry, TreeAddress for the owned tree.
    """

    action: PanelAction
    address: Any


class ActionTarget(Protocol):
    """What the dispatcher needs from a layout."""

    def apply(self, request: ActionRequest) -> bool:
        """Apply one request. Returns True if the layout changed."""
        ...

    def commit(self) -> bool:
        """Settle deferred changes once per flush. Returns True if anything changed."""
        ...


class ActionDispatcher:
    """Queues leaf actions and applies them to a layout.

    Usage:
        dispatcher = ActionDispatcher(layout)
        on_close = dispatcher.bind(PanelAction.CLOSE, address)
        on_close()          # queued
        dispatcher.flush()  # applied
    """

    def __init__(self, layout: ActionTarget) -> None:
        self._layout = layout
        self._pending: Deque[ActionRequest] = deque()
        self._projecting = False

    @property
    def layout(self) -> ActionTarget:
        return self._layout

    @layout.setter
    def layout(self, layout: ActionTarget) -> None:
        self._layout = layout
        self._pending.clear()

    @property
    def pending(self) -> List[ActionRequest]:
        return list(self._pending)

    @property
    def is_projecting(self) -> bool:
        return self._projecting

    def bind(self, action: PanelAction, address: Any) -> Callable[[], None]:
        """Create the callback a renderer attaches to a leaf's button."""

        def callback() -> None:
            self.submit(ActionRequest(action, address))

        return callback

    def submit(self, request: ActionRequest) -> None:
        self._pending.append(request)
        logger.debug(f"Queued {request.action.value} for {request.address!r}")

    def flush(self) -> int:
        """Apply every queued request in order, then let the layout settle.

        Returns:
            Number of requests applied

        Raises:
            ProjectionInProgressError: If called while a projection is running
        """
        if self._projecting:
            raise ProjectionInProgressError(pending=len(self._pending))

        applied = 0
        try:
            while self._pending:
                request = self._pending.popleft()
                changed = self._layout.apply(request)
                applied += 1
                logger.debug(
                    f"Applied {request.action.value} to {request.address!r} (changed={changed})"
                )
        except LayoutError:
            dropped = len(self._pending)
            self._pending.clear()
            if dropped:
                logger.warning(f"Dropped {dropped} queued request(s) after a failed action")
            raise
        finally:
            self._layout.commit()
        return applied

    def clear(self) -> None:
        """Drop queued requests without applying them."""
        self._pending.clear()

    @contextmanager
    def projecting(self) -> Iterator[None]:
        """Mark the span during which the tree is being read for a view."""
        self._projecting = True
        try:
            yield
        finally:
            self._projecting = False
