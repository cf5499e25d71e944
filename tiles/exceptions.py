"""Custom exception hierarchy for tiles.

Exception Hierarchy:
    TilesError (base)
    ├── LayoutError - panel tree addressing and mutation
    │   ├── StaleAddressError
    │   └── ProjectionInProgressError
    └── ConfigurationError - preference values

The registry layout treats stale or mismatched addresses as silent no-ops,
so LayoutError is mostly raised by the owned tree, whose action handles are
bound to a node for a single projection pass.

Usage:
    from tiles.exceptions import StaleAddressError

    try:
        tree.split(path, Axis.HORIZONTAL, expected=leaf)
    except StaleAddressError as e:
        logger.error(f"Dropped split request: {e}")
"""

from typing import Any, Optional


class TilesError(Exception):
    """Base exception for all tiles errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, ids)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Layout Errors
# =============================================================================


class LayoutError(TilesError):
    """Base exception for panel tree operations."""

    pass


class StaleAddressError(LayoutError):
    """An address no longer resolves to the node it was bound to.

    Raised when an action handle is invoked after the pass that removed
    or moved its node, or when it resolves to the wrong node variant.
    """

    def __init__(self, message: str = "Address no longer resolves", **context: Any) -> None:
        super().__init__(message, **context)


class ProjectionInProgressError(LayoutError):
    """A mutation was applied while a projection was reading the tree."""

    def __init__(
        self, message: str = "Cannot mutate layout during projection", **context: Any
    ) -> None:
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(TilesError):
    """Invalid or missing configuration value."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
