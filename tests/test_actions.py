"""Tests for PanelAction and ActionDispatcher."""

import pytest

from tiles.config.constants import ROOT_ID
from tiles.exceptions import LayoutError, ProjectionInProgressError, StaleAddressError
from tiles.layout import (
    LHS,
    RHS,
    ActionDispatcher,
    ActionRequest,
    Axis,
    NodePath,
    PanelAction,
    PanelRegistry,
    PanelTree,
    RegistryAddress,
    Split,
    TreeAddress,
)


class TestPanelAction:
    def test_axis_for_split_actions(self):
        assert PanelAction.SPLIT_HORIZONTAL.axis is Axis.HORIZONTAL
        assert PanelAction.SPLIT_VERTICAL.axis is Axis.VERTICAL
        assert PanelAction.CLOSE.axis is None

    def test_split_for_axis(self):
        assert PanelAction.split_for(Axis.HORIZONTAL) is PanelAction.SPLIT_HORIZONTAL
        assert PanelAction.split_for(Axis.VERTICAL) is PanelAction.SPLIT_VERTICAL


class TestDispatcherQueue:
    """Callbacks queue requests; nothing changes until flush."""

    def test_bound_callback_only_queues(self, registry, registry_dispatcher):
        callback = registry_dispatcher.bind(PanelAction.SPLIT_VERTICAL, RegistryAddress(ROOT_ID))
        callback()

        assert registry_dispatcher.pending == [
            ActionRequest(PanelAction.SPLIT_VERTICAL, RegistryAddress(ROOT_ID))
        ]
        assert len(registry) == 1

    def test_flush_applies_in_order(self, registry, registry_dispatcher):
        registry_dispatcher.bind(PanelAction.SPLIT_HORIZONTAL, RegistryAddress(ROOT_ID))()
        registry_dispatcher.bind(PanelAction.SPLIT_VERTICAL, RegistryAddress(2, ROOT_ID))()

        assert registry_dispatcher.flush() == 2
        assert registry.leaves() == [1, 3, 4]
        assert registry_dispatcher.pending == []

    def test_flush_counts_noops(self, registry, registry_dispatcher):
        """Stale registry addresses are applied as no-ops."""
        registry_dispatcher.bind(PanelAction.CLOSE, RegistryAddress(7, ROOT_ID))()
        assert registry_dispatcher.flush() == 1
        assert registry.ids() == [ROOT_ID]

    def test_flush_empty_queue(self, registry_dispatcher):
        assert registry_dispatcher.flush() == 0

    def test_clear_drops_requests(self, registry, registry_dispatcher):
        registry_dispatcher.bind(PanelAction.CLOSE, RegistryAddress(ROOT_ID))()
        registry_dispatcher.clear()
        assert registry_dispatcher.flush() == 0
        assert not registry.is_empty()

    def test_flush_during_projection_raises(self, registry_dispatcher):
        with registry_dispatcher.projecting():
            assert registry_dispatcher.is_projecting
            with pytest.raises(ProjectionInProgressError):
                registry_dispatcher.flush()
        assert not registry_dispatcher.is_projecting

    def test_replacing_layout_clears_queue(self, registry_dispatcher):
        registry_dispatcher.bind(PanelAction.CLOSE, RegistryAddress(ROOT_ID))()
        registry_dispatcher.layout = PanelRegistry.single()
        assert registry_dispatcher.pending == []


class TestRegistryApply:
    def test_close_request(self, registry):
        registry.split(ROOT_ID, Axis.HORIZONTAL)
        changed = registry.apply(ActionRequest(PanelAction.CLOSE, RegistryAddress(1, ROOT_ID)))
        assert changed is True
        assert registry.ids() == [ROOT_ID]

    def test_wrong_address_type_is_noop(self, registry):
        request = ActionRequest(PanelAction.SPLIT_HORIZONTAL, TreeAddress(NodePath(), None))
        assert registry.apply(request) is False
        assert len(registry) == 1


class TestTreeApply:
    def test_close_is_deferred_to_commit(self, pair_tree):
        """Close flags the leaf; the collapse pass runs once after the queue drains."""
        dispatcher = ActionDispatcher(pair_tree)
        b = pair_tree.root.rhs
        dispatcher.bind(PanelAction.CLOSE, TreeAddress(NodePath((RHS,)), b))()

        assert dispatcher.flush() == 1
        assert pair_tree.root is not None
        assert not isinstance(pair_tree.root, Split)

    def test_split_and_close_in_one_flush(self, pair_tree):
        dispatcher = ActionDispatcher(pair_tree)
        a, b = pair_tree.root.lhs, pair_tree.root.rhs
        dispatcher.bind(PanelAction.SPLIT_VERTICAL, TreeAddress(NodePath((LHS,)), a))()
        dispatcher.bind(PanelAction.CLOSE, TreeAddress(NodePath((RHS,)), b))()

        dispatcher.flush()

        assert isinstance(pair_tree.root, Split)
        assert pair_tree.root.axis is Axis.VERTICAL
        assert pair_tree.root.lhs is a

    def test_split_after_close_in_one_flush(self, pair_tree):
        """A split queued behind a close of the same leaf does not revive it."""
        dispatcher = ActionDispatcher(pair_tree)
        a, b = pair_tree.root.lhs, pair_tree.root.rhs
        address = TreeAddress(NodePath((RHS,)), b)
        dispatcher.bind(PanelAction.CLOSE, address)()
        dispatcher.bind(PanelAction.SPLIT_HORIZONTAL, address)()

        assert dispatcher.flush() == 2
        assert pair_tree.root is a

    def test_apply_reports_noops(self, pair_tree):
        b = pair_tree.root.rhs
        address = TreeAddress(NodePath((RHS,)), b)
        assert pair_tree.apply(ActionRequest(PanelAction.CLOSE, address)) is True
        assert pair_tree.apply(ActionRequest(PanelAction.CLOSE, address)) is False
        assert pair_tree.apply(ActionRequest(PanelAction.SPLIT_VERTICAL, address)) is False

    def test_stale_request_raises_and_drops_rest(self, pair_tree):
        dispatcher = ActionDispatcher(pair_tree)
        a, b = pair_tree.root.lhs, pair_tree.root.rhs
        dispatcher.bind(PanelAction.CLOSE, TreeAddress(NodePath((LHS,)), b))()
        dispatcher.bind(PanelAction.CLOSE, TreeAddress(NodePath((RHS,)), b))()

        with pytest.raises(StaleAddressError):
            dispatcher.flush()

        assert dispatcher.pending == []
        assert pair_tree.root.lhs is a
        assert pair_tree.root.rhs is b

    def test_wrong_address_type_raises(self, pair_tree):
        request = ActionRequest(PanelAction.CLOSE, RegistryAddress(ROOT_ID))
        with pytest.raises(LayoutError, match="Expected a tree address"):
            pair_tree.apply(request)

    def test_commit_collapses(self):
        tree = PanelTree.pair()
        tree.request_close(NodePath((LHS,)))
        assert tree.commit() is True
        assert tree.commit() is False
