"""Shared pytest fixtures for tiles tests."""

import pytest

from tiles.layout import ActionDispatcher, Axis, PanelRegistry, PanelTree


@pytest.fixture
def registry():
    """A registry holding a single root panel."""
    return PanelRegistry.single()


@pytest.fixture
def pair_tree():
    """The default owned tree: Split(horizontal, Leaf 0, Leaf 1)."""
    return PanelTree.pair(Axis.HORIZONTAL)


@pytest.fixture
def registry_dispatcher(registry):
    return ActionDispatcher(registry)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Redirect the UI config file into a temporary directory."""
    path = tmp_path / "ui_config.json"
    monkeypatch.setattr(
        "tiles.config.ui_config.get_ui_config_path",
        lambda: path,
    )
    return path
