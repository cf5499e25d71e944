"""Tests for TUI logging setup."""

import logging

import pytest

from tiles.utils.logging_utils import get_log_path, setup_tui_logging


@pytest.fixture(autouse=True)
def restore_tiles_logger_level():
    """setup_tui_logging changes the package logger; put it back afterwards."""
    logger = logging.getLogger("tiles")
    level = logger.level
    yield
    logger.setLevel(level)


def test_log_path_created_in_directory(tmp_path):
    log_dir = tmp_path / "logs"
    path = get_log_path(log_dir)
    assert path == log_dir / "tiles.log"
    assert log_dir.is_dir()


def test_levels(tmp_path):
    logger = setup_tui_logging(log_dir=tmp_path)
    assert logger.name == "tiles"
    assert logger.level == logging.INFO

    setup_tui_logging(verbose=True, log_dir=tmp_path)
    assert logger.level == logging.DEBUG


def test_layout_changes_logged_at_debug(tmp_path, caplog):
    from tiles.layout import Axis, PanelRegistry

    setup_tui_logging(verbose=True, log_dir=tmp_path)
    registry = PanelRegistry.single()
    with caplog.at_level(logging.DEBUG, logger="tiles"):
        registry.split(0, Axis.HORIZONTAL)
    assert any(record.name == "tiles.layout.registry" for record in caplog.records)
