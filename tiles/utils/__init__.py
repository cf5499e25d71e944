"""Utility modules for tiles.

- logging_utils: rotating file logging for the TUI
"""
