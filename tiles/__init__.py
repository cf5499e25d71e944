"""
tiles - a binary tiling panel layout for the terminal
"""

__version__ = "0.1.0"
