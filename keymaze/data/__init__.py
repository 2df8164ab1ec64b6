"""
KEYMAZE Data Module
===================
Grid loading from text files, streams and strings.
"""

from .grid_loader import parse_grid, read_grid, load_grid, grid_from_string

__all__ = ['parse_grid', 'read_grid', 'load_grid', 'grid_from_string']
