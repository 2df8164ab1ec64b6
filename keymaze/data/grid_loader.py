"""
Maze Grid Loader
================

Turns raw text lines into the rectangular character grid consumed by the
graph compressor.

Input format:
- One grid row per line
- Reading stops at the first blank line or at end of input
- '@' robot start, '#' wall, '.' floor, 'a'-'z' key, 'A'-'Z' door

The grid is returned as a 2D numpy array of single characters
(dtype '<U1') indexed (row, col).
"""

import sys
import logging
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

import numpy as np

logger = logging.getLogger(__name__)


def parse_grid(lines: Iterable[str]) -> np.ndarray:
    """
    Build a character grid from text lines.

    Args:
        lines: Iterable of text lines (trailing newlines are stripped)

    Returns:
        2D numpy array of single characters. Empty input gives a (0, 0) array.

    Raises:
        ValueError: If rows have inconsistent widths
    """
    rows: List[str] = []
    for line in lines:
        line = line.rstrip('\r\n')
        if not line:
            break
        rows.append(line)

    if not rows:
        logger.warning("Grid input is empty")
        return np.empty((0, 0), dtype='<U1')

    width = len(rows[0])
    for r, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Row {r} has width {len(row)}, expected {width} (grid must be rectangular)"
            )

    grid = np.array([list(row) for row in rows], dtype='<U1')
    logger.debug(f"Parsed grid of shape {grid.shape}")
    return grid


def read_grid(stream: Optional[TextIO] = None) -> np.ndarray:
    """Read a grid from a text stream (stdin by default)."""
    if stream is None:
        stream = sys.stdin
    return parse_grid(stream)


def load_grid(path: Union[str, Path]) -> np.ndarray:
    """
    Load a grid from a text file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    with path.open('r', encoding='utf-8') as f:
        grid = parse_grid(f)
    logger.info(f"Loaded grid {grid.shape} from {path}")
    return grid


def grid_from_string(text: str) -> np.ndarray:
    """Convenience wrapper: parse a multi-line string (leading newline ignored)."""
    return parse_grid(text.lstrip('\n').splitlines())
