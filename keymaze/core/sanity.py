"""
Grid Sanity Checks
==================

Pre-search structural checks for a loaded maze grid.

Catches malformed input before the compressor and the state-space search
run, so that an unusable grid surfaces as a list of readable errors
instead of an undefined search outcome:
- Empty grid
- Wrong number of robot starts
- Duplicate key letters
- Too many keys / points of interest for the bit-packed state
- Unknown characters
"""

import logging
from typing import Dict, List, Tuple

import numpy as np

from keymaze.core.definitions import (
    START, WALL, VALID_CHARS, KEY_CHARS, DOOR_CHARS,
    DEFAULT_ROBOT_COUNT, MAX_KEYS, MAX_VERTICES,
)

logger = logging.getLogger(__name__)


class GridSanityChecker:
    """
    Pre-validation checks for grid structural validity.

    Args:
        grid: 2D numpy array of single characters
        robot_count: Number of robots the search will place on the starts
    """

    def __init__(self, grid: np.ndarray, robot_count: int = DEFAULT_ROBOT_COUNT):
        self.grid = grid
        self.robot_count = robot_count

    def check_all(self) -> Tuple[bool, List[str]]:
        """
        Run all sanity checks.

        Returns:
            is_valid: Whether the grid passes all checks
            errors: List of error messages
        """
        errors = []

        if self.grid.ndim != 2 or self.grid.size == 0:
            errors.append("Grid is empty")
            return False, errors

        starts = int(np.sum(self.grid == START))
        if starts != self.robot_count:
            errors.append(
                f"Expected {self.robot_count} start positions (@), found {starts}"
            )

        unknown = sorted(set(np.unique(self.grid).tolist()) - VALID_CHARS)
        if unknown:
            errors.append(f"Unknown grid characters: {''.join(unknown)!r}")

        key_counts = self._count_letters(KEY_CHARS)
        duplicates = sorted(k for k, n in key_counts.items() if n > 1)
        if duplicates:
            errors.append(f"Duplicate keys: {', '.join(duplicates)}")

        if len(key_counts) > MAX_KEYS:
            errors.append(f"Too many keys: {len(key_counts)} > {MAX_KEYS}")

        total_vertices = starts + len(key_counts)
        if total_vertices > MAX_VERTICES:
            errors.append(
                f"Too many points of interest: {total_vertices} > {MAX_VERTICES}"
            )

        if errors:
            logger.warning("Grid failed %d sanity check(s)", len(errors))
        return len(errors) == 0, errors

    def count_elements(self) -> Dict[str, int]:
        """Count walls, starts, keys and doors in the grid."""
        return {
            'walls': int(np.sum(self.grid == WALL)),
            'starts': int(np.sum(self.grid == START)),
            'keys': sum(self._count_letters(KEY_CHARS).values()),
            'doors': sum(self._count_letters(DOOR_CHARS).values()),
        }

    def _count_letters(self, letters: str) -> Dict[str, int]:
        present = np.isin(self.grid, list(letters))
        values, counts = np.unique(self.grid[present], return_counts=True)
        return {str(v): int(n) for v, n in zip(values, counts)}
