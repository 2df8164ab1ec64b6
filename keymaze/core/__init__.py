"""
KEYMAZE Core Module
===================

Shared definitions and pre-search checks.

- definitions: Grid characters, bit-packing ceilings, movement deltas
- sanity: Structural grid checks run before the search

Usage:
    from keymaze.core import WALL, FLOOR, START, key_bit
    from keymaze.core.sanity import GridSanityChecker
"""

from keymaze.core.definitions import (
    Cell,
    FLOOR,
    WALL,
    START,
    KEY_CHARS,
    DOOR_CHARS,
    VALID_CHARS,
    DEFAULT_ROBOT_COUNT,
    KEY_BITS,
    KEY_MASK_LIMIT,
    VERTEX_FIELD_BITS,
    MAX_VERTICES,
    MAX_KEYS,
    DIRECTIONS,
    NO_SOLUTION_TEXT,
    BIT_TO_KEY,
    is_key,
    is_door,
    key_bit,
    mask_to_letters,
)
from keymaze.core.sanity import GridSanityChecker

__all__ = [
    # Definitions
    'Cell',
    'FLOOR',
    'WALL',
    'START',
    'KEY_CHARS',
    'DOOR_CHARS',
    'VALID_CHARS',
    'DEFAULT_ROBOT_COUNT',
    'KEY_BITS',
    'KEY_MASK_LIMIT',
    'VERTEX_FIELD_BITS',
    'MAX_VERTICES',
    'MAX_KEYS',
    'DIRECTIONS',
    'NO_SOLUTION_TEXT',
    'BIT_TO_KEY',
    'is_key',
    'is_door',
    'key_bit',
    'mask_to_letters',
    # Checks
    'GridSanityChecker',
]
