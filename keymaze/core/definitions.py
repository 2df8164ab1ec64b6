"""
KEYMAZE DEFINITIONS
===================
Central constants and type definitions for the entire project.

This file is the SINGLE SOURCE OF TRUTH for:
- Grid characters (walls, floor, starts, keys, doors)
- Bit-packing ceilings (key bits, vertex field width)
- Movement deltas

Import from here instead of duplicating constants across modules.

"""

from typing import Dict, Set, Tuple
from enum import Enum

# ==========================================
# GRID CHARACTERS (CRITICAL CONSTANTS)
# ==========================================
# The loader produces these characters; the compressor reads them


class Cell(str, Enum):
    """Fixed grid characters. Keys and doors are letter ranges, see below."""
    FLOOR = '.'
    WALL = '#'
    START = '@'


FLOOR: str = Cell.FLOOR.value
WALL: str = Cell.WALL.value
START: str = Cell.START.value

KEY_CHARS: str = 'abcdefghijklmnopqrstuvwxyz'
DOOR_CHARS: str = KEY_CHARS.upper()

# Every character the compressor understands
VALID_CHARS: Set[str] = {FLOOR, WALL, START} | set(KEY_CHARS) | set(DOOR_CHARS)

# ==========================================
# BIT-PACKING CEILINGS
# ==========================================

DEFAULT_ROBOT_COUNT: int = 4

KEY_BITS: int = 26                 # One bit per lowercase letter
KEY_MASK_LIMIT: int = 1 << KEY_BITS

VERTEX_FIELD_BITS: int = 5         # Bits per robot slot in a robot code
MAX_VERTICES: int = 1 << VERTEX_FIELD_BITS   # 32 points of interest
MAX_KEYS: int = KEY_BITS

# ==========================================
# MOVEMENT
# ==========================================

# Up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Text emitted when the search exhausts the state space
NO_SOLUTION_TEXT: str = "No solution found"


# ==========================================
# CHARACTER HELPERS
# ==========================================

def is_key(cell: str) -> bool:
    return 'a' <= cell <= 'z'


def is_door(cell: str) -> bool:
    return 'A' <= cell <= 'Z'


def key_bit(cell: str) -> int:
    """Bit for a key letter, or for the key that opens a door letter."""
    return 1 << (ord(cell.lower()) - ord('a'))


def mask_to_letters(mask: int) -> str:
    """Render a key/door mask as the sorted lowercase letters it contains."""
    return ''.join(ch for i, ch in enumerate(KEY_CHARS) if mask & (1 << i))


# Reverse lookup for debugging
BIT_TO_KEY: Dict[int, str] = {1 << i: ch for i, ch in enumerate(KEY_CHARS)}
