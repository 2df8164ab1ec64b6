"""
Search State Encoding
=====================

Packs global search states into single integers for the best-distance map.

Layout:
- Robot code: slot i occupies bits [5*i, 5*i + 5), one vertex id (< 32) each
- State key:  (robot_code << 26) | key_set, key set in the low 26 bits

Robots are interchangeable: a RobotConfiguration is always stored sorted,
so configurations differing only by which robot stands where are the same
state. Equality and hashing are defined on the sorted tuple.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple

from keymaze.core.definitions import KEY_BITS, KEY_MASK_LIMIT, VERTEX_FIELD_BITS


# ==========================================
# BIT PACKING
# ==========================================

def encode_robots(positions: Sequence[int], field_bits: int = VERTEX_FIELD_BITS) -> int:
    """Pack vertex ids into fixed-width bit fields (slot 0 in the low bits)."""
    limit = 1 << field_bits
    code = 0
    for slot, vertex in enumerate(positions):
        if not 0 <= vertex < limit:
            raise ValueError(f"Vertex id {vertex} does not fit in {field_bits} bits")
        code |= vertex << (field_bits * slot)
    return code


def decode_robots(code: int, robot_count: int,
                  field_bits: int = VERTEX_FIELD_BITS) -> Tuple[int, ...]:
    """Exact inverse of encode_robots."""
    field_mask = (1 << field_bits) - 1
    return tuple((code >> (field_bits * slot)) & field_mask for slot in range(robot_count))


def make_state_key(robot_code: int, keys: int) -> int:
    if not 0 <= keys < KEY_MASK_LIMIT:
        raise ValueError(f"Key set {keys:#x} does not fit in {KEY_BITS} bits")
    return (robot_code << KEY_BITS) | keys


def split_state_key(state_key: int) -> Tuple[int, int]:
    """Returns (robot_code, keys)."""
    return state_key >> KEY_BITS, state_key & (KEY_MASK_LIMIT - 1)


# ==========================================
# CANONICAL STATE TYPES
# ==========================================

@dataclass(frozen=True)
class RobotConfiguration:
    """Positions of all robots as a sorted tuple of vertex ids."""
    positions: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, 'positions', tuple(sorted(self.positions)))

    @classmethod
    def from_code(cls, code: int, robot_count: int) -> 'RobotConfiguration':
        return cls(decode_robots(code, robot_count))

    @property
    def code(self) -> int:
        return encode_robots(self.positions)

    def move(self, slot: int, target: int) -> 'RobotConfiguration':
        """Robot in `slot` walks to `target`; result is re-canonicalized."""
        positions = list(self.positions)
        positions[slot] = target
        return RobotConfiguration(tuple(positions))


@dataclass(frozen=True)
class SearchState:
    """Robot configuration plus the set of keys collected so far."""
    robots: RobotConfiguration
    keys: int = 0

    @property
    def state_key(self) -> int:
        return make_state_key(self.robots.code, self.keys)

    @classmethod
    def from_state_key(cls, state_key: int, robot_count: int) -> 'SearchState':
        robot_code, keys = split_state_key(state_key)
        return cls(RobotConfiguration.from_code(robot_code, robot_count), keys)

    def has_all(self, mask: int) -> bool:
        return self.keys & mask == mask
