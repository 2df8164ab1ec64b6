"""
Tests for state packing and canonical robot configurations.

Run with: pytest tests/test_state_encoding.py -v
"""

import pytest
import sys
from pathlib import Path

# Ensure the package is in path
sys.path.insert(0, str(Path(__file__).parent.parent))

from keymaze.simulation.state_encoding import (
    RobotConfiguration,
    SearchState,
    encode_robots,
    decode_robots,
    make_state_key,
    split_state_key,
)


class TestBitPacking:

    def test_encode_uses_five_bit_fields(self):
        assert encode_robots((1, 2, 3, 4)) == 1 | (2 << 5) | (3 << 10) | (4 << 15)

    def test_decode_inverts_encode(self):
        code = encode_robots((0, 7, 19, 31))
        assert decode_robots(code, 4) == (0, 7, 19, 31)

    def test_variable_robot_count(self):
        code = encode_robots((5, 6))
        assert code < (1 << 10)
        assert decode_robots(code, 2) == (5, 6)
        assert decode_robots(encode_robots((1, 2, 3, 4, 5, 6)), 6) == (1, 2, 3, 4, 5, 6)

    def test_vertex_ceiling(self):
        with pytest.raises(ValueError):
            encode_robots((0, 1, 2, 32))
        with pytest.raises(ValueError):
            encode_robots((-1, 0, 0, 0))

    def test_state_key_layout(self):
        key = make_state_key(0b101, 0b11)
        assert key == (0b101 << 26) | 0b11
        assert split_state_key(key) == (0b101, 0b11)

    def test_key_set_ceiling(self):
        make_state_key(0, (1 << 26) - 1)
        with pytest.raises(ValueError):
            make_state_key(0, 1 << 26)


class TestRobotConfiguration:

    def test_positions_are_sorted(self):
        assert RobotConfiguration((3, 1, 0, 2)).positions == (0, 1, 2, 3)

    def test_permutations_are_one_state(self):
        a = RobotConfiguration((9, 4, 4, 1))
        b = RobotConfiguration((4, 1, 9, 4))
        assert a == b
        assert hash(a) == hash(b)
        assert a.code == b.code

    def test_move_recanonicalizes(self):
        config = RobotConfiguration((0, 1, 2, 3))
        moved = config.move(0, 10)
        assert moved.positions == (1, 2, 3, 10)
        assert config.positions == (0, 1, 2, 3)

    def test_from_code(self):
        config = RobotConfiguration((2, 8, 5, 1))
        assert RobotConfiguration.from_code(config.code, 4) == config

    def test_variable_team_size(self):
        config = RobotConfiguration((3, 2))
        assert config.positions == (2, 3)
        assert RobotConfiguration.from_code(config.code, 2) == config


class TestSearchState:

    def test_state_key_roundtrip(self):
        state = SearchState(RobotConfiguration((4, 0, 2, 1)), keys=0b1010)
        restored = SearchState.from_state_key(state.state_key, 4)
        assert restored == state

    def test_symmetric_states_share_identity(self):
        a = SearchState(RobotConfiguration((0, 5, 1, 2)), keys=1)
        b = SearchState(RobotConfiguration((5, 2, 1, 0)), keys=1)
        assert a.state_key == b.state_key

    def test_different_keys_differ(self):
        robots = RobotConfiguration((0, 1, 2, 3))
        assert SearchState(robots, 1).state_key != SearchState(robots, 2).state_key

    def test_has_all(self):
        state = SearchState(RobotConfiguration((0,)), keys=0b111)
        assert state.has_all(0b101)
        assert not state.has_all(0b1000)

    def test_frozen(self):
        state = SearchState(RobotConfiguration((0,)))
        with pytest.raises(AttributeError):
            state.keys = 3
