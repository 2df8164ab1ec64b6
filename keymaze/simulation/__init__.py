"""
KEYMAZE Simulation Module
=========================
Graph compression and state-space search for multi-robot key collection.

This module contains:
- graph_compressor: Grid -> graph of starts and keys (BFS per vertex)
- state_encoding: Canonical robot configurations and packed state keys
- priority_queue: Binary min-heap used by the search
- multi_robot_search: Dijkstra over (robot configuration, key set) states
"""

from .graph_compressor import Edge, CompressedGraph, GraphCompressor, build_compressed_graph
from .state_encoding import (
    RobotConfiguration,
    SearchState,
    encode_robots,
    decode_robots,
    make_state_key,
    split_state_key,
)
from .priority_queue import MinHeap
from .multi_robot_search import (
    SolverOptions,
    SearchDiagnostics,
    SearchResult,
    MultiRobotKeySearch,
    solve_grid,
    minimum_total_distance,
)

__all__ = [
    # Compression
    'Edge',
    'CompressedGraph',
    'GraphCompressor',
    'build_compressed_graph',
    # Encoding
    'RobotConfiguration',
    'SearchState',
    'encode_robots',
    'decode_robots',
    'make_state_key',
    'split_state_key',
    # Search
    'MinHeap',
    'SolverOptions',
    'SearchDiagnostics',
    'SearchResult',
    'MultiRobotKeySearch',
    'solve_grid',
    'minimum_total_distance',
]
