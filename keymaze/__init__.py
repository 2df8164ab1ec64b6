"""
KEYMAZE Source Package - Multi-Robot Key Collection
===================================================

Minimum total travel distance for a robot team collecting every key in a
grid maze with locked doors.

Submodules:
- core: Grid characters, bit-packing ceilings, sanity checks
- data: Grid loading from text
- simulation: Graph compression, state encoding, priority queue, search

Pipeline:
    grid -> GraphCompressor -> CompressedGraph -> MultiRobotKeySearch -> distance
"""

__version__ = "1.0.0"

__all__ = ['core', 'data', 'simulation']
