"""
Graph Compressor
================

Reduces a maze grid to a small logical graph of points of interest.

Vertices:
- ids [0, start_count): robot starts in row-major scan order
- ids [start_count, total_vertices): keys in row-major order of appearance

Edges:
- One directed edge per (vertex, reachable key), found by a breadth-first
  search from the vertex. Walls block the BFS; doors do not. Every door
  crossed on the way is OR-ed into the edge's required mask, so the search
  layer can decide later whether the edge is usable.
- First-reached wins: BFS order guarantees the recorded distance is the
  shortest one.

A key with no path from a vertex simply has no edge from it.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
import networkx as nx

from keymaze.core.definitions import (
    FLOOR, WALL, START, DIRECTIONS, MAX_VERTICES, MAX_KEYS,
    is_key, is_door, key_bit, mask_to_letters,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """Fastest known connection from a vertex to a key vertex."""
    target: int
    distance: int
    required_mask: int  # Doors that must be unlocked (bit i = key i)
    key_bit: int        # Key obtained by traversing this edge


@dataclass
class CompressedGraph:
    """Points of interest with precomputed distances and door prerequisites."""
    vertices: List[Tuple[int, int]]
    edges: List[List[Edge]]
    start_count: int
    all_keys_mask: int
    key_to_vertex: Dict[str, int] = field(default_factory=dict)

    @property
    def total_vertices(self) -> int:
        return len(self.vertices)

    @property
    def key_count(self) -> int:
        return len(self.key_to_vertex)

    def vertex_label(self, vertex: int) -> str:
        if vertex < self.start_count:
            return f"@{vertex}"
        for letter, v in self.key_to_vertex.items():
            if v == vertex:
                return letter
        raise ValueError(f"Unknown vertex id: {vertex}")

    def to_networkx(self) -> nx.DiGraph:
        """
        Export the compressed graph as a NetworkX DiGraph.

        Node attributes: position, kind ('start' or 'key'), label.
        Edge attributes: distance, required_mask, key_bit, doors.
        """
        G = nx.DiGraph()
        for v, pos in enumerate(self.vertices):
            kind = 'start' if v < self.start_count else 'key'
            G.add_node(v, position=pos, kind=kind, label=self.vertex_label(v))
        for v, out_edges in enumerate(self.edges):
            for e in out_edges:
                G.add_edge(
                    v, e.target,
                    distance=e.distance,
                    required_mask=e.required_mask,
                    key_bit=e.key_bit,
                    doors=mask_to_letters(e.required_mask).upper(),
                )
        return G

    def summary(self) -> str:
        edge_count = sum(len(out) for out in self.edges)
        return (
            f"CompressedGraph: {self.start_count} starts, {self.key_count} keys "
            f"({mask_to_letters(self.all_keys_mask) or '-'}), {edge_count} edges"
        )


class GraphCompressor:
    """
    Builds a CompressedGraph from a character grid.

    The input grid is copied; start markers are normalized to floor on the
    copy once their coordinates are recorded.
    """

    def __init__(self, grid: np.ndarray):
        self.grid = np.array(grid, dtype='<U1', copy=True)
        if self.grid.ndim != 2:
            raise ValueError(f"Grid must be 2D, got shape {self.grid.shape}")
        self.height, self.width = self.grid.shape

    def build(self) -> CompressedGraph:
        starts, key_positions = self._scan()

        start_count = len(starts)
        total_vertices = start_count + len(key_positions)
        if len(key_positions) > MAX_KEYS:
            raise ValueError(f"Too many keys: {len(key_positions)} > {MAX_KEYS}")
        if total_vertices > MAX_VERTICES:
            raise ValueError(
                f"Too many points of interest: {total_vertices} > {MAX_VERTICES}"
            )

        vertices: List[Tuple[int, int]] = list(starts)
        key_to_vertex: Dict[str, int] = {}
        for letter, pos in key_positions.items():
            key_to_vertex[letter] = len(vertices)
            vertices.append(pos)

        all_keys_mask = 0
        for letter in key_positions:
            all_keys_mask |= key_bit(letter)

        edges = [self._bfs_edges(v, vertices[v], key_to_vertex) for v in range(total_vertices)]

        graph = CompressedGraph(
            vertices=vertices,
            edges=edges,
            start_count=start_count,
            all_keys_mask=all_keys_mask,
            key_to_vertex=key_to_vertex,
        )
        logger.debug(graph.summary())
        return graph

    def _scan(self) -> Tuple[List[Tuple[int, int]], Dict[str, Tuple[int, int]]]:
        """Single row-major pass: record starts (normalized to floor) and keys."""
        starts: List[Tuple[int, int]] = []
        key_positions: Dict[str, Tuple[int, int]] = {}
        for r in range(self.height):
            for c in range(self.width):
                cell = str(self.grid[r, c])
                if cell == START:
                    starts.append((r, c))
                    self.grid[r, c] = FLOOR
                elif is_key(cell):
                    if cell in key_positions:
                        # Vertex order stays first-appearance, position is the last one
                        logger.warning(f"Duplicate key '{cell}' at {(r, c)}; keeping last occurrence")
                    key_positions[cell] = (r, c)
        return starts, key_positions

    def _bfs_edges(self, vertex: int, origin: Tuple[int, int],
                   key_to_vertex: Dict[str, int]) -> List[Edge]:
        """
        Multi-target BFS from one point of interest.

        Each queue entry carries the door mask accumulated on the path used
        to reach it.
        """
        grid = self.grid
        height, width = self.height, self.width

        visited = np.zeros((height, width), dtype=bool)
        visited[origin] = True
        queue = deque([(origin[0], origin[1], 0, 0)])

        out_edges: List[Edge] = []
        seen_targets = set()

        while queue:
            r, c, dist, mask = queue.popleft()
            for dr, dc in DIRECTIONS:
                nr, nc = r + dr, c + dc
                if not (0 <= nr < height and 0 <= nc < width):
                    continue
                if visited[nr, nc]:
                    continue
                cell = str(grid[nr, nc])
                if cell == WALL:
                    continue

                next_mask = mask
                if is_door(cell):
                    next_mask |= key_bit(cell)

                visited[nr, nc] = True
                queue.append((nr, nc, dist + 1, next_mask))

                if is_key(cell) and key_to_vertex[cell] != vertex:
                    target = key_to_vertex[cell]
                    if target not in seen_targets:
                        seen_targets.add(target)
                        out_edges.append(Edge(
                            target=target,
                            distance=dist + 1,
                            required_mask=next_mask,
                            key_bit=key_bit(cell),
                        ))

        logger.debug(f"Vertex {vertex} at {origin}: {len(out_edges)} reachable keys")
        return out_edges


def build_compressed_graph(grid: np.ndarray) -> CompressedGraph:
    """Compress a character grid into a graph of starts and keys."""
    return GraphCompressor(grid).build()
