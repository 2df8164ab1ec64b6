"""
Multi-Robot Key Collection Search
=================================

Dijkstra search over global states (robot configuration, collected keys)
on top of the compressed graph.

Algorithm:
1. Start with every robot on its start vertex, no keys, distance 0
2. Pop the cheapest state; drop it if a cheaper distance for the same
   state was recorded after it was pushed (lazy deletion)
3. If it holds every key, its distance is optimal: return it
4. Otherwise move one robot along one usable edge: the edge's key is not
   held yet and every door on the way is already unlocked
5. Record and push successors that improve the best-known distance

Robots are interchangeable, so configurations are canonicalized (sorted)
before encoding; symmetric states collapse into one.

Complexity:
- States: C(V + R - 1, R) configurations x 2^K key sets in the worst case,
  far fewer in practice since keys are only gained along edges
- Each expansion: O(R x K) edges, O(log Q) heap work per push
"""

import time
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

from keymaze.core.definitions import DEFAULT_ROBOT_COUNT, BIT_TO_KEY
from keymaze.core.sanity import GridSanityChecker
from .graph_compressor import CompressedGraph, build_compressed_graph
from .priority_queue import MinHeap
from .state_encoding import RobotConfiguration, SearchState

logger = logging.getLogger(__name__)


@dataclass
class SolverOptions:
    """Configuration options for the solver.

    Allows customization of team size and of the extra bookkeeping done
    around the search.
    """
    robot_count: int = DEFAULT_ROBOT_COUNT
    validate: bool = True         # Run GridSanityChecker before searching
    record_route: bool = False    # Keep parent links to rebuild the key order
    log_interval: int = 100000    # Expansions between DEBUG progress lines, 0 = off

    @classmethod
    def for_mode(cls, mode: str = "default", **overrides) -> 'SolverOptions':
        """Factory method for common configurations."""
        if mode == "fast":
            options = cls(validate=False, log_interval=0)
        elif mode == "trace":
            options = cls(record_route=True, log_interval=10000)
        elif mode == "default":
            options = cls()
        else:
            raise ValueError(f"Unknown solver mode: {mode}")
        for name, value in overrides.items():
            setattr(options, name, value)
        return options


@dataclass
class SearchDiagnostics:
    """Statistics from a single search run."""
    states_expanded: int = 0
    states_discovered: int = 0
    stale_pops: int = 0
    max_queue_size: int = 0
    time_taken_ms: float = 0.0
    failure_reason: str = ""

    def summary(self) -> str:
        """Human-readable summary of solver performance."""
        status = "SUCCESS" if not self.failure_reason else f"FAILED: {self.failure_reason}"
        return f"""
=== Search Diagnostics ===
Status: {status}
States Expanded: {self.states_expanded:,}
States Discovered: {self.states_discovered:,}
Stale Pops: {self.stale_pops:,}
Max Queue Size: {self.max_queue_size:,}
Time Taken: {self.time_taken_ms:.1f}ms
=========================="""


@dataclass
class SearchResult:
    """Outcome of solving one grid."""
    success: bool
    distance: Optional[int] = None
    is_valid_input: bool = True
    errors: List[str] = field(default_factory=list)
    collection_order: List[str] = field(default_factory=list)
    diagnostics: SearchDiagnostics = field(default_factory=SearchDiagnostics)

    def to_dict(self) -> Dict:
        return {
            'success': self.success,
            'distance': self.distance,
            'is_valid_input': self.is_valid_input,
            'errors': self.errors,
            'collection_order': self.collection_order,
        }


class MultiRobotKeySearch:
    """
    Minimum total distance for a robot team to collect every key.

    Args:
        graph: Compressed graph; its first `robot_count` vertices are starts
        options: SolverOptions (robot_count, record_route, log_interval)

    Raises:
        ValueError: If the graph does not have exactly robot_count starts
    """

    def __init__(self, graph: CompressedGraph, options: Optional[SolverOptions] = None):
        self.graph = graph
        self.options = options or SolverOptions()
        self.robot_count = self.options.robot_count
        if self.robot_count < 1:
            raise ValueError(f"robot_count must be positive, got {self.robot_count}")
        if graph.start_count != self.robot_count:
            raise ValueError(
                f"Graph has {graph.start_count} starts but robot_count is {self.robot_count}"
            )

    def initial_state(self) -> SearchState:
        # Start ids are assigned in scan order, already canonical
        return SearchState(RobotConfiguration(tuple(range(self.robot_count))), 0)

    def solve(self) -> SearchResult:
        """
        Run the search to completion.

        Returns:
            SearchResult with the optimal distance, or success=False when the
            queue empties before every key is collected
        """
        start_time = time.perf_counter()
        graph = self.graph
        all_keys = graph.all_keys_mask
        record_route = self.options.record_route
        log_interval = self.options.log_interval

        diagnostics = SearchDiagnostics()
        best: Dict[int, int] = {}
        parents: Dict[int, Tuple[int, int]] = {}
        queue = MinHeap()

        start = self.initial_state()
        start_key = start.state_key
        best[start_key] = 0
        queue.push(0, start)

        while queue:
            dist, state = queue.pop()
            state_key = state.state_key

            if best[state_key] < dist:
                diagnostics.stale_pops += 1
                continue

            if state.keys == all_keys:
                diagnostics.max_queue_size = queue.max_size
                diagnostics.states_discovered = len(best)
                diagnostics.time_taken_ms = (time.perf_counter() - start_time) * 1000
                order = self._rebuild_order(parents, state_key, start_key) if record_route else []
                logger.info('Search: all keys collected, distance %d after %d expansions',
                            dist, diagnostics.states_expanded)
                return SearchResult(success=True, distance=dist,
                                    collection_order=order, diagnostics=diagnostics)

            diagnostics.states_expanded += 1
            if log_interval and diagnostics.states_expanded % log_interval == 0:
                logger.debug('Search: %d expanded, %d known states, queue %d, distance %d',
                             diagnostics.states_expanded, len(best), len(queue), dist)

            for slot, vertex in enumerate(state.robots.positions):
                for edge in graph.edges[vertex]:
                    if state.keys & edge.key_bit:
                        continue
                    if edge.required_mask & ~state.keys:
                        continue

                    new_state = SearchState(state.robots.move(slot, edge.target),
                                            state.keys | edge.key_bit)
                    new_key = new_state.state_key
                    new_dist = dist + edge.distance

                    known = best.get(new_key)
                    if known is None or new_dist < known:
                        best[new_key] = new_dist
                        if record_route:
                            parents[new_key] = (state_key, edge.key_bit)
                        queue.push(new_dist, new_state)

        diagnostics.max_queue_size = queue.max_size
        diagnostics.states_discovered = len(best)
        diagnostics.time_taken_ms = (time.perf_counter() - start_time) * 1000
        diagnostics.failure_reason = "queue exhausted before all keys were collected"
        logger.info('Search: no solution after %d expansions', diagnostics.states_expanded)
        return SearchResult(success=False, diagnostics=diagnostics)

    @staticmethod
    def _rebuild_order(parents: Dict[int, Tuple[int, int]],
                       goal_key: int, start_key: int) -> List[str]:
        order = []
        current = goal_key
        while current != start_key:
            current, bit = parents[current]
            order.append(BIT_TO_KEY[bit])
        order.reverse()
        return order


# ==========================================
# CONVENIENCE FUNCTIONS
# ==========================================

def solve_grid(grid: np.ndarray, options: Optional[SolverOptions] = None) -> SearchResult:
    """
    Sanity check (optional), compress and search a grid.

    An invalid grid yields SearchResult(is_valid_input=False) without
    running the search.
    """
    options = options or SolverOptions()

    if options.validate:
        is_valid, errors = GridSanityChecker(grid, options.robot_count).check_all()
        if not is_valid:
            for error in errors:
                logger.warning(f"Invalid grid: {error}")
            return SearchResult(success=False, is_valid_input=False, errors=errors)

    graph = build_compressed_graph(grid)
    return MultiRobotKeySearch(graph, options).solve()


def minimum_total_distance(grid: np.ndarray,
                           robot_count: int = DEFAULT_ROBOT_COUNT) -> Optional[int]:
    """Minimum total distance to collect every key, or None if impossible."""
    graph = build_compressed_graph(grid)
    options = SolverOptions(robot_count=robot_count, validate=False)
    return MultiRobotKeySearch(graph, options).solve().distance
