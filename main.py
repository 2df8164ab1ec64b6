"""
KEYMAZE - Main Entry Point
==========================
The pipeline: Load -> Compress -> Search -> Print

Usage:
    # Solve a maze read from stdin (stops at the first blank line)
    python main.py < maze.txt

    # Solve a maze file with search statistics
    python main.py maze.txt --summary

    # Other team sizes, key collection order, compressed graph export
    python main.py maze.txt --robots 1 --route --export-graph graph.json

Output is a single line: the minimum total distance, or "No solution found".
"""

import argparse
import json
import sys
import logging
from typing import Optional

import networkx as nx

from keymaze.core.definitions import DEFAULT_ROBOT_COUNT, NO_SOLUTION_TEXT
from keymaze.data.grid_loader import load_grid, read_grid
from keymaze.simulation import (
    CompressedGraph,
    SearchResult,
    SolverOptions,
    build_compressed_graph,
    solve_grid,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_INPUT = 2


def format_result(distance: Optional[int]) -> str:
    """Render a search outcome for display."""
    if distance is None:
        return NO_SOLUTION_TEXT
    return str(distance)


def export_graph(graph: CompressedGraph, output_path: str):
    """
    Export the compressed graph as node-link JSON.

    Args:
        graph: Compressed graph to export
        output_path: Output file path
    """
    data = nx.node_link_data(graph.to_networkx())
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
    logger.info(f"Exported compressed graph to: {output_path}")


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def run_pipeline(grid, options: SolverOptions,
                 export_path: Optional[str] = None) -> SearchResult:
    """
    Run the complete pipeline on a loaded grid: Check -> Compress -> Search -> Export

    Returns:
        SearchResult (is_valid_input=False when the sanity check fails)

    Raises:
        ValueError: If the grid breaks a search precondition with validation off
    """
    logger.info(f"[STEP 1] Solving with {options.robot_count} robot(s)...")
    result = solve_grid(grid, options)

    if export_path and result.is_valid_input:
        logger.info("[STEP 2] Exporting compressed graph...")
        export_graph(build_compressed_graph(grid), export_path)

    return result


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='KEYMAZE - Minimum total distance for a robot team to collect every key'
    )

    parser.add_argument(
        'input', nargs='?', type=str,
        help='Maze file (default: read stdin)'
    )
    parser.add_argument(
        '--robots', '-r', type=positive_int, default=DEFAULT_ROBOT_COUNT,
        help=f'Number of robots / start markers (default: {DEFAULT_ROBOT_COUNT})'
    )
    parser.add_argument(
        '--no-validate', action='store_true',
        help='Skip grid sanity checks'
    )
    parser.add_argument(
        '--route', action='store_true',
        help='Print the order in which keys are collected'
    )
    parser.add_argument(
        '--summary', '-s', action='store_true',
        help='Print search diagnostics'
    )
    parser.add_argument(
        '--export-graph', type=str,
        help='Export the compressed graph to a node-link JSON file'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    options = SolverOptions(
        robot_count=args.robots,
        validate=not args.no_validate,
        record_route=args.route,
    )

    try:
        grid = load_grid(args.input) if args.input else read_grid()
        result = run_pipeline(grid, options, export_path=args.export_graph)
    except FileNotFoundError as e:
        logger.error(f"Maze file not found: {e}")
        raise
    except ValueError as e:
        print(f"Error: {e}")
        print("Invalid input")
        return EXIT_INVALID_INPUT

    if not result.is_valid_input:
        for error in result.errors:
            print(f"Error: {error}")
        print("Invalid input")
        return EXIT_INVALID_INPUT

    print(format_result(result.distance))
    if args.route and result.success:
        print(f"Route: {' -> '.join(result.collection_order) or '-'}")
    if args.summary:
        print(result.diagnostics.summary())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
