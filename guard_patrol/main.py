#!/usr/bin/env python3
"""
Guard Patrol Simulation

Traces a guard walking a grid (straight ahead, turning right at every
obstruction) and searches for single obstructions that trap it in a loop.

Usage:
    guard-patrol --input data/example.txt [options]
    guard-patrol --config configs/example.yaml [options]

Examples:
    guard-patrol --input data/example.txt
    guard-patrol --input data/example.txt --workers 4 --gif --out-dir results/
    guard-patrol --config configs/example.yaml --no-csv --no-snapshot --quiet
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import PatrolConfig, load_config
from .model.engine import PathTracer
from .model.search import LoopObstacleSearch
from .model.strategy import get_strategy
from .parser import GridParseError, parse_area
from .export.csv_writer import CSVWriter, OBSTACLE_FIELDS, TRAJECTORY_FIELDS
from .export.visualizer import Visualizer
from .export.reporter import Reporter, render_ascii


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Guard Patrol Simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    guard-patrol --input data/example.txt
    guard-patrol --input data/example.txt --workers 4 --gif --out-dir results/
    guard-patrol --config configs/example.yaml --no-csv --no-snapshot --quiet
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--input', type=Path,
                        help='Path to grid text file')
    source.add_argument('--config', type=Path,
                        help='Path to YAML configuration file')

    # Optional overrides
    parser.add_argument('--workers', type=int, default=None,
                        help='Worker processes for the obstruction search')
    parser.add_argument('--no-search', dest='search', action='store_false',
                        default=None,
                        help='Skip the loop obstruction search')
    parser.add_argument('--out-dir', type=Path, default=Path('./output'),
                        help='Output directory for exports (default: ./output)')

    # Export toggles
    parser.add_argument('--csv', dest='csv', action='store_true', default=None,
                        help='Enable CSV export (default)')
    parser.add_argument('--no-csv', dest='csv', action='store_false',
                        help='Disable CSV export')

    parser.add_argument('--snapshot', dest='snapshot', action='store_true', default=None,
                        help='Enable final snapshot (default)')
    parser.add_argument('--no-snapshot', dest='snapshot', action='store_false',
                        help='Disable final snapshot')

    parser.add_argument('--gif', action='store_true', default=False,
                        help='Enable GIF animation export')

    parser.add_argument('--ascii', action='store_true', default=False,
                        help='Print the visited area as text')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> PatrolConfig:
    """Load configuration and apply CLI overrides."""
    if args.config is not None:
        config = load_config(args.config)
    else:
        config = PatrolConfig()
    if args.input is not None:
        config.input_path = args.input
    if config.input_path is None:
        raise ValueError("No input grid given (set 'input' in the config)")

    if args.workers is not None:
        if args.workers < 1:
            raise ValueError(f"--workers must be >= 1, got {args.workers}")
        config.search.workers = args.workers
    if args.search is not None:
        config.search.enabled = args.search
    if args.csv is not None:
        config.csv_enabled = args.csv
    if args.snapshot is not None:
        config.snapshot_enabled = args.snapshot
    if args.gif:
        config.gif_enabled = True
    config.quiet = args.quiet
    config.out_dir = args.out_dir
    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Load configuration
    try:
        config = build_config(args)
    except FileNotFoundError:
        print(f"Error: Configuration file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    # Parse input before any simulation starts
    try:
        text = config.input_path.read_text(encoding='utf-8')
        area, guards = parse_area(text)
        if not guards:
            raise GridParseError("No guard marker '^' found in grid")
    except FileNotFoundError:
        print(f"Error: Input file not found: {config.input_path}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1
    except (GridParseError, UnicodeDecodeError) as e:
        print(f"Error parsing grid: {e}", file=sys.stderr)
        return 1

    guard = guards[0]
    strategy = get_strategy(config.strategy)

    if not config.quiet:
        print(f"Initializing simulation...")
        print(f"  Grid: {area.width}x{area.height}")
        print(f"  Obstructions: {area.obstacle_count}")
        print(f"  Guard: {tuple(guard.position)} facing {guard.direction.value}")
        if len(guards) > 1:
            ignored = ", ".join(str(tuple(g.position)) for g in guards[1:])
            print(f"  Warning: {len(guards) - 1} extra guard marker(s) ignored: {ignored}")

    # Part one: baseline patrol
    if not config.quiet:
        print(f"\nTracing patrol...")
    trace = PathTracer(area, guard, strategy).run()

    # Part two: loop obstruction search
    search = None
    if config.search.enabled:
        if not config.quiet:
            print(f"Searching loop obstructions ({config.search.workers} worker(s))...")
        try:
            search = LoopObstacleSearch(
                area, guard, strategy,
                workers=config.search.workers,
                chunk_size=config.search.chunk_size,
                timeout=config.search.timeout
            ).run()
        except TimeoutError:
            print(f"Error: Obstruction search exceeded {config.search.timeout}s timeout",
                  file=sys.stderr)
            return 1

    # Exports
    if config.csv_enabled:
        csv_path = config.out_dir / 'trajectory.csv'
        with CSVWriter(csv_path, TRAJECTORY_FIELDS) as writer:
            writer.append(trace.to_csv_rows())
        if not config.quiet:
            print(f"\nCSV saved: {csv_path}")
        if search is not None:
            obstacles_path = config.out_dir / 'loop_obstacles.csv'
            with CSVWriter(obstacles_path, OBSTACLE_FIELDS) as writer:
                writer.append(search.to_csv_rows())
            if not config.quiet:
                print(f"CSV saved: {obstacles_path}")

    loop_positions = search.loop_positions if search is not None else []
    visualizer = Visualizer(area)

    if config.snapshot_enabled:
        snapshot_path = config.out_dir / 'final_state.png'
        visualizer.save_snapshot(trace, snapshot_path, loop_positions)
        if not config.quiet:
            print(f"Snapshot saved: {snapshot_path}")

    if config.gif_enabled:
        gif_path = config.out_dir / 'patrol.gif'
        visualizer.buffer_trace(trace, every=config.frame_every)
        if not config.quiet:
            print(f"Generating GIF ({len(visualizer.frames)} frames)...")
        visualizer.generate_gif(gif_path, fps=10)
        if not config.quiet:
            print(f"Animation saved: {gif_path}")

    if args.ascii and not config.quiet:
        print()
        print(render_ascii(area, trace, loop_positions))

    # Print summary report
    if not config.quiet:
        reporter = Reporter(str(config.input_path), config.strategy)
        report = reporter.generate_summary(
            area, trace, search,
            config.out_dir,
            config.csv_enabled,
            config.snapshot_enabled,
            config.gif_enabled
        )
        print(report)

    return 0


if __name__ == '__main__':
    sys.exit(main())
