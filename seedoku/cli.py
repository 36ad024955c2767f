"""Command-line interface for the seedoku generator."""

import argparse
import json
import logging
import sys

from .core.errors import SeedokuError
from .generator import Complexity, GridGenerator, DEFAULT_MAX_ATTEMPTS
from .benchmark import GenerationBenchmark
from .benchmark.visualizer import Visualizer


def positive_int(value):
    """argparse type for integers of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Deterministic Seeded Sudoku Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the medium puzzle for seed 42
  python -m seedoku.cli generate --seed 42

  # Show the solved grid for seed 42 as JSON
  python -m seedoku.cli generate --seed 42 --solved --format json

  # Collect generation statistics for 200 seeds
  python -m seedoku.cli benchmark --count 200 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate a grid and reveal a puzzle")
    gen_parser.add_argument(
        "--seed", "-s", type=int, required=True,
        help="Seed for the grid and the reveal"
    )
    gen_parser.add_argument(
        "--complexity", "-c",
        choices=[c.value for c in Complexity],
        default=Complexity.MEDIUM.value,
        help="Complexity level (default: medium)"
    )
    gen_parser.add_argument(
        "--solved", action="store_true",
        help="Show the full grid instead of the puzzle"
    )
    gen_parser.add_argument(
        "--format", "-f", choices=["text", "json"], default="text",
        help="Output format (default: text)"
    )
    gen_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Write the output to a file instead of stdout"
    )
    gen_parser.add_argument(
        "--max-attempts", type=positive_int, default=DEFAULT_MAX_ATTEMPTS,
        help=f"Generation attempt limit (default: {DEFAULT_MAX_ATTEMPTS})"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Collect generation statistics")
    bench_parser.add_argument(
        "--count", "-n", type=positive_int, default=100,
        help="Number of seeds (default: 100)"
    )
    bench_parser.add_argument(
        "--start-seed", type=int, default=0,
        help="First seed (default: 0)"
    )
    bench_parser.add_argument(
        "--complexity", "-c",
        choices=[c.value for c in Complexity] + ["all"],
        default="all",
        help="Complexity to reveal (default: all)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--max-attempts", type=positive_int, default=DEFAULT_MAX_ATTEMPTS,
        help=f"Generation attempt limit (default: {DEFAULT_MAX_ATTEMPTS})"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    try:
        if args.command == "generate":
            cmd_generate(args)
        elif args.command == "benchmark":
            cmd_benchmark(args)
    except SeedokuError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cmd_generate(args):
    """Handle the generate command."""
    full = GridGenerator(max_attempts=args.max_attempts).generate(args.seed)
    grid = full if args.solved else full.reveal(args.complexity)

    if args.format == "json":
        text = json.dumps(grid.to_dict(), indent=2)
    elif args.solved:
        text = f"--- Solution for seed {args.seed} ---\n{grid}"
    else:
        text = (
            f"--- {args.complexity.capitalize()} puzzle for seed {args.seed} "
            f"({grid.revealed_count} revealed) ---\n{grid}"
        )

    if args.output:
        with open(args.output, "w") as f:
            f.write(text + "\n")
        print(f"Saved to {args.output}")
    else:
        print(text)


def cmd_benchmark(args):
    """Handle the benchmark command."""
    if args.complexity == "all":
        complexities = list(Complexity)
    else:
        complexities = [Complexity(args.complexity)]

    print("=" * 60)
    print("GENERATION BENCHMARK")
    print("=" * 60)
    print(f"Seeds: {args.start_seed}..{args.start_seed + args.count - 1}")
    print(f"Complexities: {[c.value for c in complexities]}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    benchmark = GenerationBenchmark(
        count=args.count,
        start_seed=args.start_seed,
        complexities=complexities,
        max_attempts=args.max_attempts
    )
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)
    print(f"Completed: {summary['completed']}/{summary['total_seeds']}")
    if summary["exhausted"]:
        print(f"Exhausted seeds: {summary['exhausted']}")
    if summary["attempts"]:
        print(f"Attempts: mean {summary['attempts']['mean']:.1f}, max {summary['attempts']['max']}")
        print(f"Avg Time: {summary['time_seconds']['mean']:.4f}s")

    for name, stats in summary["results_by_complexity"].items():
        print(f"\n{name.capitalize()}:")
        print(f"  Revealed: avg {stats['avg_revealed']:.1f} "
              f"(min {stats['min_revealed']}, max {stats['max_revealed']})")
        print(f"  Max square spread: {stats['max_square_spread']}")

    benchmark.save_results(args.output)

    if not args.no_charts and summary["completed"]:
        print("\nGenerating charts...")
        charts = Visualizer(results, args.output).generate_all()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
