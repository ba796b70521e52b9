import argparse
import sys
import os
import logging
import time

# Ensure project root is in path so we can import 'twisty_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from twisty_maze.algo.binary_tree import BinaryTree
from twisty_maze.algo.sidewinder import Sidewinder
from twisty_maze.core.analysis import MazeAnalyzer
from twisty_maze.core.grid import Grid

GENERATORS = {
    "sidewinder": Sidewinder,
    "binary_tree": BinaryTree,
}

logger = logging.getLogger("twisty_maze")


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def make_generator(algo: str, grid: Grid, seed=None):
    try:
        cls = GENERATORS[algo]
    except KeyError:
        raise ValueError(f"Unknown algorithm '{algo}' (choose from {', '.join(GENERATORS)})") from None
    return cls(grid, seed=seed)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="twisty-maze", description="Twisty Maze: perfect maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    gen_parser = subparsers.add_parser("generate", help="Generate a new maze")
    gen_parser.add_argument("--rows", type=positive_int, default=10, help="Number of rows")
    gen_parser.add_argument("--columns", type=positive_int, default=10, help="Number of columns")
    gen_parser.add_argument("--algo", type=str, default="sidewinder", choices=list(GENERATORS), help="Generation Algorithm")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--visual", action="store_true", help="Animate generation in a window")
    gen_parser.add_argument("--record", action="store_true", help="Record generation video")
    gen_parser.add_argument("--stats", action="store_true", help="Log dead end / corridor statistics")

    bench_parser = subparsers.add_parser("benchmark", help="Time every algorithm on a square grid")
    bench_parser.add_argument("--size", type=positive_int, default=300, help="Benchmark size")

    return parser


def run_generate(args) -> int:
    logger.info(f"Generating {args.rows}x{args.columns} maze with {args.algo.upper()}...")
    grid = Grid(args.rows, args.columns)
    generator = make_generator(args.algo, grid, seed=args.seed)

    if args.visual or args.record:
        logger.info("Visual mode enabled - Opening window...")
        import pygame
        from twisty_maze.viz.renderer import Renderer
        renderer = Renderer(grid, generator=generator, record=args.record)

        if args.record:
            renderer.recorder.output_file = renderer.recorder.default_filename(
                f"gen_{args.algo}_{args.rows}x{args.columns}")
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        try:
            renderer.init_window()
        except pygame.error as e:
            logger.error(f"Could not open window: {e}")
            return 1
        renderer.run_loop()
        if args.record:
            logger.info(f"Video saved to {renderer.recorder.output_file}")

        if not renderer.gen_finished:
            logger.warning(f"Window closed after {generator.step_count} of {grid.size() - 1} links; maze is incomplete")
            if args.stats:
                logger.warning("Skipping stats for incomplete maze")
            return 0
    else:
        logger.info("Headless generation...")
        generator.run_all()
        sys.stdout.write(str(grid))

    if args.stats:
        logger.info(f"Stats: {MazeAnalyzer.calculate_stats(grid)}")
    return 0


def run_benchmark(args) -> int:
    logger.info(f"Running generator benchmark (Size: {args.size}x{args.size})...")

    print(f"\n{'ALGORITHM':<15} | {'TIME (s)':<10} | {'LINKS':<10} | {'PERFECT':<8}")
    print("-" * 52)

    for name in GENERATORS:
        grid = Grid(args.size, args.size)
        generator = make_generator(name, grid, seed=123)

        t_start = time.time()
        generator.run_all()
        duration = time.time() - t_start

        perfect = MazeAnalyzer.is_perfect(grid)
        print(f"{name:<15} | {duration:<10.4f} | {grid.link_count():<10} | {str(perfect):<8}")
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    logger.info(f"Running command: {args.command}")

    if args.command == "generate":
        return run_generate(args)
    elif args.command == "benchmark":
        return run_benchmark(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
