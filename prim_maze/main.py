import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'prim_maze' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

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
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {number}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prim Maze: Randomized Prim's maze generator")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate Command
    gen_parser = subparsers.add_parser("generate", help="Generate a new maze and print it")
    gen_parser.add_argument("--width", type=positive_int, default=30, help="Maze Width")
    gen_parser.add_argument("--height", type=positive_int, default=20, help="Maze Height")
    gen_parser.add_argument("--seed", type=int, default=None, help="Random Seed")
    gen_parser.add_argument("--stats", action="store_true", help="Log maze statistics after generation")
    gen_parser.add_argument("--wall-glyph", type=str, default=None, help="Character used for walls")
    gen_parser.add_argument("--path-glyph", type=str, default=None, help="Character used for passages")
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("prim_maze")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    if args.command == "generate":
        from prim_maze.core.grid import Grid
        from prim_maze.algo.prim import PrimsAlgorithm
        from prim_maze.viz.text_renderer import TextRenderer

        logger.info(f"Generating {args.width}x{args.height} maze with PRIM (seed={args.seed})...")
        grid = Grid(args.width, args.height)
        generator = PrimsAlgorithm(grid, seed=args.seed)

        for status in generator.run():
            logger.debug(status)

        logger.info(f"Carved from {tuple(generator.start)}: {generator.step_count} frontier cells, "
                    f"{generator.connector_count} connectors")

        if args.stats:
            from prim_maze.core.complexity import MazeAnalyzer
            stats = MazeAnalyzer.calculate_stats(grid)
            logger.info(f"Stats: {stats}")

        TextRenderer(args.wall_glyph, args.path_glyph).print(grid)

    return 0

if __name__ == "__main__":
    sys.exit(main())
