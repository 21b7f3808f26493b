"""tilesynth CLI entry point.

Provides subcommands for generating a tile map and for generating then solving
one. Accepts configuration via flags and environment variables, with optional
.env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv

from tilesynth import __version__
from tilesynth.diagnostics import render_text
from tilesynth.errors import TilesynthError
from tilesynth.generators import GENERATORS, get_generator
from tilesynth.grid.config import GenerationParams
from tilesynth.logging_utils import get_logger, set_json_mode, set_level
from tilesynth.pathfinding import PATHFINDERS, get_pathfinder
from tilesynth.utils.tile_compress import compress_cells

log = get_logger("tilesynth.cli")


def _add_generation_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--algorithm",
        "-a",
        choices=sorted(GENERATORS),
        default="bsp",
        help="Generator: bsp (rooms and corridors) or ca (caves). Default: bsp",
    )
    p.add_argument("--width", type=int, default=None, help="Extent in pixels (default: env TILESYNTH_DEFAULT_WIDTH or 600)")
    p.add_argument("--height", type=int, default=None, help="Extent in pixels (default: env TILESYNTH_DEFAULT_HEIGHT or 400)")
    p.add_argument(
        "--iterations",
        "-i",
        type=int,
        default=None,
        help="BSP split depth or cave smoothing steps (default: env TILESYNTH_DEFAULT_ITERATIONS or 5)",
    )
    p.add_argument(
        "--no-clamp",
        action="store_true",
        help="Do not pull width/height/iterations into the usual slider ranges",
    )
    p.add_argument("--json", action="store_true", help="Print a JSON document instead of the text map")


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    tilesynth procedural map synthesizer

    Generate room-and-corridor (BSP) or cave (cellular automata) tile maps and
    solve them with breadth-first search or A*. Configuration can be provided
    via CLI flags or environment variables. If both are present, CLI flags
    take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          TILESYNTH_DEFAULT_WIDTH              Default width in pixels (600)
          TILESYNTH_DEFAULT_HEIGHT             Default height in pixels (400)
          TILESYNTH_DEFAULT_ITERATIONS         Default iterations (5)
          TILESYNTH_ENABLE_GENERATION_METRICS  Collect per-phase timings (1)
          TILESYNTH_LOG_LEVEL                  debug|info|warn|error (info)
          TILESYNTH_LOG_JSON                   Emit JSON log lines (0)

        Examples:
          # Generate a BSP map with the default size
          python run.py generate

          # Grow a cave and print it as JSON
          python run.py generate --algorithm ca --iterations 8 --json

          # Solve a cave with A* and show the explored cells
          python run.py solve --algorithm ca --solver astar --show-visited

          # Load variables from .env then generate
          python run.py --env-file .env generate
        """
    )

    parser = argparse.ArgumentParser(
        prog="tilesynth",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=["debug", "info", "warn", "error"],
        default=None,
        help="Override TILESYNTH_LOG_LEVEL",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tilesynth {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a tile map",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a tile map and print it with its metrics",
    )
    _add_generation_flags(gen_parser)
    gen_parser.set_defaults(command="generate")

    solve_parser = subparsers.add_parser(
        "solve",
        help="Generate a tile map and find a path across it",
        formatter_class=argparse.RawTextHelpFormatter,
        description=dedent(
            """
            Generate a map, then search from the first floor cell (leftmost
            column, topmost row) to the last (rightmost column, bottom row).
            """
        ),
    )
    _add_generation_flags(solve_parser)
    solve_parser.add_argument(
        "--solver",
        "-s",
        choices=sorted(PATHFINDERS),
        default="bfs",
        help="Search strategy (default: bfs)",
    )
    solve_parser.add_argument(
        "--show-visited",
        action="store_true",
        help="Mark every examined cell in the text map",
    )
    solve_parser.set_defaults(command="solve")

    args = parser.parse_args(argv)
    # If no subcommand provided, default to generate
    if args.command is None:
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def build_params(args: argparse.Namespace) -> GenerationParams:
    raw = {k: getattr(args, k) for k in ("width", "height", "iterations") if getattr(args, k, None) is not None}
    params = GenerationParams.from_mapping(raw).validate()
    if not getattr(args, "no_clamp", False):
        params = params.clamped(args.algorithm)
    return params


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        # Load default .env if present (no error if missing)
        load_dotenv()

    json_logs = os.getenv("TILESYNTH_LOG_JSON")
    if json_logs is not None:
        set_json_mode(json_logs)
    level = args.log_level or os.getenv("TILESYNTH_LOG_LEVEL")
    try:
        if level:
            set_level(level)
        params = build_params(args)
        generator = get_generator(args.algorithm)
        solver = get_pathfinder(args.solver) if args.command == "solve" else None
    except (TilesynthError, ValueError) as exc:
        log.error(event="invalid_arguments", error=str(exc))
        return 2

    result = generator.generate(params)
    path = solver.find_path(result) if solver is not None else None
    # --json owns stdout; the summary event only shows at debug there
    emit = log.debug if args.json else log.info
    emit(
        event=args.command,
        algorithm=args.algorithm,
        solver=getattr(args, "solver", None),
        width=params.width,
        height=params.height,
        iterations=params.iterations,
        path=path.length if path is not None else None,
    )

    if args.json:
        doc = result.to_dict()
        if path is not None:
            doc["solver"] = args.solver
            doc["path"] = compress_cells(path.coords())
            doc["visited"] = compress_cells(path.visited_coords())
            doc["path_length"] = path.length
        print(json.dumps(doc, separators=(",", ":")))
        return 0

    color = sys.stdout.isatty()
    if color:
        _color_init()

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if color else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    grid = result.grid
    lines = [
        divider,
        f"  {label('Algorithm:'):12} {value(args.algorithm.upper())}",
        f"  {label('Grid:'):12} {value(f'{grid.width}x{grid.height}')}",
        f"  {label('Iterations:'):12} {value(params.iterations)}",
        f"  {label('Floor:'):12} {value(result.metrics.get('tiles_floor', '-'))}",
        f"  {label('Runtime ms:'):12} {value(result.metrics.get('runtime_ms', '-'))}",
    ]
    if path is not None:
        lines += [
            f"  {label('Solver:'):12} {value(args.solver.upper())}",
            f"  {label('Path:'):12} {value(path.length if path.found else 'unreachable')}",
            f"  {label('Visited:'):12} {value(len(path.visited))}",
        ]
    lines += [divider, render_text(result, path, getattr(args, "show_visited", False))]
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
