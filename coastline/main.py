"""Command line entry point: load a config and print the coastline map."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from dotenv import load_dotenv

from coastline.config import load
from coastline.errors import CoastlineError
from coastline.mapgen import CoastlineMap
from coastline.types import MAP_HEIGHT, MAP_WIDTH
from coastline.utils.maps import LEGEND

LOGGER = logging.getLogger("coastline")

PROG = "coastline"
HEADER = "==== Coastline Prototype ===="
SEPARATOR = "-" * 33

USAGE = f"""Usage: {PROG} <config-file>

Config file format (key=value pairs):
  image_path=/absolute/or/relative/path/to/shoreline.jpg
  x=player column on the map (0-based)
  y=player row on the map (0-based)

Example:
  image_path=assets/shoreline_reference.jpg
  x=12
  y=6
"""


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=PROG, description="Coastline map prototype")
    parser.add_argument(
        "config",
        type=Path,
        nargs="?",
        default=None,
        help="Path to the key=value config file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("COASTLINE_LOG_LEVEL", "WARNING"),
        help="Python logging level",
    )
    return parser.parse_args(argv)


def run(
    config_path: Path,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Load, validate and render; returns the process exit status."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    try:
        config = load(config_path)

        if not config.image_path or not Path(config.image_path).exists():
            print(
                f"Warning: configured map image not found: '{config.image_path}'",
                file=stderr,
            )

        world = CoastlineMap(MAP_WIDTH, MAP_HEIGHT)
        world.validate_bounds(config.x, config.y)
        rendered = world.render(config.x, config.y)
    except CoastlineError as exc:
        LOGGER.debug("Run aborted: %r", exc)
        print(f"Error: {exc}", file=stderr)
        return 1

    lines = [
        HEADER,
        f"Image path: {config.resolved_image_path()}",
        f"Player position: ({config.x}, {config.y})",
        SEPARATOR,
    ]
    stdout.write("\n".join(lines) + "\n")
    stdout.write(rendered)
    stdout.write(f"{SEPARATOR}\n{LEGEND}\n")
    LOGGER.info("Rendered %r with player at (%s, %s)", world, config.x, config.y)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING))
    if args.config is None:
        print(USAGE, end="")
        return 1
    return run(args.config)


if __name__ == "__main__":
    sys.exit(main())
