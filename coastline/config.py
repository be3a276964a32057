"""Loader for ``key=value`` player configuration files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Dict, Iterable, Union

from coastline.errors import ParseError
from coastline.types import Configuration

LOGGER = logging.getLogger(__name__)

REQUIRED_KEYS = ("image_path", "x", "y")
_INT_RE = re.compile(r"[+-]?[0-9]+")

__all__ = [
    "REQUIRED_KEYS",
    "load",
    "loads",
    "parse_lines",
]


def _parse_int(key: str, token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise ParseError(f"value of '{key}' is not an integer: {token!r}")
    return int(token)


def parse_lines(lines: Iterable[str]) -> Configuration:
    """Build a :class:`Configuration` from raw config lines.

    Empty lines and lines starting with ``#`` are skipped as-is; any other line
    needs an ``=``. Keys and values are split on the first ``=`` and trimmed.
    Coordinates are ASCII digits with an optional sign. A repeated key
    overwrites the earlier value.
    """
    entries: Dict[str, str] = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\n")
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            raise ParseError(
                f"line {line_number} is missing the '=' separator",
                line_number=line_number,
            )
        key = key.strip()
        if key not in REQUIRED_KEYS:
            LOGGER.debug("Ignoring unknown config key %r on line %s", key, line_number)
        entries[key] = value.strip()

    if "image_path" not in entries:
        raise ParseError("configuration is missing 'image_path'")
    if "x" not in entries or "y" not in entries:
        raise ParseError("configuration is missing the 'x' or 'y' coordinate")

    return Configuration(
        image_path=entries["image_path"],
        x=_parse_int("x", entries["x"]),
        y=_parse_int("y", entries["y"]),
    )


def loads(text: str) -> Configuration:
    return parse_lines(text.splitlines())


def load(source: Union[str, Path]) -> Configuration:
    """Read and parse the configuration file at ``source``."""
    path = Path(source)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"cannot open config file {path}: {exc}") from exc
    config = loads(text)
    LOGGER.debug("Loaded config from %s: %s", path, config)
    return config
