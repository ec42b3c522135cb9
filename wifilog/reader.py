"""Generator-based line reading from files, gzipped archives, and stdin."""

import glob
import gzip
import os
import sys
from typing import Generator

STDIN_PATH = "-"


def _open(filepath: str):
    if filepath.endswith(".gz"):
        return gzip.open(filepath, "rt", encoding="utf-8", errors="replace")
    return open(filepath, "r", encoding="utf-8", errors="replace")


def read_lines(filepath: str) -> Generator[tuple[str, str], None, None]:
    """Yield (line, filepath) for each line in a single file, or stdin for '-'."""
    if filepath == STDIN_PATH:
        for line in sys.stdin:
            yield line, filepath
        return

    with _open(filepath) as f:
        for line in f:
            yield line, filepath


def read_multiple(paths: list[str]) -> Generator[tuple[str, str], None, None]:
    """Yield (line, filepath) from multiple files, sequentially."""
    for path in paths:
        yield from read_lines(path)


def expand_paths(raw_paths: list[str]) -> list[str]:
    """Expand globs, deduplicate, and validate that files exist.

    '-' is passed through as stdin.
    Raises FileNotFoundError if a non-glob path doesn't exist.
    Raises FileNotFoundError if expansion produces zero files.
    """
    expanded = []
    seen = set()

    for raw in raw_paths:
        if raw == STDIN_PATH:
            candidates = [raw]
        elif any(c in raw for c in ("*", "?", "[")):
            candidates = sorted(glob.glob(raw))
        else:
            if not os.path.isfile(raw):
                raise FileNotFoundError(f"File not found: {raw}")
            candidates = [raw]

        for c in candidates:
            if c not in seen:
                seen.add(c)
                expanded.append(c)

    if not expanded:
        raise FileNotFoundError("No log files found matching the given paths")

    return expanded
