"""Collision-free output file naming."""

import threading
from collections.abc import Collection
from pathlib import Path

from image_snipper.services.validation import normalized_extension


def _candidate(input_path: Path, tile_name: str, counter: int) -> Path:
    """
    Build the output path for one naming attempt.

    Args:
        input_path (Path): Source image path.
        tile_name (str): Name of the tile being written.
        counter (int): Attempt number (0 = no disambiguating suffix).

    Returns:
        Path: Candidate output path next to the source image.
    """
    extension = normalized_extension(input_path)
    stem = input_path.stem if extension is not None else input_path.name
    base = f"{stem}.{tile_name}" if counter == 0 else f"{stem}.{tile_name} ({counter})"
    filename = f"{base}.{extension}" if extension is not None else base
    return input_path.parent / filename


def next_output_path(
    input_path: Path,
    tile_name: str,
    reserved: Collection[Path] | None = None,
) -> Path:
    """
    Find an unused output path for a tile cut from an input image.

    Tries "{stem}.{tile}.{ext}", then "{stem}.{tile} (1).{ext}", "(2)" and so on.
    Existence is checked, not locked; a concurrent writer can still take the
    returned path before it is written.

    Args:
        input_path (Path): Source image path.
        tile_name (str): Name of the tile being written.
        reserved (Collection[Path] | None): Paths already handed out in this run.

    Returns:
        Path: A path that neither exists on disk nor is reserved.
    """
    reserved = reserved or ()
    counter = 0
    while True:
        candidate = _candidate(input_path=input_path, tile_name=tile_name, counter=counter)
        if candidate not in reserved and not candidate.exists():
            return candidate
        counter += 1


class OutputNamer:
    """Hands out output paths that are unique for the lifetime of one run."""

    def __init__(self) -> None:
        """Initialize a namer with no reserved paths."""
        self._reserved: set[Path] = set()
        self._lock = threading.Lock()

    @property
    def reserved(self) -> frozenset[Path]:
        """
        Get the paths handed out so far.

        Returns:
            frozenset[Path]: Reserved output paths.
        """
        with self._lock:
            return frozenset(self._reserved)

    def reserve(self, input_path: Path, tile_name: str) -> Path:
        """
        Pick and reserve the next unused output path for a tile.

        Args:
            input_path (Path): Source image path.
            tile_name (str): Name of the tile being written.

        Returns:
            Path: The reserved output path.
        """
        with self._lock:
            path = next_output_path(
                input_path=input_path,
                tile_name=tile_name,
                reserved=self._reserved,
            )
            self._reserved.add(path)
            return path
