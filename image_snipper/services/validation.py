"""Validation of segment and input file collections."""

from collections.abc import Sequence
from pathlib import Path

from image_snipper.core.exceptions import (
    DuplicateSegmentNamesError,
    EmptySegmentSetError,
    MissingExtensionError,
    UnsupportedExtensionError,
)
from image_snipper.models import Segment

# Extensions are trusted; file contents are never sniffed
SUPPORTED_EXTENSIONS = frozenset({"bmp", "jpeg", "jpg", "png"})
SEGMENT_DEFINITION_EXTENSION = "json"


def normalized_extension(path: Path) -> str | None:
    """
    Get the lowercase extension of a path without its leading period.

    Args:
        path (Path): File path.

    Returns:
        str | None: The extension, or None if the path has none.
    """
    suffix = path.suffix
    if len(suffix) <= 1:
        return None
    return suffix[1:].lower()


def name_key(name: str) -> str:
    """
    Get the key segment names are compared by.

    Each character is upper-cased on its own; characters whose upper case is
    more than one character (such as "ß") are kept, so names never grow.

    Args:
        name (str): Segment name.

    Returns:
        str: Case-insensitive comparison key.
    """
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in name)


def get_duplicate_names(segments: Sequence[Segment]) -> list[str]:
    """
    Find segment names that repeat an earlier name, ignoring case.

    Args:
        segments (Sequence[Segment]): Segments in their supplied order.

    Returns:
        list[str]: Names of the second and later occurrences, in original casing.
    """
    seen: set[str] = set()
    duplicates: list[str] = []
    for segment in segments:
        key = name_key(segment.name)
        if key in seen:
            duplicates.append(segment.name)
        else:
            seen.add(key)
    return duplicates


def validate_segments(segments: Sequence[Segment]) -> None:
    """
    Validate a segment collection before any image work begins.

    Args:
        segments (Sequence[Segment]): Segments to validate.

    Raises:
        EmptySegmentSetError: If there are no segments.
        DuplicateSegmentNamesError: If names collide case-insensitively.
    """
    if not segments:
        raise EmptySegmentSetError()

    duplicates = get_duplicate_names(segments)
    if duplicates:
        raise DuplicateSegmentNamesError(duplicates)


def validate_files(files: Sequence[Path]) -> None:
    """
    Validate input image files by extension.

    Args:
        files (Sequence[Path]): Image files to validate.

    Raises:
        MissingExtensionError: If any file has no extension.
        UnsupportedExtensionError: If any extension is not a supported image format.
    """
    missing = [f for f in files if normalized_extension(f) is None]
    if missing:
        raise MissingExtensionError(missing)

    unsupported: list[str] = []
    for f in files:
        extension = normalized_extension(f)
        if extension not in SUPPORTED_EXTENSIONS and extension not in unsupported:
            unsupported.append(extension)
    if unsupported:
        raise UnsupportedExtensionError(unsupported)
