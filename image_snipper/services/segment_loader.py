"""Loading of segment definitions from JSON."""

import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from image_snipper.core.exceptions import SegmentDefinitionError
from image_snipper.models import Segment

logger = logging.getLogger(__name__)

SEGMENT_LIST_ADAPTER: TypeAdapter[list[Segment]] = TypeAdapter(list[Segment])


def parse_segments(data: str | bytes, source: str = "<input>") -> list[Segment]:
    """
    Parse a JSON array of segment definitions.

    A leading UTF-8 byte order mark is ignored.

    Args:
        data (str | bytes): JSON document.
        source (str): Where the document came from, for error messages.

    Returns:
        list[Segment]: Parsed segments in document order.

    Raises:
        SegmentDefinitionError: If the document is not a valid segment list.
    """
    # Editors on Windows often save JSON with a UTF-8 byte order mark
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise SegmentDefinitionError(f"Invalid segment definitions in {source}: {e}") from e
    else:
        data = data.removeprefix("\ufeff")

    try:
        return SEGMENT_LIST_ADAPTER.validate_json(data)
    except ValidationError as e:
        raise SegmentDefinitionError(f"Invalid segment definitions in {source}: {e}") from e


def load_segments(path: Path) -> list[Segment]:
    """
    Load segment definitions from a JSON file.

    Args:
        path (Path): JSON file holding an array of segment records.

    Returns:
        list[Segment]: Parsed segments in file order.

    Raises:
        SegmentDefinitionError: If the file cannot be read or parsed.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SegmentDefinitionError(f"Failed to read segment definitions {path}: {e}") from e

    segments = parse_segments(data=data, source=str(path))
    logger.debug(f"Loaded {len(segments)} segment(s) from {path}")
    return segments


def segment_list_schema() -> dict[str, Any]:
    """
    Get the JSON schema of a segment definition file.

    Returns:
        dict[str, Any]: JSON schema using the camelCase field names.
    """
    return SEGMENT_LIST_ADAPTER.json_schema(by_alias=True)
