"""Expansion of segments into concrete tiles."""

from collections.abc import Iterator

from image_snipper.core.cancellation import CancellationToken
from image_snipper.core.utils import checked_add, checked_mul
from image_snipper.models import BoundingBox, Segment, Tile


def _cell_for(segment: Segment) -> BoundingBox:
    """
    Get the cell describing the pattern offset and stride of a segment.

    Args:
        segment (Segment): Patterned segment.

    Returns:
        BoundingBox: The explicit cell size, or the segment region at zero offset.
    """
    if segment.pattern is not None and segment.pattern.cell_size is not None:
        return segment.pattern.cell_size
    return BoundingBox(x=0, y=0, width=segment.region.width, height=segment.region.height)


def expand_segment(
    segment: Segment,
    image_width: int,
    image_height: int,
    cancellation: CancellationToken | None = None,
) -> Iterator[Tile]:
    """
    Expand a segment into the tiles that fit within an image.

    Unpatterned segments yield themselves unchanged and are not checked against
    the image. Patterned segments are scanned row by row: a cell past the right
    edge ends its row, a row past the bottom edge ends the expansion.

    Args:
        segment (Segment): Segment to expand.
        image_width (int): Width of the image the tiles are cut from.
        image_height (int): Height of the image the tiles are cut from.
        cancellation (CancellationToken | None): Polled before every row and cell.

    Yields:
        Tile: Tiles named "{segment}.{column}.{row}" in row-major order.

    Raises:
        DimensionOverflowError: If a tile coordinate exceeds the dimension range.
        OperationCancelledError: If cancellation is requested mid-expansion.
    """
    pattern = segment.pattern
    region = segment.region

    if pattern is None:
        yield Tile(name=segment.name, region=region)
        return

    cell = _cell_for(segment)

    y_pos = 0
    while pattern.vertical_count is None or y_pos < pattern.vertical_count:
        if cancellation is not None:
            cancellation.raise_if_cancelled()

        y = checked_add(region.y, cell.y, checked_mul(y_pos, cell.height))
        if checked_add(y, region.height) > image_height:
            # Every later row starts lower still
            return

        x_pos = 0
        while pattern.horizontal_count is None or x_pos < pattern.horizontal_count:
            if cancellation is not None:
                cancellation.raise_if_cancelled()

            x = checked_add(region.x, cell.x, checked_mul(x_pos, cell.width))
            if checked_add(x, region.width) > image_width:
                break

            yield Tile(
                name=f"{segment.name}.{x_pos}.{y_pos}",
                region=BoundingBox(x=x, y=y, width=region.width, height=region.height),
            )
            x_pos += 1

        y_pos += 1
