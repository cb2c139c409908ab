"""Extraction and resampling of image regions."""

import logging

import cv2
import numpy as np
from cv2.typing import MatLike

from image_snipper.core.exceptions import ExtractionError, RegionOutOfBoundsError
from image_snipper.core.utils import checked_add, checked_mul
from image_snipper.enums import InterpolationMode
from image_snipper.models import NO_SCALING, BoundingBox, Scaling

logger = logging.getLogger(__name__)

INTERPOLATION_FLAGS: dict[InterpolationMode, int] = {
    InterpolationMode.NEAREST_NEIGHBOUR: cv2.INTER_NEAREST,
    InterpolationMode.BILINEAR: cv2.INTER_LINEAR,
    InterpolationMode.BICUBIC: cv2.INTER_CUBIC,
}


def output_size(region: BoundingBox, scaling: Scaling) -> tuple[int, int]:
    """
    Calculate the size of the buffer a region is extracted into.

    Args:
        region (BoundingBox): Source region.
        scaling (Scaling): Scaling to apply.

    Returns:
        tuple[int, int]: (width, height) of the output buffer.

    Raises:
        DimensionOverflowError: If either dimension exceeds the dimension range.
    """
    return (
        checked_mul(region.width, scaling.factor),
        checked_mul(region.height, scaling.factor),
    )


def extract_region(
    image: MatLike,
    region: BoundingBox,
    scaling: Scaling | None = None,
) -> np.ndarray:
    """
    Copy a region of an image into a new, optionally upscaled, buffer.

    The output has the same dtype and channel count as the source. A factor of 1
    is an exact crop; otherwise the crop is resampled with the scaling mode.

    Args:
        image (MatLike): Decoded source image.
        region (BoundingBox): Region to extract.
        scaling (Scaling | None): Scaling to apply (None = 1x).

    Returns:
        np.ndarray: The extracted pixels.

    Raises:
        DimensionOverflowError: If the output size exceeds the dimension range.
        RegionOutOfBoundsError: If the region does not lie within the image.
        ExtractionError: If OpenCV fails to resample the region.
    """
    scaling = scaling or NO_SCALING
    width, height = output_size(region=region, scaling=scaling)

    image_height, image_width = image.shape[:2]
    right = checked_add(region.x, region.width)
    bottom = checked_add(region.y, region.height)
    if right > image_width or bottom > image_height:
        raise RegionOutOfBoundsError(
            f"Region ({region.x}, {region.y}, {region.width}x{region.height}) "
            f"lies outside the {image_width}x{image_height} image"
        )

    crop = image[region.y : bottom, region.x : right]
    if scaling.factor == 1:
        return crop.copy()

    try:
        return cv2.resize(
            src=crop,
            dsize=(width, height),
            interpolation=INTERPOLATION_FLAGS[scaling.effective_mode],
        )
    except cv2.error as e:
        logger.error(f"OpenCV error while resampling region: {e}")
        raise ExtractionError("Image resampling error") from e
