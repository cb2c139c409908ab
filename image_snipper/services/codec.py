"""Image decoding and encoding through OpenCV."""

import logging
from pathlib import Path

import cv2
import numpy as np
from cv2.typing import MatLike

from image_snipper.core.exceptions import ImageDecodeError, ImageEncodeError
from image_snipper.core.settings.app_settings import OutputSettings
from image_snipper.services.validation import normalized_extension

logger = logging.getLogger(__name__)


def read_image(path: Path) -> MatLike:
    """
    Read and decode an image, keeping its channels and bit depth.

    Args:
        path (Path): Image file to read.

    Returns:
        MatLike: Decoded image.

    Raises:
        ImageDecodeError: If the file cannot be read or decoded.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ImageDecodeError(f"Failed to read image {path}: {e}") from e

    try:
        buffer = np.frombuffer(buffer=data, dtype=np.uint8)
        image = cv2.imdecode(buf=buffer, flags=cv2.IMREAD_UNCHANGED)
    except cv2.error as e:
        logger.error(f"OpenCV error while decoding {path}: {e}")
        raise ImageDecodeError(f"Failed to decode image: {path}") from e

    if image is None:
        raise ImageDecodeError(f"Failed to decode image: {path}")

    return image


def encode_params(extension: str, settings: OutputSettings) -> list[int]:
    """
    Get the OpenCV encoder parameters for an output format.

    Args:
        extension (str): Normalised output extension.
        settings (OutputSettings): Encoder settings.

    Returns:
        list[int]: Flat list of OpenCV imwrite flag/value pairs.
    """
    if extension in ("jpg", "jpeg"):
        return [cv2.IMWRITE_JPEG_QUALITY, settings.jpeg_quality]
    if extension == "png":
        return [cv2.IMWRITE_PNG_COMPRESSION, settings.png_compression]
    return []


def write_image(path: Path, image: MatLike, settings: OutputSettings) -> None:
    """
    Encode an image in the format named by the path's extension and write it.

    The file is created exclusively; an existing file is never overwritten.

    Args:
        path (Path): Destination file.
        image (MatLike): Pixels to encode.
        settings (OutputSettings): Encoder settings.

    Raises:
        ImageEncodeError: If encoding fails or the file cannot be created.
    """
    extension = normalized_extension(path)
    if extension is None:
        raise ImageEncodeError(f"Cannot choose an image format for {path}")

    try:
        ok, encoded = cv2.imencode(f".{extension}", image, encode_params(extension, settings))
    except cv2.error as e:
        logger.error(f"OpenCV error while encoding {path}: {e}")
        raise ImageEncodeError(f"Failed to encode image: {path}") from e

    if not ok:
        raise ImageEncodeError(f"Failed to encode image: {path}")

    try:
        with open(path, "xb") as f:
            f.write(encoded.tobytes())
    except OSError as e:
        raise ImageEncodeError(f"Failed to write image {path}: {e}") from e
