"""Pytest configuration and fixtures."""

import json
import pathlib
from collections.abc import Callable

import cv2
import numpy as np
import pytest

from image_snipper.core.settings import AppSettings, reload_settings
from image_snipper.core.settings.app_settings import LoggingSettings, OutputSettings
from image_snipper.models import BoundingBox, Segment


@pytest.fixture
def mock_settings() -> AppSettings:
    """
    Create application settings for testing.

        AppSettings: Settings instance with lossless PNG output.
    """
    return AppSettings(
        output=OutputSettings(jpeg_quality=95, png_compression=1),
        logging=LoggingSettings(
            log_level="DEBUG",
            log_format="%(message)s",
        ),
    )


@pytest.fixture
def gradient_image() -> np.ndarray:
    """
    Create a 100x100 BGR image where every pixel is unique.

        np.ndarray: Image with x in the blue channel and y in the green channel.
    """
    ys, xs = np.mgrid[0:100, 0:100]
    img = np.zeros((100, 100, 3), dtype=np.uint8)
    img[..., 0] = xs
    img[..., 1] = ys
    img[..., 2] = 200
    return img


@pytest.fixture
def write_image_file(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """
    Create a helper that encodes an image into tmp_path.

    Args:
        tmp_path (pathlib.Path): Pytest fixture for temporary directory.

        Callable[..., pathlib.Path]: Helper taking a file name and an image.
    """

    def _write(name: str, img: np.ndarray) -> pathlib.Path:
        path = tmp_path / name
        ok, buffer = cv2.imencode(path.suffix, img)
        assert ok
        path.write_bytes(buffer.tobytes())
        return path

    return _write


@pytest.fixture
def write_segments_file(tmp_path: pathlib.Path) -> Callable[..., pathlib.Path]:
    """
    Create a helper that writes segment records as JSON into tmp_path.

    Args:
        tmp_path (pathlib.Path): Pytest fixture for temporary directory.

        Callable[..., pathlib.Path]: Helper taking a file name and a list of records.
    """

    def _write(name: str, records: list[dict]) -> pathlib.Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def simple_segment() -> Segment:
    """
    Create an unpatterned, unscaled segment.

        Segment: A 10x20 segment at (5, 10).
    """
    return Segment(name="box", region=BoundingBox(x=5, y=10, width=10, height=20))


@pytest.fixture(autouse=True)
def reset_settings_cache() -> None:
    """
    Reset settings cache before each test.

    """
    reload_settings()
