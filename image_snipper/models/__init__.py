"""Data models."""

from image_snipper.models.bounding_box import BoundingBox
from image_snipper.models.pattern import Pattern
from image_snipper.models.scaling import NO_SCALING, Scaling
from image_snipper.models.segment import Segment
from image_snipper.models.tile import Tile

__all__ = [
    "NO_SCALING",
    "BoundingBox",
    "Pattern",
    "Scaling",
    "Segment",
    "Tile",
]
