"""Interpolation mode enum."""

from enum import StrEnum


class InterpolationMode(StrEnum):
    """Resampling algorithm used when an extracted region is scaled."""

    NEAREST_NEIGHBOUR = "nearestNeighbour"
    BILINEAR = "bilinear"
    BICUBIC = "bicubic"
