"""Enumerations."""

from image_snipper.enums.interpolation_mode import InterpolationMode

__all__ = ["InterpolationMode"]
