"""Image Snipper - batch extraction of named segments from images."""

__version__ = "1.0.0"
