"""Snipping services."""

from image_snipper.services.extraction import extract_region
from image_snipper.services.image_template import ImageTemplate
from image_snipper.services.image_template_factory import ImageTemplateFactory
from image_snipper.services.naming import OutputNamer, next_output_path
from image_snipper.services.segment_loader import load_segments, parse_segments
from image_snipper.services.template_registry import (
    ProbeResult,
    ProbeStatus,
    TemplateRegistry,
)
from image_snipper.services.tiling import expand_segment
from image_snipper.services.validation import validate_files, validate_segments

__all__ = [
    "ImageTemplate",
    "ImageTemplateFactory",
    "OutputNamer",
    "ProbeResult",
    "ProbeStatus",
    "TemplateRegistry",
    "expand_segment",
    "extract_region",
    "load_segments",
    "next_output_path",
    "parse_segments",
    "validate_files",
    "validate_segments",
]
