"""Factory that recognises image snipping inputs."""

import logging
from collections.abc import Sequence
from pathlib import Path

from image_snipper.core.exceptions import SnipperError
from image_snipper.core.settings import AppSettings
from image_snipper.models import Segment
from image_snipper.services.image_template import ImageTemplate
from image_snipper.services.segment_loader import load_segments
from image_snipper.services.template_registry import ProbeResult, ProbeStatus
from image_snipper.services.validation import SEGMENT_DEFINITION_EXTENSION, normalized_extension

logger = logging.getLogger(__name__)


class ImageTemplateFactory:
    """
    Builds an ImageTemplate from a mix of JSON segment files and image files.

    Every JSON file holds segments that apply to every image file.
    """

    name = "image"

    def __init__(self, settings: AppSettings | None = None) -> None:
        """
        Initialize the factory.

        Args:
            settings (AppSettings | None): Settings passed to created templates.
        """
        self.settings = settings

    def probe(self, paths: Sequence[Path]) -> ProbeResult:
        """
        Check whether the paths describe an image snipping job and build it.

        Args:
            paths (Sequence[Path]): Input paths.

        Returns:
            ProbeResult: Not applicable unless every path is an existing file;
                malformed if segments or files are invalid; applicable otherwise.
        """
        for path in paths:
            if not path.is_file():
                return ProbeResult(
                    status=ProbeStatus.NOT_APPLICABLE,
                    factory=self.name,
                    reason=f"Not an existing file: {path}",
                )

        segments: list[Segment] = []
        files: list[Path] = []
        try:
            for path in paths:
                if normalized_extension(path) == SEGMENT_DEFINITION_EXTENSION:
                    segments.extend(load_segments(path))
                else:
                    files.append(path)

            template = ImageTemplate.create(
                segments=segments,
                files=files,
                settings=self.settings,
            )
        except SnipperError as e:
            logger.debug(f"Image template inputs are malformed: {e}")
            return ProbeResult(status=ProbeStatus.MALFORMED, factory=self.name, error=e)

        return ProbeResult(status=ProbeStatus.APPLICABLE, factory=self.name, template=template)
