"""Image template - snips segments out of image files."""

import logging
from collections.abc import Sequence
from pathlib import Path

from image_snipper.core.cancellation import CancellationToken
from image_snipper.core.settings import AppSettings, get_settings
from image_snipper.models import Segment
from image_snipper.services.codec import read_image, write_image
from image_snipper.services.extraction import extract_region
from image_snipper.services.naming import OutputNamer
from image_snipper.services.tiling import expand_segment
from image_snipper.services.validation import validate_files, validate_segments

logger = logging.getLogger(__name__)


class ImageTemplate:
    """A validated set of segments to snip from a set of image files."""

    def __init__(
        self,
        segments: Sequence[Segment],
        files: Sequence[Path],
        settings: AppSettings,
    ) -> None:
        """
        Initialize the template. Use create() to validate the inputs.

        Args:
            segments (Sequence[Segment]): Segments to snip from every file.
            files (Sequence[Path]): Image files to snip from.
            settings (AppSettings): Application settings instance.
        """
        self.segments = tuple(segments)
        self.files = tuple(files)
        self.settings = settings

    @classmethod
    def create(
        cls,
        segments: Sequence[Segment],
        files: Sequence[Path],
        settings: AppSettings | None = None,
    ) -> "ImageTemplate":
        """
        Validate the inputs and create a template.

        Args:
            segments (Sequence[Segment]): Segments to snip from every file.
            files (Sequence[Path]): Image files to snip from.
            settings (AppSettings | None): Settings (None = global settings).

        Returns:
            ImageTemplate: The validated template.

        Raises:
            SegmentValidationError: If the segments are empty or have duplicate names.
            FileValidationError: If a file has a missing or unsupported extension.
        """
        validate_segments(segments)
        validate_files(files)
        return cls(segments=segments, files=files, settings=settings or get_settings())

    def execute(self, cancellation: CancellationToken | None = None) -> list[Path]:
        """
        Snip every segment out of every file.

        Files and segments are processed in the order given; each file is decoded
        once. The first error aborts the run and files already written are kept.

        Args:
            cancellation (CancellationToken | None): Polled before every file,
                segment and tile.

        Returns:
            list[Path]: Written output files, in the order they were written.

        Raises:
            OperationCancelledError: If cancellation is requested.
            SnipperError: If any image cannot be read, extracted or written.
        """
        cancellation = cancellation or CancellationToken()
        namer = OutputNamer()
        written: list[Path] = []

        cancellation.raise_if_cancelled()
        for file in self.files:
            cancellation.raise_if_cancelled()
            logger.info(f"Snipping {len(self.segments)} segment(s) from {file}")

            image = read_image(file)
            image_height, image_width = image.shape[:2]

            for segment in self.segments:
                cancellation.raise_if_cancelled()
                scaling = segment.effective_scaling

                for tile in expand_segment(
                    segment=segment,
                    image_width=image_width,
                    image_height=image_height,
                    cancellation=cancellation,
                ):
                    buffer = extract_region(image=image, region=tile.region, scaling=scaling)
                    output = namer.reserve(input_path=file, tile_name=tile.name)
                    write_image(path=output, image=buffer, settings=self.settings.output)
                    logger.debug(f"Wrote tile {tile.name} to {output}")
                    written.append(output)

        logger.info(f"Wrote {len(written)} file(s) from {len(self.files)} image(s)")
        return written
