"""Exception hierarchy."""

from pathlib import Path


class SnipperError(Exception):
    """Base class for all processing errors."""


class SegmentValidationError(SnipperError, ValueError):
    """The segment collection cannot be used."""


class EmptySegmentSetError(SegmentValidationError):
    """No segments were supplied."""

    def __init__(self) -> None:
        super().__init__(
            "The specified segment collection is empty. At least one segment must be specified."
        )


class DuplicateSegmentNamesError(SegmentValidationError):
    """Two or more segments share a name, ignoring case."""

    def __init__(self, names: list[str]) -> None:
        self.names = names
        super().__init__(
            "The specified segment collection contains duplicate names. "
            f"Duplicate names: {', '.join(names)}"
        )


class FileValidationError(SnipperError, ValueError):
    """The input file collection cannot be used."""


class MissingExtensionError(FileValidationError):
    """One or more input files have no extension."""

    def __init__(self, files: list[Path]) -> None:
        self.files = files
        super().__init__(
            "The specified file collection contains files with no file extension. "
            f"Missing extensions: {', '.join(str(f) for f in files)}"
        )


class UnsupportedExtensionError(FileValidationError):
    """One or more input files have an extension no codec is registered for."""

    def __init__(self, extensions: list[str]) -> None:
        self.extensions = extensions
        super().__init__(
            "The specified file collection contains unsupported file extensions. "
            f"Unsupported extensions: {', '.join(extensions)}"
        )


class SegmentDefinitionError(SnipperError, ValueError):
    """A segment definition file could not be read or parsed."""


class DimensionOverflowError(SnipperError, OverflowError):
    """A region or buffer dimension exceeds the representable range."""


class RegionOutOfBoundsError(SnipperError, ValueError):
    """A region does not lie within the image it is read from."""


class ExtractionError(SnipperError, RuntimeError):
    """Pixels could not be copied or resampled out of an image."""


class ImageIOError(SnipperError, RuntimeError):
    """An image could not be read or written."""


class ImageDecodeError(ImageIOError):
    """An image file could not be decoded."""


class ImageEncodeError(ImageIOError):
    """An image buffer could not be encoded or written."""


class OperationCancelledError(Exception):
    """The caller requested the run to stop."""

    def __init__(self, message: str = "The operation was cancelled.") -> None:
        super().__init__(message)
