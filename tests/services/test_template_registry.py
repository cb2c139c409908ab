"""Tests for template selection."""

import pathlib
from collections.abc import Callable, Sequence
from unittest.mock import MagicMock

import numpy as np

from image_snipper.core.exceptions import (
    EmptySegmentSetError,
    SegmentDefinitionError,
    UnsupportedExtensionError,
)
from image_snipper.core.settings import AppSettings
from image_snipper.services.image_template import ImageTemplate
from image_snipper.services.image_template_factory import ImageTemplateFactory
from image_snipper.services.template_registry import (
    ProbeResult,
    ProbeStatus,
    TemplateRegistry,
)

SEGMENT_RECORD = {"name": "a", "region": {"x": 0, "y": 0, "width": 2, "height": 2}}


class StubFactory:
    """Factory returning a fixed probe result."""

    def __init__(self, name: str, result: ProbeResult) -> None:
        self.name = name
        self.result = result
        self.calls = 0

    def probe(self, paths: Sequence[pathlib.Path]) -> ProbeResult:
        self.calls += 1
        return self.result


class TestTemplateRegistry:
    """Tests for TemplateRegistry.resolve."""

    def test_first_applicable_wins(self) -> None:
        """
        Test that factories are tried in order and the first match is used.

        """
        template = MagicMock()
        skipped = StubFactory("skip", ProbeResult(status=ProbeStatus.NOT_APPLICABLE))
        chosen = StubFactory(
            "chosen",
            ProbeResult(status=ProbeStatus.APPLICABLE, factory="chosen", template=template),
        )
        unused = StubFactory(
            "unused",
            ProbeResult(status=ProbeStatus.APPLICABLE, factory="unused", template=MagicMock()),
        )
        registry = TemplateRegistry(factories=[skipped, chosen, unused])

        result = registry.resolve([])

        assert result.status is ProbeStatus.APPLICABLE
        assert result.template is template
        assert skipped.calls == 1
        assert unused.calls == 0

    def test_malformed_stops_search(self) -> None:
        """
        Test that a malformed result is returned instead of trying further.

        """
        error = ValueError("broken")
        malformed = StubFactory(
            "broken",
            ProbeResult(status=ProbeStatus.MALFORMED, factory="broken", error=error),
        )
        fallback = StubFactory(
            "fallback",
            ProbeResult(status=ProbeStatus.APPLICABLE, template=MagicMock()),
        )
        registry = TemplateRegistry(factories=[malformed, fallback])

        result = registry.resolve([])

        assert result.status is ProbeStatus.MALFORMED
        assert result.error is error
        assert fallback.calls == 0

    def test_nothing_applicable(self) -> None:
        """
        Test the result when no factory applies.

        """
        registry = TemplateRegistry(
            factories=[StubFactory("skip", ProbeResult(status=ProbeStatus.NOT_APPLICABLE))]
        )
        result = registry.resolve([])
        assert result.status is ProbeStatus.NOT_APPLICABLE
        assert result.template is None
        assert result.reason is not None

    def test_empty_registry(self) -> None:
        """
        Test that an empty registry never applies.

        """
        assert TemplateRegistry(factories=[]).resolve([]).status is ProbeStatus.NOT_APPLICABLE

    def test_registries_are_independent(self) -> None:
        """
        Test that each registry holds its own factories.

        """
        first = TemplateRegistry(factories=[ImageTemplateFactory()])
        second = TemplateRegistry(factories=[])
        assert len(first.factories) == 1
        assert second.factories == ()


class TestImageTemplateFactory:
    """Tests for ImageTemplateFactory.probe."""

    def test_applicable(
        self,
        gradient_image: np.ndarray,
        mock_settings: AppSettings,
        write_image_file: Callable[..., pathlib.Path],
        write_segments_file: Callable[..., pathlib.Path],
    ) -> None:
        """
        Test that JSON segments and images produce a template.

        Args:
            gradient_image (np.ndarray): Gradient image fixture.
            mock_settings (AppSettings): Settings fixture.
            write_image_file (Callable[..., pathlib.Path]): Image writer fixture.
            write_segments_file (Callable[..., pathlib.Path]): Segment file writer fixture.

        """
        image = write_image_file("photo.png", gradient_image)
        segments = write_segments_file("segments.json", [SEGMENT_RECORD])

        result = ImageTemplateFactory(settings=mock_settings).probe([segments, image])

        assert result.status is ProbeStatus.APPLICABLE
        assert result.factory == "image"
        assert isinstance(result.template, ImageTemplate)
        assert result.template.files == (image,)
        assert [s.name for s in result.template.segments] == ["a"]
        assert result.template.settings is mock_settings

    def test_segments_from_several_files_are_combined(
        self,
        gradient_image: np.ndarray,
        write_image_file: Callable[..., pathlib.Path],
        write_segments_file: Callable[..., pathlib.Path],
    ) -> None:
        """
        Test that every JSON file contributes segments in argument order.

        Args:
            gradient_image (np.ndarray): Gradient image fixture.
            write_image_file (Callable[..., pathlib.Path]): Image writer fixture.
            write_segments_file (Callable[..., pathlib.Path]): Segment file writer fixture.

        """
        image = write_image_file("photo.png", gradient_image)
        first = write_segments_file("one.json", [SEGMENT_RECORD])
        second = write_segments_file("two.JSON", [{**SEGMENT_RECORD, "name": "b"}])

        result = ImageTemplateFactory().probe([first, image, second])

        assert isinstance(result.template, ImageTemplate)
        assert [s.name for s in result.template.segments] == ["a", "b"]

    def test_missing_path_not_applicable(self, tmp_path: pathlib.Path) -> None:
        """
        Test that a path that is not an existing file makes the factory not apply.

        Args:
            tmp_path (pathlib.Path): Pytest fixture for temporary directory.

        """
        result = ImageTemplateFactory().probe([tmp_path / "missing.png"])
        assert result.status is ProbeStatus.NOT_APPLICABLE
        assert "missing.png" in (result.reason or "")

    def test_directory_not_applicable(self, tmp_path: pathlib.Path) -> None:
        """
        Test that a directory argument makes the factory not apply.

        Args:
            tmp_path (pathlib.Path): Pytest fixture for temporary directory.

        """
        assert ImageTemplateFactory().probe([tmp_path]).status is ProbeStatus.NOT_APPLICABLE

    def test_broken_json_is_malformed(self, tmp_path: pathlib.Path) -> None:
        """
        Test that an unparsable segment file is reported, not swallowed.

        Args:
            tmp_path (pathlib.Path): Pytest fixture for temporary directory.

        """
        path = tmp_path / "segments.json"
        path.write_text("{not json", encoding="utf-8")

        result = ImageTemplateFactory().probe([path])

        assert result.status is ProbeStatus.MALFORMED
        assert isinstance(result.error, SegmentDefinitionError)

    def test_no_segments_is_malformed(
        self,
        gradient_image: np.ndarray,
        write_image_file: Callable[..., pathlib.Path],
    ) -> None:
        """
        Test that images without segment files are reported as empty.

        Args:
            gradient_image (np.ndarray): Gradient image fixture.
            write_image_file (Callable[..., pathlib.Path]): Image writer fixture.

        """
        image = write_image_file("photo.png", gradient_image)
        result = ImageTemplateFactory().probe([image])
        assert result.status is ProbeStatus.MALFORMED
        assert isinstance(result.error, EmptySegmentSetError)

    def test_unsupported_image_is_malformed(
        self,
        tmp_path: pathlib.Path,
        write_segments_file: Callable[..., pathlib.Path],
    ) -> None:
        """
        Test that an unsupported image extension is reported.

        Args:
            tmp_path (pathlib.Path): Pytest fixture for temporary directory.
            write_segments_file (Callable[..., pathlib.Path]): Segment file writer fixture.

        """
        other = tmp_path / "anim.gif"
        other.write_bytes(b"GIF89a")
        segments = write_segments_file("segments.json", [SEGMENT_RECORD])

        result = ImageTemplateFactory().probe([segments, other])

        assert result.status is ProbeStatus.MALFORMED
        assert isinstance(result.error, UnsupportedExtensionError)
