"""Tests for image_snipper package initialization."""

import image_snipper


class TestPackageInit:
    """Tests for package initialization."""

    def test_version_exists(self) -> None:
        """
        Test that __version__ is defined.

        Returns:
            None
        """
        assert hasattr(image_snipper, "__version__")

    def test_version_format(self) -> None:
        """
        Test that __version__ follows semantic versioning format.

        Returns:
            None
        """
        parts = image_snipper.__version__.split(".")
        assert len(parts) >= 2
        assert parts[0].isdigit()
        assert parts[1].isdigit()
