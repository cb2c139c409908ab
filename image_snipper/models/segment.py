"""Segment model."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from image_snipper.models.bounding_box import BoundingBox
from image_snipper.models.pattern import Pattern
from image_snipper.models.scaling import NO_SCALING, Scaling

# Characters that would let a segment name escape the source directory
FORBIDDEN_NAME_CHARACTERS = ("/", "\\", "\x00")


class Segment(BaseModel):
    """A named region to snip from every input image."""

    name: str = Field(min_length=1, description="Segment name, unique within a set")
    region: BoundingBox = Field(description="Region to snip")
    pattern: Pattern | None = Field(
        default=None, description="Tiling pattern (None = snip the region once)"
    )
    scaling: Scaling | None = Field(default=None, description="Output scaling (None = 1x)")

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "icons",
                "region": {"x": 4, "y": 4, "width": 16, "height": 16},
                "pattern": {
                    "cellSize": {"x": 0, "y": 0, "width": 18, "height": 18},
                    "horizontalCount": 8,
                },
                "scaling": {"factor": 2, "mode": "bicubic"},
            }
        },
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the name can be embedded in an output file name."""
        for character in FORBIDDEN_NAME_CHARACTERS:
            if character in v:
                raise ValueError(f"Segment name contains a forbidden character: {v!r}")
        return v

    @model_validator(mode="after")
    def validate_geometry(self) -> Self:
        """
        Validate the region and pattern describe a finite, non-empty snip.

        Returns:
            Segment: The validated segment.

        Raises:
            ValueError: If the region is empty or the pattern never advances on an
                unbounded axis.
        """
        if self.region.width == 0 or self.region.height == 0:
            raise ValueError(f"Segment '{self.name}' has an empty region")

        if self.pattern is not None:
            cell = self.pattern.cell_size or self.region
            if cell.width == 0 and self.pattern.horizontal_count is None:
                raise ValueError(
                    f"Segment '{self.name}' has a zero cell width and no horizontalCount"
                )
            if cell.height == 0 and self.pattern.vertical_count is None:
                raise ValueError(
                    f"Segment '{self.name}' has a zero cell height and no verticalCount"
                )

        return self

    @property
    def effective_scaling(self) -> Scaling:
        """
        Get the scaling to apply, resolving the default.

        Returns:
            Scaling: The configured scaling, or a 1x nearest neighbour scaling if unset.
        """
        return self.scaling or NO_SCALING
