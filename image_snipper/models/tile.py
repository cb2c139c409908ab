"""Tile model."""

from pydantic import BaseModel, ConfigDict, Field

from image_snipper.models.bounding_box import BoundingBox


class Tile(BaseModel):
    """A concrete region produced by expanding a segment against an image."""

    name: str = Field(description="Generated tile name")
    region: BoundingBox = Field(description="Region within the source image")

    model_config = ConfigDict(extra="forbid", frozen=True)
