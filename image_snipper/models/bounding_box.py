"""Bounding box model."""

from pydantic import BaseModel, ConfigDict, Field


class BoundingBox(BaseModel):
    """A rectangle in source image pixel coordinates, with a top-left origin."""

    x: int = Field(ge=0, description="Left x coordinate")
    y: int = Field(ge=0, description="Top y coordinate")
    width: int = Field(ge=0, description="Width in pixels")
    height: int = Field(ge=0, description="Height in pixels")

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        json_schema_extra={
            "example": {
                "x": 16,
                "y": 32,
                "width": 64,
                "height": 48,
            }
        },
    )
