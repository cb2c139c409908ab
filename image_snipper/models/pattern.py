"""Pattern model."""

from pydantic import BaseModel, ConfigDict, Field

from image_snipper.models.bounding_box import BoundingBox


class Pattern(BaseModel):
    """Rule for repeating a segment across a grid of cells."""

    cell_size: BoundingBox | None = Field(
        default=None,
        alias="cellSize",
        description="Cell offset and stride (None = use the segment region as the cell)",
    )
    horizontal_count: int | None = Field(
        default=None,
        ge=0,
        alias="horizontalCount",
        description="Number of cells per row (None = until the image edge)",
    )
    vertical_count: int | None = Field(
        default=None,
        ge=0,
        alias="verticalCount",
        description="Number of rows (None = until the image edge)",
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "cellSize": {"x": 0, "y": 0, "width": 18, "height": 18},
                "horizontalCount": 8,
                "verticalCount": None,
            }
        },
    )
