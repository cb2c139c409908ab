"""Scaling model."""

from pydantic import BaseModel, ConfigDict, Field

from image_snipper.enums import InterpolationMode


class Scaling(BaseModel):
    """Integer upscaling applied uniformly to an extracted region."""

    factor: int = Field(ge=1, description="Integer scale factor (1 = no resampling)")
    mode: InterpolationMode | None = Field(
        default=None, description="Resampling algorithm (None = nearest neighbour)"
    )

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        json_schema_extra={
            "example": {
                "factor": 4,
                "mode": "nearestNeighbour",
            }
        },
    )

    @property
    def effective_mode(self) -> InterpolationMode:
        """
        Get the interpolation mode, resolving the default.

        Returns:
            InterpolationMode: The configured mode, or nearest neighbour if unset.
        """
        return self.mode or InterpolationMode.NEAREST_NEIGHBOUR


NO_SCALING = Scaling(factor=1)
