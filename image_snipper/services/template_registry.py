"""Selection of the template that understands a set of input paths."""

import logging
from collections.abc import Sequence
from enum import StrEnum
from pathlib import Path
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from image_snipper.core.cancellation import CancellationToken

logger = logging.getLogger(__name__)


class ProbeStatus(StrEnum):
    """Outcome of asking a factory whether it understands a set of inputs."""

    NOT_APPLICABLE = "not_applicable"
    APPLICABLE = "applicable"
    MALFORMED = "malformed"


@runtime_checkable
class Template(Protocol):
    """A runnable unit of snipping work."""

    def execute(self, cancellation: CancellationToken | None = None) -> list[Path]: ...


class ProbeResult(BaseModel):
    """Result of probing one factory."""

    status: ProbeStatus = Field(description="Whether the factory understood the inputs")
    factory: str | None = Field(default=None, description="Name of the answering factory")
    template: Template | None = Field(default=None, description="Template, when applicable")
    error: Exception | None = Field(
        default=None, description="Why the inputs were rejected, when malformed"
    )
    reason: str | None = Field(default=None, description="Why the factory did not apply")

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)


class TemplateFactory(Protocol):
    """Builds a template for the inputs it understands."""

    name: str

    def probe(self, paths: Sequence[Path]) -> ProbeResult: ...


class TemplateRegistry:
    """An ordered list of template factories, tried in priority order."""

    def __init__(self, factories: Sequence[TemplateFactory]) -> None:
        """
        Initialize the registry.

        Args:
            factories (Sequence[TemplateFactory]): Factories, highest priority first.
        """
        self.factories = tuple(factories)

    def resolve(self, paths: Sequence[Path]) -> ProbeResult:
        """
        Find the first factory that recognises the inputs.

        A malformed result stops the search: the factory recognised the inputs,
        so a lower priority factory must not silently take them.

        Args:
            paths (Sequence[Path]): Input paths.

        Returns:
            ProbeResult: The first applicable or malformed result, otherwise a
                not-applicable result.
        """
        for factory in self.factories:
            result = factory.probe(paths)
            if result.status is ProbeStatus.NOT_APPLICABLE:
                logger.debug(f"Template '{factory.name}' does not apply: {result.reason}")
                continue
            return result

        return ProbeResult(
            status=ProbeStatus.NOT_APPLICABLE,
            reason="No registered template can handle the specified files.",
        )
