"""FHIR Meta type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.coding import Coding
from fhir_r4.primitives import Instant


class Meta(Element):
    versionId: str | None = None
    lastUpdated: Instant | None = None
    source: str | None = None
    profile: list[str] | None = None
    security: list[Coding] | None = None
    tag: list[Coding] | None = None
