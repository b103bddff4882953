"""FHIR Period type."""

from fhir_r4.base import Element
from fhir_r4.primitives import DateTime


class Period(Element):
    start: DateTime | None = None
    end: DateTime | None = None
