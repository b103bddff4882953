"""FHIR Annotation type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.reference import Reference
from fhir_r4.primitives import DateTime


class Annotation(Element):
    authorReference: Reference | None = None
    authorString: str | None = None
    time: DateTime | None = None
    text: str | None = None

    fhir_required = frozenset({"text"})
    fhir_choices = {"author": ("authorReference", "authorString")}
