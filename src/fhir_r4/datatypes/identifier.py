"""FHIR Identifier type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.codeable_concept import CodeableConcept
from fhir_r4.datatypes.period import Period
from fhir_r4.datatypes.reference import Reference


class Identifier(Element):
    use: str | None = None
    type: CodeableConcept | None = None
    system: str | None = None
    value: str | None = None
    period: Period | None = None
    assigner: Reference | None = None

    fhir_codes = {"use": frozenset({"usual", "official", "temp", "secondary", "old"})}
