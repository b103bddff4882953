"""FHIR Dosage type."""

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes.codeable_concept import CodeableConcept


class Dosage(BackboneElement):
    """
    How a medication is to be taken.

    ``timing`` and ``doseAndRate`` are not modelled and are kept as extras.
    """

    sequence: int | None = None
    text: str | None = None
    additionalInstruction: list[CodeableConcept] | None = None
    patientInstruction: str | None = None
    asNeededBoolean: bool | None = None
    asNeededCodeableConcept: CodeableConcept | None = None
    site: CodeableConcept | None = None
    route: CodeableConcept | None = None
    method: CodeableConcept | None = None

    fhir_choices = {"asNeeded": ("asNeededBoolean", "asNeededCodeableConcept")}
