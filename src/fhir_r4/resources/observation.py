"""FHIR Observation resource."""

from typing import Any, Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    Annotation,
    CodeableConcept,
    Identifier,
    Period,
    Quantity,
    Range,
    Ratio,
    Reference,
)
from fhir_r4.primitives import DateTime, Instant, Time
from fhir_r4.resource import DomainResource

_VALUE_ELEMENTS = (
    "valueQuantity",
    "valueCodeableConcept",
    "valueString",
    "valueBoolean",
    "valueInteger",
    "valueRange",
    "valueRatio",
    "valueTime",
    "valueDateTime",
    "valuePeriod",
)


class ObservationReferenceRange(BackboneElement):
    low: Quantity | None = None
    high: Quantity | None = None
    type: CodeableConcept | None = None
    appliesTo: list[CodeableConcept] | None = None
    age: Range | None = None
    text: str | None = None


class ObservationComponent(BackboneElement):
    """A component observation, e.g. the systolic half of a blood pressure."""

    code: CodeableConcept | None = None
    valueQuantity: Quantity | None = None
    valueCodeableConcept: CodeableConcept | None = None
    valueString: str | None = None
    valueBoolean: bool | None = None
    valueInteger: int | None = None
    valueRange: Range | None = None
    valueRatio: Ratio | None = None
    valueTime: Time | None = None
    valueDateTime: DateTime | None = None
    valuePeriod: Period | None = None
    dataAbsentReason: CodeableConcept | None = None
    interpretation: list[CodeableConcept] | None = None
    referenceRange: list[ObservationReferenceRange] | None = None

    fhir_required = frozenset({"code"})
    fhir_choices = {"value": _VALUE_ELEMENTS}

    @property
    def value(self) -> Any:
        return self.choice("value")


class Observation(DomainResource):
    """
    Measurements and simple assertions made about a patient, device or other
    subject.

    ``value[x]`` and ``effective[x]`` are choice elements: set exactly one of
    the alternatives and read the populated one back through :attr:`value`
    and :attr:`effective`.
    """

    resourceType: Literal["Observation"] = "Observation"
    identifier: list[Identifier] | None = None
    basedOn: list[Reference] | None = None
    partOf: list[Reference] | None = None
    status: str | None = None
    category: list[CodeableConcept] | None = None
    code: CodeableConcept | None = None
    subject: Reference | None = None
    focus: list[Reference] | None = None
    encounter: Reference | None = None
    effectiveDateTime: DateTime | None = None
    effectivePeriod: Period | None = None
    effectiveInstant: Instant | None = None
    issued: Instant | None = None
    performer: list[Reference] | None = None
    valueQuantity: Quantity | None = None
    valueCodeableConcept: CodeableConcept | None = None
    valueString: str | None = None
    valueBoolean: bool | None = None
    valueInteger: int | None = None
    valueRange: Range | None = None
    valueRatio: Ratio | None = None
    valueTime: Time | None = None
    valueDateTime: DateTime | None = None
    valuePeriod: Period | None = None
    dataAbsentReason: CodeableConcept | None = None
    interpretation: list[CodeableConcept] | None = None
    note: list[Annotation] | None = None
    bodySite: CodeableConcept | None = None
    method: CodeableConcept | None = None
    specimen: Reference | None = None
    device: Reference | None = None
    referenceRange: list[ObservationReferenceRange] | None = None
    hasMember: list[Reference] | None = None
    derivedFrom: list[Reference] | None = None
    component: list[ObservationComponent] | None = None

    fhir_required = frozenset({"status", "code"})
    fhir_codes = {
        "status": frozenset(
            {
                "registered",
                "preliminary",
                "final",
                "amended",
                "corrected",
                "cancelled",
                "entered-in-error",
                "unknown",
            }
        )
    }
    fhir_choices = {
        "value": _VALUE_ELEMENTS,
        "effective": ("effectiveDateTime", "effectivePeriod", "effectiveInstant"),
    }
    fhir_summary = frozenset(
        {
            "identifier",
            "basedOn",
            "partOf",
            "status",
            "category",
            "code",
            "subject",
            "focus",
            "encounter",
            "effectiveDateTime",
            "effectivePeriod",
            "effectiveInstant",
            "issued",
            "performer",
            *_VALUE_ELEMENTS,
            "hasMember",
            "derivedFrom",
        }
    )

    @property
    def value(self) -> Any:
        """The populated ``value[x]`` alternative, or ``None``."""
        return self.choice("value")

    @property
    def effective(self) -> Any:
        """The populated ``effective[x]`` alternative, or ``None``."""
        return self.choice("effective")
