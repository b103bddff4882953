"""FHIR Procedure resource."""

from typing import Any, Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    Annotation,
    CodeableConcept,
    Identifier,
    Period,
    Range,
    Reference,
)
from fhir_r4.primitives import DateTime
from fhir_r4.resource import DomainResource

_EVENT_STATUSES = frozenset(
    {
        "preparation",
        "in-progress",
        "not-done",
        "on-hold",
        "stopped",
        "completed",
        "entered-in-error",
        "unknown",
    }
)


class ProcedurePerformer(BackboneElement):
    function: CodeableConcept | None = None
    actor: Reference | None = None
    onBehalfOf: Reference | None = None

    fhir_required = frozenset({"actor"})


class Procedure(DomainResource):
    resourceType: Literal["Procedure"] = "Procedure"
    identifier: list[Identifier] | None = None
    basedOn: list[Reference] | None = None
    partOf: list[Reference] | None = None
    status: str | None = None
    statusReason: CodeableConcept | None = None
    category: CodeableConcept | None = None
    code: CodeableConcept | None = None
    subject: Reference | None = None
    encounter: Reference | None = None
    performedDateTime: DateTime | None = None
    performedPeriod: Period | None = None
    performedString: str | None = None
    performedRange: Range | None = None
    recorder: Reference | None = None
    asserter: Reference | None = None
    performer: list[ProcedurePerformer] | None = None
    location: Reference | None = None
    reasonCode: list[CodeableConcept] | None = None
    reasonReference: list[Reference] | None = None
    bodySite: list[CodeableConcept] | None = None
    outcome: CodeableConcept | None = None
    report: list[Reference] | None = None
    complication: list[CodeableConcept] | None = None
    followUp: list[CodeableConcept] | None = None
    note: list[Annotation] | None = None

    fhir_required = frozenset({"status", "subject"})
    fhir_codes = {"status": _EVENT_STATUSES}
    fhir_choices = {
        "performed": (
            "performedDateTime",
            "performedPeriod",
            "performedString",
            "performedRange",
        )
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
            "encounter",
            "performedDateTime",
            "performedPeriod",
            "performedString",
            "performedRange",
            "performer",
            "location",
            "reasonCode",
            "reasonReference",
            "bodySite",
        }
    )

    @property
    def performed(self) -> Any:
        return self.choice("performed")
