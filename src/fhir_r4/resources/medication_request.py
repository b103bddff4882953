"""FHIR MedicationRequest resource."""

from typing import Any, Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    Annotation,
    CodeableConcept,
    Dosage,
    Identifier,
    Period,
    Quantity,
    Reference,
)
from fhir_r4.primitives import DateTime
from fhir_r4.resource import DomainResource


class MedicationRequestDispenseRequest(BackboneElement):
    validityPeriod: Period | None = None
    numberOfRepeatsAllowed: int | None = None
    quantity: Quantity | None = None
    performer: Reference | None = None


class MedicationRequestSubstitution(BackboneElement):
    allowedBoolean: bool | None = None
    allowedCodeableConcept: CodeableConcept | None = None
    reason: CodeableConcept | None = None

    fhir_choices = {"allowed": ("allowedBoolean", "allowedCodeableConcept")}


class MedicationRequest(DomainResource):
    resourceType: Literal["MedicationRequest"] = "MedicationRequest"
    identifier: list[Identifier] | None = None
    status: str | None = None
    statusReason: CodeableConcept | None = None
    intent: str | None = None
    category: list[CodeableConcept] | None = None
    priority: str | None = None
    doNotPerform: bool | None = None
    reportedBoolean: bool | None = None
    reportedReference: Reference | None = None
    medicationCodeableConcept: CodeableConcept | None = None
    medicationReference: Reference | None = None
    subject: Reference | None = None
    encounter: Reference | None = None
    authoredOn: DateTime | None = None
    requester: Reference | None = None
    recorder: Reference | None = None
    reasonCode: list[CodeableConcept] | None = None
    reasonReference: list[Reference] | None = None
    note: list[Annotation] | None = None
    dosageInstruction: list[Dosage] | None = None
    dispenseRequest: MedicationRequestDispenseRequest | None = None
    substitution: MedicationRequestSubstitution | None = None

    fhir_required = frozenset({"status", "intent", "subject"})
    fhir_codes = {
        "status": frozenset(
            {
                "active",
                "on-hold",
                "cancelled",
                "completed",
                "entered-in-error",
                "stopped",
                "draft",
                "unknown",
            }
        ),
        "intent": frozenset(
            {
                "proposal",
                "plan",
                "order",
                "original-order",
                "reflex-order",
                "filler-order",
                "instance-order",
                "option",
            }
        ),
        "priority": frozenset({"routine", "urgent", "asap", "stat"}),
    }
    fhir_choices = {
        "reported": ("reportedBoolean", "reportedReference"),
        "medication": ("medicationCodeableConcept", "medicationReference"),
    }
    fhir_summary = frozenset(
        {
            "identifier",
            "status",
            "intent",
            "priority",
            "doNotPerform",
            "medicationCodeableConcept",
            "medicationReference",
            "subject",
            "encounter",
            "authoredOn",
            "requester",
        }
    )

    @property
    def medication(self) -> Any:
        return self.choice("medication")
