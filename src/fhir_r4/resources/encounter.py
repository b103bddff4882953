"""FHIR Encounter resource."""

from typing import Literal

from pydantic import Field

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import CodeableConcept, Coding, Identifier, Period, Reference
from fhir_r4.resource import DomainResource

_STATUSES = frozenset(
    {
        "planned",
        "arrived",
        "triaged",
        "in-progress",
        "onleave",
        "finished",
        "cancelled",
        "entered-in-error",
        "unknown",
    }
)


class EncounterStatusHistory(BackboneElement):
    status: str | None = None
    period: Period | None = None

    fhir_required = frozenset({"status", "period"})
    fhir_codes = {"status": _STATUSES}


class EncounterParticipant(BackboneElement):
    type: list[CodeableConcept] | None = None
    period: Period | None = None
    individual: Reference | None = None


class EncounterDiagnosis(BackboneElement):
    condition: Reference | None = None
    use: CodeableConcept | None = None
    rank: int | None = None

    fhir_required = frozenset({"condition"})


class EncounterHospitalization(BackboneElement):
    origin: Reference | None = None
    admitSource: CodeableConcept | None = None
    reAdmission: CodeableConcept | None = None
    destination: Reference | None = None
    dischargeDisposition: CodeableConcept | None = None


class EncounterLocation(BackboneElement):
    location: Reference | None = None
    status: str | None = None
    period: Period | None = None

    fhir_required = frozenset({"location"})
    fhir_codes = {"status": frozenset({"planned", "active", "reserved", "completed"})}


class Encounter(DomainResource):
    """
    An interaction between a patient and healthcare providers.

    The FHIR ``class`` element is exposed as ``class_``; it is read from and
    written to JSON as ``class``.
    """

    resourceType: Literal["Encounter"] = "Encounter"
    identifier: list[Identifier] | None = None
    status: str | None = None
    statusHistory: list[EncounterStatusHistory] | None = None
    class_: Coding | None = Field(default=None, alias="class")
    type: list[CodeableConcept] | None = None
    serviceType: CodeableConcept | None = None
    priority: CodeableConcept | None = None
    subject: Reference | None = None
    episodeOfCare: list[Reference] | None = None
    basedOn: list[Reference] | None = None
    participant: list[EncounterParticipant] | None = None
    appointment: list[Reference] | None = None
    period: Period | None = None
    reasonCode: list[CodeableConcept] | None = None
    reasonReference: list[Reference] | None = None
    diagnosis: list[EncounterDiagnosis] | None = None
    hospitalization: EncounterHospitalization | None = None
    location: list[EncounterLocation] | None = None
    serviceProvider: Reference | None = None
    partOf: Reference | None = None

    fhir_required = frozenset({"status", "class_"})
    fhir_codes = {"status": _STATUSES}
    fhir_summary = frozenset(
        {
            "identifier",
            "status",
            "class_",
            "type",
            "serviceType",
            "priority",
            "subject",
            "episodeOfCare",
            "basedOn",
            "participant",
            "appointment",
            "period",
            "reasonCode",
            "reasonReference",
            "diagnosis",
            "serviceProvider",
            "partOf",
        }
    )
