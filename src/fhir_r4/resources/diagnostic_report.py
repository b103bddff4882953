"""FHIR DiagnosticReport resource."""

from typing import Any, Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    Attachment,
    CodeableConcept,
    Identifier,
    Period,
    Reference,
)
from fhir_r4.primitives import DateTime, Instant
from fhir_r4.resource import DomainResource


class DiagnosticReportMedia(BackboneElement):
    comment: str | None = None
    link: Reference | None = None

    fhir_required = frozenset({"link"})


class DiagnosticReport(DomainResource):
    resourceType: Literal["DiagnosticReport"] = "DiagnosticReport"
    identifier: list[Identifier] | None = None
    basedOn: list[Reference] | None = None
    status: str | None = None
    category: list[CodeableConcept] | None = None
    code: CodeableConcept | None = None
    subject: Reference | None = None
    encounter: Reference | None = None
    effectiveDateTime: DateTime | None = None
    effectivePeriod: Period | None = None
    issued: Instant | None = None
    performer: list[Reference] | None = None
    resultsInterpreter: list[Reference] | None = None
    specimen: list[Reference] | None = None
    result: list[Reference] | None = None
    imagingStudy: list[Reference] | None = None
    media: list[DiagnosticReportMedia] | None = None
    conclusion: str | None = None
    conclusionCode: list[CodeableConcept] | None = None
    presentedForm: list[Attachment] | None = None

    fhir_required = frozenset({"status", "code"})
    fhir_codes = {
        "status": frozenset(
            {
                "registered",
                "partial",
                "preliminary",
                "final",
                "amended",
                "corrected",
                "appended",
                "cancelled",
                "entered-in-error",
                "unknown",
            }
        )
    }
    fhir_choices = {"effective": ("effectiveDateTime", "effectivePeriod")}
    fhir_summary = frozenset(
        {
            "identifier",
            "basedOn",
            "status",
            "category",
            "code",
            "subject",
            "encounter",
            "effectiveDateTime",
            "effectivePeriod",
            "issued",
            "performer",
            "resultsInterpreter",
            "specimen",
            "result",
        }
    )

    @property
    def effective(self) -> Any:
        return self.choice("effective")
