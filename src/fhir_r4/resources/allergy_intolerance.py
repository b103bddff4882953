"""FHIR AllergyIntolerance resource."""

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

_SEVERITIES = frozenset({"mild", "moderate", "severe"})


class AllergyIntoleranceReaction(BackboneElement):
    substance: CodeableConcept | None = None
    manifestation: list[CodeableConcept] | None = None
    description: str | None = None
    onset: DateTime | None = None
    severity: str | None = None
    exposureRoute: CodeableConcept | None = None
    note: list[Annotation] | None = None

    fhir_required = frozenset({"manifestation"})
    fhir_codes = {"severity": _SEVERITIES}


class AllergyIntolerance(DomainResource):
    resourceType: Literal["AllergyIntolerance"] = "AllergyIntolerance"
    identifier: list[Identifier] | None = None
    clinicalStatus: CodeableConcept | None = None
    verificationStatus: CodeableConcept | None = None
    type: str | None = None
    category: list[str] | None = None
    criticality: str | None = None
    code: CodeableConcept | None = None
    patient: Reference | None = None
    encounter: Reference | None = None
    onsetDateTime: DateTime | None = None
    onsetPeriod: Period | None = None
    onsetRange: Range | None = None
    onsetString: str | None = None
    recordedDate: DateTime | None = None
    recorder: Reference | None = None
    asserter: Reference | None = None
    lastOccurrence: DateTime | None = None
    note: list[Annotation] | None = None
    reaction: list[AllergyIntoleranceReaction] | None = None

    fhir_required = frozenset({"patient"})
    fhir_codes = {
        "type": frozenset({"allergy", "intolerance"}),
        "category": frozenset({"food", "medication", "environment", "biologic"}),
        "criticality": frozenset({"low", "high", "unable-to-assess"}),
    }
    fhir_choices = {
        "onset": ("onsetDateTime", "onsetPeriod", "onsetRange", "onsetString")
    }
    fhir_summary = frozenset(
        {
            "identifier",
            "clinicalStatus",
            "verificationStatus",
            "type",
            "category",
            "criticality",
            "code",
            "patient",
            "onsetDateTime",
            "onsetPeriod",
            "onsetRange",
            "onsetString",
            "recordedDate",
            "asserter",
        }
    )

    @property
    def onset(self) -> Any:
        return self.choice("onset")
