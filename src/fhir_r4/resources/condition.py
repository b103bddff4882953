"""FHIR Condition resource."""

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


class ConditionStage(BackboneElement):
    summary: CodeableConcept | None = None
    assessment: list[Reference] | None = None
    type: CodeableConcept | None = None


class ConditionEvidence(BackboneElement):
    code: list[CodeableConcept] | None = None
    detail: list[Reference] | None = None


class Condition(DomainResource):
    """
    A clinical condition, problem or diagnosis.

    ``onset[x]`` and ``abatement[x]`` accept a dateTime, an age (carried as a
    Quantity-shaped extra), a Period, a Range or a free-text string.
    """

    resourceType: Literal["Condition"] = "Condition"
    identifier: list[Identifier] | None = None
    clinicalStatus: CodeableConcept | None = None
    verificationStatus: CodeableConcept | None = None
    category: list[CodeableConcept] | None = None
    severity: CodeableConcept | None = None
    code: CodeableConcept | None = None
    bodySite: list[CodeableConcept] | None = None
    subject: Reference | None = None
    encounter: Reference | None = None
    onsetDateTime: DateTime | None = None
    onsetPeriod: Period | None = None
    onsetRange: Range | None = None
    onsetString: str | None = None
    abatementDateTime: DateTime | None = None
    abatementPeriod: Period | None = None
    abatementRange: Range | None = None
    abatementString: str | None = None
    recordedDate: DateTime | None = None
    recorder: Reference | None = None
    asserter: Reference | None = None
    stage: list[ConditionStage] | None = None
    evidence: list[ConditionEvidence] | None = None
    note: list[Annotation] | None = None

    fhir_required = frozenset({"subject"})
    fhir_choices = {
        "onset": ("onsetDateTime", "onsetPeriod", "onsetRange", "onsetString"),
        "abatement": (
            "abatementDateTime",
            "abatementPeriod",
            "abatementRange",
            "abatementString",
        ),
    }
    fhir_summary = frozenset(
        {
            "identifier",
            "clinicalStatus",
            "verificationStatus",
            "category",
            "severity",
            "code",
            "bodySite",
            "subject",
            "encounter",
            "onsetDateTime",
            "onsetPeriod",
            "onsetRange",
            "onsetString",
            "abatementDateTime",
            "abatementPeriod",
            "abatementRange",
            "abatementString",
            "recordedDate",
        }
    )

    @property
    def onset(self) -> Any:
        return self.choice("onset")

    @property
    def abatement(self) -> Any:
        return self.choice("abatement")
