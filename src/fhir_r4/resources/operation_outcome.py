"""FHIR OperationOutcome resource."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import CodeableConcept
from fhir_r4.errors import FieldIssue
from fhir_r4.resource import DomainResource


class OperationOutcomeIssue(BackboneElement):
    severity: str | None = None
    code: str | None = None
    details: CodeableConcept | None = None
    diagnostics: str | None = None
    location: list[str] | None = None
    expression: list[str] | None = None

    fhir_required = frozenset({"severity", "code"})
    fhir_codes = {
        "severity": frozenset({"fatal", "error", "warning", "information"})
    }


class OperationOutcome(DomainResource):
    resourceType: Literal["OperationOutcome"] = "OperationOutcome"
    issue: list[OperationOutcomeIssue] | None = None

    fhir_required = frozenset({"issue"})

    @classmethod
    def from_issues(
        cls, issues: Iterable[FieldIssue], severity: str = "error"
    ) -> OperationOutcome:
        """
        Build an outcome reporting each issue found by a validator.

        :param issues: Problems to report.
        :param severity: Severity given to every issue.
        :returns: An outcome with one ``issue`` per problem, in order.
        """
        outcome_issues = []
        for issue in issues:
            outcome_issue = OperationOutcomeIssue(
                severity=severity, code=issue.code, diagnostics=issue.message
            )
            if issue.path:
                outcome_issue.expression = [issue.path]
            outcome_issues.append(outcome_issue)
        return cls(issue=outcome_issues)

    @classmethod
    def from_exception(
        cls, error: Exception, code: str = "exception"
    ) -> OperationOutcome:
        """Build a single-issue outcome describing ``error``."""
        return cls(
            issue=[
                OperationOutcomeIssue(
                    severity="error", code=code, diagnostics=str(error)
                )
            ]
        )

    def has_errors(self) -> bool:
        """True if any issue is ``fatal`` or ``error``."""
        return any(
            issue.severity in ("fatal", "error") for issue in self.issue or []
        )
