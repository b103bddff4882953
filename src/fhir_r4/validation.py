"""
Structural validation of FHIR models.

Decoding only checks that a document fits its model's types. The rules here
cover what the FHIR structure definitions add on top: mandatory elements,
codes bound to a required value set, choice elements with a single
alternative and well-formed references. Each model declares its rules in
class variables (see :class:`fhir_r4.base.FhirModel`).

Neither the factory nor the Bundle container calls the validator; callers
opt in with :meth:`fhir_r4.resource.Resource.validate_fhir`.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

from fhir_r4.base import FhirModel
from fhir_r4.datatypes.reference import Reference
from fhir_r4.errors import FieldIssue

_ID = r"[A-Za-z0-9\-.]{1,64}"
_RELATIVE_REFERENCE = re.compile(rf"^[A-Z][A-Za-z]+/{_ID}(/_history/{_ID})?$")
_ABSOLUTE_PREFIXES = ("http://", "https://", "urn:uuid:", "urn:oid:")


class Validator(Protocol):
    """Anything that can check a resource and report problems."""

    def validate(self, resource: FhirModel) -> list[FieldIssue]: ...


class FhirValidator:
    """
    Validator driven by the ``fhir_required``, ``fhir_codes`` and
    ``fhir_choices`` declarations of each model.

    Usage:

        issues = FhirValidator().validate(patient)
        if issues:
            outcome = OperationOutcome.from_issues(issues)
    """

    def validate(self, resource: FhirModel) -> list[FieldIssue]:
        """
        Check ``resource`` and every element nested inside it.

        :returns: The problems found, in document order. Paths are rooted at
            the resource type, e.g. ``Patient.name[0].family``.
        """
        root = getattr(resource, "resourceType", None) or type(resource).__name__
        issues: list[FieldIssue] = []
        self._check(resource, root, issues)
        return issues

    def _check(self, model: FhirModel, path: str, issues: list[FieldIssue]) -> None:
        shape = type(model)

        for name, info in shape.model_fields.items():
            if name == "resourceType":
                continue
            element = info.alias or name
            value = getattr(model, name)
            element_path = f"{path}.{element}"

            if name in shape.fhir_required:
                self._check_required(value, element_path, issues)
            if name in shape.fhir_codes and value is not None:
                self._check_code(value, shape.fhir_codes[name], element_path, issues)
            self._descend(value, element_path, issues)

        for group, alternatives in shape.fhir_choices.items():
            populated = [
                name for name in alternatives if getattr(model, name, None) is not None
            ]
            if len(populated) > 1:
                issues.append(
                    FieldIssue(
                        f"{path}.{group}[x]",
                        f"only one alternative may be set, got {', '.join(populated)}",
                        "invariant",
                    )
                )

        if isinstance(model, Reference) and model.reference:
            message = reference_problem(model.reference)
            if message:
                issues.append(FieldIssue(f"{path}.reference", message, "value"))

    def _check_required(self, value: Any, path: str, issues: list[FieldIssue]) -> None:
        if value is None:
            issues.append(FieldIssue(path, "required field is missing", "required"))
        elif value == [] or value == "":
            issues.append(
                FieldIssue(path, "required field cannot be empty", "required")
            )

    def _check_code(
        self, value: Any, codes: frozenset[str], path: str, issues: list[FieldIssue]
    ) -> None:
        if isinstance(value, list):
            for index, item in enumerate(value):
                self._check_code(item, codes, f"{path}[{index}]", issues)
        elif value not in codes:
            expected = ", ".join(sorted(codes))
            issues.append(
                FieldIssue(
                    path,
                    f"invalid code {value!r}, expected one of: {expected}",
                    "code-invalid",
                )
            )

    def _descend(self, value: Any, path: str, issues: list[FieldIssue]) -> None:
        if isinstance(value, FhirModel):
            self._check(value, path, issues)
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, FhirModel):
                    self._check(item, f"{path}[{index}]", issues)


def reference_problem(reference: str) -> str | None:
    """
    Describe what is wrong with a ``Reference.reference`` value.

    Accepts relative ``Type/id`` (optionally versioned), absolute URLs, local
    ``#id`` references and ``urn:uuid:`` / ``urn:oid:`` identifiers.

    :returns: ``None`` when the reference is well formed.
    """
    if reference.startswith("#"):
        return None if len(reference) > 1 else "local reference has no id"
    if reference.startswith(_ABSOLUTE_PREFIXES):
        return None
    if "/" not in reference:
        return f"invalid reference format: {reference} (expected 'ResourceType/id')"
    if not _RELATIVE_REFERENCE.match(reference):
        resource_type = reference.split("/", 1)[0]
        if not resource_type[:1].isupper():
            return f"invalid resource type in reference: {resource_type}"
        return f"invalid reference format: {reference} (expected 'ResourceType/id')"
    return None
