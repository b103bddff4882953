"""FHIR Practitioner resource."""

from typing import Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    Address,
    Attachment,
    CodeableConcept,
    ContactPoint,
    HumanName,
    Identifier,
    Period,
    Reference,
)
from fhir_r4.primitives import Date
from fhir_r4.resource import DomainResource


class PractitionerQualification(BackboneElement):
    identifier: list[Identifier] | None = None
    code: CodeableConcept | None = None
    period: Period | None = None
    issuer: Reference | None = None

    fhir_required = frozenset({"code"})


class Practitioner(DomainResource):
    resourceType: Literal["Practitioner"] = "Practitioner"
    identifier: list[Identifier] | None = None
    active: bool | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    address: list[Address] | None = None
    gender: str | None = None
    birthDate: Date | None = None
    photo: list[Attachment] | None = None
    qualification: list[PractitionerQualification] | None = None
    communication: list[CodeableConcept] | None = None

    fhir_codes = {"gender": frozenset({"male", "female", "other", "unknown"})}
    fhir_summary = frozenset(
        {"identifier", "active", "name", "telecom", "address", "gender", "birthDate"}
    )
