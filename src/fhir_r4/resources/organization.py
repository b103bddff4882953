"""FHIR Organization resource."""

from typing import Literal

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    Address,
    CodeableConcept,
    ContactPoint,
    HumanName,
    Identifier,
    Reference,
)
from fhir_r4.resource import DomainResource


class OrganizationContact(BackboneElement):
    purpose: CodeableConcept | None = None
    name: HumanName | None = None
    telecom: list[ContactPoint] | None = None
    address: Address | None = None


class Organization(DomainResource):
    resourceType: Literal["Organization"] = "Organization"
    identifier: list[Identifier] | None = None
    active: bool | None = None
    type: list[CodeableConcept] | None = None
    name: str | None = None
    alias: list[str] | None = None
    telecom: list[ContactPoint] | None = None
    address: list[Address] | None = None
    partOf: Reference | None = None
    contact: list[OrganizationContact] | None = None
    endpoint: list[Reference] | None = None

    fhir_summary = frozenset(
        {"identifier", "active", "type", "name", "alias", "partOf"}
    )
