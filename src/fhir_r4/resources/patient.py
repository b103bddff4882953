"""FHIR Patient resource."""

from typing import Any, Literal

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
from fhir_r4.primitives import Date, DateTime
from fhir_r4.resource import DomainResource

_GENDERS = frozenset({"male", "female", "other", "unknown"})


class PatientContact(BackboneElement):
    relationship: list[CodeableConcept] | None = None
    name: HumanName | None = None
    telecom: list[ContactPoint] | None = None
    address: Address | None = None
    gender: str | None = None
    organization: Reference | None = None
    period: Period | None = None

    fhir_codes = {"gender": _GENDERS}


class PatientCommunication(BackboneElement):
    language: CodeableConcept | None = None
    preferred: bool | None = None

    fhir_required = frozenset({"language"})


class PatientLink(BackboneElement):
    other: Reference | None = None
    type: str | None = None

    fhir_required = frozenset({"other", "type"})
    fhir_codes = {"type": frozenset({"replaced-by", "replaces", "refer", "seealso"})}


class Patient(DomainResource):
    resourceType: Literal["Patient"] = "Patient"
    identifier: list[Identifier] | None = None
    active: bool | None = None
    name: list[HumanName] | None = None
    telecom: list[ContactPoint] | None = None
    gender: str | None = None
    birthDate: Date | None = None
    deceasedBoolean: bool | None = None
    deceasedDateTime: DateTime | None = None
    address: list[Address] | None = None
    maritalStatus: CodeableConcept | None = None
    multipleBirthBoolean: bool | None = None
    multipleBirthInteger: int | None = None
    photo: list[Attachment] | None = None
    contact: list[PatientContact] | None = None
    communication: list[PatientCommunication] | None = None
    generalPractitioner: list[Reference] | None = None
    managingOrganization: Reference | None = None
    link: list[PatientLink] | None = None

    fhir_codes = {"gender": _GENDERS}
    fhir_choices = {
        "deceased": ("deceasedBoolean", "deceasedDateTime"),
        "multipleBirth": ("multipleBirthBoolean", "multipleBirthInteger"),
    }
    fhir_summary = frozenset(
        {
            "identifier",
            "active",
            "name",
            "telecom",
            "gender",
            "birthDate",
            "deceasedBoolean",
            "deceasedDateTime",
            "address",
            "managingOrganization",
            "link",
        }
    )

    @property
    def deceased(self) -> Any:
        return self.choice("deceased")

    @property
    def multiple_birth(self) -> Any:
        return self.choice("multipleBirth")
