"""
Unit tests for :mod:`fhir_r4.contained`.
"""

import json
from typing import Literal

import pytest

from fhir_r4.contained import (
    add_contained,
    contained_reference,
    find_contained,
    get_contained,
)
from fhir_r4.datatypes import Reference
from fhir_r4.errors import (
    IndexOutOfRangeError,
    MissingDiscriminatorError,
    ResourceNotFoundError,
    SerializationError,
    UnknownResourceTypeError,
)
from fhir_r4.factory import unmarshal_resource
from fhir_r4.registry import ResourceRegistry
from fhir_r4.resource import DomainResource
from fhir_r4.resources import MedicationRequest, Organization, Patient, Practitioner


class Substance(DomainResource):
    resourceType: Literal["Substance"] = "Substance"


@pytest.fixture
def patient_with_contained() -> Patient:
    patient = Patient(id="example")
    reference = add_contained(patient, Organization(id="org1", name="Clinic"))
    patient.managingOrganization = Reference(reference=reference)
    add_contained(patient, Practitioner(id="gp"))
    return patient


class TestContainedReference:
    def test_reference_is_local(self) -> None:
        assert contained_reference(Organization(id="org1")) == "#org1"
        assert contained_reference({"resourceType": "Organization", "id": "o"}) == "#o"

    def test_resource_without_id_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="needs an id"):
            contained_reference(Organization())


class TestAddContained:
    def test_contained_is_stored_with_discriminator(
        self, patient_with_contained: Patient
    ) -> None:
        assert patient_with_contained.contained == [
            {"resourceType": "Organization", "id": "org1", "name": "Clinic"},
            {"resourceType": "Practitioner", "id": "gp"},
        ]

    def test_raw_document_without_discriminator_is_rejected(self) -> None:
        with pytest.raises(MissingDiscriminatorError):
            add_contained(Patient(), {"id": "x"})

    def test_raw_document_is_copied(self) -> None:
        patient = Patient(id="example")
        document = {
            "resourceType": "Organization",
            "id": "org1",
            "alias": ["Clinic"],
        }
        add_contained(patient, document)

        document["alias"].append("Hospital")

        assert patient.contained == [
            {"resourceType": "Organization", "id": "org1", "alias": ["Clinic"]}
        ]

    def test_raw_document_with_unencodable_value_is_rejected(self) -> None:
        patient = Patient(id="example")
        document = {"resourceType": "Organization", "id": "org1", "extra": object()}
        with pytest.raises(SerializationError, match="Organization"):
            add_contained(patient, document)
        assert patient.contained is None

    def test_contained_survives_round_trip(
        self, patient_with_contained: Patient
    ) -> None:
        decoded = unmarshal_resource(patient_with_contained.to_json())

        assert isinstance(decoded, Patient)
        assert decoded.to_dict() == patient_with_contained.to_dict()
        assert decoded.managingOrganization is not None
        assert decoded.managingOrganization.reference == "#org1"

    def test_model_accepts_typed_contained(self) -> None:
        request = MedicationRequest(contained=[Patient(id="p")])
        assert request.contained == [{"resourceType": "Patient", "id": "p"}]


class TestGetContained:
    def test_entry_is_materialized(self, patient_with_contained: Patient) -> None:
        actual = get_contained(patient_with_contained, 1)
        assert isinstance(actual, Practitioner)
        assert actual.id == "gp"

    @pytest.mark.parametrize("index", [-1, 2])
    def test_out_of_range(self, patient_with_contained: Patient, index: int) -> None:
        with pytest.raises(IndexOutOfRangeError):
            get_contained(patient_with_contained, index)

    def test_decode_error_carries_location(self) -> None:
        patient = Patient.model_validate(
            {"resourceType": "Patient", "contained": [{"resourceType": "Spaceship"}]}
        )
        with pytest.raises(UnknownResourceTypeError) as exc_info:
            get_contained(patient, 0)
        assert exc_info.value.location == "Patient.contained[0]"

    def test_custom_registry_is_used(self) -> None:
        patient = Patient(id="example")
        add_contained(patient, {"resourceType": "Substance", "id": "s1"})
        registry = ResourceRegistry([Substance])

        with pytest.raises(UnknownResourceTypeError, match="Substance"):
            get_contained(patient, 0)

        assert isinstance(get_contained(patient, 0, registry=registry), Substance)
        actual = find_contained(patient, "#s1", registry=registry)
        assert isinstance(actual, Substance)
        assert actual.id == "s1"


class TestFindContained:
    @pytest.mark.parametrize("reference", ["#org1", "org1"])
    def test_find_by_id(self, patient_with_contained: Patient, reference: str) -> None:
        actual = find_contained(patient_with_contained, reference)
        assert isinstance(actual, Organization)
        assert actual.name == "Clinic"

    def test_missing_id(self, patient_with_contained: Patient) -> None:
        with pytest.raises(ResourceNotFoundError, match="#nope"):
            find_contained(patient_with_contained, "#nope")

    def test_encoded_contained_is_plain_json(
        self, patient_with_contained: Patient
    ) -> None:
        document = json.loads(patient_with_contained.to_json())
        assert document["contained"][0]["resourceType"] == "Organization"
        assert document["managingOrganization"] == {"reference": "#org1"}
