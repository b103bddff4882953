"""
Unit tests for :mod:`fhir_r4.resources.bundle`.
"""

import json
from typing import Any, Literal

import pytest
from structlog.testing import capture_logs

from fhir_r4.errors import (
    EmptyEntryError,
    IndexOutOfRangeError,
    MalformedDocumentError,
    MissingDiscriminatorError,
    ResourceNotFoundError,
    SerializationError,
    UnknownResourceTypeError,
)
from fhir_r4.factory import unmarshal_resource
from fhir_r4.registry import ResourceRegistry
from fhir_r4.resource import DomainResource
from fhir_r4.resources import (
    Bundle,
    BundleEntry,
    BundleLink,
    BundleType,
    Observation,
    Patient,
    Practitioner,
    new_batch_bundle,
    new_bundle,
    new_collection_bundle,
    new_searchset_bundle,
    new_transaction_bundle,
)


class Unregistered(DomainResource):
    resourceType: Literal["Unregistered"] = "Unregistered"


class Device(DomainResource):
    resourceType: Literal["Device"] = "Device"
    status: str | None = None


@pytest.fixture
def device_registry() -> ResourceRegistry:
    return ResourceRegistry([Device, Patient])


@pytest.fixture
def device_bundle(device_registry: ResourceRegistry) -> Bundle:
    bundle = new_searchset_bundle()
    bundle.add_entry(Patient(id="p1"), registry=device_registry)
    bundle.add_entry(
        Device(id="d1", status="active"), "Device/d1", registry=device_registry
    )
    return bundle


class TestConstructors:
    @pytest.mark.parametrize(
        ("constructor", "expected"),
        [
            (new_searchset_bundle, "searchset"),
            (new_transaction_bundle, "transaction"),
            (new_batch_bundle, "batch"),
            (new_collection_bundle, "collection"),
        ],
    )
    def test_convenience_constructors(self, constructor: Any, expected: str) -> None:
        bundle = constructor()
        assert bundle.type == expected
        assert bundle.entry is None
        assert bundle.total is None

    @pytest.mark.parametrize("kind", list(BundleType))
    def test_every_kind_is_accepted(self, kind: BundleType) -> None:
        assert new_bundle(kind).type == kind.value
        assert new_bundle(kind.value).type == kind.value

    def test_unknown_kind_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            new_bundle("pile")


class TestAddEntry:
    def test_discriminator_is_injected(self) -> None:
        bundle = new_collection_bundle()
        entry = bundle.add_entry(Patient(id="p1"), "Patient/p1")

        assert entry.fullUrl == "Patient/p1"
        assert entry.resource == {"resourceType": "Patient", "id": "p1"}

    def test_full_url_is_optional(self) -> None:
        bundle = new_collection_bundle()
        entry = bundle.add_entry(Patient(id="p1"))
        assert "fullUrl" not in entry.model_dump(exclude_unset=True)

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_searchset_total_tracks_appends(self, count: int) -> None:
        bundle = new_searchset_bundle()
        for index in range(count):
            bundle.add_entry(Patient(id=f"p{index}"))
        assert bundle.total == count

    def test_existing_total_is_incremented(self) -> None:
        bundle = new_collection_bundle()
        bundle.total = 0
        bundle.add_entry(Patient(id="p1"))
        bundle.add_entry(Patient(id="p2"))
        assert bundle.total == 2

    def test_collection_total_stays_unset(self) -> None:
        bundle = new_collection_bundle()
        bundle.add_entry(Patient(id="p1"))
        assert bundle.total is None
        assert "total" not in bundle.to_dict()

    def test_raw_document_is_stored_as_is(self) -> None:
        bundle = new_collection_bundle()
        document = {"resourceType": "Observation", "id": "o1", "status": "final"}
        entry = bundle.add_entry(document)
        assert entry.resource == document

    def test_raw_document_is_copied(self) -> None:
        bundle = new_collection_bundle()
        document = {"resourceType": "Patient", "id": "p1", "name": [{"family": "A"}]}
        bundle.add_entry(document)

        document["name"][0]["family"] = "CHANGED"
        document["id"] = "p2"

        actual = bundle.get_entry(0)
        assert isinstance(actual, Patient)
        assert actual.id == "p1"
        assert actual.name is not None
        assert actual.name[0].family == "A"

    def test_raw_document_with_non_finite_number_is_rejected(self) -> None:
        bundle = new_collection_bundle()
        document = {
            "resourceType": "Observation",
            "valueQuantity": {"value": float("nan")},
        }
        with pytest.raises(SerializationError, match="Observation"):
            bundle.add_entry(document)
        assert bundle.entry is None
        assert bundle.total is None

    def test_raw_document_without_discriminator_is_rejected(self) -> None:
        bundle = new_collection_bundle()
        with pytest.raises(MissingDiscriminatorError):
            bundle.add_entry({"id": "o1"})
        assert bundle.entry is None

    def test_unregistered_shape_is_rejected(self) -> None:
        bundle = new_collection_bundle()
        with pytest.raises(UnknownResourceTypeError, match="Unregistered"):
            bundle.add_entry(Unregistered(id="u1"))

    def test_unencodable_resource_is_rejected(self) -> None:
        bundle = new_collection_bundle()
        patient = Patient(id="p1", nickname=object())
        with pytest.raises(SerializationError, match="Patient"):
            bundle.add_entry(patient)

    def test_append_is_logged(self) -> None:
        bundle = new_collection_bundle()
        with capture_logs() as logs:
            bundle.add_entry(Patient(id="p1"))

        assert {
            "event": "Added bundle entry",
            "resource_type": "Patient",
            "index": 0,
            "log_level": "debug",
        } in logs

    def test_entry_resource_accepts_typed_resource(self) -> None:
        entry = BundleEntry(resource=Patient(id="p1"))
        assert entry.resource == {"resourceType": "Patient", "id": "p1"}


class TestGetEntry:
    def test_entry_is_rematerialized(self, mixed_bundle: Bundle) -> None:
        actual = mixed_bundle.get_entry(2)
        assert isinstance(actual, Observation)
        assert actual.value == "positive"

    @pytest.mark.parametrize("index", [-1, 4, 100])
    def test_out_of_range_index_is_rejected(
        self, mixed_bundle: Bundle, index: int
    ) -> None:
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            mixed_bundle.get_entry(index)
        assert exc_info.value.index == index
        assert exc_info.value.size == 4

    def test_empty_bundle_has_no_entries(self) -> None:
        with pytest.raises(IndexOutOfRangeError, match="Index 0 out of range"):
            new_searchset_bundle().get_entry(0)

    def test_entry_without_resource_is_rejected(self) -> None:
        bundle = new_transaction_bundle()
        bundle.entry = [BundleEntry(fullUrl="urn:uuid:1")]
        with pytest.raises(EmptyEntryError, match=r"Bundle.entry\[0\]"):
            bundle.get_entry(0)

    def test_decode_errors_carry_entry_location(self) -> None:
        bundle = new_collection_bundle()
        bundle.add_entry({"resourceType": "Patient", "id": "ok"})
        bundle.add_entry({"resourceType": "Patient", "birthDate": "yesterday"})

        with pytest.raises(MalformedDocumentError) as exc_info:
            bundle.get_entry(1)

        assert exc_info.value.location == "Bundle.entry[1].resource"
        assert isinstance(exc_info.value.__cause__, MalformedDocumentError)

    def test_unknown_entry_type_keeps_its_kind(self) -> None:
        bundle = new_collection_bundle()
        bundle.add_entry({"resourceType": "Spaceship"})

        with pytest.raises(UnknownResourceTypeError) as exc_info:
            bundle.get_entry(0)
        assert exc_info.value.name == "Spaceship"
        assert exc_info.value.location == "Bundle.entry[0].resource"


class TestGetAllEntries:
    def test_all_entries_in_order(self, mixed_bundle: Bundle) -> None:
        actual = [type(resource) for resource in mixed_bundle.get_all_entries()]
        assert actual == [Patient, Patient, Observation, Practitioner]

    def test_first_failure_aborts(self, mixed_bundle: Bundle) -> None:
        mixed_bundle.add_entry({"resourceType": "Spaceship"})
        with pytest.raises(UnknownResourceTypeError):
            mixed_bundle.get_all_entries()

    def test_empty_bundle_returns_empty_list(self) -> None:
        assert new_collection_bundle().get_all_entries() == []


class TestFindResourceById:
    def test_match_returns_resource_and_index(self, mixed_bundle: Bundle) -> None:
        resource, index = mixed_bundle.find_resource_by_id("patient-2")
        assert index == 1
        assert isinstance(resource, Patient)
        assert resource.gender == "male"

    def test_missing_id_raises(self, mixed_bundle: Bundle) -> None:
        with pytest.raises(ResourceNotFoundError, match="nonexistent") as exc_info:
            mixed_bundle.find_resource_by_id("nonexistent")
        assert exc_info.value.resource_id == "nonexistent"

    def test_unreadable_entries_are_skipped(self) -> None:
        bundle = new_collection_bundle()
        bundle.add_entry({"resourceType": "Spaceship", "id": "target"})
        bundle.add_entry(Practitioner(id="target"))

        with capture_logs() as logs:
            resource, index = bundle.find_resource_by_id("target")

        assert index == 1
        assert isinstance(resource, Practitioner)
        assert [log["event"] for log in logs if log["log_level"] == "warning"] == [
            "Skipping unreadable bundle entry"
        ]


class TestFilterByResourceType:
    def test_matching_entries_in_order(self, mixed_bundle: Bundle) -> None:
        patients = mixed_bundle.filter_by_resource_type("Patient")
        assert [patient.id for patient in patients] == ["patient-1", "patient-2"]

    def test_single_match(self, mixed_bundle: Bundle) -> None:
        assert len(mixed_bundle.filter_by_resource_type("Observation")) == 1
        assert len(mixed_bundle.filter_by_resource_type("Practitioner")) == 1

    def test_no_match_is_empty(self, mixed_bundle: Bundle) -> None:
        assert mixed_bundle.filter_by_resource_type("Encounter") == []

    def test_non_matching_entries_are_not_decoded(self) -> None:
        bundle = new_collection_bundle()
        bundle.add_entry({"resourceType": "Spaceship"})
        bundle.add_entry(Patient(id="p1"))

        actual = bundle.filter_by_resource_type("Patient")
        assert [patient.id for patient in actual] == ["p1"]


class TestCustomRegistry:
    def test_entry_added_with_registry_reads_back(
        self, device_bundle: Bundle, device_registry: ResourceRegistry
    ) -> None:
        assert device_bundle.entry is not None
        assert device_bundle.entry[1].resource == {
            "resourceType": "Device",
            "id": "d1",
            "status": "active",
        }

        actual = device_bundle.get_entry(1, registry=device_registry)
        assert isinstance(actual, Device)
        assert actual.status == "active"

    def test_default_registry_does_not_know_the_shape(
        self, device_bundle: Bundle
    ) -> None:
        with pytest.raises(UnknownResourceTypeError, match="Device"):
            device_bundle.get_entry(1)

    def test_every_read_accepts_the_registry(
        self, device_bundle: Bundle, device_registry: ResourceRegistry
    ) -> None:
        everything = device_bundle.get_all_entries(registry=device_registry)
        assert [type(resource) for resource in everything] == [Patient, Device]

        resource, index = device_bundle.find_resource_by_id(
            "d1", registry=device_registry
        )
        assert (type(resource), index) == (Device, 1)

        devices = device_bundle.filter_by_resource_type(
            "Device", registry=device_registry
        )
        assert [device.id for device in devices] == ["d1"]

        resolved = device_bundle.resolve_reference(
            "Device/d1", registry=device_registry
        )
        assert isinstance(resolved, Device)

    def test_unknown_shape_is_skipped_without_the_registry(
        self, device_bundle: Bundle
    ) -> None:
        with pytest.raises(ResourceNotFoundError):
            device_bundle.find_resource_by_id("d1")


class TestNavigation:
    def test_resource_types_in_first_seen_order(self, mixed_bundle: Bundle) -> None:
        expected = ["Patient", "Observation", "Practitioner"]
        assert mixed_bundle.resource_types() == expected

    def test_resolve_reference_by_full_url(self) -> None:
        bundle = new_transaction_bundle()
        full_url = "urn:uuid:61ebe359-bfdc-4613-8bf2-c5e300945f0a"
        bundle.add_entry(Patient(id="p1"), full_url)

        actual = bundle.resolve_reference(full_url)
        assert isinstance(actual, Patient)

    @pytest.mark.parametrize(
        "reference",
        ["Patient/patient-2", "http://example.org/fhir/Patient/patient-2"],
    )
    def test_resolve_reference_by_type_and_id(
        self, mixed_bundle: Bundle, reference: str
    ) -> None:
        actual = mixed_bundle.resolve_reference(reference)
        assert isinstance(actual, Patient)
        assert actual.id == "patient-2"

    def test_unresolvable_reference_raises(self, mixed_bundle: Bundle) -> None:
        with pytest.raises(ResourceNotFoundError):
            mixed_bundle.resolve_reference("Patient/patient-9")

    def test_link_url_by_relation(self) -> None:
        bundle = new_searchset_bundle()
        bundle.link = [
            BundleLink(relation="self", url="http://example.org/Patient?page=1"),
            BundleLink(relation="next", url="http://example.org/Patient?page=2"),
        ]
        assert bundle.link_url("next") == "http://example.org/Patient?page=2"
        assert bundle.link_url("previous") is None


class TestRoundTrip:
    def test_negative_total_is_malformed(self) -> None:
        with pytest.raises(MalformedDocumentError, match=r"Bundle\.total"):
            unmarshal_resource(
                b'{"resourceType": "Bundle", "type": "searchset", "total": -3}'
            )

    def test_zero_total_is_accepted(self) -> None:
        actual = unmarshal_resource(
            b'{"resourceType": "Bundle", "type": "searchset", "total": 0}'
        )
        assert isinstance(actual, Bundle)
        assert actual.total == 0

    def test_bundle_round_trip_is_idempotent(self, mixed_bundle: Bundle) -> None:
        first = mixed_bundle.to_json()
        decoded = unmarshal_resource(first)

        assert isinstance(decoded, Bundle)
        assert decoded.to_json() == first

    def test_encoded_shape(self, mixed_bundle: Bundle) -> None:
        document = json.loads(mixed_bundle.to_json())

        assert document["resourceType"] == "Bundle"
        assert document["type"] == "searchset"
        assert document["total"] == 4
        assert [entry["fullUrl"] for entry in document["entry"]] == [
            "Patient/patient-1",
            "Patient/patient-2",
            "Observation/obs-1",
            "Practitioner/prac-1",
        ]
        assert all("resourceType" in entry["resource"] for entry in document["entry"])

    def test_nested_bundle_entry(self, mixed_bundle: Bundle) -> None:
        outer = new_collection_bundle()
        outer.add_entry(mixed_bundle)

        inner = outer.get_entry(0)
        assert isinstance(inner, Bundle)
        assert isinstance(inner.get_entry(0), Patient)
