"""Pytest configuration and shared fixtures for fhir_r4 tests."""

from typing import Any

import pytest

from fhir_r4.resources import (
    Bundle,
    Observation,
    Patient,
    Practitioner,
    new_searchset_bundle,
)


@pytest.fixture
def chalmers_payload() -> dict[str, Any]:
    return {
        "resourceType": "Patient",
        "id": "example",
        "identifier": [
            {
                "use": "usual",
                "system": "urn:oid:1.2.36.146.595.217.0.1",
                "value": "12345",
            }
        ],
        "active": True,
        "name": [
            {"use": "official", "family": "Chalmers", "given": ["Peter", "James"]}
        ],
        "gender": "male",
        "birthDate": "1974-12-25",
        "_birthDate": {
            "extension": [
                {
                    "url": "http://hl7.org/fhir/StructureDefinition/patient-birthTime",
                    "valueDateTime": "1974-12-25T14:35:45-05:00",
                }
            ]
        },
        "managingOrganization": {"reference": "Organization/1"},
    }


@pytest.fixture
def observation_payload() -> dict[str, Any]:
    return {
        "resourceType": "Observation",
        "id": "body-weight",
        "status": "final",
        "code": {
            "coding": [
                {"system": "http://loinc.org", "code": "29463-7", "display": "Weight"}
            ]
        },
        "subject": {"reference": "Patient/example"},
        "effectiveDateTime": "2016-03-28",
        "valueQuantity": {
            "value": 185,
            "unit": "lbs",
            "system": "http://unitsofmeasure.org",
            "code": "[lb_av]",
        },
    }


@pytest.fixture
def mixed_bundle() -> Bundle:
    """A searchset holding two patients, an observation and a practitioner."""
    bundle = new_searchset_bundle()
    bundle.add_entry(Patient(id="patient-1", gender="female"), "Patient/patient-1")
    bundle.add_entry(Patient(id="patient-2", gender="male"), "Patient/patient-2")
    bundle.add_entry(
        Observation(id="obs-1", status="final", valueString="positive"),
        "Observation/obs-1",
    )
    bundle.add_entry(Practitioner(id="prac-1"), "Practitioner/prac-1")
    return bundle
