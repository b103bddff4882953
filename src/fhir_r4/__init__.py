"""
Typed FHIR R4 resources with a polymorphic JSON factory.

Usage:

    from fhir_r4 import Patient, new_searchset_bundle, unmarshal_resource

    bundle = new_searchset_bundle()
    bundle.add_entry(Patient(id="example", gender="male"), "Patient/example")
    decoded = unmarshal_resource(bundle.to_json())
"""

from fhir_r4 import resources
from fhir_r4.base import BackboneElement, Element, Extension, FhirModel
from fhir_r4.contained import (
    add_contained,
    contained_reference,
    find_contained,
    get_contained,
)
from fhir_r4.errors import (
    EmptyEntryError,
    FhirError,
    FieldIssue,
    IndexOutOfRangeError,
    MalformedDocumentError,
    MissingDiscriminatorError,
    RegistryConflictError,
    ResourceNotFoundError,
    SerializationError,
    UnknownResourceTypeError,
)
from fhir_r4.factory import (
    marshal_resource,
    peek_resource_type,
    resource_from_dict,
    unmarshal_resource,
)
from fhir_r4.registry import ResourceRegistry, default_registry
from fhir_r4.resource import DomainResource, HasLogicalId, Resource
from fhir_r4.resources import (
    BUILTIN_RESOURCES,
    AllergyIntolerance,
    Bundle,
    BundleEntry,
    BundleType,
    Condition,
    DiagnosticReport,
    Encounter,
    MedicationRequest,
    Observation,
    OperationOutcome,
    Organization,
    Parameters,
    Patient,
    Practitioner,
    Procedure,
    new_batch_bundle,
    new_bundle,
    new_collection_bundle,
    new_searchset_bundle,
    new_transaction_bundle,
)
from fhir_r4.summary import SummaryMode, summarize
from fhir_r4.validation import FhirValidator, Validator

__all__ = [
    "BUILTIN_RESOURCES",
    "AllergyIntolerance",
    "BackboneElement",
    "Bundle",
    "BundleEntry",
    "BundleType",
    "Condition",
    "DiagnosticReport",
    "DomainResource",
    "Element",
    "EmptyEntryError",
    "Encounter",
    "Extension",
    "FhirError",
    "FhirModel",
    "FhirValidator",
    "FieldIssue",
    "HasLogicalId",
    "IndexOutOfRangeError",
    "MalformedDocumentError",
    "MedicationRequest",
    "MissingDiscriminatorError",
    "Observation",
    "OperationOutcome",
    "Organization",
    "Parameters",
    "Patient",
    "Practitioner",
    "Procedure",
    "RegistryConflictError",
    "Resource",
    "ResourceNotFoundError",
    "ResourceRegistry",
    "SerializationError",
    "SummaryMode",
    "UnknownResourceTypeError",
    "Validator",
    "add_contained",
    "contained_reference",
    "default_registry",
    "find_contained",
    "get_contained",
    "marshal_resource",
    "peek_resource_type",
    "resource_from_dict",
    "resources",
    "summarize",
    "unmarshal_resource",
]
