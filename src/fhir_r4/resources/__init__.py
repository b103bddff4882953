"""
FHIR R4 resource shapes.

Importing this package registers every shape in :data:`BUILTIN_RESOURCES`
with :data:`fhir_r4.registry.default_registry`. A new shape becomes known to
the factory and to :class:`Bundle` by adding it to that tuple (or by
registering it from application code).
"""

from fhir_r4.registry import default_registry
from fhir_r4.resource import Resource
from fhir_r4.resources.allergy_intolerance import (
    AllergyIntolerance,
    AllergyIntoleranceReaction,
)
from fhir_r4.resources.bundle import (
    Bundle,
    BundleEntry,
    BundleEntryRequest,
    BundleEntryResponse,
    BundleEntrySearch,
    BundleLink,
    BundleType,
    new_batch_bundle,
    new_bundle,
    new_collection_bundle,
    new_searchset_bundle,
    new_transaction_bundle,
)
from fhir_r4.resources.condition import Condition, ConditionEvidence, ConditionStage
from fhir_r4.resources.diagnostic_report import DiagnosticReport, DiagnosticReportMedia
from fhir_r4.resources.encounter import (
    Encounter,
    EncounterDiagnosis,
    EncounterHospitalization,
    EncounterLocation,
    EncounterParticipant,
    EncounterStatusHistory,
)
from fhir_r4.resources.medication_request import (
    MedicationRequest,
    MedicationRequestDispenseRequest,
    MedicationRequestSubstitution,
)
from fhir_r4.resources.observation import (
    Observation,
    ObservationComponent,
    ObservationReferenceRange,
)
from fhir_r4.resources.operation_outcome import OperationOutcome, OperationOutcomeIssue
from fhir_r4.resources.organization import Organization, OrganizationContact
from fhir_r4.resources.parameters import Parameter, Parameters
from fhir_r4.resources.patient import (
    Patient,
    PatientCommunication,
    PatientContact,
    PatientLink,
)
from fhir_r4.resources.practitioner import Practitioner, PractitionerQualification
from fhir_r4.resources.procedure import Procedure, ProcedurePerformer

BUILTIN_RESOURCES: tuple[type[Resource], ...] = (
    AllergyIntolerance,
    Bundle,
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
)

for _shape in BUILTIN_RESOURCES:
    default_registry.register(_shape)

__all__ = [
    "BUILTIN_RESOURCES",
    "AllergyIntolerance",
    "AllergyIntoleranceReaction",
    "Bundle",
    "BundleEntry",
    "BundleEntryRequest",
    "BundleEntryResponse",
    "BundleEntrySearch",
    "BundleLink",
    "BundleType",
    "Condition",
    "ConditionEvidence",
    "ConditionStage",
    "DiagnosticReport",
    "DiagnosticReportMedia",
    "Encounter",
    "EncounterDiagnosis",
    "EncounterHospitalization",
    "EncounterLocation",
    "EncounterParticipant",
    "EncounterStatusHistory",
    "MedicationRequest",
    "MedicationRequestDispenseRequest",
    "MedicationRequestSubstitution",
    "Observation",
    "ObservationComponent",
    "ObservationReferenceRange",
    "OperationOutcome",
    "OperationOutcomeIssue",
    "Organization",
    "OrganizationContact",
    "Parameter",
    "Parameters",
    "Patient",
    "PatientCommunication",
    "PatientContact",
    "PatientLink",
    "Practitioner",
    "PractitionerQualification",
    "Procedure",
    "ProcedurePerformer",
    "new_batch_bundle",
    "new_bundle",
    "new_collection_bundle",
    "new_searchset_bundle",
    "new_transaction_bundle",
]
