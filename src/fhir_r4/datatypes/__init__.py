"""FHIR R4 complex datatypes."""

from fhir_r4.datatypes.address import Address
from fhir_r4.datatypes.annotation import Annotation
from fhir_r4.datatypes.attachment import Attachment
from fhir_r4.datatypes.codeable_concept import CodeableConcept
from fhir_r4.datatypes.coding import Coding
from fhir_r4.datatypes.contact_point import ContactPoint
from fhir_r4.datatypes.dosage import Dosage
from fhir_r4.datatypes.human_name import HumanName
from fhir_r4.datatypes.identifier import Identifier
from fhir_r4.datatypes.meta import Meta
from fhir_r4.datatypes.narrative import Narrative
from fhir_r4.datatypes.period import Period
from fhir_r4.datatypes.quantity import Quantity
from fhir_r4.datatypes.range import Range
from fhir_r4.datatypes.ratio import Ratio
from fhir_r4.datatypes.reference import Reference

__all__ = [
    "Address",
    "Annotation",
    "Attachment",
    "CodeableConcept",
    "Coding",
    "ContactPoint",
    "Dosage",
    "HumanName",
    "Identifier",
    "Meta",
    "Narrative",
    "Period",
    "Quantity",
    "Range",
    "Ratio",
    "Reference",
]
