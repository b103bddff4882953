"""FHIR Range type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.quantity import Quantity


class Range(Element):
    low: Quantity | None = None
    high: Quantity | None = None
