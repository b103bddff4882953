"""FHIR Ratio type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.quantity import Quantity


class Ratio(Element):
    numerator: Quantity | None = None
    denominator: Quantity | None = None
