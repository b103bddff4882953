"""FHIR Quantity type."""

from fhir_r4.base import Element


class Quantity(Element):
    value: float | None = None
    comparator: str | None = None
    unit: str | None = None
    system: str | None = None
    code: str | None = None

    fhir_codes = {"comparator": frozenset({"<", "<=", ">=", ">"})}
