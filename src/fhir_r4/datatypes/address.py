"""FHIR Address type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.period import Period


class Address(Element):
    use: str | None = None
    type: str | None = None
    text: str | None = None
    line: list[str] | None = None
    city: str | None = None
    district: str | None = None
    state: str | None = None
    postalCode: str | None = None
    country: str | None = None
    period: Period | None = None

    fhir_codes = {
        "use": frozenset({"home", "work", "temp", "old", "billing"}),
        "type": frozenset({"postal", "physical", "both"}),
    }
