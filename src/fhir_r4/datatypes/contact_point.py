"""FHIR ContactPoint type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.period import Period


class ContactPoint(Element):
    system: str | None = None
    value: str | None = None
    use: str | None = None
    rank: int | None = None
    period: Period | None = None

    fhir_codes = {
        "system": frozenset({"phone", "fax", "email", "pager", "url", "sms", "other"}),
        "use": frozenset({"home", "work", "temp", "old", "mobile"}),
    }
