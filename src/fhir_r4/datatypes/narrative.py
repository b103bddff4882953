"""FHIR Narrative type."""

from fhir_r4.base import Element


class Narrative(Element):
    status: str | None = None
    div: str | None = None

    fhir_required = frozenset({"status", "div"})
    fhir_codes = {
        "status": frozenset({"generated", "extensions", "additional", "empty"})
    }
