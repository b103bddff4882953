"""FHIR Coding type."""

from fhir_r4.base import Element


class Coding(Element):
    system: str | None = None
    version: str | None = None
    code: str | None = None
    display: str | None = None
    userSelected: bool | None = None
