"""FHIR Attachment type."""

from fhir_r4.base import Element
from fhir_r4.primitives import DateTime


class Attachment(Element):
    contentType: str | None = None
    language: str | None = None
    data: str | None = None
    url: str | None = None
    size: int | None = None
    hash: str | None = None
    title: str | None = None
    creation: DateTime | None = None
