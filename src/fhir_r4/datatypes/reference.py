"""FHIR Reference type."""

from fhir_r4.base import Element


class Reference(Element):
    """
    A reference from one resource to another.

    ``Reference.identifier`` is not modelled; when present it is kept as an
    extra element.
    """

    reference: str | None = None
    type: str | None = None
    display: str | None = None
