"""
Base models shared by every FHIR datatype and resource.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from fhir_r4.primitives import Date, DateTime, Instant, Time


class FhirModel(BaseModel):
    """
    Root of the model hierarchy.

    Field names are the FHIR JSON element names. Elements the model does not
    declare are kept as extras so that they survive a decode/encode cycle.

    Class-level metadata read by :mod:`fhir_r4.validation` and
    :mod:`fhir_r4.summary`:

    - ``fhir_required``: elements with a minimum cardinality of 1.
    - ``fhir_codes``: ``code`` elements bound to a required value set.
    - ``fhir_choices``: ``[x]`` groups, mapping the group name to its
      alternative element names.
    - ``fhir_summary``: elements included in ``_summary=true`` output.
    """

    model_config = ConfigDict(
        extra="allow",
        validate_assignment=True,
        populate_by_name=True,
    )

    fhir_required: ClassVar[frozenset[str]] = frozenset()
    fhir_codes: ClassVar[dict[str, frozenset[str]]] = {}
    fhir_choices: ClassVar[dict[str, tuple[str, ...]]] = {}
    fhir_summary: ClassVar[frozenset[str]] = frozenset()

    def choice(self, group: str) -> Any:
        """
        Return the populated alternative of a choice (``[x]``) element.

        :param group: Choice group name, e.g. ``"value"`` for ``value[x]``.
        :returns: The first alternative that is set, or ``None``.
        :raises KeyError: If the model has no such choice group.
        """
        for name in self.fhir_choices[group]:
            value = getattr(self, name, None)
            if value is not None:
                return value
        return None

    def choice_element(self, group: str) -> str | None:
        """Return the element name (e.g. ``valueQuantity``) set for ``group``."""
        for name in self.fhir_choices[group]:
            if getattr(self, name, None) is not None:
                return name
        return None


class Element(FhirModel):
    """FHIR Element: the base of every complex datatype."""

    id: str | None = None
    extension: list[Extension] | None = None


class BackboneElement(Element):
    """FHIR BackboneElement: nested resource components."""

    modifierExtension: list[Extension] | None = None


class Extension(Element):
    """
    FHIR Extension.

    Only primitive ``value[x]`` alternatives are modelled; complex values
    (``valueCodeableConcept``, ``valueReference``, ...) are carried as extras.
    """

    url: str | None = None
    valueBoolean: bool | None = None
    valueInteger: int | None = None
    valueDecimal: float | None = None
    valueString: str | None = None
    valueUri: str | None = None
    valueUrl: str | None = None
    valueCanonical: str | None = None
    valueCode: str | None = None
    valueDate: Date | None = None
    valueDateTime: DateTime | None = None
    valueTime: Time | None = None
    valueInstant: Instant | None = None

    fhir_required = frozenset({"url"})
    fhir_choices = {
        "value": (
            "valueBoolean",
            "valueInteger",
            "valueDecimal",
            "valueString",
            "valueUri",
            "valueUrl",
            "valueCanonical",
            "valueCode",
            "valueDate",
            "valueDateTime",
            "valueTime",
            "valueInstant",
        )
    }

    @property
    def value(self) -> Any:
        """The populated ``value[x]``, or the first complex extra if any."""
        value = self.choice("value")
        if value is None and self.model_extra:
            for key, extra in self.model_extra.items():
                if key.startswith("value"):
                    return extra
        return value


Element.model_rebuild()
BackboneElement.model_rebuild()
