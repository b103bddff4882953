"""FHIR Parameters resource."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import field_validator

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import (
    CodeableConcept,
    Coding,
    Identifier,
    Period,
    Quantity,
    Reference,
)
from fhir_r4.factory import resource_from_dict
from fhir_r4.primitives import Date, DateTime, Instant
from fhir_r4.resource import Resource


class Parameter(BackboneElement):
    """
    A named operation parameter.

    A parameter carries a ``value[x]``, a nested ``resource`` document, or
    ``part`` sub-parameters. ``value[x]`` alternatives not modelled here are
    kept as extras.
    """

    name: str | None = None
    valueString: str | None = None
    valueBoolean: bool | None = None
    valueInteger: int | None = None
    valueDecimal: float | None = None
    valueCode: str | None = None
    valueUri: str | None = None
    valueDate: Date | None = None
    valueDateTime: DateTime | None = None
    valueInstant: Instant | None = None
    valueCoding: Coding | None = None
    valueCodeableConcept: CodeableConcept | None = None
    valueIdentifier: Identifier | None = None
    valuePeriod: Period | None = None
    valueQuantity: Quantity | None = None
    valueReference: Reference | None = None
    resource: dict[str, Any] | None = None
    part: list[Parameter] | None = None

    fhir_required = frozenset({"name"})
    fhir_choices = {
        "value": (
            "valueString",
            "valueBoolean",
            "valueInteger",
            "valueDecimal",
            "valueCode",
            "valueUri",
            "valueDate",
            "valueDateTime",
            "valueInstant",
            "valueCoding",
            "valueCodeableConcept",
            "valueIdentifier",
            "valuePeriod",
            "valueQuantity",
            "valueReference",
        )
    }

    @field_validator("resource", mode="before")
    @classmethod
    def _resource_as_document(cls, value: Any) -> Any:
        return value.to_dict() if isinstance(value, Resource) else value

    @property
    def value(self) -> Any:
        return self.choice("value")

    def get_resource(self) -> Resource | None:
        """Materialize the nested ``resource``, if there is one."""
        if self.resource is None:
            return None
        return resource_from_dict(self.resource)


class Parameters(Resource):
    resourceType: Literal["Parameters"] = "Parameters"
    parameter: list[Parameter] | None = None

    def find(self, name: str) -> Parameter | None:
        """Return the first top-level parameter called ``name``, or ``None``."""
        for parameter in self.parameter or []:
            if parameter.name == name:
                return parameter
        return None


Parameter.model_rebuild()
