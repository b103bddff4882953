"""
Abstract FHIR Resource and DomainResource models.

Concrete shapes subclass :class:`DomainResource` (or :class:`Resource`) and
pin ``resourceType`` to a ``Literal`` of their own name, defaulted so that an
empty instance can be built with no arguments.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from pydantic import field_validator
from pydantic_core import PydanticSerializationError

from fhir_r4.base import Extension, FhirModel
from fhir_r4.datatypes.meta import Meta
from fhir_r4.datatypes.narrative import Narrative
from fhir_r4.errors import SerializationError

if TYPE_CHECKING:
    from fhir_r4.errors import FieldIssue
    from fhir_r4.validation import Validator

type JsonDocument = dict[str, Any]


@runtime_checkable
class HasLogicalId(Protocol):
    """Capability of any shape that exposes a logical ``id``."""

    id: str | None


class Resource(FhirModel):
    """FHIR Resource: the base of every resource shape."""

    id: str | None = None
    meta: Meta | None = None
    implicitRules: str | None = None
    language: str | None = None

    @classmethod
    def fhir_type_name(cls) -> str | None:
        """
        The ``resourceType`` this model is pinned to, or ``None`` for the
        abstract bases.
        """
        field = cls.model_fields.get("resourceType")
        if field is None or not isinstance(field.default, str):
            return None
        return field.default

    def to_document(self) -> JsonDocument:
        """
        Encode to a generic JSON document holding only the elements that were
        set, either explicitly or by decoding.

        The discriminator is present only if it was set; see :meth:`to_dict`.

        :raises SerializationError: If an element cannot be represented as JSON.
        """
        try:
            return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        except (PydanticSerializationError, TypeError, ValueError) as err:
            raise SerializationError(type(self).__name__, str(err)) from err

    def to_dict(self) -> JsonDocument:
        """
        Encode to a JSON document with ``resourceType`` as the first key.

        :raises SerializationError: If an element cannot be represented as JSON.
        """
        document = self.to_document()
        resource_type = document.pop("resourceType", None) or self.fhir_type_name()
        if resource_type is None:
            raise SerializationError(
                type(self).__name__, "model does not declare a resourceType"
            )
        return {"resourceType": resource_type, **document}

    def to_json(self, *, indent: int | None = None) -> str:
        """
        Encode to FHIR JSON text; see :meth:`to_dict`.

        :raises SerializationError: If an element holds NaN or an infinity.
        """
        document = self.to_dict()
        try:
            return json.dumps(
                document, indent=indent, ensure_ascii=False, allow_nan=False
            )
        except ValueError as err:
            raise SerializationError(type(self).__name__, str(err)) from err

    def validate_fhir(self, validator: Validator | None = None) -> list[FieldIssue]:
        """
        Check this resource against FHIR structural rules.

        :param validator: Validator to use; defaults to
            :class:`~fhir_r4.validation.FhirValidator`.
        :returns: The problems found; empty when the resource is valid.
        """
        from fhir_r4.validation import FhirValidator

        return (validator or FhirValidator()).validate(self)


class DomainResource(Resource):
    """
    FHIR DomainResource: a resource with narrative, extensions and contained
    resources.

    ``contained`` resources are stored as generic documents; use
    :mod:`fhir_r4.contained` to add and materialize them.
    """

    text: Narrative | None = None
    contained: list[dict[str, Any]] | None = None
    extension: list[Extension] | None = None
    modifierExtension: list[Extension] | None = None

    @field_validator("contained", mode="before")
    @classmethod
    def _contained_as_documents(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [
                item.to_dict() if isinstance(item, Resource) else item for item in value
            ]
        return value


def copy_document(document: Mapping[str, Any]) -> JsonDocument:
    """
    Return a copy of a generic document that shares nothing with the original.

    :raises SerializationError: If the document holds values JSON cannot carry.
    """
    try:
        return json.loads(json.dumps(dict(document), allow_nan=False))
    except (TypeError, ValueError) as err:
        resource_type = document.get("resourceType") or "document"
        raise SerializationError(str(resource_type), str(err)) from err
