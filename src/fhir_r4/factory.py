"""
Polymorphic resource factory.

Turns a JSON document of unknown shape into the typed resource named by its
``resourceType`` field, in three steps:

1. peek: read only the discriminator,
2. resolve: look the name up in a :class:`~fhir_r4.registry.ResourceRegistry`,
3. materialize: decode the whole document into the resolved model.

Every function here is pure apart from debug logging, so it is safe to call
from several threads once the registry is populated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError

from fhir_r4.config import get_settings
from fhir_r4.errors import (
    MalformedDocumentError,
    MissingDiscriminatorError,
    issues_from_validation_error,
)
from fhir_r4.registry import ResourceRegistry, default_registry
from fhir_r4.resource import Resource

logger = structlog.get_logger(__name__)


class _Discriminator(BaseModel):
    """Reads ``resourceType`` and skips over everything else."""

    model_config = ConfigDict(extra="ignore")

    resourceType: str | None = None


def peek_resource_type(data: bytes | str | Mapping[str, Any]) -> str:
    """
    Read the ``resourceType`` of a document without materializing the rest.

    :param data: UTF-8 JSON bytes, JSON text, or an already decoded document.
    :returns: The non-empty discriminator.
    :raises MissingDiscriminatorError: If the field is absent, null or empty.
    :raises MalformedDocumentError: If ``data`` is not a JSON object or the
        field is not a string.
    """
    try:
        if isinstance(data, Mapping):
            peeked = _Discriminator.model_validate(dict(data))
        else:
            peeked = _Discriminator.model_validate_json(data)
    except ValidationError as err:
        raise MalformedDocumentError(
            None, issues_from_validation_error(err)
        ) from err

    if not peeked.resourceType:
        raise MissingDiscriminatorError()
    return peeked.resourceType


def unmarshal_resource(
    data: bytes | str,
    *,
    registry: ResourceRegistry | None = None,
    strict: bool | None = None,
) -> Resource:
    """
    Decode a FHIR JSON document into the typed resource it describes.

    Callers narrow the result with ``isinstance`` (or ``match``) to the shape
    they expect.

    :param data: UTF-8 encoded JSON bytes or JSON text.
    :param registry: Registry used to resolve the discriminator. Defaults to
        :data:`~fhir_r4.registry.default_registry`.
    :param strict: Use pydantic strict mode. Defaults to the
        ``strict_decoding`` setting.
    :returns: A fully decoded resource instance.
    :raises MissingDiscriminatorError: If ``resourceType`` is absent or empty.
    :raises UnknownResourceTypeError: If ``resourceType`` is not registered.
    :raises MalformedDocumentError: If the document is not valid JSON or does
        not fit the resolved shape.
    """
    resource_type = peek_resource_type(data)
    shape = _registry(registry).lookup(resource_type)

    try:
        resource = shape.model_validate_json(data, strict=_strict(strict))
    except ValidationError as err:
        raise MalformedDocumentError(
            resource_type, issues_from_validation_error(err, resource_type)
        ) from err

    logger.debug("Materialized resource", resource_type=resource_type)
    return resource


def resource_from_dict(
    document: Mapping[str, Any],
    *,
    registry: ResourceRegistry | None = None,
    strict: bool | None = None,
) -> Resource:
    """
    Materialize an already decoded generic document.

    Same contract as :func:`unmarshal_resource`; used for Bundle entries and
    contained resources, which are stored as plain dictionaries.
    """
    resource_type = peek_resource_type(document)
    shape = _registry(registry).lookup(resource_type)

    try:
        resource = shape.model_validate(dict(document), strict=_strict(strict))
    except ValidationError as err:
        raise MalformedDocumentError(
            resource_type, issues_from_validation_error(err, resource_type)
        ) from err

    logger.debug("Materialized resource", resource_type=resource_type)
    return resource


def marshal_resource(resource: Resource) -> bytes:
    """
    Encode a resource as UTF-8 FHIR JSON, discriminator included.

    :raises SerializationError: If the resource holds values JSON cannot carry.
    """
    return resource.to_json().encode("utf-8")


def _strict(strict: bool | None) -> bool:
    if strict is None:
        return get_settings().strict_decoding
    return strict


def _registry(registry: ResourceRegistry | None) -> ResourceRegistry:
    return default_registry if registry is None else registry
