"""
Helpers for ``DomainResource.contained``.

Contained resources are stored as generic documents, like Bundle entries, and
are materialized through the factory when read.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from fhir_r4.errors import (
    FhirError,
    IndexOutOfRangeError,
    MissingDiscriminatorError,
    ResourceNotFoundError,
)
from fhir_r4.factory import resource_from_dict
from fhir_r4.registry import ResourceRegistry
from fhir_r4.resource import DomainResource, Resource, copy_document


def contained_reference(resource: Resource | Mapping[str, Any]) -> str:
    """
    Return the local reference (``#id``) that points at a contained resource.

    :raises ValueError: If the resource has no id.
    """
    resource_id = resource.id if isinstance(resource, Resource) else resource.get("id")
    if not resource_id:
        raise ValueError("A contained resource needs an id to be referenced")
    return f"#{resource_id}"


def add_contained(owner: DomainResource, resource: Resource | Mapping[str, Any]) -> str:
    """
    Append ``resource`` to ``owner.contained``.

    :returns: The local reference to use from within ``owner``.
    :raises ValueError: If the resource has no id.
    :raises MissingDiscriminatorError: If a generic document has no
        ``resourceType``.
    :raises SerializationError: If the resource cannot be encoded.
    """
    reference = contained_reference(resource)
    if isinstance(resource, Resource):
        document = resource.to_dict()
    elif resource.get("resourceType"):
        document = copy_document(resource)
    else:
        raise MissingDiscriminatorError()

    if owner.contained is None:
        owner.contained = []
    owner.contained.append(document)
    return reference


def get_contained(
    owner: DomainResource, index: int, *, registry: ResourceRegistry | None = None
) -> Resource:
    """
    Materialize ``owner.contained[index]``.

    :param registry: Registry used to resolve the ``resourceType``.
    :raises IndexOutOfRangeError: If ``index`` is negative or past the end.
    """
    contained = owner.contained or []
    if index < 0 or index >= len(contained):
        raise IndexOutOfRangeError(index, len(contained))

    try:
        return resource_from_dict(contained[index], registry=registry)
    except FhirError as err:
        if hasattr(err, "location"):
            location = f"{owner.fhir_type_name()}.contained[{index}]"
            raise dataclasses.replace(err, location=location) from err
        raise


def find_contained(
    owner: DomainResource, reference: str, *, registry: ResourceRegistry | None = None
) -> Resource:
    """
    Materialize the contained resource with the given id.

    :param reference: The id, with or without the leading ``#``.
    :raises ResourceNotFoundError: If no contained resource has that id.
    """
    resource_id = reference.removeprefix("#")
    for index, document in enumerate(owner.contained or []):
        if document.get("id") == resource_id:
            return get_contained(owner, index, registry=registry)
    raise ResourceNotFoundError(reference)
