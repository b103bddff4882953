"""
FHIR Bundle resource: a container for a collection of resources.

Entry payloads are stored as generic JSON documents, so a single Bundle can
hold any mix of resource types. Typed resources handed to :meth:`Bundle.add_entry`
are encoded on the way in and re-materialized through the factory on the way
out; every read therefore costs a full decode of the entry.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Literal

import structlog
from pydantic import NonNegativeInt, field_validator

from fhir_r4.base import BackboneElement
from fhir_r4.datatypes import Identifier
from fhir_r4.errors import (
    EmptyEntryError,
    FhirError,
    IndexOutOfRangeError,
    MissingDiscriminatorError,
    ResourceNotFoundError,
)
from fhir_r4.factory import resource_from_dict
from fhir_r4.primitives import Instant
from fhir_r4.registry import ResourceRegistry, default_registry
from fhir_r4.resource import HasLogicalId, JsonDocument, Resource, copy_document

logger = structlog.get_logger(__name__)


class BundleType(StrEnum):
    DOCUMENT = "document"
    MESSAGE = "message"
    TRANSACTION = "transaction"
    TRANSACTION_RESPONSE = "transaction-response"
    BATCH = "batch"
    BATCH_RESPONSE = "batch-response"
    HISTORY = "history"
    SEARCHSET = "searchset"
    COLLECTION = "collection"


# Kinds whose ``total`` is meaningful; it is created on first append.
_TOTAL_TRACKED = frozenset({BundleType.SEARCHSET, BundleType.HISTORY})


class BundleLink(BackboneElement):
    relation: str | None = None
    url: str | None = None

    fhir_required = frozenset({"relation", "url"})


class BundleEntrySearch(BackboneElement):
    mode: str | None = None
    score: float | None = None

    fhir_codes = {"mode": frozenset({"match", "include", "outcome"})}


class BundleEntryRequest(BackboneElement):
    method: str | None = None
    url: str | None = None
    ifNoneMatch: str | None = None
    ifModifiedSince: Instant | None = None
    ifMatch: str | None = None
    ifNoneExist: str | None = None

    fhir_required = frozenset({"method", "url"})
    fhir_codes = {
        "method": frozenset({"GET", "HEAD", "POST", "PUT", "DELETE", "PATCH"})
    }


class BundleEntryResponse(BackboneElement):
    status: str | None = None
    location: str | None = None
    etag: str | None = None
    lastModified: Instant | None = None
    outcome: dict[str, Any] | None = None

    fhir_required = frozenset({"status"})


class BundleEntry(BackboneElement):
    """
    One slot of a Bundle.

    ``resource`` accepts a typed :class:`~fhir_r4.resource.Resource` or a
    generic document and always stores the generic document.
    """

    link: list[BundleLink] | None = None
    fullUrl: str | None = None
    resource: dict[str, Any] | None = None
    search: BundleEntrySearch | None = None
    request: BundleEntryRequest | None = None
    response: BundleEntryResponse | None = None

    @field_validator("resource", mode="before")
    @classmethod
    def _resource_as_document(cls, value: Any) -> Any:
        return value.to_dict() if isinstance(value, Resource) else value


class Bundle(Resource):
    resourceType: Literal["Bundle"] = "Bundle"
    identifier: Identifier | None = None
    type: str | None = None
    timestamp: Instant | None = None
    total: NonNegativeInt | None = None
    link: list[BundleLink] | None = None
    entry: list[BundleEntry] | None = None
    signature: dict[str, Any] | None = None

    fhir_required = frozenset({"type"})
    fhir_codes = {"type": frozenset(BundleType)}

    def add_entry(
        self,
        resource: Resource | Mapping[str, Any],
        full_url: str | None = None,
        *,
        registry: ResourceRegistry | None = None,
    ) -> BundleEntry:
        """
        Append a resource as a new entry.

        The resource is encoded to a generic document. If it does not carry a
        ``resourceType``, the name it is registered under is injected.

        ``total`` is incremented when it is already set. When it is unset it
        is created for ``searchset`` and ``history`` bundles only, so that it
        equals the number of entries afterwards.

        :param resource: A typed resource or a generic document.
        :param full_url: Optional ``fullUrl`` for the entry.
        :param registry: Registry used to infer a missing discriminator.
        :returns: The appended entry.
        :raises UnknownResourceTypeError: If the discriminator is missing and
            the resource's model is not registered.
        :raises MissingDiscriminatorError: If a generic document has no
            ``resourceType``.
        :raises SerializationError: If the resource cannot be encoded.
        """
        document = _as_document(
            resource, default_registry if registry is None else registry
        )
        entry = BundleEntry(resource=document)
        if full_url is not None:
            entry.fullUrl = full_url

        if self.entry is None:
            self.entry = []
        self.entry.append(entry)

        if self.total is not None:
            self.total += 1
        elif self.type in _TOTAL_TRACKED:
            self.total = len(self.entry)

        logger.debug(
            "Added bundle entry",
            resource_type=document["resourceType"],
            index=len(self.entry) - 1,
        )
        return entry

    def get_entry(
        self, index: int, *, registry: ResourceRegistry | None = None
    ) -> Resource:
        """
        Materialize the resource held by entry ``index``.

        :param registry: Registry used to resolve the entry's ``resourceType``.
            Pass the one given to :meth:`add_entry` for unregistered shapes.
        :raises IndexOutOfRangeError: If ``index`` is negative or past the end.
        :raises EmptyEntryError: If the entry has no resource.
        :raises FhirError: Any factory error, with ``location`` set to the entry.
        """
        entries = self.entry or []
        if index < 0 or index >= len(entries):
            raise IndexOutOfRangeError(index, len(entries))

        document = entries[index].resource
        if document is None:
            raise EmptyEntryError(index)

        try:
            return resource_from_dict(document, registry=registry)
        except FhirError as err:
            if hasattr(err, "location"):
                raise dataclasses.replace(
                    err, location=f"Bundle.entry[{index}].resource"
                ) from err
            raise

    def get_all_entries(
        self, *, registry: ResourceRegistry | None = None
    ) -> list[Resource]:
        """
        Materialize every entry, in order.

        Stops at the first entry that fails; nothing is returned in that case.
        """
        return [
            self.get_entry(index, registry=registry)
            for index in range(len(self.entry or []))
        ]

    def find_resource_by_id(
        self, resource_id: str, *, registry: ResourceRegistry | None = None
    ) -> tuple[Resource, int]:
        """
        Find the first entry whose resource has logical id ``resource_id``.

        Entries that cannot be materialized are skipped.

        :returns: The resource and its entry index.
        :raises ResourceNotFoundError: If no entry matches.
        """
        for index in range(len(self.entry or [])):
            try:
                resource = self.get_entry(index, registry=registry)
            except FhirError as err:
                logger.warning(
                    "Skipping unreadable bundle entry", index=index, error=str(err)
                )
                continue
            if isinstance(resource, HasLogicalId) and resource.id == resource_id:
                return resource, index
        raise ResourceNotFoundError(resource_id)

    def filter_by_resource_type(
        self, resource_type: str, *, registry: ResourceRegistry | None = None
    ) -> list[Resource]:
        """
        Materialize the entries whose ``resourceType`` is ``resource_type``.

        Only matching entries are decoded. Order is preserved; the result may
        be empty.
        """
        return [
            self.get_entry(index, registry=registry)
            for index, entry in enumerate(self.entry or [])
            if entry.resource is not None
            and entry.resource.get("resourceType") == resource_type
        ]

    def resource_types(self) -> list[str]:
        """Distinct ``resourceType`` values of the entries, in first-seen order."""
        seen: dict[str, None] = {}
        for entry in self.entry or []:
            if entry.resource is not None:
                name = entry.resource.get("resourceType")
                if isinstance(name, str) and name:
                    seen.setdefault(name, None)
        return list(seen)

    def resolve_reference(
        self, reference: str, *, registry: ResourceRegistry | None = None
    ) -> Resource:
        """
        Resolve a reference against the entries of this bundle.

        An entry whose ``fullUrl`` equals ``reference`` wins. Otherwise the
        trailing ``Type/id`` of the reference (relative or absolute) is
        matched against each entry's ``resourceType`` and ``id``.

        :raises ResourceNotFoundError: If nothing matches.
        """
        entries = self.entry or []
        for index, entry in enumerate(entries):
            if entry.fullUrl == reference and entry.resource is not None:
                return self.get_entry(index, registry=registry)

        parts = reference.rstrip("/").split("/")
        if len(parts) >= 2:
            resource_type, resource_id = parts[-2], parts[-1]
            for index, entry in enumerate(entries):
                document = entry.resource
                if (
                    document is not None
                    and document.get("resourceType") == resource_type
                    and document.get("id") == resource_id
                ):
                    return self.get_entry(index, registry=registry)

        raise ResourceNotFoundError(reference)

    def link_url(self, relation: str) -> str | None:
        """The URL of the link with the given relation (``next``, ``self``...)."""
        for link in self.link or []:
            if link.relation == relation:
                return link.url
        return None


def _as_document(
    resource: Resource | Mapping[str, Any], registry: ResourceRegistry
) -> JsonDocument:
    if isinstance(resource, Resource):
        document = resource.to_document()
        if not document.get("resourceType"):
            document.pop("resourceType", None)
            return {"resourceType": registry.name_for(resource), **document}
        return document

    if not resource.get("resourceType"):
        raise MissingDiscriminatorError()
    return copy_document(resource)


def new_bundle(kind: BundleType | str) -> Bundle:
    """
    Create an empty bundle of the given kind.

    :raises ValueError: If ``kind`` is not a Bundle type code.
    """
    return Bundle(type=BundleType(kind).value)


def new_searchset_bundle() -> Bundle:
    return new_bundle(BundleType.SEARCHSET)


def new_transaction_bundle() -> Bundle:
    return new_bundle(BundleType.TRANSACTION)


def new_batch_bundle() -> Bundle:
    return new_bundle(BundleType.BATCH)


def new_collection_bundle() -> Bundle:
    return new_bundle(BundleType.COLLECTION)
