"""
Summary forms of a resource, as selected by the FHIR ``_summary`` parameter.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from fhir_r4.resource import JsonDocument, Resource

SUBSETTED_SYSTEM = "http://terminology.hl7.org/CodeSystem/v3-ObservationValue"
SUBSETTED_TAG = {
    "system": SUBSETTED_SYSTEM,
    "code": "SUBSETTED",
    "display": "subsetted",
}

_ALWAYS = ("resourceType", "id", "meta")


class SummaryMode(StrEnum):
    TRUE = "true"
    TEXT = "text"
    DATA = "data"
    FALSE = "false"


def summarize(
    resource: Resource, mode: SummaryMode | str = SummaryMode.TRUE
) -> JsonDocument:
    """
    Encode ``resource`` in one of the ``_summary`` forms.

    - ``true``: the elements the resource type marks as summary elements.
    - ``text``: ``text`` plus the mandatory top-level elements.
    - ``data``: everything except ``text``.
    - ``false``: the full resource.

    Every form except ``false`` is tagged ``SUBSETTED`` in ``meta.tag``.

    :raises ValueError: If ``mode`` is not a summary mode.
    """
    mode = SummaryMode(mode)
    document = resource.to_dict()
    if mode is SummaryMode.FALSE:
        return document

    shape = type(resource)
    if mode is SummaryMode.TRUE:
        keep = {*_ALWAYS, *_element_names(shape, shape.fhir_summary)}
    elif mode is SummaryMode.TEXT:
        keep = {*_ALWAYS, "text", *_element_names(shape, shape.fhir_required)}
    else:
        keep = set(document) - {"text"}

    subset = {key: value for key, value in document.items() if key in keep}
    _tag_subsetted(subset)
    return subset


def _element_names(shape: type[Resource], fields: frozenset[str]) -> set[str]:
    names: set[str] = set()
    for name in fields:
        info = shape.model_fields.get(name)
        names.add(info.alias or name if info else name)
    return names


def _tag_subsetted(document: dict[str, Any]) -> None:
    meta = dict(document.get("meta") or {})
    tags = list(meta.get("tag") or [])
    if not any(
        tag.get("system") == SUBSETTED_SYSTEM and tag.get("code") == "SUBSETTED"
        for tag in tags
    ):
        tags.append(dict(SUBSETTED_TAG))
    meta["tag"] = tags
    document["meta"] = meta
