"""
Error types raised while decoding, encoding and querying FHIR resources.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import ValidationError


@dataclass(frozen=True)
class FieldIssue:
    """
    A single problem found at a location inside a FHIR document.

    :param path: Dotted element path, e.g. ``Patient.name[0].family``.
    :param message: Human-readable description of the problem.
    :param code: FHIR ``IssueType`` code describing the kind of problem.
    """

    path: str
    message: str
    code: str = "invalid"

    def __str__(self) -> str:
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


def format_path(root: str, loc: tuple[int | str, ...]) -> str:
    """
    Render a pydantic error location as a FHIR element path.

    ``("name", 0, "family")`` under root ``Patient`` becomes
    ``Patient.name[0].family``.
    """
    path = root
    for part in loc:
        if isinstance(part, int):
            path = f"{path}[{part}]"
        elif path:
            path = f"{path}.{part}"
        else:
            path = str(part)
    return path


def issues_from_validation_error(
    err: ValidationError, root: str = ""
) -> list[FieldIssue]:
    """Flatten a pydantic ``ValidationError`` into :class:`FieldIssue` items."""
    return [
        FieldIssue(
            path=format_path(root, tuple(detail["loc"])),
            message=detail["msg"],
            code="structure",
        )
        for detail in err.errors(include_url=False)
    ]


class FhirError(Exception):
    """Base class for every error raised by this package."""


def _at(message: str, location: str | None) -> str:
    return f"{message} (at {location})" if location else message


@dataclass(eq=False)
class MissingDiscriminatorError(FhirError):
    """
    Raised when a document has no usable ``resourceType`` field.

    :param location: Where the document sits, e.g. ``Bundle.entry[2].resource``.
    """

    location: str | None = None

    def __str__(self) -> str:
        return _at("Document is missing the resourceType field", self.location)


@dataclass(eq=False)
class UnknownResourceTypeError(FhirError):
    """
    Raised when a ``resourceType`` is not present in the resource registry.

    :param name: The unrecognised resource type name.
    :param location: Where the document sits, if known.
    """

    name: str
    location: str | None = None

    def __str__(self) -> str:
        return _at(f"Unknown resource type: {self.name}", self.location)


@dataclass(eq=False)
class MalformedDocumentError(FhirError):
    """
    Raised when a document is not valid JSON or does not fit its resource shape.

    :param resource_type: The resource type being decoded, if it was known.
    :param issues: Field-level problems reported by the decoder.
    :param location: Where the document sits, if known.
    """

    resource_type: str | None
    issues: list[FieldIssue] = field(default_factory=list)
    location: str | None = None

    def __str__(self) -> str:
        subject = f"{self.resource_type} document" if self.resource_type else "document"
        detail = "; ".join(str(issue) for issue in self.issues) or "unreadable"
        return _at(f"Malformed {subject}: {detail}", self.location)


@dataclass(eq=False)
class SerializationError(FhirError):
    """
    Raised when a resource cannot be encoded to a JSON document.

    :param resource_type: Name of the model that failed to encode.
    :param message: Description from the underlying encoder.
    """

    resource_type: str
    message: str

    def __str__(self) -> str:
        return f"Failed to serialize {self.resource_type}: {self.message}"


@dataclass(eq=False)
class IndexOutOfRangeError(FhirError):
    """
    Raised when an entry index falls outside ``0 <= index < size``.

    :param index: The requested index.
    :param size: Number of available entries.
    """

    index: int
    size: int

    def __str__(self) -> str:
        return f"Index {self.index} out of range ({self.size} entries)"


@dataclass(eq=False)
class EmptyEntryError(FhirError):
    """
    Raised when a Bundle entry has no resource payload.

    :param index: Position of the empty entry.
    """

    index: int

    def __str__(self) -> str:
        return f"Bundle.entry[{self.index}] has no resource"


@dataclass(eq=False)
class ResourceNotFoundError(FhirError):
    """
    Raised when no resource matches a logical id or reference.

    :param resource_id: The id or reference that was searched for.
    """

    resource_id: str

    def __str__(self) -> str:
        return f"Resource not found: {self.resource_id}"


@dataclass(eq=False)
class RegistryConflictError(FhirError):
    """
    Raised when a resource type name is registered twice with different models.

    :param name: The conflicting resource type name.
    """

    name: str

    def __str__(self) -> str:
        return f"Resource type {self.name} is already registered to another model"
