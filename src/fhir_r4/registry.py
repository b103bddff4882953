"""
Registry of resource shapes, keyed by their ``resourceType`` name.

The registry is the single place where a resource shape becomes known to the
factory and to the Bundle container. The package populates
:data:`default_registry` with the built-in shapes when it is imported; an
application adds its own shapes with :meth:`ResourceRegistry.register` before
it starts decoding.

Lookups never take a lock: registration is expected to finish before the
registry is shared between threads.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from fhir_r4.errors import RegistryConflictError, UnknownResourceTypeError
from fhir_r4.resource import Resource

logger = structlog.get_logger(__name__)


class ResourceRegistry:
    """
    Mapping from ``resourceType`` name to the model class that materializes it.

    Usage:

        registry = ResourceRegistry()
        registry.register(Patient)
        shape = registry.lookup("Patient")
        patient = shape()
    """

    def __init__(self, shapes: Iterable[type[Resource]] = ()) -> None:
        """
        :param shapes: Resource models to register straight away.
        """
        self._shapes: dict[str, type[Resource]] = {}
        self._names: dict[type[Resource], str] = {}
        for shape in shapes:
            self.register(shape)

    def register(self, shape: type[Resource], name: str | None = None) -> None:
        """
        Make ``shape`` the model for resource type ``name``.

        Registering the same model under the same name again is a no-op.

        :param shape: A :class:`~fhir_r4.resource.Resource` subclass.
        :param name: Resource type name. Defaults to the model's pinned
            ``resourceType``.
        :raises ValueError: If no name is given and the model does not pin one.
        :raises RegistryConflictError: If ``name`` already maps to another model.
        """
        name = name or shape.fhir_type_name()
        if not name:
            raise ValueError(f"{shape.__name__} does not declare a resourceType")

        existing = self._shapes.get(name)
        if existing is shape:
            return
        if existing is not None:
            raise RegistryConflictError(name)

        self._shapes[name] = shape
        self._names.setdefault(shape, name)
        logger.debug("Registered resource shape", resource_type=name)

    def lookup(self, name: str) -> type[Resource]:
        """
        Return the model registered for ``name``.

        :raises UnknownResourceTypeError: If nothing is registered under ``name``.
        """
        try:
            return self._shapes[name]
        except KeyError:
            raise UnknownResourceTypeError(name) from None

    def get(self, name: str) -> type[Resource] | None:
        """Return the model registered for ``name``, or ``None``."""
        return self._shapes.get(name)

    def name_for(self, resource: Resource | type[Resource]) -> str:
        """
        Return the registered name of a model (or of an instance's model).

        :raises UnknownResourceTypeError: If the model is not registered.
        """
        shape = resource if isinstance(resource, type) else type(resource)
        try:
            return self._names[shape]
        except KeyError:
            raise UnknownResourceTypeError(shape.__name__) from None

    def construct(self, name: str) -> Resource:
        """Build an empty instance of the shape registered for ``name``."""
        return self.lookup(name)()

    def names(self) -> list[str]:
        """All registered names, sorted."""
        return sorted(self._shapes)

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._shapes)


default_registry = ResourceRegistry()
