"""FHIR CodeableConcept type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.coding import Coding


class CodeableConcept(Element):
    coding: list[Coding] | None = None
    text: str | None = None

    def has_code(self, system: str | None, code: str) -> bool:
        """
        Check whether any coding matches ``code`` (and ``system``, if given).

        :param system: Code system URI, or ``None`` to match any system.
        :param code: The code to look for.
        """
        return any(
            coding.code == code and (system is None or coding.system == system)
            for coding in self.coding or []
        )
