"""FHIR HumanName type."""

from fhir_r4.base import Element
from fhir_r4.datatypes.period import Period


class HumanName(Element):
    use: str | None = None
    text: str | None = None
    family: str | None = None
    given: list[str] | None = None
    prefix: list[str] | None = None
    suffix: list[str] | None = None
    period: Period | None = None

    fhir_codes = {
        "use": frozenset(
            {"usual", "official", "temp", "nickname", "anonymous", "old", "maiden"}
        )
    }

    def display_name(self) -> str:
        """Return ``text`` if present, otherwise given names followed by family."""
        if self.text:
            return self.text
        return " ".join([*(self.given or []), self.family or ""]).strip()
