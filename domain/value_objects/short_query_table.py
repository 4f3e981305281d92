from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator

_DEFAULT_ENTRIES: dict[str, tuple[str, ...]] = {
    "a": ("acetone", "ammonia", "aspirin", "acetic acid", "acetaminophen", "argon", "arsenic"),
    "b": ("benzene", "butanol", "bromine", "barium", "boron"),
    "c": ("caffeine", "chlorine", "carbon", "calcium", "copper", "chromium"),
    "d": ("dextrose", "dimethyl", "dopamine"),
    "e": ("ethanol", "ethane", "ether", "epinephrine"),
    "f": ("formaldehyde", "fluorine", "fructose"),
    "g": ("glucose", "glycerol", "gold"),
    "h": ("hydrogen", "helium", "hydrochloric acid"),
    "i": ("iodine", "iron", "isopropanol", "ibuprofen"),
    "m": ("methanol", "methane", "mercury", "magnesium"),
    "n": ("nitrogen", "neon", "nickel", "nitric acid"),
    "o": ("oxygen", "ozone"),
    "p": ("propanol", "propane", "phosphorus", "potassium"),
    "s": ("sulfuric acid", "sodium", "silver", "sucrose"),
    "t": ("toluene", "titanium"),
    "w": ("water",),
}

SHORT_QUERY_MAX_LENGTH = 2


class ShortQueryTable(BaseModel):
    """Static per-letter list of common compound names for 1-2 character queries.

    Autocomplete endpoints return little of value for one or two letters, so
    these queries are answered from a curated list instead. Letters without an
    entry yield no candidates and the caller falls back to autocomplete.
    """

    model_config = ConfigDict(frozen=True)

    entries: Mapping[str, tuple[str, ...]] = Field(
        default_factory=lambda: MappingProxyType(_DEFAULT_ENTRIES),
    )

    @field_validator("entries")
    @classmethod
    def normalize_keys(cls, v: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        """Key the table by lowercase single characters."""
        normalized: dict[str, tuple[str, ...]] = {}
        for key, names in v.items():
            if len(key) != 1:
                msg = f"Short query table keys must be single characters, got {key!r}"
                raise ValueError(msg)
            normalized[key.lower()] = tuple(names)
        return MappingProxyType(normalized)

    @staticmethod
    def applies_to(query: str) -> bool:
        return 0 < len(query) <= SHORT_QUERY_MAX_LENGTH

    def candidates(self, query: str, limit: int = 10) -> list[str]:
        """Return the curated names for a short query.

        One character returns the whole letter list; two characters keep only
        names starting with the query. Matching is case-insensitive.
        """
        if not self.applies_to(query):
            return []
        lowered = query.lower()
        names = self.entries.get(lowered[0], ())
        if len(lowered) == SHORT_QUERY_MAX_LENGTH:
            names = tuple(name for name in names if name.lower().startswith(lowered))
        return list(names[:limit])
