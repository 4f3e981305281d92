from enum import Enum


class SearchSource(str, Enum):
    """Which phase produced the currently displayed results."""

    CACHE = "cache"
    API = "api"
    BOTH = "both"


class Provenance(str, Enum):
    """Which collections of a result set are populated."""

    CACHE_ONLY = "cache-only"
    REMOTE_ONLY = "remote-only"
    BOTH = "both"
    EMPTY = "empty"

    @classmethod
    def from_counts(cls, cached: int, remote: int) -> "Provenance":
        if cached and remote:
            return cls.BOTH
        if cached:
            return cls.CACHE_ONLY
        if remote:
            return cls.REMOTE_ONLY
        return cls.EMPTY
