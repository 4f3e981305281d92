"""DTOs for compound search endpoints and the hybrid search snapshot."""

from pydantic import BaseModel, ConfigDict, Field, computed_field

from domain.value_objects.compound_record import CompoundRecord
from domain.value_objects.search_source import Provenance, SearchSource


class CompoundSearchRequest(BaseModel):
    """Request to resolve a free-text query into compound records."""

    query_text: str = Field(..., min_length=1)
    limit: int = Field(default=50, ge=1, le=100)


class CompoundSearchResponse(BaseModel):
    """Response from remote compound resolution or local catalog search."""

    query: str
    results: list[CompoundRecord]
    total_results: int


class SearchSnapshot(BaseModel):
    """Immutable view of the hybrid search state for one query evaluation.

    Presentation code reads snapshots; every state change produces a new one.
    `results` is always the cached matches followed by the remote matches.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    generation: int = 0
    cached_results: tuple[CompoundRecord, ...] = ()
    api_results: tuple[CompoundRecord, ...] = ()
    loading: bool = False
    search_source: SearchSource = SearchSource.CACHE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def results(self) -> tuple[CompoundRecord, ...]:
        return self.cached_results + self.api_results

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_cached_results(self) -> bool:
        return bool(self.cached_results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_api_results(self) -> bool:
        return bool(self.api_results)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def provenance(self) -> Provenance:
        return Provenance.from_counts(len(self.cached_results), len(self.api_results))


class LocalSearchRequest(BaseModel):
    """Request to search the local compound catalog."""

    query_text: str = Field(..., min_length=1)
    limit: int = Field(default=10, ge=1, le=10)


class HybridSearchRequest(BaseModel):
    """Request to run one settled hybrid search evaluation.

    An empty query is accepted and yields the idle snapshot.
    """

    query_text: str = ""
