"""Tests for DTOs."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from application.dtos.compound_dtos import CompoundProperties, NameResolution
from application.dtos.search_dtos import (
    CompoundSearchRequest,
    HybridSearchRequest,
    LocalSearchRequest,
    SearchSnapshot,
)
from domain.value_objects.search_source import Provenance, SearchSource
from tests.mocks import make_record


class TestCompoundSearchRequest:
    """Test CompoundSearchRequest DTO."""

    def test_defaults(self) -> None:
        request = CompoundSearchRequest(query_text="caffeine")
        assert request.limit == 50

    def test_empty_query_rejected(self) -> None:
        """Test that an empty query raises ValidationError."""
        with pytest.raises(ValidationError):
            CompoundSearchRequest(query_text="")

    def test_limit_capped(self) -> None:
        with pytest.raises(ValidationError):
            CompoundSearchRequest(query_text="caffeine", limit=101)


class TestLocalSearchRequest:
    def test_limit_cannot_exceed_local_cap(self) -> None:
        with pytest.raises(ValidationError):
            LocalSearchRequest(query_text="eth", limit=11)


def test_hybrid_request_accepts_empty_query() -> None:
    assert HybridSearchRequest().query_text == ""


class TestSearchSnapshot:
    """Test SearchSnapshot DTO."""

    def test_default_snapshot_is_idle(self) -> None:
        snapshot = SearchSnapshot()

        assert snapshot.results == ()
        assert snapshot.loading is False
        assert snapshot.search_source is SearchSource.CACHE
        assert snapshot.has_cached_results is False
        assert snapshot.has_api_results is False
        assert snapshot.provenance is Provenance.EMPTY

    def test_results_are_cached_then_remote(self) -> None:
        snapshot = SearchSnapshot(
            query="eth",
            cached_results=(make_record(702, "Ethanol"),),
            api_results=(make_record(3283, "ether"), make_record(6324, "ethylene")),
            search_source=SearchSource.BOTH,
        )

        assert [r.identifier for r in snapshot.results] == [702, 3283, 6324]
        assert snapshot.has_cached_results is True
        assert snapshot.has_api_results is True
        assert snapshot.provenance is Provenance.BOTH

    def test_serialization_includes_computed_fields(self) -> None:
        snapshot = SearchSnapshot(query="caffeine", api_results=(make_record(2519, "caffeine"),))

        data = snapshot.model_dump(mode="json")

        assert data["provenance"] == "remote-only"
        assert data["results"][0]["identifier"] == 2519
        assert data["has_api_results"] is True

    def test_snapshot_is_immutable(self) -> None:
        snapshot = SearchSnapshot()
        with pytest.raises(ValidationError):
            snapshot.loading = True


class TestCompoundDtos:
    def test_name_resolution_requires_positive_identifier(self) -> None:
        with pytest.raises(ValidationError):
            NameResolution(name="mystery", identifier=0)

    def test_properties_defaults(self) -> None:
        properties = CompoundProperties(identifier=702)

        assert properties.molecular_formula == ""
        assert properties.molecular_weight == 0.0
        assert properties.iupac_name is None
