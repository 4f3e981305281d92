"""Tests for domain value objects."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.value_objects.catalog_entry import CatalogEntry
from domain.value_objects.compound_record import CompoundRecord
from domain.value_objects.search_source import Provenance
from domain.value_objects.short_query_table import ShortQueryTable


class TestCompoundRecord:
    """Test CompoundRecord value object."""

    def test_minimal_record_gets_defaults(self) -> None:
        record = CompoundRecord(identifier=702)

        assert record.display_name == "Compound 702"
        assert record.molecular_formula == ""
        assert record.molecular_weight == 0.0
        assert record.iupac_name is None
        assert record.canonical_smiles is None

    def test_blank_display_name_is_synthesized(self) -> None:
        record = CompoundRecord(identifier=42, display_name="   ")
        assert record.display_name == "Compound 42"

    def test_explicit_display_name_is_kept(self, sample_compound_record) -> None:
        assert sample_compound_record.display_name == "caffeine"

    @pytest.mark.parametrize("identifier", [0, -5])
    def test_identifier_must_be_positive(self, identifier: int) -> None:
        with pytest.raises(ValidationError):
            CompoundRecord(identifier=identifier, display_name="x")

    def test_negative_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CompoundRecord(identifier=1, molecular_weight=-1.0)

    def test_record_is_immutable(self, sample_compound_record) -> None:
        with pytest.raises(ValidationError):
            sample_compound_record.display_name = "tea"


class TestCatalogEntry:
    """Test CatalogEntry value object."""

    def test_to_record_copies_fields(self) -> None:
        entry = CatalogEntry(identifier=702, name="Ethanol", formula="C2H6O", category="Solvent")
        record = entry.to_record()

        assert record.identifier == 702
        assert record.display_name == "Ethanol"
        assert record.molecular_formula == "C2H6O"
        assert record.molecular_weight == 0.0
        assert record.category == "Solvent"

    def test_matches_name_or_formula(self) -> None:
        entry = CatalogEntry(identifier=962, name="Water", formula="H2O")

        assert entry.matches("wat")
        assert entry.matches("h2o")
        assert not entry.matches("salt")

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CatalogEntry(identifier=1, name=" ", formula="X")


class TestShortQueryTable:
    """Test ShortQueryTable value object."""

    def test_single_letter_returns_full_list(self) -> None:
        table = ShortQueryTable()
        assert table.candidates("a") == [
            "acetone",
            "ammonia",
            "aspirin",
            "acetic acid",
            "acetaminophen",
            "argon",
            "arsenic",
        ]

    def test_two_letters_filter_by_prefix(self) -> None:
        table = ShortQueryTable()
        assert table.candidates("ac") == ["acetone", "acetic acid", "acetaminophen"]

    def test_matching_is_case_insensitive(self) -> None:
        table = ShortQueryTable()
        assert table.candidates("Ar") == ["argon", "arsenic"]

    def test_missing_letter_yields_nothing(self) -> None:
        table = ShortQueryTable()
        assert table.candidates("z") == []
        assert table.candidates("q") == []

    def test_two_letters_without_prefix_match_yield_nothing(self) -> None:
        table = ShortQueryTable()
        assert table.candidates("ax") == []

    def test_long_or_empty_query_does_not_apply(self) -> None:
        table = ShortQueryTable()
        assert table.candidates("") == []
        assert table.candidates("ace") == []

    def test_limit_caps_candidates(self) -> None:
        table = ShortQueryTable()
        assert len(table.candidates("c", limit=2)) == 2

    def test_custom_entries_are_lowercased(self) -> None:
        table = ShortQueryTable(entries={"X": ("xenon",)})
        assert table.candidates("x") == ["xenon"]

    def test_multi_character_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ShortQueryTable(entries={"ab": ("abc",)})


class TestProvenance:
    @pytest.mark.parametrize(
        ("cached", "remote", "expected"),
        [
            (0, 0, Provenance.EMPTY),
            (3, 0, Provenance.CACHE_ONLY),
            (0, 4, Provenance.REMOTE_ONLY),
            (1, 1, Provenance.BOTH),
        ],
    )
    def test_from_counts(self, cached: int, remote: int, expected: Provenance) -> None:
        assert Provenance.from_counts(cached, remote) is expected
