"""Mock implementations for testing."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence

from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure, Result, Success

from application.dtos.compound_dtos import CompoundProperties
from application.dtos.errors import AppError
from domain.value_objects.catalog_entry import CatalogEntry
from domain.value_objects.compound_record import CompoundRecord

# ---------------------------------------------------------------------------
# Catalog mocks
# ---------------------------------------------------------------------------


def make_catalog_entries() -> list[CatalogEntry]:
    return [
        CatalogEntry(identifier=702, name="Ethanol", formula="C2H6O", category="Solvent"),
        CatalogEntry(identifier=180, name="Acetone", formula="C3H6O", category="Solvent"),
        CatalogEntry(identifier=887, name="Methanol", formula="CH4O", category="Solvent"),
        CatalogEntry(identifier=176, name="Acetic acid", formula="C2H4O2", category="Acid"),
        CatalogEntry(identifier=222, name="Ammonia", formula="NH3", category="Base"),
        CatalogEntry(identifier=2244, name="Aspirin", formula="C9H8O4", category="Pharmaceutical"),
        CatalogEntry(identifier=962, name="Water", formula="H2O", category="Element"),
        CatalogEntry(identifier=6276, name="Ethane", formula="C2H6", category="Organic"),
    ]


class MockCompoundCatalog:
    """Mock implementation of CompoundCatalog."""

    def __init__(self, entries: Sequence[CatalogEntry] | None = None) -> None:
        self._entries = tuple(entries if entries is not None else make_catalog_entries())

    def entries(self) -> tuple[CatalogEntry, ...]:
        return self._entries


# ---------------------------------------------------------------------------
# Gateway mock
# ---------------------------------------------------------------------------


def make_properties(
    identifier: int,
    formula: str = "C1",
    weight: float = 12.0,
    iupac_name: str | None = None,
) -> CompoundProperties:
    return CompoundProperties(
        identifier=identifier,
        molecular_formula=formula,
        molecular_weight=weight,
        iupac_name=iupac_name,
    )


class MockLookupGateway:
    """Mock implementation of CompoundLookupGateway.

    `identifiers` maps a name to its identifier; names missing from it are
    unknown. Names in `failing_names` return a Failure. `properties` holds
    the rows served by fetch_properties; `response_order` overrides the
    order they come back in.
    """

    def __init__(  # noqa: PLR0913
        self,
        suggestions: list[str] | None = None,
        identifiers: dict[str, int] | None = None,
        properties: dict[int, CompoundProperties] | None = None,
        failing_names: set[str] | None = None,
        raising_names: set[str] | None = None,
        suggest_fails: bool = False,
        fetch_fails: bool = False,
        response_order: list[int] | None = None,
    ) -> None:
        self.suggestions = suggestions or []
        self.identifiers = identifiers or {}
        self.properties = properties or {}
        self.failing_names = failing_names or set()
        self.raising_names = raising_names or set()
        self.suggest_fails = suggest_fails
        self.fetch_fails = fetch_fails
        self.response_order = response_order

        self.suggest_calls: list[tuple[str, int]] = []
        self.lookup_calls: list[str] = []
        self.fetch_calls: list[list[int]] = []
        self.fetch_by_name_calls: list[str] = []

    async def suggest_names(self, query: str, limit: int) -> Result[list[str], AppError]:
        self.suggest_calls.append((query, limit))
        if self.suggest_fails:
            return Failure(AppError("infrastructure", "PubChem API error: 503"))
        return Success(self.suggestions[:limit])

    async def lookup_identifier(self, name: str) -> Result[Maybe[int], AppError]:
        self.lookup_calls.append(name)
        if name in self.raising_names:
            msg = f"connection reset while resolving {name}"
            raise ConnectionError(msg)
        if name in self.failing_names:
            return Failure(AppError("infrastructure", f"PubChem request failed for {name}"))
        identifier = self.identifiers.get(name)
        return Success(Some(identifier) if identifier is not None else Nothing)

    async def fetch_properties(
        self, identifiers: Sequence[int]
    ) -> Result[list[CompoundProperties], AppError]:
        self.fetch_calls.append(list(identifiers))
        if self.fetch_fails:
            return Failure(AppError("infrastructure", "PubChem API error: 500"))
        order = self.response_order if self.response_order is not None else list(identifiers)
        return Success(
            [
                self.properties.get(identifier, make_properties(identifier))
                for identifier in order
                if identifier in identifiers
            ]
        )

    async def fetch_by_name(self, name: str) -> Result[list[CompoundProperties], AppError]:
        self.fetch_by_name_calls.append(name)
        if self.fetch_fails:
            return Failure(AppError("infrastructure", "PubChem API error: 500"))
        identifier = self.identifiers.get(name)
        if identifier is None:
            return Success([])
        return Success([self.properties.get(identifier, make_properties(identifier))])

    def image_url(self, identifier: int, size: int = 300) -> str:
        return f"https://example.test/cid/{identifier}/PNG?image_size={size}x{size}"


# ---------------------------------------------------------------------------
# Resolution service mock
# ---------------------------------------------------------------------------


def make_record(identifier: int, name: str | None = None, formula: str = "") -> CompoundRecord:
    return CompoundRecord(
        identifier=identifier,
        display_name=name or "",
        molecular_formula=formula,
    )


class MockResolveQueryUseCase:
    """Stand-in for ResolveCompoundQueryUseCase.

    Returns `results[query]` (empty by default). When `gated` is set every
    call blocks until `release(query)` is called, which lets tests interleave
    query changes with in-flight resolutions.
    """

    def __init__(
        self,
        results: dict[str, list[CompoundRecord]] | None = None,
        failure: AppError | None = None,
        raise_on_call: Exception | None = None,
        gated: bool = False,
    ) -> None:
        self.results = results or {}
        self.failure = failure
        self.raise_on_call = raise_on_call
        self.gated = gated
        self.calls: list[tuple[str, int]] = []
        self._gates: dict[str, asyncio.Event] = {}

    def release(self, query: str) -> None:
        self._gates.setdefault(query, asyncio.Event()).set()

    async def execute(self, query: str, limit: int) -> Result[list[CompoundRecord], AppError]:
        self.calls.append((query, limit))
        if self.gated:
            await self._gates.setdefault(query, asyncio.Event()).wait()
        if self.raise_on_call:
            raise self.raise_on_call
        if self.failure:
            return Failure(self.failure)
        return Success(list(self.results.get(query, [])))


# ---------------------------------------------------------------------------
# Scheduler mock
# ---------------------------------------------------------------------------


class ManualTimerHandle:
    def __init__(self, delay_seconds: float, callback: Callable[[], Awaitable[None]]) -> None:
        self.delay_seconds = delay_seconds
        self.callback = callback
        self.fired = False
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if not self.fired:
            self._cancelled = True


class ManualScheduler:
    """Scheduler whose timers only fire when the test says so."""

    def __init__(self) -> None:
        self.timers: list[ManualTimerHandle] = []

    def call_later(
        self,
        delay_seconds: float,
        callback: Callable[[], Awaitable[None]],
    ) -> ManualTimerHandle:
        handle = ManualTimerHandle(delay_seconds, callback)
        self.timers.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualTimerHandle]:
        return [timer for timer in self.timers if not timer.cancelled and not timer.fired]

    async def fire_pending(self) -> None:
        for timer in self.pending:
            timer.fired = True
            await timer.callback()

    async def drain(self) -> None:
        while self.pending:
            await self.fire_pending()
