from __future__ import annotations

from lagom import Container

from application.orchestrators.hybrid_search_orchestrator import HybridSearchOrchestrator
from application.ports.compound_catalog import CompoundCatalog
from application.ports.compound_lookup_gateway import CompoundLookupGateway
from application.ports.scheduler import Scheduler
from application.use_cases.compound_detail_use_cases import (
    FetchCompoundDetailsUseCase,
    GetCompoundsByIdentifiersUseCase,
    GetCompoundUseCase,
    LookupCompoundByNameUseCase,
)
from application.use_cases.compound_resolution_use_cases import ResolveCompoundQueryUseCase
from application.use_cases.name_resolution_use_cases import ResolveCompoundNamesUseCase
from domain.services.local_index import LocalIndex
from domain.value_objects.short_query_table import ShortQueryTable
from infrastructure.catalog.yaml_compound_catalog import YamlCompoundCatalog
from infrastructure.config import settings
from infrastructure.pubchem.pubchem_gateway import PubChemGateway
from infrastructure.scheduling.asyncio_scheduler import AsyncioScheduler


def create_container() -> Container:
    container = Container()

    # Local catalog, loaded once and shared
    catalog_instance = YamlCompoundCatalog(catalog_path=settings.catalog_path)
    container[CompoundCatalog] = catalog_instance
    container[LocalIndex] = LocalIndex(
        entries=catalog_instance.entries(),
        limit=settings.local_result_limit,
    )
    container[ShortQueryTable] = ShortQueryTable()

    # Remote compound database
    container[CompoundLookupGateway] = PubChemGateway(
        pug_url=settings.pubchem_pug_url,
        autocomplete_url=settings.pubchem_autocomplete_url,
        timeout=settings.pubchem_timeout_seconds,
    )

    # Debounce timers: one scheduler per orchestrator
    container[Scheduler] = lambda _: AsyncioScheduler()

    # Resolution pipeline
    container[ResolveCompoundNamesUseCase] = lambda c: ResolveCompoundNamesUseCase(
        lookup_gateway=c[CompoundLookupGateway],
        short_query_table=c[ShortQueryTable],
        short_query_candidate_limit=settings.short_query_candidate_limit,
        suggestion_resolve_limit=settings.suggestion_resolve_limit,
    )
    container[FetchCompoundDetailsUseCase] = lambda c: FetchCompoundDetailsUseCase(
        lookup_gateway=c[CompoundLookupGateway],
    )
    container[ResolveCompoundQueryUseCase] = lambda c: ResolveCompoundQueryUseCase(
        resolve_names_use_case=c[ResolveCompoundNamesUseCase],
        fetch_details_use_case=c[FetchCompoundDetailsUseCase],
    )

    # Direct lookups
    container[GetCompoundsByIdentifiersUseCase] = lambda c: GetCompoundsByIdentifiersUseCase(
        lookup_gateway=c[CompoundLookupGateway],
    )
    container[GetCompoundUseCase] = lambda c: GetCompoundUseCase(
        get_compounds_use_case=c[GetCompoundsByIdentifiersUseCase],
    )
    container[LookupCompoundByNameUseCase] = lambda c: LookupCompoundByNameUseCase(
        lookup_gateway=c[CompoundLookupGateway],
    )

    # Hybrid search holds per-session state, so every resolution is a new instance
    container[HybridSearchOrchestrator] = lambda c: HybridSearchOrchestrator(
        local_index=c[LocalIndex],
        resolve_query_use_case=c[ResolveCompoundQueryUseCase],
        scheduler=c[Scheduler],
        debounce_ms=settings.search_debounce_ms,
        remote_limit=settings.search_remote_limit,
    )

    return container
