"""Search routes for local, remote and hybrid compound search."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status
from lagom import Container

from application.dtos.search_dtos import (
    CompoundSearchRequest,
    CompoundSearchResponse,
    HybridSearchRequest,
    LocalSearchRequest,
    SearchSnapshot,
)
from application.orchestrators.hybrid_search_orchestrator import HybridSearchOrchestrator
from application.use_cases.compound_resolution_use_cases import ResolveCompoundQueryUseCase
from domain.services.local_index import LocalIndex
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_container

logger = structlog.get_logger()

router = APIRouter(prefix="/search", tags=["search"])


@router.post("/compounds/local", status_code=status.HTTP_200_OK)
async def search_local_compounds(
    request: LocalSearchRequest,
    container: Annotated[Container, Depends(get_container)],
) -> CompoundSearchResponse:
    """Match the query against the local catalog of well-known compounds.

    Example:
        ```
        POST /search/compounds/local
        {"query_text": "eth", "limit": 10}
        ```

    """
    local_index = container[LocalIndex]
    results = local_index.search(request.query_text, limit=request.limit)
    return CompoundSearchResponse(
        query=request.query_text,
        results=results,
        total_results=len(results),
    )


@router.post("/compounds", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def search_compounds(
    request: CompoundSearchRequest,
    container: Annotated[Container, Depends(get_container)],
) -> CompoundSearchResponse:
    """Resolve a partial name into compound records from the remote database.

    Example:
        ```
        POST /search/compounds
        {"query_text": "caff", "limit": 50}
        ```

    """
    logger.info("compound_search_request", query_length=len(request.query_text), limit=request.limit)

    use_case = container[ResolveCompoundQueryUseCase]
    result = await use_case.execute(request.query_text, request.limit)
    return result.map(
        lambda records: CompoundSearchResponse(
            query=request.query_text,
            results=records,
            total_results=len(records),
        )
    )


@router.post("/compounds/hybrid", status_code=status.HTTP_200_OK)
async def hybrid_search_compounds(
    request: HybridSearchRequest,
    container: Annotated[Container, Depends(get_container)],
) -> SearchSnapshot:
    """Run one hybrid evaluation to completion and return the settled snapshot.

    Local matches come first, followed by remote matches not already present.
    Remote failures leave the local matches in place.
    """
    orchestrator = container[HybridSearchOrchestrator]
    try:
        orchestrator.set_query(request.query_text)
        return await orchestrator.settle()
    finally:
        orchestrator.close()
