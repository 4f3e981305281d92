"""Compound detail routes: lookups by identifier, name and identifier range."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Query, status
from lagom import Container

from application.dtos.compound_dtos import CompoundImageResponse, CompoundListResponse
from application.ports.compound_lookup_gateway import CompoundLookupGateway
from application.use_cases.compound_detail_use_cases import (
    GetCompoundsByIdentifiersUseCase,
    GetCompoundUseCase,
    LookupCompoundByNameUseCase,
)
from domain.value_objects.compound_record import CompoundRecord
from interfaces.api.middleware import handle_use_case_errors
from interfaces.dependencies import get_container

logger = structlog.get_logger()

router = APIRouter(prefix="/compounds", tags=["compounds"])


def _to_list_response(records: list[CompoundRecord]) -> CompoundListResponse:
    return CompoundListResponse(results=records, total_results=len(records))


@router.get("/", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def get_compounds(
    container: Annotated[Container, Depends(get_container)],
    ids: Annotated[list[int], Query()],
) -> CompoundListResponse:
    """Fetch several compounds at once, e.g. `GET /compounds/?ids=702&ids=180`."""
    use_case = container[GetCompoundsByIdentifiersUseCase]
    result = await use_case.execute(ids)
    return result.map(_to_list_response)


@router.get("/feed", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def get_compound_feed(
    container: Annotated[Container, Depends(get_container)],
    start: Annotated[int, Query(ge=1)] = 1,
    count: Annotated[int, Query(ge=1, le=100)] = 20,
) -> CompoundListResponse:
    """Fetch a run of consecutive identifiers for browsing."""
    use_case = container[GetCompoundsByIdentifiersUseCase]
    result = await use_case.execute_range(start, count)
    return result.map(_to_list_response)


@router.get("/by-name/{name}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def get_compound_by_name(
    name: str,
    container: Annotated[Container, Depends(get_container)],
) -> CompoundRecord:
    """Exact lookup by compound name or CAS number (e.g. `64-17-5`)."""
    logger.info("compound_by_name_request", name=name[:100])
    use_case = container[LookupCompoundByNameUseCase]
    return await use_case.execute(name)


@router.get("/{identifier}", status_code=status.HTTP_200_OK)
@handle_use_case_errors
async def get_compound(
    identifier: int,
    container: Annotated[Container, Depends(get_container)],
) -> CompoundRecord:
    use_case = container[GetCompoundUseCase]
    return await use_case.execute(identifier)


@router.get("/{identifier}/image-url", status_code=status.HTTP_200_OK)
async def get_compound_image_url(
    identifier: int,
    container: Annotated[Container, Depends(get_container)],
    size: Annotated[int, Query(ge=50, le=1000)] = 300,
) -> CompoundImageResponse:
    gateway = container[CompoundLookupGateway]
    return CompoundImageResponse(
        identifier=identifier,
        size=size,
        url=gateway.image_url(identifier, size),
    )
