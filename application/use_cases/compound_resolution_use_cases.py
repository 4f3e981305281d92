"""Compound resolution: free-text query to normalized compound records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError

if TYPE_CHECKING:
    from application.dtos.compound_dtos import NameResolution
    from application.use_cases.compound_detail_use_cases import FetchCompoundDetailsUseCase
    from application.use_cases.name_resolution_use_cases import ResolveCompoundNamesUseCase
    from domain.value_objects.compound_record import CompoundRecord

logger = structlog.get_logger()


class ResolveCompoundQueryUseCase:
    """Resolve a free-text query into normalized compound records.

    This use case:
    1. Resolves the query to (name, identifier) pairs
    2. Deduplicates the pairs by identifier, keeping the first name seen
    3. Fetches details for all identifiers in a single batched call
    4. Labels each record with the name its identifier resolved from

    Records come back in the order of the batched response, which is not
    necessarily the order the names were resolved in.
    """

    def __init__(
        self,
        resolve_names_use_case: ResolveCompoundNamesUseCase,
        fetch_details_use_case: FetchCompoundDetailsUseCase,
    ) -> None:
        self.resolve_names = resolve_names_use_case
        self.fetch_details = fetch_details_use_case

    @staticmethod
    def _dedupe(resolutions: list[NameResolution]) -> list[NameResolution]:
        seen: set[int] = set()
        unique: list[NameResolution] = []
        for resolution in resolutions:
            if resolution.identifier not in seen:
                seen.add(resolution.identifier)
                unique.append(resolution)
        return unique

    async def execute(self, query: str, limit: int) -> Result[list[CompoundRecord], AppError]:
        try:
            names_result = await self.resolve_names.execute(query, limit)
            if isinstance(names_result, Failure):
                return names_result

            resolutions = self._dedupe(names_result.unwrap())
            if not resolutions:
                logger.info("resolve_query_no_candidates", query=query[:100])
                return Success([])

            details_result = await self.fetch_details.execute(resolutions)
            if isinstance(details_result, Failure):
                return details_result

            records = details_result.unwrap()
            logger.info(
                "resolve_query_success",
                query=query[:100],
                resolved=len(resolutions),
                records=len(records),
            )
            return Success(records)

        except Exception as e:
            logger.exception("resolve_query_failed", query=query[:100], error=str(e))
            return Failure(AppError("internal_error", f"Failed to resolve query: {e!s}"))
