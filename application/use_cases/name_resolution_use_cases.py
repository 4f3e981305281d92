"""Name resolution: turn a short or partial query into (name, identifier) pairs."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.compound_dtos import NameResolution
from application.dtos.errors import AppError
from domain.value_objects.short_query_table import ShortQueryTable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from application.ports.compound_lookup_gateway import CompoundLookupGateway

logger = structlog.get_logger()

SHORT_QUERY_CANDIDATE_LIMIT = 10
SUGGESTION_RESOLVE_LIMIT = 20


class ResolveCompoundNamesUseCase:
    """Resolve a free-text query to canonical compound identifiers.

    Two paths are tried in order, the first one that yields candidates wins:

    1. Short-query path: queries of one or two characters are answered from
       the curated ShortQueryTable. Each candidate name is resolved on its
       own; a failed lookup drops that name only.
    2. Autocomplete path: the suggestion endpoint proposes names, and each of
       the first few suggestions is resolved on its own.

    Per-item lookups never fail the batch. Only an unexpected error escapes
    as a Failure.
    """

    def __init__(
        self,
        lookup_gateway: CompoundLookupGateway,
        short_query_table: ShortQueryTable | None = None,
        short_query_candidate_limit: int = SHORT_QUERY_CANDIDATE_LIMIT,
        suggestion_resolve_limit: int = SUGGESTION_RESOLVE_LIMIT,
    ) -> None:
        self.lookup_gateway = lookup_gateway
        self.short_query_table = short_query_table or ShortQueryTable()
        self.short_query_candidate_limit = short_query_candidate_limit
        self.suggestion_resolve_limit = suggestion_resolve_limit

    async def execute(self, query: str, limit: int) -> Result[list[NameResolution], AppError]:
        if not query:
            return Success([])

        try:
            logger.info("resolve_names_start", query=query[:100], limit=limit)

            candidates = self.short_query_table.candidates(
                query, limit=self.short_query_candidate_limit
            )
            if candidates:
                resolutions = await self._resolve_each(candidates)
                logger.info(
                    "resolve_names_short_query_success",
                    query=query,
                    candidates=len(candidates),
                    resolved=len(resolutions),
                )
                return Success(resolutions)

            suggestions_result = await self.lookup_gateway.suggest_names(query, limit)
            if isinstance(suggestions_result, Failure):
                logger.warning(
                    "resolve_names_suggestions_failed",
                    query=query[:100],
                    error=str(suggestions_result.failure()),
                )
                return Success([])

            suggestions = suggestions_result.unwrap()
            if not suggestions:
                logger.info("resolve_names_no_suggestions", query=query[:100])
                return Success([])

            resolutions = await self._resolve_each(suggestions[: self.suggestion_resolve_limit])
            logger.info(
                "resolve_names_autocomplete_success",
                query=query[:100],
                suggestions=len(suggestions),
                resolved=len(resolutions),
            )
            return Success(resolutions)

        except Exception as e:
            logger.exception("resolve_names_failed", query=query[:100], error=str(e))
            return Failure(AppError("internal_error", f"Failed to resolve names: {e!s}"))

    async def _resolve_each(self, names: Sequence[str]) -> list[NameResolution]:
        """Look up every name concurrently, keeping input order and dropping misses."""
        outcomes = await asyncio.gather(
            *(self._resolve_one(name) for name in names),
            return_exceptions=True,
        )
        resolutions: list[NameResolution] = []
        for name, outcome in zip(names, outcomes, strict=True):
            if isinstance(outcome, BaseException):
                logger.warning("resolve_name_errored", name=name, error=str(outcome))
            elif outcome is not None:
                resolutions.append(outcome)
        return resolutions

    async def _resolve_one(self, name: str) -> NameResolution | None:
        outcome = await self.lookup_gateway.lookup_identifier(name)
        if isinstance(outcome, Failure):
            logger.debug("resolve_name_dropped", name=name, error=str(outcome.failure()))
            return None

        identifier = outcome.unwrap().value_or(None)
        if identifier is None:
            logger.debug("resolve_name_not_found", name=name)
            return None
        return NameResolution(name=name, identifier=identifier)
