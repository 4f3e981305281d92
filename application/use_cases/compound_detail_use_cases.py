"""Compound detail use cases: batched property fetch and direct lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.mappers.compound_mappers import CompoundMapper

if TYPE_CHECKING:
    from collections.abc import Sequence

    from application.dtos.compound_dtos import NameResolution
    from application.ports.compound_lookup_gateway import CompoundLookupGateway
    from domain.value_objects.compound_record import CompoundRecord

logger = structlog.get_logger()

MAX_FEED_COUNT = 100


class FetchCompoundDetailsUseCase:
    """Fetch normalized records for resolved names in one batched remote call.

    The output follows the remote response order, not the order of the
    resolutions passed in. Each record is labelled with the first resolution
    name sharing its identifier, or a synthesized label when none does.
    A failed fetch degrades to an empty list.
    """

    def __init__(self, lookup_gateway: CompoundLookupGateway) -> None:
        self.lookup_gateway = lookup_gateway

    async def execute(
        self, resolutions: Sequence[NameResolution]
    ) -> Result[list[CompoundRecord], AppError]:
        names_by_identifier: dict[int, str] = {}
        for resolution in resolutions:
            names_by_identifier.setdefault(resolution.identifier, resolution.name)

        if not names_by_identifier:
            return Success([])

        try:
            identifiers = list(names_by_identifier)
            logger.info("fetch_details_start", identifiers=len(identifiers))

            properties_result = await self.lookup_gateway.fetch_properties(identifiers)
            if isinstance(properties_result, Failure):
                logger.warning(
                    "fetch_details_failed",
                    identifiers=len(identifiers),
                    error=str(properties_result.failure()),
                )
                return Success([])

            records = [
                CompoundMapper.to_compound_record(
                    properties,
                    display_name=names_by_identifier.get(properties.identifier),
                )
                for properties in properties_result.unwrap()
            ]

            logger.info("fetch_details_success", requested=len(identifiers), fetched=len(records))
            return Success(records)

        except Exception as e:
            logger.exception("fetch_details_unexpected_error", error=str(e))
            return Failure(AppError("internal_error", f"Failed to fetch details: {e!s}"))


class GetCompoundsByIdentifiersUseCase:
    """Look up explicit identifiers, labelling each record by its IUPAC name.

    Used for detail pages and identifier-range feeds where no user-typed
    name is available. Unlike the search path, a remote failure is reported.
    """

    def __init__(self, lookup_gateway: CompoundLookupGateway) -> None:
        self.lookup_gateway = lookup_gateway

    async def execute(self, identifiers: Sequence[int]) -> Result[list[CompoundRecord], AppError]:
        unique = list(dict.fromkeys(identifiers))
        if not unique:
            return Failure(AppError("validation", "At least one identifier is required"))
        if len(unique) > MAX_FEED_COUNT:
            return Failure(
                AppError("validation", f"At most {MAX_FEED_COUNT} identifiers per request")
            )
        if any(identifier <= 0 for identifier in unique):
            return Failure(AppError("validation", "Identifiers must be positive integers"))

        try:
            logger.info("get_compounds_start", identifiers=len(unique))

            properties_result = await self.lookup_gateway.fetch_properties(unique)
            if isinstance(properties_result, Failure):
                logger.warning("get_compounds_failed", error=str(properties_result.failure()))
                return properties_result

            records = [
                CompoundMapper.to_compound_record(properties, display_name=properties.iupac_name)
                for properties in properties_result.unwrap()
            ]
            logger.info("get_compounds_success", fetched=len(records))
            return Success(records)

        except Exception as e:
            logger.exception("get_compounds_unexpected_error", error=str(e))
            return Failure(AppError("internal_error", f"Failed to get compounds: {e!s}"))

    async def execute_range(self, start: int, count: int) -> Result[list[CompoundRecord], AppError]:
        """Fetch `count` consecutive identifiers beginning at `start`."""
        if start <= 0 or not 0 < count <= MAX_FEED_COUNT:
            return Failure(
                AppError(
                    "validation",
                    f"start must be positive and count between 1 and {MAX_FEED_COUNT}",
                )
            )
        return await self.execute(range(start, start + count))


class GetCompoundUseCase:
    """Fetch a single compound by identifier."""

    def __init__(self, get_compounds_use_case: GetCompoundsByIdentifiersUseCase) -> None:
        self.get_compounds = get_compounds_use_case

    async def execute(self, identifier: int) -> Result[CompoundRecord, AppError]:
        result = await self.get_compounds.execute([identifier])
        if isinstance(result, Failure):
            return result

        for record in result.unwrap():
            if record.identifier == identifier:
                return Success(record)
        return Failure(AppError("not_found", f"Compound {identifier} not found"))


class LookupCompoundByNameUseCase:
    """Exact lookup of a compound by name or CAS number.

    The first matching compound wins and is labelled with the text the
    caller searched for.
    """

    def __init__(self, lookup_gateway: CompoundLookupGateway) -> None:
        self.lookup_gateway = lookup_gateway

    async def execute(self, name: str) -> Result[CompoundRecord, AppError]:
        if not name or not name.strip():
            return Failure(AppError("validation", "Name cannot be blank"))

        try:
            logger.info("lookup_by_name_start", name=name[:100])

            properties_result = await self.lookup_gateway.fetch_by_name(name)
            if isinstance(properties_result, Failure):
                logger.warning(
                    "lookup_by_name_failed",
                    name=name[:100],
                    error=str(properties_result.failure()),
                )
                return properties_result

            matches = properties_result.unwrap()
            if not matches:
                logger.info("lookup_by_name_not_found", name=name[:100])
                return Failure(AppError("not_found", f"No compound named {name!r}"))

            return Success(CompoundMapper.to_compound_record(matches[0], display_name=name))

        except Exception as e:
            logger.exception("lookup_by_name_unexpected_error", name=name[:100], error=str(e))
            return Failure(AppError("internal_error", f"Failed to look up {name!r}: {e!s}"))
