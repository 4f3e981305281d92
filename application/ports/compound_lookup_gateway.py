from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from returns.maybe import Maybe
    from returns.result import Result

    from application.dtos.compound_dtos import CompoundProperties
    from application.dtos.errors import AppError


class CompoundLookupGateway(Protocol):
    """Port for the remote compound database (PubChem or compatible).

    Every method reports transport and status problems as a Failure instead
    of raising, so callers can treat them as explicit, non-fatal branches.
    """

    async def suggest_names(self, query: str, limit: int) -> Result[list[str], AppError]:
        """Return up to `limit` candidate compound names for a free-text query.

        Args:
            query: Partial name typed by the user
            limit: Maximum number of suggestions requested

        Returns:
            Success with the suggestion list (possibly empty), or Failure when
            the suggestion endpoint itself could not be reached.

        """
        ...

    async def lookup_identifier(self, name: str) -> Result[Maybe[int], AppError]:
        """Resolve a compound name to its identifier.

        Returns:
            Success(Some(identifier)) when found, Success(Nothing) when the
            name is unknown, Failure on transport or parse errors.

        """
        ...

    async def fetch_properties(
        self, identifiers: Sequence[int]
    ) -> Result[list[CompoundProperties], AppError]:
        """Fetch property rows for all identifiers in a single batched call.

        The returned order is the remote response order, which may differ
        from the order of `identifiers`.
        """
        ...

    async def fetch_by_name(self, name: str) -> Result[list[CompoundProperties], AppError]:
        """Fetch full property rows for an exact name or CAS number."""
        ...

    def image_url(self, identifier: int, size: int = 300) -> str:
        """Return the URL of a 2D structure image for the compound."""
        ...
