"""PubChem implementation of the CompoundLookupGateway port.

Talks to the PUG REST API for identifiers and properties and to the
autocomplete API for name suggestions. See
https://pubchem.ncbi.nlm.nih.gov/docs/pug-rest
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx
import structlog
from pydantic import ValidationError as PydanticValidationError
from returns.maybe import Maybe, Nothing, Some
from returns.result import Failure, Result, Success

from application.dtos.compound_dtos import CompoundProperties
from application.dtos.errors import AppError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger()

_LABEL_FORMULA = "Molecular Formula"
_LABEL_WEIGHT = "Molecular Weight"
_LABEL_IUPAC = "IUPAC Name"
_LABEL_SMILES = "SMILES"
_LABEL_INCHI = "InChI"
_LABEL_INCHI_KEY = "InChIKey"

_PARSE_ERRORS = (AttributeError, KeyError, TypeError, ValueError, PydanticValidationError)


def _find_prop(props: list[dict[str, Any]], label: str) -> dict[str, Any] | None:
    """Return the value of the first property carrying `label`."""
    for prop in props:
        if (prop.get("urn") or {}).get("label") == label:
            return prop.get("value") or {}
    return None


def _string_prop(props: list[dict[str, Any]], label: str) -> str | None:
    value = _find_prop(props, label)
    if value is None:
        return None
    return value.get("sval")


def _weight_prop(props: list[dict[str, Any]]) -> float:
    value = _find_prop(props, _LABEL_WEIGHT)
    if not value:
        return 0.0
    # Older records carry a float, newer ones a decimal string
    raw = value.get("fval", value.get("sval"))
    try:
        weight = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return weight if weight > 0 else 0.0


def parse_pc_compound(compound: dict[str, Any]) -> CompoundProperties:
    """Parse one entry of a PUG REST `PC_Compounds` array."""
    props = compound.get("props", [])
    return CompoundProperties(
        identifier=compound["id"]["id"]["cid"],
        molecular_formula=_string_prop(props, _LABEL_FORMULA) or "",
        molecular_weight=_weight_prop(props),
        iupac_name=_string_prop(props, _LABEL_IUPAC),
        canonical_smiles=_string_prop(props, _LABEL_SMILES),
        inchi=_string_prop(props, _LABEL_INCHI),
        inchi_key=_string_prop(props, _LABEL_INCHI_KEY),
    )


class PubChemGateway:
    """Async PubChem client returning explicit Result values.

    A fresh httpx.AsyncClient is opened per call. Pass `transport` to route
    requests through a custom transport (tests use httpx.MockTransport).
    """

    def __init__(
        self,
        pug_url: str = "https://pubchem.ncbi.nlm.nih.gov/rest/pug",
        autocomplete_url: str = "https://pubchem.ncbi.nlm.nih.gov/rest/autocomplete",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._pug_url = pug_url.rstrip("/")
        self._autocomplete_url = autocomplete_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _get_json(
        self,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> Result[dict[str, Any] | None, AppError]:
        """GET a JSON document.

        Returns Success(None) for a 404, which PubChem uses for unknown names
        and identifiers.
        """
        try:
            async with self._client() as client:
                resp = await client.get(url, params=params)
                if resp.status_code == httpx.codes.NOT_FOUND:
                    return Success(None)
                resp.raise_for_status()
                body = resp.json()
        except httpx.HTTPStatusError as e:
            return Failure(
                AppError("infrastructure", f"PubChem API error: {e.response.status_code}")
            )
        except httpx.HTTPError as e:
            return Failure(AppError("infrastructure", f"PubChem request failed: {e!s}"))
        except ValueError as e:
            return Failure(AppError("infrastructure", f"PubChem returned invalid JSON: {e!s}"))

        if not isinstance(body, dict):
            return Failure(
                AppError("infrastructure", f"Unexpected PubChem payload: {type(body).__name__}")
            )
        return Success(body)

    async def suggest_names(self, query: str, limit: int) -> Result[list[str], AppError]:
        url = f"{self._autocomplete_url}/compound/{quote(query, safe='')}/json"
        response = await self._get_json(url, params={"limit": limit})
        if isinstance(response, Failure):
            logger.warning("pubchem_suggest_failed", query=query[:100], error=str(response.failure()))
            return response

        data = response.unwrap() or {}
        try:
            suggestions = (data.get("dictionary_terms") or {}).get("compound") or []
            names = [str(name) for name in suggestions]
        except _PARSE_ERRORS as e:
            return Failure(AppError("infrastructure", f"Unexpected autocomplete payload: {e!s}"))

        logger.debug("pubchem_suggest_success", query=query[:100], suggestions=len(names))
        return Success(names)

    async def lookup_identifier(self, name: str) -> Result[Maybe[int], AppError]:
        url = f"{self._pug_url}/compound/name/{quote(name, safe='')}/cids/JSON"
        response = await self._get_json(url)
        if isinstance(response, Failure):
            return response

        data = response.unwrap()
        if data is None:
            return Success(Nothing)
        try:
            cids = (data.get("IdentifierList") or {}).get("CID") or []
            identifier = int(cids[0]) if cids else 0
        except _PARSE_ERRORS as e:
            return Failure(AppError("infrastructure", f"Unexpected identifier payload: {e!s}"))

        # PubChem answers some unknown names with CID 0
        if identifier <= 0:
            return Success(Nothing)
        return Success(Some(identifier))

    async def fetch_properties(
        self, identifiers: Sequence[int]
    ) -> Result[list[CompoundProperties], AppError]:
        if not identifiers:
            return Success([])

        joined = ",".join(str(identifier) for identifier in identifiers)
        response = await self._get_json(f"{self._pug_url}/compound/cid/{joined}/JSON")
        if isinstance(response, Failure):
            logger.warning(
                "pubchem_fetch_properties_failed",
                identifiers=len(identifiers),
                error=str(response.failure()),
            )
            return response
        return self._parse_compounds(response.unwrap())

    async def fetch_by_name(self, name: str) -> Result[list[CompoundProperties], AppError]:
        response = await self._get_json(f"{self._pug_url}/compound/name/{quote(name, safe='')}/JSON")
        if isinstance(response, Failure):
            return response
        return self._parse_compounds(response.unwrap())

    def image_url(self, identifier: int, size: int = 300) -> str:
        return f"{self._pug_url}/compound/cid/{identifier}/PNG?image_size={size}x{size}"

    @staticmethod
    def _parse_compounds(
        data: dict[str, Any] | None,
    ) -> Result[list[CompoundProperties], AppError]:
        if data is None:
            return Success([])

        compounds = data.get("PC_Compounds") or []
        if not isinstance(compounds, list):
            logger.warning("pubchem_compounds_malformed", payload_type=type(compounds).__name__)
            return Success([])

        parsed: list[CompoundProperties] = []
        for compound in compounds:
            try:
                parsed.append(parse_pc_compound(compound))
            except _PARSE_ERRORS as e:
                logger.warning("pubchem_compound_skipped", error=str(e))
        return Success(parsed)
