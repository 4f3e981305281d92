from __future__ import annotations

from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError as PydanticValidationError

from domain.exceptions import InfrastructureError
from domain.value_objects.catalog_entry import CatalogEntry

log = structlog.get_logger(__name__)

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "popular_compounds.yaml"


class YamlCompoundCatalog:
    """CompoundCatalog adapter that reads the local catalog from a YAML file.

    The file holds a top-level `compounds` list; each item maps onto a
    CatalogEntry. It is read lazily on first access and cached for the
    lifetime of the process.
    """

    def __init__(self, catalog_path: Path = _DEFAULT_CATALOG_PATH) -> None:
        self._path = catalog_path
        self._entries: tuple[CatalogEntry, ...] | None = None

    def entries(self) -> tuple[CatalogEntry, ...]:
        if self._entries is None:
            self._entries = self._load()
        return self._entries

    def _load(self) -> tuple[CatalogEntry, ...]:
        if not self._path.exists():
            msg = f"Compound catalog not found: {self._path}"
            raise InfrastructureError(msg)

        with self._path.open(encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                msg = f"Compound catalog is not valid YAML: {self._path}"
                raise InfrastructureError(msg) from e

        try:
            entries = tuple(CatalogEntry(**item) for item in data.get("compounds", []))
        except (AttributeError, TypeError, PydanticValidationError) as e:
            msg = f"Malformed compound catalog {self._path}: {e!s}"
            raise InfrastructureError(msg) from e

        identifiers = [entry.identifier for entry in entries]
        if len(set(identifiers)) != len(identifiers):
            msg = f"Compound catalog {self._path} contains duplicate identifiers"
            raise InfrastructureError(msg)

        log.debug("yaml_compound_catalog.loaded", path=str(self._path), entries=len(entries))
        return entries
