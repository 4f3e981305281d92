from .catalog_entry import CatalogEntry
from .compound_record import CompoundRecord, synthesized_display_name
from .search_source import Provenance, SearchSource
from .short_query_table import ShortQueryTable

__all__ = [
    "CatalogEntry",
    "CompoundRecord",
    "Provenance",
    "SearchSource",
    "ShortQueryTable",
    "synthesized_display_name",
]
