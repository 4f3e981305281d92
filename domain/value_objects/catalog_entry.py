from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator

from domain.value_objects.compound_record import CompoundRecord


class CatalogEntry(BaseModel):
    """A well-known compound shipped with the local catalog.

    Catalog identifiers share the PubChem CID space so local and remote
    records can be deduplicated against each other.
    """

    model_config = ConfigDict(frozen=True)

    identifier: PositiveInt
    name: str
    formula: str
    category: str = "Organic"

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate that the name is not blank."""
        if not v or not v.strip():
            msg = "Catalog entry name cannot be blank"
            raise ValueError(msg)
        return v

    def matches(self, lowered_query: str) -> bool:
        return lowered_query in self.name.lower() or lowered_query in self.formula.lower()

    def to_record(self) -> CompoundRecord:
        return CompoundRecord(
            identifier=self.identifier,
            display_name=self.name,
            molecular_formula=self.formula,
            category=self.category,
        )
