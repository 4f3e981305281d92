"""DTOs exchanged between the lookup gateway and the resolution use cases."""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from domain.value_objects.compound_record import CompoundRecord


class NameResolution(BaseModel):
    """A candidate name paired with the identifier it resolved to."""

    model_config = ConfigDict(frozen=True)

    name: str
    identifier: PositiveInt


class CompoundProperties(BaseModel):
    """Property row parsed from a batched detail response.

    Carries no display name; callers decide how to label the compound.
    """

    model_config = ConfigDict(frozen=True)

    identifier: PositiveInt
    molecular_formula: str = ""
    molecular_weight: float = Field(0.0, ge=0.0)
    iupac_name: str | None = None
    canonical_smiles: str | None = None
    inchi: str | None = None
    inchi_key: str | None = None


class CompoundListResponse(BaseModel):
    """Response carrying a list of compound records."""

    results: list[CompoundRecord]
    total_results: int


class CompoundImageResponse(BaseModel):
    identifier: int
    size: int
    url: str
