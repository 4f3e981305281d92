from pydantic import BaseModel, ConfigDict, Field, PositiveInt, model_validator


def synthesized_display_name(identifier: int) -> str:
    """Label used when no name can be resolved for an identifier."""
    return f"Compound {identifier}"


class CompoundRecord(BaseModel):
    """Normalized compound flowing through the search pipeline.

    Only the identifier is required. Every other field is best-effort and may
    be empty or defaulted when the source did not provide it.

    Raises:
        ValueError: If the identifier is not positive or the weight is negative.

    """

    model_config = ConfigDict(frozen=True)

    identifier: PositiveInt = Field(..., description="Stable external compound key (PubChem CID)")
    display_name: str = Field(
        "",
        description="Human readable name. Synthesized from the identifier when blank.",
    )
    molecular_formula: str = Field("", description="Molecular formula, empty when unknown")
    molecular_weight: float = Field(
        0.0,
        ge=0.0,
        description="Molecular weight in g/mol. 0 means unknown.",
    )
    iupac_name: str | None = Field(None, description="IUPAC name")
    canonical_smiles: str | None = Field(None, description="Canonical SMILES structure string")
    inchi: str | None = Field(None, description="Standard InChI")
    inchi_key: str | None = Field(None, description="Hashed InChI key")
    category: str | None = Field(None, description="Catalog category, local records only")

    @model_validator(mode="before")
    @classmethod
    def fill_display_name(cls, data: object) -> object:
        """Synthesize a display name when none was provided."""
        if isinstance(data, dict):
            name = data.get("display_name")
            if not name or not str(name).strip():
                identifier = data.get("identifier")
                data = {**data, "display_name": synthesized_display_name(identifier)}
        return data
