from application.dtos.compound_dtos import CompoundProperties
from domain.value_objects.compound_record import CompoundRecord


class CompoundMapper:
    @staticmethod
    def to_compound_record(
        properties: CompoundProperties,
        display_name: str | None = None,
    ) -> CompoundRecord:
        """Build a CompoundRecord, synthesizing the name when none is given."""
        return CompoundRecord(
            identifier=properties.identifier,
            display_name=display_name or "",
            molecular_formula=properties.molecular_formula,
            molecular_weight=properties.molecular_weight,
            iupac_name=properties.iupac_name,
            canonical_smiles=properties.canonical_smiles,
            inchi=properties.inchi,
            inchi_key=properties.inchi_key,
        )
