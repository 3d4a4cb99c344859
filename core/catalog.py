from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence


class Role(Enum):
    PRECURSOR = "Primary"
    COUPLER = "Coupler"

    @classmethod
    def parse(cls, value):
        """Aceita o valor ('Primary') ou o nome ('precursor'), sem diferenciar maiúsculas."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for role in cls:
            if text in (role.value.lower(), role.name.lower()):
                return role
        raise ValueError(f"Unknown role: {value!r}")


@dataclass(frozen=True)
class CompoundRef:
    name: str
    role: Role
    molecular_weight: Optional[float]
    display_color: str = ""


# ==============================================================================
# CATÁLOGO DE INTERMEDIÁRIOS (TINTURA OXIDATIVA)
# ==============================================================================
COMPOUNDS: List[CompoundRef] = [
    CompoundRef("p-Aminophenol", Role.PRECURSOR, 109.13, "#9b5de5"),
    CompoundRef("TOLUENE-2,5-DIAMINE SULFATE", Role.PRECURSOR, 220.25, "#f15bb5"),
    CompoundRef("1-HYDROXYETHYL 4,5-DIAMINO PYRAZOLE SULFATE", Role.PRECURSOR, 240.23, "#fee440"),
    CompoundRef("N,N-BIS(2-HYDROXYETHYL)-P-PHENYLENEDIAMINE SULFATE", Role.PRECURSOR, 312.32, "#00bbf9"),
    CompoundRef("m-Aminophenol", Role.COUPLER, 109.13, "#00f5d4"),
    CompoundRef("Resorcinol", Role.COUPLER, 110.11, "#9b5de5"),
    CompoundRef("2,4-Diaminophenoxyethanol HCl", Role.COUPLER, 241.1, "#f15bb5"),
    CompoundRef("2-METHYLRESORCINOL", Role.COUPLER, 124.15, "#fee440"),
    CompoundRef("4-CHLORORESORCINOL", Role.COUPLER, 144.56, "#00bbf9"),
    CompoundRef("2-METHYL-5-HYDROXYETHYLAMINOPHENOL", Role.COUPLER, 167.21, "#00f5d4"),
    CompoundRef("4-AMINO-2-HYDROXYTOLUENE", Role.COUPLER, 123.16, "#9b5de5"),
    CompoundRef("2-AMINO-4-HYDROXYETHYLAMINOANISOLE SULFATE", Role.COUPLER, 279.27, "#f15bb5"),
    CompoundRef("1-NAPHTHOL", Role.COUPLER, 144.17, "#fee440"),
    CompoundRef("2,6-DIHYDROXYETHYLAMINOTOLUENE", Role.COUPLER, 210.28, "#00bbf9"),
    CompoundRef("HYDROXYETHYL-3,4-METHYLENEDIOXYANILINE HCl", Role.COUPLER, 217.65, "#00f5d4"),
    CompoundRef("2-AMINO-3-HYDROXYPYRIDINE", Role.COUPLER, 110.12, "#9b5de5"),
    CompoundRef("4-AMINO-M-CRESOL", Role.COUPLER, 123.15, "#f15bb5"),
]


def by_role(role, catalog: Sequence[CompoundRef] = None) -> List[CompoundRef]:
    role = Role.parse(role)
    if catalog is None:
        catalog = COMPOUNDS
    return [c for c in catalog if c.role == role]


def get_compound(name, catalog: Sequence[CompoundRef] = None) -> Optional[CompoundRef]:
    if not name:
        return None
    if catalog is None:
        catalog = COMPOUNDS
    for compound in catalog:
        if compound.name == name:
            return compound
    return None


def option_label(compound: CompoundRef) -> str:
    return f"{compound.name} (MW: {compound.molecular_weight})"
