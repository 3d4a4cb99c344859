from dataclasses import dataclass, replace
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from core.calculator import FormulationResult, compute_result, moles_for, round4
from core.catalog import CompoundRef, Role

TABLE_COLUMNS = ["Name", "MW", "Grams", "Moles"]


def parse_grams(raw) -> Optional[float]:
    """
    Converte o texto digitado em gramas.
    Retorna None para qualquer coisa que não seja um número finito > 0.
    """
    if raw is None or isinstance(raw, (bool, np.bool_)):
        return None

    if isinstance(raw, str):
        raw = raw.strip()
        # float() aceita "1_000"; campo numérico nunca envia isso
        if not raw or "_" in raw:
            return None

    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None

    if not np.isfinite(value) or value <= 0:
        return None
    return value


@dataclass(frozen=True)
class LineEntry:
    compound: CompoundRef
    grams: float

    @property
    def moles(self) -> float:
        return moles_for(self.grams, self.compound.molecular_weight, self.compound.name)


@dataclass(frozen=True)
class Formulation:
    precursor_entries: Tuple[LineEntry, ...] = ()
    coupler_entries: Tuple[LineEntry, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.precursor_entries and not self.coupler_entries

    def entries(self, role) -> Tuple[LineEntry, ...]:
        if Role.parse(role) == Role.PRECURSOR:
            return self.precursor_entries
        return self.coupler_entries

    def _with_entries(self, role, entries) -> "Formulation":
        if Role.parse(role) == Role.PRECURSOR:
            return replace(self, precursor_entries=tuple(entries))
        return replace(self, coupler_entries=tuple(entries))

    def add(self, compound: CompoundRef, grams: float) -> "Formulation":
        grams = parse_grams(grams)
        if grams is None:
            return self
        entry = LineEntry(compound=compound, grams=grams)
        return self._with_entries(compound.role, self.entries(compound.role) + (entry,))

    def add_raw(self, compound: Optional[CompoundRef], raw_grams) -> "Formulation":
        grams = parse_grams(raw_grams)
        if compound is None or grams is None:
            return self
        return self.add(compound, grams)

    def update_grams(self, role, index: int, raw_grams) -> "Formulation":
        grams = parse_grams(raw_grams)
        current = self.entries(role)
        if grams is None or not 0 <= index < len(current):
            return self

        updated = list(current)
        updated[index] = replace(current[index], grams=grams)
        return self._with_entries(role, updated)

    def remove(self, role, index: int) -> "Formulation":
        current = self.entries(role)
        if not 0 <= index < len(current):
            return self
        return self._with_entries(role, current[:index] + current[index + 1:])

    def result(self) -> FormulationResult:
        return compute_result(self.precursor_entries, self.coupler_entries)


def entries_frame(entries) -> pd.DataFrame:
    rows = [
        {
            "Name": e.compound.name,
            "MW": e.compound.molecular_weight,
            "Grams": e.grams,
            "Moles": round4(e.moles),
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)
