import logging
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger("dyelab.calculator")

TOLERANCE = 1e-7

LIGHT_BROWN_MAX_RATIO = 1.2
MEDIUM_BROWN_MAX_RATIO = 1.5


class InvalidCompound(ValueError):
    """Composto do catálogo sem peso molecular positivo."""

    def __init__(self, compound_name, molecular_weight=None):
        self.compound_name = compound_name
        self.molecular_weight = molecular_weight
        super().__init__(
            f"Invalid compound '{compound_name}': molecular weight must be positive "
            f"(got {molecular_weight!r})"
        )


class Shade(NamedTuple):
    label: str
    color: str


MOLE_MATCH = Shade("Mole match: Ideal for reaction", "#b28f6a")
EXCESS_PRECURSOR = Shade("Excess precursor may self-react and deepen the color", "#7e5e3c")
LIGHT_BROWN = Shade("Light Brown", "#c8ad7f")
MEDIUM_BROWN = Shade("Medium Brown", "#8b5e3c")
DARK_BROWN = Shade("Dark Brown", "#4b3621")

SHADES = (MOLE_MATCH, EXCESS_PRECURSOR, LIGHT_BROWN, MEDIUM_BROWN, DARK_BROWN)


def round4(value: float) -> float:
    # round() nativo: meio-para-par sobre o valor binário
    return round(float(value), 4)


# ======================================================================
# MOLES
# ======================================================================

def moles_for(grams: float, molecular_weight, compound_name: str = "") -> float:
    try:
        mw = float(molecular_weight)
    except (TypeError, ValueError):
        mw = float("nan")

    if not np.isfinite(mw) or mw <= 0:
        logger.warning(f"[CALC] Peso molecular inválido para '{compound_name}': {molecular_weight!r}")
        raise InvalidCompound(compound_name, molecular_weight)

    return float(grams) / mw


def total_moles(entries: Sequence) -> float:
    total = 0.0
    for entry in entries:
        compound = entry.compound
        total += moles_for(entry.grams, compound.molecular_weight, compound.name)
    return total


def mole_ratio(precursor_moles: float, coupler_moles: float) -> float:
    if precursor_moles > 0:
        return coupler_moles / precursor_moles
    return 0.0


# ======================================================================
# SHADE PREDICTION
# ======================================================================

def classify_shade(precursor_moles: float, coupler_moles: float) -> Shade:
    """
    Cadeia de prioridade: a primeira regra que casa vence.

    Sem precursor a razão é 0, então um excesso de coupler puro cai em
    'Light Brown'.
    """
    ratio = mole_ratio(precursor_moles, coupler_moles)

    if abs(coupler_moles - precursor_moles) <= TOLERANCE:
        return MOLE_MATCH
    elif precursor_moles > coupler_moles:
        return EXCESS_PRECURSOR
    elif ratio < LIGHT_BROWN_MAX_RATIO:
        return LIGHT_BROWN
    elif ratio < MEDIUM_BROWN_MAX_RATIO:
        return MEDIUM_BROWN
    return DARK_BROWN


@dataclass(frozen=True)
class FormulationResult:
    precursor_moles: float
    coupler_moles: float
    ratio: float
    shade_label: str
    shade_color: str
    chart_series: List[Dict] = field(default_factory=list)

    def chart_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.chart_series, columns=["name", "moles"])


def compute_result(precursor_entries: Sequence, coupler_entries: Sequence) -> FormulationResult:
    precursor_moles = total_moles(precursor_entries)
    coupler_moles = total_moles(coupler_entries)
    ratio = mole_ratio(precursor_moles, coupler_moles)
    shade = classify_shade(precursor_moles, coupler_moles)

    return FormulationResult(
        precursor_moles=precursor_moles,
        coupler_moles=coupler_moles,
        ratio=ratio,
        shade_label=shade.label,
        shade_color=shade.color,
        chart_series=[
            {"name": "Precursor", "moles": round4(precursor_moles)},
            {"name": "Coupler", "moles": round4(coupler_moles)},
        ],
    )
