import pytest

from core.catalog import CompoundRef, Role
from core.formulation import LineEntry


@pytest.fixture
def precursor_100():
    return CompoundRef("Test Precursor", Role.PRECURSOR, 100.0, "#9b5de5")


@pytest.fixture
def coupler_100():
    return CompoundRef("Test Coupler", Role.COUPLER, 100.0, "#00f5d4")


@pytest.fixture
def make_entry():
    """Cria uma LineEntry a partir de gramas e peso molecular."""
    def _make(grams, mw, role=Role.PRECURSOR, name=None):
        name = name or f"{role.value} {mw}"
        return LineEntry(CompoundRef(name, role, mw), grams)
    return _make


@pytest.fixture
def catalog_csv(tmp_path):
    path = tmp_path / "compounds.csv"
    path.write_text(
        "name,role,molecular_weight,display_color\n"
        " p-Aminophenol ,Primary,109.13,#9b5de5\n"
        "Resorcinol,Coupler,110.11,#9b5de5\n"
        "Resorcinol,Coupler,999.0,#000000\n"
        "Broken,Coupler,,#ffffff\n",
        encoding="utf-8",
    )
    return path
