import pytest

from core.catalog import COMPOUNDS, Role, by_role, get_compound, option_label


def test_catalog_contents():
    assert len(COMPOUNDS) == 17
    assert len(by_role(Role.PRECURSOR)) == 4
    assert len(by_role(Role.COUPLER)) == 13


def test_catalog_names_are_unique():
    names = [c.name for c in COMPOUNDS]
    assert len(names) == len(set(names))


def test_catalog_weights_are_positive():
    assert all(c.molecular_weight > 0 for c in COMPOUNDS)


def test_by_role_keeps_catalog_order():
    names = [c.name for c in by_role("precursor")]
    assert names[0] == "p-Aminophenol"
    assert names[-1] == "N,N-BIS(2-HYDROXYETHYL)-P-PHENYLENEDIAMINE SULFATE"


def test_by_role_custom_catalog(precursor_100, coupler_100):
    assert by_role(Role.COUPLER, [precursor_100, coupler_100]) == [coupler_100]


def test_get_compound():
    resorcinol = get_compound("Resorcinol")
    assert resorcinol.role == Role.COUPLER
    assert resorcinol.molecular_weight == 110.11

    assert get_compound("resorcinol") is None
    assert get_compound("") is None
    assert get_compound(None) is None


def test_option_label():
    assert option_label(get_compound("1-NAPHTHOL")) == "1-NAPHTHOL (MW: 144.17)"


@pytest.mark.parametrize("text, role", [
    ("Primary", Role.PRECURSOR),
    ("precursor", Role.PRECURSOR),
    (" COUPLER ", Role.COUPLER),
    (Role.COUPLER, Role.COUPLER),
])
def test_role_parse(text, role):
    assert Role.parse(text) is role


def test_role_parse_unknown():
    with pytest.raises(ValueError):
        Role.parse("Developer")
