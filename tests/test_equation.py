import pytest

from chembalance import (
    BalancedEquation,
    InfiniteSolution,
    MissingEqualsSign,
    ParseFailure,
    SolveFailure,
    UnbalancedElements,
    balance,
    balance_formulas,
    parse,
    parse_equation,
    split_equation,
)


def test_split_equation_trims_terms():
    assert split_equation(" H2 + O2=H2O ") == (["H2", "O2"], ["H2O"])


def test_split_equation_uses_first_equals_only():
    assert split_equation("A = B = C") == (["A"], ["B = C"])


def test_split_equation_missing_equals_sign():
    with pytest.raises(MissingEqualsSign) as excinfo:
        split_equation("H2 + O2 -> H2O")
    assert excinfo.value.text == "H2 + O2 -> H2O"
    assert excinfo.value.kind == "missing_equals_sign"


def test_parse_equation():
    reagents, products = parse_equation("CH4 + O2 = CO2 + H2O")
    assert reagents == [parse("CH4"), parse("O2")]
    assert products == [parse("CO2"), parse("H2O")]


def test_parse_equation_reports_offending_formula():
    with pytest.raises(ParseFailure) as excinfo:
        parse_equation("H2 + 2O = H2O")
    assert excinfo.value.offending_text == "2O"


def test_parse_equation_rejects_second_equals_sign():
    with pytest.raises(ParseFailure) as excinfo:
        parse_equation("H2 = H2 = H2")
    assert excinfo.value.offending_text == "H2 = H2"


def test_parse_equation_rejects_empty_term():
    with pytest.raises(ParseFailure) as excinfo:
        parse_equation("H2 + = H2")
    assert excinfo.value.offending_text == ""


def test_balance_water_decomposition():
    result = balance("H2O = H2 + O2")
    assert isinstance(result, BalancedEquation)
    assert result.coefficients == (2, 2, 1)
    assert result.reagent_coefficients == (2,)
    assert result.product_coefficients == (2, 1)
    assert str(result) == "2H2O = 2H2 + O2"


def test_balance_keeps_source_text():
    result = balance("C15H31COONa + CaCl2 = (C15H31COO)2Ca + NaCl")
    assert str(result) == "2C15H31COONa + CaCl2 = (C15H31COO)2Ca + 2NaCl"


def test_balance_pairs():
    left, right = balance("Fe + O2 = Fe2O3").pairs()
    assert [(c, f.source_text) for c, f in left] == [(4, "Fe"), (3, "O2")]
    assert [(c, f.source_text) for c, f in right] == [(2, "Fe2O3")]


def test_balance_formulas():
    result = balance_formulas(["C3H8", "O2"], ["CO2", "H2O"])
    assert str(result) == "C3H8 + 5O2 = 3CO2 + 4H2O"


@pytest.mark.parametrize(
    "text, error",
    [
        ("H2 + H2 = H2", InfiniteSolution),
        ("H2 = O2", UnbalancedElements),
        ("H2O", MissingEqualsSign),
        ("H2 + O2 = H2O)", ParseFailure),
    ],
)
def test_balance_failures(text, error):
    with pytest.raises(error):
        balance(text)


def test_solver_failures_share_a_base_class():
    with pytest.raises(SolveFailure) as excinfo:
        balance("NaCl = Na", strict=True)
    assert excinfo.value.kind == "unbalanced_elements"
