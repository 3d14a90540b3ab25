import polars as pl

from chembalance.df import (
    coefficient_frame,
    composition_frame,
    element_balance_frame,
)
from chembalance.equation import balance
from chembalance.formula import parse


def test_composition_frame():
    df = composition_frame([parse("H2O"), parse("NaOH"), parse("Ca(OH)2")])
    assert df.columns == ["formula", "H", "O", "Na", "Ca"]
    assert df["formula"].to_list() == ["H2O", "NaOH", "Ca(OH)2"]
    assert df["H"].to_list() == [2, 1, 2]
    assert df["Na"].to_list() == [0, 1, 0]
    assert df.schema["Ca"] == pl.Int64


def test_composition_frame_empty():
    df = composition_frame([])
    assert df.columns == ["formula"]
    assert df.height == 0


def test_coefficient_frame():
    df = coefficient_frame(balance("H2O = H2 + O2"))
    assert df.to_dict(as_series=False) == {
        "side": ["reagent", "product", "product"],
        "formula": ["H2O", "H2", "O2"],
        "coefficient": [2, 2, 1],
    }


def test_element_balance_frame():
    df = element_balance_frame(balance("KMnO4 + HCl = KCl + MnCl2 + H2O + Cl2"))
    assert df["element"].to_list() == ["K", "Mn", "O", "H", "Cl"]
    assert df["reagent_atoms"].to_list() == df["product_atoms"].to_list()
    assert df["balanced"].all()
    row = df.filter(pl.col("element") == "Cl")
    assert row["reagent_atoms"].item() == 16
