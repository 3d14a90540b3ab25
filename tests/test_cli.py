import runpy
import sys

import pytest

from chembalance import cli


def test_balance_command():
    assert cli.balance("Fe + O2 = Fe2O3") == "4Fe + 3O2 = 2Fe2O3"


def test_balance_command_accepts_subscripts():
    assert cli.balance("H₂O = H₂ + O₂", subscripts=True) == "2H2O = 2H2 + O2"


def test_balance_command_failure_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.balance("H2 = O2")
    assert excinfo.value.code == 1
    assert "error: unbalanced_elements:" in capsys.readouterr().err


def test_parse_command():
    assert cli.parse("(C15H31COO)2Ca") == {"C": 32, "H": 62, "O": 4, "Ca": 1}


def test_parse_command_failure_exits(capsys):
    with pytest.raises(SystemExit):
        cli.parse("Na)")
    assert "error: parse_failure:" in capsys.readouterr().err


def test_matrix_command():
    table = cli.matrix("NaOH + HCl = NaCl + H2O")
    assert "NaOH" in table
    assert "Cl" in table


def test_matrix_command_missing_equals_sign(capsys):
    with pytest.raises(SystemExit):
        cli.matrix("NaOH + HCl")
    assert "error: missing_equals_sign:" in capsys.readouterr().err


def test_balance_command_unknown_ordering_exits(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.balance("H2O = H2 + O2", ordering="random")
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "error: invalid_argument:" in err
    assert "first_seen, sorted" in err


def test_main_reads_command_line(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["chembalance", "balance", "CH4 + O2 = CO2 + H2O"])
    cli.main()
    assert "CH4 + 2O2 = CO2 + 2H2O" in capsys.readouterr().out


def test_main_unknown_ordering_exits(monkeypatch, capsys):
    monkeypatch.setattr(
        sys, "argv", ["chembalance", "balance", "H2O = H2 + O2", "--ordering", "random"]
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    assert excinfo.value.code == 1
    assert "error: invalid_argument:" in capsys.readouterr().err


def test_python_dash_m_entry_point(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["chembalance", "balance", "Fe + O2 = Fe2O3"])
    runpy.run_module("chembalance", run_name="__main__")
    assert "4Fe + 3O2 = 2Fe2O3" in capsys.readouterr().out
