import io
from decimal import Decimal

import pytest

from invoicing.main import build_parser, main, run_demo


def test_demo_prints_totals_and_receipt():
    output = io.StringIO()

    invoice = run_demo(output)

    text = output.getvalue()
    assert invoice.count() == 6
    assert invoice.subtotal() == Decimal("1658500")
    assert "Subtotal: $1658500.00" in text
    assert "SALES INVOICE" in text
    assert "Demo complete" in text


def test_parser_defaults_to_demo():
    args = build_parser().parse_args([])

    assert args.interactive is False


def test_parser_interactive_flag():
    assert build_parser().parse_args(["-i"]).interactive is True


def test_main_runs_demo(capsys):
    assert main([]) == 0

    assert "Demo complete" in capsys.readouterr().out


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert "invoicing" in capsys.readouterr().out
