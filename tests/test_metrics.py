import pytest

from propcalc.calculations.metrics import (
    NO_DEBT_DSCR,
    all_metrics,
    cap_rate,
    cash_on_cash_return,
    dscr,
    equity_multiple,
    grm,
    irr,
    npv,
)


def test_cash_on_cash_return():
    assert cash_on_cash_return(12000, 100000) == 12
    assert cash_on_cash_return(12000, 150000) == 8
    assert cash_on_cash_return(-5000, 100000) == -5
    assert cash_on_cash_return(12345, 100000) == 12.35
    assert cash_on_cash_return(12000, 0) == 0


def test_cap_rate():
    assert cap_rate(36000, 500000) == 7.2
    assert cap_rate(-10000, 500000) == -2
    assert cap_rate(36789, 500000) == 7.36
    assert cap_rate(36000, 0) == 0


def test_irr_single_period():
    assert irr([-100000, 110000]) == pytest.approx(10, abs=0.5)


def test_irr_matches_npv_root():
    flows = [-100000, 8000, 8000, 8000, 8000, 128000]
    rate = irr(flows)

    assert rate is not None and rate > 10
    assert npv(rate / 100, flows) == pytest.approx(0, abs=50)


def test_irr_negative():
    rate = irr([-100000, 5000, 5000, 5000, 5000, 60000])

    assert rate is not None and rate < 0


def test_irr_rounds_to_two_places():
    rate = irr([-100000, 12345, 12345, 112345])

    assert rate is not None
    assert rate == round(rate, 2)


def test_irr_undefined():
    assert irr([]) is None
    assert irr([-100000]) is None
    assert irr([10000, 10000, 10000]) is None
    assert irr([-10000, -10000]) is None
    assert irr([0, 0, 0]) is None


def test_irr_gives_up_on_degenerate_flows():
    # The derivative vanishes at the initial guess
    assert irr([-1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1e-300]) is None


def test_dscr():
    assert dscr(36000, 30000) == 1.2
    assert dscr(30000, 30000) == 1
    assert dscr(25000, 30000) == pytest.approx(0.83, abs=0.005)
    assert dscr(40000, 30000) == pytest.approx(1.33, abs=0.005)
    assert dscr(-10000, 30000) == pytest.approx(-0.33, abs=0.005)
    assert dscr(36789, 30000) == 1.23


def test_dscr_without_debt():
    assert dscr(36000, 0) == NO_DEBT_DSCR
    assert dscr(0, 0) == 0
    assert dscr(-100, 0) == 0


def test_equity_multiple():
    assert equity_multiple(150000, 100000) == 1.5
    assert equity_multiple(80000, 100000) == 0.8
    assert equity_multiple(100000, 100000) == 1
    assert equity_multiple(123456, 100000) == 1.23
    assert equity_multiple(150000, 0) == 0


def test_grm():
    assert grm(500000, 42000) == pytest.approx(11.9)
    assert grm(400000, 50000) == 8
    assert grm(600000, 40000) == 15
    assert grm(500000, 42345) == 11.8
    assert grm(500000, 0) == 0


def test_all_metrics():
    metrics = all_metrics(
        12000,
        36000,
        28800,
        500000,
        100000,
        [-100000, 12000, 12000, 12000, 12000, 160000],
        160000,
        42000,
    )

    assert metrics.cash_on_cash_return == 12
    assert metrics.cap_rate == 7.2
    assert metrics.dscr == 1.25
    assert metrics.grm == pytest.approx(11.9)
    assert metrics.equity_multiple == 1.6
    assert metrics.irr > 0


def test_all_metrics_without_irr():
    metrics = all_metrics(12000, 36000, 28800, 500000, 100000, [1, 2, 3], 160000, 42000)

    assert metrics.irr == 0
    assert metrics.cash_on_cash_return > 0
