# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file implements investment metrics. Percentages are returned as such
(12.5 means 12.5 %), ratios as plain numbers.
"""

import math
from typing import Optional, Sequence

from propcalc.calculations.rounding import round_to
from propcalc.calculations.types import InvestmentMetrics

IRR_GUESS = 0.1
IRR_MAX_ITERATIONS = 1000
IRR_TOLERANCE = 1e-5
NO_DEBT_DSCR = 999.99


def cash_on_cash_return(annual_cash_flow: float, total_investment: float) -> float:
    if total_investment == 0:
        return 0.0

    return round_to(annual_cash_flow / total_investment * 100)


def cap_rate(noi: float, property_value: float) -> float:
    if property_value == 0:
        return 0.0

    return round_to(noi / property_value * 100)


def npv(rate: float, cash_flows: Sequence[float]) -> float:
    return sum(cf / (1 + rate) ** i for i, cf in enumerate(cash_flows))


def irr(cash_flows: Sequence[float]) -> Optional[float]:
    """Internal rate of return in percent, found with Newton's method.

    `cash_flows[0]` is the flow at time zero (normally the negative initial
    investment), the others follow at yearly intervals. Returns `None` if the
    flows do not change sign or the iteration does not converge.
    """
    if len(cash_flows) < 2:
        return None
    if not any(cf > 0 for cf in cash_flows) or not any(cf < 0 for cf in cash_flows):
        return None

    rate = IRR_GUESS

    try:
        for _ in range(IRR_MAX_ITERATIONS):
            value = derivative = 0.0

            for i, cf in enumerate(cash_flows):
                discount = (1 + rate) ** i
                value += cf / discount
                derivative -= i * cf / (discount * (1 + rate))

            if abs(value) < IRR_TOLERANCE:
                return round_to(rate * 100)

            if abs(derivative) < 1e-7:
                return None

            rate -= value / derivative

            if not math.isfinite(rate):
                return None
    except (ZeroDivisionError, OverflowError):
        return None

    return None


def dscr(noi: float, annual_debt_service: float) -> float:
    """Debt service coverage ratio. Without debt, any positive NOI is covered."""
    if annual_debt_service == 0:
        return NO_DEBT_DSCR if noi > 0 else 0.0

    return round_to(noi / annual_debt_service)


def equity_multiple(total_distributions: float, total_investment: float) -> float:
    if total_investment == 0:
        return 0.0

    return round_to(total_distributions / total_investment)


def grm(property_price: float, annual_rent: float) -> float:
    """Gross rent multiplier, rounded to one decimal."""
    if annual_rent == 0:
        return 0.0

    return round_to(property_price / annual_rent, 1)


def all_metrics(
    annual_cash_flow: float,
    annual_noi: float,
    annual_debt_service: float,
    property_value: float,
    total_investment: float,
    cash_flows: Sequence[float],
    total_distributions: float,
    annual_rent: float,
) -> InvestmentMetrics:
    return InvestmentMetrics(
        cash_on_cash_return=cash_on_cash_return(annual_cash_flow, total_investment),
        cap_rate=cap_rate(annual_noi, property_value),
        dscr=dscr(annual_noi, annual_debt_service),
        grm=grm(property_value, annual_rent),
        equity_multiple=equity_multiple(total_distributions, total_investment),
        irr=irr(cash_flows) or 0.0,
    )
