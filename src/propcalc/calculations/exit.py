# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from typing import Sequence

from propcalc.calculations.metrics import equity_multiple, irr
from propcalc.calculations.rounding import round_to
from propcalc.calculations.types import SaleProceeds, TotalReturn


def sale_proceeds(
    sale_price: float, selling_costs_percent: float, loan_payoff: float
) -> SaleProceeds:
    """Cash left after selling costs and the loan payoff; negative if underwater."""
    selling_costs = sale_price * (selling_costs_percent / 100)

    return SaleProceeds(
        sale_price=round_to(sale_price),
        selling_costs=round_to(selling_costs),
        loan_payoff=round_to(loan_payoff),
        net_proceeds=round_to(sale_price - selling_costs - loan_payoff),
    )


def total_return(
    cumulative_cash_flow: float,
    net_sale_proceeds: float,
    total_investment: float,
    cash_flows: Sequence[float],
) -> TotalReturn:
    total = cumulative_cash_flow + net_sale_proceeds

    return TotalReturn(
        total_cash_flow=round_to(cumulative_cash_flow),
        sale_proceeds=round_to(net_sale_proceeds),
        total_return=round_to(total),
        total_investment=round_to(total_investment),
        equity_multiple=equity_multiple(total, total_investment),
        irr=irr(cash_flows) or 0.0,
    )
