# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file combines the calculations into the result of the calculator.

First-year figures are monthly, the holding period is projected yearly and the
property is sold at the end of the last projected year at its appreciated
value.
"""

from propcalc.calculations.cash_flow import cash_flow, management_fee, resolve_expenses
from propcalc.calculations.exit import sale_proceeds, total_return
from propcalc.calculations.metrics import cap_rate, cash_on_cash_return, dscr, grm
from propcalc.calculations.mortgage import amortization_schedule, monthly_payment
from propcalc.calculations.projections import (
    loan_amount,
    multi_year_projection,
    total_investment,
)
from propcalc.calculations.types import Analysis, CalculationInputs, InvestmentMetrics
from propcalc.calculations.validation import input_warnings


def analyze(inputs: CalculationInputs) -> Analysis:
    inputs = resolve_expenses(inputs)
    loan = loan_amount(inputs)
    payment = monthly_payment(loan, inputs.interest_rate, inputs.loan_term_years)
    investment = total_investment(inputs)

    operating = (
        inputs.property_tax_annual / 12
        + inputs.insurance_annual / 12
        + inputs.hoa_monthly
        + inputs.maintenance_monthly
        + management_fee(inputs)
        + inputs.utilities_monthly
        + inputs.other_expenses_monthly
    )
    monthly = cash_flow(inputs.monthly_rent, inputs.vacancy_rate, operating, payment)

    projections = multi_year_projection(inputs)
    final = projections[-1]
    sale = sale_proceeds(
        final.property_value, inputs.sale_closing_costs_percent, final.loan_balance
    )

    cash_flows = [-investment, *(p.cash_flow for p in projections)]
    cash_flows[-1] += sale.net_proceeds
    returns = total_return(
        sum(p.cash_flow for p in projections),
        sale.net_proceeds,
        investment,
        cash_flows,
    )

    annual_noi = monthly.noi * 12
    metrics = InvestmentMetrics(
        cash_on_cash_return=cash_on_cash_return(monthly.cash_flow * 12, investment),
        cap_rate=cap_rate(annual_noi, inputs.purchase_price),
        dscr=dscr(annual_noi, payment * 12),
        grm=grm(inputs.purchase_price, inputs.monthly_rent * 12),
        equity_multiple=returns.equity_multiple,
        irr=returns.irr,
    )

    return Analysis(
        loan_amount=loan,
        down_payment=inputs.purchase_price * inputs.down_payment_percent / 100,
        total_investment=investment,
        monthly_payment=payment,
        monthly_operating_expenses=operating,
        cash_flow=monthly,
        metrics=metrics,
        projections=projections,
        sale_proceeds=sale,
        total_return=returns,
        amortization_schedule=amortization_schedule(
            loan, inputs.interest_rate, inputs.loan_term_years
        ),
        warnings=input_warnings(inputs),
    )
