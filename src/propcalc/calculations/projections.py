# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file implements year-by-year projections over the holding period.

Rent and other income grow by `annual_rent_increase`, all expenses except
management by `annual_expense_increase`, both compounding from the second year.
Management is a share of the grown gross rent. The property value compounds by
`annual_appreciation_rate` from the first year on.
"""

from propcalc.calculations.metrics import cap_rate, cash_on_cash_return, dscr
from propcalc.calculations.mortgage import amortization_schedule, monthly_payment
from propcalc.calculations.rounding import round_to
from propcalc.calculations.types import CalculationInputs, ProjectionYear


def loan_amount(inputs: CalculationInputs) -> float:
    return inputs.purchase_price * (1 - inputs.down_payment_percent / 100)


def total_investment(inputs: CalculationInputs) -> float:
    """Cash needed at purchase: down payment, closing costs and repairs."""
    return (
        inputs.purchase_price * inputs.down_payment_percent / 100
        + inputs.closing_costs
        + inputs.repair_costs
    )


def multi_year_projection(inputs: CalculationInputs) -> list[ProjectionYear]:
    loan = loan_amount(inputs)
    rate, term = inputs.interest_rate, inputs.loan_term_years
    annual_payment = monthly_payment(loan, rate, term) * 12
    schedule = amortization_schedule(loan, rate, term)
    investment = total_investment(inputs)

    projections = list()
    cumulative = 0.0

    for year in range(1, inputs.holding_length + 1):
        growth = (1 + inputs.annual_rent_increase / 100) ** (year - 1)
        rent = inputs.monthly_rent * growth
        other_income = inputs.other_monthly_income * growth
        gross = (rent + other_income) * 12
        vacancy_loss = gross * inputs.vacancy_rate / 100
        net_income = gross - vacancy_loss

        expense_growth = (1 + inputs.annual_expense_increase / 100) ** (year - 1)
        property_tax = inputs.property_tax_annual * expense_growth
        insurance = inputs.insurance_annual * expense_growth
        hoa = inputs.hoa_monthly * 12 * expense_growth
        maintenance = inputs.maintenance_monthly * 12 * expense_growth
        utilities = inputs.utilities_monthly * 12 * expense_growth
        other = inputs.other_expenses_monthly * 12 * expense_growth

        if inputs.property_management_mode == "dollar":
            fee = inputs.property_management_monthly or 0
            management = fee * 12 * expense_growth
        else:
            management = gross * inputs.property_management_percent / 100

        expenses = (
            property_tax
            + insurance
            + hoa
            + maintenance
            + management
            + utilities
            + other
        )
        noi = net_income - expenses

        if year <= len(schedule):
            amortized = schedule[year - 1]
            debt_service = annual_payment
            principal_paid, interest_paid = amortized.principal, amortized.interest
            balance = amortized.ending_balance
        else:
            # Held past the loan term
            debt_service = principal_paid = interest_paid = balance = 0.0

        cash_flow = noi - debt_service
        cumulative += cash_flow
        appreciation = (1 + inputs.annual_appreciation_rate / 100) ** year
        value = inputs.purchase_price * appreciation

        projections.append(
            ProjectionYear(
                year=year,
                gross_income=round_to(gross),
                vacancy_loss=round_to(vacancy_loss),
                net_income=round_to(net_income),
                property_tax=round_to(property_tax),
                insurance=round_to(insurance),
                hoa=round_to(hoa),
                maintenance=round_to(maintenance),
                management=round_to(management),
                utilities=round_to(utilities),
                other_expenses=round_to(other),
                total_expenses=round_to(expenses),
                mortgage_payment=round_to(debt_service),
                principal_paid=round_to(principal_paid),
                interest_paid=round_to(interest_paid),
                loan_balance=round_to(balance),
                noi=round_to(noi),
                cash_flow=round_to(cash_flow),
                cumulative_cash_flow=round_to(cumulative),
                property_value=round_to(value),
                equity=round_to(value - balance),
                cash_on_cash_return=cash_on_cash_return(cash_flow, investment),
                cap_rate=cap_rate(noi, value),
                dscr=dscr(noi, debt_service),
            )
        )

    return projections
