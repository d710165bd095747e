# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from propcalc.calculations.rounding import round_to
from propcalc.calculations.types import CalculationInputs, CashFlowBreakdown


def noi(gross_income: float, operating_expenses: float) -> float:
    """Net operating income. Debt service is not an operating expense."""
    return round_to(gross_income - operating_expenses)


def cash_flow(
    monthly_rent: float,
    vacancy_rate: float,
    monthly_operating_expenses: float,
    monthly_mortgage_payment: float,
) -> CashFlowBreakdown:
    vacancy_loss = monthly_rent * vacancy_rate / 100
    net_income = monthly_rent - vacancy_loss
    noi_ = net_income - monthly_operating_expenses

    return CashFlowBreakdown(
        gross_income=round_to(monthly_rent),
        vacancy_loss=round_to(vacancy_loss),
        net_income=round_to(net_income),
        total_expenses=round_to(monthly_operating_expenses),
        noi=round_to(noi_),
        debt_service=round_to(monthly_mortgage_payment),
        cash_flow=round_to(noi_ - monthly_mortgage_payment),
    )


def annual_cash_flow(
    monthly_rent: float,
    vacancy_rate: float,
    monthly_operating_expenses: float,
    monthly_mortgage_payment: float,
) -> float:
    monthly = cash_flow(
        monthly_rent,
        vacancy_rate,
        monthly_operating_expenses,
        monthly_mortgage_payment,
    )

    return round_to(monthly.cash_flow * 12)


def operating_expenses(
    property_tax_annual: float,
    insurance_annual: float,
    hoa_monthly: float,
    maintenance_monthly: float,
    management_percent: float,
    monthly_rent: float,
    utilities_monthly: float,
    other_monthly: float,
) -> float:
    """Monthly operating expenses. Annual amounts are spread over twelve months."""
    total = (
        property_tax_annual / 12
        + insurance_annual / 12
        + hoa_monthly
        + maintenance_monthly
        + monthly_rent * management_percent / 100
        + utilities_monthly
        + other_monthly
    )

    return round_to(total)


def management_fee(inputs: CalculationInputs) -> float:
    """Monthly management fee in the first year."""
    if inputs.property_management_mode == "dollar":
        return inputs.property_management_monthly or 0.0

    return inputs.monthly_rent * inputs.property_management_percent / 100


def resolve_expenses(inputs: CalculationInputs) -> CalculationInputs:
    """Replace percent-mode expenses by the dollar amounts they stand for."""
    update = dict()

    for name, field, periods in (
        ("property_tax", "property_tax_annual", 1),
        ("insurance", "insurance_annual", 1),
        ("maintenance", "maintenance_monthly", 12),
    ):
        percent = getattr(inputs, f"{name}_percent")

        if getattr(inputs, f"{name}_mode") == "percent" and percent is not None:
            update[field] = inputs.purchase_price * percent / 100 / periods

    return inputs.model_copy(update=update)


def is_positive_cash_flow(value: float) -> bool:
    return value > 0
