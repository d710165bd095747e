# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from propcalc.calculations.analysis import analyze
from propcalc.calculations.cash_flow import (
    annual_cash_flow,
    cash_flow,
    is_positive_cash_flow,
    noi,
    operating_expenses,
)
from propcalc.calculations.defaults import (
    DEFAULT_VALUES,
    PROPERTY_TYPE_DEFAULTS,
    PROPERTY_TYPES,
    defaults_for,
)
from propcalc.calculations.exit import sale_proceeds, total_return
from propcalc.calculations.metrics import (
    all_metrics,
    cap_rate,
    cash_on_cash_return,
    dscr,
    equity_multiple,
    grm,
    irr,
)
from propcalc.calculations.mortgage import (
    amortization_schedule,
    monthly_payment,
    remaining_balance,
    total_interest,
)
from propcalc.calculations.projections import multi_year_projection
from propcalc.calculations.types import Analysis, CalculationInputs
from propcalc.calculations.validation import (
    VALIDATION_THRESHOLDS,
    check_validation_warning,
    validation_warnings,
)

__all__ = [
    "Analysis",
    "CalculationInputs",
    "DEFAULT_VALUES",
    "PROPERTY_TYPE_DEFAULTS",
    "PROPERTY_TYPES",
    "VALIDATION_THRESHOLDS",
    "all_metrics",
    "amortization_schedule",
    "analyze",
    "annual_cash_flow",
    "cap_rate",
    "cash_flow",
    "cash_on_cash_return",
    "check_validation_warning",
    "defaults_for",
    "dscr",
    "equity_multiple",
    "grm",
    "irr",
    "is_positive_cash_flow",
    "monthly_payment",
    "multi_year_projection",
    "noi",
    "operating_expenses",
    "remaining_balance",
    "sale_proceeds",
    "total_interest",
    "total_return",
    "validation_warnings",
]
