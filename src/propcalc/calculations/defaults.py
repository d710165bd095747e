# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

from types import MappingProxyType
from typing import Any, get_args

from propcalc.calculations.types import PropertyType

PROPERTY_TYPES: tuple[str, ...] = get_args(PropertyType)

DEFAULT_VALUES = MappingProxyType(
    dict(
        down_payment_percent=20,
        interest_rate=6.5,
        loan_term_years=30,
        closing_costs=0,
        repair_costs=0,
        other_monthly_income=0,
        vacancy_rate=5,
        annual_rent_increase=3,
        hoa_monthly=0,
        maintenance_monthly=0,
        property_management_percent=0,
        utilities_monthly=0,
        other_expenses_monthly=0,
        annual_expense_increase=2.5,
        holding_length=5,
        annual_appreciation_rate=3,
        sale_closing_costs_percent=6,
    )
)

PROPERTY_TYPE_DEFAULTS = MappingProxyType(
    dict(
        single_family=dict(vacancy_rate=5, maintenance_monthly=0),
        multi_family=dict(
            vacancy_rate=7, maintenance_monthly=0, property_management_percent=8
        ),
        condo=dict(vacancy_rate=6, maintenance_monthly=0),
        townhouse=dict(vacancy_rate=5, maintenance_monthly=0),
        commercial=dict(
            vacancy_rate=10, maintenance_monthly=0, property_management_percent=5
        ),
        other=dict(vacancy_rate=5, maintenance_monthly=0),
    )
)


def defaults_for(property_type: str) -> dict[str, Any]:
    """Base defaults overlaid with those of the property type. Raises KeyError
    for unknown types."""
    return DEFAULT_VALUES | PROPERTY_TYPE_DEFAULTS[property_type]
