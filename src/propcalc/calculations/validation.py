# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Plausibility warnings for calculator inputs. These never reject a value; they
point out assumptions that are unusual for residential rentals.
"""

from typing import Any, Mapping, Optional

from propcalc.calculations.types import (
    CalculationInputs,
    ValidationThreshold,
    ValidationWarning,
)

VALIDATION_THRESHOLDS: tuple[ValidationThreshold, ...] = (
    ValidationThreshold(
        field="interest_rate",
        high=10,
        message="Interest rate above 10% is unusual for residential properties. "
        "Typical rates are 5-8%.",
    ),
    ValidationThreshold(
        field="interest_rate",
        low=2,
        message="Interest rate below 2% is unusually low. Verify this is accurate.",
        severity="info",
    ),
    ValidationThreshold(
        field="vacancy_rate",
        high=15,
        message="Vacancy rate above 15% is very high. Typical ranges are 5-10%.",
    ),
    ValidationThreshold(
        field="down_payment_percent",
        low=10,
        message="Down payment below 10% may require PMI and result in higher "
        "interest rates.",
    ),
    ValidationThreshold(
        field="down_payment_percent",
        high=50,
        message="Down payment above 50% is uncommon. Consider keeping more liquidity.",
        severity="info",
    ),
    ValidationThreshold(
        field="property_management_percent",
        high=12,
        message="Property management fee above 12% is high. Typical rates are 8-10%.",
    ),
    ValidationThreshold(
        field="annual_rent_increase",
        high=7,
        message="Rent increase above 7% annually is aggressive. Historical average "
        "is 3-4%.",
    ),
    ValidationThreshold(
        field="annual_appreciation_rate",
        high=6,
        message="Appreciation above 6% annually is aggressive. Historical average "
        "is 3-4%.",
    ),
    ValidationThreshold(
        field="sale_closing_costs_percent",
        low=3,
        message="Closing costs below 3% is optimistic. Typical costs are 6-8% "
        "including realtor fees.",
        severity="info",
    ),
)


def check_validation_warning(field: str, value: float) -> Optional[ValidationWarning]:
    """First threshold of `field` that `value` crosses, if any. Bounds are
    exclusive: a value equal to a threshold is fine."""
    for t in VALIDATION_THRESHOLDS:
        if t.field != field:
            continue

        if t.high is not None and value > t.high:
            bound = t.high
        elif t.low is not None and value < t.low:
            bound = t.low
        else:
            continue

        return ValidationWarning(
            field=field,
            value=value,
            threshold=bound,
            message=t.message,
            severity=t.severity,
        )

    return None


def validation_warnings(values: Mapping[str, Any]) -> list[ValidationWarning]:
    """Warnings for every numeric entry of `values`; other entries are skipped."""
    warnings = list()

    for field, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue

        if (warning := check_validation_warning(field, value)) is not None:
            warnings.append(warning)

    return warnings


def input_warnings(inputs: CalculationInputs) -> list[ValidationWarning]:
    return validation_warnings(inputs.model_dump())
