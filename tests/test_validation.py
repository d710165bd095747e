from propcalc.calculations import CalculationInputs
from propcalc.calculations.validation import (
    VALIDATION_THRESHOLDS,
    check_validation_warning,
    input_warnings,
    validation_warnings,
)


def test_thresholds_cover_key_fields():
    fields = {t.field for t in VALIDATION_THRESHOLDS}

    assert fields == {
        "interest_rate",
        "vacancy_rate",
        "down_payment_percent",
        "property_management_percent",
        "annual_rent_increase",
        "annual_appreciation_rate",
        "sale_closing_costs_percent",
    }
    assert all(len(t.message) > 10 for t in VALIDATION_THRESHOLDS)
    assert all(t.low is not None or t.high is not None for t in VALIDATION_THRESHOLDS)


def test_high_interest_rate():
    warning = check_validation_warning("interest_rate", 12)

    assert warning is not None
    assert warning.field == "interest_rate"
    assert warning.value == 12
    assert warning.threshold == 10
    assert warning.severity == "warning"


def test_low_interest_rate():
    # Second threshold of the same field
    warning = check_validation_warning("interest_rate", 1.5)

    assert warning is not None
    assert warning.threshold == 2
    assert warning.severity == "info"


def test_bounds_are_exclusive():
    assert check_validation_warning("interest_rate", 10) is None
    assert check_validation_warning("interest_rate", 2) is None
    assert check_validation_warning("down_payment_percent", 50) is None
    assert check_validation_warning("down_payment_percent", 10) is None


def test_typical_values_pass():
    assert check_validation_warning("interest_rate", 6) is None
    assert check_validation_warning("vacancy_rate", 10) is None
    assert check_validation_warning("property_management_percent", 8) is None
    assert check_validation_warning("annual_rent_increase", 5) is None
    assert check_validation_warning("annual_appreciation_rate", 3) is None
    assert check_validation_warning("sale_closing_costs_percent", 6) is None


def test_messages():
    assert "PMI" in check_validation_warning("down_payment_percent", 5).message
    assert "aggressive" in check_validation_warning("annual_rent_increase", 8).message
    assert "Historical average" in check_validation_warning(
        "annual_appreciation_rate", 7
    ).message

    closing = check_validation_warning("sale_closing_costs_percent", 2)

    assert closing.severity == "info"
    assert "optimistic" in closing.message


def test_unknown_field():
    assert check_validation_warning("monthly_rent", 1e9) is None


def test_validation_warnings_skips_non_numbers():
    warnings = validation_warnings(
        dict(
            interest_rate=12,
            vacancy_rate="20",
            down_payment_percent=True,
            property_management_percent=15,
            title="Duplex",
        )
    )

    assert [w.field for w in warnings] == [
        "interest_rate",
        "property_management_percent",
    ]


def test_input_warnings():
    inputs = CalculationInputs(
        purchase_price=300000,
        monthly_rent=2500,
        down_payment_percent=5,
        vacancy_rate=20,
    )

    assert {w.field for w in input_warnings(inputs)} == {
        "down_payment_percent",
        "vacancy_rate",
    }
