# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file implements fixed-rate mortgage payments and amortization.
"""

from propcalc.calculations.rounding import round_to
from propcalc.calculations.types import AmortizationYear


def monthly_payment(principal: float, annual_rate: float, years: int) -> float:
    """Monthly payment of a fully amortizing loan.

    Uses M = P * r(1+r)^n / ((1+r)^n - 1) with the monthly rate r and n
    payments. An interest-free loan is repaid in equal parts and is not
    rounded.
    """
    if annual_rate == 0:
        return principal / (years * 12)

    rate = annual_rate / 100 / 12
    n = years * 12
    payment = principal * (rate * (1 + rate) ** n) / ((1 + rate) ** n - 1)

    return round_to(payment)


def amortization_schedule(
    principal: float, annual_rate: float, years: int
) -> list[AmortizationYear]:
    payment = monthly_payment(principal, annual_rate, years)
    rate = annual_rate / 100 / 12
    balance = principal
    schedule = list()

    for year in range(1, years + 1):
        beginning = balance
        year_principal = year_interest = 0.0

        for month in range(1, 13):
            interest = balance * rate
            principal_part = payment - interest

            if year == years and month == 12:
                # The last payment clears whatever is left
                principal_part = balance

            year_interest += interest
            year_principal += principal_part
            balance -= principal_part

            if balance < 0.01:
                balance = 0

        schedule.append(
            AmortizationYear(
                year=year,
                beginning_balance=round_to(beginning),
                payment=round_to(payment * 12),
                principal=round_to(year_principal),
                interest=round_to(year_interest),
                ending_balance=round_to(balance),
            )
        )

    return schedule


def total_interest(principal: float, annual_rate: float, years: int) -> float:
    payment = monthly_payment(principal, annual_rate, years)

    return round_to(payment * years * 12 - principal)


def remaining_balance(
    principal: float, annual_rate: float, years: int, at_year: int
) -> float:
    """Loan balance at the end of `at_year` (1-based); zero once the loan is repaid."""
    if at_year > years:
        return 0.0
    if at_year < 1:
        return round_to(principal)

    return amortization_schedule(principal, annual_rate, years)[
        at_year - 1
    ].ending_balance
