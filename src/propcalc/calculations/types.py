# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
Models for the inputs and results of rental-property calculations.

Money amounts are dollars, rates are percentages (6.5 means 6.5 %). Results are
rounded to cents unless noted otherwise.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

ExpenseMode = Literal["dollar", "percent"]
PropertyType = Literal[
    "single_family",
    "multi_family",
    "condo",
    "townhouse",
    "commercial",
    "other",
]
Severity = Literal["warning", "info"]


class CalculationInputs(BaseModel):
    """Everything the calculator asks for."""

    # Property details
    property_type: PropertyType = "single_family"
    title: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = Field(None, pattern=r"^(\d{5}(-\d{4})?)?$")
    bedrooms: Optional[int] = Field(None, ge=0, le=50)
    bathrooms: Optional[float] = Field(None, ge=0, le=50)
    square_feet: Optional[int] = Field(None, ge=0, le=100_000)

    # Purchase and financing
    purchase_price: float = Field(..., ge=1_000, le=100_000_000)
    down_payment_percent: float = Field(20, ge=0, le=100)
    interest_rate: float = Field(6.5, ge=0, le=20)
    loan_term_years: int = Field(30, ge=1, le=50)
    closing_costs: float = Field(0, ge=0)
    repair_costs: float = Field(0, ge=0)

    # Income
    monthly_rent: float = Field(..., ge=1, le=1_000_000)
    other_monthly_income: float = Field(0, ge=0, le=1_000_000)
    vacancy_rate: float = Field(5, ge=0, le=100)
    annual_rent_increase: float = Field(3, ge=0, le=50)

    # Expenses; percent modes are relative to the purchase price, except for
    # management, which is relative to gross rent
    property_tax_annual: float = Field(0, ge=0, le=10_000_000)
    property_tax_percent: Optional[float] = Field(None, ge=0, le=10)
    property_tax_mode: ExpenseMode = "dollar"
    insurance_annual: float = Field(0, ge=0, le=1_000_000)
    insurance_percent: Optional[float] = Field(None, ge=0, le=5)
    insurance_mode: ExpenseMode = "dollar"
    hoa_monthly: float = Field(0, ge=0, le=100_000)
    maintenance_monthly: float = Field(0, ge=0, le=100_000)
    maintenance_percent: Optional[float] = Field(None, ge=0, le=5)
    maintenance_mode: ExpenseMode = "dollar"
    property_management_percent: float = Field(0, ge=0, le=50)
    property_management_monthly: Optional[float] = Field(None, ge=0, le=100_000)
    property_management_mode: ExpenseMode = "percent"
    utilities_monthly: float = Field(0, ge=0, le=100_000)
    other_expenses_monthly: float = Field(0, ge=0, le=100_000)
    annual_expense_increase: float = Field(2.5, ge=0, le=50)

    # Multi-year assumptions
    holding_length: int = Field(5, ge=1, le=50)
    annual_appreciation_rate: float = Field(3, ge=-50, le=50)
    sale_closing_costs_percent: float = Field(6, ge=0, le=20)


class AmortizationYear(BaseModel):
    year: int
    beginning_balance: float
    payment: float  # annual
    principal: float
    interest: float
    ending_balance: float


class CashFlowBreakdown(BaseModel):
    """One month of income and expenses."""

    gross_income: float
    vacancy_loss: float
    net_income: float
    total_expenses: float
    noi: float
    debt_service: float
    cash_flow: float


class ProjectionYear(BaseModel):
    year: int

    gross_income: float
    vacancy_loss: float
    net_income: float

    property_tax: float
    insurance: float
    hoa: float
    maintenance: float
    management: float
    utilities: float
    other_expenses: float
    total_expenses: float

    mortgage_payment: float  # annual
    principal_paid: float
    interest_paid: float
    loan_balance: float

    noi: float
    cash_flow: float
    cumulative_cash_flow: float

    property_value: float
    equity: float

    cash_on_cash_return: float
    cap_rate: float
    dscr: float


class SaleProceeds(BaseModel):
    sale_price: float
    selling_costs: float
    loan_payoff: float
    net_proceeds: float


class TotalReturn(BaseModel):
    total_cash_flow: float
    sale_proceeds: float
    total_return: float
    total_investment: float
    equity_multiple: float
    irr: float  # 0 when it cannot be determined


class InvestmentMetrics(BaseModel):
    cash_on_cash_return: float
    cap_rate: float
    dscr: float
    grm: float
    equity_multiple: float
    irr: float


class ValidationThreshold(BaseModel):
    field: str
    low: Optional[float] = None
    high: Optional[float] = None
    message: str
    severity: Severity = "warning"


class ValidationWarning(BaseModel):
    field: str
    value: float
    threshold: float
    message: str
    severity: Severity


class Analysis(BaseModel):
    """Full first-year and holding-period analysis of one property."""

    loan_amount: float
    down_payment: float
    total_investment: float
    monthly_payment: float
    monthly_operating_expenses: float
    cash_flow: CashFlowBreakdown
    metrics: InvestmentMetrics
    projections: list[ProjectionYear]
    sale_proceeds: SaleProceeds
    total_return: TotalReturn
    amortization_schedule: list[AmortizationYear]
    warnings: list[ValidationWarning]
