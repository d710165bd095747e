# Copyright Max R. P. Grossmann, Holger Gerhardt, et al., 2025.
# SPDX-License-Identifier: LGPL-3.0-or-later

"""
This file implements the calculator API at /api/v1/.

The endpoints are pure computations and do not require a session.
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel, Field

from propcalc.calculations import (
    PROPERTY_TYPES,
    CalculationInputs,
    analyze,
    defaults_for,
    validation_warnings,
)
from propcalc.utils.listing import validate_listing_url

router = APIRouter(prefix="/api/v1")


class ListingUrlCheck(BaseModel):
    """Request body for checking a listing URL."""

    url: str = Field(..., max_length=2048, description="Pasted listing URL")


@router.post("/analyze")
async def analyze_property(inputs: CalculationInputs) -> ORJSONResponse:
    return ORJSONResponse(analyze(inputs).model_dump())


@router.get("/defaults/{property_type}")
async def property_type_defaults(property_type: str) -> ORJSONResponse:
    if property_type not in PROPERTY_TYPES:
        raise HTTPException(status_code=404, detail="Unknown property type")

    return ORJSONResponse(defaults_for(property_type))


@router.post("/warnings")
async def value_warnings(values: dict[str, Any]) -> ORJSONResponse:
    return ORJSONResponse([w.model_dump() for w in validation_warnings(values)])


@router.post("/listing-url")
async def check_listing_url(body: ListingUrlCheck) -> ORJSONResponse:
    return ORJSONResponse(validate_listing_url(body.url).model_dump())
