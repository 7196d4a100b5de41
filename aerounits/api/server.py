"""
FastAPI server for the units core and formula layer.

Provides REST endpoints for registry lookup, conversion, arithmetic and
a couple of handbook formulae.
WARNING: Handbook formulae are for conceptual design only, NOT for certification.
"""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from aerounits import __version__
from aerounits.aero import dynamic_pressure, stall_speed
from aerounits.calculator import calculate, convert_quantity, list_dimensions, list_units
from aerounits.models.schemas import (
    CalculationRequest,
    CalculationResult,
    ConversionResult,
    ConvertRequest,
    DimensionInfo,
    DynamicPressureRequest,
    QuantityModel,
    StallSpeedRequest,
    UnitInfo,
)
from aerounits.units import Dimension, Unit, UnitError

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="aerounits API",
    description="""
    Units-of-measure arithmetic and light plane design formulae.

    **WARNING**: Formula results are rough conceptual estimates only.
    Not for certification or detailed design purposes.
    """,
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str


def _bad_request(error: Exception) -> HTTPException:
    logger.info("Rejected request: %s", error)
    return HTTPException(status_code=400, detail=str(error))


@app.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check if the API is running."""
    return HealthResponse(status="healthy", version=__version__)


@app.get("/units", response_model=list[UnitInfo], tags=["Reference"])
async def get_units(
    dimension: Optional[Dimension] = Query(default=None, description="Only units of this dimension"),
):
    """List registered units."""
    return list_units(dimension)


@app.get("/units/{unit_id}", response_model=UnitInfo, tags=["Reference"])
async def get_unit(unit_id: str):
    """Get a single unit's registry entry."""
    try:
        unit = Unit(unit_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown unit '{unit_id}'.")
    return UnitInfo.from_unit(unit)


@app.get("/dimensions", response_model=list[DimensionInfo], tags=["Reference"])
async def get_dimensions():
    """List dimensions with their base units and relations."""
    return list_dimensions()


@app.post("/convert", response_model=ConversionResult, tags=["Units"])
async def convert_endpoint(request: ConvertRequest):
    """Convert a quantity to another unit of the same dimension."""
    try:
        return convert_quantity(request)
    except UnitError as e:
        raise _bad_request(e)


@app.post("/calculate", response_model=CalculationResult, tags=["Units"])
async def calculate_endpoint(request: CalculationRequest):
    """
    Apply add, subtract, multiply, divide or negate.

    Sums keep the left operand's unit; products and quotients of two
    quantities are expressed in the base unit of the result dimension.
    """
    try:
        return calculate(request)
    except (ValueError, ZeroDivisionError) as e:
        raise _bad_request(e)


@app.post("/aero/dynamic-pressure", response_model=QuantityModel, tags=["Aero"])
async def dynamic_pressure_endpoint(request: DynamicPressureRequest):
    """Dynamic pressure in psf at a velocity and optional altitude."""
    try:
        if request.altitude is None:
            q = dynamic_pressure(request.velocity.to_quantity())
        else:
            q = dynamic_pressure(request.velocity.to_quantity(), request.altitude.to_quantity())
        return QuantityModel.from_quantity(q)
    except ValueError as e:
        raise _bad_request(e)


@app.post("/aero/stall-speed", response_model=QuantityModel, tags=["Aero"])
async def stall_speed_endpoint(request: StallSpeedRequest):
    """Stall speed in mph from gross weight, wing area and Cl max."""
    try:
        vs = stall_speed(
            request.gross_weight.to_quantity(),
            request.wing_area.to_quantity(),
            request.cl_max,
        )
        return QuantityModel.from_quantity(vs)
    except (ValueError, ZeroDivisionError) as e:
        raise _bad_request(e)
