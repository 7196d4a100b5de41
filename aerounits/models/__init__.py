"""
Pydantic models for aerounits requests and responses.
"""

from aerounits.models.schemas import (
    QuantityModel,
    OperandModel,
    Operation,
    ConvertRequest,
    ConversionResult,
    CalculationRequest,
    CalculationResult,
    UnitInfo,
    DimensionInfo,
    DynamicPressureRequest,
    StallSpeedRequest,
    to_operand,
    from_operand,
)

__all__ = [
    "QuantityModel",
    "OperandModel",
    "Operation",
    "ConvertRequest",
    "ConversionResult",
    "CalculationRequest",
    "CalculationResult",
    "UnitInfo",
    "DimensionInfo",
    "DynamicPressureRequest",
    "StallSpeedRequest",
    "to_operand",
    "from_operand",
]
