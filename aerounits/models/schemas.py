"""
Request and response models for the CLI and HTTP API.

Thin pydantic wrappers around the units core: they validate unit
identifiers against the closed ``Unit`` set and translate to and from
``Quantity`` objects.
"""

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, model_validator

from aerounits.units import Dimension, Quantity, Unit, lookup


class QuantityModel(BaseModel):
    """A numeric value tagged with a unit."""
    value: float = Field(..., description="Numeric value")
    unit: Unit = Field(..., description="Unit identifier, e.g. 'ft' or 'knots'")

    def to_quantity(self) -> Quantity:
        return Quantity(self.value, self.unit)

    @classmethod
    def from_quantity(cls, quantity: Quantity) -> "QuantityModel":
        return cls(value=quantity.value, unit=quantity.unit)

    model_config = {
        "json_schema_extra": {
            "example": {"value": 175, "unit": "mph"}
        }
    }


# A plain number or a unit-tagged quantity
OperandModel = Union[float, QuantityModel]


def to_operand(operand: OperandModel):
    """Model operand -> core operand (number or Quantity)."""
    if isinstance(operand, QuantityModel):
        return operand.to_quantity()
    return operand


def from_operand(operand) -> OperandModel:
    """Core operand -> model operand."""
    if isinstance(operand, Quantity):
        return QuantityModel.from_quantity(operand)
    return float(operand)


class Operation(str, Enum):
    """Arithmetic operations over numbers and quantities."""
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    NEGATE = "negate"


class ConvertRequest(BaseModel):
    """Convert a quantity to another unit of the same dimension."""
    quantity: QuantityModel
    to_unit: Unit = Field(..., description="Target unit")


class CalculationRequest(BaseModel):
    """
    Apply an arithmetic operation.

    ``b`` is required for binary operations and must be omitted for negate.
    """
    operation: Operation
    a: OperandModel = Field(..., description="Left operand: number or {value, unit}")
    b: Optional[OperandModel] = Field(
        default=None,
        description="Right operand: number or {value, unit} (omit for negate)",
    )

    @model_validator(mode="after")
    def check_arity(self) -> "CalculationRequest":
        """Binary operations need b; negate takes none."""
        if self.operation == Operation.NEGATE:
            if self.b is not None:
                raise ValueError("negate takes a single operand")
        elif self.b is None:
            raise ValueError(f"{self.operation.value} needs two operands")
        return self

    model_config = {
        "json_schema_extra": {
            "example": {
                "operation": "add",
                "a": {"value": 1, "unit": "in"},
                "b": {"value": 1, "unit": "ft"},
            }
        }
    }


class CalculationResult(BaseModel):
    """Result of an arithmetic operation."""
    operation: Operation
    result: OperandModel
    dimension: Optional[Dimension] = Field(
        default=None,
        description="Dimension of the result (None for plain numbers)",
    )
    description: Optional[str] = Field(
        default=None,
        description="Human-readable unit of the result",
    )


class ConversionResult(BaseModel):
    """Result of a unit conversion."""
    source: QuantityModel
    result: QuantityModel
    dimension: Dimension


class UnitInfo(BaseModel):
    """Registry entry for a unit."""
    id: Unit
    dimension: Dimension
    description: str
    base: bool = Field(..., description="Whether this is the dimension's base unit")
    factor: Optional[float] = Field(
        default=None,
        description="Scalar factor to the base unit (None for affine units)",
    )

    @classmethod
    def from_unit(cls, unit: Unit) -> "UnitInfo":
        descriptor = lookup(unit)
        return cls(
            id=unit,
            dimension=descriptor.dimension,
            description=descriptor.description,
            base=descriptor.conversion.is_base,
            factor=descriptor.conversion.factor,
        )


class DimensionInfo(BaseModel):
    """A dimension with its base unit and the relations it takes part in."""
    dimension: Dimension
    base_unit: Unit
    units: list[Unit]
    relations: list[str] = Field(
        default_factory=list,
        description="Relations such as 'area = length x length'",
    )


class DynamicPressureRequest(BaseModel):
    """Inputs for dynamic pressure."""
    velocity: QuantityModel
    altitude: Optional[QuantityModel] = Field(
        default=None,
        description="Pressure altitude (default sea level)",
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "velocity": {"value": 154.412, "unit": "knots"},
                "altitude": {"value": 15000, "unit": "ft"},
            }
        }
    }


class StallSpeedRequest(BaseModel):
    """Inputs for stall speed."""
    gross_weight: QuantityModel
    wing_area: QuantityModel
    cl_max: float = Field(..., gt=0, description="Maximum lift coefficient")
