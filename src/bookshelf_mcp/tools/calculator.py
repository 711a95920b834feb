"""Calculator Tools - add and calculate

Stateless arithmetic over two numbers. Division by zero is not a protocol
error: the tool answers normally with the text "Error: Cannot divide by zero"
and clients inspect the content to tell it apart from a result.

Usage: tool.call("calculate", {"operation": "divide", "a": 10, "b": 2})
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field

from ..numbers import format_number

DIVIDE_BY_ZERO_MESSAGE = "Error: Cannot divide by zero"


class Operation(StrEnum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"


class AddInput(BaseModel):
    """Input schema for the add tool."""

    a: float = Field(..., strict=True, description="First addend")
    b: float = Field(..., strict=True, description="Second addend")


class CalculateInput(BaseModel):
    """Input schema for the calculate tool."""

    operation: Operation = Field(..., description="Arithmetic operation to apply")
    a: float = Field(..., strict=True, description="Left operand")
    b: float = Field(..., strict=True, description="Right operand")


def add(a: float, b: float) -> float:
    return a + b


def calculate(operation: Operation, a: float, b: float) -> float | str:
    """Apply ``operation`` to ``a`` and ``b``.

    Returns the divide-by-zero message instead of raising when ``b`` is 0.
    """
    match operation:
        case Operation.ADD:
            return a + b
        case Operation.SUBTRACT:
            return a - b
        case Operation.MULTIPLY:
            return a * b
        case Operation.DIVIDE:
            if b == 0:
                return DIVIDE_BY_ZERO_MESSAGE
            return a / b
    raise ValueError(f"Unsupported operation: {operation}")


async def add_handler(arguments: dict[str, Any]) -> str:
    params = AddInput.model_validate(arguments)
    return format_number(add(params.a, params.b))


async def calculate_handler(arguments: dict[str, Any]) -> str:
    params = CalculateInput.model_validate(arguments)
    result = calculate(params.operation, params.a, params.b)
    if isinstance(result, str):
        return result
    return format_number(result)


add_tool = {
    "name": "add",
    "description": "Add two numbers and return the sum.",
    "inputSchema": AddInput.model_json_schema(),
    "inputModel": AddInput,
    "handler": add_handler,
}

calculate_tool = {
    "name": "calculate",
    "description": (
        "Apply add, subtract, multiply or divide to two numbers. "
        "Dividing by zero returns the text 'Error: Cannot divide by zero'."
    ),
    "inputSchema": CalculateInput.model_json_schema(),
    "inputModel": CalculateInput,
    "handler": calculate_handler,
}
