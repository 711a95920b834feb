"""
Tests for the add and calculate tools.

These tests verify:
1. Arithmetic results and their text rendering
2. Divide by zero returned as content, not raised
3. Input validation
"""

import pytest
from pydantic import ValidationError

from bookshelf_mcp.tools.calculator import (
    DIVIDE_BY_ZERO_MESSAGE,
    Operation,
    add,
    add_handler,
    calculate,
    calculate_handler,
    format_number,
)


class TestArithmetic:
    def test_add(self):
        assert add(2, 3) == 5
        assert add(-1, 1) == 0

    @pytest.mark.parametrize(
        ("operation", "expected"),
        [
            (Operation.ADD, 12),
            (Operation.SUBTRACT, 8),
            (Operation.MULTIPLY, 20),
            (Operation.DIVIDE, 5),
        ],
    )
    def test_calculate(self, operation, expected):
        assert calculate(operation, 10, 2) == expected

    def test_divide_by_zero_returns_message(self):
        assert calculate(Operation.DIVIDE, 4, 0) == "Error: Cannot divide by zero"


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (5.0, "5"),
            (-0.0, "0"),
            (2.5, "2.5"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e21, "1e+21"),
            (1.2345678901234568e20, "123456789012345680000"),
            (100.0, "100"),
            (-2.5, "-2.5"),
            (0.000001, "0.000001"),
            (1e-7, "1e-7"),
            (1.5e-7, "1.5e-7"),
            (1.5e300, "1.5e+300"),
            (7, "7"),
            (float("inf"), "Infinity"),
            (float("-inf"), "-Infinity"),
            (float("nan"), "NaN"),
        ],
    )
    def test_rendering(self, value, expected):
        assert format_number(value) == expected


class TestHandlers:
    @pytest.mark.asyncio
    async def test_add_handler(self):
        assert await add_handler({"a": 2, "b": 3}) == "5"
        assert await add_handler({"a": -1, "b": 1}) == "0"
        assert await add_handler({"a": 0.5, "b": 0.25}) == "0.75"

    @pytest.mark.asyncio
    async def test_calculate_handler_divides(self):
        assert await calculate_handler({"operation": "divide", "a": 10, "b": 2}) == "5"
        assert await calculate_handler({"operation": "divide", "a": 1, "b": 4}) == "0.25"

    @pytest.mark.asyncio
    async def test_calculate_handler_divide_by_zero(self):
        text = await calculate_handler({"operation": "divide", "a": 4, "b": 0})
        assert text == DIVIDE_BY_ZERO_MESSAGE

    @pytest.mark.asyncio
    async def test_unknown_operation_rejected(self):
        with pytest.raises(ValidationError):
            await calculate_handler({"operation": "modulo", "a": 4, "b": 2})

    @pytest.mark.asyncio
    async def test_missing_operand_rejected(self):
        with pytest.raises(ValidationError):
            await add_handler({"a": 1})

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "arguments",
        [
            {"a": True, "b": 2},
            {"a": "2", "b": 2},
            {"a": 1, "b": None},
        ],
    )
    async def test_non_numbers_rejected(self, arguments):
        with pytest.raises(ValidationError):
            await add_handler(arguments)

    @pytest.mark.asyncio
    async def test_calculate_rejects_numeric_strings(self):
        with pytest.raises(ValidationError):
            await calculate_handler({"operation": "add", "a": "1", "b": "2"})
