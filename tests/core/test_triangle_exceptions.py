"""Unit tests for core exceptions"""

import pytest
from trigon.core.enums import ValidationErrorType, TriangleVariant
from trigon.core.exceptions import (
    TriangleException,
    TriangleValidationError,
    InvalidSideError,
    DegenerateTriangleError,
    ShapeMismatchError,
    GeometryError,
)


class TestTriangleException:
    """Tests for TriangleException"""

    def test_base_exception_creation(self):
        """Test creating base exception"""
        exc = TriangleException("Test error")
        assert str(exc) == "Test error"
        assert isinstance(exc, Exception)

    def test_validation_error_is_value_error(self):
        """Test that input errors can be caught as ValueError"""
        exc = TriangleValidationError("bad input")
        assert isinstance(exc, TriangleException)
        assert isinstance(exc, ValueError)


class TestInvalidSideError:
    """Tests for InvalidSideError"""

    def test_attributes(self):
        exc = InvalidSideError("leg1", -2.5, 1e-10)
        assert exc.parameter_name == "leg1"
        assert exc.value == -2.5
        assert exc.tolerance == 1e-10
        assert exc.error_type == ValidationErrorType.INVALID_SIDE

    def test_message_includes_parameter_and_value(self):
        message = str(InvalidSideError("a", 0.0, 1e-10))
        assert "'a'" in message
        assert "0.0" in message
        assert "positive" in message

    def test_inheritance(self):
        exc = InvalidSideError("b", -1, 1e-10)
        assert isinstance(exc, TriangleValidationError)
        assert isinstance(exc, ValueError)


class TestDegenerateTriangleError:
    """Tests for DegenerateTriangleError"""

    def test_attributes(self):
        exc = DegenerateTriangleError("a + b > c", -7.0, (1, 2, 10))
        assert exc.relation == "a + b > c"
        assert exc.margin == -7.0
        assert exc.sides == (1, 2, 10)
        assert exc.error_type == ValidationErrorType.DEGENERATE_TRIANGLE

    def test_message_includes_relation_and_margin(self):
        message = str(DegenerateTriangleError("a + b > c", -7.0, (1, 2, 10)))
        assert "a + b > c" in message
        assert "-7" in message
        assert "(1, 2, 10)" in message

    def test_message_without_sides(self):
        message = str(DegenerateTriangleError("2 * a * b > 0", 0.0))
        assert "2 * a * b > 0" in message
        assert "for sides" not in message

    def test_default_reason_is_inequality(self):
        exc = DegenerateTriangleError("a + b > c", -7.0)
        assert exc.reason == "Triangle inequality violated"
        assert str(exc).startswith("Triangle inequality violated: a + b > c")

    def test_custom_reason_replaces_prefix(self):
        message = str(DegenerateTriangleError("2 * a * b > 0", 0.0, reason="Denominator collapsed"))
        assert message.startswith("Denominator collapsed: 2 * a * b > 0")
        assert "inequality" not in message


class TestShapeMismatchError:
    """Tests for ShapeMismatchError"""

    def test_attributes_and_message(self):
        exc = ShapeMismatchError(TriangleVariant.SCALENE, (5, 5, 8), "sides a and b are equal")
        assert exc.variant == TriangleVariant.SCALENE
        assert exc.sides == (5, 5, 8)
        assert exc.error_type == ValidationErrorType.SHAPE_MISMATCH
        assert "scalene" in str(exc)
        assert "sides a and b are equal" in str(exc)


class TestGeometryError:
    """Tests for GeometryError"""

    def test_geometry_error_is_not_input_error(self):
        exc = GeometryError("height to base", -16.0)
        assert isinstance(exc, TriangleException)
        assert isinstance(exc, ArithmeticError)
        assert not isinstance(exc, ValueError)

    def test_message_includes_quantity_and_details(self):
        exc = GeometryError("height to base", -16.0, "leg too short")
        assert exc.quantity == "height to base"
        assert exc.value == -16.0
        assert "height to base" in str(exc)
        assert "leg too short" in str(exc)
