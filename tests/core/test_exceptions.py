"""
Tests for exceptions
"""

import pytest

from quadtile.core.exceptions import (
    AddressNotFoundError,
    InvalidCoordinateError,
    PreconditionViolatedError,
    QuadTileError,
    ValidationError,
)


class TestExceptions:
    """Test exception hierarchy"""

    def test_base_exception(self):
        """Test QuadTileError"""
        with pytest.raises(QuadTileError):
            raise QuadTileError("Test error")

    def test_invalid_coordinate_error(self):
        """Test InvalidCoordinateError is a QuadTileError and a ValueError"""
        with pytest.raises(QuadTileError):
            raise InvalidCoordinateError("x out of range")

        with pytest.raises(ValueError):
            raise InvalidCoordinateError("x out of range")

    def test_address_not_found_error(self):
        """Test AddressNotFoundError is a QuadTileError and a KeyError"""
        with pytest.raises(QuadTileError):
            raise AddressNotFoundError("missing")

        with pytest.raises(KeyError):
            raise AddressNotFoundError("missing")

    def test_precondition_violated_error(self):
        """Test PreconditionViolatedError inherits from QuadTileError"""
        with pytest.raises(QuadTileError):
            raise PreconditionViolatedError("unsorted")

    def test_validation_error(self):
        """Test ValidationError inherits from QuadTileError"""
        with pytest.raises(QuadTileError):
            raise ValidationError("Validation failed")

        with pytest.raises(ValueError):
            raise ValidationError("Validation failed")

    def test_exception_messages(self):
        """Test exception messages are preserved"""
        msg = "Custom error message"

        try:
            raise ValidationError(msg)
        except ValidationError as e:
            assert str(e) == msg
