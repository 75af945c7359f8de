"""Validation utilities for Kart Cup.

This module provides reusable validation functions with consistent error handling.
"""

from typing import Any, Optional

from kartcup.constants import MAX_POSITION, MIN_POSITION
from kartcup.exceptions import InvalidPlayerDataException, InvalidPositionException


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Generic Validation ==========


def validate_non_empty(
    value: Optional[str], field_name: str = "Field"
) -> ValidationResult:
    """Validate that a field is not empty.

    Args:
        value: Value to validate
        field_name: Name of the field for error messages

    Returns:
        ValidationResult with validation status
    """
    if not value or not str(value).strip():
        return ValidationResult(
            is_valid=False,
            error_message=f"{field_name} cannot be empty",
        )
    return ValidationResult(is_valid=True, sanitized_value=str(value).strip())


# ========== Player Validation ==========


def validate_first_name(first_name: Optional[str]) -> ValidationResult:
    """Validate a racer's first name."""
    return validate_non_empty(first_name, "First name")


def validate_gamer_tag(gamer_tag: Optional[str]) -> ValidationResult:
    """Validate a racer's gamer tag."""
    return validate_non_empty(gamer_tag, "Gamer tag")


def validate_player_strict(first_name: str, gamer_tag: str) -> tuple:
    """Validate registration data and return the sanitized pair.

    Raises:
        InvalidPlayerDataException: If either field is empty
    """
    for result in (validate_first_name(first_name), validate_gamer_tag(gamer_tag)):
        if not result.is_valid:
            raise InvalidPlayerDataException(result.error_message)
    return first_name.strip(), gamer_tag.strip()


# ========== Position Validation ==========


def validate_position(position: Any) -> ValidationResult:
    """Validate a finish position entered for a race.

    Positions are whole numbers between MIN_POSITION and MAX_POSITION.
    Numeric strings are accepted and converted.

    Args:
        position: Position to validate

    Returns:
        ValidationResult whose sanitized value is the position as int
    """
    if isinstance(position, bool):
        return ValidationResult(
            is_valid=False,
            error_message=f"Position must be a number: {position}",
        )

    try:
        position_int = int(position)
    except (ValueError, TypeError):
        return ValidationResult(
            is_valid=False,
            error_message=f"Position must be a number: {position}",
        )

    if isinstance(position, float) and position != position_int:
        return ValidationResult(
            is_valid=False,
            error_message=f"Position must be a whole number: {position}",
        )

    if position_int < MIN_POSITION or position_int > MAX_POSITION:
        return ValidationResult(
            is_valid=False,
            error_message=(
                f"Position must be between {MIN_POSITION} and {MAX_POSITION}: "
                f"{position_int}"
            ),
        )

    return ValidationResult(is_valid=True, sanitized_value=position_int)


def validate_position_strict(position: Any) -> int:
    """Validate a position and return it as int or raise exception.

    Raises:
        InvalidPositionException: If position is invalid
    """
    result = validate_position(position)
    if not result.is_valid:
        raise InvalidPositionException(result.error_message)
    return result.sanitized_value
