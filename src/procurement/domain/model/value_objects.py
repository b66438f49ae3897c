"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from procurement.domain.exceptions import InvalidChecksumError, ValidationError


def luhn_valid(value: str) -> bool:
    """Return True if *value* is a non-empty digit string with a valid Luhn check digit."""
    if not value or not value.isdigit():
        return False
    total = 0
    # Walk from the check digit leftwards, doubling every second digit
    for position, char in enumerate(reversed(value)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


@dataclass(frozen=True)
class UplId:
    """Identifier of a unit-load.

    Self-validating: the last digit is a Luhn check digit, which catches
    single-digit typos and most transpositions made while scanning or
    typing the label.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise ValidationError(
                f"UPL id must be a string, got {type(self.value).__name__}"
            )
        if not luhn_valid(self.value):
            raise InvalidChecksumError(f"UPL id '{self.value}' is invalid")

    def __str__(self) -> str:
        return self.value


def unsigned(value: int, what: str) -> int:
    """Validate a non-negative integer amount (quantity, piece or minor-unit price)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(
            f"{what} must be an integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{what} cannot be negative, got {value}")
    return value
