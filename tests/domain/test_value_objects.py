"""Unit tests for Value Objects."""

import pytest

from procurement.domain.exceptions import InvalidChecksumError, ValidationError
from procurement.domain.model.value_objects import UplId, luhn_valid, unsigned
from tests.ids import BAD_UPL, UPL_A, UPL_B, UPL_C, UPL_D, UPL_E


class TestLuhn:

    @pytest.mark.parametrize("value", [UPL_A, UPL_B, UPL_C, UPL_D, UPL_E, "0", "18", "59"])
    def test_valid_numbers(self, value):
        assert luhn_valid(value)

    @pytest.mark.parametrize("value", [BAD_UPL, "4111111111111112", "19", "12"])
    def test_wrong_check_digit(self, value):
        assert not luhn_valid(value)

    @pytest.mark.parametrize("value", ["", "abc", "7992739871a", " 79927398713", "-18"])
    def test_non_digit_strings_rejected(self, value):
        assert not luhn_valid(value)

    def test_single_transposition_detected(self):
        # 79927398713 with the 3rd and 4th digit swapped
        assert not luhn_valid("79297398713")


class TestUplId:

    def test_valid_id(self):
        assert UplId(UPL_A).value == UPL_A
        assert str(UplId(UPL_A)) == UPL_A

    def test_invalid_checksum_rejected(self):
        with pytest.raises(InvalidChecksumError, match="invalid"):
            UplId(BAD_UPL)

    def test_invalid_checksum_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            UplId("")

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            UplId(79927398713)  # type: ignore[arg-type]

    def test_equality_by_value(self):
        assert UplId(UPL_A) == UplId(UPL_A)


class TestUnsigned:

    def test_zero_accepted(self):
        assert unsigned(0, "Amount") == 0

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="Amount cannot be negative"):
            unsigned(-1, "Amount")

    @pytest.mark.parametrize("value", [1.5, "3", True, None])
    def test_non_integer_rejected(self, value):
        with pytest.raises(ValidationError, match="must be an integer"):
            unsigned(value, "Amount")
