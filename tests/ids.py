"""UPL ids with valid Luhn check digits, shared by the tests."""

UPL_A = "79927398713"
UPL_B = "4111111111111111"
UPL_C = "4012888888881881"
UPL_D = "5555555555554444"
UPL_E = "6011111111111117"

BAD_UPL = "79927398710"
