import pytest

from rustlings.lessons.errors import (
    CreationError,
    CreationErrorKind,
    ParsePosNonzeroError,
    PositiveNonzeroInteger,
    generate_nametag_text,
    parse_pos_nonzero,
    spend_tokens,
    total_cost,
)


def test_generates_nametag_text_for_a_nonempty_name():
    assert generate_nametag_text("Beyoncé") == "Hi! My name is Beyoncé"


def test_explains_why_generating_nametag_text_fails():
    with pytest.raises(ValueError) as info:
        generate_nametag_text("")
    assert str(info.value) == "`name` was empty; it must be nonempty."


def test_item_quantity_is_a_valid_number():
    assert total_cost("34") == 171


def test_item_quantity_is_an_invalid_number():
    with pytest.raises(ValueError) as info:
        total_cost("beep boop")
    assert str(info.value) == "invalid digit found in string"


def test_item_quantity_empty():
    with pytest.raises(ValueError) as info:
        total_cost("")
    assert str(info.value) == "cannot parse integer from empty string"


def test_item_quantity_too_large():
    with pytest.raises(ValueError) as info:
        total_cost("2147483648")
    assert str(info.value) == "number too large to fit in target type"


def test_cost_overflow():
    with pytest.raises(OverflowError):
        total_cost("2147483647")


def test_spend_tokens_affordable(capsys):
    assert spend_tokens(100, "8") == 59
    assert capsys.readouterr().out == "You now have 59 tokens.\n"


def test_spend_tokens_not_affordable(capsys):
    assert spend_tokens(10, "8") == 10
    assert capsys.readouterr().out == "You can't afford that many!\n"


def test_creation():
    assert PositiveNonzeroInteger(10).value == 10
    with pytest.raises(CreationError) as negative:
        PositiveNonzeroInteger(-10)
    assert negative.value.kind is CreationErrorKind.NEGATIVE
    with pytest.raises(CreationError) as zero:
        PositiveNonzeroInteger(0)
    assert zero.value.kind is CreationErrorKind.ZERO


def test_creation_error_messages():
    assert str(CreationError(CreationErrorKind.NEGATIVE)) == "number is negative"
    assert str(CreationError(CreationErrorKind.ZERO)) == "number is zero"


def test_parse_error():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("not a number")
    assert not isinstance(info.value.cause, CreationError)
    assert str(info.value.cause) == "invalid digit found in string"


def test_negative():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("-555")
    assert isinstance(info.value.cause, CreationError)
    assert info.value.cause.kind is CreationErrorKind.NEGATIVE


def test_zero():
    with pytest.raises(ParsePosNonzeroError) as info:
        parse_pos_nonzero("0")
    assert isinstance(info.value.cause, CreationError)
    assert info.value.cause.kind is CreationErrorKind.ZERO


def test_positive():
    assert parse_pos_nonzero("42") == PositiveNonzeroInteger(42)