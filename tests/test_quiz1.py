from rustlings.lessons.quiz1 import calculate_price_of_apples


def test_verify():
    assert calculate_price_of_apples(35) == 70
    assert calculate_price_of_apples(40) == 80
    assert calculate_price_of_apples(65) == 65


def test_bulk_starts_above_forty():
    assert calculate_price_of_apples(41) == 41