import pytest

from rustlings.lessons.from_into import Person, person_from


def test_default():
    person = Person()
    assert person.name == "John"
    assert person.age == 30


def test_good_convert():
    person = person_from("Mark,20")
    assert person.name == "Mark"
    assert person.age == 20


def test_other_good_convert():
    assert person_from("Gerald,70") == Person("Gerald", 70)


@pytest.mark.parametrize(
    "text",
    [
        "",
        "Mark,twenty",
        "Mark",
        "Mark,",
        ",1",
        ",",
        ",one",
        "Mike,32,",
        "Mike,32,man",
        "Mark, 20",
        "Mark,2_0",
        "Mark,-1",
    ],
)
def test_bad_input_gives_default(text):
    person = person_from(text)
    assert person.name == "John"
    assert person.age == 30