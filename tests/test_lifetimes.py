from rustlings.lessons.lifetimes import Book, longest


def test_longest_picks_first_when_longer():
    assert longest("abcd", "xyz") == "abcd"


def test_longest_picks_second_when_longer():
    assert longest("xyz", "long string is long") == "long string is long"


def test_longest_prefers_second_on_tie():
    assert longest("abc", "xyz") == "xyz"


def test_longest_counts_bytes():
    assert longest("éé", "abc") == "éé"


def test_longest_returns_one_of_its_arguments():
    for x, y in [("", ""), ("a", ""), ("", "b"), ("hello", "world!")]:
        result = longest(x, y)
        assert result in (x, y)
        assert len(result.encode()) >= min(len(x.encode()), len(y.encode()))


def test_book_display():
    book = Book(author="Jill Smith", title="Fish Flying")
    assert str(book) == "Fish Flying by Jill Smith"
    assert book.author == "Jill Smith"