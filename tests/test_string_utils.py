import pytest

from utilkit.string_utils import (
    INITIAL_CAPACITY,
    StringArray,
    get_token_index,
    split_at,
    strip,
)


def test_zero_capacity_uses_default():
    arr = StringArray(0)
    assert arr.capacity == INITIAL_CAPACITY


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        StringArray(-1)


def test_append_and_access():
    arr = StringArray(10)
    for word in ("hello", "world", "people"):
        arr.append(word)
    assert len(arr) == 3
    assert list(arr) == ["hello", "world", "people"]
    assert arr[1] == "world"
    assert arr[-1] == "people"


def test_index_out_of_range():
    arr = StringArray(4)
    arr.append("a")
    with pytest.raises(IndexError):
        arr[1]
    assert arr[0] == "a"
    assert len(arr) == 1


def test_append_non_string_rejected():
    arr = StringArray(4)
    with pytest.raises(TypeError):
        arr.append(3)
    assert len(arr) == 0


def test_capacity_doubles_when_full():
    arr = StringArray(2)
    arr.append("a")
    arr.append("b")
    assert arr.capacity == 2
    arr.append("c")
    assert arr.capacity == 2 * 2
    assert list(arr) == ["a", "b", "c"]


def test_pop_returns_last_and_shrinks():
    arr = StringArray(24)
    for word in ("a", "b", "c"):
        arr.append(word)
    assert arr.pop() == "c"
    assert list(arr) == ["a", "b"]
    assert arr.capacity == 24 // 2


def test_pop_keeps_capacity_when_not_sparse():
    arr = StringArray(10)
    for word in ("hello", "world", "people"):
        arr.append(word)
    arr.pop()
    assert arr.capacity == 10


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        StringArray().pop()


def test_format_report():
    arr = StringArray(10)
    arr.append("hello")
    arr.append("world")
    text = arr.format()
    assert "Array size    : 2\n" in text
    assert "Array capacity: 10\n" in text
    assert "[hello, world]" in text
    assert text.endswith("\n\n")


def test_format_empty():
    assert "[]" in StringArray(3).format()


def test_strip_removes_all():
    assert strip("a,b,,c", ",") == "abc"
    assert strip("abc", ",") == "abc"


def test_split_at_first_delim():
    head, tail = split_at("key=value=x", "=")
    assert head == "key"
    assert tail == "value=x"


def test_split_at_missing_delim():
    assert split_at("nodelim", "=") == ("nodelim", "")


def test_get_token_index():
    text = "abc:def"
    index = get_token_index(text, ":")
    assert text[index] == ":"
    assert text[:index] == "abc"
    assert get_token_index(text, "#") == -1


def test_bad_delimiter():
    with pytest.raises(ValueError):
        strip("abc", "ab")
    with pytest.raises(ValueError):
        get_token_index("abc", "")