import io

import pytest

from utilkit.cli import demo_string_array, demo_vector, main


def test_demo_vector_output():
    buf = io.StringIO()
    demo_vector(buf)
    text = buf.getvalue()
    assert "Vector Size    : 3\n" in text
    assert "[10, 5, 1]\n" in text
    assert "Vector Size    : 2\n" in text
    assert text.endswith("[10, 5]\n")
    assert text.count("Vector Capacity: 10\n") == 2


def test_demo_string_array_output():
    buf = io.StringIO()
    demo_string_array(buf)
    text = buf.getvalue()
    assert "[hello, world, people]" in text
    assert "[hello, world]" in text
    assert text.count("Array capacity: 10\n") == 2


def test_main_prints_vector_demo(capsys):
    assert main([]) == 0
    captured = capsys.readouterr().out
    buf = io.StringIO()
    demo_vector(buf)
    assert captured == buf.getvalue()


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2