import pytest

from tadkit.validation import (
    has_decimal_mark,
    is_alphanumeric,
    is_valid_name,
    parse_int,
    prompt_until,
)


@pytest.mark.parametrize("text", ["1,5", "2.0", "1 2", " "])
def test_has_decimal_mark_detects_marks(text):
    assert has_decimal_mark(text) is True


@pytest.mark.parametrize("text", ["", "123", "abc", "-7"])
def test_has_decimal_mark_without_marks(text):
    assert has_decimal_mark(text) is False


def test_parse_int_in_range():
    assert parse_int("15", 1, 31) == 15


def test_parse_int_strips_newline():
    assert parse_int("2024\n", 1900, 2024) == 2024


def test_parse_int_ignores_trailing_text():
    assert parse_int("12abc") == 12


def test_parse_int_negative_without_bounds():
    assert parse_int("-40") == -40


@pytest.mark.parametrize("text", ["3.5", "3,5", "1 2", "abc", ""])
def test_parse_int_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_int(text)


@pytest.mark.parametrize("text, low, high", [("0", 1, 31), ("32", 1, 31), ("13", 1, 12)])
def test_parse_int_rejects_out_of_range(text, low, high):
    with pytest.raises(ValueError):
        parse_int(text, low, high)


@pytest.mark.parametrize("text", ["Calle123", "abc\n", ""])
def test_is_alphanumeric_accepts(text):
    assert is_alphanumeric(text) is True


@pytest.mark.parametrize("text", ["Calle 123", "a-b", "x_y\n"])
def test_is_alphanumeric_rejects(text):
    assert is_alphanumeric(text) is False


@pytest.mark.parametrize("text", ["Ana", "juan perez", "B2\n"])
def test_is_valid_name_accepts(text):
    assert is_valid_name(text) is True


@pytest.mark.parametrize("text", ["", "\n", " Ana", "1abc"])
def test_is_valid_name_rejects(text):
    assert is_valid_name(text) is False


def _feeder(lines):
    items = iter(lines)
    return lambda: next(items, "")


def test_prompt_until_retries_until_valid():
    written = []
    result = prompt_until(
        "Ingrese opcion: ",
        "Entrada no valida: ",
        lambda text: parse_int(text, 0, 2),
        read=_feeder(["x\n", "5\n", "2\n"]),
        write=written.append,
    )
    assert result == 2
    assert written == ["Ingrese opcion: ", "Entrada no valida: ", "Entrada no valida: "]


def test_prompt_until_passes_line_without_newline():
    seen = []

    def validate(text):
        seen.append(text)
        return text

    result = prompt_until("p", "r", validate, read=_feeder(["hola\n"]), write=lambda s: None)
    assert result == "hola"
    assert seen == ["hola"]


def test_prompt_until_raises_at_end_of_input():
    with pytest.raises(EOFError):
        prompt_until(
            "p",
            "r",
            lambda text: parse_int(text, 0, 2),
            read=_feeder(["9\n"]),
            write=lambda s: None,
        )