from datetime import datetime

from securepass.history import HistoryEntry
from securepass.utils import BACK, format_entry, get_validated_input, get_validated_int


def scripted_input(*answers):
    answers = iter(answers)
    return lambda prompt: next(answers)


def test_validated_input_retries_until_valid(capsys):
    answer = get_validated_input("Pick:", ['1', '2'], input_func=scripted_input("9", " 2 "))

    assert answer == '2'
    assert "Valid options are: 1, 2" in capsys.readouterr().out


def test_validated_input_back_and_default():
    assert get_validated_input("Pick:", ['y', 'n'], input_func=scripted_input("B")) == BACK
    assert get_validated_input("Pick:", ['y', 'n'], default='n', input_func=scripted_input("")) == 'n'


def test_back_disabled_treats_b_as_answer(capsys):
    answer = get_validated_input(
        "Pick:", ['1'], allow_back=False, input_func=scripted_input("b", "1")
    )

    assert answer == '1'
    assert "Invalid input" in capsys.readouterr().out


def test_validated_int_bounds(capsys):
    value = get_validated_int("Length:", 6, 64, input_func=scripted_input("abc", "5", "65", "20"))

    out = capsys.readouterr().out
    assert value == 20
    assert "valid number" in out
    assert out.count("between 6 and 64") == 2


def test_validated_int_default():
    assert get_validated_int("Length:", 6, 64, default=16, input_func=scripted_input("")) == 16


def test_format_entry_shows_password_and_local_time():
    entry = HistoryEntry(3, "Zx9!", 1700000000000)
    local = datetime.fromtimestamp(1700000000).strftime("%Y-%m-%d %H:%M:%S")

    assert format_entry(1, entry) == f"1. Zx9!  ({local})"
