import pytest

from landing.form import format_phone, phone_digits
from landing.form.formatting import PHONE_MAX_LENGTH


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("", "("),
        ("1", "(1"),
        ("11", "(11"),
        ("119", "(11) 9"),
        ("1198765", "(11) 98765"),
        ("11987654", "(11) 98765-4"),
        ("11987654321", "(11) 98765-4321"),
    ],
)
def test_format_phone_progressive_mask(raw, expected):
    assert format_phone(raw) == expected


def test_format_phone_ignores_digits_beyond_eleven():
    assert format_phone("119876543219999") == "(11) 98765-4321"
    assert len(format_phone("119876543219999")) == PHONE_MAX_LENGTH


def test_format_phone_strips_garbage():
    assert format_phone("+55 (11) 9.8765-4321") == "(55) 11987-6543"
    assert format_phone("abc") == "("
    assert format_phone(None) == "("


@pytest.mark.parametrize(
    "raw",
    ["", "1", "119", "1198765", "11987654", "1134567890", "11987654321", "x9y8z7"],
)
def test_format_phone_is_idempotent(raw):
    once = format_phone(raw)
    assert format_phone(once) == once


def test_phone_digits():
    assert phone_digits("(11) 98765-4321") == "11987654321"
    assert phone_digits(None) == ""


def test_format_phone_drops_non_ascii_digits():
    assert format_phone("１１９８７６５４３２１") == "("
    assert format_phone("11 ٩٨٧ 987654321") == "(11) 98765-4321"
    assert phone_digits("１１９８７６５４３２１") == ""
