import pytest

from schemeseeker.utils import (
    extract_text_snippet,
    format_inr,
    percentage,
    round_half_up,
    validate_language_code,
    validate_scheme_filters,
    validate_scheme_ids,
)


@pytest.mark.parametrize("numerator, denominator, expected", [
    (1, 8, 0),
    (5, 2, 3),
    (217, 4, 54),
    (7, 0, 0),
])
def test_round_half_up(numerator, denominator, expected):
    assert round_half_up(numerator, denominator) == expected


def test_percentage():
    assert percentage(1, 8) == 13
    assert percentage(2, 3) == 67
    assert percentage(1, 3) == 33
    assert percentage(0, 0) == 0


def test_format_inr():
    assert format_inr(200000) == "₹200,000"
    assert format_inr(200000.0) == "₹200,000"
    assert format_inr(1500.5) == "₹1,500.50"


def test_extract_text_snippet():
    assert extract_text_snippet("") == ""
    assert extract_text_snippet("short") == "short"
    snippet = extract_text_snippet("word " * 100, max_length=50)
    assert snippet.endswith("...")
    assert len(snippet) <= 53


def test_validate_language_code():
    assert validate_language_code(None)
    assert validate_language_code("HI")
    assert not validate_language_code("fr")
    assert validate_language_code("fr", supported=["fr"])


def test_validate_scheme_filters():
    assert validate_scheme_filters("Easy", 4, "te") == []
    assert len(validate_scheme_filters("Trivial", 6, "fr")) == 3


def test_validate_scheme_ids():
    assert validate_scheme_ids(None) == []
    assert validate_scheme_ids(["PM-KISAN"]) == []
    assert validate_scheme_ids([]) == ["scheme_ids must not be empty when provided"]
    assert validate_scheme_ids(["ok", " "]) == ["scheme_ids must not contain blank values"]
    assert validate_scheme_ids(["A"] * 3, max_ids=2) == ["Maximum 2 schemes can be checked at once"]
