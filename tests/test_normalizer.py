import pytest

from abjad.errors import ErrorKind
from abjad.normalizer import normalize, validate_and_report


def test_normalize_collapses_whitespace():
    cleaned, report = normalize("  علي   احمد  ")
    assert cleaned == "علي احمد"
    assert report.success is True
    assert report.warnings == []
    assert report.errors == []
    assert report.char_count == len("علي احمد")
    assert report.length == len("  علي   احمد  ")


@pytest.mark.parametrize("raw", ["", "   ", "\t\n", None])
def test_normalize_empty_input(raw):
    cleaned, report = normalize(raw)
    assert cleaned == ""
    assert report.success is False
    assert report.error_kind is ErrorKind.EMPTY_INPUT
    assert report.errors == ["Empty input"]


def test_normalize_rejects_non_string():
    cleaned, report = normalize(123)
    assert cleaned == ""
    assert report.success is False
    assert report.error_kind is ErrorKind.INVALID_VALUE
    assert report.errors == ["Input must be string, got int"]


def test_normalize_latin_only_fails_with_no_valid_characters():
    cleaned, report = normalize("xyz")
    assert cleaned == ""
    assert report.success is False
    assert report.error_kind is ErrorKind.NO_VALID_CHARACTERS
    assert report.errors == [
        "Non-Arabic characters found: 'x', 'y', 'z'",
        "No valid Arabic/Urdu characters found",
    ]


def test_normalize_invalid_preview_is_capped():
    _, report = normalize("abcde")
    assert report.errors[0] == "Non-Arabic characters found: 'a', 'b', 'c' and 2 more"


def test_normalize_mixed_input_drops_invalid_characters():
    cleaned, report = normalize("علي 42x")
    assert report.success is True
    assert cleaned == "علي"
    assert report.error_kind is ErrorKind.INVALID_CHARACTERS
    assert report.errors == ["Non-Arabic characters found: '4', '2', 'x'"]


def test_normalize_strips_diacritics():
    cleaned, report = normalize("َا")
    assert cleaned == "ا"
    assert report.has_diacritics is True
    assert "Diacritical marks removed" in report.warnings


def test_normalize_strips_every_listed_mark():
    marks = "".join(chr(code) for code in range(0x064B, 0x0659)) + "\u0670"
    cleaned, report = normalize("م" + marks + "ل")
    assert cleaned == "مل"
    assert report.has_diacritics is True


@pytest.mark.parametrize(
    "variant, canonical",
    [
        ("ى", "ا"),  # alef maksura
        ("ٱ", "ا"),  # alef wasla
        ("ڀ", "ب"),
        ("ھ", "ه"),  # do chashmi he
        ("ہ", "ه"),  # gol he
        ("ۂ", "ه"),
        ("ٸ", "ي"),
        ("ے", "ي"),  # bari ye
        ("ۓ", "ي"),
    ],
)
def test_normalize_folds_variants(variant, canonical):
    cleaned, report = normalize("م" + variant)
    assert cleaned == "م" + canonical
    assert report.warnings == ["Character variants normalized"]
    assert report.has_diacritics is False


def test_normalize_accepts_urdu_letters_and_supplement_block():
    # tteh, peh, gaf, noon ghunna and a letter from the Arabic Supplement block
    cleaned, report = normalize("ٹپگںݐ")
    assert report.success is True
    assert cleaned == "ٹپگںݐ"


def test_normalize_can_strip_interword_spaces():
    cleaned, report = normalize("علي احمد", strip_interword_spaces=True)
    assert cleaned == "علياحمد"
    assert report.success is True


@pytest.mark.parametrize(
    "raw",
    [
        "  محمد   علی  ",
        "َاللّه",
        "ہے abc",
        "عبد الله",
        "xyz",
        "",
        "اِ ل",
    ],
)
def test_normalize_is_idempotent(raw):
    first, _ = normalize(raw)
    second, _ = normalize(first)
    assert second == first


def test_normalize_is_deterministic():
    assert normalize("َا x") == normalize("َا x")


def test_validate_and_report_messages():
    cleaned, message = validate_and_report("َال")
    assert cleaned == "ال"
    assert message.startswith("Valid input: 'ال' (2 characters)")
    assert "Diacritical marks removed" in message

    cleaned, message = validate_and_report("xyz")
    assert cleaned == ""
    assert message.startswith("Invalid input: Non-Arabic characters found")
