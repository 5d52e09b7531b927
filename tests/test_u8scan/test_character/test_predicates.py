"""Tests for character predicates."""

import pytest

from u8scan.character import predicates
from u8scan.character.encoding import CharInfo, decode
from u8scan.character.predicates import (
    EMOJI_RANGES,
    PREDICATES,
    all_of,
    any_of,
    has_codepoint,
    in_range,
    is_alpha_ascii,
    is_alphanum_ascii,
    is_ascii,
    is_digit_ascii,
    is_emoji,
    is_lowercase_ascii,
    is_uppercase_ascii,
    is_utf8,
    is_valid,
    is_whitespace_ascii,
    negate,
)


def char(codepoint):
    return CharInfo(scalar_value=codepoint, is_ascii=codepoint < 0x80)


class TestEncodingClassPredicates:
    """Test predicates on descriptor flags."""

    def test_is_ascii_and_is_utf8(self):
        assert is_ascii(decode(b"a", 0))
        assert not is_utf8(decode(b"a", 0))
        assert is_utf8(decode("é".encode("utf-8"), 0))

    def test_invalid_byte_is_utf8_class(self):
        info = decode(b"\xff", 0)
        assert is_utf8(info)
        assert not is_valid(info)


class TestAsciiClassPredicates:
    """Test ASCII character classes."""

    def test_digits(self):
        assert all(is_digit_ascii(char(cp)) for cp in range(ord("0"), ord("9") + 1))
        assert not is_digit_ascii(char(ord("a")))
        # Fullwidth digit one
        assert not is_digit_ascii(char(0xFF11))

    def test_letters(self):
        assert is_lowercase_ascii(char(ord("q")))
        assert not is_lowercase_ascii(char(ord("Q")))
        assert is_uppercase_ascii(char(ord("Q")))
        assert is_alpha_ascii(char(ord("z")))
        assert is_alpha_ascii(char(ord("A")))
        assert not is_alpha_ascii(char(0xE9))

    def test_alphanum(self):
        assert is_alphanum_ascii(char(ord("5")))
        assert is_alphanum_ascii(char(ord("k")))
        assert not is_alphanum_ascii(char(ord("_")))

    @pytest.mark.parametrize("codepoint", [0x20, 0x09, 0x0A, 0x0D])
    def test_whitespace(self, codepoint):
        assert is_whitespace_ascii(char(codepoint))

    @pytest.mark.parametrize("codepoint", [0x0B, 0x0C, 0xA0, 0x3000])
    def test_not_whitespace(self, codepoint):
        assert not is_whitespace_ascii(char(codepoint))


class TestEmoji:
    """Test emoji table lookups."""

    @pytest.mark.parametrize("codepoint", [
        0x1F30D,  # Globe
        0x1F600,  # Grinning face
        0x1F680,  # Rocket
        0x2764,   # Heavy black heart
        0x2600,   # Sun
        0x26FF,   # End of Miscellaneous Symbols
        0x2B50,   # Star
        0x1F1FA,  # Regional indicator
        0x1FAFF,
    ])
    def test_emoji(self, codepoint):
        assert is_emoji(char(codepoint))

    @pytest.mark.parametrize("codepoint", [
        ord("A"),
        0xA9,     # Copyright sign
        0xAE,     # Registered sign
        0x2122,   # Trade mark sign
        0x219A,   # Just past the basic arrows
        0x4E16,
        0x1F650,
        0x1FB00,
    ])
    def test_not_emoji(self, codepoint):
        assert not is_emoji(char(codepoint))

    def test_table_is_sorted_and_disjoint(self):
        for (low, high), (next_low, _) in zip(EMOJI_RANGES, EMOJI_RANGES[1:]):
            assert low <= high < next_low

    def test_decoded_emoji(self):
        assert is_emoji(decode("\U0001F30D".encode("utf-8"), 0))


class TestPredicateFactories:
    """Test parameterized predicate builders."""

    def test_has_codepoint(self):
        is_a = has_codepoint(ord("a"))
        assert is_a(char(ord("a")))
        assert not is_a(char(ord("b")))

    def test_in_range_inclusive(self):
        hiragana = in_range(0x3040, 0x309F)
        assert hiragana(char(0x3040))
        assert hiragana(char(0x309F))
        assert not hiragana(char(0x30A0))


class TestCombinators:
    """Test predicate composition."""

    def test_negate(self):
        assert negate(is_digit_ascii)(char(ord("x")))
        assert not negate(is_digit_ascii)(char(ord("1")))

    def test_any_of(self):
        pred = any_of(is_digit_ascii, is_whitespace_ascii)
        assert pred(char(ord("3")))
        assert pred(char(ord(" ")))
        assert not pred(char(ord("x")))
        assert not any_of()(char(ord("x")))

    def test_all_of(self):
        pred = all_of(is_alpha_ascii, is_uppercase_ascii)
        assert pred(char(ord("X")))
        assert not pred(char(ord("x")))
        assert all_of()(char(ord("x")))


class TestPredicateRegistry:
    """Test the named predicate table."""

    def test_registry_names(self):
        assert set(PREDICATES) == {
            "ascii", "utf8", "valid", "invalid", "digit", "alpha",
            "alphanum", "lower", "upper", "whitespace", "emoji",
        }

    def test_invalid_entry(self):
        assert PREDICATES["invalid"](decode(b"\x80", 0))
        assert not PREDICATES["invalid"](decode(b"a", 0))

    def test_module_access(self):
        assert predicates.is_digit_ascii is is_digit_ascii

    @pytest.mark.parametrize("name", sorted(PREDICATES))
    def test_predicates_are_idempotent(self, name):
        predicate = PREDICATES[name]
        data = "Aa1 \t世\U0001F30D❤".encode("utf-8") + b"\xff\xe4"
        offset = 0
        while offset < len(data):
            info = decode(data, offset)
            assert predicate(info) == predicate(info)
            offset = info.end_offset
