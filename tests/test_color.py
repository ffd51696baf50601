"""Tests for Color construction, parsing and string form."""

from __future__ import annotations

import dataclasses
import math
from fractions import Fraction

import numpy as np
import pytest

from rgba_blend import Color, ColorError, InvalidColorComponent, MalformedHexString


# ---------------------------------------------------------------------------
# from_components
# ---------------------------------------------------------------------------


class TestFromComponents:
    def test_valid_components(self):
        color = Color.from_components(255, 128, 0, 0.5)
        assert (color.r, color.g, color.b, color.a) == (255, 128, 0, 0.5)

    def test_bounds_are_inclusive(self):
        assert Color.from_components(0, 0, 0, 0.0).a == 0.0
        assert Color.from_components(255, 255, 255, 1.0).r == 255

    def test_integer_alpha_becomes_float(self):
        color = Color.from_components(1, 2, 3, 1)
        assert color.a == 1.0
        assert isinstance(color.a, float)

    def test_numpy_scalars_are_normalised(self):
        color = Color.from_components(np.uint8(200), np.int64(10), 0, np.float32(0.5))
        assert color.r == 200
        assert type(color.r) is int
        assert type(color.a) is float
        assert color.a == 0.5

    @pytest.mark.parametrize(
        "r, g, b, a",
        [
            (256, 0, 0, 1.0),
            (-1, 0, 0, 1.0),
            (0, 256, 0, 1.0),
            (0, -1, 0, 1.0),
            (0, 0, 256, 1.0),
            (0, 0, -1, 1.0),
            (0, 0, 0, 1.01),
            (0, 0, 0, -0.1),
            (0, 0, 0, math.nan),
            (0, 0, 0, math.inf),
            (0, 0, 0, 10**400),
            (0, 0, 0, -(10**400)),
            (0, 0, 0, Fraction(10**400, 1)),
            (10**400, 0, 0, 1.0),
            (0, 0, 10**5000, 1.0),
        ],
    )
    def test_out_of_range_rejected(self, r, g, b, a):
        with pytest.raises(InvalidColorComponent):
            Color.from_components(r, g, b, a)

    @pytest.mark.parametrize(
        "r, a",
        [
            (1.5, 1.0),
            (True, 1.0),
            ("255", 1.0),
            (0, "0.5"),
            (0, None),
            (0, False),
        ],
    )
    def test_wrong_kinds_rejected(self, r, a):
        with pytest.raises(InvalidColorComponent):
            Color.from_components(r, 0, 0, a)

    def test_plain_constructor_validates_too(self):
        with pytest.raises(InvalidColorComponent):
            Color(300, 0, 0)

    def test_default_alpha_is_opaque(self):
        assert Color(1, 2, 3).a == 1.0

    def test_fraction_alpha(self):
        color = Color(1, 2, 3, Fraction(1, 4))
        assert color.a == 0.25
        assert type(color.a) is float


# ---------------------------------------------------------------------------
# Value semantics
# ---------------------------------------------------------------------------


class TestValueSemantics:
    def test_frozen(self):
        color = Color(1, 2, 3, 0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            color.r = 10

    def test_equality_and_hash(self):
        assert Color(1, 2, 3, 0.5) == Color.from_hex("010203", 0.5)
        assert len({Color(1, 2, 3, 0.5), Color(1, 2, 3, 0.5)}) == 1
        assert Color(1, 2, 3, 0.5) != Color(1, 2, 3, 0.6)

    @pytest.mark.parametrize(
        "color, expected",
        [
            (Color(255, 0, 0, 0.2), "(255,0,0,0.2)"),
            (Color(255, 0, 0, 0.9), "(255,0,0,0.9)"),
            (Color(0, 128, 255, 1.0), "(0,128,255,1.0)"),
            (Color(0, 0, 0, 0), "(0,0,0,0.0)"),
        ],
    )
    def test_str(self, color, expected):
        assert str(color) == expected

    def test_to_numpy(self):
        rgb = Color(10, 20, 30, 1.0).to_numpy()
        assert rgb.dtype == np.float64
        assert rgb.tolist() == [10.0, 20.0, 30.0]


# ---------------------------------------------------------------------------
# from_hex
# ---------------------------------------------------------------------------


class TestFromHex:
    def test_upper_case(self):
        assert Color.from_hex("FF8000") == Color(255, 128, 0, 1.0)

    def test_lower_case(self):
        assert Color.from_hex("ff8000") == Color(255, 128, 0, 1.0)

    def test_alpha(self):
        assert Color.from_hex("0A0B0C", 0.25) == Color(10, 11, 12, 0.25)

    def test_trailing_characters_ignored(self):
        assert Color.from_hex("FF8000CC") == Color(255, 128, 0, 1.0)
        assert Color.from_hex("123456 and more") == Color(0x12, 0x34, 0x56, 1.0)

    @pytest.mark.parametrize(
        "value",
        [
            "ZZ0000",
            "FF00",
            "",
            "FF000",
            " FF000",
            "+F0000",
            "-F0000",
            "0xFF00",
            "F_F000",
            "#FF0000",
            "FF00G0",
        ],
    )
    def test_malformed(self, value):
        with pytest.raises(MalformedHexString):
            Color.from_hex(value)

    @pytest.mark.parametrize("value", [0xFF0000, None, b"FF0000"])
    def test_non_string_is_malformed(self, value):
        with pytest.raises(MalformedHexString):
            Color.from_hex(value)

    def test_bad_alpha(self):
        with pytest.raises(InvalidColorComponent):
            Color.from_hex("FF0000", 1.5)

    def test_oversized_alpha(self):
        with pytest.raises(InvalidColorComponent):
            Color.from_hex("000000", Fraction(10**400, 1))

    @pytest.mark.parametrize(
        "value", ["000000", "FFFFFF", "ff8000", "1a2B3c", "7F7F7F", "00fF01"]
    )
    @pytest.mark.parametrize("alpha", [0.0, 0.5, 1.0])
    def test_round_trip(self, value, alpha):
        color = Color.from_hex(value, alpha)
        assert color.to_hex() == value.upper()
        assert color.a == alpha


# ---------------------------------------------------------------------------
# from_packed_int
# ---------------------------------------------------------------------------


class TestFromPackedInt:
    @pytest.mark.parametrize(
        "packed, expected",
        [
            (0xFF8000, (255, 128, 0)),
            (0x000000, (0, 0, 0)),
            (0xFFFFFF, (255, 255, 255)),
            (0x0000FF, (0, 0, 255)),
            (0x010203, (1, 2, 3)),
        ],
    )
    def test_unpacks_channels(self, packed, expected):
        color = Color.from_packed_int(packed)
        assert (color.r, color.g, color.b) == expected
        assert color.a == 1.0
        assert color.to_packed_int() == packed

    def test_alpha(self):
        assert Color.from_packed_int(0x102030, 0.75).a == 0.75

    @pytest.mark.parametrize("packed", [-1, 0x1000000, 2**40, 1.5, True, "FF0000"])
    def test_out_of_range_rejected(self, packed):
        with pytest.raises(InvalidColorComponent):
            Color.from_packed_int(packed)

    def test_bad_alpha(self):
        with pytest.raises(InvalidColorComponent):
            Color.from_packed_int(0xFF0000, -0.5)


def test_errors_are_value_errors():
    assert issubclass(InvalidColorComponent, ColorError)
    assert issubclass(MalformedHexString, ColorError)
    assert issubclass(ColorError, ValueError)
