#
# XBytes - Parse Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
from fractions import Fraction

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from xbytes.bytesize import ByteSize
from xbytes.errors import ParseError, ParseErrorKind, ValueOverflowError
from xbytes.flags import Format
from xbytes.parse import parse, parse_with_unit
from xbytes import sizes
from xbytes.sizes import (
    BIT, BYTE, EXBI_BYTE, GIBI_BIT, KIBI_BYTE, KILO_BIT, KILO_BYTE, MEBI_BYTE, MEGA_BYTE, YOBI_BYTE,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestParse:
    # @formatter:off
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            pytest.param("1 B",            ByteSize.from_bytes(1),        id="byte"),
            pytest.param("1b",             ByteSize.from_bits(1),         id="bit-no-space"),
            pytest.param("10kB",           ByteSize.of(10, KILO_BYTE),    id="lower-k"),
            pytest.param("10 kb",          ByteSize.of(10, KILO_BIT),     id="lower-k-bit"),
            pytest.param("1.5 MiB",        ByteSize.of(1.5, MEBI_BYTE),   id="fraction"),
            pytest.param(".5 KiB",         ByteSize.of(0.5, KIBI_BYTE),   id="leading-dot"),
            pytest.param("2. MB",          ByteSize.of(2, MEGA_BYTE),     id="trailing-dot"),
            pytest.param("  3   Gib  ",    ByteSize.of(3, GIBI_BIT),      id="whitespace"),
            pytest.param("1,024 KiB",      ByteSize.of(1, MEBI_BYTE),     id="thousands"),
            pytest.param("1,000,000 b",    ByteSize.from_bits(1_000_000), id="thousands-millions"),
            pytest.param("2 MegaBytes",    ByteSize.of(2, MEGA_BYTE),     id="long"),
            pytest.param("2 mebibyte",     ByteSize.of(2, MEBI_BYTE),     id="long-lower"),
            pytest.param("7 bytes",        ByteSize.from_bytes(7),        id="variant-word"),
            pytest.param("1 YiB",          ByteSize.of(1, YOBI_BYTE),     id="yobi"),
            pytest.param("0 B",            ByteSize.ZERO,                 id="zero"),
        ],
    )
    # @formatter:on
    def test_valid(self, text, expected):
        assert parse(text) == expected

    # @formatter:off
    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            pytest.param("",          ParseErrorKind.EMPTY_INPUT,                id="empty"),
            pytest.param("   ",       ParseErrorKind.EMPTY_INPUT,                id="blank"),
            pytest.param("10",        ParseErrorKind.MISSING_UNIT,               id="no-unit"),
            pytest.param("1.5",       ParseErrorKind.MISSING_UNIT,               id="no-unit-fraction"),
            pytest.param("MiB",       ParseErrorKind.MISSING_VALUE,              id="no-value"),
            pytest.param("-5 MB",     ParseErrorKind.INVALID_VALUE,              id="negative"),
            pytest.param("1..5 MB",   ParseErrorKind.INVALID_VALUE,              id="double-dot"),
            pytest.param("1_000 B",   ParseErrorKind.INVALID_VALUE,              id="underscore"),
            pytest.param("1.5,0 B",   ParseErrorKind.INVALID_VALUE,              id="separator-after-dot"),
            pytest.param("12,34 B",   ParseErrorKind.INVALID_THOUSANDS_FORMAT,   id="short-group"),
            pytest.param("1234,567 B", ParseErrorKind.INVALID_THOUSANDS_FORMAT,  id="long-head"),
            pytest.param(",123 B",    ParseErrorKind.INVALID_THOUSANDS_FORMAT,   id="empty-head"),
            pytest.param("10 mb",     ParseErrorKind.INVALID_PREFIX_CASE_FORMAT, id="lower-m"),
            pytest.param("10 MIB",    ParseErrorKind.INVALID_UNIT_CASE_FORMAT,   id="upper-mib"),
            pytest.param("10 XB",     ParseErrorKind.INVALID_PREFIX,             id="unknown-prefix"),
            pytest.param("10 K",      ParseErrorKind.INVALID_SIZE_VARIANT,       id="no-variant"),
        ],
    )
    # @formatter:on
    def test_invalid(self, text, kind):
        with pytest.raises(ParseError) as exc_info:
            parse(text)
        assert exc_info.value.kind is kind

    def test_overflow(self, strict):
        with pytest.raises(ValueOverflowError):
            parse("1000000000000000 YiB")

    def test_overflow_saturates(self, saturate):
        with pytest.warns(RuntimeWarning):
            assert parse("1000000000000000 YiB") == ByteSize.MAX

    def test_float_range_overflow(self, strict, lossy):
        with pytest.raises(ValueOverflowError):
            parse("9" * 400 + " B")

    def test_float_range_overflow_saturates(self, saturate, lossy):
        with pytest.warns(RuntimeWarning, match="saturated"):
            assert parse("9" * 400 + " B") == ByteSize.MAX

    def test_custom_separator(self):
        assert parse("1.024 KiB", thousands_separator="_") == ByteSize.of(1.024, KIBI_BYTE)
        assert parse("1_024 KiB", thousands_separator="_") == ByteSize.of(1, MEBI_BYTE)
        assert parse("1'000'000 B", thousands_separator="'") == ByteSize.from_bytes(1_000_000)

    @pytest.mark.parametrize("separator", ["", "ab", ".", " ", "x", "1"])
    def test_invalid_separator(self, separator):
        with pytest.raises(ValueError, match="thousands_separator"):
            parse("1 B", thousands_separator=separator)

    def test_type_checked(self):
        with pytest.raises(TypeError, match="text must be str"):
            parse(b"1 B")  # type: ignore[arg-type]

    def test_lossless_value(self, lossless):
        assert parse("0.1 KB") == ByteSize.from_bits(800)

    def test_float_value(self, lossy):
        assert parse("0.001 Kb") == ByteSize.of(0.001, KILO_BIT)

    # @formatter:off
    @pytest.mark.parametrize(
        ("text", "bits"),
        [
            pytest.param("0.3 kB",   2_400,      id="0.3-kB"),
            pytest.param("2.3 kB",   18_400,     id="2.3-kB"),
            pytest.param("4.35 MB",  34_800_000, id="4.35-MB"),
            pytest.param("0.001 Kb", 1,          id="one-bit"),
            pytest.param("1.1 KiB",  9_011,      id="binary-truncated"),
        ],
    )
    # @formatter:on
    def test_float_decimal_bits(self, lossy, text, bits):
        assert parse(text).bits == bits

    def test_float_decimal_bytes(self, lossy):
        assert parse("0.3 kB").bytes == 300
        assert parse("2.3 kB").bytes == 2_300
        assert parse("4.35 MB").bytes == 4_350_000


class TestParseWithUnit:
    @pytest.mark.parametrize(
        ("text", "unit"),
        [
            pytest.param("2 Gib", GIBI_BIT, id="gib"),
            pytest.param("3 bytes", BYTE, id="bytes"),
            pytest.param("4b", BIT, id="b"),
            pytest.param("1 kiloByte", KILO_BYTE, id="long"),
        ],
    )
    def test_unit(self, text, unit):
        size, parsed_unit = parse_with_unit(text)
        assert parsed_unit == unit
        assert size == parse(text)


class TestRoundTrip:
    @pytest.mark.parametrize("unit", sizes.ALL, ids=str)
    @pytest.mark.parametrize("n", [0, 1, 7, 1000, 65535])
    def test_render_parse(self, unit, n):
        size = ByteSize.of(n, unit)
        assert parse(str(size.repr_as(unit))) == size

    @pytest.mark.parametrize("unit", [KIBI_BYTE, MEGA_BYTE, GIBI_BIT], ids=str)
    def test_long_form(self, unit):
        size = ByteSize.of(12345, unit)
        assert parse(f"{size.repr_as(unit):+,}") == size

    def test_thousands_render_parse_render(self):
        text = "58,375.28 EiB"
        size = parse(text)
        assert str(size.repr_as(EXBI_BYTE, Format.SHOW_THOUSANDS_SEPARATOR)) == text

    def test_lossless_fraction_exact(self, lossless):
        size = parse("1.5 KiB")
        assert size.to(KIBI_BYTE) == Fraction(3, 2)
