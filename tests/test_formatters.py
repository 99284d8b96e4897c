#
# XBytes - Formatters Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from xbytes.formatters import fmt_type, fmt_value
from xbytes.unit import SizeVariant


# Local Classes & Methods ----------------------------------------------------------------------------------------------

class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("boom")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtType:
    @pytest.mark.parametrize(
        ("obj", "expected"),
        [
            pytest.param(42, "<int>", id="instance"),
            pytest.param(int, "<int>", id="type"),
            pytest.param(None, "<NoneType>", id="none"),
            pytest.param(SizeVariant.BIT, "<SizeVariant>", id="enum-member"),
        ],
    )
    def test_short_name(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_fully_qualified(self):
        assert fmt_type(SizeVariant.BYTE, fully_qualified=True) == "<xbytes.unit.SizeVariant>"

    def test_builtins_never_qualified(self):
        assert fmt_type(1.5, fully_qualified=True) == "<float>"


class TestFmtValue:
    @pytest.mark.parametrize(
        ("obj", "expected"),
        [
            pytest.param("10 XB", "'10 XB'", id="str"),
            pytest.param(7, "7", id="int"),
            pytest.param(None, "None", id="none"),
            pytest.param([1, 2], "<list: [1, 2]>", id="list"),
        ],
    )
    def test_format(self, obj, expected):
        assert fmt_value(obj) == expected

    def test_truncates_long_str_keeping_quotes(self):
        out = fmt_value("x" * 200, max_repr=10)
        assert out.startswith("'xxxxxxxxx")
        assert out.endswith("...'")
        assert len(out) < 20

    def test_broken_repr(self):
        out = fmt_value(BrokenRepr())
        assert "repr failed: RuntimeError" in out
        assert out.startswith("<BrokenRepr:")
