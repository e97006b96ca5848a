"""Tests for bfinterp.machine.policy — OverflowPolicy parsing."""

import pytest

from bfinterp.errors import ConfigurationError
from bfinterp.machine.policy import OverflowPolicy


class TestOverflowPolicyParse:
    def test_member_passes_through(self):
        assert OverflowPolicy.parse(OverflowPolicy.IGNORE) is OverflowPolicy.IGNORE

    @pytest.mark.parametrize(
        "raw", ["wrap_around", "WRAP_AROUND", "Wrap-Around", "  wrap_around  "]
    )
    def test_spellings(self, raw):
        assert OverflowPolicy.parse(raw) is OverflowPolicy.WRAP_AROUND

    def test_str_enum_value(self):
        assert OverflowPolicy.THROW_EXCEPTION == "throw_exception"

    def test_unknown_name_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown overflow policy 'saturate'"):
            OverflowPolicy.parse("saturate")

    def test_non_string_rejected(self):
        with pytest.raises(ConfigurationError):
            OverflowPolicy.parse(None)
