"""Tests for flag declarations"""
import pytest

from optclaim.core.exceptions import DeclarationError
from optclaim.parsing.flag import Flag


class TestFlagFromNames:
    """Test building flags from bare names"""

    def test_short_only(self):
        flag = Flag.from_names(["a"])
        assert flag.short == "-a"
        assert flag.long is None
        assert flag.values == ["-a"]

    def test_long_only(self):
        flag = Flag.from_names(["all"])
        assert flag.short is None
        assert flag.long == "--all"
        assert flag.values == ["--all"]

    def test_short_and_long(self):
        flag = Flag.from_names(["a", "all"])
        assert flag.values == ["-a", "--all"]

    def test_declaration_order_does_not_matter(self):
        assert Flag.from_names(["all", "a"]) == Flag.from_names(["a", "all"])

    def test_membership_and_str(self):
        flag = Flag.from_names(["o", "output"])
        assert "-o" in flag
        assert "--output" in flag
        assert "output" not in flag
        assert str(flag) == "-o, --output"

    def test_flag_is_immutable(self):
        flag = Flag.from_names(["a"])
        with pytest.raises(AttributeError):
            flag.short = "-b"


class TestFlagDeclarationErrors:
    """Malformed declarations are programmer faults"""

    @pytest.mark.parametrize("names", [["-a"], ["--all"], ["a", "--all"]])
    def test_prefixed_names(self, names):
        with pytest.raises(DeclarationError, match="prefix should be omitted"):
            Flag.from_names(names)

    def test_zero_length_name(self):
        with pytest.raises(DeclarationError, match="zero length"):
            Flag.from_names([""])

    def test_no_names(self):
        with pytest.raises(DeclarationError):
            Flag.from_names([])

    def test_too_many_names(self):
        with pytest.raises(DeclarationError):
            Flag.from_names(["a", "all", "every"])

    @pytest.mark.parametrize("names", [["a", "b"], ["all", "every"]])
    def test_two_names_of_same_class(self, names):
        with pytest.raises(DeclarationError, match="one short and one long"):
            Flag.from_names(names)

    def test_error_lists_names(self):
        with pytest.raises(DeclarationError) as exc_info:
            Flag.from_names(["a", "b"])
        assert exc_info.value.names == ["a", "b"]
        assert "flags: ['a', 'b']" in str(exc_info.value)

    def test_empty_flag_instance(self):
        with pytest.raises(DeclarationError):
            Flag()
