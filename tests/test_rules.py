"""Tests for the built-in rule predicates."""

import pytest

from fieldrules import rules


class TestRequired:
    @pytest.mark.parametrize("value", [None, "", "   ", [], {}])
    def test_empty_values_fail(self, value):
        assert rules.required(value) is False

    @pytest.mark.parametrize("value", ["a", 0, False, ["x"]])
    def test_present_values_pass(self, value):
        assert rules.required(value) is True


class TestEmptyValuesPass:
    @pytest.mark.parametrize("name", [n for n in rules.BUILTIN_RULES if n not in ("required", "confirmed")])
    def test_optional_rules_skip_empty(self, name):
        assert rules.BUILTIN_RULES[name](None, ("1", "2")) is True


class TestFormats:
    def test_email(self):
        assert rules.email("ada@example.com")
        assert not rules.email("ada@example")

    def test_url(self):
        assert rules.url("https://example.com/path")
        assert not rules.url("example.com")

    def test_ip(self):
        assert rules.ip("192.168.0.1")
        assert rules.ip("::1")
        assert not rules.ip("999.1.1.1")

    def test_ip_version(self):
        assert rules.ip("192.168.0.1", ("4",))
        assert not rules.ip("192.168.0.1", ("6",))

    def test_alpha_family(self):
        assert rules.alpha("Zoë")
        assert not rules.alpha("abc1")
        assert rules.alpha_num("abc1")
        assert not rules.alpha_num("abc-1")
        assert rules.alpha_dash("abc-1_x")
        assert not rules.alpha_dash("abc 1")
        assert rules.alpha_spaces("Ada Lovelace")
        assert not rules.alpha_spaces("Ada L0velace")

    def test_numeric(self):
        assert rules.numeric("0123")
        assert rules.numeric(42)
        assert not rules.numeric("12.5")

    def test_decimal(self):
        assert rules.decimal("12.50")
        assert rules.decimal("12.5", ("1",))
        assert not rules.decimal("12.55", ("1",))
        assert not rules.decimal("abc")

    def test_digits(self):
        assert rules.digits("1234", ("4",))
        assert not rules.digits("123", ("4",))
        assert not rules.digits("12a4", ("4",))


class TestBounds:
    def test_min_max_length(self):
        assert rules.min_length("abc", ("3",))
        assert not rules.min_length("ab", ("3",))
        assert rules.max_length("abc", ("3",))
        assert not rules.max_length("abcd", ("3",))

    def test_min_max_value(self):
        assert rules.min_value("18", ("18",))
        assert not rules.min_value(17, ("18",))
        assert rules.max_value(2.5, ("3",))
        assert not rules.max_value("x", ("3",))

    def test_between(self):
        assert rules.between("50", ("18", "99"))
        assert not rules.between(100, ("18", "99"))
        assert not rules.between("abc", ("18", "99"))

    def test_missing_param_raises(self):
        with pytest.raises(ValueError):
            rules.min_length("abc", None)


class TestMembership:
    def test_in_list(self):
        assert rules.in_list("b", ("a", "b"))
        assert not rules.in_list("c", ("a", "b"))

    def test_not_in_list(self):
        assert rules.not_in_list("c", ("a", "b"))
        assert not rules.not_in_list("a", ("a", "b"))

    def test_regex_rejoins_commas(self):
        assert rules.regex("aaa", ("^a{1", "3}$"))
        assert not rules.regex("aaaa", ("^a{1", "3}$"))

    def test_confirmed(self):
        assert rules.confirmed("secret", ("secret",))
        assert not rules.confirmed("secret", ("other",))
