"""Tests for the ErrorBag."""

import pytest

from fieldrules.error_bag import ErrorBag
from fieldrules.types import ErrorEntry


@pytest.fixture
def bag():
    bag = ErrorBag()
    bag.add("name", "first")
    bag.add("email", "bad email")
    bag.add("name", "second")
    return bag


class TestErrorBag:
    def test_add_keeps_insertion_order(self, bag):
        assert bag["name"] == [ErrorEntry("name", "first"), ErrorEntry("name", "second")]

    def test_remove_drops_one_field(self, bag):
        bag.remove("name")
        assert "name" not in bag
        assert bag.messages("email") == ["bad email"]

    def test_remove_missing_field_is_noop(self, bag):
        bag.remove("missing")
        assert len(bag) == 2

    def test_clear(self, bag):
        bag.clear()
        assert len(bag) == 0
        assert bag.all() == []

    def test_all_groups_by_field(self, bag):
        assert [e.message for e in bag.all()] == ["first", "second", "bad email"]

    def test_messages_for_absent_field(self, bag):
        assert bag.messages("missing") == []

    def test_to_dict(self, bag):
        assert bag.to_dict() == {"name": ["first", "second"], "email": ["bad email"]}

    def test_getitem_returns_copy(self, bag):
        bag["name"].append(ErrorEntry("name", "sneaky"))
        assert len(bag["name"]) == 2

    def test_missing_field_raises_keyerror(self, bag):
        with pytest.raises(KeyError):
            bag["missing"]

    def test_entry_to_dict(self):
        assert ErrorEntry("a", "b").to_dict() == {"field": "a", "message": "b"}
