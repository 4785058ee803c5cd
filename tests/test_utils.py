"""Tests for naming helpers."""

import pytest

from json_typegen.utils import (
    enum_member_name,
    is_valid_type_name,
    pascal_case,
    quote_property,
    singularize,
    unique_name,
)


class TestTypeNames:
    """Tests for type name validation and derivation."""

    @pytest.mark.parametrize("name", ["Root", "_Private", "User2", "a"])
    def test_valid_names(self, name):
        assert is_valid_type_name(name)

    @pytest.mark.parametrize("name", ["", "2Fast", "my-type", "has space", "dollar$"])
    def test_invalid_names(self, name):
        assert not is_valid_type_name(name)

    @pytest.mark.parametrize("value,expected", [
        ("address", "Address"),
        ("shipping_address", "ShippingAddress"),
        ("shipping-address", "ShippingAddress"),
        ("orderItems", "OrderItems"),
        ("2fa", "_2fa"),
        ("---", "Type"),
    ])
    def test_pascal_case(self, value, expected):
        assert pascal_case(value) == expected

    @pytest.mark.parametrize("value,expected", [
        ("orders", "order"),
        ("categories", "category"),
        ("boxes", "box"),
        ("addresses", "address"),
        ("status", "status"),
        ("class", "class"),
        ("bus", "bus"),
        ("data", "data"),
    ])
    def test_singularize(self, value, expected):
        assert singularize(value) == expected


class TestMemberNames:
    """Tests for enum member and property naming."""

    @pytest.mark.parametrize("value,expected", [
        ("active", "ACTIVE"),
        ("in-progress", "IN_PROGRESS"),
        ("2nd", "_2ND"),
        ("", "EMPTY"),
    ])
    def test_enum_member_name(self, value, expected):
        assert enum_member_name(value) == expected

    def test_quote_property(self):
        assert quote_property("id") == "id"
        assert quote_property("$ref") == "$ref"
        assert quote_property("first-name") == '"first-name"'
        assert quote_property('say "hi"') == '"say \\"hi\\""'

    def test_unique_name(self):
        assert unique_name("Item", set()) == "Item"
        assert unique_name("Item", {"Item"}) == "Item2"
        assert unique_name("Item", {"Item", "Item2"}) == "Item3"
