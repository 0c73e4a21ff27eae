"""Tests for the naming module."""

import pytest

from rpcgen.naming import (
    escape_keyword,
    is_pascal_case,
    split_words,
    to_pascal_case,
    to_snake_case,
)


class TestSplitWords:
    """Test identifier word splitting."""

    def test_pascal(self):
        assert split_words("SpaceCenter") == ["Space", "Center"]

    def test_snake(self):
        assert split_words("get_active_vessel") == ["get", "active", "vessel"]

    def test_acronym(self):
        assert split_words("HTTPServer") == ["HTTP", "Server"]

    def test_digits(self):
        assert split_words("Vector3D") == ["Vector", "3", "D"]

    def test_mixed_delimiters(self):
        assert split_words("max-rails rate") == ["max", "rails", "rate"]

    def test_empty(self):
        assert split_words("") == []


class TestSnakeCase:
    """Test member-style (snake_case) conversion."""

    def test_pascal_to_snake(self):
        assert to_snake_case("GetName") == "get_name"

    def test_camel_to_snake(self):
        assert to_snake_case("maxRailsRate") == "max_rails_rate"

    def test_service_module(self):
        assert to_snake_case("SpaceCenter") == "space_center"

    def test_acronym(self):
        assert to_snake_case("KRPC") == "krpc"

    def test_internal_name(self):
        assert to_snake_case("Vessel_get_Name") == "vessel_get_name"

    def test_total_on_odd_input(self):
        """Any input yields a string, even with no word characters."""
        assert to_snake_case("__--  ") == ""
        assert to_snake_case("a.b$c") == "a_bc"
        assert to_snake_case("$$$") == ""


class TestPascalCase:
    """Test type-style (PascalCase) conversion."""

    def test_snake_to_pascal(self):
        assert to_pascal_case("space_center") == "SpaceCenter"

    def test_pascal_unchanged(self):
        assert to_pascal_case("SpaceCenter") == "SpaceCenter"

    def test_single_word(self):
        assert to_pascal_case("drawing") == "Drawing"

    def test_acronym_lowered(self):
        assert to_pascal_case("KRPC") == "Krpc"
        assert to_pascal_case("UI") == "Ui"
        assert to_pascal_case("HTTPServer") == "HttpServer"

    def test_single_letter_words(self):
        assert to_pascal_case("a_b") == "Ab"

    def test_punctuation_dropped(self):
        assert to_pascal_case("$-zb9 ") == "Zb9"
        assert to_pascal_case(" 0$-Aa") == "0Aa"

    def test_lowercase_acronym(self):
        assert to_pascal_case("krpc") == "Krpc"


class TestIdempotence:
    """Normalizing an already normalized name is a no-op."""

    NAMES = [
        "SpaceCenter", "space_center", "GetName", "get_ActiveVessel",
        "HTTPServer", "Vector3D", "a_b", "maxRailsRate", "KRPC", "iPhone",
        "x", "", "_private", "UI", "Vessel_get_Name", "ABcD",
        "$-zb9 ", " 0$-Aa", "a.b$c", "Get$Name", "$", "a.B", "9$a_B-c",
    ]

    @pytest.mark.parametrize("name", NAMES)
    def test_snake_idempotent(self, name):
        once = to_snake_case(name)
        assert to_snake_case(once) == once

    @pytest.mark.parametrize("name", NAMES)
    def test_pascal_idempotent(self, name):
        once = to_pascal_case(name)
        assert to_pascal_case(once) == once


class TestIsPascalCase:
    """Test the bindable-procedure predicate."""

    def test_pascal_is_bindable(self):
        assert is_pascal_case("GetName")
        assert is_pascal_case("WarpTo")
        assert is_pascal_case("Vessels")

    def test_getter_is_not_bindable(self):
        assert not is_pascal_case("get_ActiveVessel")

    def test_class_member_is_not_bindable(self):
        assert not is_pascal_case("Vessel_get_Name")

    def test_lowercase_is_not_bindable(self):
        assert not is_pascal_case("get_status")

    def test_acronym_is_not_bindable(self):
        assert not is_pascal_case("GetClientID")
        assert not is_pascal_case("LaunchVesselFromVAB")
        assert not is_pascal_case("GetUI")

    def test_punctuation_is_not_bindable(self):
        assert not is_pascal_case("Get$Name")

    def test_camel_is_not_bindable(self):
        assert not is_pascal_case("getName")

    def test_empty_is_not_bindable(self):
        assert not is_pascal_case("")


class TestEscapeKeyword:
    """Test Rust keyword escaping for generated bindings."""

    def test_plain_identifier(self):
        assert escape_keyword("position") == "position"

    def test_raw_identifier(self):
        assert escape_keyword("type") == "r#type"

    def test_self_cannot_be_raw(self):
        assert escape_keyword("self") == "self_"
        assert escape_keyword("crate") == "crate_"

    def test_valid_identifier(self):
        """Escaped names must still be usable identifiers once r# is stripped."""
        for word in ("match", "loop", "move", "ref"):
            assert escape_keyword(word).removeprefix("r#").isidentifier()
