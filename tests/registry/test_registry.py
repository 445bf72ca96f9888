# Copyright 2026 cmdparam Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the parameter registry."""

import logging

import pytest

from cmdparam.model.types import IntegerValue, ParameterType, StringValue
from cmdparam.registry import AliasConflictError, RegistrationError, Registry, canonical_aliases

# ###############
# Registration
# ###############


class TestRegister:
    def test_canonical_aliases_appended(self) -> None:
        registry = Registry()
        param = registry.register("path", ParameterType.PATH, False, None, "file path", ["-p"])
        assert param.aliases == ("-p", "/path", "--path")

    def test_canonical_aliases_without_extras(self) -> None:
        registry = Registry()
        param = registry.register_simple("value", ParameterType.INTEGER, "a value")
        assert param.aliases == canonical_aliases("value") == ("/value", "--value")

    @pytest.mark.parametrize(
        "extra",
        [
            ["--path"],
            ["/path"],
            ["--path", "/path"],
            ["/path", "--path", "--path", "-p", "-p"],
        ],
    )
    def test_each_alias_present_exactly_once(self, extra: list[str]) -> None:
        registry = Registry()
        param = registry.register("path", ParameterType.PATH, False, None, "", extra)
        assert param.aliases.count("/path") == 1
        assert param.aliases.count("--path") == 1
        assert len(param.aliases) == len(set(param.aliases))

    def test_register_simple_is_required_without_default(self) -> None:
        param = Registry().register_simple("n", ParameterType.INTEGER, "d")
        assert not param.allow_empty
        assert param.default is None
        assert param.description == "d"

    def test_register_can_be_empty_is_optional_with_default(self) -> None:
        param = Registry().register_can_be_empty("n", ParameterType.INTEGER, IntegerValue(value=3), "d")
        assert param.allow_empty
        assert param.to_int_value() == 3

    def test_default_of_wrong_type_rejected(self) -> None:
        with pytest.raises(RegistrationError, match="expected integer"):
            Registry().register("n", ParameterType.INTEGER, True, StringValue(value="3"), "")

    def test_single_string_alias_rejected(self) -> None:
        registry = Registry()
        with pytest.raises(RegistrationError, match="not a string"):
            registry.register("path", ParameterType.PATH, False, None, "", "-p")  # type: ignore[arg-type]
        assert registry.get_parameter("path") is None

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(RegistrationError):
            Registry().register_simple("", ParameterType.STRING, "")

    def test_reregistering_name_replaces_entry(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = Registry()
        first = registry.register_simple("n", ParameterType.INTEGER, "first")
        with caplog.at_level(logging.WARNING, logger="cmdparam.registry.registry"):
            second = registry.register_simple("n", ParameterType.STRING, "second")
        assert registry.get_parameter("n") is second
        assert registry.get_parameter("n") is not first
        assert len(registry) == 1
        assert "registered twice" in caplog.text


# ###############
# Alias collisions
# ###############


class TestAliasCollisions:
    def test_first_registered_wins(self) -> None:
        registry = Registry()
        first = registry.register("a", ParameterType.STRING, True, None, "", ["-x"])
        registry.register("b", ParameterType.STRING, True, None, "", ["-x"])
        assert registry.find_by_alias("-x") is first

    def test_collision_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = Registry()
        registry.register("a", ParameterType.STRING, True, None, "", ["-x"])
        with caplog.at_level(logging.WARNING, logger="cmdparam.registry.registry"):
            registry.register("b", ParameterType.STRING, True, None, "", ["-x"])
        assert "'-x'" in caplog.text

    def test_strict_mode_rejects_collision(self) -> None:
        registry = Registry(strict_aliases=True)
        registry.register("a", ParameterType.STRING, True, None, "", ["-x"])
        with pytest.raises(AliasConflictError) as exc_info:
            registry.register("b", ParameterType.STRING, True, None, "", ["-x"])
        assert exc_info.value.alias == "-x"
        assert exc_info.value.owner == "a"
        assert "b" not in registry

    def test_strict_mode_allows_reregistering_same_name(self) -> None:
        registry = Registry(strict_aliases=True)
        registry.register("a", ParameterType.STRING, True, None, "", ["-x"])
        registry.register("a", ParameterType.STRING, True, None, "", ["-x"])
        assert len(registry) == 1


# ###############
# Lookup
# ###############


class TestLookup:
    def test_get_value_unknown_name(self) -> None:
        registry = Registry()
        assert registry.get_value("missing") is None
        assert registry.get_parameter("missing") is None

    def test_get_value_returns_default(self) -> None:
        registry = Registry()
        registry.register_can_be_empty("n", ParameterType.INTEGER, IntegerValue(value=4), "")
        assert registry.get_value("n") == IntegerValue(value=4)

    def test_get_value_follows_handle(self) -> None:
        registry = Registry()
        param = registry.register_simple("n", ParameterType.INTEGER, "")
        param._assign(IntegerValue(value=9))
        assert registry.get_value("n") == IntegerValue(value=9)

    def test_find_by_alias_unknown(self) -> None:
        registry = Registry()
        registry.register_simple("n", ParameterType.INTEGER, "")
        assert registry.find_by_alias("-n") is None
        assert registry.find_by_alias("--n") is registry.get_parameter("n")

    def test_iteration_in_registration_order(self) -> None:
        registry = Registry()
        for name in ("c", "a", "b"):
            registry.register_simple(name, ParameterType.STRING, "")
        assert [p.name for p in registry] == ["c", "a", "b"]
        assert [p.name for p in registry.parameters] == ["c", "a", "b"]
        assert "a" in registry


# ###############
# Version text and abort flag
# ###############


def test_version_text_defaults_to_none() -> None:
    assert Registry().version_text is None


def test_set_version_text() -> None:
    registry = Registry()
    registry.set_version_text("tool 1.0")
    assert registry.version_text == "tool 1.0"


def test_abort_flag_initially_clear() -> None:
    registry = Registry()
    assert not registry.aborted
    registry._mark_aborted()
    assert registry.aborted
