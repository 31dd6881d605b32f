"""
Tests for tool category configuration.
"""
import logging

import pytest

from shopify_graphql_mcp.categories import (
    ALL_CATEGORIES,
    CATEGORY_NAMES,
    describe_categories,
    get_category_config,
    get_enabled_categories,
    get_enabled_tool_count,
    module_path,
)
from shopify_graphql_mcp.mcp_tools import import_tool_module, tool_classes


def test_default_enables_everything():
    assert get_enabled_categories({}) == CATEGORY_NAMES


@pytest.mark.parametrize("value", ["all", "ALL", " all ", ""])
def test_all_enables_everything(value):
    assert get_enabled_categories({"ENABLED_TOOL_CATEGORIES": value}) == CATEGORY_NAMES


def test_none_disables_everything():
    assert get_enabled_categories({"ENABLED_TOOL_CATEGORIES": "none"}) == []


def test_legacy_list_is_trimmed_and_lower_cased():
    env = {"ENABLED_TOOL_CATEGORIES": " Essential, marketing ,essential"}
    assert get_enabled_categories(env) == ["essential", "marketing"]


def test_invalid_categories_are_dropped_with_warning(caplog):
    env = {"ENABLED_TOOL_CATEGORIES": "essential,bogus"}
    with caplog.at_level(logging.WARNING):
        enabled = get_enabled_categories(env)

    assert enabled == ["essential"]
    assert "Invalid tool categories: bogus" in caplog.text


def test_flags_take_precedence_over_list():
    """Once any ENABLE_* flag is present the list is ignored"""
    env = {
        "ENABLE_COMMERCE": "TRUE",
        "ENABLE_MARKETING": "false",
        "ENABLED_TOOL_CATEGORIES": "essential,marketing",
    }
    assert get_enabled_categories(env) == ["commerce"]


def test_flags_only_enable_true_values():
    env = {"ENABLE_ESSENTIAL": "false", "ENABLE_REPORTING": "yes"}
    assert get_enabled_categories(env) == []


def test_reads_process_environment(clean_env):
    clean_env.setenv("ENABLE_CONTENT", "true")
    assert get_enabled_categories() == ["content"]


def test_get_category_config():
    assert get_category_config("automation").modules == [
        "inventory-shipments", "inventory-transfers", "packing-slip-templates",
    ]
    assert get_category_config("nope") is None


def test_module_path_maps_hyphens():
    assert module_path("essential", "draft-orders") == "shopify_graphql_mcp.mcp_tools.essential.draft_orders"


@pytest.mark.parametrize("category,module", [
    (category.name, module) for category in ALL_CATEGORIES for module in category.modules
])
def test_every_module_has_tools(category, module):
    """Each module in the table is implemented and defines at least one tool"""
    assert tool_classes(import_tool_module(category, module))


def test_tool_names_are_unique():
    names = []
    for category in ALL_CATEGORIES:
        for module in category.modules:
            names.extend(cls.name for cls in tool_classes(import_tool_module(category.name, module)))
    assert len(names) == len(set(names))


def test_enabled_tool_count():
    assert get_enabled_tool_count([]) == 0

    reporting = get_enabled_tool_count(["reporting"])
    automation = get_enabled_tool_count(["automation"])
    assert reporting > 0
    assert get_enabled_tool_count(["reporting", "automation"]) == reporting + automation


def test_describe_categories():
    described = describe_categories(["essential"])

    assert set(described) == set(CATEGORY_NAMES)
    assert described["essential"]["enabled"] is True
    assert described["content"]["enabled"] is False
    assert "pages" in described["content"]["modules"]
