import pytest

from utils.icon_filter import filter_icons
from utils.icon_registry import IconDescriptor, IconRegistry


def _registry(*names):
    return IconRegistry(
        IconDescriptor(name, f"mdi6.{name}", 0xF0000 + i, "Material Design Icons")
        for i, name in enumerate(names)
    )


@pytest.fixture
def registry():
    return _registry("home", "search", "settings", "settings_applications", "save", "Search_off")


def _names(descriptors):
    return [d.name for d in descriptors]


@pytest.mark.parametrize("query", ["", "s", "se", "ho"])
def test_short_queries_return_full_registry(registry, query):
    assert filter_icons(registry, query) == registry.descriptors()


def test_none_query_is_treated_as_empty(registry):
    assert filter_icons(registry, None) == registry.descriptors()


def test_substring_match(registry):
    assert _names(filter_icons(registry, "sett")) == ["settings", "settings_applications"]


def test_match_anywhere_in_name(registry):
    assert _names(filter_icons(registry, "ome")) == ["home"]


def test_filter_is_case_sensitive_by_default(registry):
    assert _names(filter_icons(registry, "Search")) == ["Search_off"]
    assert _names(filter_icons(registry, "SETT")) == []


def test_case_insensitive_option(registry):
    assert _names(filter_icons(registry, "SEARCH", case_sensitive=False)) == ["search", "Search_off"]


def test_no_match_returns_empty_list(registry):
    assert filter_icons(registry, "zzz_not_present") == []


def test_registry_order_is_preserved(registry):
    result = filter_icons(registry, "s")
    assert _names(result) == list(registry)
    order = list(registry)
    positions = [order.index(d.name) for d in filter_icons(registry, "save")]
    assert positions == sorted(positions)


@pytest.mark.parametrize("query", ["a", "sett", "ear", "xyz", "home"])
def test_filter_is_idempotent(registry, query):
    once = filter_icons(registry, query)
    twice = filter_icons(IconRegistry(once), query)
    assert twice == once


def test_filter_does_not_modify_registry(registry):
    before = registry.descriptors()
    filter_icons(registry, "sett")
    assert registry.descriptors() == before


def test_plain_dict_registry_is_accepted():
    registry = _registry("home", "settings")
    as_dict = dict(registry)
    assert _names(filter_icons(as_dict, "sett")) == ["settings"]
