import json

import pytest
import qtawesome as qta

from utils.icon_registry import (
    IconDescriptor,
    IconRegistry,
    PickerValue,
    describe_glyph,
    material_icon_registry,
)
from utils.material_icons import MATERIAL_ICONS


D_HOME = IconDescriptor("home", "mdi6.home", 0xF02DC, "Material Design Icons")
D_ADD_HOME = IconDescriptor("add_to_home_screen", "mdi6.cellphone-arrow-down", 0xF0001, "Material Design Icons")
D_SEARCH = IconDescriptor("search", "mdi6.magnify", 0xF0349, "Material Design Icons")


def test_registry_keeps_insertion_order():
    registry = IconRegistry([D_SEARCH, D_HOME])
    assert list(registry) == ["search", "home"]
    assert registry.descriptors() == [D_SEARCH, D_HOME]
    assert registry["home"] is D_HOME
    assert len(registry) == 2
    assert "search" in registry


def test_registry_rejects_duplicate_names():
    with pytest.raises(ValueError):
        IconRegistry([D_HOME, D_HOME])


def test_registry_is_read_only():
    registry = IconRegistry([D_HOME])
    with pytest.raises(TypeError):
        registry["search"] = D_SEARCH
    with pytest.raises(AttributeError):
        D_HOME.name = "other"


def test_match_prefers_exact_name():
    registry = IconRegistry([D_ADD_HOME, D_HOME])
    assert registry.match("home") is D_HOME


def test_match_falls_back_to_first_containing_name():
    registry = IconRegistry([D_ADD_HOME, D_HOME, D_SEARCH])
    assert registry.match("hom") is D_ADD_HOME
    assert registry.match("arc") is D_SEARCH


def test_match_is_case_sensitive_and_ignores_empty_text():
    registry = IconRegistry([D_HOME])
    assert registry.match("HOME") is None
    assert registry.match("") is None
    assert registry.match(None) is None
    assert registry.match("zzz_not_present") is None


def test_picker_value_json_format():
    value = PickerValue.from_descriptor(D_HOME)
    assert value.to_json() == (
        '{"iconName": "home", "codePoint": %d, "fontFamily": "Material Design Icons"}' % 0xF02DC
    )
    assert json.loads(value.to_json()) == {
        "iconName": "home",
        "codePoint": 0xF02DC,
        "fontFamily": "Material Design Icons",
    }


def test_picker_value_from_json():
    value = PickerValue.from_descriptor(D_SEARCH)
    assert PickerValue.from_json(value.to_json()) == value


@pytest.mark.parametrize("text", [None, "", "home", "[1, 2]", '{"iconName": "home"}', "{not json"])
def test_picker_value_from_plain_text_is_none(text):
    assert PickerValue.from_json(text) is None


def test_describe_glyph_reads_qtawesome_charmap(qapp):
    descriptor = describe_glyph("home", "mdi6.home")
    assert descriptor.name == "home"
    assert descriptor.glyph == "mdi6.home"
    assert descriptor.code_point == ord(qta.charmap("mdi6.home"))
    assert descriptor.font_family == qta.font("mdi6", 16).family()


def test_from_glyphs_skips_unknown_glyphs(qapp):
    registry = IconRegistry.from_glyphs(
        {"home": "mdi6.home", "bogus": "mdi6.no-such-glyph-anywhere", "search": "mdi6.magnify"}
    )
    assert list(registry) == ["home", "search"]


def test_material_registry_is_built_once(qapp):
    registry = material_icon_registry()
    assert material_icon_registry() is registry
    for name in ("home", "search", "settings"):
        assert name in registry
    assert list(registry) == [name for name in MATERIAL_ICONS if name in registry]
    assert registry["settings"].glyph == "mdi6.cog"


def test_material_table_covers_the_full_icon_set(qapp):
    assert len(MATERIAL_ICONS) == 984
    assert list(MATERIAL_ICONS)[:3] == ["threesixty", "threed_rotation", "four_k"]
    assert all(glyph.startswith("mdi6.") for glyph in MATERIAL_ICONS.values())
    for name in ("accessibility_new", "filter_9_plus", "view_comfy", "zoom_out_map"):
        assert name in MATERIAL_ICONS
    registry = material_icon_registry()
    assert len(registry) >= 0.95 * len(MATERIAL_ICONS)
