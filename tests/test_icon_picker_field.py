import json

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtTest import QTest

from components.icon_picker_field import IconPickerField
from components.text_controller import TextController
from dialogs.icon_picker_dialog import IconPickerDialog
from utils.constants import ControllerOwnership, DialogState
from utils.exceptions import ConfigurationError
from utils.icon_registry import IconDescriptor, IconRegistry, PickerValue, material_icon_registry


@pytest.fixture
def registry():
    return IconRegistry(
        [
            IconDescriptor("add_to_home_screen", "mdi6.cellphone-arrow-down", 0xF0001, "Material Design Icons"),
            IconDescriptor("home", "mdi6.home", 0xF02DC, "Material Design Icons"),
            IconDescriptor("search", "mdi6.magnify", 0xF0349, "Material Design Icons"),
            IconDescriptor("settings", "mdi6.cog", 0xF0493, "Material Design Icons"),
        ]
    )


def _json(registry, name):
    return PickerValue.from_descriptor(registry[name]).to_json()


# ---------------------------- Construction ----------------------------

def test_controller_and_initial_value_conflict(qapp, registry):
    with pytest.raises(ConfigurationError):
        IconPickerField(controller=TextController("home"), initial_value="home", registry=registry)


def test_controller_with_empty_initial_value_is_allowed(qapp, registry):
    field = IconPickerField(controller=TextController("home"), initial_value="", registry=registry)
    assert field.ownership() is ControllerOwnership.BORROWED


def test_mount_resolves_known_icon(qapp, registry):
    field = IconPickerField(initial_value="home", registry=registry)
    assert field.ownership() is ControllerOwnership.OWNED
    assert field.text() == "home"
    assert field.line_edit.text() == "home"
    assert field.resolved_icon() is registry["home"]
    assert field.value() == _json(registry, "home")
    assert json.loads(field.value()) == {
        "iconName": "home",
        "codePoint": 0xF02DC,
        "fontFamily": "Material Design Icons",
    }


def test_mount_resolves_first_containing_name(qapp, registry):
    field = IconPickerField(initial_value="hom", registry=registry)
    assert field.resolved_icon() is registry["add_to_home_screen"]
    assert field.text() == "hom"


def test_mount_with_unknown_text_keeps_plain_value(qapp, registry):
    field = IconPickerField(initial_value="zzz_not_present", registry=registry)
    assert field.value() == "zzz_not_present"
    assert field.resolved_icon() is None
    assert field.picker_value() is None


def test_mount_without_value(qapp, registry):
    field = IconPickerField(registry=registry)
    assert field.value() == ""
    assert field.text() == ""
    assert field.resolved_icon() is None


def test_mount_does_not_notify(qapp, registry):
    changed = []
    field = IconPickerField(initial_value="home", registry=registry, on_changed=changed.append)
    assert changed == []
    assert field.picker_value().icon_name == "home"


def test_default_registry_is_material(qapp):
    field = IconPickerField(initial_value="home")
    material = material_icon_registry()
    assert field.registry() is material
    value = field.picker_value()
    assert value.icon_name == "home"
    assert value.code_point == material["home"].code_point
    assert value.font_family == material["home"].font_family


def test_plain_mapping_registry(qapp, registry):
    field = IconPickerField(initial_value="search", registry=dict(registry))
    assert isinstance(field.registry(), IconRegistry)
    assert field.resolved_icon() == registry["search"]


def test_leading_icon_only_with_configured_icon(qapp, registry):
    plain = IconPickerField(initial_value="home", registry=registry)
    assert plain.leading_icon_label.isHidden()
    decorated = IconPickerField(initial_value="home", registry=registry, icon="mdi6.help-circle-outline")
    assert not decorated.leading_icon_label.isHidden()
    assert not decorated.leading_icon_label.pixmap().isNull()


def test_label_text(qapp, registry):
    field = IconPickerField(registry=registry, label_text="Icon")
    assert field.label.text() == "Icon"
    assert not field.label.isHidden()


# ----------------------------- Activation -----------------------------

def test_click_opens_dialog_with_options(qapp, registry):
    field = IconPickerField(
        registry=registry,
        title="Choose",
        cancel_text="Nope",
        search_hint="Find icon",
    )
    field.show()
    QTest.mouseClick(field.line_edit, Qt.MouseButton.LeftButton)
    dialog = field.active_dialog()
    assert isinstance(dialog, IconPickerDialog)
    assert dialog.title_label.text() == "Choose"
    assert dialog.cancel_button.text() == "Nope"
    assert dialog.search_edit.placeholderText() == "Find icon"
    assert dialog.visible_icons() == registry.descriptors()
    dialog.reject()


def test_drop_button_opens_dialog(qapp, registry):
    field = IconPickerField(registry=registry, enable_search=False)
    field.show()
    QTest.mouseClick(field.drop_button, Qt.MouseButton.LeftButton)
    dialog = field.active_dialog()
    assert dialog is not None
    assert dialog.search_edit is None
    dialog.reject()


def test_line_edit_is_read_only(qapp, registry):
    field = IconPickerField(registry=registry)
    assert field.line_edit.isReadOnly()


def test_read_only_field_does_not_open(qapp, registry):
    field = IconPickerField(registry=registry, read_only=True)
    field.show()
    QTest.mouseClick(field.line_edit, Qt.MouseButton.LeftButton)
    assert field.active_dialog() is None


def test_disabled_field_does_not_open(qapp, registry):
    field = IconPickerField(registry=registry, enabled=False)
    field._on_activate()
    assert field.active_dialog() is None


def test_only_one_dialog_per_field(qapp, registry):
    field = IconPickerField(registry=registry)
    first = field.show_icon_picker_dialog()
    assert field.show_icon_picker_dialog() is first
    first.reject()
    assert field.active_dialog() is None


# ------------------------------ Selection ------------------------------

def test_pick_updates_text_value_and_icon(qapp, registry):
    seen = []
    field = IconPickerField(
        initial_value="home",
        registry=registry,
        icon="mdi6.help-circle-outline",
        on_changed=lambda value: seen.append((value, field.text(), field.value(), field.resolved_icon())),
    )
    emitted = []
    field.valueChanged.connect(emitted.append)

    dialog = field.show_icon_picker_dialog()
    dialog.pick("settings")

    expected = _json(registry, "settings")
    assert dialog.state() is DialogState.CLOSED
    assert field.text() == "settings"
    assert field.line_edit.text() == "settings"
    assert field.value() == expected
    assert field.resolved_icon() is registry["settings"]
    assert seen == [(expected, "settings", expected, registry["settings"])]
    assert emitted == [expected]
    assert field.active_dialog() is None


def test_pick_after_search(qapp, registry):
    field = IconPickerField(registry=registry)
    dialog = field.show_icon_picker_dialog()
    dialog.set_query("sett")
    assert [d.name for d in dialog.visible_icons()] == ["settings"]
    QTest.mouseClick(dialog._buttons["settings"], Qt.MouseButton.LeftButton)
    assert field.picker_value() == PickerValue.from_descriptor(registry["settings"])


def test_cancel_leaves_field_untouched(qapp, registry):
    changed = []
    field = IconPickerField(initial_value="home", registry=registry, on_changed=changed.append)
    before = field.value()
    dialog = field.show_icon_picker_dialog()
    dialog.set_query("sett")
    dialog.reject()
    assert field.value() == before
    assert field.text() == "home"
    assert field.resolved_icon() is registry["home"]
    assert changed == []


def test_pick_with_borrowed_controller_notifies_host_once(qapp, registry):
    controller = TextController("")
    texts = []
    controller.textChanged.connect(texts.append)
    field = IconPickerField(controller=controller, registry=registry)
    emitted = []
    field.valueChanged.connect(emitted.append)

    field.show_icon_picker_dialog().pick("search")

    assert controller.text() == "search"
    assert texts == ["search"]
    assert emitted == [_json(registry, "search")]


def test_result_after_dispose_is_discarded(qapp, registry):
    changed = []
    field = IconPickerField(initial_value="home", registry=registry, on_changed=changed.append)
    before = field.value()
    dialog = field.show_icon_picker_dialog()
    field.dispose()
    dialog.pick("settings")
    assert dialog.selected_icon() is registry["settings"]
    assert field.value() == before
    assert field.resolved_icon() is registry["home"]
    assert changed == []


# --------------------------- Controllers ---------------------------

def test_borrowed_controller_changes_propagate(qapp, registry):
    controller = TextController("")
    field = IconPickerField(controller=controller, registry=registry)
    emitted = []
    field.valueChanged.connect(emitted.append)
    controller.set_text("search")
    assert field.line_edit.text() == "search"
    assert field.value() == "search"
    assert emitted == ["search"]


def test_borrowed_controller_text_is_resolved_on_mount(qapp, registry):
    controller = TextController("settings")
    field = IconPickerField(controller=controller, registry=registry)
    assert field.value() == _json(registry, "settings")
    assert field.line_edit.text() == "settings"


def test_switch_owned_to_borrowed(qapp, registry):
    field = IconPickerField(initial_value="home", registry=registry)
    owned = field.controller()
    borrowed = TextController("search")
    field.set_controller(borrowed)
    assert owned.is_disposed()
    assert field.controller() is borrowed
    assert field.ownership() is ControllerOwnership.BORROWED
    assert field.line_edit.text() == "search"
    assert field.resolved_icon() is registry["search"]
    assert field.value() == _json(registry, "search")


def test_switch_borrowed_to_owned_reseeds_text(qapp, registry):
    borrowed = TextController("settings")
    field = IconPickerField(controller=borrowed, registry=registry)
    field.set_controller(None)
    owned = field.controller()
    assert owned is not borrowed
    assert field.ownership() is ControllerOwnership.OWNED
    assert owned.text() == "settings"
    assert not borrowed.is_disposed()
    value = field.value()
    borrowed.set_text("home")
    assert field.value() == value
    assert field.resolved_icon() is registry["settings"]


def test_switch_between_borrowed_controllers(qapp, registry):
    first = TextController("home")
    second = TextController("search")
    field = IconPickerField(controller=first, registry=registry)
    field.set_controller(second)
    assert not first.is_disposed()
    first.set_text("settings")
    assert field.text() == "search"
    assert field.resolved_icon() is registry["search"]


def test_same_controller_only_re_resolves(qapp, registry):
    controller = TextController("home")
    field = IconPickerField(controller=controller, registry=registry)
    field.set_controller(controller)
    assert field.controller() is controller
    assert field.ownership() is ControllerOwnership.BORROWED


def test_set_registry_re_resolves(qapp, registry):
    field = IconPickerField(initial_value="search", registry=IconRegistry())
    assert field.resolved_icon() is None
    field.set_registry(registry)
    assert field.resolved_icon() is registry["search"]
    assert field.value() == _json(registry, "search")


def test_dispose_runs_once(qapp, registry):
    field = IconPickerField(initial_value="home", registry=registry)
    owned = field.controller()
    field.dispose()
    field.dispose()
    assert field.is_disposed()
    assert owned.is_disposed()


def test_dispose_detaches_borrowed_controller(qapp, registry):
    controller = TextController("")
    field = IconPickerField(controller=controller, registry=registry)
    field.dispose()
    controller.set_text("search")
    assert not controller.is_disposed()
    assert field.value() == ""


def test_disposed_field_does_not_open(qapp, registry):
    field = IconPickerField(registry=registry)
    field.dispose()
    field._on_activate()
    assert field.active_dialog() is None


def test_reconfigure_after_dispose_is_ignored(qapp, registry):
    controller = TextController("home")
    field = IconPickerField(controller=controller, registry=registry)
    field.dispose()
    replacement = TextController("search")
    field.set_controller(replacement)
    field.set_controller(None)
    field.set_registry(IconRegistry([registry["settings"]]))
    assert field.controller() is controller
    assert field.registry() is registry
    replacement.set_text("settings")
    assert field.value() == _json(registry, "home")


# ----------------------------- Form contract -----------------------------

def test_reset_restores_initial_text_not_picked_icon(qapp, registry):
    field = IconPickerField(initial_value="home", registry=registry)
    field.show_icon_picker_dialog().pick("settings")
    field.reset()
    assert field.text() == "home"
    assert field.line_edit.text() == "home"
    assert field.value() == "home"
    assert field.resolved_icon() is registry["settings"]


def test_reset_with_borrowed_controller_restores_mounted_text(qapp, registry):
    controller = TextController("settings")
    field = IconPickerField(controller=controller, registry=registry, validator=lambda v: None if v else "Required")
    field.show_icon_picker_dialog().pick("home")
    assert controller.text() == "home"
    field.reset()
    assert controller.text() == "settings"
    assert field.text() == "settings"
    assert field.line_edit.text() == "settings"
    assert field.value() == "settings"
    assert field.validate() is True


def test_validation_and_error_text(qapp, registry):
    field = IconPickerField(
        registry=registry,
        validator=lambda value: "Pick an icon" if not value else None,
    )
    assert field.validate() is False
    assert field.error_text() == "Pick an icon"
    assert field.error_label.text() == "Pick an icon"
    assert not field.error_label.isHidden()
    field.show_icon_picker_dialog().pick("home")
    assert field.validate() is True
    assert field.error_text() is None
    assert field.error_label.isHidden()


def test_autovalidate_runs_on_pick(qapp, registry):
    field = IconPickerField(
        registry=registry,
        autovalidate=True,
        validator=lambda value: "No settings" if "settings" in value else None,
    )
    field.show_icon_picker_dialog().pick("settings")
    assert field.has_error()
    field.show_icon_picker_dialog().pick("home")
    assert not field.has_error()


def test_save_passes_current_value(qapp, registry):
    saved = []
    field = IconPickerField(initial_value="zzz_not_present", registry=registry, on_saved=saved.append)
    field.save()
    field.show_icon_picker_dialog().pick("search")
    field.save()
    assert saved == ["zzz_not_present", _json(registry, "search")]
