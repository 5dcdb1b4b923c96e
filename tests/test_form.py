from PyQt6.QtWidgets import QWidget

from components.form import Form, FormField
from components.icon_picker_field import IconPickerField
from components.text_controller import TextController
from utils.icon_registry import IconDescriptor, IconRegistry


def _required(value):
    return "Required" if not value else None


def _registry():
    return IconRegistry([IconDescriptor("home", "mdi6.home", 0xF02DC, "Material Design Icons")])


def test_field_without_form(qapp):
    field = FormField(initial_value="a", validator=_required)
    assert Form.of(field) is None
    assert field.validate() is True
    field.did_change("")
    assert field.validate() is False
    assert field.error_text() == "Required"


def test_set_value_is_silent(qapp):
    field = FormField()
    emitted = []
    field.valueChanged.connect(emitted.append)
    field.set_value("x")
    assert field.value() == "x"
    assert emitted == []
    field.did_change("y")
    assert emitted == ["y"]


def test_form_of_finds_enclosing_form(qapp):
    form = Form()
    holder = QWidget()
    form.field_layout.addWidget(holder)
    field = FormField(parent=holder)
    assert Form.of(field) is form


def test_nested_field_joins_form_when_shown(qapp):
    form = Form()
    holder = QWidget()
    form.field_layout.addWidget(holder)
    field = FormField(validator=_required, parent=holder)
    assert form.fields() == []
    form.show()
    assert form.fields() == [field]
    assert form.validate() is False
    assert field.has_error()
    form.hide()
    form.show()
    assert form.fields() == [field]
    form.close()


def test_form_validates_every_field(qapp):
    form = Form()
    first = form.add_field(FormField(validator=_required))
    second = form.add_field(FormField(initial_value="ok", validator=_required))
    third = form.add_field(FormField(validator=_required))
    assert form.validate() is False
    assert first.has_error()
    assert not second.has_error()
    assert third.has_error()
    assert form.fields() == [first, second, third]


def test_form_save_and_reset(qapp):
    saved = []
    form = Form()
    field = form.add_field(IconPickerField(initial_value="home", registry=_registry(), on_saved=saved.append))
    plain = form.add_field(FormField(initial_value="x", on_saved=saved.append))
    form.save()
    assert saved == [field.value(), "x"]
    plain.did_change("y")
    form.reset()
    assert plain.value() == "x"
    assert field.value() == "home"


def test_form_changed_signal(qapp):
    form = Form()
    field = form.add_field(FormField())
    changes = []
    form.changed.connect(lambda: changes.append(field.value()))
    field.did_change("a")
    assert changes == ["a"]
    form.unregister(field)
    field.did_change("b")
    assert changes == ["a"]


def test_register_twice_is_noop(qapp):
    form = Form()
    field = form.add_field(FormField())
    form.register(field)
    assert form.fields() == [field]


def test_form_dispose_disposes_picker_fields(qapp):
    form = Form()
    controller = TextController("")
    field = form.add_field(IconPickerField(controller=controller, registry=_registry()))
    owned = form.add_field(IconPickerField(registry=_registry()))
    owned_controller = owned.controller()
    form.dispose()
    assert field.is_disposed()
    assert owned_controller.is_disposed()
    assert not controller.is_disposed()
    assert form.fields() == []
