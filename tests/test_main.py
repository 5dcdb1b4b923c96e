from main import build_window


def test_demo_window_builds_a_valid_form(qapp):
    window = build_window("home")
    fields = window.form.fields()
    assert len(fields) == 2
    assert fields[0].picker_value().icon_name == "home"
    assert fields[1].controller() is window.shared_controller
    assert fields[1].picker_value().icon_name == "settings"
    assert window.form.validate() is True
    window.form.dispose()


def test_demo_reset_keeps_form_valid(qapp):
    window = build_window("home")
    window.form.reset()
    assert window.shared_controller.text() == "settings"
    assert window.form.validate() is True
    window.form.dispose()
