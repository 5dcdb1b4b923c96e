# main.py
# Demo entry point: a small form with icon picker fields.

import argparse
import logging
import sys

from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QPushButton, QVBoxLayout, QWidget

from components.form import Form
from components.icon_picker_field import IconPickerField
from components.text_controller import TextController
from utils.exception_safe_application import ExceptionSafeApplication

logger = logging.getLogger(__name__)


def _require_icon(value: str):
    return "Please pick an icon." if not value else None


def build_window(initial_icon: str = "home") -> QMainWindow:
    """Create the demo window with one owned and one borrowed-controller field."""
    window = QMainWindow()
    window.setWindowTitle("Icon Picker")

    central = QWidget()
    layout = QVBoxLayout(central)

    form = Form()
    form.add_field(
        IconPickerField(
            initial_value=initial_icon,
            icon="mdi6.help-circle-outline",
            label_text="Icon",
            title="Select an icon",
            validator=_require_icon,
            on_changed=lambda value: logger.info("Icon changed: %s", value),
            on_saved=lambda value: logger.info("Icon saved: %s", value),
        )
    )
    window.shared_controller = TextController("settings", window)
    form.add_field(
        IconPickerField(
            controller=window.shared_controller,
            icon="mdi6.help-circle-outline",
            label_text="Shared controller",
            enable_search=False,
            validator=_require_icon,
            on_saved=lambda value: logger.info("Shared icon saved: %s", value),
        )
    )
    layout.addWidget(form)

    buttons = QHBoxLayout()
    save_button = QPushButton("Save")
    save_button.clicked.connect(lambda: form.validate() and form.save())
    reset_button = QPushButton("Reset")
    reset_button.clicked.connect(form.reset)
    buttons.addStretch()
    buttons.addWidget(reset_button)
    buttons.addWidget(save_button)
    layout.addLayout(buttons)

    window.form = form
    window.setCentralWidget(central)
    return window


def main():
    """
    Initializes the QApplication, creates the demo window and starts the
    event loop.
    """
    parser = argparse.ArgumentParser(description="Icon picker demo")
    parser.add_argument("initial_icon", nargs="?", default="home")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    app = ExceptionSafeApplication(sys.argv[:1])
    app.setStyle("Fusion")

    main_win = build_window(args.initial_icon)
    main_win.show()

    # Start the application event loop
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
