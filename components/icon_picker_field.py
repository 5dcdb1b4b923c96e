"""Read-only text field that picks its value from an icon collection.

Clicking the field opens an :class:`~dialogs.icon_picker_dialog.IconPickerDialog`.
A picked icon becomes the field text (the icon name) and the field value (a
serialized :class:`~utils.icon_registry.PickerValue`). On mount, text that
names a registry icon is resolved the same way, without notification.

The text lives in a :class:`~components.text_controller.TextController`. The
field creates and disposes its own controller unless the host passes one in,
in which case the host keeps ownership and the field only listens to it.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional, Union
import logging

from PyQt6.QtCore import Qt, QSize, pyqtSignal
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from components.form import FormField, SaveHook, Validator
from components.text_controller import TextController
from dialogs.icon_picker_dialog import IconPickerDialog, IconPickerOptions
from utils.constants import (
    ERROR_COLOR,
    GLYPH_DROP_DOWN,
    LEADING_ICON_SIZE,
    ControllerOwnership,
)
from utils.exceptions import ConfigurationError
from utils.icon_manager import IconManager
from utils.icon_registry import (
    IconDescriptor,
    IconRegistry,
    PickerValue,
    material_icon_registry,
)

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class _ClickableLineEdit(QLineEdit):
    """A read-only QLineEdit that emits a signal when clicked."""
    clicked = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()
            event.accept()
        else:
            super().mouseReleaseEvent(event)


def _coerce_registry(registry: Optional[Mapping]) -> IconRegistry:
    if registry is None:
        return material_icon_registry()
    if isinstance(registry, IconRegistry):
        return registry
    return IconRegistry(registry.values())


class IconPickerField(FormField):
    """Form field whose value is chosen from an icon picker dialog."""

    def __init__(
        self,
        controller: Optional[TextController] = None,
        initial_value: Optional[str] = None,
        registry: Optional[Mapping] = None,
        icon: Union[str, QIcon, None] = None,
        label_text: Optional[str] = None,
        title: Optional[str] = None,
        cancel_text: Optional[str] = None,
        enable_search: bool = True,
        search_hint: Optional[str] = None,
        on_changed: Optional[Callable[[str], None]] = None,
        on_saved: Optional[SaveHook] = None,
        validator: Optional[Validator] = None,
        autovalidate: bool = False,
        enabled: bool = True,
        read_only: bool = False,
        parent: Optional[QWidget] = None,
    ):
        if controller is not None and initial_value:
            raise ConfigurationError(
                "IconPickerField accepts either a controller or an initial_value, not both"
            )
        super().__init__(
            initial_value=controller.text() if controller is not None else (initial_value or ""),
            validator=validator,
            on_saved=on_saved,
            autovalidate=autovalidate,
            enabled=enabled,
            parent=parent,
        )
        self._initial_value = initial_value
        self._registry = _coerce_registry(registry)
        self._icon = icon
        self._options = IconPickerOptions(
            title=title,
            cancel_text=cancel_text,
            enable_search=enable_search,
            search_hint=search_hint,
        )
        self._on_changed = on_changed
        self._read_only = read_only
        self._controller: Optional[TextController] = None
        self._ownership: Optional[ControllerOwnership] = None
        self._resolved: Optional[IconDescriptor] = None
        self._active_dialog: Optional[IconPickerDialog] = None
        self._applying_pick = False
        self._disposed = False

        self._build_ui(label_text)
        self._attach_controller(controller)
        self._resolve_initial_icon()

    # ------------------------ UI ----------------------------
    def _build_ui(self, label_text: Optional[str]) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.label = QLabel(label_text or "")
        self.label.setVisible(bool(label_text))
        layout.addWidget(self.label)

        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(6)

        self.leading_icon_label = QLabel()
        self.leading_icon_label.setFixedSize(LEADING_ICON_SIZE, LEADING_ICON_SIZE)
        if self._icon is not None:
            self.leading_icon_label.setPixmap(
                IconManager.to_icon(self._icon).pixmap(LEADING_ICON_SIZE, LEADING_ICON_SIZE)
            )
        else:
            self.leading_icon_label.hide()
        row.addWidget(self.leading_icon_label)

        self.line_edit = _ClickableLineEdit()
        self.line_edit.clicked.connect(self._on_activate)
        row.addWidget(self.line_edit, 1)

        self.drop_button = QToolButton()
        self.drop_button.setIcon(IconManager.create_icon(GLYPH_DROP_DOWN))
        self.drop_button.setIconSize(QSize(LEADING_ICON_SIZE, LEADING_ICON_SIZE))
        self.drop_button.setAutoRaise(True)
        self.drop_button.clicked.connect(self._on_activate)
        row.addWidget(self.drop_button)

        layout.addLayout(row)

        self.error_label = QLabel()
        self.error_label.setStyleSheet(f"color: {ERROR_COLOR};")
        self.error_label.hide()
        layout.addWidget(self.error_label)
        self.errorChanged.connect(self._on_error_changed)

    def _on_error_changed(self, text: str) -> None:
        self.error_label.setText(text)
        self.error_label.setVisible(bool(text))

    def _update_leading_icon(self, descriptor: IconDescriptor) -> None:
        self.leading_icon_label.setPixmap(
            IconManager.create_pixmap(descriptor.glyph, LEADING_ICON_SIZE)
        )

    # ------------------- Public accessors -------------------
    def controller(self) -> TextController:
        return self._controller

    def ownership(self) -> ControllerOwnership:
        return self._ownership

    def registry(self) -> IconRegistry:
        return self._registry

    def text(self) -> str:
        return self._controller.text()

    def resolved_icon(self) -> Optional[IconDescriptor]:
        """The icon matched at mount or picked last, if any."""
        return self._resolved

    def picker_value(self) -> Optional[PickerValue]:
        """The current value parsed as a :class:`PickerValue`, if it is one."""
        return PickerValue.from_json(self.value())

    def active_dialog(self) -> Optional[IconPickerDialog]:
        return self._active_dialog

    def is_disposed(self) -> bool:
        return self._disposed

    # ------------------ Controller handling -----------------
    def _attach_controller(self, controller: Optional[TextController], seed: Optional[str] = None) -> None:
        if controller is None:
            text = seed if seed is not None else (self._initial_value or "")
            self._controller = TextController(text, self)
            self._ownership = ControllerOwnership.OWNED
        else:
            self._controller = controller
            self._ownership = ControllerOwnership.BORROWED
        self._controller.textChanged.connect(self._handle_controller_changed)
        self.line_edit.setText(self._controller.text())

    def _detach_controller(self) -> None:
        self._controller.textChanged.disconnect(self._handle_controller_changed)
        if self._ownership is ControllerOwnership.OWNED:
            self._controller.dispose()

    def set_controller(self, controller: Optional[TextController]) -> None:
        """Switch to another borrowed controller, or back to an owned one.

        Leaving a borrowed controller for an owned one seeds the new
        controller with the old controller's text. The text is resolved
        against the registry again in every case. Ignored once disposed.
        """
        if self._disposed:
            logger.debug("Ignoring set_controller on a disposed icon picker")
            return
        current = self._controller if self._ownership is ControllerOwnership.BORROWED else None
        if controller is not current:
            old_text = self._controller.text()
            self._detach_controller()
            self._attach_controller(controller, seed=old_text)
            logger.debug("Icon picker controller is now %s", self._ownership.value)
        self._resolve_initial_icon()

    def set_registry(self, registry: Mapping) -> None:
        if self._disposed:
            logger.debug("Ignoring set_registry on a disposed icon picker")
            return
        self._registry = _coerce_registry(registry)
        self._resolve_initial_icon()

    def _handle_controller_changed(self, text: str) -> None:
        if self.line_edit.text() != text:
            self.line_edit.setText(text)
        if self._applying_pick or self._ownership is not ControllerOwnership.BORROWED:
            return
        if text != self.value():
            self.did_change(text)

    def _resolve_initial_icon(self) -> None:
        text = self._controller.text()
        if not text:
            return
        descriptor = self._registry.match(text)
        if descriptor is None:
            logger.debug("No icon matches %r", text)
            return
        self.set_value(PickerValue.from_descriptor(descriptor).to_json())
        self._resolved = descriptor
        if self._icon is not None:
            self._update_leading_icon(descriptor)

    # ---------------------- Dialog --------------------------
    def _on_activate(self) -> None:
        if self._read_only or self._disposed or not self.isEnabled():
            return
        self.show_icon_picker_dialog()

    def show_icon_picker_dialog(self) -> IconPickerDialog:
        """Open the picker window-modally and return it.

        The field is updated once the dialog finishes with a pick. Only one
        dialog is open per field; a second call returns the open one.
        """
        if self._active_dialog is not None:
            self._active_dialog.raise_()
            return self._active_dialog

        dialog = IconPickerDialog(self._registry, self._options, self)
        dialog.finished.connect(lambda _result, d=dialog: self._on_dialog_finished(d))
        self._active_dialog = dialog
        dialog.open()
        return dialog

    def _on_dialog_finished(self, dialog: IconPickerDialog) -> None:
        if dialog is self._active_dialog:
            self._active_dialog = None
        descriptor = dialog.selected_icon()
        dialog.deleteLater()
        if descriptor is None:
            return
        if self._disposed:
            logger.debug("Discarding icon %r picked after dispose", descriptor.name)
            return
        self._apply_pick(descriptor)

    def _apply_pick(self, descriptor: IconDescriptor) -> None:
        value = PickerValue.from_descriptor(descriptor).to_json()
        self._applying_pick = True
        try:
            self._controller.set_text(descriptor.name)
        finally:
            self._applying_pick = False
        self.line_edit.setText(descriptor.name)
        self._resolved = descriptor
        if self._icon is not None:
            self._update_leading_icon(descriptor)

        self.did_change(value)
        if self._on_changed is not None:
            self._on_changed(value)

    # ------------------- Form contract ----------------------
    def reset(self) -> None:
        """Restore the text the field was mounted with.

        For a borrowed controller that is the controller's text at mount.
        The resolved icon is left as is.
        """
        super().reset()
        self._controller.set_text(self._initial_form_value)

    def dispose(self) -> None:
        """Detach from the controller, disposing it if owned. Runs once."""
        if self._disposed:
            return
        self._disposed = True
        self._detach_controller()
