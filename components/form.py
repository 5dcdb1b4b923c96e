"""Form field contract and an optional form container.

:class:`FormField` is the small capability set a host form relies on:
a current value, a validator, a save hook, reset and error text.
:class:`Form` broadcasts validate/save/reset to the fields added to it.
Fields do not require a form. A field shown inside a form joins it.
"""

from __future__ import annotations

from typing import Callable, List, Optional
import logging

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())

Validator = Callable[[str], Optional[str]]
SaveHook = Callable[[str], None]


class FormField(QWidget):
    """Base widget holding a string value with validation and save hooks."""

    valueChanged = pyqtSignal(str)
    errorChanged = pyqtSignal(str)

    def __init__(
        self,
        initial_value: str = "",
        validator: Optional[Validator] = None,
        on_saved: Optional[SaveHook] = None,
        autovalidate: bool = False,
        enabled: bool = True,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._initial_form_value = initial_value or ""
        self._value = self._initial_form_value
        self._error_text: Optional[str] = None
        self._validator = validator
        self._on_saved = on_saved
        self._autovalidate = autovalidate
        self.setEnabled(enabled)

    # ---------------------- Value ----------------------
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        """Set the value without notifying listeners or validating."""
        self._value = value or ""

    def did_change(self, value: str) -> None:
        """Set the value, autovalidate if enabled and emit ``valueChanged``."""
        self._value = value or ""
        if self._autovalidate:
            self.validate()
        self.valueChanged.emit(self._value)

    # -------------------- Validation --------------------
    def validate(self) -> bool:
        """Run the validator and update the error text. Returns validity."""
        error = self._validator(self._value) if self._validator else None
        self._set_error_text(error)
        return error is None

    def error_text(self) -> Optional[str]:
        return self._error_text

    def has_error(self) -> bool:
        return self._error_text is not None

    def _set_error_text(self, error: Optional[str]) -> None:
        if error == self._error_text:
            return
        self._error_text = error
        self.errorChanged.emit(error or "")

    # ------------------- Save / reset -------------------
    def save(self) -> None:
        if self._on_saved is not None:
            self._on_saved(self._value)

    def reset(self) -> None:
        """Restore the initial value and clear any error."""
        self._value = self._initial_form_value
        self._set_error_text(None)

    def showEvent(self, event):
        super().showEvent(event)
        # Fields placed anywhere inside a form join it when first shown
        form = Form.of(self)
        if form is not None:
            form.register(self)


class Form(QWidget):
    """
    Container that validates, saves or resets all of its fields at once.
    """
    changed = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._fields: List[FormField] = []
        self.field_layout = QVBoxLayout(self)

    @staticmethod
    def of(widget: Optional[QWidget]) -> Optional["Form"]:
        """Return the closest enclosing form of ``widget``, if any."""
        current = widget.parentWidget() if widget is not None else None
        while current is not None:
            if isinstance(current, Form):
                return current
            current = current.parentWidget()
        return None

    def add_field(self, field: FormField) -> FormField:
        """Add ``field`` to the form layout and register it."""
        self.field_layout.addWidget(field)
        self.register(field)
        return field

    def register(self, field: FormField) -> None:
        if field in self._fields:
            return
        self._fields.append(field)
        field.valueChanged.connect(self._on_field_changed)

    def unregister(self, field: FormField) -> None:
        if field not in self._fields:
            return
        self._fields.remove(field)
        field.valueChanged.disconnect(self._on_field_changed)

    def fields(self) -> List[FormField]:
        return list(self._fields)

    def validate(self) -> bool:
        """Validate every field; returns True only if all are valid."""
        results = [field.validate() for field in self._fields]
        return all(results)

    def save(self) -> None:
        for field in self._fields:
            field.save()

    def reset(self) -> None:
        for field in self._fields:
            field.reset()
        self.changed.emit()

    def dispose(self) -> None:
        """Dispose fields that support it and forget them."""
        for field in list(self._fields):
            dispose = getattr(field, "dispose", None)
            if callable(dispose):
                dispose()
            self.unregister(field)

    def _on_field_changed(self, _value: str) -> None:
        logger.debug("Form field changed")
        self.changed.emit()
