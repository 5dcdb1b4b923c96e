# dialogs/__init__.py
# Makes the dialogs directory a Python package and simplifies imports.

from .icon_picker_dialog import IconPickerDialog, IconPickerOptions
