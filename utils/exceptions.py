"""Exceptions raised by the icon picker widgets."""


class ConfigurationError(ValueError):
    """Raised when a widget is constructed with conflicting options.

    For example an :class:`~components.icon_picker_field.IconPickerField`
    given both an external controller and an initial value.
    """
