# components/text_controller.py
# Observable text holder shared between a form field and its host.

from PyQt6.QtCore import QObject, pyqtSignal


class TextController(QObject):
    """
    Holds the text shown by a field and notifies listeners on change.

    A field either creates its own controller (and disposes it) or borrows
    one from its host, in which case the host keeps ownership.
    """
    textChanged = pyqtSignal(str)

    def __init__(self, text: str = "", parent=None):
        super().__init__(parent)
        self._text = text or ""
        self._disposed = False

    def text(self) -> str:
        return self._text

    def set_text(self, text: str):
        """Replace the text, emitting ``textChanged`` if it differs."""
        text = text or ""
        if text == self._text:
            return
        self._text = text
        self.textChanged.emit(text)

    def clear(self):
        self.set_text("")

    def is_disposed(self) -> bool:
        return self._disposed

    def dispose(self):
        """Release the controller. Safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        self.deleteLater()
