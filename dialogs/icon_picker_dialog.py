from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional
import logging

from PyQt6.QtCore import Qt, QSize, pyqtSignal
from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QGridLayout,
    QLabel,
    QLineEdit,
    QProgressBar,
    QScrollArea,
    QStackedWidget,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from utils.constants import (
    DEFAULT_CANCEL_TEXT,
    DEFAULT_DIALOG_TITLE,
    DEFAULT_SEARCH_HINT,
    EMPTY_ICON_SIZE,
    GLYPH_EMPTY,
    GLYPH_SEARCH,
    GRID_COLUMNS,
    GRID_SPACING,
    ICON_BUTTON_SIZE,
    ICON_SIZE,
    NO_RESULTS_TEXT,
    DialogState,
)
from utils.icon_filter import filter_icons
from utils.icon_manager import IconManager
from utils.icon_registry import IconDescriptor

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


@dataclass(frozen=True)
class IconPickerOptions:
    """Presentation options forwarded from a picker field to its dialog."""
    title: Optional[str] = None
    cancel_text: Optional[str] = None
    enable_search: bool = True
    search_hint: Optional[str] = None
    case_sensitive: bool = True


class _IconButton(QToolButton):
    """Flat button showing one icon, with its name as tooltip."""

    def __init__(self, descriptor: IconDescriptor, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.descriptor = descriptor
        self.setIcon(IconManager.icon_for(descriptor))
        self.setIconSize(QSize(ICON_SIZE, ICON_SIZE))
        self.setFixedSize(ICON_BUTTON_SIZE, ICON_BUTTON_SIZE)
        self.setToolTip(descriptor.name)
        self.setAutoRaise(True)


class IconPickerDialog(QDialog):
    """Modal browser over an icon registry.

    The dialog resolves exactly once: clicking an icon accepts it and emits
    :attr:`iconPicked`; cancel, escape or closing the window rejects it.
    :meth:`selected_icon` holds the outcome, ``None`` when cancelled.
    """

    iconPicked = pyqtSignal(object)

    _PAGE_LOADING = 0
    _PAGE_EMPTY = 1
    _PAGE_GRID = 2

    def __init__(
        self,
        registry: Mapping[str, IconDescriptor],
        options: Optional[IconPickerOptions] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._registry = registry
        self._options = options or IconPickerOptions()
        self._state = DialogState.LOADING
        self._selected: Optional[IconDescriptor] = None
        self._query = ""
        self._visible: List[IconDescriptor] = []
        self._buttons: Dict[str, _IconButton] = {}

        title = self._options.title or DEFAULT_DIALOG_TITLE
        self.setWindowTitle(title)

        root = QVBoxLayout(self)

        self.title_label = QLabel(title)
        self.title_label.setObjectName("IconPickerTitle")
        root.addWidget(self.title_label)

        self.search_edit: Optional[QLineEdit] = None
        if self._options.enable_search and len(registry) > 0:
            self.search_edit = QLineEdit()
            self.search_edit.setPlaceholderText(self._options.search_hint or DEFAULT_SEARCH_HINT)
            self.search_edit.addAction(
                IconManager.create_icon(GLYPH_SEARCH),
                QLineEdit.ActionPosition.LeadingPosition,
            )
            self.search_edit.setClearButtonEnabled(True)
            self.search_edit.textChanged.connect(self._apply_filter)
            root.addWidget(self.search_edit)

        self.stack = QStackedWidget()
        self.stack.addWidget(self._build_loading_page())
        self.stack.addWidget(self._build_empty_page())
        self.stack.addWidget(self._build_grid_page())
        root.addWidget(self.stack, 1)

        self.button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        self.cancel_button = self.button_box.button(QDialogButtonBox.StandardButton.Cancel)
        self.cancel_button.setText(self._options.cancel_text or DEFAULT_CANCEL_TEXT)
        self.button_box.rejected.connect(self.reject)
        root.addWidget(self.button_box)

        self.resize(480, 420)
        self._load_icons()

    # ---------------------- Public API ----------------------
    def state(self) -> DialogState:
        return self._state

    def selected_icon(self) -> Optional[IconDescriptor]:
        """The picked descriptor, or ``None`` if cancelled or still open."""
        return self._selected

    def query(self) -> str:
        return self._query

    def visible_icons(self) -> List[IconDescriptor]:
        return list(self._visible)

    def set_query(self, text: str) -> None:
        """Type ``text`` into the search box (or filter directly without one)."""
        if self.search_edit is not None:
            self.search_edit.setText(text)
        else:
            self._apply_filter(text)

    def pick(self, name: str) -> None:
        """Select the icon called ``name`` and close the dialog."""
        self._on_icon_clicked(self._registry[name])

    # ----------------------- Pages --------------------------
    def _build_loading_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        busy = QProgressBar()
        busy.setRange(0, 0)
        busy.setTextVisible(False)
        layout.addStretch()
        layout.addWidget(busy)
        layout.addStretch()
        return page

    def _build_empty_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        icon_label = QLabel()
        icon_label.setPixmap(IconManager.create_pixmap(GLYPH_EMPTY, EMPTY_ICON_SIZE))
        icon_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.empty_label = QLabel(NO_RESULTS_TEXT)
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addStretch()
        layout.addWidget(icon_label)
        layout.addWidget(self.empty_label)
        layout.addStretch()
        return page

    def _build_grid_page(self) -> QWidget:
        self.grid_container = QWidget()
        self.grid = QGridLayout(self.grid_container)
        self.grid.setSpacing(GRID_SPACING)
        self.grid.setContentsMargins(6, 6, 6, 6)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.grid_container)
        return scroll

    # ---------------------- Loading -------------------------
    def _load_icons(self) -> None:
        self.stack.setCurrentIndex(self._PAGE_LOADING)
        for descriptor in self._registry.values():
            btn = _IconButton(descriptor, self.grid_container)
            btn.clicked.connect(lambda _=False, d=descriptor: self._on_icon_clicked(d))
            self._buttons[descriptor.name] = btn
        self._visible = list(self._registry.values())
        self._state = DialogState.READY
        logger.debug("Icon picker ready with %d icons", len(self._visible))
        self._show_visible()

    # --------------------- Filtering ------------------------
    def _apply_filter(self, text: str) -> None:
        if self._state is not DialogState.READY:
            return
        self._query = text or ""
        self._visible = filter_icons(
            self._registry, self._query, case_sensitive=self._options.case_sensitive
        )
        self._show_visible()

    def _show_visible(self) -> None:
        if not self._visible:
            self.stack.setCurrentIndex(self._PAGE_EMPTY)
            return
        self._reflow_grid()
        self.stack.setCurrentIndex(self._PAGE_GRID)

    def _reflow_grid(self) -> None:
        names = {d.name for d in self._visible}
        for btn in self._buttons.values():
            self.grid.removeWidget(btn)
            btn.setHidden(btn.descriptor.name not in names)
        r = c = 0
        for descriptor in self._visible:
            self.grid.addWidget(
                self._buttons[descriptor.name],
                r,
                c,
                alignment=Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
            )
            c += 1
            if c >= GRID_COLUMNS:
                c = 0
                r += 1

    # ------------------- Selection handling ----------------
    def _on_icon_clicked(self, descriptor: IconDescriptor) -> None:
        if self._state is not DialogState.READY:
            return
        self._selected = descriptor
        self.accept()

    def done(self, result: int) -> None:
        if self._state is DialogState.CLOSED:
            return
        self._state = DialogState.CLOSED
        # Only _on_icon_clicked sets a selection, right before accepting.
        if self._selected is not None:
            self.iconPicked.emit(self._selected)
        super().done(result)
