"""
File list view widget - displays the entries of the current directory
"""
from PyQt6.QtWidgets import QHeaderView, QAbstractItemView, QTreeView, QFileIconProvider
from PyQt6.QtCore import pyqtSignal, Qt, QSortFilterProxyModel, QTimer
from PyQt6.QtGui import QStandardItemModel, QStandardItem, QKeyEvent
from typing import Optional

from core.file_operations import FileOperations
from utils.settings import Settings

COLUMNS = ["Name", "Type", "Size", "Modified"]
NAME_COLUMN = 0
IS_DIR_ROLE = Qt.ItemDataRole.UserRole + 1


class FileSortProxyModel(QSortFilterProxyModel):
    """Custom proxy model that prioritizes directories over files"""

    def lessThan(self, left, right):
        """Compare two items for sorting, always prioritizing directories"""
        source_model = self.sourceModel()

        if not source_model or not left.isValid() or not right.isValid():
            return super().lessThan(left, right)

        left_is_dir = bool(source_model.data(source_model.index(left.row(), NAME_COLUMN), IS_DIR_ROLE))
        right_is_dir = bool(source_model.data(source_model.index(right.row(), NAME_COLUMN), IS_DIR_ROLE))

        # Directories stay on top in both sort orders
        ascending = self.sortOrder() == Qt.SortOrder.AscendingOrder
        if left_is_dir and not right_is_dir:
            return ascending
        if not left_is_dir and right_is_dir:
            return not ascending

        # Size and Modified carry raw values for proper ordering
        left_raw = source_model.data(left, Qt.ItemDataRole.UserRole)
        right_raw = source_model.data(right, Qt.ItemDataRole.UserRole)
        if left_raw is not None and right_raw is not None:
            return left_raw < right_raw

        if left.column() == NAME_COLUMN:
            return left.data().lower() < right.data().lower()
        return super().lessThan(left, right)


class FileListView(QTreeView):
    """Detailed, single-selection list of directory entries"""

    item_activated = pyqtSignal(str)  # entry name
    context_menu_requested = pyqtSignal(str, object)  # entry name ('' for empty area), global position
    parent_navigation_requested = pyqtSignal()

    def __init__(self, parent=None, settings: Optional[Settings] = None):
        super().__init__(parent)
        self.settings = settings or Settings()
        self._icon_provider = QFileIconProvider()
        self.sort_column = NAME_COLUMN
        self.sort_order = Qt.SortOrder.AscendingOrder

        self.source_model = QStandardItemModel(self)
        self.proxy_model = FileSortProxyModel(self)
        self.proxy_model.setSourceModel(self.source_model)
        self.setModel(self.proxy_model)

        self.setup_ui()
        self.setup_connections()
        self.restore_column_widths()

    def setup_ui(self):
        """Initialize the UI"""
        self.source_model.setHorizontalHeaderLabels(COLUMNS)

        self.setRootIsDecorated(False)
        self.setAlternatingRowColors(True)
        self.setSortingEnabled(True)
        self.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)
        # Renames go through a modal dialog, never inline editing
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)

        header = self.header()
        if header:
            for column in range(len(COLUMNS)):
                header.setSectionResizeMode(column, QHeaderView.ResizeMode.Interactive)
            header.setMinimumSectionSize(50)
            header.setSortIndicatorShown(True)
            header.sortIndicatorChanged.connect(self.on_sort_changed)

    def setup_connections(self):
        """Set up signal connections"""
        self.doubleClicked.connect(self.on_item_activated)
        self.customContextMenuRequested.connect(self.on_context_menu_requested)
        self._pending_save = False
        self._save_debounce_ms = 120
        header = self.header()
        if header:
            header.sectionResized.connect(self._on_section_resized)

    # ---------------- Column widths ----------------
    def restore_column_widths(self):
        defaults = Settings.DEFAULT_COLUMN_WIDTHS
        stored = self.settings.get_column_widths(defaults)
        if len(stored) != len(COLUMNS):
            stored = defaults
        header = self.header()
        if not header:
            return
        for i, w in enumerate(stored):
            if w > 0:
                header.resizeSection(i, w)

    def _on_section_resized(self, *_):
        """Debounce user-initiated resize operations before saving."""
        if not self._pending_save:
            self._pending_save = True
            QTimer.singleShot(self._save_debounce_ms, self._commit_user_widths)

    def _commit_user_widths(self):
        self._pending_save = False
        self.save_column_widths()

    def save_column_widths(self):
        header = self.header()
        if not header:
            return
        widths = [header.sectionSize(i) for i in range(header.count())]
        if len(widths) == len(COLUMNS) and all(w > 4 for w in widths):
            self.settings.set_column_widths(widths)

    # ---------------- Population ----------------
    def set_entries(self, entries):
        """Replace the shown rows, keeping the previously selected name selected if it is still there"""
        previous = self.selected_name()

        self.source_model.removeRows(0, self.source_model.rowCount())
        for entry in entries:
            name_item = QStandardItem(entry.name)
            name_item.setEditable(False)
            name_item.setData(entry.is_directory, IS_DIR_ROLE)
            icon_type = QFileIconProvider.IconType.Folder if entry.is_directory else QFileIconProvider.IconType.File
            name_item.setIcon(self._icon_provider.icon(icon_type))

            type_item = QStandardItem("Directory" if entry.is_directory else "File")
            type_item.setEditable(False)

            size_item = QStandardItem("")
            size_item.setEditable(False)
            if not entry.is_directory and entry.size is not None:
                size_item.setText(FileOperations.format_size(entry.size))
                size_item.setData(entry.size, Qt.ItemDataRole.UserRole)

            modified_item = QStandardItem("")
            modified_item.setEditable(False)
            if entry.modified is not None:
                modified_item.setText(entry.modified.strftime("%Y-%m-%d %H:%M"))
                modified_item.setData(entry.modified, Qt.ItemDataRole.UserRole)

            self.source_model.appendRow([name_item, type_item, size_item, modified_item])

        self.proxy_model.sort(self.sort_column, self.sort_order)
        self.update_sort_indicator()

        if not (previous and self.select_item_by_name(previous)):
            self.select_first_item_if_none_selected()

    def on_sort_changed(self, logical_index, order):
        self.sort_column = logical_index
        self.sort_order = order

    def update_sort_indicator(self):
        header = self.header()
        if header:
            header.setSortIndicator(self.sort_column, self.sort_order)

    # ---------------- Selection ----------------
    def name_at(self, index) -> str:
        """Entry name for a proxy index, '' if the index is invalid"""
        if not index.isValid():
            return ""
        source_index = self.proxy_model.mapToSource(index)
        if not source_index.isValid():
            return ""
        name_item = self.source_model.item(source_index.row(), NAME_COLUMN)
        return name_item.text() if name_item else ""

    def selected_name(self) -> str:
        selection_model = self.selectionModel()
        if not selection_model:
            return ""
        rows = selection_model.selectedRows()
        if not rows:
            return ""
        return self.name_at(rows[0])

    def select_item_by_name(self, name):
        """Select an item by filename"""
        for row in range(self.source_model.rowCount()):
            item = self.source_model.item(row, NAME_COLUMN)
            if item and item.text() == name:
                proxy_index = self.proxy_model.mapFromSource(self.source_model.index(row, NAME_COLUMN))
                if proxy_index.isValid():
                    self.setCurrentIndex(proxy_index)
                    return True
        return False

    def select_first_item_if_none_selected(self):
        """Select the first item if no item is currently selected"""
        if self.proxy_model.rowCount() > 0 and not self.selected_name():
            first_index = self.proxy_model.index(0, 0)
            if first_index.isValid():
                self.setCurrentIndex(first_index)

    # ---------------- Events ----------------
    def on_item_activated(self, index):
        """Activation reports the row that was activated, whatever the selection says"""
        name = self.name_at(index)
        if name:
            self.item_activated.emit(name)

    def on_context_menu_requested(self, position):
        index = self.indexAt(position)
        name = self.name_at(index)
        if name:
            self.setCurrentIndex(index)
        viewport = self.viewport()
        global_pos = viewport.mapToGlobal(position) if viewport else self.mapToGlobal(position)
        self.context_menu_requested.emit(name, global_pos)

    def keyPressEvent(self, event: Optional[QKeyEvent]):
        """Enter activates the current row, Backspace goes to the parent folder"""
        if event is None:
            return
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and not event.modifiers():
            self.on_item_activated(self.currentIndex())
            event.accept()
            return
        if event.key() == Qt.Key.Key_Backspace and not event.modifiers():
            self.parent_navigation_requested.emit()
            event.accept()
            return
        super().keyPressEvent(event)
