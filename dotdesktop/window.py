import logging
import os
from pathlib import Path

from PySide6.QtCore import Qt, QSize, QRect, QUrl
from PySide6.QtGui import (QIcon, QAction, QPainter, QColor, QFont, QKeySequence,
                           QDesktopServices)
from PySide6.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
                               QListWidget, QListWidgetItem, QLabel, QLineEdit,
                               QPushButton, QFileDialog, QComboBox, QTextEdit,
                               QMessageBox, QSplitter, QFrame, QGroupBox,
                               QTabWidget, QStyledItemDelegate, QStyle,
                               QPlainTextEdit, QScrollArea, QCheckBox, QToolBar)

from . import config, forms, launch, session, storage
from .entry import DesktopEntry, EntryType
from .sync import FIELDS, SyncController

logger = logging.getLogger(__name__)

PATH_ROLE = Qt.UserRole
NAME_ROLE = Qt.UserRole + 1
FILENAME_ROLE = Qt.UserRole + 2
OVERRIDE_ROLE = Qt.UserRole + 3
ICON_ROLE = Qt.UserRole + 4


# --- LOG TAB HANDLER ---
class LogViewHandler(logging.Handler):
    def __init__(self, view):
        super().__init__()
        self.view = view
        self.setFormatter(logging.Formatter("%(levelname)s %(message)s"))

    def emit(self, record):
        self.view.append(self.format(record))
        sb = self.view.verticalScrollBar()
        sb.setValue(sb.maximum())


# --- CUSTOM DELEGATE FOR MODERN LIST ---
class AppListDelegate(QStyledItemDelegate):
    def sizeHint(self, option, index):
        return QSize(option.rect.width(), 60)

    def paint(self, painter, option, index):
        name = index.data(NAME_ROLE)
        filename = index.data(FILENAME_ROLE)
        is_override = index.data(OVERRIDE_ROLE)
        icon_source = index.data(ICON_ROLE)

        painter.save()
        painter.setRenderHint(QPainter.Antialiasing)

        rect = option.rect
        if option.state & QStyle.State_Selected:
            painter.fillRect(rect, QColor("#3584e4"))
        elif option.state & QStyle.State_MouseOver:
            painter.fillRect(rect, QColor("#383838"))

        # Icon: absolute path or theme name
        icon = QIcon()
        if icon_source:
            if os.path.isabs(icon_source) and os.path.exists(icon_source):
                icon = QIcon(icon_source)
            else:
                icon = QIcon.fromTheme(icon_source)
        if icon.isNull():
            icon = QIcon.fromTheme("application-x-executable")
        icon_rect = QRect(rect.left() + 12, rect.top() + 14, 32, 32)
        icon.paint(painter, icon_rect)

        text_left = icon_rect.right() + 12
        name_font = QFont(painter.font())
        name_font.setBold(True)
        painter.setFont(name_font)
        painter.setPen(QColor("#ffffff"))
        painter.drawText(QRect(text_left, rect.top() + 10, rect.width() - text_left - 90, 20),
                         Qt.AlignLeft | Qt.AlignVCenter, name or filename)

        painter.setFont(QFont(option.font))
        painter.setPen(QColor("#aaaaaa"))
        painter.drawText(QRect(text_left, rect.top() + 30, rect.width() - text_left - 90, 20),
                         Qt.AlignLeft | Qt.AlignVCenter, filename)

        if is_override:
            painter.setPen(QColor("#57e389"))
            painter.drawText(QRect(rect.right() - 85, rect.top(), 75, rect.height()),
                             Qt.AlignRight | Qt.AlignVCenter, "Override")

        painter.restore()


class DesktopEntryEditor(QMainWindow):
    def __init__(self, open_path=None):
        super().__init__()
        self.setWindowTitle(config.APP_TITLE)
        self.resize(1200, 850)

        self.apply_modern_theme()

        self.state = session.initial_state()

        # Tabs for Editor vs Logs
        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)
        self.build_toolbar()

        # --- TAB 1: EDITOR ---
        editor_tab = QWidget()
        editor_layout = QHBoxLayout(editor_tab)
        editor_layout.setContentsMargins(15, 15, 15, 15)

        splitter = QSplitter(Qt.Horizontal)
        splitter.setHandleWidth(2)
        editor_layout.addWidget(splitter)
        splitter.addWidget(self.build_list_panel())

        self.editor_tabs = QTabWidget()
        self.editor_tabs.addTab(self.build_form_panel(), "Form")
        self.source_edit = QPlainTextEdit()
        self.source_edit.setObjectName("SourceView")
        self.editor_tabs.addTab(self.source_edit, "Source")
        splitter.addWidget(self.editor_tabs)
        splitter.setSizes([400, 800])

        self.tabs.addTab(editor_tab, "Editor")

        # --- TAB 2: LOGS ---
        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setObjectName("LogView")
        self.tabs.addTab(self.log_view, "Logs")
        self.log_handler = LogViewHandler(self.log_view)
        logging.getLogger("dotdesktop").addHandler(self.log_handler)

        self.sync = SyncController(self.read_fields, self.write_fields,
                                   self.source_edit.toPlainText, self.write_source,
                                   on_synced=self.on_synced)
        self.sync.load(self.state.entry)
        self.connect_sync_signals()

        self.dispatch(session.refresh)
        if open_path:
            self.dispatch(session.open_entry, open_path)

    def closeEvent(self, event):
        logging.getLogger("dotdesktop").removeHandler(self.log_handler)
        super().closeEvent(event)

    def apply_modern_theme(self):
        # Dark Theme Styling (GNOME-like)
        self.setStyleSheet("""
            QMainWindow { background-color: #242424; }
            QWidget {
                color: #ffffff;
                font-family: 'Segoe UI', 'Noto Sans', sans-serif;
                font-size: 10pt;
            }
            QTabWidget::pane { border: 1px solid #3d3d3d; background: #2d2d2d; }
            QTabBar::tab {
                background: #1e1e1e; color: #888; padding: 10px 20px;
                border-top-left-radius: 4px; border-top-right-radius: 4px;
            }
            QTabBar::tab:selected { background: #2d2d2d; color: #fff; border-bottom: 2px solid #3584e4; }
            QLineEdit, QComboBox, QPlainTextEdit {
                background-color: #383838; border: 1px solid #4a4a4a;
                border-radius: 6px; padding: 8px; color: white;
            }
            QLineEdit:focus, QComboBox:focus, QPlainTextEdit:focus {
                border: 1px solid #3584e4; background-color: #404040;
            }
            QPlainTextEdit#SourceView { font-family: monospace; }
            QTextEdit#LogView {
                background-color: #1e1e1e; color: #00ff00; font-family: monospace; padding: 10px;
            }
            QListWidget { background-color: #2d2d2d; border: 1px solid #3d3d3d; border-radius: 6px; outline: none; }
            QPushButton {
                background-color: #444; border: 1px solid #555; border-radius: 6px;
                padding: 6px 12px; color: white;
            }
            QPushButton:hover { background-color: #555; }
            QPushButton:pressed { background-color: #333; }
            QGroupBox {
                border: 1px solid #444; border-radius: 6px; margin-top: 10px;
                padding-top: 15px; background-color: #2a2a2a;
            }
            QGroupBox::title {
                subcontrol-origin: margin; subcontrol-position: top left;
                padding: 0 5px; color: #3584e4; font-weight: bold; left: 10px;
            }
            QToolBar { background: #1e1e1e; border: none; spacing: 6px; padding: 4px; }
            QStatusBar { background: #1e1e1e; color: #aaa; }
        """)

    # --- LAYOUT ---
    def build_toolbar(self):
        toolbar = QToolBar("Main")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        def add(text, icon_name, slot, shortcut=None):
            action = QAction(QIcon.fromTheme(icon_name), text, self)
            if shortcut is not None:
                action.setShortcut(QKeySequence(shortcut))
            action.triggered.connect(lambda *_: slot())
            toolbar.addAction(action)
            return action

        add("New", "document-new", lambda: self.dispatch(session.new_entry), QKeySequence.New)
        add("Open", "document-open", self.open_file, QKeySequence.Open)
        add("Save", "document-save", lambda: self.dispatch(session.save_entry), QKeySequence.Save)
        add("Save As", "document-save-as", self.save_as, QKeySequence.SaveAs)
        toolbar.addSeparator()
        self.delete_action = add("Delete User Override", "edit-delete", self.delete_override)
        add("Refresh", "view-refresh", lambda: self.dispatch(session.refresh), QKeySequence.Refresh)
        add("Open Folder", "folder-open", self.open_containing_folder)
        toolbar.addSeparator()
        add("Toggle Fullscreen", "view-fullscreen", self.toggle_fullscreen, QKeySequence.FullScreen)
        add("Quit", "application-exit", self.close, QKeySequence.Quit)

    def build_list_panel(self):
        left_panel = QWidget()
        left_layout = QVBoxLayout(left_panel)
        left_layout.setContentsMargins(0, 0, 5, 0)
        left_layout.setSpacing(10)

        self.search_bar = QLineEdit()
        self.search_bar.setPlaceholderText("Search applications...")
        self.search_bar.textChanged.connect(self.filter_list)
        left_layout.addWidget(self.search_bar)

        self.app_list = QListWidget()
        self.list_delegate = AppListDelegate(self.app_list)
        self.app_list.setItemDelegate(self.list_delegate)
        self.app_list.setFrameShape(QFrame.NoFrame)
        self.app_list.currentItemChanged.connect(self.load_selected_app)
        left_layout.addWidget(self.app_list)
        return left_panel

    def build_form_panel(self):
        right_scroll = QScrollArea()
        right_scroll.setWidgetResizable(True)
        right_scroll.setFrameShape(QFrame.NoFrame)

        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(10, 0, 15, 0)
        layout.setSpacing(20)
        right_scroll.setWidget(panel)

        self.info_label = QLabel("New entry")
        self.info_label.setAlignment(Qt.AlignCenter)
        self.info_label.setStyleSheet("font-size: 16px; font-weight: bold; color: #888; margin-bottom: 5px;")
        layout.addWidget(self.info_label)

        # Core Information
        core_group = QGroupBox("Core Information")
        core_layout = QVBoxLayout()
        self.type_combo = QComboBox()
        self.type_combo.setEditable(True)
        self.type_combo.addItems(EntryType.names())
        self.add_field_layout("Type:", self.type_combo, core_layout)
        self.name_edit = self.create_field("Application Name:", core_layout)
        self.generic_name_edit = self.create_field("Generic Name:", core_layout)
        self.comment_edit = self.create_field("Tooltip / Comment:", core_layout)

        icon_layout = QHBoxLayout()
        self.icon_edit = QLineEdit()
        self.icon_edit.setPlaceholderText("Icon name or path")
        browse_icon_btn = QPushButton("Browse")
        browse_icon_btn.setFixedWidth(80)
        browse_icon_btn.clicked.connect(self.browse_icon)
        icon_layout.addWidget(self.icon_edit)
        icon_layout.addWidget(browse_icon_btn)
        self.add_field_layout("Icon:", icon_layout, core_layout)
        core_group.setLayout(core_layout)
        layout.addWidget(core_group)

        # Execution
        exec_group = QGroupBox("Execution")
        exec_layout = QVBoxLayout()
        exec_row = QHBoxLayout()
        self.exec_edit = QLineEdit()
        self.exec_edit.setPlaceholderText("Command to execute...")
        browse_exec_btn = QPushButton("Select...")
        browse_exec_btn.setFixedWidth(80)
        browse_exec_btn.clicked.connect(self.browse_exec)
        test_run_btn = QPushButton("Test Run")
        test_run_btn.setToolTip("Launch the app with these flags immediately")
        test_run_btn.setIcon(QIcon.fromTheme("media-playback-start"))
        test_run_btn.setFixedWidth(100)
        test_run_btn.clicked.connect(self.test_run_app)
        exec_row.addWidget(self.exec_edit)
        exec_row.addWidget(browse_exec_btn)
        exec_row.addWidget(test_run_btn)
        self.add_field_layout("Exec Command:", exec_row, exec_layout)

        injector_group = QGroupBox("Overrides Presets")
        injector_layout = QVBoxLayout()
        self.detected_label = QLabel("Toolkit not detected automatically.")
        self.detected_label.setStyleSheet("color: #888; font-style: italic;")
        injector_layout.addWidget(self.detected_label)
        preset_layout = QHBoxLayout()
        self.preset_combo = QComboBox()
        self.preset_combo.addItems(launch.PRESETS)
        apply_preset_btn = QPushButton("Inject")
        apply_preset_btn.setFixedWidth(80)
        apply_preset_btn.clicked.connect(self.apply_preset)
        preset_layout.addWidget(self.preset_combo, 1)
        preset_layout.addWidget(apply_preset_btn)
        injector_layout.addLayout(preset_layout)
        injector_group.setLayout(injector_layout)
        exec_layout.addWidget(injector_group)

        self.try_exec_edit = self.create_field("TryExec:", exec_layout)
        self.path_edit = self.create_field("Working Directory (Path):", exec_layout)
        self.url_edit = self.create_field("URL (Type=Link):", exec_layout)
        self.terminal_check = QCheckBox("Run in Terminal")
        exec_layout.addWidget(self.terminal_check)
        exec_group.setLayout(exec_layout)
        layout.addWidget(exec_group)

        # System & Integration
        meta_group = QGroupBox("System & Integration")
        meta_layout = QVBoxLayout()
        self.categories_edit = self.create_field("Categories (semicolon separated):", meta_layout)
        self.mime_edit = self.create_field("MimeTypes (File Associations):", meta_layout)
        self.keywords_edit = self.create_field("Keywords:", meta_layout)
        self.only_show_in_edit = self.create_field("OnlyShowIn:", meta_layout)
        self.not_show_in_edit = self.create_field("NotShowIn:", meta_layout)
        self.actions_edit = self.create_field("Actions:", meta_layout)

        check_layout = QHBoxLayout()
        self.nodisplay_check = QCheckBox("Hide from App Menu (NoDisplay)")
        self.startup_check = QCheckBox("Show Launch Notification (StartupNotify)")
        check_layout.addWidget(self.nodisplay_check)
        check_layout.addWidget(self.startup_check)
        meta_layout.addLayout(check_layout)
        meta_group.setLayout(meta_layout)
        layout.addWidget(meta_group)

        # Translations & extra keys, one "key=value" per line
        i18n_group = QGroupBox("Translations & Extra Keys")
        i18n_layout = QVBoxLayout()
        self.localized_name_edit = self.create_text_box("Name[lang] (lang=value):", i18n_layout)
        self.localized_generic_name_edit = self.create_text_box("GenericName[lang] (lang=value):", i18n_layout)
        self.localized_comment_edit = self.create_text_box("Comment[lang] (lang=value):", i18n_layout)
        self.extra_edit = self.create_text_box("Extra keys (Key=value):", i18n_layout)
        i18n_group.setLayout(i18n_layout)
        layout.addWidget(i18n_group)

        layout.addStretch()
        return right_scroll

    def create_field(self, label_text, parent_layout):
        edit = QLineEdit()
        self.add_field_layout(label_text, edit, parent_layout)
        return edit

    def create_text_box(self, label_text, parent_layout):
        edit = QPlainTextEdit()
        edit.setFixedHeight(70)
        self.add_field_layout(label_text, edit, parent_layout)
        return edit

    def add_field_layout(self, label_text, widget, parent_layout):
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(5)
        lbl = QLabel(label_text)
        lbl.setStyleSheet("font-weight: bold; color: #ccc;")
        layout.addWidget(lbl)
        if isinstance(widget, (QHBoxLayout, QVBoxLayout)):
            layout.addLayout(widget)
        else:
            layout.addWidget(widget)
        parent_layout.addWidget(container)

    # --- FIELDS <-> ENTRY ---
    def line_edits(self):
        return [self.name_edit, self.generic_name_edit, self.comment_edit, self.icon_edit,
                self.exec_edit, self.try_exec_edit, self.path_edit, self.url_edit,
                self.categories_edit, self.mime_edit, self.keywords_edit,
                self.only_show_in_edit, self.not_show_in_edit, self.actions_edit]

    def text_boxes(self):
        return [self.localized_name_edit, self.localized_generic_name_edit,
                self.localized_comment_edit, self.extra_edit]

    def connect_sync_signals(self):
        # Qt passes the new value along; the controller reads widgets itself
        def on_fields(*_):
            self.sync.fields_changed()

        for edit in self.line_edits():
            edit.textChanged.connect(on_fields)
        for box in self.text_boxes():
            box.textChanged.connect(on_fields)
        for check in (self.terminal_check, self.nodisplay_check, self.startup_check):
            check.toggled.connect(on_fields)
        self.type_combo.currentTextChanged.connect(on_fields)
        self.source_edit.textChanged.connect(lambda: self.sync.text_changed())

    def read_fields(self):
        return DesktopEntry(
            entry_type=self.type_combo.currentText().strip(),
            name=self.name_edit.text(),
            generic_name=forms.optional_text(self.generic_name_edit.text()),
            comment=forms.optional_text(self.comment_edit.text()),
            exec=self.exec_edit.text(),
            icon=forms.optional_text(self.icon_edit.text()),
            try_exec=forms.optional_text(self.try_exec_edit.text()),
            working_directory=forms.optional_text(self.path_edit.text()),
            url=forms.optional_text(self.url_edit.text()),
            terminal=self.terminal_check.isChecked(),
            no_display=self.nodisplay_check.isChecked(),
            startup_notify=self.startup_check.isChecked(),
            categories=forms.split_list(self.categories_edit.text()),
            mime_types=forms.split_list(self.mime_edit.text()),
            keywords=forms.split_list(self.keywords_edit.text()),
            only_show_in=forms.split_list(self.only_show_in_edit.text()),
            not_show_in=forms.split_list(self.not_show_in_edit.text()),
            actions=forms.split_list(self.actions_edit.text()),
            localized_name=forms.parse_pairs(self.localized_name_edit.toPlainText(), require_value=True),
            localized_generic_name=forms.parse_pairs(self.localized_generic_name_edit.toPlainText(), require_value=True),
            localized_comment=forms.parse_pairs(self.localized_comment_edit.toPlainText(), require_value=True),
            extra=forms.parse_pairs(self.extra_edit.toPlainText()),
        )

    def write_fields(self, entry):
        self.type_combo.setCurrentText(entry.entry_type)
        self.name_edit.setText(entry.name)
        self.generic_name_edit.setText(entry.generic_name or "")
        self.comment_edit.setText(entry.comment or "")
        self.exec_edit.setText(entry.exec)
        self.icon_edit.setText(entry.icon or "")
        self.try_exec_edit.setText(entry.try_exec or "")
        self.path_edit.setText(entry.working_directory or "")
        self.url_edit.setText(entry.url or "")
        self.terminal_check.setChecked(entry.terminal)
        self.nodisplay_check.setChecked(entry.no_display)
        self.startup_check.setChecked(entry.startup_notify)
        self.categories_edit.setText(forms.join_list(entry.categories))
        self.mime_edit.setText(forms.join_list(entry.mime_types))
        self.keywords_edit.setText(forms.join_list(entry.keywords))
        self.only_show_in_edit.setText(forms.join_list(entry.only_show_in))
        self.not_show_in_edit.setText(forms.join_list(entry.not_show_in))
        self.actions_edit.setText(forms.join_list(entry.actions))
        self.localized_name_edit.setPlainText(forms.format_pairs(entry.localized_name))
        self.localized_generic_name_edit.setPlainText(forms.format_pairs(entry.localized_generic_name))
        self.localized_comment_edit.setPlainText(forms.format_pairs(entry.localized_comment))
        self.extra_edit.setPlainText(forms.format_pairs(entry.extra))
        self.update_toolkit_label(entry)

    def write_source(self, text):
        self.source_edit.setPlainText(text)

    def on_synced(self, origin, entry, text):
        if origin == FIELDS:
            self.state, _ = session.fields_changed(self.state, entry, text)
        else:
            self.state, _ = session.text_changed(self.state, text, entry)
        self.update_title()

    # --- COMMANDS ---
    def dispatch(self, command, *args, **kwargs):
        previous = self.state
        state, effects = command(self.state, *args, **kwargs)
        self.state, messages = session.run_effects(state, effects)

        if self.state.entry is not previous.entry:
            # New / Open replaced the entry; show it on both sides
            self.sync.load(self.state.entry)
        if self.state.files != previous.files:
            self.populate_list()
        self.statusBar().showMessage(self.state.status)
        self.update_title()

        for message in messages:
            if message.level == "error":
                QMessageBox.critical(self, message.title, message.text)
            else:
                QMessageBox.information(self, message.title, message.text)

    def update_title(self):
        name = os.path.basename(str(self.state.path)) if self.state.path else "Untitled"
        marker = "*" if self.state.modified else ""
        self.setWindowTitle(f"{marker}{name} - {config.APP_TITLE}")

        if self.state.path is None:
            self.info_label.setText("New entry")
            self.info_label.setStyleSheet("color: #888; font-weight: bold; font-size: 14px;")
        elif self.state.is_user_override:
            self.info_label.setText(f"Editing: {name} (User Override)")
            self.info_label.setStyleSheet("color: #57e389; font-weight: bold; font-size: 14px;")
        else:
            self.info_label.setText(f"Editing: {name} (System Default)")
            self.info_label.setStyleSheet("color: #e0e0e0; font-weight: bold; font-size: 14px;")
        self.delete_action.setEnabled(self.state.is_user_override)

    def populate_list(self):
        # Rebuilding must not re-open whatever becomes current
        self.app_list.blockSignals(True)
        self.app_list.clear()
        for path in self.state.files:
            name, icon_name = storage.describe_file(path)
            item = QListWidgetItem()
            item.setData(PATH_ROLE, str(path))
            item.setData(NAME_ROLE, name)
            item.setData(FILENAME_ROLE, path.name)
            item.setData(OVERRIDE_ROLE, storage.is_user_override(path))
            item.setData(ICON_ROLE, icon_name)
            # For searching/filtering
            item.setText(f"{name} {path.name}")
            self.app_list.addItem(item)
        self.app_list.blockSignals(False)
        self.filter_list(self.search_bar.text())

    def filter_list(self, text):
        for i in range(self.app_list.count()):
            item = self.app_list.item(i)
            item.setHidden(text.lower() not in item.text().lower())

    def load_selected_app(self, current, previous=None):
        if current is None:
            return
        self.dispatch(session.open_entry, current.data(PATH_ROLE))

    def open_file(self):
        start = str(self.state.path.parent) if self.state.path else config.user_applications_dir()
        fname, _ = QFileDialog.getOpenFileName(self, "Open .desktop", start,
                                               "Desktop Entries (*.desktop);;All Files (*)")
        if fname:
            self.dispatch(session.open_entry, fname)

    def save_as(self):
        start = os.path.join(config.user_applications_dir(),
                             storage.sanitize_file_name(self.state.entry.name) + config.DESKTOP_SUFFIX)
        fname, _ = QFileDialog.getSaveFileName(self, "Save .desktop", start,
                                               "Desktop Entries (*.desktop)")
        if fname:
            # The dialog already asked about replacing an existing file
            self.dispatch(session.save_entry, Path(fname), True)

    def delete_override(self):
        if not self.state.is_user_override:
            return
        ret = QMessageBox.question(self, "Confirm Restore",
                                   "Are you sure you want to delete your custom override?\n"
                                   "This will revert the app to system defaults.",
                                   QMessageBox.Yes | QMessageBox.No)
        if ret == QMessageBox.Yes:
            self.dispatch(session.delete_entry)

    def open_containing_folder(self):
        folder = self.state.path.parent if self.state.path else Path(config.user_applications_dir())
        QDesktopServices.openUrl(QUrl.fromLocalFile(str(folder)))

    def toggle_fullscreen(self):
        if self.isFullScreen():
            self.showNormal()
        else:
            self.showFullScreen()

    # --- EXEC HELPERS ---
    def browse_exec(self):
        fname, _ = QFileDialog.getOpenFileName(self, "Select Executable", "/usr/bin", "All Files (*)")
        if fname:
            self.exec_edit.setText(fname)

    def browse_icon(self):
        fname, _ = QFileDialog.getOpenFileName(self, "Select Icon", "/usr/share/icons",
                                               "Images (*.png *.svg *.xpm *.ico);;All Files (*)")
        if fname:
            self.icon_edit.setText(fname)

    def update_toolkit_label(self, entry):
        preset_idx, toolkit_name = launch.guess_toolkit(entry)
        self.preset_combo.setCurrentIndex(preset_idx)
        if preset_idx > 0:
            self.detected_label.setText(f"Auto-detected toolkit: {toolkit_name}")
            self.detected_label.setStyleSheet("color: #2e8b57; font-weight: bold; margin-bottom: 5px;")
        else:
            self.detected_label.setText("Toolkit not detected automatically.")
            self.detected_label.setStyleSheet("color: #666; font-style: italic; margin-bottom: 5px;")

    def apply_preset(self):
        idx = self.preset_combo.currentIndex()
        if idx == 0:
            return
        self.exec_edit.setText(launch.apply_preset(self.exec_edit.text(), idx))
        QMessageBox.information(self, "Updated", "Exec command updated. Review it before saving!")

    def test_run_app(self):
        try:
            proc = launch.try_launch(self.exec_edit.text())
        except OSError as e:
            QMessageBox.critical(self, "Launch Error", str(e))
            return
        if proc is not None:
            cmd = launch.strip_field_codes(self.exec_edit.text())
            QMessageBox.information(self, "Test Run", f"Launching:\n{cmd}\n\nCheck your taskbar!")
