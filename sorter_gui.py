import os
import sys
from PyQt5.QtWidgets import (
    QApplication, QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel,
    QLineEdit, QFileDialog, QTextEdit, QMessageBox, QTableWidget,
    QTableWidgetItem, QHeaderView, QAbstractItemView, QSizePolicy
)
from sorter import EXTENSION_FOLDERS, FatalSortError, scan_and_sort

STYLE = """
QWidget { background-color: #202225; color: #e8e8e8; }
QHeaderView::section { background-color: #2f3136; padding: 3px; border: none; }
QTableWidget, QLineEdit, QTextEdit { background-color: #2b2d31; border: 1px solid #3a3c42; }
QPushButton { background-color: #4f7cff; padding: 5px 14px; border-radius: 4px; }
QLabel { font-weight: bold; }
"""


class FileSorterGUI(QWidget):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("dirsort")
        self.resize(1000, 700)
        self.setMinimumSize(700, 400)

        self.setStyleSheet(STYLE)

        main_layout = QHBoxLayout()
        self.setLayout(main_layout)

        sidebar = QVBoxLayout()
        sidebar.addWidget(QLabel("Sorting Rules:"))

        self.table = QTableWidget(0, 2)
        self.table.setHorizontalHeaderLabels(["File Extension", "Folder Name"])
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        sidebar.addWidget(self.table)

        main_area = QVBoxLayout()

        folder_layout = QHBoxLayout()
        self.folder_input = QLineEdit()
        self.folder_input.setPlaceholderText("Select a folder to sort...")
        browse_btn = QPushButton("Browse")
        browse_btn.clicked.connect(self.browse_folder)
        folder_layout.addWidget(self.folder_input)
        folder_layout.addWidget(browse_btn)
        main_area.addLayout(folder_layout)

        self.sort_btn = QPushButton("Sort Files")
        self.sort_btn.clicked.connect(self.sort_files)
        main_area.addWidget(self.sort_btn)

        main_area.addWidget(QLabel("Log Output:"))
        self.log_output = QTextEdit()
        self.log_output.setReadOnly(True)
        main_area.addWidget(self.log_output)

        sidebar_widget = QWidget()
        sidebar_widget.setLayout(sidebar)
        sidebar_widget.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Expanding)
        main_layout.addWidget(sidebar_widget)

        main_widget = QWidget()
        main_widget.setLayout(main_area)
        main_layout.addWidget(main_widget)

        self.populate_table()

    def browse_folder(self):
        folder = QFileDialog.getExistingDirectory(self, "Select Folder")
        if folder:
            self.folder_input.setText(folder)

    def populate_table(self):
        self.table.setRowCount(0)
        for ext, folder in sorted(EXTENSION_FOLDERS.items(), key=lambda x: (x[1], x[0])):
            row_pos = self.table.rowCount()
            self.table.insertRow(row_pos)
            self.table.setItem(row_pos, 0, QTableWidgetItem(ext))
            self.table.setItem(row_pos, 1, QTableWidgetItem(folder))

    def sort_files(self):
        folder = self.folder_input.text().strip()
        if not folder or not os.path.isdir(folder):
            QMessageBox.critical(self, "Error", "Please select a valid folder.")
            return False

        self.log("Sorting started...")
        try:
            summary = scan_and_sort(folder, report=self.log)
        except FatalSortError as e:
            self.log(f"Error: {e}")
            QMessageBox.critical(self, "Sorting stopped", str(e))
            return False

        self.log("\n--- Summary ---")
        for k, v in summary.items():
            self.log(f"{k}: {v}")
        return True

    def log(self, message):
        self.log_output.append(message)


def main():
    app = QApplication(sys.argv)
    gui = FileSorterGUI()
    gui.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
