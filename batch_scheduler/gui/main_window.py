"""
Main window for the batch scheduler GUI.
"""

import sys
from typing import List, Optional
from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QSpinBox, QLineEdit, QFileDialog, QMessageBox,
    QTableWidget, QTableWidgetItem, QHeaderView, QDialog, QFrame
)

from ..backend.core import ProcessRecord
from ..backend.errors import SchedulerError
from ..backend.session import SchedulingSession, create_session

POLICY_BUTTONS = [
    ("priority", "Priority Scheduling"),
    ("sjf", "Shortest Job First (SJF)"),
    ("fcfs", "First Come First Serve (FCFS)"),
]


# Process creation dialog
class ProcessDialog(QDialog):
    def __init__(self, pid: int, capacity: int, parent=None):
        super().__init__(parent)
        self.setWindowTitle(f"Process {pid}")
        layout = QVBoxLayout(self)

        # Name
        name_layout = QHBoxLayout()
        name_layout.addWidget(QLabel("Name:"))
        self.name = QLineEdit(f"P{pid}")
        name_layout.addWidget(self.name)
        layout.addLayout(name_layout)

        # Size
        size_layout = QHBoxLayout()
        size_layout.addWidget(QLabel("Size (KB):"))
        self.size_kb = QSpinBox()
        self.size_kb.setRange(0, 1_000_000)
        self.size_kb.setValue(64)
        size_layout.addWidget(self.size_kb)
        layout.addLayout(size_layout)

        # Burst Time
        burst_layout = QHBoxLayout()
        burst_layout.addWidget(QLabel("Burst time (ms):"))
        self.burst_time = QSpinBox()
        self.burst_time.setRange(0, 1_000_000)
        self.burst_time.setValue(10)
        burst_layout.addWidget(self.burst_time)
        layout.addLayout(burst_layout)

        # Priority
        priority_layout = QHBoxLayout()
        priority_layout.addWidget(QLabel(f"Priority (1-{capacity}):"))
        self.priority = QSpinBox()
        self.priority.setRange(-1_000, 1_000)
        self.priority.setValue(1)
        priority_layout.addWidget(self.priority)
        layout.addLayout(priority_layout)

        # OK/Cancel buttons
        button_layout = QHBoxLayout()
        self.ok_button = QPushButton("OK")
        self.ok_button.clicked.connect(self.accept)
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)
        button_layout.addWidget(self.ok_button)
        button_layout.addWidget(self.cancel_button)
        layout.addLayout(button_layout)


class ProcessTable(QTableWidget):
    """Processes in their current order."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setColumnCount(6)
        self.setHorizontalHeaderLabels(["#", "Name", "ID", "Size (KB)", "Priority", "Burst (ms)"])
        header = self.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.verticalHeader().setVisible(False)
        self.setAlternatingRowColors(True)

    def show_records(self, records: List[ProcessRecord]) -> None:
        self.setRowCount(len(records))
        for row, p in enumerate(records):
            values = [str(row + 1), p.name, str(p.pid), str(p.size_kb), str(p.priority), str(p.burst_time)]
            for column, text in enumerate(values):
                self.setItem(row, column, QTableWidgetItem(text))


class EventTable(QTableWidget):
    """Tabular view of policy applications."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setColumnCount(4)
        self.setHorizontalHeaderLabels(["Policy", "Comparisons", "Swaps", "Order (IDs)"])
        header = self.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.verticalHeader().setVisible(False)
        self.setAlternatingRowColors(True)

    def add_event(self, policy: str, comparisons: int, swaps: int, order: List[int]) -> None:
        row = self.rowCount()
        self.insertRow(row)
        self.setItem(row, 0, QTableWidgetItem(policy))
        self.setItem(row, 1, QTableWidgetItem(str(comparisons)))
        self.setItem(row, 2, QTableWidgetItem(str(swaps)))
        self.setItem(row, 3, QTableWidgetItem(" ".join(str(pid) for pid in order)))
        self.scrollToBottom()


class MainWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Batch Process Scheduler")
        self.setMinimumSize(900, 640)
        self.session: Optional[SchedulingSession] = None

        self.setStyleSheet("""
            QMainWindow {
                background: #eef3fb;
            }
            QPushButton {
                background-color: #1167b1;
                color: #ffffff;
                font-weight: 600;
                padding: 10px 18px;
                border-radius: 8px;
            }
            QPushButton:disabled {
                background-color: #c4d4ea;
                color: #eef2f9;
            }
            QSpinBox, QLineEdit {
                padding: 6px 10px;
                border-radius: 6px;
                border: 1px solid #c7d2e4;
                background: #ffffff;
            }
            QFrame#controlFrame {
                background: #ffffff;
                border-radius: 16px;
                border: 1px solid #dbe3f0;
            }
        """)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        main_layout = QVBoxLayout(self.central_widget)
        main_layout.setContentsMargins(18, 18, 18, 18)
        main_layout.setSpacing(16)

        title_label = QLabel("Batch Process Scheduler")
        title_label.setStyleSheet("font-size:24px;font-weight:800;color:#0b2447;")
        main_layout.addWidget(title_label)

        # Session controls
        controls = QFrame()
        controls.setObjectName("controlFrame")
        controls_layout = QHBoxLayout(controls)
        controls_layout.addWidget(QLabel("Number of processes:"))
        self.count_spin = QSpinBox()
        self.count_spin.setRange(1, 999)
        self.count_spin.setValue(3)
        controls_layout.addWidget(self.count_spin)
        self.new_button = QPushButton("New Session")
        self.new_button.clicked.connect(self.new_session)
        controls_layout.addWidget(self.new_button)
        self.add_button = QPushButton("Add Process")
        self.add_button.clicked.connect(self.show_add_process_dialog)
        controls_layout.addWidget(self.add_button)
        self.export_button = QPushButton("Export Log")
        self.export_button.clicked.connect(self.export_log)
        controls_layout.addWidget(self.export_button)
        controls_layout.addStretch()
        main_layout.addWidget(controls)

        # Policy buttons
        policy_layout = QHBoxLayout()
        self.policy_buttons = {}
        for name, text in POLICY_BUTTONS:
            button = QPushButton(text)
            button.clicked.connect(lambda _checked=False, n=name: self.apply_policy(n))
            policy_layout.addWidget(button)
            self.policy_buttons[name] = button
        main_layout.addLayout(policy_layout)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color:#4b5d7d;font-size:13px;")
        main_layout.addWidget(self.status_label)

        self.process_table = ProcessTable()
        main_layout.addWidget(self.process_table, stretch=3)
        self.event_table = EventTable()
        main_layout.addWidget(self.event_table, stretch=1)

        self.new_session()

    def new_session(self) -> None:
        """Discard the current session and start an empty one."""
        self.session = create_session(self.count_spin.value())
        self.process_table.setRowCount(0)
        self.event_table.setRowCount(0)
        self._refresh_controls()

    def show_add_process_dialog(self) -> None:
        """Show dialog to add the next process."""
        pid = len(self.session) + 1
        dialog = ProcessDialog(pid, self.session.capacity, self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return
        try:
            self.session.insert(
                pid,
                dialog.name.text(),
                dialog.size_kb.value(),
                dialog.burst_time.value(),
                dialog.priority.value(),
            )
        except SchedulerError as e:
            QMessageBox.warning(self, "Invalid process", str(e))
            return
        self.process_table.show_records(self.session.snapshot())
        self._refresh_controls()

    def apply_policy(self, name: str) -> None:
        try:
            report = self.session.apply_policy(name)
        except SchedulerError as e:
            QMessageBox.warning(self, "Cannot schedule", str(e))
            return
        records = self.session.snapshot()
        self.process_table.show_records(records)
        self.event_table.add_event(self.session.policies.get(name).label, report.comparisons, report.swaps, [p.pid for p in records])
        self.status_label.setText(f"After {self.session.policies.get(name).label} Scheduling")

    def export_log(self) -> None:
        path, _ = QFileDialog.getSaveFileName(self, "Export event log", "scheduler_log.json", "JSON (*.json)")
        if not path:
            return
        self.session.logger.export_json(path)
        self.status_label.setText(f"Event log written to {path}")

    def _refresh_controls(self) -> None:
        full = self.session.is_populated
        self.add_button.setEnabled(not full)
        for button in self.policy_buttons.values():
            button.setEnabled(full)
        self.status_label.setText(f"{len(self.session)} of {self.session.capacity} processes entered")


def main() -> None:
    app = QApplication(sys.argv)
    app.setStyle("Fusion")
    window = MainWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
