from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLineEdit, QMessageBox
)
from PySide6.QtGui import QFont
from PySide6.QtCore import Qt

from choice_list import ChoiceListWidget
from constants import (
    APP_TITLE, MAX_CHOICES, MAX_INPUT_SIZE, SPACER_AMOUNT, TITLE_SIZE,
    WINDOW_HEIGHT, WINDOW_WIDTH
)
from wheel_window import WheelWidget


class MainWindow(QWidget):
    """Wheel on the left, choice editing and spin controls on the right."""

    def __init__(self, session):
        super().__init__()
        self.session = session
        self.setWindowTitle(APP_TITLE)
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.setMinimumSize(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.init_ui()
        self.refresh()

    def init_ui(self):
        main_layout = QHBoxLayout()

        self.wheel = WheelWidget(self.session)
        self.wheel.spin_finished.connect(self.on_spin_finished)
        main_layout.addWidget(self.wheel, 1)

        controls = QVBoxLayout()
        controls.setContentsMargins(20, 20, 20, 20)

        # Add
        input_layout = QHBoxLayout()
        self.name_input = QLineEdit()
        self.name_input.setMaxLength(MAX_INPUT_SIZE)
        self.name_input.textChanged.connect(self.update_controls)
        self.name_input.returnPressed.connect(self.add_choice)
        input_layout.addWidget(self.name_input)

        self.add_btn = QPushButton("Add")
        self.add_btn.clicked.connect(self.add_choice)
        input_layout.addWidget(self.add_btn)
        controls.addLayout(input_layout)
        controls.addSpacing(SPACER_AMOUNT)

        # Choices
        self.choice_list = ChoiceListWidget(self.session)
        # Queued so a row is never rebuilt from inside its own click handler
        self.choice_list.choices_changed.connect(self.refresh, Qt.QueuedConnection)
        controls.addWidget(self.choice_list, 1)
        controls.addSpacing(SPACER_AMOUNT)

        self.spin_btn = QPushButton("Spin the Wheel !")
        spin_font = QFont()
        spin_font.setPixelSize(TITLE_SIZE)
        self.spin_btn.setFont(spin_font)
        self.spin_btn.clicked.connect(self.spin)
        controls.addWidget(self.spin_btn)
        controls.addSpacing(SPACER_AMOUNT)

        self.clear_btn = QPushButton("Clear the wheel")
        clear_font = QFont()
        clear_font.setPixelSize(TITLE_SIZE // 2)
        self.clear_btn.setFont(clear_font)
        self.clear_btn.clicked.connect(self.clear_wheel)
        controls.addWidget(self.clear_btn)

        main_layout.addLayout(controls, 1)
        self.setLayout(main_layout)

    def can_add_choice(self):
        return self.session.can_add() and bool(self.name_input.text().strip())

    def update_controls(self):
        """Enable only the actions the session would accept."""
        can_type = self.session.can_add()
        self.name_input.setEnabled(can_type)
        if can_type:
            self.name_input.setPlaceholderText("Add a choice")
        else:
            self.name_input.setPlaceholderText(f"Max amount of choices reached : {MAX_CHOICES}")
        self.add_btn.setEnabled(self.can_add_choice())
        self.spin_btn.setEnabled(self.session.can_spin())

    def refresh(self):
        self.choice_list.update_list()
        self.update_controls()
        self.wheel.update()

    def add_choice(self):
        if not self.can_add_choice():
            return
        if self.session.add_choice(self.name_input.text()) is not None:
            self.name_input.clear()
        self.refresh()
        if self.name_input.isEnabled():
            self.name_input.setFocus()

    def spin(self):
        if self.wheel.start_spin():
            self.refresh()

    def clear_wheel(self):
        self.session.clear_all()
        self.wheel.stop()
        self.refresh()

    def on_spin_finished(self, choice_id):
        self.refresh()
        winner = self.session.winner
        if choice_id is None or winner is None:
            return
        self.show_winner(winner.label)

    def show_winner(self, label):
        """Result dialog: close it, or remove the winner from the wheel."""
        msg = QMessageBox(self)
        msg.setWindowTitle(APP_TITLE)
        msg.setText(label)
        font = msg.font()
        font.setPixelSize(TITLE_SIZE)
        msg.setFont(font)
        close_btn = msg.addButton("Close", QMessageBox.AcceptRole)
        remove_btn = msg.addButton("Remove the winner", QMessageBox.DestructiveRole)
        msg.setDefaultButton(close_btn)
        msg.setWindowModality(Qt.WindowModal)
        msg.exec()

        if msg.clickedButton() is remove_btn:
            self.session.remove_winner()
        else:
            self.session.acknowledge_winner()
        self.refresh()
