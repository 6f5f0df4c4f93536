from PySide6.QtWidgets import (
    QWidget, QHBoxLayout, QLabel, QPushButton, QListWidget,
    QListWidgetItem, QInputDialog, QLineEdit
)
from PySide6.QtCore import Qt, Signal

from constants import MAX_INPUT_SIZE, MAX_SEGMENT_WEIGHT, PALETTE
from layout import segment_color_index


class ItemWidget(QWidget):
    """One row of the choice list."""
    increment_clicked = Signal()
    decrement_clicked = Signal()
    rename_clicked = Signal()
    remove_clicked = Signal()

    def __init__(self, label, weight, color, share, enabled):
        super().__init__()
        layout = QHBoxLayout()
        layout.setContentsMargins(6, 4, 6, 4)

        self.color_lbl = QLabel()
        self.color_lbl.setFixedSize(16, 16)
        self.color_lbl.setStyleSheet("background-color: rgb({}, {}, {}); border: 1px solid #555;".format(*color))
        layout.addWidget(self.color_lbl)

        self.label_lbl = QLabel(label)
        self.label_lbl.setToolTip(label)
        self.label_lbl.setMinimumWidth(80)
        layout.addWidget(self.label_lbl, 1)

        self.weight_lbl = QLabel(f"Weight : {weight} ({share:.1f}%)")
        layout.addWidget(self.weight_lbl)

        self.plus_btn = QPushButton("+")
        self.plus_btn.setEnabled(enabled and weight < MAX_SEGMENT_WEIGHT)
        self.plus_btn.clicked.connect(lambda: self.increment_clicked.emit())
        self.minus_btn = QPushButton("-")
        self.minus_btn.setEnabled(enabled and weight > 1)
        self.minus_btn.clicked.connect(lambda: self.decrement_clicked.emit())
        self.rename_btn = QPushButton("✏")
        self.rename_btn.setEnabled(enabled)
        self.rename_btn.clicked.connect(lambda: self.rename_clicked.emit())
        self.remove_btn = QPushButton("🗑")
        self.remove_btn.setEnabled(enabled)
        self.remove_btn.clicked.connect(lambda: self.remove_clicked.emit())

        for btn in (self.plus_btn, self.minus_btn, self.rename_btn, self.remove_btn):
            btn.setFixedWidth(32)
            layout.addWidget(btn)

        self.setLayout(layout)


class ChoiceListWidget(QListWidget):
    """Editable list of the session's choices."""
    choices_changed = Signal()

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session
        self.setSelectionMode(QListWidget.NoSelection)

    def update_list(self):
        """Rebuild every row from the registry."""
        scroll_bar = self.verticalScrollBar()
        current_scroll = scroll_bar.value()

        self.clear()
        choices = self.session.choices
        total_weight = self.session.registry.total_weight()
        enabled = self.session.can_edit()

        for i, choice in enumerate(choices):
            share = choice.weight / total_weight * 100 if total_weight else 0
            color = PALETTE[segment_color_index(i, len(choices))]
            widget = ItemWidget(choice.label, choice.weight, color, share, enabled)
            widget.increment_clicked.connect(lambda cid=choice.id: self.on_increment(cid))
            widget.decrement_clicked.connect(lambda cid=choice.id: self.on_decrement(cid))
            widget.rename_clicked.connect(lambda cid=choice.id: self.on_rename(cid))
            widget.remove_clicked.connect(lambda cid=choice.id: self.on_remove(cid))

            list_item = QListWidgetItem()
            list_item.setSizeHint(widget.sizeHint())
            list_item.setData(Qt.UserRole, choice.id)
            self.addItem(list_item)
            self.setItemWidget(list_item, widget)

        scroll_bar.setValue(current_scroll)

    def on_increment(self, choice_id):
        self.session.increment_weight(choice_id)
        self.choices_changed.emit()

    def on_decrement(self, choice_id):
        self.session.decrement_weight(choice_id)
        self.choices_changed.emit()

    def on_remove(self, choice_id):
        self.session.remove_choice(choice_id)
        self.choices_changed.emit()

    def on_rename(self, choice_id):
        choice = self.session.registry.get(choice_id)
        if choice is None:
            return
        dialog = QInputDialog(self)
        dialog.setWindowTitle("Edit this choice")
        dialog.setLabelText("Rename the choice")
        dialog.setTextValue(choice.label)
        dialog.setOkButtonText("Confirm")
        dialog.setCancelButtonText("Cancel")
        line_edit = dialog.findChild(QLineEdit)
        if line_edit is not None:
            line_edit.setMaxLength(MAX_INPUT_SIZE)
        if dialog.exec():
            self.session.rename_choice(choice_id, dialog.textValue())
            self.choices_changed.emit()
