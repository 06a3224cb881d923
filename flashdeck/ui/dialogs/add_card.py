"""Dialog for adding a flashcard by hand."""

from PySide6.QtWidgets import (QDialog, QVBoxLayout, QHBoxLayout, QPushButton,
                              QLabel, QLineEdit, QMessageBox)
from PySide6.QtGui import QFont

from ...engine.errors import ValidationError


class AddCardDialog(QDialog):
    """Question and answer fields with Save/Cancel.

    Saving calls ``on_save(question, answer)``; the dialog stays open while
    it raises :class:`ValidationError`.
    """

    def __init__(self, on_save, parent=None):
        super().__init__(parent)
        self.on_save = on_save
        self.setWindowTitle("Add Flashcard")
        self.setModal(True)
        self.resize(430, 260)
        self.setup_ui()

    def setup_ui(self):
        """Set up the dialog UI."""
        layout = QVBoxLayout()
        field_font = QFont("Arial")
        field_font.setPointSize(18)
        field_font.setBold(True)

        question_label = QLabel("Enter the question:")
        question_label.setFont(field_font)
        layout.addWidget(question_label)

        self.question_input = QLineEdit()
        self.question_input.setFont(field_font)
        layout.addWidget(self.question_input)

        answer_label = QLabel("Enter the answer:")
        answer_label.setFont(field_font)
        layout.addWidget(answer_label)

        self.answer_input = QLineEdit()
        self.answer_input.setFont(field_font)
        self.answer_input.returnPressed.connect(self.save)
        layout.addWidget(self.answer_input)

        button_layout = QHBoxLayout()
        button_layout.addStretch()

        self.save_btn = QPushButton("Save")
        self.save_btn.clicked.connect(self.save)
        self.save_btn.setDefault(True)
        button_layout.addWidget(self.save_btn)

        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.reject)
        button_layout.addWidget(self.cancel_btn)

        button_layout.addStretch()
        layout.addLayout(button_layout)

        self.setLayout(layout)

    def save(self):
        try:
            self.on_save(self.question_input.text(), self.answer_input.text())
        except ValidationError as e:
            QMessageBox.warning(self, "Missing Field", e.message)
            target = self.question_input if e.field == "question" else self.answer_input
            target.setFocus()
            return
        self.accept()
