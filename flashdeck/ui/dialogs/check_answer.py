"""Dialog for answering one quiz card."""

from PySide6.QtWidgets import (QDialog, QVBoxLayout, QHBoxLayout, QPushButton,
                              QLabel, QLineEdit, QTextEdit)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont

from ...engine.errors import AlreadyAnsweredError


class CheckAnswerDialog(QDialog):
    """Answer entry with a single Check per opening."""

    # Signals
    answered = Signal(object)  # Outcome

    def __init__(self, submit, parent=None):
        super().__init__(parent)
        self.submit = submit
        self.setWindowTitle("Check Answer")
        self.setModal(True)
        self.resize(450, 300)
        self.setup_ui()

    def setup_ui(self):
        layout = QVBoxLayout()
        font = QFont("Arial")
        font.setPointSize(18)
        font.setBold(True)

        instruction = QLabel("Enter your answer:")
        instruction.setFont(font)
        instruction.setAlignment(Qt.AlignCenter)
        layout.addWidget(instruction)

        self.answer_input = QLineEdit()
        self.answer_input.setFont(font)
        self.answer_input.returnPressed.connect(self.check)
        layout.addWidget(self.answer_input)

        button_layout = QHBoxLayout()
        button_layout.addStretch()
        self.check_btn = QPushButton("Check")
        self.check_btn.setMinimumWidth(200)
        self.check_btn.clicked.connect(self.check)
        button_layout.addWidget(self.check_btn)
        button_layout.addStretch()
        layout.addLayout(button_layout)

        self.result_text = QTextEdit()
        self.result_text.setFont(font)
        self.result_text.setReadOnly(True)
        self.result_text.setMaximumHeight(100)
        layout.addWidget(self.result_text)

        self.setLayout(layout)

    def check(self):
        if not self.check_btn.isEnabled():
            return
        try:
            outcome = self.submit(self.answer_input.text())
        except AlreadyAnsweredError as e:
            self.show_result(e.message, "#e67e22")
        else:
            if outcome.is_correct:
                self.show_result("Correct!", "#27ae60")
            else:
                self.show_result(f"Incorrect! Correct answer: {outcome.correct_answer}", "#c0392b")
            self.answered.emit(outcome)

        self.check_btn.setEnabled(False)
        self.answer_input.setReadOnly(True)

    def show_result(self, text: str, color: str):
        self.result_text.setPlainText(text)
        self.result_text.setStyleSheet(f"QTextEdit {{ color: {color}; }}")
