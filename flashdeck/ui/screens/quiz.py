"""Quiz screen for Flashdeck."""

from PySide6.QtWidgets import (QWidget, QVBoxLayout, QHBoxLayout, QPushButton,
                              QLabel, QMessageBox)
from PySide6.QtCore import Signal
from PySide6.QtGui import QFont

from ..dialogs.check_answer import CheckAnswerDialog
from ..widgets.card_display import CardDisplay
from ...engine.errors import NoMoreCardsError


class QuizScreen(QWidget):
    """Step through the cards and check answers."""

    # Signals
    quiz_finished = Signal(object)  # QuizResult

    def __init__(self, session, font_size: int = 24):
        super().__init__()
        self.session = session
        self.font_size = font_size
        self.setup_ui()

    def setup_ui(self):
        """Set up the quiz screen UI."""
        layout = QVBoxLayout()

        self.score_label = QLabel("Score: 0/0")
        score_font = QFont("Arial")
        score_font.setPointSize(18)
        score_font.setBold(True)
        self.score_label.setFont(score_font)
        layout.addWidget(self.score_label)

        self.card_display = CardDisplay(self.font_size)
        layout.addWidget(self.card_display, stretch=1)

        button_layout = QHBoxLayout()
        button_font = QFont("Arial")
        button_font.setPointSize(16)
        button_font.setBold(True)

        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self.show_next)
        self.prev_button = QPushButton("Previous")
        self.prev_button.clicked.connect(self.show_previous)
        self.check_button = QPushButton("Check Answer")
        self.check_button.clicked.connect(self.check_answer)
        self.return_button = QPushButton("Return")
        self.return_button.clicked.connect(self.finish)

        self.buttons = [self.next_button, self.prev_button, self.check_button, self.return_button]
        for button in self.buttons:
            button.setFont(button_font)
            button.setMinimumHeight(40)
            button_layout.addWidget(button)

        layout.addLayout(button_layout)
        self.setLayout(layout)

    def start(self):
        """Begin a fresh quiz pass."""
        self.session.enter_quiz()
        self.refresh()

    def refresh(self):
        quiz = self.session.quiz
        self.card_display.show_view(self.session.card_view())
        if quiz is not None:
            self.score_label.setText(f"Score: {quiz.score}/{quiz.total}")
            self.check_button.setEnabled(quiz.current_card is not None and not quiz.is_locked)

    def set_buttons_enabled(self, enabled: bool):
        for button in self.buttons:
            button.setEnabled(enabled)

    def show_no_more_cards(self, error: NoMoreCardsError):
        self.set_buttons_enabled(False)
        try:
            QMessageBox.warning(self, "Warning", error.message)
        finally:
            self.set_buttons_enabled(True)

    def show_next(self):
        try:
            self.session.next()
        except NoMoreCardsError as e:
            self.show_no_more_cards(e)
        self.refresh()

    def show_previous(self):
        try:
            self.session.previous()
        except NoMoreCardsError as e:
            self.show_no_more_cards(e)
        self.refresh()

    def check_answer(self):
        if not self.session.cards:
            QMessageBox.critical(self, "Error", "No flashcards available.")
            return

        dialog = CheckAnswerDialog(self.session.submit_answer, self)
        dialog.answered.connect(lambda _outcome: self.refresh())
        self.set_buttons_enabled(False)
        try:
            dialog.exec()
        finally:
            self.set_buttons_enabled(True)
            self.refresh()

    def finish(self):
        result = self.session.exit_quiz()
        QMessageBox.information(self, "Score", f"Final score is {result}")
        self.quiz_finished.emit(result)
