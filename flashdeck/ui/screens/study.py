"""Study screen for Flashdeck."""

import logging

from PySide6.QtWidgets import (QWidget, QVBoxLayout, QGridLayout, QPushButton,
                              QLabel, QMessageBox)
from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont

from ..dialogs.add_card import AddCardDialog
from ..widgets.card_display import CardDisplay
from ...engine.errors import NoMoreCardsError

logger = logging.getLogger(__name__)


class StudyScreen(QWidget):
    """Browse, add and delete flashcards."""

    # Signals
    quiz_requested = Signal()

    def __init__(self, session, font_size: int = 24):
        super().__init__()
        self.session = session
        self.font_size = font_size
        self.setup_ui()
        self.refresh()

    def setup_ui(self):
        """Set up the study screen UI."""
        layout = QVBoxLayout()

        self.card_display = CardDisplay(self.font_size)
        layout.addWidget(self.card_display, stretch=1)

        button_grid = QGridLayout()
        button_grid.setSpacing(10)
        button_font = QFont("Arial")
        button_font.setPointSize(16)
        button_font.setBold(True)

        self.next_button = QPushButton("Next")
        self.next_button.clicked.connect(self.show_next)
        self.prev_button = QPushButton("Previous")
        self.prev_button.clicked.connect(self.show_previous)
        self.flip_button = QPushButton("Flip")
        self.flip_button.clicked.connect(self.flip)
        self.add_button = QPushButton("Add Question")
        self.add_button.clicked.connect(self.open_add_dialog)
        self.remove_button = QPushButton("Delete Question")
        self.remove_button.clicked.connect(self.remove_current)
        self.remove_all_button = QPushButton("Delete All")
        self.remove_all_button.clicked.connect(self.remove_all)
        self.quiz_button = QPushButton("Quiz Mode")
        self.quiz_button.clicked.connect(self.quiz_requested.emit)

        self.buttons = [self.next_button, self.prev_button, self.flip_button, self.add_button,
                        self.remove_button, self.remove_all_button, self.quiz_button]
        for i, button in enumerate(self.buttons):
            button.setFont(button_font)
            button.setMinimumHeight(40)
            button_grid.addWidget(button, i // 4, i % 4)

        self.best_label = QLabel()
        label_font = QFont("Arial")
        label_font.setPointSize(18)
        label_font.setBold(True)
        self.best_label.setFont(label_font)
        self.best_label.setAlignment(Qt.AlignCenter)
        button_grid.addWidget(self.best_label, 1, 3)

        layout.addLayout(button_grid)
        self.setLayout(layout)

    def refresh(self):
        """Redraw the current card and the best score."""
        self.card_display.show_view(self.session.card_view())
        self.best_label.setText(f"Best score: {self.session.best}")

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

    def flip(self):
        self.session.flip()
        self.refresh()

    def open_add_dialog(self):
        dialog = AddCardDialog(self.session.add_card, self)
        if dialog.exec():
            logger.debug("Card added from dialog")
            self.refresh()

    def remove_current(self):
        if not self.session.cards:
            return
        self.session.remove_current()
        self.refresh()

    def remove_all(self):
        if not self.session.cards:
            return
        reply = QMessageBox.question(self, "Delete All",
                                     "Delete every flashcard? This cannot be undone.",
                                     QMessageBox.Yes | QMessageBox.No, QMessageBox.No)
        if reply == QMessageBox.Yes:
            self.session.remove_all()
            self.refresh()
