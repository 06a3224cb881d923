"""Main UI application for Flashdeck."""

import sys
from PySide6.QtWidgets import QApplication, QMainWindow, QStackedWidget

from .screens.study import StudyScreen
from .screens.quiz import QuizScreen
from ..utils.config import config


class MainWindow(QMainWindow):
    """Main application window switching between study and quiz mode."""

    def __init__(self, session):
        super().__init__()
        self.session = session
        self.setWindowTitle("Flashcards App")
        self.resize(*config.get_window_size())

        font_size = config.get_font_size()
        self.stack = QStackedWidget()
        self.setCentralWidget(self.stack)

        self.study_screen = StudyScreen(session, font_size)
        self.quiz_screen = QuizScreen(session, font_size)
        self.stack.addWidget(self.study_screen)
        self.stack.addWidget(self.quiz_screen)

        # Connect signals
        self.study_screen.quiz_requested.connect(self.show_quiz)
        self.quiz_screen.quiz_finished.connect(self.show_study)

        self.show_study()

    def show_study(self, result=None):
        self.setWindowTitle("Flashcards App")
        self.study_screen.refresh()
        self.stack.setCurrentWidget(self.study_screen)

    def show_quiz(self):
        self.setWindowTitle("Quiz Mode")
        self.quiz_screen.start()
        self.stack.setCurrentWidget(self.quiz_screen)

    def closeEvent(self, event):
        config.set_window_size(self.width(), self.height())
        super().closeEvent(event)


def run_app(session):
    """Show the main window and run the Qt event loop."""
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Flashdeck")

    window = MainWindow(session)
    window.show()

    sys.exit(app.exec())
