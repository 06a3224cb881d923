"""Read-only text area that shows one flashcard face."""

from PySide6.QtWidgets import QTextEdit
from PySide6.QtGui import QFont

from ...engine.models import CardView
from ...utils.colors import to_hex


class CardDisplay(QTextEdit):
    """Card text on the card's own background color."""

    def __init__(self, font_size: int = 24, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setLineWrapMode(QTextEdit.WidgetWidth)
        font = QFont("Arial")
        font.setPointSize(font_size)
        font.setBold(True)
        self.setFont(font)

    def show_view(self, view: CardView):
        self.setPlainText(view.text)
        self.setStyleSheet(
            f"QTextEdit {{ background-color: {to_hex(view.background)}; "
            f"color: {to_hex(view.foreground)}; padding: 10px; }}"
        )
