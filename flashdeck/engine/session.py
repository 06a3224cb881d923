"""Application session: the state the UI drives."""

import logging
from typing import Iterable, Optional, Tuple

from .db import CardStore
from .errors import NotInQuizError, QuizInProgressError
from .models import RGB, CardView, Flashcard
from .navigation import Navigation
from .quiz import BestScore, Outcome, QuizResult, QuizSession
from ..utils.colors import BLACK, GRAY

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "No flashcards available"


class FlashcardSession:
    """Owns the card store, the loaded cards, navigation and scores.

    Every mutating operation writes to the store, reloads the full card list
    and resets navigation to the first card, then returns the new cards.
    """

    def __init__(self, store: CardStore):
        self.store = store
        self.navigation = Navigation()
        self.best = BestScore()
        self.quiz: Optional[QuizSession] = None
        self.cards: Tuple[Flashcard, ...] = ()
        self.refresh()

    @property
    def in_quiz(self) -> bool:
        return self.quiz is not None

    @property
    def current_card(self) -> Optional[Flashcard]:
        if not self.cards:
            return None
        return self.cards[self.navigation.index]

    def refresh(self) -> Tuple[Flashcard, ...]:
        """Reload every card from the store and go back to the first one."""
        self.cards = tuple(self.store.load_all())
        self.navigation.reset(len(self.cards))
        return self.cards

    # Store operations

    def _check_not_in_quiz(self, operation: str) -> None:
        if self.quiz is not None:
            raise QuizInProgressError(operation)

    def add_card(self, question: str, answer: str, color: Optional[RGB] = None) -> Tuple[Flashcard, ...]:
        self._check_not_in_quiz("add_card")
        self.store.add(question, answer, color)
        return self.refresh()

    def remove_current(self) -> Tuple[Flashcard, ...]:
        self._check_not_in_quiz("remove_current")
        card = self.current_card
        if card is None:
            return self.cards
        self.store.remove(card)
        return self.refresh()

    def remove_all(self) -> Tuple[Flashcard, ...]:
        self._check_not_in_quiz("remove_all")
        self.store.remove_all()
        return self.refresh()

    def start_new(self) -> Tuple[Flashcard, ...]:
        """Discard the previous collection."""
        logger.info("Starting a new flashcard collection")
        return self.remove_all()

    def import_lines(self, lines: Iterable[str]) -> Tuple[Flashcard, ...]:
        self._check_not_in_quiz("import_lines")
        self.store.bulk_import(lines)
        return self.refresh()

    def import_file(self, path: str) -> Tuple[Flashcard, ...]:
        self._check_not_in_quiz("import_file")
        self.store.import_file(path)
        return self.refresh()

    # Navigation

    def next(self) -> int:
        if self.quiz:
            return self.quiz.next()
        return self.navigation.next()

    def previous(self) -> int:
        if self.quiz:
            return self.quiz.previous()
        return self.navigation.previous()

    def flip(self) -> bool:
        return self.navigation.flip()

    # Quiz mode

    def enter_quiz(self) -> QuizSession:
        self.quiz = QuizSession(self.cards, self.navigation)
        logger.info("Entered quiz mode with %d cards", len(self.cards))
        return self.quiz

    def submit_answer(self, text: str) -> Outcome:
        if self.quiz is None:
            raise NotInQuizError()
        return self.quiz.submit_answer(text)

    def exit_quiz(self) -> QuizResult:
        """Report the final score, update the best score and return to study mode."""
        if self.quiz is None:
            raise NotInQuizError()
        result = self.quiz.finish(self.best)
        self.best = result.best
        self.quiz = None
        self.navigation.reset(len(self.cards))
        return result

    # Display

    def card_view(self) -> CardView:
        """Text and colors for the card area."""
        card = self.current_card
        if card is None:
            return CardView(PLACEHOLDER_TEXT, GRAY, BLACK, is_placeholder=True)

        if self.navigation.showing_question:
            face, content = "Question", card.question
        else:
            face, content = "Answer", card.answer
        text = f" Flashcard number {card.number}\n\n {face}:\n\n {content}"
        return CardView(text, card.color, card.text_color)
