"""Quiz mode scoring."""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Set

from .errors import AlreadyAnsweredError, EmptyDeckError
from .models import Flashcard
from .navigation import Navigation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of judging one answer."""

    is_correct: bool
    correct_answer: str
    score: int
    total: int


@dataclass(frozen=True)
class BestScore:
    score: int = 0
    total: int = 0

    def __str__(self) -> str:
        return f"{self.score}/{self.total}"


@dataclass(frozen=True)
class QuizResult:
    score: int
    total: int
    best: BestScore
    new_best: bool

    def __str__(self) -> str:
        return f"{self.score}/{self.total}"


def answers_match(given: str, expected: str) -> bool:
    """Exact match after trimming, ignoring case."""
    return given.strip().lower() == expected.strip().lower()


class QuizSession:
    """One pass of self-testing over the loaded cards.

    Each card may be judged once per pass.
    """

    def __init__(self, cards: Sequence[Flashcard], navigation: Navigation):
        self.cards = cards
        self.navigation = navigation
        self.score = 0
        self.total = 0
        self._answered: Set[int] = set()
        self.navigation.reset(len(cards))

    @property
    def current_card(self) -> Optional[Flashcard]:
        if not self.cards:
            return None
        return self.cards[self.navigation.index]

    @property
    def is_locked(self) -> bool:
        """Whether the current card has already been judged."""
        return self.navigation.index in self._answered

    def submit_answer(self, text: str) -> Outcome:
        """Judge ``text`` against the current card's answer.

        Raises:
            EmptyDeckError: if there are no cards
            AlreadyAnsweredError: if the current card was already judged
        """
        card = self.current_card
        if card is None:
            raise EmptyDeckError()
        if self.is_locked:
            raise AlreadyAnsweredError(self.navigation.index)

        is_correct = answers_match(text, card.answer)
        self.total += 1
        if is_correct:
            self.score += 1
        self._answered.add(self.navigation.index)
        logger.debug("Card #%d answered %s, score %d/%d",
                     card.number, "correctly" if is_correct else "incorrectly", self.score, self.total)

        return Outcome(is_correct, card.answer, self.score, self.total)

    def next(self) -> int:
        return self.navigation.next()

    def previous(self) -> int:
        return self.navigation.previous()

    def finish(self, best: BestScore) -> QuizResult:
        """Final score, compared against the best score so far."""
        new_best = self.score > best.score
        if new_best:
            best = BestScore(self.score, self.total)
        logger.info("Quiz finished with %d/%d (best %s)", self.score, self.total, best)
        return QuizResult(self.score, self.total, best, new_best)
