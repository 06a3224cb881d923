"""Card navigation state."""

import logging

from .errors import NoMoreCardsError

logger = logging.getLogger(__name__)


class Navigation:
    """Tracks the displayed card and which face of it is showing.

    The owner calls :meth:`reset` with the new store size after every
    mutation. With an empty store every move is a no-op.
    """

    def __init__(self, size: int = 0):
        self.size = size
        self.index = 0
        self.showing_question = True

    @property
    def is_empty(self) -> bool:
        return self.size == 0

    def reset(self, size: int) -> None:
        """Go back to the first card, question side up."""
        self.size = size
        self.index = 0
        self.showing_question = True

    def next(self) -> int:
        """Move to the next card.

        Raises:
            NoMoreCardsError: if already on the last card
        """
        if self.is_empty:
            return self.index
        if self.index < self.size - 1:
            self.index += 1
            self.showing_question = True
            logger.debug("Moved to card %d/%d", self.index + 1, self.size)
            return self.index
        raise NoMoreCardsError("next")

    def previous(self) -> int:
        """Move to the previous card.

        Raises:
            NoMoreCardsError: if already on the first card
        """
        if self.is_empty:
            return self.index
        if self.index > 0:
            self.index -= 1
            self.showing_question = True
            logger.debug("Moved to card %d/%d", self.index + 1, self.size)
            return self.index
        raise NoMoreCardsError("previous")

    def flip(self) -> bool:
        """Toggle between question and answer. Returns the new face flag."""
        if not self.is_empty:
            self.showing_question = not self.showing_question
        return self.showing_question
