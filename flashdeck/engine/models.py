"""Value types shared by the engine and the UI."""

from dataclasses import dataclass
from typing import Tuple

from ..utils.colors import brightness, contrast_color

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class Flashcard:
    """A question/answer pair with a display number and color.

    ``id`` is the storage row identity and is the only key used to delete a
    card; ``number`` is purely for display and may repeat after deletions.
    """

    id: int
    question: str
    answer: str
    number: int
    color: RGB

    @property
    def brightness(self) -> int:
        return brightness(self.color)

    @property
    def text_color(self) -> RGB:
        """White text on dark cards, black on light ones."""
        return contrast_color(self.color)


@dataclass(frozen=True)
class CardView:
    """What the card area should display right now."""

    text: str
    background: RGB
    foreground: RGB
    is_placeholder: bool = False
