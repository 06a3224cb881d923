"""Error types raised by the Flashdeck engine."""

from typing import Dict, Optional


class FlashcardError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, error_code: str, details: Optional[Dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(FlashcardError):
    """A question or answer was empty."""

    def __init__(self, field: str, message: Optional[str] = None):
        self.field = field
        super().__init__(
            message or f"The {field} field is mandatory",
            "VALIDATION_ERROR",
            {"field": field},
        )


class MalformedRecordError(FlashcardError):
    """A bulk import line is not a valid ``question;answer`` record."""

    def __init__(self, line_number: int, line: str, reason: str = "expected exactly one ';' separator"):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Invalid record on line {line_number}: {reason}",
            "MALFORMED_RECORD",
            {"line_number": line_number, "line": line},
        )


class NoMoreCardsError(FlashcardError):
    """Navigation hit the first or last card."""

    def __init__(self, direction: str):
        self.direction = direction
        super().__init__("No more flashcards", "NO_MORE_CARDS", {"direction": direction})


class StorageUnavailableError(FlashcardError):
    """The database could not be opened or initialised."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(
            f"Database connection could not be established ({path}): {reason}",
            "STORAGE_UNAVAILABLE",
            {"path": path},
        )


class ImportFileError(FlashcardError):
    """The bulk import file could not be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Error reading the file {path}: {reason}", "IMPORT_FILE_ERROR", {"path": path})


class AlreadyAnsweredError(FlashcardError):
    """The current quiz card has already been judged."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(
            "This flashcard has already been answered",
            "ALREADY_ANSWERED",
            {"index": index},
        )


class EmptyDeckError(FlashcardError):
    """An operation needs a card but the store is empty."""

    def __init__(self):
        super().__init__("No flashcards available", "EMPTY_DECK")


class NotInQuizError(FlashcardError):
    """A quiz operation was called outside quiz mode."""

    def __init__(self):
        super().__init__("Not in quiz mode", "NOT_IN_QUIZ")


class QuizInProgressError(FlashcardError):
    """The cards cannot be changed while a quiz is running."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(
            "Flashcards cannot be changed during a quiz",
            "QUIZ_IN_PROGRESS",
            {"operation": operation},
        )
