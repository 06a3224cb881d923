"""Database layer for Flashdeck."""

import logging
import sqlite3
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .errors import ImportFileError, MalformedRecordError, StorageUnavailableError, ValidationError
from .models import RGB, Flashcard
from ..utils.colors import pack_rgb, random_color, unpack_rgb

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"
SEPARATOR = ";"


class CardStore:
    """SQLite-backed store of flashcards.

    The store never patches an in-memory list: callers reload with
    :meth:`load_all` after every mutation.
    """

    def __init__(self, path: str):
        """Open the database and create the schema.

        Args:
            path: Path to SQLite database file, or ``":memory:"``

        Raises:
            StorageUnavailableError: if the database cannot be opened
        """
        self.path = str(path)
        try:
            self._ensure_path_exists()
            self.conn = sqlite3.connect(self.path)
            self.conn.row_factory = sqlite3.Row
            self.create_tables()
        except (sqlite3.Error, OSError) as e:
            logger.error("Cannot open database %s: %s", self.path, e)
            raise StorageUnavailableError(self.path, str(e)) from e
        logger.info("Opened card store at %s", self.path)

    def _ensure_path_exists(self) -> None:
        """Ensure the database directory exists."""
        if self.path == MEMORY_PATH:
            return
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)

    def create_tables(self) -> None:
        """Create the flashcards table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS flashcards (
                question TEXT NOT NULL,
                answer TEXT NOT NULL,
                number INTEGER NOT NULL,
                color INTEGER NOT NULL
            )
        """)
        self.conn.commit()

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None

    def count(self) -> int:
        row = self.conn.execute("SELECT COUNT(*) AS n FROM flashcards").fetchone()
        return row["n"]

    def add(self, question: str, answer: str, color: Optional[RGB] = None) -> None:
        """Insert a new flashcard numbered after the current last one.

        Args:
            question: Question text, must not be blank
            answer: Answer text, must not be blank
            color: Card color, random when omitted

        Raises:
            ValidationError: if question or answer is blank
        """
        question, answer = _validated(question, answer)
        number = self.count() + 1
        if color is None:
            color = random_color()

        self.conn.execute(
            "INSERT INTO flashcards (question, answer, number, color) VALUES (?, ?, ?, ?)",
            (question, answer, number, pack_rgb(color))
        )
        self.conn.commit()
        logger.info("Added flashcard #%d", number)

    def remove(self, card: Flashcard) -> None:
        """Delete the stored record for ``card``. Deleting twice is harmless."""
        cursor = self.conn.execute("DELETE FROM flashcards WHERE rowid = ?", (card.id,))
        self.conn.commit()
        if cursor.rowcount:
            logger.info("Removed flashcard #%d (row %d)", card.number, card.id)
        else:
            logger.debug("Flashcard row %d already absent", card.id)

    def remove_all(self) -> None:
        """Delete every flashcard."""
        cursor = self.conn.execute("DELETE FROM flashcards")
        self.conn.commit()
        logger.info("Removed all flashcards (%d rows)", cursor.rowcount)

    def load_all(self) -> List[Flashcard]:
        """Return all flashcards in insertion order."""
        rows = self.conn.execute(
            "SELECT rowid, question, answer, number, color FROM flashcards ORDER BY rowid"
        ).fetchall()

        return [Flashcard(
            id=row["rowid"],
            question=row["question"],
            answer=row["answer"],
            number=row["number"],
            color=unpack_rgb(row["color"])
        ) for row in rows]

    def bulk_import(self, lines: Iterable[str]) -> int:
        """Import ``question;answer`` lines.

        Blank lines are skipped. Every line is parsed before anything is
        written, so a malformed line leaves the store untouched.

        Returns:
            Number of imported flashcards

        Raises:
            MalformedRecordError: on the first invalid line
        """
        records = parse_records(lines)
        start = self.count() + 1
        rows = [
            (question, answer, start + offset, pack_rgb(random_color()))
            for offset, (question, answer) in enumerate(records)
        ]

        try:
            self.conn.executemany(
                "INSERT INTO flashcards (question, answer, number, color) VALUES (?, ?, ?, ?)",
                rows
            )
            self.conn.commit()
        except sqlite3.Error:
            self.conn.rollback()
            raise

        logger.info("Imported %d flashcards", len(rows))
        return len(rows)

    def import_file(self, path: str) -> int:
        """Bulk import a UTF-8 text file of ``question;answer`` lines."""
        p = Path(path)
        try:
            with p.open("r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Cannot read import file %s: %s", path, e)
            raise ImportFileError(str(path), str(e)) from e
        return self.bulk_import(lines)


def parse_records(lines: Iterable[str]) -> List[Tuple[str, str]]:
    """Parse ``question;answer`` lines into trimmed pairs."""
    records = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        fields = line.split(SEPARATOR)
        if len(fields) != 2:
            raise MalformedRecordError(line_number, line)

        question, answer = fields[0].strip(), fields[1].strip()
        if not question or not answer:
            raise MalformedRecordError(line_number, line, "question and answer are mandatory")
        records.append((question, answer))
    return records


def _validated(question: str, answer: str) -> Tuple[str, str]:
    question = (question or "").strip()
    answer = (answer or "").strip()
    if not question:
        raise ValidationError("question")
    if not answer:
        raise ValidationError("answer")
    return question, answer
