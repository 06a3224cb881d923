#!/usr/bin/env python3
"""Add sample capital-city cards to a Flashdeck database."""

import sys

from flashdeck.engine.db import CardStore
from flashdeck.engine.errors import ValidationError
from flashdeck.utils.config import config

SAMPLE_CARDS = [
    ("What is the capital of Czech Republic?", "Prague"),
    ("What is the capital of France?", "Paris"),
    ("What is the capital of Germany?", "Berlin"),
    ("What is the capital of Spain?", "Madrid"),
    ("What is the capital of Poland?", "Warsaw"),
]


def add_sample_cards(db_path: str):
    """Add the sample cards, numbered after any existing ones."""
    store = CardStore(db_path)
    print(f"Using database: {db_path} ({store.count()} cards)")

    added_count = 0
    for question, answer in SAMPLE_CARDS:
        try:
            store.add(question, answer)
            added_count += 1
            print(f"✓ Added: {question} → {answer}")
        except ValidationError as e:
            print(f"✗ Failed to add {question}: {e.message}")

    print(f"\nSuccessfully added {added_count}/{len(SAMPLE_CARDS)} cards!")
    for card in store.load_all():
        print(f"  #{card.number}: {card.question} (color {card.color})")
    store.close()


if __name__ == "__main__":
    add_sample_cards(sys.argv[1] if len(sys.argv) > 1 else config.get_database_path())
