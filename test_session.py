"""Tests for the application session."""

import pytest

from flashdeck.engine.errors import (MalformedRecordError, NoMoreCardsError, NotInQuizError,
                                     QuizInProgressError, ValidationError)
from flashdeck.engine.quiz import BestScore
from flashdeck.engine.session import PLACEHOLDER_TEXT, FlashcardSession
from flashdeck.utils.colors import BLACK, WHITE


def test_empty_session_shows_placeholder(session):
    view = session.card_view()

    assert view.is_placeholder
    assert view.text == PLACEHOLDER_TEXT
    assert session.current_card is None


def test_empty_session_navigation_is_noop(session):
    session.next()
    session.previous()
    session.flip()

    assert session.navigation.index == 0
    assert session.remove_current() == ()


def test_add_card_returns_refreshed_cards_and_resets(capitals_session):
    capitals_session.next()

    cards = capitals_session.add_card("Capital of Spain?", "Madrid")

    assert len(cards) == 3
    assert cards[-1].number == 3
    assert capitals_session.cards == cards
    assert capitals_session.navigation.index == 0
    assert capitals_session.navigation.size == 3


def test_add_card_validation_leaves_state(capitals_session):
    with pytest.raises(ValidationError):
        capitals_session.add_card("", "Madrid")

    assert len(capitals_session.cards) == 2


def test_remove_current_removes_displayed_card(capitals_session):
    capitals_session.next()

    cards = capitals_session.remove_current()

    assert [c.answer for c in cards] == ["Prague"]
    assert capitals_session.navigation.index == 0


def test_remove_all_resets_navigation(capitals_session):
    capitals_session.next()

    assert capitals_session.remove_all() == ()
    assert capitals_session.store.load_all() == []
    assert capitals_session.navigation.index == 0


def test_start_new_clears_previous_cards(capitals_session):
    capitals_session.start_new()
    assert capitals_session.cards == ()


def test_import_lines(session):
    cards = session.import_lines(["Q1;A1", "Q2;A2"])
    assert [c.number for c in cards] == [1, 2]


def test_import_lines_failure_keeps_cards(capitals_session):
    with pytest.raises(MalformedRecordError):
        capitals_session.import_lines(["Q1;A1", "Q2;A2", "badline"])

    assert len(capitals_session.store.load_all()) == 2


def test_import_file(session, tmp_path):
    path = tmp_path / "cards.txt"
    path.write_text("Q1;A1\n", encoding="utf-8")

    assert len(session.import_file(str(path))) == 1


def test_navigation_bounds(capitals_session):
    with pytest.raises(NoMoreCardsError):
        capitals_session.previous()
    capitals_session.next()
    with pytest.raises(NoMoreCardsError):
        capitals_session.next()
    assert capitals_session.navigation.index == 1


def test_card_view_faces(capitals_session):
    view = capitals_session.card_view()
    assert view.text == " Flashcard number 1\n\n Question:\n\n Capital of Czechia?"
    assert view.background == (10, 20, 30)
    assert view.foreground == WHITE

    capitals_session.flip()
    assert capitals_session.card_view().text == " Flashcard number 1\n\n Answer:\n\n Prague"


def test_card_view_light_card_has_black_text(session):
    session.add_card("Q", "A", (250, 250, 200))
    assert session.card_view().foreground == BLACK


def test_quiz_scenario_and_best_score(capitals_session):
    quiz = capitals_session.enter_quiz()
    assert capitals_session.in_quiz

    assert capitals_session.submit_answer("prague").is_correct
    capitals_session.next()
    assert quiz.navigation.index == 1
    outcome = capitals_session.submit_answer("Berlin")
    assert (outcome.is_correct, outcome.correct_answer) == (False, "Paris")
    assert (quiz.score, quiz.total) == (1, 2)

    result = capitals_session.exit_quiz()

    assert (result.score, result.total) == (1, 2)
    assert capitals_session.best == BestScore(1, 2)
    assert not capitals_session.in_quiz
    assert capitals_session.navigation.index == 0


def test_enter_quiz_starts_from_first_card(capitals_session):
    capitals_session.next()
    capitals_session.flip()

    capitals_session.enter_quiz()

    assert capitals_session.navigation.index == 0
    assert capitals_session.navigation.showing_question


def test_best_score_only_improves(capitals_session):
    capitals_session.enter_quiz()
    capitals_session.submit_answer("Prague")
    capitals_session.next()
    capitals_session.submit_answer("Paris")
    capitals_session.exit_quiz()

    capitals_session.enter_quiz()
    capitals_session.submit_answer("nope")
    result = capitals_session.exit_quiz()

    assert result.score == 0
    assert not result.new_best
    assert capitals_session.best == BestScore(2, 2)


def test_quiz_score_discarded_on_exit(capitals_session):
    capitals_session.enter_quiz()
    capitals_session.submit_answer("Prague")
    capitals_session.exit_quiz()

    quiz = capitals_session.enter_quiz()

    assert (quiz.score, quiz.total) == (0, 0)


def test_quiz_calls_outside_quiz_mode(session):
    with pytest.raises(NotInQuizError):
        session.submit_answer("x")
    with pytest.raises(NotInQuizError):
        session.exit_quiz()


def test_session_loads_existing_cards(store):
    store.add("Q1", "A1")
    assert len(FlashcardSession(store).cards) == 1


@pytest.mark.parametrize("change", [
    lambda s: s.add_card("Capital of Spain?", "Madrid"),
    lambda s: s.remove_current(),
    lambda s: s.remove_all(),
    lambda s: s.import_lines(["Capital of Spain?;Madrid"]),
])
def test_cards_cannot_change_during_quiz(capitals_session, change):
    quiz = capitals_session.enter_quiz()
    capitals_session.next()

    with pytest.raises(QuizInProgressError):
        change(capitals_session)

    assert len(capitals_session.store.load_all()) == 2
    assert capitals_session.navigation.index == 1
    assert capitals_session.navigation.size == len(quiz.cards)
    assert capitals_session.submit_answer("Paris").is_correct


def test_cards_can_change_after_quiz(capitals_session):
    capitals_session.enter_quiz()
    capitals_session.exit_quiz()

    assert len(capitals_session.add_card("Capital of Spain?", "Madrid")) == 3
