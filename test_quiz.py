"""Tests for quiz scoring."""

import pytest

from flashdeck.engine.errors import AlreadyAnsweredError, EmptyDeckError, NoMoreCardsError
from flashdeck.engine.models import Flashcard
from flashdeck.engine.navigation import Navigation
from flashdeck.engine.quiz import BestScore, QuizSession, answers_match


def make_cards(*pairs):
    return [Flashcard(i + 1, q, a, i + 1, (0, 0, 0)) for i, (q, a) in enumerate(pairs)]


@pytest.fixture
def quiz():
    cards = make_cards(("Capital of Czechia?", "Prague"), ("Capital of France?", "Paris"))
    return QuizSession(cards, Navigation())


@pytest.mark.parametrize("given", ["Prague", " prague ", "PRAGUE", "prague\n"])
def test_answers_match_ignores_case_and_whitespace(given):
    assert answers_match(given, "Prague")


@pytest.mark.parametrize("given", ["Praha", "Pragu", "", "Prague city"])
def test_answers_match_is_exact(given):
    assert not answers_match(given, "Prague")


def test_answers_match_trims_stored_answer():
    assert answers_match("paris", "  Paris ")


def test_quiz_starts_at_first_card_with_zero_score(quiz):
    assert (quiz.score, quiz.total) == (0, 0)
    assert quiz.navigation.index == 0
    assert quiz.current_card.answer == "Prague"


def test_capitals_scenario(quiz):
    outcome = quiz.submit_answer("prague")
    assert outcome.is_correct
    assert (outcome.score, outcome.total) == (1, 1)

    assert quiz.next() == 1

    outcome = quiz.submit_answer("Berlin")
    assert not outcome.is_correct
    assert outcome.correct_answer == "Paris"
    assert (quiz.score, quiz.total) == (1, 2)


def test_second_submission_on_same_card_is_locked(quiz):
    quiz.submit_answer("Prague")

    assert quiz.is_locked
    with pytest.raises(AlreadyAnsweredError):
        quiz.submit_answer("Prague")
    assert (quiz.score, quiz.total) == (1, 1)


def test_next_card_unlocked_but_answered_card_stays_locked(quiz):
    quiz.submit_answer("wrong")
    quiz.next()
    assert not quiz.is_locked
    quiz.previous()

    assert quiz.is_locked
    with pytest.raises(AlreadyAnsweredError):
        quiz.submit_answer("Prague")
    assert (quiz.score, quiz.total) == (0, 1)


def test_each_card_scored_once_per_pass(quiz):
    for _ in range(3):
        try:
            quiz.submit_answer("Prague")
        except AlreadyAnsweredError:
            pass
        quiz.next()
        quiz.previous()

    quiz.next()
    quiz.submit_answer("Paris")

    assert (quiz.score, quiz.total) == (2, 2)
    assert quiz.finish(BestScore()).best == BestScore(2, 2)


def test_failed_move_keeps_lock(quiz):
    quiz.submit_answer("Prague")

    with pytest.raises(NoMoreCardsError):
        quiz.previous()

    assert quiz.is_locked


def test_empty_quiz_cannot_be_answered():
    quiz = QuizSession([], Navigation())

    with pytest.raises(EmptyDeckError):
        quiz.submit_answer("anything")


def test_finish_records_new_best(quiz):
    quiz.submit_answer("Prague")

    result = quiz.finish(BestScore())

    assert result.new_best
    assert result.best == BestScore(1, 1)
    assert str(result) == "1/1"


def test_finish_keeps_higher_best(quiz):
    quiz.submit_answer("Prague")

    result = quiz.finish(BestScore(2, 5))

    assert not result.new_best
    assert result.best == BestScore(2, 5)


def test_equal_score_does_not_replace_best(quiz):
    quiz.submit_answer("Prague")

    result = quiz.finish(BestScore(1, 3))

    assert result.best == BestScore(1, 3)
