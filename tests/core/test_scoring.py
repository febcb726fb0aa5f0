"""Tests for grading and performance summaries."""

from datetime import timedelta

import pytest

from angle_practice.core.scoring import (
    UNKNOWN_COMPLETION_TIME,
    calculate_score,
    generate_question_results,
    get_completion_time,
    get_performance_level,
    get_performance_stats,
    is_answer_correct,
)


def _answers(session, correct_count):
    """Correct ranking for the first ``correct_count`` questions, reversed for the rest."""
    answers = []
    for index, question in enumerate(session.questions):
        order = tuple(question.correct_order)
        answers.append(order if index < correct_count else tuple(reversed(order)))
    return answers


@pytest.fixture
def scored_session(session_factory):
    def build(correct_count, **kwargs):
        blank = session_factory()
        return session_factory(answers=_answers(blank, correct_count), completed=True, **kwargs)

    return build


class TestIsAnswerCorrect:
    def test_exact_order(self, question_factory):
        question = question_factory(1)
        a, b, c, d = question.correct_order
        assert is_answer_correct(question, [a, b, c, d])

    def test_swapped_order(self, question_factory):
        question = question_factory(1)
        a, b, c, d = question.correct_order
        assert not is_answer_correct(question, [b, a, c, d])

    def test_missing_answer(self, question_factory):
        assert not is_answer_correct(question_factory(1), None)

    def test_partial_answer(self, question_factory):
        question = question_factory(1)
        a, b, _, _ = question.correct_order
        assert not is_answer_correct(question, [a, b])


class TestScore:
    def test_ten_of_fifteen(self, scored_session):
        assert calculate_score(scored_session(10)) == 10

    def test_perfect(self, scored_session):
        assert calculate_score(scored_session(15)) == 15

    def test_incomplete_session_scores_zero(self, session_factory):
        blank = session_factory()
        session = session_factory(answers=_answers(blank, 15))
        assert calculate_score(session) == 0
        assert generate_question_results(session) == []

    def test_question_results(self, scored_session):
        results = generate_question_results(scored_session(2))
        assert len(results) == 15
        assert [result.question_id for result in results] == list(range(1, 16))
        assert [result.is_correct for result in results[:3]] == [True, True, False]
        assert results[2].user_answer == tuple(reversed(results[2].correct_answer))

    def test_unanswered_questions_have_empty_answer(self, session_factory):
        session = session_factory(completed=True)
        results = generate_question_results(session)
        assert results[0].user_answer == ()
        assert not results[0].is_correct


class TestCompletionTime:
    def test_minutes_and_seconds(self, session_factory):
        start = session_factory().start_time
        session = session_factory(completed=True, ended_at=start + timedelta(minutes=4, seconds=7))
        assert get_completion_time(session) == "4:07"

    def test_unknown_without_end(self, session_factory):
        assert get_completion_time(session_factory()) == UNKNOWN_COMPLETION_TIME


class TestPerformance:
    @pytest.mark.parametrize(
        "score,level,color",
        [
            (15, "Excellent", "success"),
            (14, "Excellent", "success"),
            (12, "Good", "accent"),
            (11, "Fair", "warning"),
            (9, "Needs Improvement", "caution"),
            (8, "Poor", "error"),
            (0, "Poor", "error"),
        ],
    )
    def test_levels(self, score, level, color):
        performance = get_performance_level(score)
        assert performance.level == level
        assert performance.color == color
        assert performance.description

    def test_stats(self, scored_session):
        stats = get_performance_stats(scored_session(10))
        assert stats.score == 10
        assert stats.total_questions == 15
        assert stats.percentage == 67
        assert stats.completion_time == "5:00"
        assert stats.passed_questions == 10
        assert stats.failed_questions == 5
        assert len(stats.question_results) == 15
