"""
Unit Tests for Question and QuizResult.
"""

import pytest

from quizflow.core.exceptions import InvalidQuestionError
from quizflow.core.models import Question, QuizResult, grade
from quizflow.core.session_state import Submitted


class TestQuestion:
    """Tests for the Question value object."""

    def test_init_when_valid_then_options_become_tuple(self):
        """A list of options should be frozen into a tuple."""
        q = Question(id=1, text="Capital of France?", options=["Rome", "Paris", "Oslo", "Bern"], correct_index=1)
        assert q.options == ("Rome", "Paris", "Oslo", "Bern")
        assert q.correct_answer == "Paris"

    @pytest.mark.parametrize("options", [(), ("a", "b", "c"), ("a", "b", "c", "d", "e")])
    def test_init_when_option_count_not_four_then_raises(self, options):
        """Anything other than four options is rejected at construction."""
        with pytest.raises(InvalidQuestionError, match="exactly 4 options"):
            Question(id=1, text="?", options=options, correct_index=0)

    @pytest.mark.parametrize("correct_index", [-1, 4, 10])
    def test_init_when_correct_index_out_of_range_then_raises(self, correct_index):
        """correct_index must point at one of the four options."""
        with pytest.raises(InvalidQuestionError, match="correct_index"):
            Question(id=1, text="?", options=("a", "b", "c", "d"), correct_index=correct_index)

    def test_invalid_question_error_is_value_error(self):
        with pytest.raises(ValueError):
            Question(id=1, text="?", options=("a",), correct_index=0)

    def test_eq_when_same_id_then_equal(self):
        """Equality and hashing only look at the id."""
        a = Question(id=7, text="one", options=("a", "b", "c", "d"), correct_index=0)
        b = Question(id=7, text="two", options=("w", "x", "y", "z"), correct_index=3)
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_eq_when_different_id_then_not_equal(self):
        a = Question(id=1, text="same", options=("a", "b", "c", "d"), correct_index=0)
        b = Question(id=2, text="same", options=("a", "b", "c", "d"), correct_index=0)
        assert a != b

    def test_frozen_when_assigning_then_raises(self):
        q = Question(id=1, text="?", options=("a", "b", "c", "d"), correct_index=0)
        with pytest.raises(AttributeError):
            q.text = "changed"


class TestQuizResult:
    """Tests for grading and derived values."""

    def test_score_when_seven_of_ten_correct_then_seventy_percent(self, questions):
        """Seven correct answers out of ten gives a 0.7 percentage."""
        answers = {q.id: q.correct_index for q in questions[:7]}
        answers.update({q.id: (q.correct_index + 1) % 4 for q in questions[7:]})

        result = grade(questions, answers)

        assert result.total == 10
        assert result.score == 7
        assert result.incorrect_count == 3
        assert result.percentage == 0.7

    def test_percentage_when_no_questions_then_zero(self):
        result = QuizResult(questions=(), selected_answers={})
        assert result.total == 0
        assert result.score == 0
        assert result.percentage == 0.0

    def test_score_plus_incorrect_equals_total(self, questions):
        """score + incorrect_count == total, whatever was answered."""
        for answered in range(len(questions) + 1):
            answers = {q.id: q.correct_index for q in questions[:answered]}
            result = grade(questions, answers)
            assert result.score + result.incorrect_count == result.total

    def test_unanswered_question_when_queried_then_none(self, questions):
        """Missing answers count as incorrect and have no selected text."""
        result = grade(questions, {questions[0].id: questions[0].correct_index})
        skipped = questions[1]

        assert result.was_answered(questions[0])
        assert not result.was_answered(skipped)
        assert not result.is_correct(skipped)
        assert result.selected_answer_text(skipped) is None
        assert result.selected_answer_text(questions[0]) == questions[0].correct_answer

    def test_out_of_range_answer_when_graded_then_incorrect(self, questions):
        """An index outside the options is answered, wrong, and has no text."""
        q = questions[0]
        result = grade([q], {q.id: 9})

        assert result.was_answered(q)
        assert not result.is_correct(q)
        assert result.selected_answer_text(q) is None
        assert result.score == 0

    def test_snapshot_when_source_mapping_mutated_then_result_unchanged(self, questions):
        """The result keeps its own copy of the answers."""
        answers = {q.id: q.correct_index for q in questions}
        result = grade(questions, answers)
        answers.clear()

        assert result.score == 10
        with pytest.raises(TypeError):
            result.selected_answers[1] = 0

    def test_hash_when_result_and_submitted_state_then_hashable(self, questions):
        """Results can be hashed, including inside a Submitted state."""
        result = grade(questions, {q.id: q.correct_index for q in questions})

        assert hash(result) == hash(grade(questions, {}))
        assert isinstance(hash(Submitted(result)), int)
