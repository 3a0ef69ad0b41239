"""Tests for parsing test content payloads."""

import pytest

from fluentpath.domain.common.exceptions import DomainError
from fluentpath.domain.learning.entities.module import Level
from fluentpath.domain.learning.entities.test import Test, TestContent, TestType


class TestTestContent:
    def test_parse_flat_payload(self) -> None:
        content = TestContent.from_dict(
            {
                "passage": "Once upon a time.",
                "questions": [
                    {
                        "id": 7,
                        "question": "When?",
                        "options": ["Once", "Twice"],
                        "correctAnswer": "Once",
                    }
                ],
            }
        )
        assert content.passage == "Once upon a time."
        assert content.questions[0].id == 7
        assert content.questions[0].options == ("Once", "Twice")
        assert content.questions[0].correct_answer == "Once"
        assert content.questions[0].points == 1

    def test_nested_content_unwrapped(self) -> None:
        content = TestContent.from_dict(
            {"type": "essay", "content": {"prompt": "Write about rain.", "questions": []}}
        )
        assert content.prompt == "Write about rain."
        assert content.questions == ()

    def test_missing_question_ids_use_position(self) -> None:
        content = TestContent.from_dict({"questions": [{"question": "A?"}, {"question": "B?"}]})
        assert [q.id for q in content.questions] == [1, 2]

    @pytest.mark.parametrize("raw", [None, "text", [], {"questions": "none"}])
    def test_malformed_payloads_are_empty(self, raw: object) -> None:
        assert TestContent.from_dict(raw).questions == ()

    def test_round_trip_keeps_correct_answer_key(self) -> None:
        raw = {"questions": [{"id": 1, "question": "Q", "options": ["A"], "correctAnswer": "A"}]}
        data = TestContent.from_dict(raw).to_dict()
        assert data["questions"][0]["correctAnswer"] == "A"


class TestTestEntity:
    def test_default_time_limit_by_type(self) -> None:
        test = Test.create("Essay", TestType.ESSAY, Level.ADVANCED, TestContent(prompt="Go"))
        assert test.time_limit == 30
        assert test.max_score == 10
        assert test.is_subjective

    def test_prompt_text_falls_back_to_passage(self) -> None:
        test = Test.create("Read", TestType.COMPREHENSION, Level.BEGINNER, TestContent(passage="P"))
        assert test.prompt_text == "P"

    def test_empty_title_rejected(self) -> None:
        with pytest.raises(DomainError):
            Test.create("  ", TestType.LETTER, Level.BEGINNER, TestContent())

    def test_generated_title(self) -> None:
        title = Test.generated_title(TestType.LETTER, Level.INTERMEDIATE)
        assert title == "Letter Test - intermediate"
