from force_tracker.analysis import ParsedContent
from force_tracker.quiz.fallback import (
    RANK_ASSESSMENT_FALLBACK,
    STUDY_SKILLS_POOL,
    fallback_questions,
    generic_fallback_questions,
)

POOL = [question for _, question in STUDY_SKILLS_POOL]


class TestFallbackQuestions:
    def test_empty_content_yields_closing_question(self) -> None:
        questions = fallback_questions(ParsedContent(text=""))

        assert len(questions) == 1
        assert questions[0].question == (
            "What is the primary purpose of this course material?"
        )

    def test_structure_order_and_cap(self) -> None:
        content = ParsedContent(
            text="irrelevant",
            title="Photosynthesis",
            headings=["Light Reactions", "Calvin Cycle"],
            key_points=["Point one", "Point two", "Point three", "Point four"],
        )

        questions = fallback_questions(content)

        assert len(questions) == 5
        assert questions[0].question == 'What is the main topic of "Photosynthesis"?'
        assert [q.options[0] for q in questions[1:4]] == [
            "Point one",
            "Point two",
            "Point three",
        ]
        assert questions[4].options[0] == "Light Reactions"

    def test_long_key_point_is_shortened(self) -> None:
        questions = fallback_questions(ParsedContent(text="", key_points=["k" * 100]))

        assert questions[0].options[0] == "k" * 80 + "..."

    def test_correct_answer_is_always_first(self) -> None:
        content = ParsedContent(text="", title="T", key_points=["A point"])

        assert all(q.correct_answer == 0 for q in fallback_questions(content))


class TestGenericFallbackQuestions:
    def test_plain_text_uses_unconditional_questions(self) -> None:
        questions = generic_fallback_questions("plain words")

        assert questions == [POOL[0], POOL[1], POOL[6], POOL[7], POOL[8]]

    def test_signals_unlock_topic_questions(self) -> None:
        questions = generic_fallback_questions("Step 1 is a concept")

        assert questions == POOL[:5]

    def test_count_is_respected(self) -> None:
        assert len(generic_fallback_questions("anything", 3)) == 3
        assert len(generic_fallback_questions("anything", 10)) == 6

    def test_all_answers_first(self) -> None:
        assert all(q.correct_answer == 0 for q in generic_fallback_questions("x", 10))


def test_rank_assessment_fallback() -> None:
    assert len(RANK_ASSESSMENT_FALLBACK) == 5
    assert all(len(q.options) == 4 for q in RANK_ASSESSMENT_FALLBACK)
