# src/force_tracker/quiz/models.py

from dataclasses import dataclass

from pydantic import AliasChoices, BaseModel, Field, StrictInt, StrictStr, field_validator, model_validator

MIN_QUESTIONS = 3
MAX_QUESTIONS = 10
DEFAULT_QUESTION_COUNT = 5


class QuizQuestion(BaseModel):
    """One multiple-choice item.

    Built either from validated LLM output or by a fallback generator and
    never modified afterwards. Accepts `correct` as an alias of
    `correct_answer`, since that is the key the model is asked to emit.
    """

    question: StrictStr
    options: tuple[StrictStr, ...] = Field(min_length=2)
    correct_answer: StrictInt = Field(
        ge=0, validation_alias=AliasChoices("correct_answer", "correct")
    )
    explanation: StrictStr

    class Config:
        frozen = True
        extra = "ignore"

    @field_validator("question", "explanation")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @field_validator("options")
    @classmethod
    def _non_blank_options(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        options = tuple(option.strip() for option in value)
        if not all(options):
            raise ValueError("options must not be blank")
        return options

    @model_validator(mode="after")
    def _answer_in_range(self) -> "QuizQuestion":
        if self.correct_answer >= len(self.options):
            raise ValueError(
                f"correct_answer {self.correct_answer} out of range "
                f"for {len(self.options)} options"
            )
        return self

    def to_row(self) -> dict:
        """Persistence shape: question, options, correct_answer, explanation."""
        return {
            "question": self.question,
            "options": list(self.options),
            "correct_answer": self.correct_answer,
            "explanation": self.explanation,
        }


def validate_question_count(count: int) -> int:
    if not MIN_QUESTIONS <= count <= MAX_QUESTIONS:
        raise ValueError(
            f"question_count must be between {MIN_QUESTIONS} and {MAX_QUESTIONS}, got {count}"
        )
    return count


@dataclass(frozen=True)
class QuizConfig:
    """Request settings for quiz generation."""

    question_count: int = DEFAULT_QUESTION_COUNT
    temperature: float = 0.7
    max_tokens: int | None = None  # Scales with question_count when None
    max_prompt_chars: int = 8000
    prompt_version: str = "1.0"

    def __post_init__(self) -> None:
        validate_question_count(self.question_count)

    def tokens_for(self, question_count: int) -> int:
        if self.max_tokens is not None:
            return self.max_tokens
        return min(3000, question_count * 400)
