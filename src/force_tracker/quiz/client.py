# src/force_tracker/quiz/client.py

import logging
from time import monotonic

from force_tracker.analysis.models import ParsedContent
from force_tracker.errors import LLMParseError, QuizGenerationError
from force_tracker.llms.base import LLMClient, Message, Role
from force_tracker.observability import names
from force_tracker.observability.base import MetricsHook, NoOpMetricsHook
from force_tracker.prompts import PromptsLibrary

from .fallback import RANK_ASSESSMENT_FALLBACK, fallback_questions, generic_fallback_questions
from .models import QuizConfig, QuizQuestion, validate_question_count
from .parsing import parse_questions, validate_questions
from .prompt_builder import build_prompt

logger = logging.getLogger(__name__)

RANK_ASSESSMENT_QUESTIONS = 5
RANK_ASSESSMENT_MAX_TOKENS = 1500


class _LLMQuizClient:
    """Shared request/parse/validate path. Subclasses own the fallbacks."""

    def __init__(
        self,
        llm: LLMClient | None,
        config: QuizConfig = QuizConfig(),
        prompts: PromptsLibrary | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._llm = llm
        self._config = config
        self._prompts = prompts or PromptsLibrary()
        self.metrics_hook = metrics_hook

    async def _request_questions(
        self, *, system: str, user: str, max_tokens: int, limit: int
    ) -> list[QuizQuestion]:
        """One completion turned into validated questions.

        Raises:
            LLMRequestError: Transport failure (from the LLM layer).
            LLMParseError: Empty reply, invalid JSON, or no valid question.
        """
        if self._llm is None:
            raise QuizGenerationError("No LLM client configured")

        response = await self._llm.complete(
            messages=[
                Message(role=Role.SYSTEM, content=system),
                Message(role=Role.USER, content=user),
            ],
            temperature=self._config.temperature,
            max_tokens=max_tokens,
        )
        if not response.content:
            raise LLMParseError(f"Empty reply (finish_reason={response.finish_reason})")

        logger.debug("Raw quiz reply: %s", response.content)

        items = parse_questions(response.content)
        questions = validate_questions(items, limit=limit)

        rejected = sum(1 for item in items if item is not None) - len(questions)
        if rejected > 0:
            self.metrics_hook.increment(names.QUIZ_QUESTIONS_REJECTED_TOTAL, rejected)
        if not questions:
            raise LLMParseError(f"No valid questions among {len(items)} candidates")
        return questions

    async def _generate_or_fallback(
        self,
        *,
        kind: str,
        system: str,
        user: str,
        max_tokens: int,
        limit: int,
        fallback: list[QuizQuestion],
    ) -> list[QuizQuestion]:
        start = monotonic()
        try:
            questions = await self._request_questions(
                system=system, user=user, max_tokens=max_tokens, limit=limit
            )
            source = "llm"
        except QuizGenerationError as exc:
            logger.warning("%s generation failed, using fallback questions: %s", kind, exc)
            questions, source = fallback, "fallback"
            self._record_fallback(kind, type(exc).__name__)
        except Exception:
            logger.exception("Unexpected error during %s generation, using fallback", kind)
            questions, source = fallback, "fallback"
            self._record_fallback(kind, "unexpected")

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(
            names.QUIZ_GENERATION_DURATION, elapsed_ms, labels={"kind": kind}
        )
        self.metrics_hook.increment(
            names.QUIZ_QUESTIONS_GENERATED_TOTAL,
            len(questions),
            labels={"kind": kind, "source": source},
        )
        logger.info(
            "Generated %d %s questions from %s in %.0fms",
            len(questions),
            kind,
            source,
            elapsed_ms,
        )
        return questions

    def _record_fallback(self, kind: str, reason: str) -> None:
        self.metrics_hook.increment(
            names.QUIZ_FALLBACKS_TOTAL, labels={"kind": kind, "reason": reason}
        )

    def _render(self, name: str, **values: object) -> str:
        return self._prompts.get(name, self._config.prompt_version).render(**values)

    async def aclose(self) -> None:
        if self._llm is not None:
            await self._llm.aclose()


class QuizClient(_LLMQuizClient):
    """Generates a course quiz from analyzed document content.

    Never raises for generation failures: a failed or unusable LLM reply
    yields the study-skills fallback set, and a client built without an
    LLM uses the structural fallback for every call.

    Example:
        >>> quiz_client = QuizClient(create_llm_client(LLMConfig.from_env()))
        >>> questions = await quiz_client.generate(analyze(text))
    """

    async def generate(
        self, content: ParsedContent, question_count: int | None = None
    ) -> list[QuizQuestion]:
        count = validate_question_count(
            self._config.question_count if question_count is None else question_count
        )

        if self._llm is None:
            logger.warning("No LLM client configured, using template questions")
            self._record_fallback("course", "no_llm")
            return fallback_questions(content)

        prompt = build_prompt(content, self._config.max_prompt_chars)
        return await self.generate_from_text(prompt, count)

    async def generate_from_text(
        self, prompt: str, question_count: int | None = None
    ) -> list[QuizQuestion]:
        """Quiz from an already-built prompt. Same never-raise contract."""
        count = validate_question_count(
            self._config.question_count if question_count is None else question_count
        )
        fallback = generic_fallback_questions(prompt, count)

        if self._llm is None:
            logger.warning("No LLM client configured, using fallback questions")
            self._record_fallback("course", "no_llm")
            return fallback

        return await self._generate_or_fallback(
            kind="course",
            system=self._render("quiz_system", question_count=count),
            user=self._render("quiz_user", question_count=count, content=prompt),
            max_tokens=self._config.tokens_for(count),
            limit=count,
            fallback=fallback,
        )


class RankAssessmentClient(_LLMQuizClient):
    """Generates the five-question onboarding quiz that sets a starting rank."""

    async def generate(self) -> list[QuizQuestion]:
        fallback = list(RANK_ASSESSMENT_FALLBACK)

        if self._llm is None:
            logger.warning("No LLM client configured, using fallback rank assessment")
            self._record_fallback("rank_assessment", "no_llm")
            return fallback

        return await self._generate_or_fallback(
            kind="rank_assessment",
            system=self._render("rank_assessment_system"),
            user=self._render("rank_assessment_user"),
            max_tokens=RANK_ASSESSMENT_MAX_TOKENS,
            limit=RANK_ASSESSMENT_QUESTIONS,
            fallback=fallback,
        )
