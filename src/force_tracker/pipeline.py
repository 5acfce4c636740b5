# src/force_tracker/pipeline.py

"""Upload workflow: fetch, extract, analyze, then generate a quiz."""

import logging
from dataclasses import dataclass

import httpx

from force_tracker.analysis import ParsedContent, analyze
from force_tracker.errors import DocumentError, DocumentUnreadableError
from force_tracker.llms import LLMConfig, create_llm_client
from force_tracker.observability.base import MetricsHook, NoOpMetricsHook
from force_tracker.parsers import (
    DocumentExtractor,
    DocumentFetcher,
    ExtractedDocument,
    FetcherConfig,
)
from force_tracker.quiz import (
    QuizClient,
    QuizConfig,
    QuizQuestion,
    validate_question_count,
)

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 300


@dataclass(frozen=True)
class UploadResult:
    document: ExtractedDocument
    content: ParsedContent
    questions: list[QuizQuestion]

    @property
    def preview(self) -> str:
        return self.content.text[:PREVIEW_LENGTH] + "..."

    def rows(self, course_id: str | None = None) -> list[dict]:
        """Questions in persistence shape, tagged with `course_id` when given."""
        rows = [question.to_row() for question in self.questions]
        if course_id is not None:
            rows = [{"course_id": course_id, **row} for row in rows]
        return rows


class UploadPipeline:
    """Runs one upload end to end, sequentially.

    Document failures surface as a single DocumentUnreadableError; quiz
    generation never fails.
    """

    def __init__(
        self,
        extractor: DocumentExtractor,
        quiz_client: QuizClient,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._extractor = extractor
        self._quiz_client = quiz_client
        self.metrics_hook = metrics_hook

    async def process(
        self,
        file_url: str,
        mime_type: str,
        *,
        filename: str | None = None,
        question_count: int | None = None,
    ) -> UploadResult:
        """
        Raises:
            DocumentUnreadableError: If the file cannot be fetched or read.
                The cause is chained and logged.
            ValueError: If question_count is outside 3..10.
        """
        if question_count is not None:
            validate_question_count(question_count)

        try:
            document = await self._extractor.extract(file_url, mime_type, filename)
        except DocumentError as exc:
            logger.error(
                "Could not understand upload %s (%s): %s: %s",
                filename or file_url,
                mime_type,
                type(exc).__name__,
                exc,
            )
            raise DocumentUnreadableError() from exc

        content = analyze(
            document.text,
            headings=document.headings,
            sections=document.sections,
            metrics_hook=self.metrics_hook,
        )
        questions = await self._quiz_client.generate(content, question_count)

        logger.info(
            "Processed upload %s: %d characters, %d questions",
            filename or file_url,
            len(content.text),
            len(questions),
        )
        return UploadResult(document=document, content=content, questions=questions)

    async def aclose(self) -> None:
        """Close the fetcher's owned HTTP client and the LLM client."""
        try:
            await self._extractor.aclose()
        finally:
            await self._quiz_client.aclose()

    async def __aenter__(self) -> "UploadPipeline":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_pipeline(
    llm_config: LLMConfig,
    http_client: httpx.AsyncClient | None = None,
    quiz_config: QuizConfig = QuizConfig(),
    fetcher_config: FetcherConfig = FetcherConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> UploadPipeline:
    """Wire a pipeline from config.

    Without an API key the quiz client runs LLM-free and every upload gets
    template questions. The pipeline owns the clients it creates; close it
    with `aclose()` or use it as an async context manager.
    """
    if llm_config.api_key:
        llm = create_llm_client(llm_config, metrics_hook=metrics_hook)
    else:
        logger.warning(
            "No API key for %s, quiz generation will use fallback questions",
            llm_config.provider,
        )
        llm = None

    fetcher = DocumentFetcher(http_client, fetcher_config, metrics_hook=metrics_hook)
    return UploadPipeline(
        extractor=DocumentExtractor(fetcher, metrics_hook=metrics_hook),
        quiz_client=QuizClient(llm, quiz_config, metrics_hook=metrics_hook),
        metrics_hook=metrics_hook,
    )
