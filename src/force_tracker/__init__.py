# Analysis
from .analysis import ParsedContent, analyze, extract_key_topics

# Errors
from .errors import (
    DocumentError,
    DocumentUnreadableError,
    EmptyContentError,
    FetchError,
    ForceTrackerError,
    LLMParseError,
    LLMRequestError,
    UnsupportedFormatError,
)

# LLMs
from .llms import LLMClient, LLMConfig, create_llm_client

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import DocumentExtractor, DocumentFetcher, ExtractedDocument

# Pipeline
from .pipeline import UploadPipeline, UploadResult, build_pipeline

# Progress
from .progress import JediRank, SkillType, rank_progress, score_quiz

# Prompts
from .prompts import Prompt, PromptsLibrary

# Quiz
from .quiz import (
    QuizClient,
    QuizConfig,
    QuizQuestion,
    RankAssessmentClient,
    build_prompt,
    fallback_questions,
)

__all__ = [
    # Analysis
    "ParsedContent",
    "analyze",
    "extract_key_topics",
    # Errors
    "ForceTrackerError",
    "DocumentError",
    "DocumentUnreadableError",
    "EmptyContentError",
    "FetchError",
    "UnsupportedFormatError",
    "LLMParseError",
    "LLMRequestError",
    # LLMs
    "LLMClient",
    "LLMConfig",
    "create_llm_client",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocumentExtractor",
    "DocumentFetcher",
    "ExtractedDocument",
    # Pipeline
    "UploadPipeline",
    "UploadResult",
    "build_pipeline",
    # Progress
    "JediRank",
    "SkillType",
    "rank_progress",
    "score_quiz",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Quiz
    "QuizClient",
    "QuizConfig",
    "QuizQuestion",
    "RankAssessmentClient",
    "build_prompt",
    "fallback_questions",
]
