# src/force_tracker/observability/names.py

"""Standard metric names for force-tracker observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# LLM Metrics
# ============================================================================

# Duration
LLM_COMPLETION_DURATION = "llm_completion_duration"

# Counters
LLM_REQUESTS_TOTAL = "llm_requests_total"
LLM_ERRORS_TOTAL = "llm_errors_total"

# Counters (token usage - monotonic over time for cost/rate tracking)
LLM_TOKENS_PROMPT = "llm_tokens_prompt"
LLM_TOKENS_COMPLETION = "llm_tokens_completion"
LLM_TOKENS_TOTAL = "llm_tokens_total"


# ============================================================================
# Document Metrics
# ============================================================================

# Duration
DOCUMENT_FETCH_DURATION = "document_fetch_duration"
DOCUMENT_PARSE_DURATION = "document_parse_duration"

# Counters
DOCUMENTS_PARSED_TOTAL = "documents_parsed_total"
DOCUMENT_ERRORS_TOTAL = "document_errors_total"


# ============================================================================
# Analysis Metrics
# ============================================================================

# Duration
ANALYSIS_DURATION = "analysis_duration"

# Gauges
ANALYSIS_TEXT_LENGTH = "analysis_text_length"


# ============================================================================
# Quiz Metrics
# ============================================================================

# Duration
QUIZ_GENERATION_DURATION = "quiz_generation_duration"

# Counters
QUIZ_QUESTIONS_GENERATED_TOTAL = "quiz_questions_generated_total"
QUIZ_QUESTIONS_REJECTED_TOTAL = "quiz_questions_rejected_total"
QUIZ_FALLBACKS_TOTAL = "quiz_fallbacks_total"
