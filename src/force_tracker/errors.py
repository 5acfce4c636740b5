# src/force_tracker/errors.py

"""Exception hierarchy for force-tracker.

Document errors propagate to the upload workflow, which shows a single
user-facing message. Quiz generation errors never leave the quiz clients:
they are raised internally and answered with a fallback quiz.
"""

USER_MESSAGE = (
    "Could not understand the file. Please make sure it is a readable "
    "PDF, Word or PowerPoint document and try again."
)


class ForceTrackerError(Exception):
    """Base class for all force-tracker errors."""


# ============================================================================
# Document errors
# ============================================================================


class DocumentError(ForceTrackerError):
    """A document could not be turned into text."""


class FetchError(DocumentError):
    """The document resource was unreachable or returned a non-2xx status."""


class UnsupportedFormatError(DocumentError):
    """The MIME type is not PDF, Word or PowerPoint."""


class EmptyContentError(DocumentError):
    """Extraction succeeded but produced no usable text."""


class CorruptDocumentError(DocumentError):
    """The parsing library could not open the document."""


class DocumentUnreadableError(DocumentError):
    """User-facing wrapper raised by the upload pipeline.

    The underlying cause is chained and logged, never shown.
    """

    def __init__(self, message: str = USER_MESSAGE) -> None:
        super().__init__(message)
        self.user_message = message


# ============================================================================
# Quiz generation errors (absorbed by the quiz clients)
# ============================================================================


class QuizGenerationError(ForceTrackerError):
    """The LLM path failed to produce a quiz."""


class LLMRequestError(QuizGenerationError):
    """Network or HTTP failure calling the completion endpoint."""


class LLMParseError(QuizGenerationError):
    """The completion was not valid JSON of the expected shape."""
