# src/force_tracker/quiz/prompt_builder.py

from force_tracker.analysis.models import ParsedContent

MAX_PROMPT_LENGTH = 8000
TRUNCATION_MARKER = "..."


def build_prompt(content: ParsedContent, max_length: int = MAX_PROMPT_LENGTH) -> str:
    """Serialize analyzed content into one bounded prompt.

    Title, main topics and key points come first, then the full text.
    A prompt longer than `max_length` is cut at exactly `max_length`
    characters and marked with an ellipsis.
    """
    prompt = ""

    if content.title:
        prompt += f"Title: {content.title}\n\n"

    if content.headings:
        prompt += "Main Topics:\n" + "\n".join(content.headings) + "\n\n"

    if content.key_points:
        prompt += "Key Points:\n" + "\n".join(content.key_points) + "\n\n"

    prompt += f"Content:\n{content.text}"

    if len(prompt) > max_length:
        prompt = prompt[:max_length] + TRUNCATION_MARKER
    return prompt
