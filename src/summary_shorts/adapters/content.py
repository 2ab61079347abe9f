"""ITextSummarizer / IKeywordExtractor adapters backed by LLMClient."""

from typing import Optional

from summary_shorts import config
from summary_shorts.adapters.llm import LLMClient
from summary_shorts.adapters.prompts import KEYWORD_PROMPTS, SUMMARY_PROMPT
from summary_shorts.domain.models import MediaKind
from summary_shorts.errors import ExtractionError, LLMError, SummarizationError
from summary_shorts.ports.interfaces import IKeywordExtractor, ITextSummarizer

_KEYWORD_STRIP = " \t\r\n\"'`.,;:!?。、「」『』“”‘’*#"


def clean_keyword(raw: str) -> str:
    """First line, surrounding quotes/punctuation removed, first whitespace-separated token."""
    lines = [line.strip(_KEYWORD_STRIP) for line in (raw or "").splitlines()]
    lines = [line for line in lines if line]
    if not lines:
        return ""
    first = lines[0]
    if ":" in first and first.split(":", 1)[0].strip().lower() == "keyword":
        first = first.split(":", 1)[1]
    tokens = first.split()
    return tokens[0].strip(_KEYWORD_STRIP) if tokens else ""


class LLMSummarizer(ITextSummarizer):
    """Summarizes text into `language` via the LLM client."""

    def __init__(self, client: Optional[LLMClient] = None, language: Optional[str] = None):
        self._client = client or LLMClient()
        self._language = language or config.SUMMARY_LANGUAGE

    def summarize(self, text: str) -> str:
        prompt = SUMMARY_PROMPT.format(language=self._language, text=text)
        try:
            summary = self._client.generate(prompt).strip()
        except LLMError as e:
            raise SummarizationError(f"Summary generation failed: {e}") from e
        if not summary:
            raise SummarizationError("Summary generation returned an empty response")
        return summary


class LLMKeywordExtractor(IKeywordExtractor):
    """Extracts one search keyword per media kind via the LLM client."""

    def __init__(self, client: Optional[LLMClient] = None):
        self._client = client or LLMClient()

    def extract_keyword(self, summary: str, kind: MediaKind) -> str:
        kind = MediaKind(kind)
        prompt = KEYWORD_PROMPTS[kind.value].format(summary=summary)
        try:
            raw = self._client.generate(prompt)
        except LLMError as e:
            raise ExtractionError(f"{kind.value} keyword extraction failed: {e}") from e
        keyword = clean_keyword(raw)
        if not keyword:
            raise ExtractionError(f"{kind.value} keyword extraction returned no keyword ({raw!r})")
        return keyword
