"""
Port interfaces (SOLID – Dependency Inversion).
Implement these in adapters; the application layer depends only on these abstractions.
A new media source (e.g. Pexels) implements IMediaProvider; tests inject doubles.
"""

import threading
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from summary_shorts.domain.models import MediaKind

if TYPE_CHECKING:
    from summary_shorts.application.composer import EncodingJob


class ITextSummarizer(ABC):
    """Text summarization (LLM-backed in production)."""

    @abstractmethod
    def summarize(self, text: str) -> str:
        """Return a short, non-empty summary. Raises SummarizationError."""
        pass


class IKeywordExtractor(ABC):
    """Single search keyword for a media kind."""

    @abstractmethod
    def extract_keyword(self, summary: str, kind: MediaKind) -> str:
        """Return one trimmed keyword token. Raises ExtractionError."""
        pass


class IMediaProvider(ABC):
    """Media search API: keyword -> direct asset URL of the first result."""

    kind: MediaKind

    @abstractmethod
    def search(self, session, keyword: str) -> str:
        """
        Query the provider with `keyword` and return the first result's asset URL.
        Raises NotFoundError on zero results, ProviderError on any other failure.
        """
        pass


class IVideoEncoder(ABC):
    """Runs one encoding job to completion."""

    @abstractmethod
    def encode(
        self,
        job: "EncodingJob",
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        """Write job.spec.output_path or raise EncodingError; never leave a process running."""
        pass
