"""Exception taxonomy. Only the fallback resolver recovers; everything else propagates."""

from typing import Optional


class SummaryShortsError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(SummaryShortsError):
    """Required settings (credentials, input files) are missing. Raised before any pipeline step."""


class LLMError(SummaryShortsError):
    """Every configured LLM provider failed to answer."""


class SummarizationError(SummaryShortsError):
    """The summary could not be produced. Fatal to the run."""


class ExtractionError(SummaryShortsError):
    """A search keyword could not be extracted. Fatal to the run."""


class MediaError(SummaryShortsError):
    """Recoverable media-acquisition failure."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(MediaError):
    """The provider search returned zero results."""


class ProviderError(MediaError):
    """The provider search endpoint answered with an error or an unreadable body."""


class DownloadError(MediaError):
    """The binary transfer of a found asset failed."""


class EncodingError(SummaryShortsError):
    """The encoding process failed; carries its diagnostics."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr

    def __str__(self) -> str:
        message = super().__str__()
        if self.stderr:
            return f"{message}\n{self.stderr}"
        return message


class EncodingCancelled(EncodingError):
    """Encoding was stopped through the cancellation signal."""
