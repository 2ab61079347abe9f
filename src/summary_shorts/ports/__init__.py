"""Ports (interfaces) – depend on these, implement in adapters."""

from summary_shorts.ports.interfaces import (
    IKeywordExtractor,
    IMediaProvider,
    ITextSummarizer,
    IVideoEncoder,
)

__all__ = [
    "IKeywordExtractor",
    "IMediaProvider",
    "ITextSummarizer",
    "IVideoEncoder",
]
