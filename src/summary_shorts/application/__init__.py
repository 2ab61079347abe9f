"""Application layer – use cases and pipeline orchestration."""

from summary_shorts.application.composer import EncodingJob, OverlayStyle, VideoComposer
from summary_shorts.application.media import FallbackResolver, MediaFetcher
from summary_shorts.application.pipeline import PipelinePaths, VideoPipeline

__all__ = [
    "EncodingJob",
    "FallbackResolver",
    "MediaFetcher",
    "OverlayStyle",
    "PipelinePaths",
    "VideoComposer",
    "VideoPipeline",
]
