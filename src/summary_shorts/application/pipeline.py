"""
Video pipeline – single responsibility: orchestrate summary → keywords → media → video.
Depends only on port interfaces (SOLID – Dependency Inversion).
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from summary_shorts.application.composer import VideoComposer
from summary_shorts.application.media import FallbackResolver
from summary_shorts.domain.models import CompositionSpec, MediaKind
from summary_shorts.errors import SummarizationError, SummaryShortsError
from summary_shorts.ports.interfaces import IKeywordExtractor, ITextSummarizer


@dataclass(frozen=True)
class PipelinePaths:
    """Where a run writes its artifacts and which defaults it falls back to."""
    image_path: str
    music_path: str
    output_path: str
    default_image_path: str
    default_music_path: str


class VideoPipeline:
    """
    Orchestrates one text → video run.
    All dependencies are injected (ports); no concrete implementations here.
    """

    def __init__(
        self,
        *,
        summarizer: ITextSummarizer,
        keyword_extractor: IKeywordExtractor,
        resolver: FallbackResolver,
        composer: VideoComposer,
        paths: PipelinePaths,
        duration_seconds: int = 20,
    ):
        self._summarizer = summarizer
        self._keywords = keyword_extractor
        self._resolver = resolver
        self._composer = composer
        self._paths = paths
        self._duration = duration_seconds

    def run(self, source_text: str, cancel_event: Optional[threading.Event] = None) -> str:
        """Generate the video. Returns the output path; fatal failures propagate."""
        print("=" * 60)
        print("Generating summary video...")
        print("=" * 60)

        try:
            return self._run(source_text, cancel_event)
        except SummaryShortsError as e:
            print(f"\n❌ {type(e).__name__}: {e}")
            raise

    def _run(self, source_text: str, cancel_event: Optional[threading.Event]) -> str:
        print("\n[1/6] Loading source text...")
        if not source_text or not source_text.strip():
            raise SummarizationError("Source text is empty")
        print(f"  {len(source_text)} characters")

        print("\n[2/6] Generating summary...")
        summary = self._summarizer.summarize(source_text)
        print(f"  Summary: {summary}")

        print("\n[3/6] Extracting image and music keywords...")
        with ThreadPoolExecutor(max_workers=2) as executor:
            image_future = executor.submit(self._keywords.extract_keyword, summary, MediaKind.IMAGE)
            music_future = executor.submit(self._keywords.extract_keyword, summary, MediaKind.MUSIC)
            image_keyword = image_future.result()
            music_keyword = music_future.result()
        print(f"  Image keyword: {image_keyword}")
        print(f"  Music keyword: {music_keyword}")

        print("\n[4/6] Fetching image...")
        print("[5/6] Fetching music...")
        paths = self._paths
        with ThreadPoolExecutor(max_workers=2) as executor:
            image_future = executor.submit(
                self._resolver.resolve,
                MediaKind.IMAGE, image_keyword, paths.image_path, paths.default_image_path,
            )
            music_future = executor.submit(
                self._resolver.resolve,
                MediaKind.MUSIC, music_keyword, paths.music_path, paths.default_music_path,
            )
            image_outcome = image_future.result()
            music_outcome = music_future.result()

        spec = CompositionSpec(
            image_asset=image_outcome.asset,
            audio_asset=music_outcome.asset,
            caption_text=summary,
            duration_seconds=self._duration,
            output_path=paths.output_path,
        )

        print("\n[6/6] Creating final video...")
        self._composer.compose(spec, cancel_event=cancel_event)

        print(f"\n✅ Success! Video saved to: {spec.output_path}")
        if image_outcome.recovered or music_outcome.recovered:
            print("   (generated with default fallback media)")
        return spec.output_path

