"""Shared pytest fixtures for summary_shorts tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from fakes import (
    JAMENDO_URL,
    TEST_AUDIO_URL,
    TEST_IMAGE_URL,
    UNSPLASH_URL,
    FakeResponse,
    FakeSession,
    StubKeywordExtractor,
    StubSummarizer,
    jamendo_ok,
    unsplash_ok,
)
from summary_shorts.adapters.providers import JamendoMusicProvider, UnsplashImageProvider
from summary_shorts.application.composer import OverlayStyle, VideoComposer
from summary_shorts.application.media import FallbackResolver, MediaFetcher
from summary_shorts.application.pipeline import PipelinePaths, VideoPipeline


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def style(tmp_path: Path) -> OverlayStyle:
    return OverlayStyle(font_path=str(tmp_path / "Arial.ttf"), width=1280, height=720)


@pytest.fixture
def default_assets(tmp_path: Path) -> dict:
    assets = tmp_path / "assets"
    assets.mkdir()
    image = assets / "default_background.jpg"
    music = assets / "default_music.mp3"
    image.write_bytes(b"default-image")
    music.write_bytes(b"default-music")
    return {"image": str(image), "music": str(music)}


@pytest.fixture
def paths(tmp_path: Path, default_assets: dict) -> PipelinePaths:
    return PipelinePaths(
        image_path=str(tmp_path / "temp" / "related_image.jpg"),
        music_path=str(tmp_path / "temp" / "related_music.mp3"),
        output_path=str(tmp_path / "output" / "output_video.mp4"),
        default_image_path=default_assets["image"],
        default_music_path=default_assets["music"],
    )


@pytest.fixture
def healthy_session() -> FakeSession:
    return FakeSession({
        UNSPLASH_URL: unsplash_ok,
        JAMENDO_URL: jamendo_ok,
        TEST_IMAGE_URL: lambda: FakeResponse(200, content=b"\xff\xd8image-bytes"),
        TEST_AUDIO_URL: lambda: FakeResponse(200, content=b"ID3audio-bytes"),
    })


@pytest.fixture
def providers():
    return [
        UnsplashImageProvider("unsplash-key", api_url=UNSPLASH_URL),
        JamendoMusicProvider("jamendo-id", api_url=JAMENDO_URL),
    ]


@pytest.fixture
def make_pipeline(providers, style, paths):
    """Factory: build a VideoPipeline from a session, encoder and optional stubs."""

    def _make(session, encoder, summarizer=None, keyword_extractor=None, duration_seconds=20):
        fetcher = MediaFetcher(providers, session=session)
        return VideoPipeline(
            summarizer=summarizer or StubSummarizer(),
            keyword_extractor=keyword_extractor or StubKeywordExtractor(),
            resolver=FallbackResolver(fetcher),
            composer=VideoComposer(encoder, style),
            paths=paths,
            duration_seconds=duration_seconds,
        )

    return _make

