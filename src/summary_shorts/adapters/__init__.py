"""
Adapters – concrete implementations of ports, wired from config.
Pass overrides (summarizer=..., encoder=..., session=...) to swap one piece,
e.g. in tests or to point at another media provider.
"""

from summary_shorts.adapters.content import LLMKeywordExtractor, LLMSummarizer
from summary_shorts.adapters.llm import LLMClient
from summary_shorts.adapters.providers import JamendoMusicProvider, UnsplashImageProvider
from summary_shorts.adapters.video import FFmpegEncoder


def default_adapters(**overrides):
    """
    Build VideoPipeline keyword arguments from config.
    Overrides: summarizer, keyword_extractor, image_provider, music_provider,
    session, encoder, paths, duration_seconds, style.
    """
    import requests

    from summary_shorts import config
    from summary_shorts.application.composer import OverlayStyle, VideoComposer
    from summary_shorts.application.media import FallbackResolver, MediaFetcher
    from summary_shorts.application.pipeline import PipelinePaths

    def pick(name, factory):
        return overrides[name] if name in overrides else factory()

    llm = None
    if "summarizer" not in overrides or "keyword_extractor" not in overrides:
        llm = LLMClient()

    providers = [
        pick("image_provider", lambda: UnsplashImageProvider(
            config.UNSPLASH_ACCESS_KEY, api_url=config.UNSPLASH_API_URL, timeout=config.HTTP_TIMEOUT,
        )),
        pick("music_provider", lambda: JamendoMusicProvider(
            config.JAMENDO_CLIENT_ID, api_url=config.JAMENDO_API_URL, timeout=config.HTTP_TIMEOUT,
        )),
    ]
    fetcher = MediaFetcher(
        providers,
        session=pick("session", requests.Session),
        timeout=config.HTTP_TIMEOUT,
    )
    style = pick("style", lambda: OverlayStyle(
        font_path=config.FONT_PATH,
        font_size=config.FONT_SIZE,
        font_color=config.FONT_COLOR,
        box_color=config.BOX_COLOR,
        width=config.VIDEO_WIDTH,
        height=config.VIDEO_HEIGHT,
    ))
    encoder = pick("encoder", lambda: FFmpegEncoder(config.FFMPEG_BINARY, timeout=config.ENCODE_TIMEOUT))

    return {
        "summarizer": pick("summarizer", lambda: LLMSummarizer(llm)),
        "keyword_extractor": pick("keyword_extractor", lambda: LLMKeywordExtractor(llm)),
        "resolver": FallbackResolver(fetcher),
        "composer": VideoComposer(encoder, style),
        "paths": pick("paths", lambda: PipelinePaths(
            image_path=config.IMAGE_PATH,
            music_path=config.MUSIC_PATH,
            output_path=config.OUTPUT_PATH,
            default_image_path=config.DEFAULT_IMAGE_PATH,
            default_music_path=config.DEFAULT_MUSIC_PATH,
        )),
        "duration_seconds": pick("duration_seconds", lambda: config.VIDEO_DURATION),
    }


__all__ = [
    "FFmpegEncoder",
    "JamendoMusicProvider",
    "LLMClient",
    "LLMKeywordExtractor",
    "LLMSummarizer",
    "UnsplashImageProvider",
    "default_adapters",
]
