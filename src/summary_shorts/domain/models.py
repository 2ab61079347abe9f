"""Domain models – immutable values passed between pipeline stages."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class MediaKind(str, Enum):
    """Kind of media fetched for a video."""
    IMAGE = "image"
    MUSIC = "music"


@dataclass(frozen=True)
class MediaAsset:
    """A media file on local disk, either fetched live or a bundled fallback."""
    kind: MediaKind
    source_url: str  # empty for fallback assets
    local_path: str
    is_fallback: bool = False


@dataclass(frozen=True)
class CompositionSpec:
    """Everything the composer needs for one encoding job."""
    image_asset: MediaAsset
    audio_asset: MediaAsset
    caption_text: str
    duration_seconds: int
    output_path: str


@dataclass(frozen=True)
class Fetched:
    """The live fetch succeeded."""
    asset: MediaAsset

    @property
    def recovered(self) -> bool:
        return False


@dataclass(frozen=True)
class Recovered:
    """The live fetch failed; `asset` points at the default file."""
    asset: MediaAsset
    error: Exception

    @property
    def recovered(self) -> bool:
        return True


FetchOutcome = Union[Fetched, Recovered]
