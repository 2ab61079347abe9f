"""Domain models and value objects."""

from summary_shorts.domain.models import (
    CompositionSpec,
    Fetched,
    FetchOutcome,
    MediaAsset,
    MediaKind,
    Recovered,
)

__all__ = [
    "CompositionSpec",
    "Fetched",
    "FetchOutcome",
    "MediaAsset",
    "MediaKind",
    "Recovered",
]
