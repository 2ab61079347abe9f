"""Tests for default fallback asset generation."""

from PIL import Image
from pydub import AudioSegment

from summary_shorts.adapters.placeholders import (
    create_placeholder_image,
    create_silent_track,
    ensure_default_assets,
)


def test_placeholder_image_has_requested_size(tmp_path):
    path = tmp_path / "nested" / "background.png"

    create_placeholder_image(str(path), width=320, height=180, text="Summary")

    with Image.open(path) as img:
        assert img.size == (320, 180)
        assert img.mode == "RGB"


def test_placeholder_image_without_text_is_plain(tmp_path):
    path = tmp_path / "background.jpg"

    create_placeholder_image(str(path), width=64, height=36)

    with Image.open(path) as img:
        assert img.format == "JPEG"
        r, g, b = img.getpixel((32, 18))
        assert max(r, g, b) < 48


def test_silent_track_duration(tmp_path):
    path = tmp_path / "silence.wav"

    create_silent_track(str(path), duration_seconds=1.5)

    track = AudioSegment.from_wav(str(path))
    assert abs(len(track) - 1500) <= 5
    assert track.max == 0


def test_ensure_default_assets_only_creates_missing(tmp_path):
    image = tmp_path / "default_background.png"
    music = tmp_path / "default_music.wav"
    music.write_bytes(b"keep me")

    created = ensure_default_assets(str(image), str(music), width=32, height=18, duration_seconds=1)

    assert created == [str(image)]
    assert image.exists()
    assert music.read_bytes() == b"keep me"
    assert ensure_default_assets(str(image), str(music)) == []
