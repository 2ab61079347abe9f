"""Default fallback assets: a plain background image and a silent track."""

import os
from typing import List

from PIL import Image, ImageDraw, ImageFont
from pydub import AudioSegment


def create_placeholder_image(
    path: str,
    width: int = 1920,
    height: int = 1080,
    text: str = "",
    font_path: str = "",
) -> str:
    """Dark frame with optional centered text."""
    img = Image.new("RGB", (width, height), color="#1a1a1a")
    if text:
        draw = ImageDraw.Draw(img)
        try:
            font = ImageFont.truetype(font_path, max(height // 18, 12))
        except (OSError, ValueError):
            font = ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        position = ((width - text_width) // 2, (height - text_height) // 2)
        draw.text(position, text, fill="white", font=font)

    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    img.save(path)
    return path


def create_silent_track(path: str, duration_seconds: float = 20) -> str:
    """Silence of the given length; format follows the file extension (mp3 needs ffmpeg)."""
    fmt = os.path.splitext(path)[1].lstrip(".").lower() or "wav"
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    silence = AudioSegment.silent(duration=int(duration_seconds * 1000))
    silence.export(path, format=fmt)
    return path


def ensure_default_assets(
    image_path: str,
    music_path: str,
    width: int = 1920,
    height: int = 1080,
    duration_seconds: float = 20,
    font_path: str = "",
) -> List[str]:
    """Create whichever default assets are missing; return the paths written."""
    created = []
    if not os.path.exists(image_path):
        created.append(create_placeholder_image(image_path, width, height, font_path=font_path))
    if not os.path.exists(music_path):
        created.append(create_silent_track(music_path, duration_seconds))
    return created
