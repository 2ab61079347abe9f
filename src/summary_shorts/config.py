import os
from typing import List

from dotenv import load_dotenv

from summary_shorts.errors import ConfigurationError

load_dotenv()

# Credentials (all required, checked by require_credentials before a run)
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
UNSPLASH_ACCESS_KEY = os.getenv("UNSPLASH_ACCESS_KEY", "")
JAMENDO_CLIENT_ID = os.getenv("JAMENDO_CLIENT_ID", "")

REQUIRED_CREDENTIALS = ("OPENAI_API_KEY", "UNSPLASH_ACCESS_KEY", "JAMENDO_CLIENT_ID")

# LLM Configuration
# Priority order: OpenAI > Ollama (local fallback)
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.5"))
OLLAMA_BASE_URL = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3.1:8b")
SUMMARY_LANGUAGE = os.getenv("SUMMARY_LANGUAGE", "Japanese")

# Media provider endpoints
UNSPLASH_API_URL = os.getenv("UNSPLASH_API_URL", "https://api.unsplash.com/photos/random")
JAMENDO_API_URL = os.getenv("JAMENDO_API_URL", "https://api.jamendo.com/v3.0/tracks/")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

# Video Configuration
VIDEO_DURATION = int(os.getenv("VIDEO_DURATION", "20"))  # seconds
VIDEO_WIDTH = int(os.getenv("VIDEO_WIDTH", "1920"))
VIDEO_HEIGHT = int(os.getenv("VIDEO_HEIGHT", "1080"))  # Landscape (16:9)
FONT_SIZE = int(os.getenv("FONT_SIZE", "24"))
FONT_COLOR = os.getenv("FONT_COLOR", "white")
BOX_COLOR = os.getenv("BOX_COLOR", "black@0.5")  # semi-opaque box behind the caption
FFMPEG_BINARY = os.getenv("FFMPEG_BINARY", "ffmpeg")
ENCODE_TIMEOUT = float(os.getenv("ENCODE_TIMEOUT", "600"))  # 10 minutes

# Output directories
OUTPUT_DIR = os.getenv("OUTPUT_DIR", "output")
TEMP_DIR = os.getenv("TEMP_DIR", "temp")
ASSETS_DIR = os.getenv("ASSETS_DIR", "assets")

# Artifact paths
IMAGE_PATH = os.getenv("IMAGE_PATH", os.path.join(TEMP_DIR, "related_image.jpg"))
MUSIC_PATH = os.getenv("MUSIC_PATH", os.path.join(TEMP_DIR, "related_music.mp3"))
OUTPUT_PATH = os.getenv("OUTPUT_PATH", os.path.join(OUTPUT_DIR, "output_video.mp4"))

# Bundled fallback assets (create with `summary-shorts --init-defaults`)
DEFAULT_IMAGE_PATH = os.getenv("DEFAULT_IMAGE_PATH", os.path.join(ASSETS_DIR, "default_background.jpg"))
DEFAULT_MUSIC_PATH = os.getenv("DEFAULT_MUSIC_PATH", os.path.join(ASSETS_DIR, "default_music.mp3"))
FONT_PATH = os.getenv("FONT_PATH", os.path.join(ASSETS_DIR, "Arial.ttf"))


def missing_credentials() -> List[str]:
    """Names of required credential variables that are unset or blank."""
    return [name for name in REQUIRED_CREDENTIALS if not (globals().get(name) or "").strip()]


def require_credentials() -> None:
    """Raise ConfigurationError naming every missing credential."""
    missing = missing_credentials()
    if missing:
        raise ConfigurationError(
            "Missing required environment variables: " + ", ".join(missing)
        )
