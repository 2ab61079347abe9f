"""
Video composition: one still image looped for the full duration, one audio track,
the caption burned in the middle of the frame.

Duration policy: the output is always `duration_seconds` long. Audio is neither
looped nor padded: a longer track is cut at the duration, a shorter one ends
early and the remaining video is silent.
"""

import threading
from dataclasses import dataclass
from typing import List, Optional

from summary_shorts.domain.models import CompositionSpec
from summary_shorts.errors import EncodingError
from summary_shorts.ports.interfaces import IVideoEncoder

# Special inside a drawtext option value (av_get_token)
_OPTION_SPECIALS = "\\':"
# Special to the filter graph parser
_GRAPH_SPECIALS = "\\',;[]"


def _backslash_escape(text: str, specials: str) -> str:
    return "".join("\\" + c if c in specials else c for c in text)


def escape_drawtext_text(text: str) -> str:
    """
    Escape a value for use inside a drawtext filter in an ffmpeg filter graph.
    Two levels: first the option value, then the graph itself, so ':' ends up
    as '\\\\:' and "'" as "\\\\\\'" in the argument string.
    """
    return _backslash_escape(_backslash_escape(text, _OPTION_SPECIALS), _GRAPH_SPECIALS)


@dataclass(frozen=True)
class OverlayStyle:
    font_path: str
    font_size: int = 24
    font_color: str = "white"
    box_color: str = "black@0.5"
    width: int = 1920
    height: int = 1080


@dataclass(frozen=True)
class EncodingJob:
    """A fully resolved encoding job; `arguments` renders the ffmpeg argv tail."""
    spec: CompositionSpec
    filter_graph: str

    def input_arguments(self) -> List[str]:
        duration = str(self.spec.duration_seconds)
        return [
            "-loop", "1", "-t", duration, "-i", self.spec.image_asset.local_path,
            "-i", self.spec.audio_asset.local_path,
        ]

    def output_arguments(self) -> List[str]:
        return [
            "-map", "0:v:0", "-map", "1:a:0",
            "-vf", self.filter_graph,
            "-c:v", "libx264",
            "-pix_fmt", "yuv420p",
            "-c:a", "aac",
            "-t", str(self.spec.duration_seconds),
        ]

    def arguments(self, output_target: Optional[str] = None) -> List[str]:
        """ffmpeg arguments (without the binary) writing to `output_target` or the composition's output path."""
        target = output_target or self.spec.output_path
        return self.input_arguments() + self.output_arguments() + [target]


def build_filter_graph(caption_text: str, style: OverlayStyle) -> str:
    """Fit the image to the frame, then draw the caption centered over a translucent box."""
    w, h = style.width, style.height
    fit = (
        f"scale={w}:{h}:force_original_aspect_ratio=decrease,"
        f"pad={w}:{h}:(ow-iw)/2:(oh-ih)/2,"
        "setsar=1"
    )
    drawtext = ":".join([
        f"fontfile={escape_drawtext_text(style.font_path)}",
        f"text={escape_drawtext_text(caption_text)}",
        "expansion=none",
        f"fontsize={style.font_size}",
        f"fontcolor={style.font_color}",
        "x=(w-text_w)/2",
        "y=(h-text_h)/2",
        "box=1",
        f"boxcolor={style.box_color}",
    ])
    return f"{fit},drawtext={drawtext}"


class VideoComposer:
    """Turns a CompositionSpec into an EncodingJob and runs it on the injected encoder."""

    def __init__(self, encoder: IVideoEncoder, style: OverlayStyle):
        self._encoder = encoder
        self._style = style

    def build_job(self, spec: CompositionSpec) -> EncodingJob:
        if spec.duration_seconds <= 0:
            raise EncodingError(f"Duration must be positive, got {spec.duration_seconds}")
        if not spec.output_path:
            raise EncodingError("Output path is empty")
        return EncodingJob(spec=spec, filter_graph=build_filter_graph(spec.caption_text, self._style))

    def compose(self, spec: CompositionSpec, cancel_event: Optional[threading.Event] = None) -> None:
        """Returns once the output file is finalized; raises EncodingError otherwise."""
        job = self.build_job(spec)
        try:
            self._encoder.encode(job, cancel_event=cancel_event)
        except EncodingError:
            raise
        except Exception as e:
            raise EncodingError(f"Encoder failed: {e}") from e
