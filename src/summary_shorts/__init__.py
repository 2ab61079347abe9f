"""
Summary Shorts – turn a text into a short captioned video.

Use from an installed environment:
  from summary_shorts.application.pipeline import VideoPipeline
  from summary_shorts.adapters import default_adapters
  pipeline = VideoPipeline(**default_adapters())
  pipeline.run(text)

Summarize → keywords → image (Unsplash) + music (Jamendo) → ffmpeg composite.
Swap any stage by implementing a port (e.g. IMediaProvider) and injecting it.
"""

__version__ = "0.1.0"
