"""
CLI entrypoint:
  summary-shorts article.txt [--output out.mp4] [--duration 20]
  summary-shorts --text "..."
  echo "..." | summary-shorts
  summary-shorts --init-defaults

Exit codes: 0 success, 1 pipeline failure, 2 configuration error.
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

EXIT_OK = 0
EXIT_PIPELINE_FAILURE = 1
EXIT_CONFIG_ERROR = 2


def _read_source_text(args) -> str:
    from summary_shorts.errors import ConfigurationError

    if args.text is not None:
        return args.text
    if args.input_file:
        try:
            with open(args.input_file, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Cannot read input file {args.input_file}: {e}") from e
    if sys.stdin is not None and not sys.stdin.isatty():
        return sys.stdin.read()
    raise ConfigurationError("No input text: pass INPUT_FILE, --text, or pipe text on stdin")


def _init_defaults() -> int:
    from summary_shorts import config
    from summary_shorts.adapters.placeholders import ensure_default_assets

    created = ensure_default_assets(
        config.DEFAULT_IMAGE_PATH,
        config.DEFAULT_MUSIC_PATH,
        width=config.VIDEO_WIDTH,
        height=config.VIDEO_HEIGHT,
        duration_seconds=config.VIDEO_DURATION,
        font_path=config.FONT_PATH,
    )
    if created:
        for path in created:
            print(f"✅ Created {path}")
    else:
        print("Default assets already present.")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="summary-shorts",
        description="Summarize a text and turn it into a short captioned video",
    )
    parser.add_argument("input_file", nargs="?", help="Text file to summarize (default: stdin)")
    parser.add_argument("--text", type=str, help="Text to summarize (instead of a file)")
    parser.add_argument("--output", type=str, help="Output video path")
    parser.add_argument("--duration", type=int, help="Video duration in seconds")
    parser.add_argument(
        "--init-defaults",
        action="store_true",
        help="Create missing default fallback image/music and exit",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    from summary_shorts import config
    from summary_shorts.adapters import default_adapters
    from summary_shorts.application.pipeline import VideoPipeline
    from summary_shorts.errors import ConfigurationError, SummaryShortsError

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.init_defaults:
        return _init_defaults()

    if args.duration is not None and args.duration <= 0:
        parser.error("--duration must be positive")

    try:
        config.require_credentials()
        source_text = _read_source_text(args)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    adapters = default_adapters()
    if args.output:
        adapters["paths"] = replace(adapters["paths"], output_path=args.output)
    if args.duration is not None:
        adapters["duration_seconds"] = args.duration

    pipeline = VideoPipeline(**adapters)
    try:
        pipeline.run(source_text)
    except SummaryShortsError:
        return EXIT_PIPELINE_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
