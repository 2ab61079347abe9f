"""Test doubles: fake HTTP session, stub LLM ports, recording encoder."""

from __future__ import annotations

import json
from pathlib import Path

import requests

from summary_shorts.application.composer import EncodingJob
from summary_shorts.domain.models import MediaKind
from summary_shorts.ports.interfaces import IKeywordExtractor, ITextSummarizer, IVideoEncoder

UNSPLASH_URL = "https://api.unsplash.com/photos/random"
JAMENDO_URL = "https://api.jamendo.com/v3.0/tracks/"
TEST_IMAGE_URL = "https://images.example.test/cat.jpg"
TEST_AUDIO_URL = "https://audio.example.test/jazz.mp3"


# ============================================================================
# HTTP fakes
# ============================================================================


class FakeResponse:
    """Just enough of requests.Response for the fetcher and providers."""

    def __init__(self, status_code=200, json_data=None, content=b"", text=None, chunks=None):
        self.status_code = status_code
        self._json = json_data
        self.content = content
        self.text = text if text is not None else (json.dumps(json_data) if json_data is not None else "")
        self._chunks = chunks
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def iter_content(self, chunk_size=1):
        if self._chunks is not None:
            for chunk in self._chunks:
                if isinstance(chunk, Exception):
                    raise chunk
                yield chunk
            return
        for i in range(0, len(self.content), chunk_size):
            yield self.content[i:i + chunk_size]

    def close(self):
        self.closed = True


class FakeSession:
    """Routes GETs by URL to canned responses (or exceptions) and records every call."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def get(self, url, params=None, **kwargs):
        self.calls.append({"url": url, "params": params, **kwargs})
        if url not in self.routes:
            raise requests.ConnectionError(f"no route for {url}")
        route = self.routes[url]
        if callable(route):
            route = route()
        if isinstance(route, Exception):
            raise route
        return route


def unsplash_ok(url=TEST_IMAGE_URL) -> FakeResponse:
    return FakeResponse(200, {"id": "abc", "urls": {"regular": url, "full": url + "?full"}})


def jamendo_ok(url=TEST_AUDIO_URL) -> FakeResponse:
    return FakeResponse(200, {
        "headers": {"status": "success", "code": 0, "results_count": 1},
        "results": [{"id": "1", "name": "Track", "audio": url}],
    })


# ============================================================================
# Port doubles
# ============================================================================


class StubSummarizer(ITextSummarizer):
    def __init__(self, summary="summary-A", error=None):
        self.summary = summary
        self.error = error
        self.calls = []

    def summarize(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.summary


class StubKeywordExtractor(IKeywordExtractor):
    def __init__(self, keywords=None, errors=None):
        self.keywords = keywords or {MediaKind.IMAGE: "cat", MediaKind.MUSIC: "jazz"}
        self.errors = errors or {}
        self.calls = []

    def extract_keyword(self, summary, kind):
        self.calls.append((summary, kind))
        if kind in self.errors:
            raise self.errors[kind]
        return self.keywords[kind]


class RecordingEncoder(IVideoEncoder):
    """Records every job; writes a stub output file unless told to fail."""

    def __init__(self, error: Exception | None = None, write_output: bool = True):
        self.error = error
        self.write_output = write_output
        self.jobs: list[EncodingJob] = []
        self.cancel_events = []

    def encode(self, job, cancel_event=None):
        self.jobs.append(job)
        self.cancel_events.append(cancel_event)
        if self.error is not None:
            raise self.error
        if self.write_output:
            output = Path(job.spec.output_path)
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(b"fake-mp4")

    @property
    def last_spec(self):
        return self.jobs[-1].spec

