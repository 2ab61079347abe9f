"""IVideoEncoder adapter running the ffmpeg executable."""

import os
import subprocess
import tempfile
import threading
import time
from typing import List, Optional

from summary_shorts.application.composer import EncodingJob
from summary_shorts.errors import EncodingCancelled, EncodingError
from summary_shorts.ports.interfaces import IVideoEncoder

STDERR_TAIL_LINES = 20


def reserve_partial_path(output_path: str) -> str:
    """Create a unique 'out/video.XXXX.partial.mp4' beside the output (keeps the extension so ffmpeg picks the muxer)."""
    directory, name = os.path.split(os.path.abspath(output_path))
    stem, ext = os.path.splitext(name)
    fd, path = tempfile.mkstemp(prefix=f"{stem}.", suffix=f".partial{ext}", dir=directory)
    os.close(fd)
    return path


def _tail(stderr: str, lines: int = STDERR_TAIL_LINES) -> str:
    return "\n".join(stderr.strip().splitlines()[-lines:])


class FFmpegEncoder(IVideoEncoder):
    """
    Runs one ffmpeg process per job. Output goes to a partial file that is renamed
    onto the final path only after a zero exit; anything else removes it.
    The process is always reaped before encode() returns or raises.
    """

    def __init__(
        self,
        ffmpeg_binary: str = "ffmpeg",
        timeout: Optional[float] = 600,
        poll_interval: float = 0.2,
    ):
        self.ffmpeg_binary = ffmpeg_binary
        self.timeout = timeout
        self.poll_interval = poll_interval

    def build_command(self, job: EncodingJob, output_target: str) -> List[str]:
        return [self.ffmpeg_binary, "-y", "-hide_banner", "-loglevel", "error"] + job.arguments(output_target)

    def encode(self, job: EncodingJob, cancel_event: Optional[threading.Event] = None) -> None:
        spec = job.spec
        for path in (spec.image_asset.local_path, spec.audio_asset.local_path):
            if not os.path.isfile(path):
                raise EncodingError(f"Input file not found: {path}")

        output_path = spec.output_path
        output_dir = os.path.dirname(os.path.abspath(output_path))
        os.makedirs(output_dir, exist_ok=True)
        partial_path = reserve_partial_path(output_path)

        print(f"  🎬 Running {os.path.basename(self.ffmpeg_binary)} ({spec.duration_seconds}s)...")
        try:
            returncode, stderr = self._run(self.build_command(job, partial_path), cancel_event)
            if returncode != 0:
                raise EncodingError(
                    f"ffmpeg exited with code {returncode}",
                    returncode=returncode,
                    stderr=_tail(stderr),
                )
            # the reserved file starts out empty
            if not os.path.isfile(partial_path) or os.path.getsize(partial_path) == 0:
                raise EncodingError(
                    f"ffmpeg succeeded but wrote no file: {partial_path}",
                    returncode=returncode,
                    stderr=_tail(stderr),
                )
            os.replace(partial_path, output_path)
        finally:
            if os.path.exists(partial_path):
                os.remove(partial_path)

    def _run(self, cmd: List[str], cancel_event: Optional[threading.Event]):
        """Spawn, wait, return (returncode, stderr). Kills the child on cancel, timeout or error."""
        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise EncodingError(f"Could not start {cmd[0]}: {e}") from e

        start_time = time.monotonic()
        try:
            while True:
                try:
                    _, stderr = process.communicate(timeout=self.poll_interval)
                    return process.returncode, stderr or ""
                except subprocess.TimeoutExpired:
                    pass

                if cancel_event is not None and cancel_event.is_set():
                    stderr = self._kill(process)
                    raise EncodingCancelled(
                        "Encoding cancelled",
                        returncode=process.returncode,
                        stderr=_tail(stderr),
                    )
                if self.timeout is not None and time.monotonic() - start_time > self.timeout:
                    stderr = self._kill(process)
                    raise EncodingError(
                        f"Encoding timed out after {self.timeout:g}s",
                        returncode=process.returncode,
                        stderr=_tail(stderr),
                    )
        finally:
            if process.poll() is None:
                self._kill(process)

    @staticmethod
    def _kill(process: subprocess.Popen) -> str:
        process.kill()
        _, stderr = process.communicate()
        return stderr or ""
