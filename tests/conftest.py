"""
Shared fixtures for the Video Range Proxy tests.
"""

import asyncio

import pytest

from video_range_proxy.core.config import Config
from video_range_proxy.core.errors import UpstreamFetchError
from video_range_proxy.proxy.domain.interfaces import ContentSource
from video_range_proxy.proxy.domain.models import ContentSlice


def make_video_bytes(size: int) -> bytes:
    """Deterministic, non-repeating-per-256 test payload"""
    pattern = bytes(range(256))
    return (pattern * (size // 256 + 1))[:size]


class FakeContentSource(ContentSource):
    """Serves bytes held in memory, counting reads"""

    def __init__(self, data: bytes = b"", error: Exception = None):
        self.data = data
        self.error = error
        self.calls = 0
        self.closed = False

    async def read_window(self, window):
        self.calls += 1
        if self.error is not None:
            raise self.error
        clamped = window.clamp(len(self.data))
        return ContentSlice(window=clamped, data=self.data[clamped.start:clamped.end], total=len(self.data))

    async def close(self):
        self.closed = True


@pytest.fixture
def video_bytes():
    return make_video_bytes(5_000_000)


@pytest.fixture
def video_file(tmp_path, video_bytes):
    path = tmp_path / "video.mp4"
    path.write_bytes(video_bytes)
    return path


@pytest.fixture
def fake_source(video_bytes):
    return FakeContentSource(video_bytes)


@pytest.fixture
def failing_source():
    return FakeContentSource(error=UpstreamFetchError("Origin unreachable: connection refused"))


@pytest.fixture
def config(video_file):
    config = Config()
    config.origin.video_path = str(video_file)
    return config


class FakeService:
    """Listener stand-in that runs until stopped, or fails/returns on demand"""

    def __init__(self, name, fail_with=None, exit_after=None):
        self.name = name
        self.fail_with = fail_with
        self.exit_after = exit_after
        self.stopped = asyncio.Event()
        self.stop_calls = 0

    async def serve(self):
        if self.fail_with is not None:
            await asyncio.sleep(0.01)
            raise self.fail_with
        if self.exit_after is not None:
            await asyncio.sleep(self.exit_after)
            return
        await self.stopped.wait()

    def stop(self):
        self.stop_calls += 1
        self.stopped.set()
