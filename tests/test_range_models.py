import pytest

from video_range_proxy.core.config import CHUNK_SIZE, FIRST_CHUNK_SIZE
from video_range_proxy.core.errors import RangeParseError, UnsupportedRangeError
from video_range_proxy.proxy.domain.models import (
    RangeRequest, ChunkWindow, ContentBuffer, ChunkResponse
)


def test_chunk_size_constants():
    assert FIRST_CHUNK_SIZE == 102_400
    assert CHUNK_SIZE == 2_097_152


@pytest.mark.parametrize("header", [None, "", "   "])
def test_missing_header_parses_to_none(header):
    assert RangeRequest.from_header(header) is None


def test_open_ended_range():
    assert RangeRequest.from_header("bytes=200000-") == RangeRequest(start=200000)


def test_closed_range_keeps_last_byte():
    assert RangeRequest.from_header("bytes=100-199") == RangeRequest(start=100, end=199)


@pytest.mark.parametrize("header", [
    "bytes=abc-",
    "bytes=-500",
    "bytes=",
    "items=0-",
    "bytes=100-50",
    "bytes=1.5-",
])
def test_malformed_headers_raise(header):
    with pytest.raises(RangeParseError):
        RangeRequest.from_header(header)


def test_multi_range_is_unsupported():
    with pytest.raises(UnsupportedRangeError):
        RangeRequest.from_header("bytes=0-10,20-30")


def test_negative_start_rejected():
    with pytest.raises(ValueError):
        RangeRequest(start=-1)


def test_default_window_without_range():
    window = ChunkWindow.for_request(None, FIRST_CHUNK_SIZE, CHUNK_SIZE)
    assert (window.start, window.end) == (0, 102_400)


def test_window_for_open_range():
    window = ChunkWindow.for_request(RangeRequest(start=200000), FIRST_CHUNK_SIZE, CHUNK_SIZE)
    assert (window.start, window.end) == (200000, 2_297_152)


def test_window_for_closed_range_is_capped_by_last_byte():
    window = ChunkWindow.for_request(RangeRequest(start=100, end=199), FIRST_CHUNK_SIZE, CHUNK_SIZE)
    assert (window.start, window.end) == (100, 200)


def test_window_for_long_closed_range_is_capped_by_chunk_size():
    window = ChunkWindow.for_request(RangeRequest(start=0, end=10_000_000), FIRST_CHUNK_SIZE, CHUNK_SIZE)
    assert window.end == CHUNK_SIZE


@pytest.mark.parametrize("start,total", [
    (0, 0),
    (0, 1000),
    (500, 1000),
    (1000, 1000),
    (4_999_999, 5_000_000),
    (200000, 5_000_000),
])
def test_clamped_window_length(start, total):
    window = ChunkWindow(start=start, end=start + CHUNK_SIZE).clamp(total)
    assert window.end == min(start + CHUNK_SIZE, total)
    assert window.size == window.end - window.start


def test_clamp_with_start_past_total():
    window = ChunkWindow(start=6_000_000, end=6_000_000 + CHUNK_SIZE).clamp(5_000_000)
    assert window.end == 5_000_000
    assert window.size == 0
    assert window.content_range(5_000_000) == "bytes 6000000-5000000/5000000"


def test_clamp_leaves_small_window_alone():
    window = ChunkWindow(start=0, end=100)
    assert window.clamp(1000) is window


def test_content_buffer_slice_and_mismatch():
    buffer = ContentBuffer(data=b"0123456789", declared_length=20)
    assert buffer.total == 10
    assert buffer.length_mismatch
    assert buffer.slice(ChunkWindow(start=2, end=5)) == b"234"
    assert not ContentBuffer(data=b"abc", declared_length=3).length_mismatch
    assert not ContentBuffer(data=b"abc").length_mismatch


def test_chunk_response_headers_use_sliced_length():
    response = ChunkResponse(window=ChunkWindow(start=10, end=20), body=b"x" * 10, total=100)
    assert response.status_code == 206
    assert response.media_type == "video/mp4"
    assert response.headers == {
        "Content-Length": "10",
        "Content-Range": "bytes 10-20/100",
        "Accept-Ranges": "bytes",
    }
