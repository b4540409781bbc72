import asyncio
import json
import signal
import socket
from unittest.mock import patch

import pytest

from video_range_proxy.api.server import ServiceServer, create_origin_app
from video_range_proxy.core.config import Config
from video_range_proxy.core.errors import ListenerError
from video_range_proxy.core.supervisor import ServiceGroup
from video_range_proxy.main import RangeProxySystem, apply_overrides, build_parser, main

from .conftest import FakeContentSource, FakeService


def test_cli_overrides():
    args = build_parser().parse_args([
        "--proxy-port", "9000",
        "--origin-port", "9001",
        "--video", "/media/clip.mp4",
        "--log-level", "DEBUG",
        "--strict-ranges",
    ])

    config = apply_overrides(Config(), args)

    assert config.proxy.port == 9000
    assert config.origin.port == 9001
    assert config.proxy.origin_url == "http://localhost:9001/video"
    assert config.origin.video_path == "/media/clip.mp4"
    assert config.system.log_level == "DEBUG"
    assert config.proxy.strict_range_parsing is True


def test_explicit_origin_url_wins():
    args = build_parser().parse_args(["--origin-port", "9001", "--origin-url", "http://files:9001/video"])

    config = apply_overrides(Config(), args)

    assert config.proxy.origin_url == "http://files:9001/video"


def test_origin_port_keeps_configured_origin_url(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"proxy": {"origin_url": "http://files:9100/video"}}))

    config = apply_overrides(Config(str(path)), build_parser().parse_args(["--origin-port", "9001"]))

    assert config.origin.port == 9001
    assert config.proxy.origin_url == "http://files:9100/video"


def test_no_overrides_keeps_config():
    config = apply_overrides(Config(), build_parser().parse_args([]))

    assert config.to_dict() == Config().to_dict()


def test_system_wires_both_listeners(config):
    system = RangeProxySystem(config)

    assert [service.name for service in system.service_group.services] == ["proxy", "origin"]
    assert (system.proxy_server.port, system.origin_server.port) == (8000, 8001)
    assert not system.proxy_server.is_running()


@pytest.mark.asyncio
async def test_signal_shuts_down_both_listeners(config):
    system = RangeProxySystem(config)
    services = [FakeService("proxy"), FakeService("origin")]
    system.service_group = ServiceGroup(services)
    source = FakeContentSource()
    system.proxy_module.content_source = source

    asyncio.get_running_loop().call_later(0.05, system._handle_signal, signal.SIGTERM)
    await asyncio.wait_for(system.run_async(), timeout=2)

    assert all(service.stopped.is_set() for service in services)
    assert source.closed is True


@pytest.mark.asyncio
async def test_listener_failure_still_cleans_up(config):
    system = RangeProxySystem(config)
    system.service_group = ServiceGroup([
        FakeService("proxy"),
        FakeService("origin", fail_with=ListenerError("origin", "failed to start on 0.0.0.0:8001")),
    ])
    source = FakeContentSource()
    system.proxy_module.content_source = source

    with pytest.raises(ListenerError):
        await asyncio.wait_for(system.run_async(), timeout=2)

    assert source.closed is True


def test_main_exits_1_on_listener_failure(video_file):
    failure = ListenerError("origin", "failed to start on 0.0.0.0:8001")

    with patch("video_range_proxy.main.setup_logging"), \
            patch.object(RangeProxySystem, "run", side_effect=failure):
        with pytest.raises(SystemExit) as exc_info:
            main(["--video", str(video_file)])

    assert exc_info.value.code == 1


def test_main_returns_after_clean_shutdown(video_file):
    with patch("video_range_proxy.main.setup_logging") as setup, \
            patch.object(RangeProxySystem, "run") as run:
        main(["--video", str(video_file), "--log-level", "DEBUG"])

    run.assert_called_once_with()
    setup.assert_called_once_with(log_level="DEBUG", log_file=None)


@pytest.mark.asyncio
async def test_bind_failure_raises_listener_error(config):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as occupied:
        occupied.bind(("127.0.0.1", 0))
        occupied.listen(1)
        port = occupied.getsockname()[1]

        server = ServiceServer("origin", create_origin_app(config), host="127.0.0.1", port=port)

        with pytest.raises(ListenerError, match="failed to start"):
            await server.serve()

        assert not server.is_running()
