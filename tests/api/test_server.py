"""
Tests for the announcing uvicorn server
"""

import socket
import threading
import time

import pytest

from bookshelf.api.app import app
from bookshelf.api.server import build_server, run_server

pytestmark = pytest.mark.integration


@pytest.fixture
def occupied_port():
    """A port on 127.0.0.1 with a listener already bound to it."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    sock.listen(1)
    yield sock.getsockname()[1]
    sock.close()


def test_announces_the_bound_port(capsys):
    # Port 0 lets the OS pick, so the announced port must come from the socket
    server = build_server(app, host="127.0.0.1", port=0, log_level="warning")
    thread = threading.Thread(target=server.run, daemon=True)
    thread.start()

    try:
        deadline = time.monotonic() + 10
        while not server.started and time.monotonic() < deadline:
            time.sleep(0.05)
        assert server.started

        host, port = server.bound_address()
        assert host == "127.0.0.1"
        assert port != 0
    finally:
        server.should_exit = True
        thread.join(timeout=10)

    assert f"🚀 Server ready at http://127.0.0.1:{port}/" in capsys.readouterr().out


def test_occupied_port_is_reported_as_failure(occupied_port, capsys, caplog):
    caplog.set_level("INFO")

    assert run_server(app, host="127.0.0.1", port=occupied_port, log_level="warning") is False

    assert "Server ready" not in capsys.readouterr().out
    assert "Server startup failed" in caplog.text
