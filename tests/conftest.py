import socket

import pytest

from stub_services import backend, microservice


@pytest.fixture(autouse=True)
def _clear_port(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)


@pytest.fixture
def backend_client():
    return backend.create_service(environ={}).app.test_client()


@pytest.fixture
def microservice_client():
    return microservice.create_service(environ={}).app.test_client()


@pytest.fixture
def free_port():
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
