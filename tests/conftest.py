# -*- coding: utf-8 -*-
"""
Общие фикстуры: подмена requests.Session, чтобы тесты не ходили в сеть.
"""
import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=200, chunks=(), error=None):
        self.status_code = status_code
        self.chunks = list(chunks)
        self.error = error
        self.closed = False

    def iter_content(self, chunk_size=1):
        for chunk in self.chunks:
            yield chunk
        if self.error:
            raise self.error

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True


class FakeTransport:
    """Маршруты url-префикс → ответ; запоминает запросы и открытые сессии."""

    def __init__(self):
        self.routes = {}
        self.requests = []
        self.sessions = []

    def add(self, url_prefix, body=b"", status_code=200, chunk_size=None, error=None):
        if isinstance(body, str):
            body = body.encode("utf-8")
        if chunk_size:
            chunks = [body[i:i + chunk_size] for i in range(0, len(body), chunk_size)]
        else:
            chunks = [body] if body else []
        self.routes[url_prefix] = (status_code, chunks, error)

    def fail(self, url_prefix, exception):
        self.routes[url_prefix] = exception

    def session_factory(self):
        transport = self

        class FakeSession:
            def __init__(self):
                self.headers = {}
                self.closed = False
                transport.sessions.append(self)

            def get(self, url, stream=False, timeout=None):
                transport.requests.append({"url": url, "stream": stream, "timeout": timeout})
                for prefix, route in transport.routes.items():
                    if url.startswith(prefix):
                        if isinstance(route, Exception):
                            raise route
                        status_code, chunks, error = route
                        return FakeResponse(status_code, chunks, error)
                raise requests.exceptions.ConnectionError(f"нет маршрута для {url}")

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                self.closed = True

        return FakeSession


@pytest.fixture
def fake_transport(monkeypatch):
    transport = FakeTransport()
    monkeypatch.setattr(requests, "Session", transport.session_factory())
    return transport
