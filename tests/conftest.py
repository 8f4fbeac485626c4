import json
import pytest
import requests
from active24dns import Active24DNSProvider, Config

API_KEY = "qwerty123456-ok"


def make_response(status_code, body=None):
    r = requests.Response()
    r.status_code = status_code
    r.encoding = "utf-8"
    if body is None:
        r._content = b""
    elif isinstance(body, (bytes, str)):
        r._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        r._content = json.dumps(body).encode("utf-8")
    return r


class FakeTransport:
    """Replays queued responses (or exceptions) and records sent requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests = []

    def send(self, request):
        prepared = request.prepare()
        self.requests.append(prepared)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        response.request = prepared
        return response


@pytest.fixture
def config():
    return Config(API_KEY, endpoint="https://api.example.test")


@pytest.fixture
def make_provider(config):
    def _make_provider(*responses):
        transport = FakeTransport(*responses)
        return Active24DNSProvider(config, transport), transport

    return _make_provider
