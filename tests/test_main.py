import pytest
from active24dns import __main__ as cli
from tests.conftest import FakeTransport, make_response


@pytest.fixture
def transport(monkeypatch):
    fake = FakeTransport()
    monkeypatch.setattr("active24dns.provider.HTTPTransport", lambda: fake)
    monkeypatch.setenv("ACTIVE24_API_KEY", "api-key")
    monkeypatch.setenv("ACTIVE24_API_URL", "https://api.example.test")
    return fake


def test_present(transport):
    transport.responses.append(make_response(204))
    assert cli.main(["present", "example.com", "token", "foo"]) == 0
    assert transport.requests[0].method == "POST"


def test_cleanup(transport):
    transport.responses.append(make_response(200, []))
    assert cli.main(["cleanup", "example.com", "token", "foo"]) == 0
    assert transport.requests[0].method == "GET"


def test_failure_exit_code(transport, caplog):
    transport.responses.append(make_response(429))
    assert cli.main(["present", "example.com", "token", "foo"]) == 1
    assert "rate limited, try again later" in caplog.text


def test_missing_api_key(transport, monkeypatch):
    monkeypatch.delenv("ACTIVE24_API_KEY")
    assert cli.main(["present", "example.com", "token", "foo"]) == 1
    assert transport.requests == []


def test_unknown_action():
    with pytest.raises(SystemExit):
        cli.parse_args(["renew", "example.com", "token", "foo"])
