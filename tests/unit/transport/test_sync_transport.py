"""
Tests for RequestsTransport using responses mocks.
"""

import pytest
import requests
import responses

from rest_resource.core.config import SSLConfig
from rest_resource.core.exceptions import NetworkError, ProxyError, SSLError, TimeoutError
from rest_resource.core.models import RequestSpec
from rest_resource.transport.sync_transport import RequestsTransport, classify_requests_exception

SITE = "https://api.example.com"


@pytest.fixture
def transport():
    transport = RequestsTransport()
    yield transport
    transport.close()


class TestExecute:

    @responses.activate
    def test_get(self, transport):
        responses.add(responses.GET, f"{SITE}/users", body=b"[]", status=200,
                      headers={"X-Total": "0"}, content_type="application/json")

        envelope = transport.execute(RequestSpec("GET", SITE, "/users", {"id": "7"}, {"Accept": "application/json"}))

        request = responses.calls[0].request
        assert request.url == f"{SITE}/users?id=7"
        assert request.headers["Accept"] == "application/json"
        assert envelope.status_code == 200
        assert envelope.body == b"[]"
        assert envelope.headers["x-total"] == "0"
        assert envelope.url == f"{SITE}/users?id=7"

    @responses.activate
    def test_post_form(self, transport):
        responses.add(responses.POST, f"{SITE}/users", status=201)

        transport.execute(RequestSpec("POST", SITE, "/users", {"name": "a b", "flag": None}))

        request = responses.calls[0].request
        assert request.url == f"{SITE}/users"
        assert request.body == b"name=a+b&flag"
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

    @responses.activate
    def test_put_with_body(self, transport):
        responses.add(responses.PUT, f"{SITE}/users/7", status=200)

        transport.execute(RequestSpec(
            "PUT", SITE, "/users/7", {"v": "2"},
            {"Content-Type": "application/json"}, body=b'{"a":1}',
        ))

        request = responses.calls[0].request
        assert request.url == f"{SITE}/users/7?v=2"
        assert request.body == b'{"a":1}'

    @responses.activate
    def test_redirects_not_followed(self, transport):
        responses.add(responses.GET, f"{SITE}/old", status=302, headers={"Location": f"{SITE}/new"})

        envelope = transport.execute(RequestSpec("GET", SITE, "/old"))

        assert envelope.status_code == 302
        assert len(responses.calls) == 1

    @responses.activate
    def test_error_status_is_returned(self, transport):
        responses.add(responses.GET, f"{SITE}/missing", status=404)
        assert transport.execute(RequestSpec("GET", SITE, "/missing")).status_code == 404

    @responses.activate
    def test_timeout(self, transport):
        responses.add(responses.GET, f"{SITE}/slow", body=requests.exceptions.ReadTimeout("slow"))

        with pytest.raises(TimeoutError) as exc_info:
            transport.execute(RequestSpec("GET", SITE, "/slow", timeout=2))
        assert exc_info.value.timeout == 2

    @responses.activate
    def test_connection_refused(self, transport):
        responses.add(responses.GET, f"{SITE}/down", body=requests.exceptions.ConnectionError("refused"))

        with pytest.raises(NetworkError):
            transport.execute(RequestSpec("GET", SITE, "/down"))


class TestSessionReuse:

    @responses.activate
    def test_same_options_reuse_session(self, transport):
        responses.add(responses.GET, f"{SITE}/a", status=200)
        transport.execute(RequestSpec("GET", SITE, "/a"))
        first = transport.sessions.get_session(("https", "api.example.com", 443), (None, None, SSLConfig()))
        transport.execute(RequestSpec("GET", SITE, "/a"))
        second = transport.sessions.get_session(("https", "api.example.com", 443), (None, None, SSLConfig()))
        assert first is second
        assert len(transport.sessions) == 1

    @responses.activate
    def test_changed_options_rebuild_session(self, transport):
        responses.add(responses.GET, f"{SITE}/a", status=200)
        key = ("https", "api.example.com", 443)

        transport.execute(RequestSpec("GET", SITE, "/a"))
        first = transport.sessions.get_session(key, (None, None, SSLConfig()))

        transport.execute(RequestSpec("GET", SITE, "/a", timeout=5, ssl=SSLConfig(verify=False)))
        second = transport.sessions.get_session(key, (None, 5, SSLConfig(verify=False)))

        assert first is not second
        assert second.verify is False
        assert len(transport.sessions) == 1

    def test_invalidate(self, transport):
        transport.sessions.get_session(("https", "a", 443), (None, None, SSLConfig()))
        transport.invalidate()
        assert len(transport.sessions) == 0

    def test_session_configuration(self, transport):
        session = transport._create_session(
            ("http://proxy:3128", None, SSLConfig(ca_file="/ca.pem", cert_file="c.pem", key_file="k.pem"))
        )
        assert session.proxies["https"] == "http://proxy:3128"
        assert session.verify == "/ca.pem"
        assert session.cert == ("c.pem", "k.pem")
        session.close()


class TestClassifyRequestsException:

    @pytest.mark.parametrize("exc,expected", [
        (requests.exceptions.SSLError("bad cert"), SSLError),
        (requests.exceptions.ConnectTimeout("slow"), TimeoutError),
        (requests.exceptions.ReadTimeout("slow"), TimeoutError),
        (requests.exceptions.ProxyError("proxy down"), ProxyError),
        (requests.exceptions.ConnectionError("refused"), NetworkError),
        (requests.exceptions.RequestException("other"), NetworkError),
    ])
    def test_mapping(self, exc, expected):
        assert type(classify_requests_exception(exc, SITE)) is expected
