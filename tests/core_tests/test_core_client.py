"""Tests for core/client.py base client functionality."""

from __future__ import annotations

import unittest
from unittest.mock import MagicMock

import requests

from core.client import ApiClientBase, _TimeoutSession
from core.constants import DEFAULT_REQUEST_TIMEOUT
from core.errors import APIError, TransportError
from core.operation import Endpoint, Op
from tests.fakes.schedules import FakeResponse, FakeSession


class _StubOperation:
    def __init__(self, op: Op, body: str = "") -> None:
        self._op = op
        self._body = body

    def op(self) -> Op:
        return self._op

    def to_json(self) -> str:
        return self._body


class TestTimeoutSession(unittest.TestCase):

    def setUp(self):
        self.mock_session = MagicMock()
        self.wrapper = _TimeoutSession(self.mock_session, 30)

    def test_adds_default_timeout(self):
        self.wrapper.request("GET", "https://example.com")
        self.mock_session.request.assert_called_once_with("GET", "https://example.com", timeout=30)

    def test_respects_custom_timeout(self):
        self.wrapper.request("GET", "https://example.com", timeout=60)
        self.mock_session.request.assert_called_once_with("GET", "https://example.com", timeout=60)

    def test_preserves_other_kwargs(self):
        self.wrapper.request("POST", "https://example.com", data=b"{}", headers={"X": "1"})
        self.mock_session.request.assert_called_once_with(
            "POST", "https://example.com", data=b"{}", headers={"X": "1"}, timeout=30
        )


class TestApiClientBaseInit(unittest.TestCase):

    def test_defaults(self):
        client = ApiClientBase("skey_test", session=MagicMock())
        self.assertEqual(client.base_urls["api"], "https://api.omise.co")
        self.assertEqual(client.base_urls["vault"], "https://vault.omise.co")
        self.assertIsNone(client.public_key)
        self.assertEqual(client._http._timeout, DEFAULT_REQUEST_TIMEOUT)

    def test_base_url_override(self):
        client = ApiClientBase("skey_test", session=MagicMock(), base_urls={"api": "http://localhost:8080"})
        self.assertEqual(client.base_urls["api"], "http://localhost:8080")
        self.assertEqual(client.base_urls["vault"], "https://vault.omise.co")


class TestApiClientBaseDo(unittest.TestCase):

    def test_post_sends_body_and_headers(self):
        session = FakeSession([FakeResponse(200, {"id": "x"})])
        client = ApiClientBase("skey_test", session=session, api_version="2019-05-29")
        result = client.do(_StubOperation(Op("POST", "/things", content_type="application/json"), '{"a":1}'))

        self.assertEqual(result, {"id": "x"})
        call = session.last
        self.assertEqual(call["data"], b'{"a":1}')
        self.assertEqual(call["headers"]["Content-Type"], "application/json")
        self.assertEqual(call["headers"]["Omise-Version"], "2019-05-29")
        self.assertEqual(call["timeout"], DEFAULT_REQUEST_TIMEOUT)

    def test_get_sends_query_values(self):
        session = FakeSession([FakeResponse(200, {"object": "list"})])
        client = ApiClientBase("skey_test", session=session)
        client.do(_StubOperation(Op("GET", "/things", values={"limit": 5})))
        self.assertEqual(session.last["params"], {"limit": 5})
        self.assertIsNone(session.last["data"])

    def test_vault_uses_public_key(self):
        session = FakeSession([FakeResponse(200, {})])
        client = ApiClientBase("skey_test", "pkey_test", session=session)
        client.do(_StubOperation(Op("GET", "/tokens/t", endpoint=Endpoint.VAULT)))
        self.assertEqual(session.last["url"], "https://vault.omise.co/tokens/t")
        self.assertEqual(session.last["auth"], ("pkey_test", ""))

    def test_vault_without_public_key(self):
        client = ApiClientBase("skey_test", session=FakeSession())
        with self.assertRaises(TransportError):
            client.do(_StubOperation(Op("GET", "/tokens/t", endpoint=Endpoint.VAULT)))

    def test_http_error_raises_api_error(self):
        body = {"object": "error", "code": "authentication_failure", "message": "authentication failed"}
        client = ApiClientBase("skey_bad", session=FakeSession([FakeResponse(401, body)]))
        with self.assertRaises(APIError) as ctx:
            client.do(_StubOperation(Op("GET", "/things")))
        self.assertEqual(ctx.exception.status_code, 401)
        self.assertEqual(ctx.exception.code, "authentication_failure")
        self.assertEqual(ctx.exception.message, "authentication failed")

    def test_http_error_with_non_json_body(self):
        client = ApiClientBase("skey", session=FakeSession([FakeResponse(502, text="Bad Gateway")]))
        with self.assertRaises(APIError) as ctx:
            client.do(_StubOperation(Op("GET", "/things")))
        self.assertEqual(ctx.exception.status_code, 502)
        self.assertEqual(ctx.exception.message, "Bad Gateway")

    def test_connection_error_raises_transport_error(self):
        session = FakeSession(error=requests.ConnectionError("refused"))
        client = ApiClientBase("skey", session=session)
        with self.assertRaises(TransportError):
            client.do(_StubOperation(Op("GET", "/things")))

    def test_invalid_json_raises_transport_error(self):
        client = ApiClientBase("skey", session=FakeSession([FakeResponse(200, text="<html>")]))
        with self.assertRaises(TransportError):
            client.do(_StubOperation(Op("GET", "/things")))


if __name__ == "__main__":
    unittest.main()
