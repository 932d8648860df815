"""Tests for Basic credential encoding and ConnectionAuth."""

import base64

import httpx

from simple_http import ConnectionAuth, basic_credential


def _apply(auth: ConnectionAuth) -> httpx.Request:
    request = httpx.Request("GET", "http://localhost/")
    flow = auth.sync_auth_flow(request)
    return next(flow)


def test_basic_credential():
    """Test username:password encoding."""
    assert basic_credential("u", "p") == "Basic " + base64.b64encode(b"u:p").decode()


def test_basic_credential_unicode():
    """Test that non-ASCII credentials are UTF-8 encoded."""
    expected = "Basic " + base64.b64encode("jürgen:päss".encode()).decode()
    assert basic_credential("jürgen", "päss") == expected


def test_connection_auth_keeps_scheme():
    """Test that a value with a scheme is sent unchanged."""
    request = _apply(ConnectionAuth("Basic dTpw"))
    assert request.headers["Authorization"] == "Basic dTpw"


def test_connection_auth_bearer():
    """Test that other schemes are sent unchanged too."""
    request = _apply(ConnectionAuth("Bearer token-123"))
    assert request.headers["Authorization"] == "Bearer token-123"


def test_connection_auth_user_password():
    """Test that a bare user:password value is Basic-encoded."""
    request = _apply(ConnectionAuth("user:pass word"))
    assert request.headers["Authorization"] == basic_credential("user", "pass word")


def test_connection_auth_bare_token():
    """Test that a token without a colon is encoded without a trailing colon."""
    request = _apply(ConnectionAuth("someAuth"))
    assert request.headers["Authorization"] == "Basic " + base64.b64encode(b"someAuth").decode()


def test_connection_auth_keeps_explicit_header():
    """Test that an Authorization header already on the request wins."""
    request = httpx.Request("GET", "http://localhost/", headers={"authorization": "Bearer explicit"})
    flow = ConnectionAuth("Basic dTpw").sync_auth_flow(request)

    assert next(flow).headers["Authorization"] == "Bearer explicit"
