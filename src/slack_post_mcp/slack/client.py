"""HTTP client factory for outbound Slack requests.

Every request uses the same fixed timeout and is never retried. A transport
can be injected (e.g. ``httpx.MockTransport``) to stub Slack in tests.
"""

import httpx

POST_MESSAGE_URL = "https://slack.com/api/chat.postMessage"
REQUEST_TIMEOUT_SECONDS = 10.0
JSON_HEADERS = {"Content-Type": "application/json"}


def build_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Return a new AsyncClient with the fixed request timeout.

    Callers own the client and should use it as an async context manager.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS),
        transport=transport,
    )


def describe_transport_error(exc: Exception) -> tuple[bool, str]:
    """Classify an httpx exception raised while posting.

    Returns ``(no_response, reason)``. ``no_response`` is True when the
    request went out but nothing came back (timeout, dropped connection,
    refused connection); False when the request could not be built or sent.
    """
    if isinstance(exc, httpx.TimeoutException):
        return True, f"No response received (timed out after {REQUEST_TIMEOUT_SECONDS:g}s)"
    if isinstance(exc, (httpx.NetworkError, httpx.RemoteProtocolError)):
        return True, "No response received"
    return False, str(exc) or type(exc).__name__
