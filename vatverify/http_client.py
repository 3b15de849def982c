"""
http_client.py - HTTP Transport
================================
This module sends a prepared checkVat request to the registry and hands back
the raw HTTP response.

Behaviour:
----------
- Exactly one POST per request: no retry, no backoff
- Default requests configuration (no timeout override, default TLS)
- Network failures are re-raised as TransportError with the original text

Anything that implements `send(request) -> requests.Response` can stand in
for HttpClient, which is how the tests feed canned replies to the pipeline.
"""

import logging
from typing import Protocol

import requests

from .errors import TransportError

logger = logging.getLogger(__name__)


# =============================================================================
# TRANSPORT INTERFACE
# =============================================================================

class Transport(Protocol):
    """Something that can deliver one prepared request and return its response."""

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        ...


# =============================================================================
# HTTP CLIENT CLASS
# =============================================================================

class HttpClient:
    """
    Default transport backed by a requests Session.

    Usage:
        with HttpClient() as client:
            response = client.send(prepared_request)
    """

    def __init__(self, session: requests.Session | None = None):
        """
        Initialize the HTTP client.

        Args:
            session: Optional session to reuse; a new default one is created otherwise
        """
        # A plain requests Session: default adapters, no retry, no timeout override
        self.s = session or requests.Session()

    # -------------------------------------------------------------------------
    # REQUEST METHODS
    # -------------------------------------------------------------------------

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send the request once and return the response, whatever its status.

        The status code is not checked here; that is the parser's job.

        Raises:
            TransportError: DNS failure, refused connection, timeout, etc.
        """
        logger.debug(f"{request.method} {request.url}")

        # Exactly one attempt; a failure ends the check
        try:
            response = self.s.send(request)
        except requests.RequestException as e:
            # Network errors: timeout, connection refused, DNS failure, etc.
            # The original message is kept as-is for the user
            raise TransportError(str(e)) from e

        logger.debug(f"Registry answered with HTTP {response.status_code}")
        return response

    # -------------------------------------------------------------------------
    # CLEANUP METHODS
    # -------------------------------------------------------------------------

    def close(self):
        """Close the HTTP session and release resources."""
        self.s.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc, tb):
        # Always close, even when the request failed
        self.close()
