"""Shared fixtures: canned registry replies and a stub transport."""

import io

import pytest
import requests


VALID_REPLY = b"""<?xml version="1.0" encoding="UTF-8"?>
<env:Envelope xmlns:env="http://schemas.xmlsoap.org/soap/envelope/">
<env:Header/>
<env:Body>
<ns2:checkVatResponse xmlns:ns2="urn:ec.europa.eu:taxud:vies:services:checkVat:types">
<ns2:countryCode>CZ</ns2:countryCode>
<ns2:vatNumber>28987373</ns2:vatNumber>
<ns2:requestDate>2026-10-19+02:00</ns2:requestDate>
<ns2:valid>true</ns2:valid>
<ns2:name>Example s.r.o.</ns2:name>
<ns2:address>Praha 1</ns2:address>
</ns2:checkVatResponse>
</env:Body>
</env:Envelope>"""

INVALID_REPLY = b"""<?xml version="1.0" encoding="UTF-8"?>
<env:Envelope xmlns:env="http://schemas.xmlsoap.org/soap/envelope/">
<env:Header/>
<env:Body>
<ns2:checkVatResponse xmlns:ns2="urn:ec.europa.eu:taxud:vies:services:checkVat:types">
<ns2:countryCode>CZ</ns2:countryCode>
<ns2:vatNumber>2</ns2:vatNumber>
<ns2:requestDate>2026-10-19+02:00</ns2:requestDate>
<ns2:valid>false</ns2:valid>
<ns2:name>---</ns2:name>
<ns2:address>---</ns2:address>
</ns2:checkVatResponse>
</env:Body>
</env:Envelope>"""

FAULT_REPLY = b"""<?xml version="1.0" encoding="UTF-8"?>
<env:Envelope xmlns:env="http://schemas.xmlsoap.org/soap/envelope/">
<env:Header/>
<env:Body>
<env:Fault>
<faultcode>env:Server</faultcode>
<faultstring>INVALID_INPUT</faultstring>
</env:Fault>
</env:Body>
</env:Envelope>"""


def make_response(body: bytes, status_code: int = 200) -> requests.Response:
    """Build a requests.Response the way the adapter would, from raw bytes."""
    response = requests.Response()
    response.status_code = status_code
    response.raw = io.BytesIO(body)
    response.headers["Content-Type"] = "text/xml"
    return response


class StubTransport:
    """Transport that records requests and answers from a number -> reply table."""

    def __init__(self, replies: dict[str, bytes], status_code: int = 200):
        self.replies = replies
        self.status_code = status_code
        self.sent: list[requests.PreparedRequest] = []

    def send(self, request: requests.PreparedRequest) -> requests.Response:
        self.sent.append(request)
        body = request.body.decode("utf-8")
        for number, reply in self.replies.items():
            if f"<ns0:vatNumber>{number}</ns0:vatNumber>" in body:
                return make_response(reply, self.status_code)
        raise AssertionError(f"no canned reply for request body: {body}")


@pytest.fixture
def registry():
    """Stub registry that knows CZ28987373 and rejects CZ2."""
    return StubTransport({
        "28987373": VALID_REPLY,
        "2": INVALID_REPLY,
    })


@pytest.fixture
def response_factory():
    """make_response, for tests that need hand-built HTTP responses."""
    return make_response


@pytest.fixture
def replies():
    """Canned registry reply bodies by kind."""
    return {
        "valid": VALID_REPLY,
        "invalid": INVALID_REPLY,
        "fault": FAULT_REPLY,
    }
