"""
request_builder.py - SOAP Request Builder
==========================================
Renders the checkVat SOAP envelope for a VAT identifier and wraps it in a
prepared HTTP POST request.

The envelope is static text with two placeholders, so plain string
substitution is enough; no XML tree is built.
"""

import logging

import requests

from .errors import RequestBuildError
from .identifier import VATIdentifier

logger = logging.getLogger(__name__)


# =============================================================================
# REQUEST CONSTANTS
# =============================================================================
# Both the endpoint and the envelope are fixed; nothing here is configurable.

# The VIES SOAP endpoint that answers checkVat requests
SERVICE_URI = "http://ec.europa.eu/taxation_customs/vies/services/checkVatService"

# checkVat envelope; {country_code} and {number} are the only placeholders
XML_REQUEST = """<?xml version="1.0" encoding="UTF-8"?>
<SOAP-ENV:Envelope xmlns:ns0="urn:ec.europa.eu:taxud:vies:services:checkVat:types"
    xmlns:ns1="http://schemas.xmlsoap.org/soap/envelope/"
    xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    xmlns:SOAP-ENV="http://schemas.xmlsoap.org/soap/envelope/">
<SOAP-ENV:Header/>
<ns1:Body><ns0:checkVat><ns0:countryCode>{country_code}</ns0:countryCode><ns0:vatNumber>{number}</ns0:vatNumber></ns0:checkVat>
</ns1:Body>
</SOAP-ENV:Envelope>"""

# Sent as the Content-Type header of every request
CONTENT_TYPE = "text/xml"


# =============================================================================
# BUILDERS
# =============================================================================

def render_envelope(vat: VATIdentifier) -> str:
    """Substitute the identifier fields into the SOAP envelope template."""
    return XML_REQUEST.format(country_code=vat.country_code, number=vat.number)


def build_request(vat: VATIdentifier) -> requests.PreparedRequest:
    """
    Build the POST request that asks the registry about one VAT identifier.

    The request always goes to SERVICE_URI; the endpoint is not a parameter.

    Args:
        vat: The identifier to check

    Returns:
        A prepared request with a text/xml body, ready to be sent once

    Raises:
        RequestBuildError: If requests cannot prepare the request (e.g. a bad URI)
    """
    # Render the envelope and encode it; the XML declaration says UTF-8
    body = render_envelope(vat).encode("utf-8")

    # POST the envelope with the content type the registry expects
    request = requests.Request(
        method="POST",
        url=SERVICE_URI,
        data=body,
        headers={"Content-Type": CONTENT_TYPE},
    )

    # prepare() validates the URL; a broken one raises MissingSchema/InvalidURL
    try:
        prepared = request.prepare()
    except (requests.RequestException, ValueError) as e:
        raise RequestBuildError(str(e)) from e

    logger.debug(f"Built checkVat request for {vat.country_code}{vat.number} -> {SERVICE_URI}")
    return prepared
