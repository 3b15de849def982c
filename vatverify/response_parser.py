"""
response_parser.py - SOAP Reply Parser
=======================================
This module turns the registry's HTTP response into an outcome string.

Expected reply shape (SOAP 1.1):
--------------------------------
    <Envelope>
      <Body>
        <checkVatResponse>
          <countryCode/> <vatNumber/> <requestDate/> <valid/> <name/> <address/>
        </checkVatResponse>
        -- or --
        <Fault>
          <faultcode/> <faultstring/>
        </Fault>
      </Body>
    </Envelope>

Elements are matched by local name, so whatever namespace prefixes the
registry uses do not matter.

Outcome rules (checked in this order):
--------------------------------------
1. A Fault in the body    -> the faultstring text, verbatim
2. valid is exactly "true" -> "Valid"
3. anything else           -> "Invalid"
"""

import logging
from dataclasses import dataclass
from xml.etree import ElementTree

import requests

from .errors import ReplyParseError, ResponseReadError, UnexpectedStatusError

logger = logging.getLogger(__name__)


VALID = "Valid"
INVALID = "Invalid"


# =============================================================================
# REPLY MODEL
# =============================================================================

@dataclass
class CheckVatResult:
    """Payload of a successful checkVat answer. Missing fields are empty strings."""
    country_code: str = ""
    vat_number: str = ""
    request_date: str = ""
    valid: str = ""
    name: str = ""
    address: str = ""


@dataclass
class Fault:
    """A SOAP fault reported by the registry inside a 200 response."""
    fault_code: str = ""
    fault_string: str = ""


@dataclass
class ValidationReply:
    """Parsed reply: exactly one of `result` and `fault` is set."""
    result: CheckVatResult | None = None
    fault: Fault | None = None


# =============================================================================
# XML HELPERS
# =============================================================================

def _local_name(tag: str) -> str:
    """Strip the '{namespace}' part ElementTree puts in front of a tag."""
    return tag.rsplit("}", 1)[-1]


def _child(element: ElementTree.Element, name: str) -> ElementTree.Element | None:
    """Return the first direct child whose local name is `name`."""
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ElementTree.Element, name: str) -> str:
    # Text is kept as-is; "true " is not "true"
    child = _child(element, name)
    if child is None or child.text is None:
        return ""
    return child.text


# =============================================================================
# PARSING
# =============================================================================

def parse_reply(body: bytes | str) -> ValidationReply:
    """
    Decode a SOAP reply body.

    Raises:
        ReplyParseError: If the body is not well-formed XML, has no Body
            element, or the Body holds neither a Fault nor a checkVatResponse
    """
    # expat raises LookupError (not ParseError) for an unknown declared encoding
    try:
        root = ElementTree.fromstring(body)
    except (ElementTree.ParseError, LookupError) as e:
        raise ReplyParseError(f"malformed XML reply: {e}") from e

    soap_body = _child(root, "Body")
    if soap_body is None:
        raise ReplyParseError(f"reply has no SOAP Body (root element: {_local_name(root.tag)})")

    fault = _child(soap_body, "Fault")
    if fault is not None:
        return ValidationReply(fault=Fault(
            fault_code=_child_text(fault, "faultcode"),
            fault_string=_child_text(fault, "faultstring"),
        ))

    response = _child(soap_body, "checkVatResponse")
    if response is None:
        raise ReplyParseError("reply Body holds neither a Fault nor a checkVatResponse")

    return ValidationReply(result=CheckVatResult(
        country_code=_child_text(response, "countryCode"),
        vat_number=_child_text(response, "vatNumber"),
        request_date=_child_text(response, "requestDate"),
        valid=_child_text(response, "valid"),
        name=_child_text(response, "name"),
        address=_child_text(response, "address"),
    ))


def outcome_for(reply: ValidationReply) -> str:
    """Map a parsed reply to "Valid", "Invalid" or the registry's fault text."""
    if reply.fault is not None:
        logger.debug(f"Registry fault {reply.fault.fault_code}: {reply.fault.fault_string}")
        return reply.fault.fault_string

    result = reply.result or CheckVatResult()
    logger.debug(
        f"Registry reply for {result.country_code}{result.vat_number} "
        f"on {result.request_date}: valid={result.valid!r}, "
        f"name={result.name!r}, address={result.address!r}"
    )
    # Only the exact string "true" counts as valid
    if result.valid == "true":
        return VALID
    return INVALID


def _read_body(response: requests.Response) -> bytes:
    try:
        return response.content
    except requests.RequestException as e:
        raise ResponseReadError(f"could not read response body: {e}") from e


def parse_response(response: requests.Response) -> str:
    """
    Interpret the registry's HTTP response.

    Args:
        response: The raw response returned by the transport

    Returns:
        "Valid", "Invalid" or the fault text reported by the registry

    Raises:
        UnexpectedStatusError: Status is not 200; the message holds the code
        ResponseReadError: The body could not be read completely
        ReplyParseError: The body is not a reply we understand
    """
    with response:
        if response.status_code != requests.codes.ok:
            raise UnexpectedStatusError(response.status_code)
        body = _read_body(response)

    return outcome_for(parse_reply(body))
