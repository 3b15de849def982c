"""
errors.py - Error Types
=======================
Every failure that ends a VAT check is one of these exceptions.

They all derive from VatVerifyError, which is a RuntimeError, so the CLI can
report any of them with a single except clause. Faults reported by the
registry itself are NOT errors: they are returned as the outcome text.
"""


class VatVerifyError(RuntimeError):
    """Base class for all errors raised while checking a VAT identifier."""


class NotEnoughLetters(VatVerifyError):
    """The input does not start with a two-letter country code."""

    def __init__(self, message: str = "the VAT should begin with at least 2 letters"):
        super().__init__(message)


class RequestBuildError(VatVerifyError):
    """The outbound HTTP request could not be prepared."""


class TransportError(VatVerifyError):
    """The HTTP call to the registry did not complete."""


class UnexpectedStatusError(VatVerifyError):
    """The registry answered with a status other than 200 OK."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"expected status 200, received {status_code}")


class ResponseReadError(VatVerifyError):
    """The response body could not be read completely."""


class ReplyParseError(VatVerifyError):
    """The response body is not a SOAP reply we understand."""
