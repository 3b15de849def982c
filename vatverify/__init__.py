"""
vatverify - EU VAT Registration Checker
=======================================

A Python package for checking if a VAT identifier is registered in the
VIES validation registry.

Modules:
--------
- config.py          : Read-only settings (log level from .env)
- errors.py          : Error types raised at each stage of a check
- identifier.py      : Splitting the raw input into country code + number
- request_builder.py : Rendering the SOAP envelope into an HTTP request
- http_client.py     : Sending the request to the registry
- response_parser.py : Reading the SOAP reply and mapping it to an outcome
- run_verifier.py    : Main entry point and orchestration

Usage:
------
    vatverify CZ28987373
    python -m vatverify.run_verifier CZ28987373 --debug

Output:
-------
One line on stdout:
- Valid   : the registry confirms the VAT number
- Invalid : the registry does not know the VAT number
- anything else is the fault text reported by the registry
"""

__version__ = "0.1.0"
