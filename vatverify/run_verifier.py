"""
run_verifier.py - Main Application Entry Point
===============================================
This is the script that checks one VAT identifier against the VIES registry.

What it does:
-------------
1. Loads configuration (.env file, optional)
2. Splits the identifier into country code + number
3. Builds the SOAP request and sends it to the registry
4. Parses the reply and prints Valid, Invalid or the registry's fault text

Usage:
------
    vatverify CZ28987373
    python -m vatverify.run_verifier CZ28987373 --debug

Command Line Options:
---------------------
    VATID    : The identifier to check, e.g. CZ28987373 (required)
    --debug  : Enable debug logging (written to stderr)

Exit codes:
-----------
    0 : the outcome was printed
    1 : wrong arguments, or the check failed at some stage
"""

import sys
import logging
import argparse

from .config import load_settings
from .errors import VatVerifyError
from .http_client import HttpClient, Transport
from .identifier import split_vat
from .request_builder import build_request
from .response_parser import parse_response


# =============================================================================
# LOGGING SETUP
# =============================================================================

# Log lines look like "14:30:45 [DEBUG] ..." and go to stderr,
# so stdout carries nothing but the outcome
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATEFMT = '%H:%M:%S'

logger = logging.getLogger(__name__)


# =============================================================================
# CORE PIPELINE
# =============================================================================

def process_vat(pending: str, transport: Transport | None = None) -> str:
    """
    Check one raw VAT identifier and return the outcome.

    Args:
        pending: The raw identifier, e.g. "CZ28987373"
        transport: Where to send the request; a fresh HttpClient if omitted

    Returns:
        "Valid", "Invalid" or the fault text reported by the registry

    Raises:
        VatVerifyError: If any stage fails (see vatverify.errors)
    """
    # STEP 1: Split into country code + number (format errors stop here)
    vat = split_vat(pending)
    logger.debug(f"Country code: {vat.country_code!r}, number: {vat.number!r}")

    # STEP 2: Render the SOAP envelope into a POST request
    request = build_request(vat)

    # STEP 3 + 4: Send it once and interpret the reply
    if transport is not None:
        return parse_response(transport.send(request))

    # No transport given: use a default client and close it afterwards
    with HttpClient() as client:
        return parse_response(client.send(request))


# =============================================================================
# COMMAND LINE ARGUMENT PARSING
# =============================================================================

class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports bad usage on stdout with exit code 1."""

    def error(self, message):
        self.print_usage(sys.stdout)
        self.exit(1)


def parse_arguments(argv=None):
    """
    Parse command-line arguments.

    Exactly one identifier is expected. Anything that is not --debug counts
    as the identifier, even if it starts with "-" (e.g. "-X12" or "-h"), so
    such input reaches the splitter and gets the usual format error.

    Returns:
        Namespace object with the parsed arguments:
        - vat_id: The identifier to check
        - debug: Boolean, if True enable debug logging
    """
    # No -h/--help: every argument other than --debug is an identifier
    parser = _ArgumentParser(
        prog='vatverify',
        usage='%(prog)s [--debug] VATID',
        add_help=False,
        allow_abbrev=False,
    )

    # Optional here so that a "-X12"-style identifier is not a usage error;
    # the exactly-one check is done below
    parser.add_argument(
        'vat_id',
        metavar='VATID',
        nargs='?',
    )

    # Optional: Debug mode
    parser.add_argument(
        '--debug',
        action='store_true',
    )

    # Unknown dash-prefixed arguments land in `extras` instead of failing
    args, extras = parser.parse_known_args(argv)

    candidates = extras if args.vat_id is None else [args.vat_id] + extras
    if len(candidates) != 1:
        parser.error("expected exactly one VAT identifier")

    args.vat_id = candidates[0]
    return args


# =============================================================================
# MAIN EXECUTION FUNCTION
# =============================================================================

def run_verifier(argv=None):
    """
    Main execution logic: parse arguments, check the VAT, print the outcome.

    Exits with status 1 on bad usage or when the check fails.
    """
    # -------------------------------------------------------------------------
    # STEP 1: Parse command-line arguments
    # -------------------------------------------------------------------------
    args = parse_arguments(argv)

    # -------------------------------------------------------------------------
    # STEP 2: Load configuration and set up logging
    # -------------------------------------------------------------------------
    settings = load_settings()

    # --debug wins over VATVERIFY_LOG_LEVEL; force replaces any handlers
    # already on the root logger so the level and stream always apply
    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level_value,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        stream=sys.stderr,
        force=True,
    )

    # -------------------------------------------------------------------------
    # STEP 3: Check the VAT and print the outcome
    # -------------------------------------------------------------------------
    try:
        result = process_vat(args.vat_id)
    except VatVerifyError as e:
        # Any stage failure: report it on stdout and exit with status 1
        logger.error(f"Check failed for {args.vat_id!r}: {e}")
        print(f"Received an error while validating VAT: {e}")
        sys.exit(1)

    print(result)


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    run_verifier()
