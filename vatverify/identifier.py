"""Splitting a raw VAT identifier into country code and number."""

from dataclasses import dataclass

from .errors import NotEnoughLetters


COUNTRY_CODE_LENGTH = 2


@dataclass(frozen=True)
class VATIdentifier:
    """A VAT identifier as sent to the registry."""

    country_code: str
    number: str


def is_all_letters(text: str) -> bool:
    """
    Check that a string is non-empty and made only of Unicode letters.

    Examples:
        is_all_letters("abc")  -> True
        is_all_letters("ab3")  -> False
        is_all_letters("")     -> False
    """
    if not text:
        return False
    return all(ch.isalpha() for ch in text)


def split_vat(pending: str) -> VATIdentifier:
    """
    Split the raw input into a two-letter country code and the rest.

    The number part is passed through untouched; the registry decides
    whether it is well formed.

    Raises:
        NotEnoughLetters: If the input does not begin with two letters
    """
    country_code = pending[:COUNTRY_CODE_LENGTH]

    # Slicing a short input yields a short prefix, which fails here too
    if len(country_code) < COUNTRY_CODE_LENGTH or not is_all_letters(country_code):
        raise NotEnoughLetters()

    return VATIdentifier(country_code=country_code, number=pending[COUNTRY_CODE_LENGTH:])
