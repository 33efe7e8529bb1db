"""Functions for checking the structure of SWIFT/BIC codes.

A code is laid out as follows:

- 4 letters identifying the institution
- 2 letters identifying the country
- 2 letters or digits identifying the location
- an optional 3 letters or digits identifying the branch

The branch suffix "XXX" is reserved for a bank's headquarters.
"""

# Standard library imports
import re

HEADQUARTERS_SUFFIX = "XXX"
PREFIX_LENGTH = 8

_SWIFT_CODE_RE = re.compile(r"[A-Z]{6}[A-Z0-9]{2}(?:[A-Z0-9]{3})?")


def is_well_formed(code: str) -> bool:
    """Determines whether a code matches the fixed-width SWIFT layout.

    Args:
        code: The code.

    Returns:
        `True` if the code is an 8- or 11-character uppercase
            code with letters and digits in the allowed positions.
    """
    return _SWIFT_CODE_RE.fullmatch(code) is not None


def is_consistent_with_country(code: str, country_code: str) -> bool:
    """Determines whether the country segment of a code (the fifth
    and sixth characters) equals the given country code.

    Args:
        code: The code.

        country_code: The declared two-letter country code.

    Returns:
        The boolean result.
    """
    return code[4:6] == country_code


def is_headquarters_code(code: str) -> bool:
    """Returns `True` if the code carries the headquarters branch suffix."""
    return code.endswith(HEADQUARTERS_SUFFIX)


def headquarters_prefix(code: str) -> str:
    """Returns the institution, country, and location segments
    shared by a headquarters and all of its branches.
    """
    return code[:PREFIX_LENGTH]
