"""
Address Parser

Turns a free-text address of the shape

    "<street>, <postal> <city>, <country>"

into a ParsedAddress. Unparseable input yields None; callers decide which
error to report. Country names resolve through pycountry, so ISO names,
common names and alpha-2/alpha-3 codes are all accepted.
"""

from typing import Optional

import pycountry

from .models import ParsedAddress


def get_country_iso2(country: Optional[str]) -> Optional[str]:
    """Resolve a country name or code to its ISO-2 code (case-insensitive)"""
    if not country:
        return None
    name = " ".join(country.split())
    if not name:
        return None
    try:
        return pycountry.countries.lookup(name).alpha_2
    except LookupError:
        return None


def parse_address(address: Optional[str]) -> Optional[ParsedAddress]:
    """
    Parse a free-text address.

    At least three comma-separated segments are required. Segments past the
    third are ignored, so "Street 1, 80331 Munich, Germany, Europe" and a
    trailing comma both parse.

    Returns:
        ParsedAddress, or None when any part is missing or the country is unknown
    """
    if not address or not isinstance(address, str):
        return None

    segments = address.split(",")
    if len(segments) < 3:
        return None

    street = segments[0].strip()
    locality = segments[1].split()
    country = segments[2].strip()

    zip_code = locality[0] if locality else ""
    city = " ".join(locality[1:])
    country_code = get_country_iso2(country)

    if not (street and zip_code and city and country and country_code):
        return None

    return ParsedAddress(
        street=street,
        zip_code=zip_code,
        city=city,
        country=country,
        country_code=country_code,
    )


def is_valid_address(address: Optional[str]) -> bool:
    """True when the address parses"""
    return parse_address(address) is not None


__all__ = ["get_country_iso2", "parse_address", "is_valid_address"]
