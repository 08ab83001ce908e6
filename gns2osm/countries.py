"""
ISO-3166 country lookup

Resolves two-letter country codes to display names via pycountry
"""

from typing import Optional

import pycountry


def country_name(code: Optional[str]) -> Optional[str]:
    """Get the country name for an alpha-2 code, e.g. 'ph' -> 'Philippines'"""
    if not code:
        return None
    try:
        country = pycountry.countries.get(alpha_2=code.strip().upper())
    except LookupError:
        return None
    if country is None:
        return None
    return country.name
