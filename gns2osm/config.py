"""
Configuration settings for the GNS to OSM converter
"""

import codecs
from dataclasses import dataclass, replace
from typing import Optional

from .countries import country_name as lookup_country_name


@dataclass(frozen=True)
class ConverterConfig:
    """Settings threaded through both passes of a conversion run"""
    # ISO-3166 alpha-2 code, written as given into is_in:country_code
    country_code: str
    # Display name written into is_in:country
    country_name: str
    
    # Value of the 'source' tag on every node
    source_tag: str = "GNS"
    
    # Output document header
    generator: str = "GNS_Converter"
    osm_version: str = "0.5"
    
    # GNS country files are distributed as UTF-8
    encoding: str = "utf-8"


def validate_config(config: ConverterConfig) -> None:
    """
    Validate that all required configuration values are set.
    Raises ValueError if any required value is missing or invalid.
    """
    errors = []
    
    if not config.country_code:
        errors.append("country_code is required but not set")
    elif len(config.country_code) != 2 or not config.country_code.isalpha():
        errors.append(f"country_code must be a two-letter ISO-3166 code, got {config.country_code!r}")
    
    if not config.country_name:
        errors.append("country_name is required but not set")
    
    if not config.source_tag:
        errors.append("source_tag must not be empty")
    
    if not config.generator:
        errors.append("generator must not be empty")
    
    try:
        codecs.lookup(config.encoding)
    except LookupError:
        errors.append(f"encoding {config.encoding!r} is not a known codec")
    
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ValueError(error_msg)


def build_config(
    country_code: str,
    country_name: Optional[str] = None,
    **overrides
) -> ConverterConfig:
    """
    Build a validated configuration for one country
    
    The country name is looked up from the ISO code unless given explicitly.
    
    Args:
        country_code: ISO-3166 alpha-2 code, e.g. 'PH'
        country_name: Optional display name overriding the lookup
        **overrides: Any other ConverterConfig field
        
    Returns:
        Validated ConverterConfig
    """
    name = country_name or lookup_country_name(country_code)
    if not name:
        raise ValueError(f"Unknown ISO-3166 country code: {country_code!r}")
    
    config = ConverterConfig(country_code=country_code, country_name=name)
    if overrides:
        config = replace(config, **overrides)
    
    validate_config(config)
    return config
