"""
GNS to OSM converter

Turns a GNS gazetteer country file into OpenStreetMap nodes.
"""

from .config import ConverterConfig, build_config, validate_config
from .models import ConversionReport
from .pipeline import GnsToOsmPipeline

__all__ = [
    "ConverterConfig",
    "build_config",
    "validate_config",
    "ConversionReport",
    "GnsToOsmPipeline",
]
