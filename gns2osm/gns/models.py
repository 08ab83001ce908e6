"""
GNS record models

Data classes for one row of a GNS country file
"""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class FeatureClass(Enum):
    """The nine broad GNS feature categories"""
    ADMINISTRATIVE = "A"   # states, provinces, big cities
    POPULATED_PLACE = "P"  # towns, villages
    VEGETATION = "V"       # e.g. a forest
    LOCALITY = "L"         # locality or area
    UNDERSEA = "U"
    ROUTE = "R"            # streets, highways, roads, railroads
    HYPSOGRAPHIC = "T"     # hills, mountains, islands, valleys, headlands
    HYDROGRAPHIC = "H"
    SPOT = "S"


class NameType(Enum):
    """GNS name type codes; the S suffix marks a non-Roman script name"""
    CONVENTIONAL = "C"
    STANDARD = "N"
    STANDARD_NON_ROMAN = "NS"
    PROVISIONAL = "P"
    PROVISIONAL_NON_ROMAN = "PS"
    HISTORIC = "H"
    HISTORIC_NON_ROMAN = "HS"
    NOT_VERIFIED = "D"
    NOT_VERIFIED_NON_ROMAN = "DS"
    VARIANT = "V"
    VARIANT_NON_ROMAN = "VS"


@dataclass(frozen=True)
class GnsRecord:
    """One named feature from a GNS country file"""
    ufi: str
    uni: str
    lat: Optional[float]  # None when the column is not a number
    lon: Optional[float]
    feature_classification: str
    feature_designation_code: str
    populated_place_classification: str
    primary_country_code: str
    adm1: str
    adm2: str  # Retained, not used for tagging
    population: Optional[int]
    elevation: Optional[int]  # Meters
    name_type: str
    full_name: str
    
    # Remaining columns, kept for completeness
    region_font_code: str = ""
    secondary_country_code: str = ""
    language_code: str = ""
    short_form: str = ""
    generic: str = ""
    sort_name: str = ""
    full_name_nd: str = ""
    modify_date: str = ""
    
    @property
    def is_variant(self) -> bool:
        """Variant names (V, VS) never become nodes or ADM1 names"""
        return "V" in self.name_type.upper()
    
    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lon is not None
    
    @property
    def is_adm1(self) -> bool:
        return self.feature_designation_code.upper().startswith("ADM1")
