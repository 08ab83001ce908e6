"""
First-order administrative regions

Pass 1 builds an ADM1 code -> region name index; pass 2 resolves each
record's ADM1 code against it into is_in containment tags.
"""

import re
from typing import Dict, Iterable, Mapping, Optional, Tuple
from loguru import logger

from .models import GnsRecord


AdminRegionIndex = Dict[str, str]

# "Province of Bohol"; case-sensitive
PROVINCE_PATTERN = re.compile(r"^Province\s+?of\s+?(.*)")
CITY_PATTERN = re.compile(r"\bcity\b", re.IGNORECASE)


class AdminRegionIndexer:
    """Builds the ADM1 index from a full pass over the records"""
    
    @staticmethod
    def build(records: Iterable[GnsRecord]) -> AdminRegionIndex:
        """
        Index ADM1 feature names by their ADM1 code
        
        Variant names are ignored. When several ADM1 records share a code
        the last one in file order wins.
        
        Args:
            records: Every record of the input, in file order
            
        Returns:
            Mapping of ADM1 code to region display name
        """
        index: AdminRegionIndex = {}
        for record in records:
            if record.is_variant:
                continue
            if not record.is_adm1:
                continue
            previous = index.get(record.adm1)
            if previous is not None and previous != record.full_name:
                logger.debug(f"ADM1 {record.adm1!r}: {previous!r} replaced by {record.full_name!r}")
            index[record.adm1] = record.full_name
        
        logger.info(f"Indexed {len(index)} first-order administrative regions")
        return index


class AdminRegionResolver:
    """Turns a record's ADM1 code into is_in:* tags"""
    
    def __init__(self, index: Mapping[str, str]):
        self.index = index
    
    @staticmethod
    def classify_region_name(name: str) -> Tuple[str, str]:
        """
        Pick the containment tag for a region name
        
        Best-effort heuristic over free text:
        'Province of X' is a state, anything with the word 'city' is a city,
        everything else gets a plain is_in.
        """
        if PROVINCE_PATTERN.match(name):
            return "is_in:state", name
        if CITY_PATTERN.search(name):
            return "is_in:city", name
        return "is_in", name
    
    def resolve(self, adm1: Optional[str]) -> Dict[str, str]:
        """
        Containment tags for an ADM1 code
        
        Returns an empty dict when the code is blank or not indexed.
        """
        if not adm1:
            return {}
        name = self.index.get(adm1)
        if not name:
            return {}
        key, value = self.classify_region_name(name)
        return {key: value}
