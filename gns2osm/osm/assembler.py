"""
Node assembly

Combines base, containment, measurement and classification tags for one
GNS record into an OSMNode with a synthetic negative id.
"""

from collections import Counter
from typing import Dict, Optional
from loguru import logger

from .models import OSMNode
from .classifier import FeatureClassifier
from ..config import ConverterConfig
from ..gns.admin import AdminRegionResolver
from ..gns.models import GnsRecord


class NodeAssembler:
    """
    Builds nodes for admitted records
    
    Ids start at -1 and decrease by one per assembled node; records with
    an unmatched designation code or without coordinates are dropped
    without using up an id.
    """
    
    def __init__(
        self,
        config: ConverterConfig,
        resolver: AdminRegionResolver,
        classifier: Optional[FeatureClassifier] = None
    ):
        self.config = config
        self.resolver = resolver
        self.classifier = classifier or FeatureClassifier()
        self.last_id = 0
        self.unmatched: Counter = Counter()
        self.unlocated = 0
    
    @property
    def assembled(self) -> int:
        return -self.last_id
    
    def base_tags(self, record: GnsRecord) -> Dict[str, str]:
        return {
            "name": record.full_name,
            "source": self.config.source_tag,
            "gns_uni": record.uni,
            "gns_classification": record.feature_designation_code,
            "is_in:country": self.config.country_name,
            "is_in:country_code": self.config.country_code,
        }
    
    def build_tags(self, record: GnsRecord) -> Optional[Dict[str, str]]:
        """
        Full tag set for a record, or None if its code is unmatched
        
        Later steps overwrite earlier ones on shared keys.
        """
        tags = self.base_tags(record)
        
        tags.update(self.resolver.resolve(record.adm1))
        
        if record.elevation:
            tags["ele"] = str(record.elevation)  # Meters
        if record.population:
            tags["population"] = str(record.population)
        if record.populated_place_classification:
            tags["gns_populated_place_classification"] = record.populated_place_classification
        
        fragment = self.classifier.classify(
            record.feature_classification,
            record.feature_designation_code,
            tags["name"]
        )
        if fragment is None:
            return None
        tags.update(fragment)
        return tags
    
    def assemble(self, record: GnsRecord) -> Optional[OSMNode]:
        """Node for a non-variant record, None when it is rejected"""
        if not record.has_coordinates:
            self.unlocated += 1
            logger.warning(f"No usable coordinates, skipping ufi={record.ufi} name={record.full_name}")
            return None
        
        tags = self.build_tags(record)
        if tags is None:
            self.unmatched[record.feature_designation_code.upper()] += 1
            logger.warning(
                f" fc={record.feature_classification} fdc={record.feature_designation_code}"
                f" nt={record.name_type} adm1={record.adm1} name={record.full_name}"
            )
            return None
        
        self.last_id -= 1
        return OSMNode(id=self.last_id, lat=record.lat, lon=record.lon, tags=tags)
