"""
GNS country file input

Components:
- Models: GnsRecord and the GNS code enumerations
- Parser: one line -> one GnsRecord
- Reader: whole-file iteration with header and bad-line handling
- Admin: ADM1 region index (pass 1) and containment resolution (pass 2)
"""

from .models import GnsRecord, FeatureClass, NameType
from .parser import GnsRecordParser
from .reader import GnsFileReader
from .admin import AdminRegionIndex, AdminRegionIndexer, AdminRegionResolver

__all__ = [
    "GnsRecord",
    "FeatureClass",
    "NameType",
    "GnsRecordParser",
    "GnsFileReader",
    "AdminRegionIndex",
    "AdminRegionIndexer",
    "AdminRegionResolver",
]
