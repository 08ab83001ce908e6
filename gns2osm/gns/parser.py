"""
GNS line parser

Parses one tab-delimited GNS country file line into a GnsRecord
"""

from typing import List, Optional
from loguru import logger

from .models import GnsRecord


# Column positions in the GNS country file layout
# http://earth-info.nga.mil/gns/html/gis_countryfiles.htm
COLUMNS = [
    "rc", "ufi", "uni", "lat", "lon", "dms_lat", "dms_lon", "mgrs", "jog",
    "fc", "dsg", "pc", "cc1", "adm1", "adm2", "pop", "elev",
    "cc2", "nt", "lc", "short_form", "generic", "sort_name",
    "full_name", "full_name_nd", "modify_date",
]
COLUMN_INDEX = {name: i for i, name in enumerate(COLUMNS)}


class GnsRecordParser:
    """
    Splits GNS lines into records
    
    Never rejects a line: numeric columns that do not parse are treated as
    absent, so every record still takes part in ADM1 indexing.
    """
    
    @staticmethod
    def split_line(line: str) -> List[str]:
        """
        Split a line into exactly len(COLUMNS) fields
        
        Short lines are padded with empty strings, the layout allows
        optional trailing columns to be left off.
        """
        fields = line.rstrip("\r\n").split("\t")
        if len(fields) < len(COLUMNS):
            fields.extend([""] * (len(COLUMNS) - len(fields)))
        return fields
    
    @staticmethod
    def is_header(line: str) -> bool:
        """True for the column header line at the top of GNS files"""
        first = line.split("\t", 1)[0].strip()
        return first.upper() == "RC"
    
    @classmethod
    def parse_line(cls, line: str) -> GnsRecord:
        """
        Parse one GNS line
        
        Args:
            line: Raw tab-delimited line, with or without line terminator
            
        Returns:
            GnsRecord; lat or lon is None when the column is not a number
        """
        fields = cls.split_line(line)
        
        def get(name: str) -> str:
            return fields[COLUMN_INDEX[name]].strip()
        
        return GnsRecord(
            ufi=get("ufi"),
            uni=get("uni"),
            lat=cls._parse_float("lat", get("lat")),
            lon=cls._parse_float("lon", get("lon")),
            feature_classification=get("fc"),
            feature_designation_code=get("dsg"),
            populated_place_classification=get("pc"),
            primary_country_code=get("cc1"),
            adm1=get("adm1"),
            adm2=get("adm2"),
            population=cls._parse_int("pop", get("pop")),
            elevation=cls._parse_int("elev", get("elev")),
            name_type=get("nt"),
            full_name=get("full_name"),
            region_font_code=get("rc"),
            secondary_country_code=get("cc2"),
            language_code=get("lc"),
            short_form=get("short_form"),
            generic=get("generic"),
            sort_name=get("sort_name"),
            full_name_nd=get("full_name_nd"),
            modify_date=get("modify_date"),
        )
    
    @staticmethod
    def _parse_float(field: str, value: str) -> Optional[float]:
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            logger.debug(f"Ignoring non-numeric {field} {value!r}")
            return None
    
    @staticmethod
    def _parse_int(field: str, value: str) -> Optional[int]:
        """Parse an optional integer column, empty or non-numeric means absent"""
        if not value:
            return None
        try:
            return int(value)
        except ValueError:
            logger.debug(f"Ignoring non-numeric {field} {value!r}")
            return None
