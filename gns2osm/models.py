"""
Pydantic models for the conversion run summary
"""

from datetime import datetime, timezone
from typing import Dict
from pydantic import BaseModel, Field


class ConversionReport(BaseModel):
    input_path: str
    output_path: str
    country_code: str
    country_name: str
    
    lines_read: int = 0
    unlocated_records: int = 0  # No usable lat/lon
    variant_names_skipped: int = 0
    admin_regions: int = 0
    nodes_written: int = 0
    unmatched_records: int = 0
    # Designation code -> number of records dropped for it
    unmatched_codes: Dict[str, int] = Field(default_factory=dict)
    
    finished_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
