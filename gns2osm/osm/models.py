"""
OSM data models

Data classes for representing new OSM nodes
"""

from typing import Dict
from dataclasses import dataclass


def format_coordinate(value: float) -> str:
    """Fixed-point degrees at OSM's 7-decimal precision, trailing zeros dropped"""
    text = f"{value:.7f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


@dataclass
class OSMNode:
    """
    A point to be uploaded as a new object
    
    Negative ids mark objects that do not exist on the server yet;
    action='modify' makes editors treat them as pending changes.
    """
    id: int
    lat: float
    lon: float
    tags: Dict[str, str]
    action: str = "modify"
    visible: bool = True
    
    def attributes(self) -> Dict[str, str]:
        """XML attributes of the <node> element, in document order"""
        return {
            "id": str(self.id),
            "action": self.action,
            "visible": "true" if self.visible else "false",
            "lat": format_coordinate(self.lat),
            "lon": format_coordinate(self.lon),
        }
