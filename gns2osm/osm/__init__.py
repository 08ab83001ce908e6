"""
OpenStreetMap output module

Components:
- Models: OSMNode
- Rules: ordered designation code -> tag table
- Classifier: first-match rule evaluation
- Assembler: per-record tag set and id assignment
- Writer: streaming .osm XML output
"""

from .models import OSMNode
from .rules import RULES, ClassificationRule
from .classifier import FeatureClassifier
from .assembler import NodeAssembler
from .writer import OsmXmlWriter

__all__ = [
    "OSMNode",
    "RULES",
    "ClassificationRule",
    "FeatureClassifier",
    "NodeAssembler",
    "OsmXmlWriter",
]
