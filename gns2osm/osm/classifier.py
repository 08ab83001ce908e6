"""
Feature classification

Maps a GNS feature designation code to OSM tags using the ordered rule table
"""

from typing import Dict, List, Optional
from loguru import logger

from .rules import RULES, ClassificationRule


class FeatureClassifier:
    """Evaluates designation codes against an ordered rule table"""
    
    def __init__(self, rules: Optional[List[ClassificationRule]] = None):
        self.rules = rules if rules is not None else RULES
    
    def find_rule(self, designation_code: str) -> Optional[ClassificationRule]:
        """First rule matching the code, or None"""
        for rule in self.rules:
            if rule.matches(designation_code):
                return rule
        return None
    
    def classify(
        self,
        feature_classification: str,
        designation_code: str,
        name: str = ""
    ) -> Optional[Dict[str, str]]:
        """
        Tags for a designation code
        
        Args:
            feature_classification: GNS feature class letter (A, P, V, L, U, R, T, H, S)
            designation_code: GNS DSG code, e.g. 'PPL'
            name: Current name tag, used by rules that rewrite the name
            
        Returns:
            Tag fragment (possibly empty) for a matched code, None if unmatched
        """
        rule = self.find_rule(designation_code)
        if rule is None:
            return None
        tags = rule.apply(feature_classification, name)
        logger.trace(f"{designation_code} matched rule {rule.code}: {tags}")
        return tags
