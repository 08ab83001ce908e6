"""
GNS feature designation code -> OSM tag rules

The table is evaluated top to bottom and the first matching rule wins.
Some codes appear twice (PT, AIRS) and some prefix rules shadow later
exact ones (RF before RFU); the shadowed entries are kept so the table
stays in step with the published mapping.

Designation code reference:
http://www.oziexplorer3.com/namesearch/fd_cross_ref.html
"""

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Pattern

from ..gns.admin import PROVINCE_PATTERN


# (feature classification letter, current name tag) -> tags
TagAction = Callable[[str, str], Dict[str, str]]


@dataclass
class ClassificationRule:
    """One designation code pattern and the tags it produces"""
    code: str
    tags: Dict[str, str] = field(default_factory=dict)
    prefix: bool = False
    action: Optional[TagAction] = None
    pattern: Pattern = field(init=False, repr=False)
    
    def __post_init__(self):
        anchor = "" if self.prefix else "$"
        self.pattern = re.compile(f"^{re.escape(self.code)}{anchor}", re.IGNORECASE)
    
    def matches(self, designation_code: str) -> bool:
        return self.pattern.match(designation_code) is not None
    
    def apply(self, feature_classification: str, name: str) -> Dict[str, str]:
        """Tags for a matched record; a fresh dict on every call"""
        if self.action:
            return self.action(feature_classification, name)
        return dict(self.tags)


def exact(code: str, **tags: str) -> ClassificationRule:
    return ClassificationRule(code, tags)


def prefix(code: str, **tags: str) -> ClassificationRule:
    return ClassificationRule(code, tags, prefix=True)


def _adm1_place(feature_classification: str, name: str) -> Dict[str, str]:
    """Provinces become states named without the prefix, the rest cities"""
    match = PROVINCE_PATTERN.match(name)
    if match:
        return {"name": match.group(1), "place": "state"}
    return {"place": "city"}


def _estate_or_estuary(feature_classification: str, name: str) -> Dict[str, str]:
    """ESTY is an estate for spot features and an estuary otherwise"""
    if "S" in feature_classification.upper():
        return {"landuse": "farm"}
    return {"waterway": "river"}


RULES: List[ClassificationRule] = [
    exact("PCLI", place="country"),
    ClassificationRule("ADM1", prefix=True, action=_adm1_place),
    exact("ADM2", place="town"),
    exact("PPLC"),  # Capital city, assumed already tagged
    exact("PPL", place="village"),  # Town, village or hamlet, GNS does not distinguish
    exact("PPLX", place="suburb"),
    exact("PPLQ", place="locality"),  # Abandoned populated place
    exact("LCTY", place="locality"),
    exact("AREA", place="region"),
    exact("RGN", place="region"),
    exact("RGNE", place="region"),
    exact("INDS", place="suburb", landuse="industrial"),
    exact("PRK", place="national_park"),
    exact("PRT", place="port"),
    exact("NVB", place="locality", landuse="military"),  # Naval base
    exact("RES", place="locality"),  # Reserve
    exact("RESA", place="locality", landuse="agriculture"),
    exact("RESF", natural="wood"),
    exact("TRB", place="locality"),  # Tribal area
    exact("FRST", natural="wood"),
    exact("RR", railway="rail"),
    exact("RD", highway="unclassified"),
    
    # Land features
    exact("RK", place="island"),  # Rock
    exact("RKS", place="locality"),
    exact("ATOL", place="island"),
    prefix("ISL", place="island"),
    exact("ISLS", place="region"),
    exact("MT", natural="peak"),
    exact("MTS", place="region"),
    exact("HLL", natural="peak"),
    exact("HLLS", place="region"),
    exact("PK", natural="peak"),
    exact("PKS", natural="region"),
    exact("VLC", natural="volcano"),
    exact("BCH", natural="beach"),
    exact("CLF", natural="cliff"),
    exact("PT", place="locality"),  # Point
    exact("CNYN", place="locality"),
    exact("CAPE", place="locality"),
    exact("DLTA", place="locality", natural="delta", geomorphology="delta"),
    exact("DPR", place="locality"),  # Depression
    exact("GRGE", place="locality"),
    exact("PASS", place="locality", mountain_pass="yes"),
    exact("PEN", place="region"),  # Peninsula
    exact("PLAT", place="region"),
    exact("PLN", place="region"),  # Plain
    exact("HDLD", place="locality"),  # Headland
    exact("ISTH", place="locality"),
    exact("PT", place="locality"),
    exact("RDGE", place="locality"),
    exact("VAL", place="locality"),
    exact("SDL", place="locality"),  # Saddle
    exact("SPUR", natural="peak"),
    
    # Water
    exact("SEA", place="sea"),
    exact("AIRS", place="locality"),  # Seaplane landing area
    exact("GULF", place="locality"),
    exact("STRT", place="locality"),
    exact("ANCH", place="locality"),
    exact("DCKB", place="locality"),  # Docking basin
    exact("NRWS", place="locality"),
    exact("RDST", place="locality"),  # Roadstead
    exact("RPDS", place="locality"),
    exact("SD", place="locality"),  # Sound
    exact("BNK", natural="bank"),
    exact("CHNM", place="locality"),  # Marine channel
    exact("HBR", place="port"),
    exact("SHOL", natural="shoal"),
    exact("BAY", natural="bay"),
    exact("COVE", natural="bay"),
    exact("INLT", natural="bay"),
    prefix("RF", natural="reef"),
    exact("LGN", natural="water"),  # Lagoon
    exact("LK", natural="water"),
    exact("LKI", natural="water"),  # Intermittent lake
    exact("LKS", natural="water"),
    exact("RSV", natural="water"),  # Reservoir
    prefix("PND", natural="water"),  # Ponds of various kinds
    exact("MRSH", natural="marsh"),
    exact("BOG", natural="marsh"),
    exact("SWMP", natural="marsh"),
    exact("CNL", waterway="canal"),
    exact("CNFL", waterway="river"),  # Confluence
    exact("CRKT", waterway="river"),  # Tidal creek
    exact("STM", waterway="river"),  # Rivers and streams of all sizes
    exact("STMD", waterway="river"),  # Distributary
    exact("STMI", waterway="stream"),  # Intermittent
    exact("STMQ", waterway="stream"),  # Abandoned watercourse
    exact("STMX", waterway="river"),  # Section of stream
    exact("CHN", waterway="stream"),  # TODO: CHN can be a sea channel rather than a land one
    exact("CHNL", waterway="stream"),  # Lake channel
    exact("STMM", waterway="river"),  # Stream mouth
    exact("SPNG", natural="spring"),
    exact("FLLS", natural="waterfall"),
    
    # Spot features
    prefix("AGR", landuse="farm"),
    exact("AIRB", aeroway="airfield", landuse="military", military="airfield"),
    exact("AIRF", aeroway="airfield"),
    exact("AIRP", aeroway="airfield"),
    exact("AIRH", aeroway="helipad"),
    exact("AIRQ", aeroway="runway"),  # Abandoned
    exact("AIRS", aeroway="runway"),
    exact("CSTL", historic="castle"),
    exact("CAVE", natural="cave_mouth"),
    exact("CH", amenity="place_of_worship", religion="christian"),
    exact("MSQE", amenity="place_of_worship", religion="islam"),
    exact("TMPL", amenity="place_of_worship"),
    exact("BTYD", waterway="boatyard"),
    exact("CMP", place="camp"),
    exact("CMPMN", place="camp"),  # Mining camp
    exact("CMTY", amenity="grave_yard"),
    exact("DAM", man_made="dam"),
    exact("HSE", building="house"),
    exact("LDNG", waterway="landing"),
    exact("EST", landuse="farm"),  # Estate
    exact("ESTR", landuse="farm", produce="rubber"),
    ClassificationRule("ESTY", action=_estate_or_estuary),
    exact("RNCH", landuse="farm"),
    exact("FRMT", landuse="farm", building="farm"),
    prefix("FRM", landuse="farm"),
    exact("FY", amenity="ferry_terminal"),
    exact("BRKS", military="barracks"),
    exact("FT", landuse="military"),  # Fort
    exact("INSM", landuse="military"),  # Military installation
    exact("LTHSE", man_made="lighthouse"),
    exact("BCN", man_made="lighthouse"),
    exact("MFG", man_made="factory"),
    exact("ML", man_made="factory"),
    exact("MLSW", man_made="factory"),
    exact("MN", man_made="mine"),
    exact("MNAU", man_made="mine", mine_ore="gold"),
    exact("MNC", man_made="mine", mine_ore="coal"),
    exact("MNCR", man_made="mine", mine_ore="chrome"),
    exact("MNCU", man_made="mine", mine_ore="copper"),
    exact("MNFE", man_made="mine", mine_ore="iron"),
    exact("PRN", amenity="prison"),
    exact("PP", amenity="police_station"),
    exact("RSTN", railway="station"),
    exact("RSTP", railway="halt"),
    exact("RUIN", historic="ruin"),
    exact("HSPL", amenity="hospital"),
    exact("SCH", amenity="school"),
    exact("SCHA", amenity="college"),
    exact("SCHC", amenity="college"),
    exact("SCHM", amenity="college", landuse="military", military="school"),
    exact("PS", man_made="power_station"),
    exact("STNR", man_made="radio_station"),
    exact("TRIG", man_made="trig_point"),
    exact("WHRF", man_made="wharf"),
    
    # Undersea
    prefix("RFU", subsea="reef"),
    exact("PLTU", subsea="plateau"),
]
