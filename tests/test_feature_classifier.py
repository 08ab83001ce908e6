import pytest

from gns2osm.osm import FeatureClassifier, RULES
from gns2osm.osm.rules import ClassificationRule


@pytest.fixture
def classifier():
    return FeatureClassifier()


@pytest.mark.parametrize("code,expected", [
    ("PCLI", {"place": "country"}),
    ("PPL", {"place": "village"}),
    ("ppl", {"place": "village"}),
    ("MT", {"natural": "peak"}),
    ("PKS", {"natural": "region"}),
    ("ISL", {"place": "island"}),
    ("ISLET", {"place": "island"}),
    ("DLTA", {"place": "locality", "natural": "delta", "geomorphology": "delta"}),
    ("PASS", {"place": "locality", "mountain_pass": "yes"}),
    ("PNDSF", {"natural": "water"}),
    ("AGRF", {"landuse": "farm"}),
    ("AIRB", {"aeroway": "airfield", "landuse": "military", "military": "airfield"}),
    ("CH", {"amenity": "place_of_worship", "religion": "christian"}),
    ("ESTR", {"landuse": "farm", "produce": "rubber"}),
    ("FRMT", {"landuse": "farm", "building": "farm"}),
    ("FRMS", {"landuse": "farm"}),
    ("MNAU", {"man_made": "mine", "mine_ore": "gold"}),
    ("SCHM", {"amenity": "college", "landuse": "military", "military": "school"}),
    ("PLTU", {"subsea": "plateau"}),
])
def test_classify_codes(classifier, code, expected):
    assert classifier.classify("S", code) == expected


def test_capital_is_matched_without_tags(classifier):
    assert classifier.classify("P", "PPLC") == {}


def test_unknown_code_is_unmatched(classifier):
    assert classifier.classify("S", "ZZZZZ") is None
    assert classifier.classify("S", "") is None


def test_exact_codes_do_not_match_longer_codes(classifier):
    # PPLA is not in the table even though PPL is
    assert classifier.classify("P", "PPLA") is None
    assert classifier.classify("T", "MTX") is None


def test_estuary_or_estate_depends_on_feature_class(classifier):
    assert classifier.classify("S", "ESTY") == {"landuse": "farm"}
    assert classifier.classify("s", "ESTY") == {"landuse": "farm"}
    assert classifier.classify("H", "ESTY") == {"waterway": "river"}


def test_adm1_province_strips_prefix(classifier):
    tags = classifier.classify("A", "ADM1", "Province of Palawan")

    assert tags == {"name": "Palawan", "place": "state"}


def test_adm1_other_names_are_cities(classifier):
    assert classifier.classify("A", "ADM1", "Manila") == {"place": "city"}
    assert classifier.classify("A", "ADM1H", "Manila") == {"place": "city"}


def test_first_matching_rule_wins(classifier):
    # The AIRS seaplane entry before the aeroway one decides
    assert classifier.classify("S", "AIRS") == {"place": "locality"}
    # The ISL prefix rule shadows the ISLS entry
    assert classifier.classify("T", "ISLS") == {"place": "island"}
    # The RF prefix rule shadows the undersea RFU entry
    assert classifier.classify("U", "RFU") == {"natural": "reef"}
    assert classifier.find_rule("PT") is RULES[[r.code for r in RULES].index("PT")]


def test_duplicate_rules_are_kept():
    codes = [rule.code for rule in RULES]

    assert codes.count("PT") == 2
    assert codes.count("AIRS") == 2
    assert codes.index("RF") < codes.index("RFU")


def test_classification_is_deterministic_and_fresh(classifier):
    first = classifier.classify("S", "MNAU")
    first["mine_ore"] = "silver"

    assert classifier.classify("S", "MNAU") == {"man_made": "mine", "mine_ore": "gold"}


def test_custom_rule_table():
    classifier = FeatureClassifier([
        ClassificationRule("PPLA", {"place": "town"}),
        ClassificationRule("PPL", {"place": "village"}, prefix=True),
    ])

    assert classifier.classify("P", "PPLA") == {"place": "town"}
    assert classifier.classify("P", "PPLL") == {"place": "village"}
    assert classifier.classify("P", "MT") is None
