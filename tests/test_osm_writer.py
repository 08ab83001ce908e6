import xml.etree.ElementTree as ET

import pytest

from gns2osm.osm import OSMNode, OsmXmlWriter
from gns2osm.osm.models import format_coordinate


def test_writes_document(tmp_path):
    path = tmp_path / "out.osm"

    with OsmXmlWriter(str(path)) as writer:
        writer.write_node(OSMNode(id=-1, lat=9.65, lon=123.85, tags={"name": "Tagbilaran", "place": "village"}))
        writer.write_node(OSMNode(id=-2, lat=10.0, lon=124.0, tags={"name": "Loboc"}))

    text = path.read_text(encoding="utf-8")
    assert text.startswith("<?xml version='1.0' encoding='UTF-8'?>\n")
    assert text.endswith("</osm>\n")
    assert writer.nodes_written == 2

    root = ET.parse(str(path)).getroot()
    assert root.tag == "osm"
    assert root.attrib == {"version": "0.5", "generator": "GNS_Converter"}

    nodes = root.findall("node")
    assert [n.get("id") for n in nodes] == ["-1", "-2"]
    assert nodes[0].attrib == {
        "id": "-1", "action": "modify", "visible": "true", "lat": "9.65", "lon": "123.85",
    }
    assert [(t.get("k"), t.get("v")) for t in nodes[0].findall("tag")] == [
        ("name", "Tagbilaran"), ("place", "village"),
    ]


def test_special_characters_are_escaped(tmp_path):
    path = tmp_path / "out.osm"
    name = "Barrio 'Santo' Niño & <Sons> \"Two\""

    with OsmXmlWriter(str(path)) as writer:
        writer.write_node(OSMNode(id=-1, lat=1.0, lon=2.0, tags={"name": name}))

    tag = ET.parse(str(path)).getroot().find("node/tag")
    assert tag.get("v") == name


def test_empty_document_is_well_formed(tmp_path):
    path = tmp_path / "nested" / "out.osm"

    with OsmXmlWriter(str(path), generator="test", version="0.6"):
        pass

    root = ET.parse(str(path)).getroot()
    assert root.attrib == {"version": "0.6", "generator": "test"}
    assert list(root) == []


def test_aborted_run_leaves_no_footer(tmp_path):
    path = tmp_path / "out.osm"

    with pytest.raises(RuntimeError):
        with OsmXmlWriter(str(path)) as writer:
            writer.write_node(OSMNode(id=-1, lat=1.0, lon=2.0, tags={"name": "x"}))
            raise RuntimeError("boom")

    assert not path.read_text(encoding="utf-8").endswith("</osm>\n")


def test_write_requires_open_writer(tmp_path):
    writer = OsmXmlWriter(str(tmp_path / "out.osm"))

    with pytest.raises(RuntimeError):
        writer.write_node(OSMNode(id=-1, lat=1.0, lon=2.0, tags={}))


@pytest.mark.parametrize("value,text", [
    (0.00001, "0.00001"),
    (-0.0000004, "-0.0000004"),
    (-0.00000001, "0"),
    (12.0, "12"),
    (-123.456789012, "-123.456789"),
])
def test_coordinates_use_fixed_point(value, text):
    assert format_coordinate(value) == text


def test_small_coordinates_in_document(tmp_path):
    path = tmp_path / "out.osm"

    with OsmXmlWriter(str(path)) as writer:
        writer.write_node(OSMNode(id=-1, lat=0.00001, lon=-0.00002, tags={"name": "Equator"}))

    node = ET.parse(str(path)).getroot().find("node")
    assert node.get("lat") == "0.00001"
    assert node.get("lon") == "-0.00002"


def test_node_action_and_visibility(tmp_path):
    path = tmp_path / "out.osm"

    with OsmXmlWriter(str(path)) as writer:
        writer.write_node(OSMNode(id=-1, lat=1.0, lon=2.0, tags={}, action="delete", visible=False))

    node = ET.parse(str(path)).getroot().find("node")
    assert node.get("action") == "delete"
    assert node.get("visible") == "false"
