"""
OSM XML writer

Streams OSMNodes into a JOSM-style .osm document
"""

import os
import xml.etree.ElementTree as ET
from typing import Optional, TextIO
from loguru import logger

from .models import OSMNode


class OsmXmlWriter:
    """
    Writes an .osm file node by node
    
    Usage:
        with OsmXmlWriter("ph.osm") as writer:
            writer.write_node(node)
    
    Node attributes come from OSMNode.attributes().
    """
    
    def __init__(self, path: str, generator: str = "GNS_Converter", version: str = "0.5"):
        self.path = path
        self.generator = generator
        self.version = version
        self.nodes_written = 0
        self._file: Optional[TextIO] = None
    
    def __enter__(self) -> "OsmXmlWriter":
        self.open()
        return self
    
    def __exit__(self, exc_type, exc, tb):
        self.close(complete=exc_type is None)
    
    def open(self):
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        self._file = open(self.path, "w", encoding="utf-8")
        root = ET.Element("osm", {"version": self.version, "generator": self.generator})
        # Serialise the empty root and split off its closing tag
        start_tag = ET.tostring(root, encoding="unicode").replace(" />", ">")
        self._file.write("<?xml version='1.0' encoding='UTF-8'?>\n")
        self._file.write(start_tag + "\n")
    
    def write_node(self, node: OSMNode):
        """Append one node with its tags in insertion order"""
        if self._file is None:
            raise RuntimeError("OsmXmlWriter is not open")
        
        element = ET.Element("node", node.attributes())
        for key, value in node.tags.items():
            ET.SubElement(element, "tag", {"k": key, "v": value})
        ET.indent(element, space="  ", level=1)
        
        self._file.write("  " + ET.tostring(element, encoding="unicode") + "\n")
        self.nodes_written += 1
    
    def close(self, complete: bool = True):
        if self._file is None:
            return
        try:
            if complete:
                self._file.write("</osm>\n")
                logger.info(f"Wrote {self.nodes_written} nodes to {self.path}")
            else:
                logger.warning(f"Conversion aborted, {self.path} is incomplete")
        finally:
            self._file.close()
            self._file = None
