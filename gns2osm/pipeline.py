"""
Main pipeline for GNS to OSM conversion

Two sequential passes over the same GNS country file:

  1. Index first-order administrative regions (ADM1 code -> name)
  2. For every non-variant record: resolve its region, classify its
     designation code, assemble a node and stream it to the .osm writer

The ADM1 index is complete before pass 2 starts, because populated places
may reference regions listed later in the file.
"""

import json
import os
from typing import Iterable, Iterator, Optional
from loguru import logger

from .config import ConverterConfig, validate_config
from .models import ConversionReport
from .gns import GnsFileReader, GnsRecord, AdminRegionIndex, AdminRegionIndexer, AdminRegionResolver
from .osm import OSMNode, FeatureClassifier, NodeAssembler, OsmXmlWriter


class GnsToOsmPipeline:
    """
    Converts one country's GNS file into an .osm file
    
    Usage:
        pipeline = GnsToOsmPipeline(build_config("PH"))
        report = pipeline.run("rp.txt", "rp.osm")
    """
    
    def __init__(self, config: ConverterConfig, classifier: Optional[FeatureClassifier] = None):
        validate_config(config)
        self.config = config
        self.classifier = classifier or FeatureClassifier()
        self.variants_skipped = 0
    
    def build_admin_index(self, reader: GnsFileReader) -> AdminRegionIndex:
        """Pass 1: read the whole file and index ADM1 names"""
        logger.info(f"Pass 1: indexing administrative regions in {reader.path}")
        return AdminRegionIndexer.build(reader.records())
    
    def make_assembler(self, index: AdminRegionIndex) -> NodeAssembler:
        return NodeAssembler(self.config, AdminRegionResolver(index), self.classifier)
    
    def convert(self, records: Iterable[GnsRecord], assembler: NodeAssembler) -> Iterator[OSMNode]:
        """
        Pass 2 core: yield a node for every admitted, classified record
        
        Variant names are skipped silently; unmatched codes are reported
        by the assembler.
        """
        self.variants_skipped = 0
        for record in records:
            if record.is_variant:
                self.variants_skipped += 1
                continue
            node = assembler.assemble(record)
            if node is not None:
                yield node
    
    def run(self, input_path: str, output_path: str) -> ConversionReport:
        """
        Run both passes and write the .osm file
        
        Raises:
            OSError: If the input cannot be read or the output cannot be written
            UnicodeDecodeError: If the input is not in the configured encoding
        """
        logger.info(f"Converting {input_path} for {self.config.country_name} ({self.config.country_code})")
        
        if not os.path.isfile(input_path):
            raise FileNotFoundError(f"Input file not found: {input_path}")
        reader = GnsFileReader(input_path, encoding=self.config.encoding)
        
        index = self.build_admin_index(reader)
        assembler = self.make_assembler(index)
        
        logger.info("Pass 2: classifying features")
        with OsmXmlWriter(output_path, self.config.generator, self.config.osm_version) as writer:
            for node in self.convert(reader.records(), assembler):
                writer.write_node(node)
        
        report = ConversionReport(
            input_path=input_path,
            output_path=output_path,
            country_code=self.config.country_code,
            country_name=self.config.country_name,
            lines_read=reader.lines_read,
            unlocated_records=assembler.unlocated,
            variant_names_skipped=self.variants_skipped,
            admin_regions=len(index),
            nodes_written=writer.nodes_written,
            unmatched_records=sum(assembler.unmatched.values()),
            unmatched_codes=dict(assembler.unmatched.most_common()),
        )
        
        logger.info(
            f"Done: {report.nodes_written} nodes, {report.unmatched_records} unmatched, "
            f"{report.variant_names_skipped} variant names skipped, {report.unlocated_records} without coordinates"
        )
        return report
    
    def save_report(self, report: ConversionReport, output_path: str) -> str:
        """Save the run summary to a JSON file"""
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(report.model_dump(), f, indent=2, ensure_ascii=False)
        
        logger.info(f"Saved conversion report to {output_path}")
        return output_path
