#!/usr/bin/env python
"""
Command-line interface for the GNS to OSM converter

Usage:
    python cli.py convert --in rp.txt --out rp.osm --country-code PH
    python cli.py regions --in rp.txt
"""

import os
import sys
import json
import argparse

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from loguru import logger
from gns2osm.config import build_config
from gns2osm.gns import GnsFileReader, AdminRegionIndexer, AdminRegionResolver
from gns2osm.pipeline import GnsToOsmPipeline


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def cmd_convert(args):
    """Convert a GNS country file to an .osm file"""
    setup_logging(args.verbose)

    try:
        config = build_config(args.country_code, args.country_name, encoding=args.encoding)
    except ValueError as e:
        logger.error(str(e))
        return 1

    pipeline = GnsToOsmPipeline(config)

    try:
        report = pipeline.run(args.input, args.output)
    except UnicodeDecodeError as e:
        logger.error(f"Conversion failed: {args.input} is not valid {config.encoding} ({e}), try --encoding")
        return 1
    except OSError as e:
        logger.error(f"Conversion failed: {e}")
        return 1

    logger.info(f"✓ Generated: {args.output}")

    if args.report:
        pipeline.save_report(report, args.report)

    if args.summary:
        print(json.dumps(report.model_dump(), indent=2, ensure_ascii=False))

    return 0


def cmd_regions(args):
    """List the first-order administrative regions found in a GNS file"""
    setup_logging(args.verbose)

    if not os.path.exists(args.input):
        logger.error(f"Input file not found: {args.input}")
        return 1

    reader = GnsFileReader(args.input, encoding=args.encoding)
    try:
        index = AdminRegionIndexer.build(reader.records())
    except (OSError, UnicodeDecodeError, LookupError) as e:
        logger.error(f"Failed to read {args.input}: {e}")
        return 1

    regions = []
    for adm1, name in sorted(index.items()):
        key, value = AdminRegionResolver.classify_region_name(name)
        regions.append({"adm1": adm1, "name": name, "tag": {key: value}})

    print(json.dumps(regions, indent=2, ensure_ascii=False))
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Convert GNS gazetteer country files to OpenStreetMap .osm files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Country files are available from:
    http://earth-info.nga.mil/gns/html/namefiles.htm

Examples:
  Convert the Philippines file:
    python cli.py convert --in rp.txt --out rp.osm --country-code PH

  Check how ADM1 regions will be tagged:
    python cli.py regions --in rp.txt
        """
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a GNS file to .osm")
    convert_parser.add_argument("--in", "-i", dest="input", required=True, help="Input GNS file, e.g. ic.txt")
    convert_parser.add_argument("--out", "-o", dest="output", required=True, help="Output .osm file")
    convert_parser.add_argument("--country-code", "-c", required=True,
                                help="ISO-3166 country code written to is_in:country_code")
    convert_parser.add_argument("--country-name", help="Country name (default: looked up from the code)")
    convert_parser.add_argument("--encoding", default="utf-8", help="Input file encoding, e.g. latin-1")
    convert_parser.add_argument("--report", "-r", help="Write a JSON conversion report to this file")
    convert_parser.add_argument("--summary", "-s", action="store_true", help="Print report to stdout")
    convert_parser.set_defaults(func=cmd_convert)

    # Regions command
    regions_parser = subparsers.add_parser("regions", help="List ADM1 regions and their containment tags")
    regions_parser.add_argument("--in", "-i", dest="input", required=True, help="Input GNS file")
    regions_parser.add_argument("--encoding", default="utf-8", help="Input file encoding")
    regions_parser.set_defaults(func=cmd_regions)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
