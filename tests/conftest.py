import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gns2osm.config import ConverterConfig
from gns2osm.gns.parser import COLUMNS, GnsRecordParser


HEADER = "\t".join(c.upper() for c in COLUMNS) + "\n"

DEFAULTS = {
    "rc": "1",
    "ufi": "-2423020",
    "uni": "-3627432",
    "lat": "9.65",
    "lon": "123.85",
    "fc": "P",
    "dsg": "PPL",
    "cc1": "RP",
    "adm1": "07",
    "nt": "N",
    "full_name": "Tagbilaran",
}


def gns_line(**values) -> str:
    """A GNS country file line; unspecified columns are left empty"""
    fields = dict.fromkeys(COLUMNS, "")
    fields.update(DEFAULTS)
    fields.update(values)
    return "\t".join(fields[c] for c in COLUMNS) + "\n"


def gns_record(**values):
    return GnsRecordParser.parse_line(gns_line(**values))


@pytest.fixture
def config():
    return ConverterConfig(country_code="PH", country_name="Philippines")


@pytest.fixture
def log_messages():
    """Collects loguru messages emitted during a test"""
    messages = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write_gns(tmp_path):
    """Writes lines to a GNS file and returns its path"""
    def _write(lines, name="rp.txt"):
        path = tmp_path / name
        path.write_text("".join(lines), encoding="utf-8")
        return str(path)
    return _write
