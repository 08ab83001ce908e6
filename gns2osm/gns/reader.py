"""
GNS country file reader

Iterates a GNS file as GnsRecords, skipping the header and blank lines
"""

from typing import Iterator
from loguru import logger

from .models import GnsRecord
from .parser import GnsRecordParser


class GnsFileReader:
    """
    Reads a GNS country file one record at a time
    
    Each call to records() re-opens the file, so one reader can serve
    both passes. lines_read reflects the most recent iteration.
    
    Raises OSError when the file cannot be read and UnicodeDecodeError
    when it is not in the configured encoding.
    """
    
    def __init__(self, path: str, encoding: str = "utf-8"):
        self.path = path
        self.encoding = encoding
        self.parser = GnsRecordParser()
        self.lines_read = 0
    
    def records(self) -> Iterator[GnsRecord]:
        """Yield a record for every data line in file order"""
        self.lines_read = 0
        
        with open(self.path, "r", encoding=self.encoding, newline="") as f:
            for line_no, line in enumerate(f, 1):
                if not line.strip():
                    continue
                if line_no == 1 and self.parser.is_header(line):
                    logger.debug(f"Skipping header line in {self.path}")
                    continue
                
                self.lines_read += 1
                yield self.parser.parse_line(line)
