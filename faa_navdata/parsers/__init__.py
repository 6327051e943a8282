"""
Parsers for the raw source extracts.

- delimited: quote-aware comma-delimited lines (OurAirports, NASR)
- arinc424: fixed-column CIFP records (enroute airways and waypoints)
- nasr: NASR coordinate formats and header discovery
"""

from .delimited import parse_line, parse_table, DelimitedTable
from .arinc424 import (
    AirwayRecord,
    WaypointRecord,
    UnrecognizedRecord,
    decode_record,
    decode_latitude,
    decode_longitude,
)
from .nasr import parse_latitude, parse_longitude, find_column, discover_columns

__all__ = [
    'parse_line',
    'parse_table',
    'DelimitedTable',
    'AirwayRecord',
    'WaypointRecord',
    'UnrecognizedRecord',
    'decode_record',
    'decode_latitude',
    'decode_longitude',
    'parse_latitude',
    'parse_longitude',
    'find_column',
    'discover_columns',
]
