"""
Parsing helpers for the FAA NASR named-fix extract (FIX_BASE.csv).

NASR coordinates appear either as dash separated DMS with a trailing
hemisphere (``40-11-23.4560N``, ``090-12-34.5670W``) or as a bare decimal
number. Column names drift between subscription cycles, so columns are
located with a two-tier lookup: exact names first, then name fragments.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Sequence

logger = logging.getLogger(__name__)

DMS_PATTERN = re.compile(r'^(\d{2,3})-(\d{2})-(\d{2}\.?\d*)([NSEW])$')
DECIMAL_PATTERN = re.compile(r'^[-+]?(\d+\.?\d*|\.\d+)$')

# Exact column names (compared upper-cased), then fragments for the fallback
IDENTIFIER_COLUMNS = ('FIX_ID',)
LATITUDE_COLUMNS = ('LAT_DECIMAL',)
LONGITUDE_COLUMNS = ('LONG_DECIMAL',)
USE_COLUMNS = ('FIX_USE_CODE',)

IDENTIFIER_FRAGMENTS = ('FIX_ID',)
LATITUDE_FRAGMENTS = ('LAT',)
LONGITUDE_FRAGMENTS = ('LONG',)


def _parse_coordinate(raw: Optional[str], hemispheres: str, negative: str, bound: float) -> Optional[float]:
    if not raw:
        return None
    s = raw.strip()

    match = DMS_PATTERN.match(s)
    if match:
        if match.group(4) not in hemispheres:
            return None
        degrees = int(match.group(1))
        minutes = int(match.group(2))
        seconds = float(match.group(3))
        decimal = degrees + minutes / 60 + seconds / 3600
        return -decimal if match.group(4) == negative else decimal

    if DECIMAL_PATTERN.match(s):
        value = float(s)
        if abs(value) <= bound:
            return value

    return None


def parse_latitude(raw: Optional[str]) -> Optional[float]:
    """
    Parse a NASR latitude.

    Accepts ``dd-mm-ss.ssssN/S`` or a decimal number within +/-90.

    Returns:
        Decimal degrees or None if neither format matches
    """
    return _parse_coordinate(raw, 'NS', 'S', 90.0)


def parse_longitude(raw: Optional[str]) -> Optional[float]:
    """
    Parse a NASR longitude.

    Accepts ``ddd-mm-ss.ssssE/W`` or a decimal number within +/-180.
    """
    return _parse_coordinate(raw, 'EW', 'W', 180.0)


def find_column(header: Sequence[str], names: Iterable[str], fragments: Iterable[str] = ()) -> int:
    """
    Locate a column in a header row.

    Exact (case-insensitive) names are tried first; only when none matches
    are the fragments tried as substrings.

    Args:
        header: Header names in column order
        names: Exact column names
        fragments: Substrings for the fallback lookup

    Returns:
        Column index, or -1 if the column cannot be found
    """
    upper = [h.strip().upper() for h in header]
    exact = {n.upper() for n in names}

    for idx, name in enumerate(upper):
        if name in exact:
            return idx

    for fragment in fragments:
        fragment = fragment.upper()
        for idx, name in enumerate(upper):
            if fragment in name:
                logger.debug(f"Column {header[idx]!r} matched by fragment {fragment!r}")
                return idx

    return -1


def discover_columns(header: Sequence[str]) -> Dict[str, int]:
    """
    Discover the identifier, latitude, longitude and use columns.

    Returns:
        Mapping of 'identifier', 'latitude', 'longitude', 'use' to a column
        index (-1 where not found)
    """
    return {
        'identifier': find_column(header, IDENTIFIER_COLUMNS, IDENTIFIER_FRAGMENTS),
        'latitude': find_column(header, LATITUDE_COLUMNS, LATITUDE_FRAGMENTS),
        'longitude': find_column(header, LONGITUDE_COLUMNS, LONGITUDE_FRAGMENTS),
        'use': find_column(header, USE_COLUMNS),
    }


def missing_columns(columns: Dict[str, int], required: Iterable[str] = ('identifier', 'latitude', 'longitude')) -> List[str]:
    """Return the required column keys that were not found."""
    return [key for key in required if columns.get(key, -1) < 0]
