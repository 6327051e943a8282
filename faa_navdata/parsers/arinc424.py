"""
Decoder for ARINC 424 fixed-column records as published in the FAA CIFP.

Every CIFP line is a fixed 132 character record. The record type is given by
the section code (column 5) and subsection code (column 6). Two shapes are
decoded here:

- ``ER`` enroute airway records: one fix along an airway route
- ``EA`` enroute waypoint records: coordinates of a named enroute fix

Offsets below are 0-indexed Python slice positions. A line is decoded into
exactly one of ``AirwayRecord``, ``WaypointRecord`` or ``UnrecognizedRecord``
by ``decode_record``; the decoders never raise on malformed input.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

SECTION_ENROUTE = 'E'
SUBSECTION_AIRWAY = 'R'
SUBSECTION_WAYPOINT = 'A'

AIRWAY_MIN_LENGTH = 132
WAYPOINT_MIN_LENGTH = 51

# Column slices (start, end)
SECTION_COL = 4
SUBSECTION_COL = 5
ROUTE_ID = (13, 18)
SEQUENCE = (25, 29)
FIX_ID = (29, 34)
FIX_REGION = (34, 36)
MIN_ALTITUDE = (83, 88)
MAX_ALTITUDE = (93, 98)

WAYPOINT_ID = (13, 18)
CONTINUATION_COL = 21
LATITUDE = (32, 41)
LONGITUDE = (41, 51)

PRIMARY_CONTINUATIONS = ('0', '1', ' ')

AIRWAY_TYPE_JET = 'JET'
AIRWAY_TYPE_RNAV = 'RNAV'
AIRWAY_TYPE_VICTOR = 'VICTOR'

DIRECTION_BOTH = 'both'

# ASCII digits only (int() rejects superscripts that str.isdigit() accepts)
_DIGITS = re.compile(r'[0-9]+')


@dataclass(frozen=True)
class AirwayRecord:
    """One fix along an airway, as coded in an ER record."""

    route_identifier: str
    sequence_number: int
    fix_identifier: str
    fix_icao_region: str
    airway_type: str
    minimum_altitude: int
    maximum_altitude: Optional[int]
    direction: str = DIRECTION_BOTH

    @property
    def is_victor(self) -> bool:
        return self.route_identifier.startswith('V')


@dataclass(frozen=True)
class WaypointRecord:
    """An enroute waypoint with its decoded position, from an EA record."""

    identifier: str
    latitude_deg: float
    longitude_deg: float


@dataclass(frozen=True)
class UnrecognizedRecord:
    """
    A line that decoded to neither record shape.

    ``skipped`` is True when the line claimed to be an EA or ER record but
    could not be decoded; False for other record types and blank lines.
    """

    reason: str
    skipped: bool = False


DecodedRecord = Union[AirwayRecord, WaypointRecord, UnrecognizedRecord]


def _field(line: str, span: Tuple[int, int]) -> str:
    return line[span[0]:span[1]]


def _is_digits(s: str) -> bool:
    return _DIGITS.fullmatch(s) is not None


def classify_airway_type(route_identifier: str) -> str:
    """Classify a route by its identifier prefix (J, T/Q, everything else)."""
    if route_identifier.startswith('J'):
        return AIRWAY_TYPE_JET
    if route_identifier.startswith('T') or route_identifier.startswith('Q'):
        return AIRWAY_TYPE_RNAV
    return AIRWAY_TYPE_VICTOR


def _decode_dms(raw: str, degree_digits: int, hemispheres: str, negative: str) -> Optional[float]:
    s = raw.strip()
    if len(s) < 1 + degree_digits + 6:
        return None
    hemisphere = s[0]
    if hemisphere not in hemispheres:
        return None

    parts = (
        s[1:1 + degree_digits],
        s[1 + degree_digits:3 + degree_digits],
        s[3 + degree_digits:5 + degree_digits],
        s[5 + degree_digits:7 + degree_digits],
    )
    if not all(_is_digits(part) for part in parts):
        return None
    degrees, minutes, seconds, hundredths = (int(part) for part in parts)

    decimal = degrees + minutes / 60 + (seconds + hundredths / 100) / 3600
    return -decimal if hemisphere == negative else decimal


def decode_latitude(raw: str) -> Optional[float]:
    """
    Decode an ARINC 424 latitude (``N/SddmmssHH``) to decimal degrees.

    Example: ``"N38443200"`` -> 38 + 44/60 + 32.00/3600

    Returns:
        Decimal degrees, negative in the southern hemisphere, or None when
        the string is too short or a component is not numeric
    """
    return _decode_dms(raw, 2, 'NS', 'S')


def decode_longitude(raw: str) -> Optional[float]:
    """
    Decode an ARINC 424 longitude (``E/WdddmmssHH``) to decimal degrees.

    Example: ``"W090123456"`` -> -(90 + 12/60 + 34.56/3600)
    """
    return _decode_dms(raw, 3, 'EW', 'W')


def _parse_altitude(raw: str) -> Tuple[bool, Optional[int]]:
    """Return (ok, value); a blank field is ok with value None."""
    s = raw.strip()
    if not s:
        return True, None
    if not _is_digits(s):
        return False, None
    return True, int(s)


def _section(line: str) -> Tuple[str, str]:
    if len(line) <= SUBSECTION_COL:
        return '', ''
    return line[SECTION_COL], line[SUBSECTION_COL]


def decode_airway_record(line: str) -> DecodedRecord:
    """
    Decode an enroute airway (ER) record.

    Minimum altitude defaults to 0 when blank; maximum altitude stays None
    when blank. Direction is always ``both``.
    """
    section, subsection = _section(line)
    if section != SECTION_ENROUTE or subsection != SUBSECTION_AIRWAY:
        return UnrecognizedRecord('not an enroute airway record')
    if len(line) < AIRWAY_MIN_LENGTH:
        return UnrecognizedRecord(f'airway record shorter than {AIRWAY_MIN_LENGTH}', skipped=True)

    route_identifier = _field(line, ROUTE_ID).strip()
    sequence = _field(line, SEQUENCE).strip()
    fix_identifier = _field(line, FIX_ID).strip()
    if not route_identifier or not fix_identifier:
        return UnrecognizedRecord('airway record without route or fix identifier', skipped=True)
    if not _is_digits(sequence):
        return UnrecognizedRecord(f'invalid sequence number {sequence!r}', skipped=True)

    min_ok, minimum_altitude = _parse_altitude(_field(line, MIN_ALTITUDE))
    max_ok, maximum_altitude = _parse_altitude(_field(line, MAX_ALTITUDE))
    if not (min_ok and max_ok):
        return UnrecognizedRecord('invalid altitude', skipped=True)

    return AirwayRecord(
        route_identifier=route_identifier,
        sequence_number=int(sequence),
        fix_identifier=fix_identifier,
        fix_icao_region=_field(line, FIX_REGION).strip(),
        airway_type=classify_airway_type(route_identifier),
        minimum_altitude=minimum_altitude if minimum_altitude is not None else 0,
        maximum_altitude=maximum_altitude,
    )


def decode_waypoint_record(line: str) -> DecodedRecord:
    """
    Decode an enroute waypoint (EA) record.

    Only primary records are accepted: continuation records (continuation
    number other than 0, 1 or blank) are rejected.
    """
    section, subsection = _section(line)
    if section != SECTION_ENROUTE or subsection != SUBSECTION_WAYPOINT:
        return UnrecognizedRecord('not an enroute waypoint record')
    if len(line) < WAYPOINT_MIN_LENGTH:
        return UnrecognizedRecord(f'waypoint record shorter than {WAYPOINT_MIN_LENGTH}', skipped=True)
    if line[CONTINUATION_COL] not in PRIMARY_CONTINUATIONS:
        return UnrecognizedRecord('waypoint continuation record', skipped=True)

    identifier = _field(line, WAYPOINT_ID).strip()
    if not identifier:
        return UnrecognizedRecord('waypoint record without identifier', skipped=True)

    latitude = decode_latitude(_field(line, LATITUDE))
    longitude = decode_longitude(_field(line, LONGITUDE))
    if latitude is None or longitude is None:
        return UnrecognizedRecord(f'invalid coordinates for waypoint {identifier}', skipped=True)

    return WaypointRecord(identifier=identifier, latitude_deg=latitude, longitude_deg=longitude)


def decode_record(line: str) -> DecodedRecord:
    """
    Decode one CIFP line into exactly one record shape.

    The waypoint shape is tried first; a line identified as a waypoint
    record is never tried as an airway record.
    """
    line = line.rstrip('\r\n')
    section, subsection = _section(line)
    if section == SECTION_ENROUTE and subsection == SUBSECTION_WAYPOINT:
        return decode_waypoint_record(line)
    if section == SECTION_ENROUTE and subsection == SUBSECTION_AIRWAY:
        return decode_airway_record(line)
    return UnrecognizedRecord('unsupported record type')
