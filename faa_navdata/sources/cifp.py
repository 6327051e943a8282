import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .base import SourceInterface
from ..models.airway import Airway
from ..models.navaid import Navaid
from ..models.report import AirwayBuildReport
from ..parsers.arinc424 import AirwayRecord, UnrecognizedRecord, WaypointRecord, decode_record

logger = logging.getLogger(__name__)

MIN_RESOLVED_SEGMENTS = 2


@dataclass
class CIFPParseResult:
    """Airway records grouped by route plus the enroute waypoint coordinates."""

    airway_records: Dict[str, List[AirwayRecord]]
    waypoint_coords: Dict[str, Tuple[float, float]]


class CIFPAirwaySource(SourceInterface):
    """
    Airway graph builder for the FAA CIFP (ARINC 424) file.

    A single pass over the file collects enroute waypoint coordinates (EA
    records) and Victor airway fixes (ER records). Each airway fix is then
    resolved against the navaid database first and the enroute waypoints
    second; unresolved fixes are dropped and airways left with fewer than
    two fixes are not emitted.
    """

    def __init__(self, cifp_file: Union[str, Path], navaids: Dict[str, Navaid]):
        """
        Initialize the source.

        Args:
            cifp_file: Path to the CIFP file (e.g. FAACIFP18)
            navaids: Previously built navaid database, read only
        """
        self.cifp_file = Path(cifp_file)
        self.navaids = navaids

    def parse_lines(self, lines: Iterable[str], report: AirwayBuildReport) -> CIFPParseResult:
        """
        Collect waypoint coordinates and Victor airway records in one pass.

        Records of each route are sorted by sequence number; the sort is
        stable so equal sequence numbers keep their file order.
        """
        airway_records: Dict[str, List[AirwayRecord]] = {}
        waypoint_coords: Dict[str, Tuple[float, float]] = {}

        for line in lines:
            report.lines_read += 1
            record = decode_record(line)

            if isinstance(record, WaypointRecord):
                report.waypoint_records += 1
                waypoint_coords[record.identifier] = (record.latitude_deg, record.longitude_deg)
            elif isinstance(record, AirwayRecord):
                report.airway_records += 1
                if not record.is_victor:
                    report.non_victor_records += 1
                    continue
                airway_records.setdefault(record.route_identifier, []).append(record)
            elif isinstance(record, UnrecognizedRecord):
                if record.skipped:
                    report.skipped_records += 1
                    logger.debug(f"Skipping line {report.lines_read}: {record.reason}")
                else:
                    report.ignored_lines += 1

        for records in airway_records.values():
            records.sort(key=lambda r: r.sequence_number)

        report.victor_routes = len(airway_records)
        logger.info(f"Parsed {len(waypoint_coords)} enroute waypoint coordinates (EA records)")
        logger.info(f"Found {len(airway_records)} Victor airways in CIFP data")
        return CIFPParseResult(airway_records, waypoint_coords)

    def _display_name(self, fix_identifier: str) -> str:
        navaid = self.navaids.get(fix_identifier)
        if navaid is not None and navaid.name:
            return navaid.name
        return fix_identifier

    def resolve_fix(self, fix_identifier: str,
                    waypoint_coords: Dict[str, Tuple[float, float]]) -> Tuple[Optional[Tuple[float, float]], Optional[str]]:
        """
        Resolve a fix to coordinates.

        Returns:
            Tuple of (coordinates, origin) where origin is 'navaid' or
            'waypoint', or (None, None) when the fix is unknown to both
        """
        navaid = self.navaids.get(fix_identifier)
        if navaid is not None:
            return (navaid.latitude_deg, navaid.longitude_deg), 'navaid'
        coords = waypoint_coords.get(fix_identifier)
        if coords is not None:
            return coords, 'waypoint'
        return None, None

    def build_airways(self, parsed: CIFPParseResult, report: AirwayBuildReport) -> Dict[str, Airway]:
        """Cross-reference airway records with navaids and waypoints."""
        airways: Dict[str, Airway] = {}

        for airway_id, records in parsed.airway_records.items():
            airway = Airway(id=airway_id, type=records[0].airway_type)

            for record in records:
                coords, origin = self.resolve_fix(record.fix_identifier, parsed.waypoint_coords)
                if coords is None:
                    report.add_missing_fix(record.fix_identifier)
                    continue
                if origin == 'navaid':
                    report.resolved_from_navaid += 1
                else:
                    report.resolved_from_waypoint += 1

                airway.add_segment(
                    record.fix_identifier,
                    coords[0],
                    coords[1],
                    minimum_altitude=record.minimum_altitude,
                    maximum_altitude=record.maximum_altitude,
                    direction=record.direction,
                )

            if len(airway.segments) < MIN_RESOLVED_SEGMENTS:
                report.dropped_airways.append(airway_id)
                logger.debug(f"Dropping {airway_id}: {len(airway.segments)} resolved fixes")
                continue

            first = self._display_name(airway.segments[0].fix_identifier)
            last = self._display_name(airway.segments[-1].fix_identifier)
            airway.description = f"{first} to {last}"
            airways[airway_id] = airway

        report.airways_emitted = len(airways)
        report.total_segments = sum(len(airway.segments) for airway in airways.values())
        return airways

    def build_from_lines(self, lines: Iterable[str]) -> Tuple[Dict[str, Airway], AirwayBuildReport]:
        report = AirwayBuildReport()
        parsed = self.parse_lines(lines, report)
        return self.build_airways(parsed, report), report

    def build(self) -> Tuple[Dict[str, Airway], AirwayBuildReport]:
        cifp_file = self.require_file(self.cifp_file, 'CIFP file')
        logger.info(f"Parsing CIFP file: {cifp_file} ({len(self.navaids)} navaids loaded)")
        return self.build_from_lines(self.read_text(cifp_file).split('\n'))
