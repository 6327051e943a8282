import logging
from pathlib import Path
from typing import Dict, List, Tuple, Union

from .base import SourceInterface
from ..exceptions import InvalidInputError
from ..models.named_fix import NamedFix
from ..models.report import NamedFixBuildReport
from ..parsers.delimited import parse_line, split_lines
from ..parsers.nasr import discover_columns, missing_columns, parse_latitude, parse_longitude

logger = logging.getLogger(__name__)

MIN_IDENT_LENGTH = 2
MAX_IDENT_LENGTH = 5

# Conservative contiguous-US box: (min, max)
CONUS_LATITUDE = (24.0, 50.0)
CONUS_LONGITUDE = (-130.0, -65.0)

COORDINATE_DECIMALS = 6


def in_conus(latitude: float, longitude: float) -> bool:
    """True if the position lies inside the CONUS bounding box (edges included)."""
    return (CONUS_LATITUDE[0] <= latitude <= CONUS_LATITUDE[1]
            and CONUS_LONGITUDE[0] <= longitude <= CONUS_LONGITUDE[1])


class NASRFixSource(SourceInterface):
    """
    Named-fix normalizer for the NASR FIX_BASE.csv extract.

    Columns are located by header name (exact names, then fragments).
    Records are skipped when the identifier is missing or not 2-5
    characters long, when a coordinate cannot be parsed, or when the fix
    lies outside CONUS.
    """

    def __init__(self, fixes_file: Union[str, Path]):
        self.fixes_file = Path(fixes_file)

    def _field(self, fields: List[str], idx: int) -> str:
        return fields[idx] if 0 <= idx < len(fields) else ''

    def build_from_lines(self, lines: List[str]) -> Tuple[Dict[str, NamedFix], NamedFixBuildReport]:
        """
        Normalize the lines of a NASR fix extract (header first).

        Raises:
            InvalidInputError: If there are no data rows or the identifier,
                               latitude or longitude column cannot be found
        """
        if len(lines) < 2:
            raise InvalidInputError('CSV file appears empty or has no data rows', self.fixes_file)

        header = parse_line(lines[0])
        columns = discover_columns(header)
        report = NamedFixBuildReport(columns=columns)
        logger.info(f"Header columns found: ID={columns['identifier']}, Lat={columns['latitude']}, "
                    f"Lon={columns['longitude']}, Use={columns['use']}")

        missing = missing_columns(columns)
        if missing:
            raise InvalidInputError(
                f"Required columns not found in CSV header: {', '.join(missing)}",
                self.fixes_file,
                f"Header: {', '.join(header)}",
            )

        database: Dict[str, NamedFix] = {}
        for line in lines[1:]:
            line = line.strip()
            if not line:
                continue

            fields = parse_line(line)
            identifier = self._field(fields, columns['identifier']).strip().upper()
            if not identifier or not MIN_IDENT_LENGTH <= len(identifier) <= MAX_IDENT_LENGTH:
                report.skip('invalid_identifier')
                continue

            latitude = parse_latitude(self._field(fields, columns['latitude']))
            longitude = parse_longitude(self._field(fields, columns['longitude']))
            if latitude is None or longitude is None:
                report.skip('invalid_coordinates')
                continue

            if not in_conus(latitude, longitude):
                report.skip('out_of_bounds')
                continue

            report.parsed += 1
            database[identifier] = NamedFix(
                identifier=identifier,
                latitude_deg=round(latitude, COORDINATE_DECIMALS),
                longitude_deg=round(longitude, COORDINATE_DECIMALS),
            )

        report.entries = len(database)
        return database, report

    def build(self) -> Tuple[Dict[str, NamedFix], NamedFixBuildReport]:
        fixes_file = self.require_file(self.fixes_file, 'NASR fix extract')
        logger.info(f"Reading: {fixes_file}")
        return self.build_from_lines(split_lines(self.read_text(fixes_file)))
