import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from .base import SourceInterface
from ..models.airport import Airport
from ..models.alias_map import AliasMap
from ..models.report import AirportBuildReport
from ..models.runway import Runway
from ..parsers.delimited import parse_table

logger = logging.getLogger(__name__)

INCLUDED_COUNTRY = 'US'
# Airports of these types are kept even without runway rows
TYPES_WITHOUT_RUNWAYS = ('heliport', 'seaplane_base', 'small_airport')
MIN_IDENT_LENGTH = 3
MAX_IDENT_LENGTH = 4


class OurAirportsSource(SourceInterface):
    """
    Airport and runway normalizer for the OurAirports extracts.

    Reads ``airports.csv`` and ``runways.csv``, keeps US airports with a 3-4
    character identifier that either have runways or are heliports,
    seaplane bases or small airports, and builds the alias map over their
    alternate identifiers.
    """

    def __init__(self, airports_file: Union[str, Path], runways_file: Optional[Union[str, Path]] = None):
        """
        Initialize the source.

        Args:
            airports_file: Path to the airports extract
            runways_file: Path to the runways extract (defaults to runways.csv
                          in the same directory as the airports extract)
        """
        self.airports_file = Path(airports_file)
        if runways_file is None:
            runways_file = self.airports_file.parent / 'runways.csv'
        self.runways_file = Path(runways_file)

    @staticmethod
    def is_candidate(row: Dict[str, str]) -> bool:
        """Country and identifier-length part of the inclusion rule."""
        ident = row.get('ident', '')
        return (
            bool(ident)
            and row.get('iso_country') == INCLUDED_COUNTRY
            and MIN_IDENT_LENGTH <= len(ident) <= MAX_IDENT_LENGTH
        )

    @staticmethod
    def group_runways(runway_rows: List[Dict[str, str]]) -> Dict[str, List[Runway]]:
        """Group runway rows by parent airport identifier, keeping file order."""
        by_airport: Dict[str, List[Runway]] = {}
        for row in runway_rows:
            by_airport.setdefault(row.get('airport_ident', ''), []).append(Runway.from_row(row))
        return by_airport

    def build_airports(self, airport_rows: List[Dict[str, str]],
                       runway_rows: List[Dict[str, str]]) -> Tuple[Dict[str, Airport], AirportBuildReport]:
        """
        Normalize parsed airport and runway rows.

        Args:
            airport_rows: Airport rows keyed by column name
            runway_rows: Runway rows keyed by column name

        Returns:
            Tuple of (airports keyed by primary identifier, report)
        """
        report = AirportBuildReport(airports_read=len(airport_rows), runway_rows_read=len(runway_rows))
        runways_by_airport = self.group_runways(runway_rows)

        database: Dict[str, Airport] = {}
        for row in airport_rows:
            if not self.is_candidate(row):
                continue

            ident = row['ident']
            runways = runways_by_airport.get(ident, [])
            if not runways and row.get('type') not in TYPES_WITHOUT_RUNWAYS:
                continue

            if ident in database:
                report.add_warning(f"Duplicate airport identifier {ident} replaced")
                logger.debug(f"Duplicate airport identifier {ident}")

            airport = Airport.from_row(row)
            for runway in runways:
                airport.add_runway(runway)
            database[ident] = airport

        report.airports_emitted = len(database)
        report.airports_without_runways = sum(1 for a in database.values() if not a.runways)
        report.airports_with_aliases = sum(1 for a in database.values() if a.aliases)
        report.alias_map = AliasMap.from_airports(database)

        logger.info(f"Airport database created with {len(database)} airports")
        return database, report

    def build(self) -> Tuple[Dict[str, Airport], AirportBuildReport]:
        airports_file = self.require_file(self.airports_file, 'airports extract')
        runways_file = self.require_file(self.runways_file, 'runways extract')

        airports = parse_table(self.read_text(airports_file))
        runways = parse_table(self.read_text(runways_file))
        logger.info(f"Read {len(airports)} airport rows from {airports_file} and "
                    f"{len(runways)} runway rows from {runways_file}")

        return self.build_airports(list(airports.records()), list(runways.records()))
