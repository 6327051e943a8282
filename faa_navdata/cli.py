"""
Command line entry points for the database builders.

Each builder takes one positional path to its raw source. Run without it,
a builder prints its usage and exits successfully; a path that does not
exist is a fatal error.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .exceptions import InvalidInputError, MissingInputError
from .models.navaid import Navaid
from .models.report import BuildReport
from .sources import CIFPAirwaySource, NASRFixSource, NavaidSource, OurAirportsSource
from .sources.navaids import OurAirportsNavaidDownloader
from .storage import JSONStorage

logger = logging.getLogger(__name__)

DEFAULT_OUT_DIR = Path('out')


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def _base_parser(description: str, source_help: str, default_output: str, epilog: str = '') -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('source', help=source_help, nargs='?')
    parser.add_argument('-o', '--output', help='Output JSON file', default=str(DEFAULT_OUT_DIR / default_output))
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')
    return parser


def log_report(report: BuildReport) -> None:
    """Log a build report summary."""
    logger.info('=' * 60)
    logger.info(report.title())
    logger.info('=' * 60)
    for line in report.summary_lines():
        logger.info(line)


def _run(parser: argparse.ArgumentParser, argv: Optional[List[str]], build) -> int:
    args = parser.parse_args(argv)
    if not args.source:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)
    try:
        build(args)
    except (MissingInputError, InvalidInputError) as e:
        logger.error(str(e))
        return 1
    return 0


def build_airports_main(argv: Optional[List[str]] = None) -> int:
    parser = _base_parser(
        'Build the airport database (airports, runways and identifier aliases) from OurAirports extracts',
        'Path to airports.csv',
        'airport-database.json',
        epilog='Example:\n  build-airports data/airports.csv --runways data/runways.csv',
    )
    parser.add_argument('--runways', help='Path to runways.csv (default: runways.csv next to the airports file)')
    parser.add_argument('--aliases', help='Optional output file for the identifier alias map')

    def build(args):
        source = OurAirportsSource(args.source, args.runways)
        airports, report = source.build()
        storage = JSONStorage()
        storage.save_keyed(airports, args.output)
        if args.aliases:
            storage.save_raw(report.alias_map.to_dict(), args.aliases)
        log_report(report)

    return _run(parser, argv, build)


def build_navaids_main(argv: Optional[List[str]] = None) -> int:
    parser = _base_parser(
        'Build the navaid database from the OurAirports navaids extract',
        'Path to navaids.csv',
        'navaid-database.json',
        epilog='Example:\n  build-navaids data/navaids.csv --download',
    )
    parser.add_argument('--country', help='ISO country code of navaids to keep', default='US')
    parser.add_argument('--download', help='Download navaids.csv from OurAirports if the path does not exist',
                        action='store_true')
    parser.add_argument('-c', '--cache-dir', help='Directory to cache downloaded files', default='cache')
    parser.add_argument('--force-refresh', help='Force refresh of cached data', action='store_true')
    parser.add_argument('--never-refresh', help='Never refresh cached data if it exists', action='store_true')

    def build(args):
        navaids_file = Path(args.source)
        if args.download and not navaids_file.exists():
            downloader = OurAirportsNavaidDownloader(args.cache_dir)
            downloader.set_force_refresh(args.force_refresh)
            downloader.set_never_refresh(args.never_refresh)
            navaids_file = downloader.get_navaids_file()
        navaids, report = NavaidSource(navaids_file, country=args.country).build()
        JSONStorage().save_keyed(navaids, args.output)
        log_report(report)

    return _run(parser, argv, build)


def build_airways_main(argv: Optional[List[str]] = None) -> int:
    parser = _base_parser(
        'Build the Victor airways database from FAA CIFP (ARINC 424) data',
        'Path to the CIFP file (e.g. FAACIFP18)',
        'airways-database.json',
        epilog=(
            'Download CIFP from:\n'
            '  https://www.faa.gov/air_traffic/flight_info/aeronav/digital_products/cifp/\n'
            '\n'
            'ARINC 424 ER (Enroute) Record Format:\n'
            '  Col 5-6:    Section/Subsection = "ER" (Enroute Airways)\n'
            '  Col 14-18:  Route ID (e.g., "V4", "V23", "J60")\n'
            '  Col 26-29:  Sequence Number\n'
            '  Col 30-34:  Fix Identifier (navaid or waypoint)\n'
            '  Col 84-88:  Minimum Enroute Altitude (feet)\n'
            '  Col 94-98:  Maximum Altitude\n'
        ),
    )
    parser.add_argument('--navaids', help='Navaid database built by build-navaids',
                        default=str(DEFAULT_OUT_DIR / 'navaid-database.json'))

    def build(args):
        CIFPAirwaySource.require_file(args.source, 'CIFP file')
        storage = JSONStorage()
        navaids = storage.load_keyed(args.navaids, Navaid)
        logger.info(f"Loaded {len(navaids)} navaids from {args.navaids}")
        airways, report = CIFPAirwaySource(args.source, navaids).build()
        storage.save_keyed(airways, args.output)
        log_report(report)

    return _run(parser, argv, build)


def build_fixes_main(argv: Optional[List[str]] = None) -> int:
    parser = _base_parser(
        'Build the VFR waypoints database from the FAA NASR FIX_BASE.csv extract',
        'Path to FIX_BASE.csv',
        'vfr-waypoints-database.json',
        epilog=(
            'Download NASR CSV from:\n'
            '  https://www.faa.gov/air_traffic/flight_info/aeronav/aero_data/NASR_Subscription/\n'
        ),
    )

    def build(args):
        fixes, report = NASRFixSource(args.source).build()
        JSONStorage().save_keyed(fixes, args.output)
        log_report(report)

    return _run(parser, argv, build)
