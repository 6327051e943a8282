import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import pandas as pd
import requests

from .base import SourceInterface
from .cached import CachedSource
from ..exceptions import InvalidInputError
from ..models.navaid import Navaid, map_navaid_type
from ..models.report import NavaidBuildReport
from ..models.runway import parse_number

logger = logging.getLogger(__name__)

NAVAIDS_URL = 'https://davidmegginson.github.io/ourairports-data/navaids.csv'


class OurAirportsNavaidDownloader(CachedSource):
    """Downloads the OurAirports navaids extract into the cache directory."""

    def __init__(self, cache_dir: str, url: str = NAVAIDS_URL, timeout: int = 120):
        super().__init__(cache_dir)
        self.url = url
        self.timeout = timeout

    def fetch_navaids(self) -> str:
        """
        Fetch the navaids CSV from OurAirports.

        Returns:
            Raw CSV text
        """
        logger.info(f"Downloading {self.url}")
        response = requests.get(self.url, timeout=self.timeout)
        response.raise_for_status()
        return response.content.decode('utf-8', errors='ignore')

    def get_navaids_file(self, max_age_days: int = 28) -> Path:
        """Return the cached navaids CSV, downloading it if missing or stale."""
        return self.get_cached_file('navaids', 'csv', 'all', max_age_days=max_age_days)


class NavaidSource(SourceInterface):
    """
    Navaid normalizer for the OurAirports navaids extract.

    Keeps navaids of one country with an identifier and valid coordinates.
    When two navaids share an identifier the higher-ranked type wins
    (VORTAC > VOR-DME > VOR > NDB > GPS); on a tie the first one is kept.
    """

    def __init__(self, navaids_file: Union[str, Path], country: str = 'US'):
        """
        Initialize the navaid source.

        Args:
            navaids_file: Path to the OurAirports navaids.csv extract
            country: ISO country code of the navaids to keep
        """
        self.navaids_file = Path(navaids_file)
        self.country = country

    def read_navaids(self, path: Path) -> pd.DataFrame:
        """
        Read the extract with every column as a string and no NA conversion.

        Raises:
            InvalidInputError: If the file is empty or not a readable CSV
        """
        try:
            return pd.read_csv(path, dtype=str, keep_default_na=False, encoding='utf-8-sig')
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
            raise InvalidInputError('Navaids extract is not a readable CSV file', path, str(e))

    def _navaid_from_row(self, row: Dict[str, Any]) -> Optional[Navaid]:
        identifier = str(row.get('ident', '')).strip().upper()
        latitude = parse_number(row.get('latitude_deg'))
        longitude = parse_number(row.get('longitude_deg'))

        if latitude is None or longitude is None:
            return None
        if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
            return None

        navaid = Navaid(
            identifier=identifier,
            name=str(row.get('name', '')).strip() or identifier,
            type=map_navaid_type(row.get('type')),
            latitude_deg=latitude,
            longitude_deg=longitude,
        )

        elevation = parse_number(row.get('elevation_ft'))
        if elevation is not None and elevation > 0:
            navaid.elevation_ft = int(round(elevation))

        frequency = parse_number(row.get('frequency_khz'))
        if frequency is not None and frequency > 0:
            navaid.frequency_khz = int(round(frequency))

        magnetic_variation = parse_number(row.get('magnetic_variation_deg'))
        if magnetic_variation is not None:
            navaid.magnetic_variation = round(magnetic_variation, 1)

        # OurAirports publishes the column as usageType
        usage_type = str(row.get('usage_type', '') or row.get('usageType', '')).strip()
        if usage_type:
            navaid.usage_type = usage_type.upper()

        associated_airport = str(row.get('associated_airport', '')).strip()
        if associated_airport:
            navaid.associated_airport = associated_airport.upper()

        return navaid

    def build_navaids(self, df: pd.DataFrame) -> Tuple[Dict[str, Navaid], NavaidBuildReport]:
        """
        Normalize a navaids DataFrame.

        Returns:
            Tuple of (navaids keyed by identifier, report)
        """
        report = NavaidBuildReport(rows_read=len(df))
        database: Dict[str, Navaid] = {}

        if 'iso_country' not in df.columns:
            report.add_warning("No iso_country column in navaids extract")
            return database, report

        country_rows = df[df['iso_country'] == self.country]
        logger.info(f"Processing {len(country_rows)} {self.country} navaids...")

        for _, row in country_rows.iterrows():
            has_ident = bool(str(row.get('ident', '')).strip())
            has_coords = bool(row.get('latitude_deg')) and bool(row.get('longitude_deg'))
            if not has_ident or not has_coords:
                report.skipped += 1
                continue

            navaid = self._navaid_from_row(row)
            if navaid is None:
                report.skipped += 1
                continue

            existing = database.get(navaid.identifier)
            if existing is None:
                database[navaid.identifier] = navaid
            elif navaid.outranks(existing):
                logger.warning(f"Replacing {navaid.identifier} ({existing.type} -> {navaid.type})")
                database[navaid.identifier] = navaid
                report.replaced += 1
            else:
                logger.debug(f"Keeping {navaid.identifier} ({existing.type}, skipping {navaid.type})")
                report.kept_existing += 1

        report.navaids_emitted = len(database)
        if database:
            types = pd.Series([n.type for n in database.values()])
            report.type_distribution = {str(k): int(v) for k, v in types.value_counts().items()}
        return database, report

    def build(self) -> Tuple[Dict[str, Navaid], NavaidBuildReport]:
        navaids_file = self.require_file(self.navaids_file, 'navaids extract')
        logger.info(f"Parsing navaids CSV {navaids_file}...")
        return self.build_navaids(self.read_navaids(navaids_file))
