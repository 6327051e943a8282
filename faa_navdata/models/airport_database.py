import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .airport import Airport
from .alias_map import AliasMap

logger = logging.getLogger(__name__)


class AirportDatabase:
    """
    Read-only airport lookup by primary or alternate identifier.

    Consumers of the airport database use this to resolve any known
    identifier (ICAO, IATA, GPS code, local code) to its airport.
    """

    def __init__(self, airports: Dict[str, Airport], alias_map: Optional[AliasMap] = None):
        self._airports = airports
        self.alias_map = alias_map if alias_map is not None else AliasMap.from_airports(airports)

    @classmethod
    def load(cls, database_file: Union[str, Path], alias_file: Optional[Union[str, Path]] = None) -> 'AirportDatabase':
        """
        Load a serialized airport database, and optionally its alias map.

        Without an alias file the map is rebuilt from the airports.
        """
        from ..storage import JSONStorage

        storage = JSONStorage()
        airports = storage.load_keyed(database_file, Airport)
        alias_map = None
        if alias_file is not None:
            alias_map = AliasMap.from_dict(storage.load_raw(alias_file))
        logger.info(f"Loaded {len(airports)} airports from {database_file}")
        return cls(airports, alias_map)

    def resolve(self, identifier: str) -> Optional[str]:
        """Resolve any identifier to the primary identifier."""
        return self.alias_map.resolve(identifier)

    def get(self, identifier: str) -> Optional[Airport]:
        """Get an airport by primary or alternate identifier."""
        primary = self.resolve(identifier)
        if primary is None:
            return None
        return self._airports.get(primary)

    @staticmethod
    def format_with_aliases(airport: Airport) -> str:
        """Format an airport identifier with its aliases for display."""
        if not airport.aliases:
            return airport.ident
        return f"{airport.ident} (also: {', '.join(airport.aliases)})"

    def __contains__(self, identifier: str) -> bool:
        return self.resolve(identifier) is not None

    def __len__(self) -> int:
        return len(self._airports)
