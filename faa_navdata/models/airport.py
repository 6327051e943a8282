from dataclasses import dataclass, field
from typing import List, Optional

from faa_navdata.models.runway import Runway, parse_number

# OurAirports columns holding alternate identifiers, in alias order
ALIAS_FIELDS = ('icao_code', 'iata_code', 'gps_code', 'local_code')


@dataclass
class Airport:
    """Data class for storing airport information."""

    ident: str  # primary identifier
    name: str = ''
    type: str = ''
    latitude_deg: float = 0
    longitude_deg: float = 0
    elevation_ft: float = 0
    municipality: str = ''

    aliases: List[str] = field(default_factory=list)
    runways: List[Runway] = field(default_factory=list)

    def add_alias(self, candidate: Optional[str]) -> bool:
        """
        Register an alternate identifier.

        Blank values, the primary identifier itself and identifiers already
        registered are ignored. Insertion order is preserved.

        Returns:
            True if the alias was added
        """
        if not candidate or not candidate.strip():
            return False
        if candidate == self.ident or candidate in self.aliases:
            return False
        self.aliases.append(candidate)
        return True

    def add_runway(self, runway: Runway):
        """Add a runway to the airport."""
        self.runways.append(runway)

    @property
    def identifiers(self) -> List[str]:
        """Primary identifier followed by the aliases."""
        return [self.ident] + self.aliases

    @classmethod
    def from_row(cls, row: dict) -> 'Airport':
        """Create an airport, with its aliases, from an OurAirports airports row."""
        airport = cls(
            ident=row.get('ident', ''),
            name=row.get('name', ''),
            type=row.get('type', ''),
            latitude_deg=parse_number(row.get('latitude_deg')) or 0,
            longitude_deg=parse_number(row.get('longitude_deg')) or 0,
            elevation_ft=parse_number(row.get('elevation_ft')) or 0,
            municipality=row.get('municipality') or '',
        )
        for alias_field in ALIAS_FIELDS:
            airport.add_alias(row.get(alias_field))
        return airport

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'icao': self.ident,
            'name': self.name,
            'type': self.type,
            'latitude_deg': self.latitude_deg,
            'longitude_deg': self.longitude_deg,
            'elevation_ft': self.elevation_ft,
            'municipality': self.municipality,
            'aliases': list(self.aliases),
            'runways': [runway.to_dict() for runway in self.runways],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Airport':
        """Create instance from a serialized airport."""
        ident = data['icao']
        return cls(
            ident=ident,
            name=data.get('name', ''),
            type=data.get('type', ''),
            latitude_deg=data.get('latitude_deg', 0),
            longitude_deg=data.get('longitude_deg', 0),
            elevation_ft=data.get('elevation_ft', 0),
            municipality=data.get('municipality', ''),
            aliases=list(data.get('aliases', [])),
            runways=[Runway.from_dict(r, ident) for r in data.get('runways', [])],
        )

    def __repr__(self):
        return f"Airport(ident='{self.ident}', name='{self.name}', aliases={self.aliases})"
