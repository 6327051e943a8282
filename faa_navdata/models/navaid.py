from dataclasses import dataclass
from typing import Optional

# Higher value wins when two navaids share an identifier
TYPE_PRIORITY = {
    'VORTAC': 5,
    'VOR-DME': 4,
    'VOR': 3,
    'NDB': 2,
    'GPS': 1,
    'FIX': 1,
}


def map_navaid_type(source_type: Optional[str]) -> str:
    """
    Map an OurAirports navaid type to the database type.

    Unknown types are treated as GPS fixes.
    """
    value = (source_type or '').upper()

    if 'VOR-DME' in value or 'VORDME' in value:
        return 'VOR-DME'
    if 'VORTAC' in value:
        return 'VORTAC'
    if 'VOR' in value:
        return 'VOR'
    if 'NDB' in value:
        return 'NDB'
    if 'TACAN' in value:
        return 'VORTAC'
    if 'DME' in value:
        return 'VOR-DME'
    return 'GPS'


@dataclass
class Navaid:
    """A radio navigation aid or fix with its position."""

    identifier: str
    name: str
    type: str
    latitude_deg: float
    longitude_deg: float
    elevation_ft: Optional[int] = None
    frequency_khz: Optional[int] = None
    magnetic_variation: Optional[float] = None
    usage_type: Optional[str] = None
    associated_airport: Optional[str] = None

    @property
    def priority(self) -> int:
        return TYPE_PRIORITY.get(self.type, 0)

    def outranks(self, other: 'Navaid') -> bool:
        """True if this navaid should replace ``other`` under the same identifier."""
        return self.priority > other.priority

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization, omitting unset optional fields."""
        data = {
            'identifier': self.identifier,
            'name': self.name,
            'type': self.type,
            'latitude_deg': self.latitude_deg,
            'longitude_deg': self.longitude_deg,
        }
        for key in ('elevation_ft', 'frequency_khz', 'magnetic_variation', 'usage_type', 'associated_airport'):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Navaid':
        """Create instance from dictionary."""
        known_fields = {f for f in cls.__dataclass_fields__}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}
        filtered_data.setdefault('name', filtered_data.get('identifier'))
        filtered_data.setdefault('type', 'GPS')
        return cls(**filtered_data)
