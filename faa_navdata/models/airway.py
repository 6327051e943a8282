from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class AirwaySegment:
    """One resolved fix along an airway."""

    airway_id: str
    sequence: int
    fix_identifier: str
    latitude_deg: float
    longitude_deg: float
    minimum_altitude: int = 0
    maximum_altitude: Optional[int] = None  # None means no published maximum
    direction: str = 'both'

    def to_dict(self) -> dict:
        return {
            'airway_id': self.airway_id,
            'sequence': self.sequence,
            'fix_identifier': self.fix_identifier,
            'latitude_deg': self.latitude_deg,
            'longitude_deg': self.longitude_deg,
            'minimum_altitude': self.minimum_altitude,
            'maximum_altitude': self.maximum_altitude,
            'direction': self.direction,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AirwaySegment':
        known_fields = {f for f in cls.__dataclass_fields__}
        return cls(**{k: v for k, v in data.items() if k in known_fields})


@dataclass
class Airway:
    """An airway with its ordered, resolved segments."""

    id: str
    type: str
    description: str = ''
    segments: List[AirwaySegment] = field(default_factory=list)

    def add_segment(self, fix_identifier: str, latitude_deg: float, longitude_deg: float,
                    minimum_altitude: int = 0, maximum_altitude: Optional[int] = None,
                    direction: str = 'both') -> AirwaySegment:
        """Append a segment, numbering it after the existing ones (1-based)."""
        segment = AirwaySegment(
            airway_id=self.id,
            sequence=len(self.segments) + 1,
            fix_identifier=fix_identifier,
            latitude_deg=latitude_deg,
            longitude_deg=longitude_deg,
            minimum_altitude=minimum_altitude,
            maximum_altitude=maximum_altitude,
            direction=direction,
        )
        self.segments.append(segment)
        return segment

    @property
    def fix_identifiers(self) -> List[str]:
        return [segment.fix_identifier for segment in self.segments]

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'type': self.type,
            'description': self.description,
            'segments': [segment.to_dict() for segment in self.segments],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Airway':
        return cls(
            id=data['id'],
            type=data.get('type', 'VICTOR'),
            description=data.get('description', ''),
            segments=[AirwaySegment.from_dict(s) for s in data.get('segments', [])],
        )

    def __str__(self):
        return f"{self.id} ({self.type}): {self.description} [{len(self.segments)} segments]"
