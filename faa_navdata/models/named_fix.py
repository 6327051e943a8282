from dataclasses import dataclass


@dataclass
class NamedFix:
    """A named VFR/enroute fix from the NASR extract."""

    identifier: str
    latitude_deg: float
    longitude_deg: float
    type: str = 'FIX'

    @property
    def name(self) -> str:
        # Named fixes carry no separate name
        return self.identifier

    def to_dict(self) -> dict:
        return {
            'identifier': self.identifier,
            'name': self.name,
            'type': self.type,
            'latitude_deg': self.latitude_deg,
            'longitude_deg': self.longitude_deg,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'NamedFix':
        return cls(
            identifier=data['identifier'],
            latitude_deg=data['latitude_deg'],
            longitude_deg=data['longitude_deg'],
            type=data.get('type', 'FIX'),
        )
