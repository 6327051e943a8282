import math
import re
from dataclasses import dataclass
from typing import Optional

_RUNWAY_NUMBER = re.compile(r'^[0-9]+')
# Plain decimal notation; float() alone would also take '1_0', 'nan' or 'inf'
_NUMBER = re.compile(r'[-+]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][-+]?[0-9]+)?')


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a finite float, returning None for blank or unparseable values."""
    if value is None:
        return None
    s = str(value).strip()
    if not _NUMBER.fullmatch(s):
        return None
    number = float(s)
    if not math.isfinite(number):
        return None
    return number


def heading_from_ident(ident: Optional[str]) -> int:
    """
    Derive a runway heading from its end identifier.

    The L/C/R position suffix is removed and the leading runway number is
    multiplied by ten: '09L' -> 90, '27' -> 270. Identifiers without a
    runway number (helipads, blank) give 0.
    """
    if not ident:
        return 0
    match = _RUNWAY_NUMBER.match(re.sub(r'[LCR]', '', ident.strip()))
    if not match:
        return 0
    return int(match.group(0)) * 10


@dataclass
class Runway:
    """Data class for storing runway information."""

    airport_ident: str
    le_ident: str = ''
    he_ident: str = ''
    le_heading_degT: float = 0
    he_heading_degT: float = 0
    length_ft: float = 0
    width_ft: float = 0
    surface: str = ''
    lighted: bool = False

    @property
    def runway_id(self) -> str:
        return f"{self.le_ident}/{self.he_ident}"

    @classmethod
    def from_row(cls, row: dict) -> 'Runway':
        """
        Create a runway from an OurAirports runways row.

        Both headings are always populated: a blank or non-numeric heading
        falls back to the heading derived from the runway end identifier.
        """
        le_ident = row.get('le_ident', '')
        he_ident = row.get('he_ident', '')

        le_heading = parse_number(row.get('le_heading_degT'))
        he_heading = parse_number(row.get('he_heading_degT'))

        return cls(
            airport_ident=row.get('airport_ident', ''),
            le_ident=le_ident,
            he_ident=he_ident,
            le_heading_degT=le_heading if le_heading is not None else heading_from_ident(le_ident),
            he_heading_degT=he_heading if he_heading is not None else heading_from_ident(he_ident),
            length_ft=parse_number(row.get('length_ft')) or 0,
            width_ft=parse_number(row.get('width_ft')) or 0,
            surface=row.get('surface', ''),
            lighted=row.get('lighted') == '1',
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'runway_id': self.runway_id,
            'le_ident': self.le_ident,
            'he_ident': self.he_ident,
            'le_heading_degT': self.le_heading_degT,
            'he_heading_degT': self.he_heading_degT,
            'length_ft': self.length_ft,
            'width_ft': self.width_ft,
            'surface': self.surface,
            'lighted': self.lighted,
        }

    @classmethod
    def from_dict(cls, data: dict, airport_ident: str = '') -> 'Runway':
        """Create instance from a serialized runway."""
        return cls(
            airport_ident=airport_ident,
            le_ident=data.get('le_ident', ''),
            he_ident=data.get('he_ident', ''),
            le_heading_degT=data.get('le_heading_degT', 0),
            he_heading_degT=data.get('he_heading_degT', 0),
            length_ft=data.get('length_ft', 0),
            width_ft=data.get('width_ft', 0),
            surface=data.get('surface', ''),
            lighted=bool(data.get('lighted', False)),
        )

    def __repr__(self):
        return f"Runway(airport_ident='{self.airport_ident}', le_ident='{self.le_ident}', he_ident='{self.he_ident}')"

    def __str__(self):
        """Return a human-readable string representation of the runway."""
        runway_info = f"Runway {self.runway_id}"
        if self.lighted:
            runway_info += " (LIGHTED)"
        if self.length_ft:
            runway_info += f"\nLength: {self.length_ft:.0f}ft"
        if self.width_ft:
            runway_info += f" Width: {self.width_ft:.0f}ft"
        if self.surface:
            runway_info += f"\nSurface: {self.surface}"
        return runway_info
