"""
FAA aeronautical reference-database builder.

This package turns raw government and OurAirports extracts into the
normalized lookup databases used at runtime:

- OurAirportsSource: airports with runways and identifier aliases
- NavaidSource: radio navaids
- CIFPAirwaySource: Victor airways resolved from the CIFP (ARINC 424)
- NASRFixSource: named VFR fixes from the NASR subscription
- AirportDatabase: lookup by primary or alternate identifier
"""

__version__ = '0.1.0'
__all__ = [
    'OurAirportsSource',
    'NavaidSource',
    'CIFPAirwaySource',
    'NASRFixSource',
    'AirportDatabase',
]

from .sources import OurAirportsSource, NavaidSource, CIFPAirwaySource, NASRFixSource
from .models import AirportDatabase
