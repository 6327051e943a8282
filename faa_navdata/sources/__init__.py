"""
Data sources for the faa_navdata library.

Each source reads its own raw extract and normalizes it into one keyed
database plus a build report.
"""

from .base import SourceInterface
from .cached import CachedSource
from .ourairports import OurAirportsSource
from .navaids import NavaidSource, OurAirportsNavaidDownloader
from .cifp import CIFPAirwaySource
from .nasr import NASRFixSource

__all__ = [
    'SourceInterface',
    'CachedSource',
    'OurAirportsSource',
    'NavaidSource',
    'OurAirportsNavaidDownloader',
    'CIFPAirwaySource',
    'NASRFixSource',
]
