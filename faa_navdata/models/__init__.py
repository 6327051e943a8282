"""
Data models for the faa_navdata library.

This package contains the data models for airports, runways, navaids,
airways and named fixes, the identifier alias map, and the build reports
returned by the normalizers.
"""

from .runway import Runway
from .airport import Airport
from .navaid import Navaid
from .airway import Airway, AirwaySegment
from .named_fix import NamedFix
from .alias_map import AliasMap, AliasConflict
from .airport_database import AirportDatabase
from .report import (
    BuildReport,
    AirportBuildReport,
    NavaidBuildReport,
    AirwayBuildReport,
    NamedFixBuildReport,
)

__all__ = [
    # Core models
    'Runway',
    'Airport',
    'Navaid',
    'Airway',
    'AirwaySegment',
    'NamedFix',
    # Identifier lookup
    'AliasMap',
    'AliasConflict',
    'AirportDatabase',
    # Reports
    'BuildReport',
    'AirportBuildReport',
    'NavaidBuildReport',
    'AirwayBuildReport',
    'NamedFixBuildReport',
]
