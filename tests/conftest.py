import pytest
from pathlib import Path

from faa_navdata.models.navaid import Navaid


def arinc_line(section: str, subsection: str, fields: dict, length: int = 132) -> str:
    """Compose a fixed-column record, placing each value at its 0-indexed offset."""
    chars = [' '] * length
    chars[0:4] = 'SUSA'
    chars[4] = section
    chars[5] = subsection
    for start, value in fields.items():
        chars[start:start + len(value)] = value
    return ''.join(chars)[:length]


def airway_line(route: str, sequence: int, fix: str, region: str = 'K7',
                min_alt: str = '', max_alt: str = '', length: int = 132) -> str:
    """Compose an ER (enroute airway) record."""
    return arinc_line('E', 'R', {
        13: route.ljust(5),
        25: f"{sequence:04d}",
        29: fix.ljust(5),
        34: region.ljust(2),
        83: min_alt.rjust(5) if min_alt else '',
        93: max_alt.rjust(5) if max_alt else '',
    }, length=length)


def waypoint_line(ident: str, latitude: str, longitude: str, continuation: str = '0',
                  length: int = 132) -> str:
    """Compose an EA (enroute waypoint) record."""
    return arinc_line('E', 'A', {
        13: ident.ljust(5),
        21: continuation,
        32: latitude,
        41: longitude,
    }, length=length)


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def csv_dir(test_assets_dir) -> Path:
    """Return the directory holding the CSV extracts."""
    return test_assets_dir / 'csv'


@pytest.fixture
def test_cache_dir(tmp_path) -> Path:
    """Return a temporary directory for cache testing."""
    return tmp_path / 'cache'


@pytest.fixture
def navaid_database():
    """A small navaid database as produced by the navaid builder."""
    return {
        'ATL': Navaid('ATL', 'Atlanta', 'VORTAC', 33.629101, -84.435097),
        'MCN': Navaid('MCN', 'Macon', 'VOR-DME', 32.693901, -83.647202),
        'IJX': Navaid('IJX', 'Jacksonville', 'VOR-DME', 30.438, -81.561),
    }


@pytest.fixture
def cifp_lines():
    """
    CIFP lines covering waypoints, Victor and non-Victor airways.

    V1 resolves ATL (navaid), BOSCO (waypoint) and MCN (navaid); MISSN is
    unknown. V2 keeps a single resolved fix and must be dropped.
    """
    return [
        'HDR01FAACIFP18      001P013203374102211  28-JAN-202215:21:53  U.S.A. DOT FAA',
        waypoint_line('BOSCO', 'N32000000', 'W084000000'),
        waypoint_line('BOSCO', 'N99999999', 'W999999999', continuation='2'),
        airway_line('V1', 30, 'MCN', min_alt='03000'),
        airway_line('V1', 10, 'ATL', min_alt='02000', max_alt='17500'),
        airway_line('V1', 20, 'BOSCO'),
        airway_line('V1', 25, 'MISSN', min_alt='02500'),
        airway_line('J60', 10, 'ATL', min_alt='18000'),
        airway_line('J60', 20, 'MCN', min_alt='18000'),
        airway_line('V2', 10, 'IJX'),
        airway_line('V2', 20, 'NOWHR'),
        airway_line('V3', 10, 'ATL')[:100],
        '',
    ]


@pytest.fixture
def make_airway_line():
    return airway_line


@pytest.fixture
def make_waypoint_line():
    return waypoint_line
