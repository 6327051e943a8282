"""
Tests for the OurAirports airport and runway normalizer.
"""

import pytest

from faa_navdata.exceptions import MissingInputError
from faa_navdata.models.alias_map import AliasConflict
from faa_navdata.sources.ourairports import OurAirportsSource


@pytest.fixture
def built(csv_dir):
    source = OurAirportsSource(csv_dir / 'airports_test.csv', csv_dir / 'runways_test.csv')
    return source.build()


def _airport_row(ident, type_='small_airport', country='US', **extra):
    row = {'ident': ident, 'type': type_, 'name': ident, 'iso_country': country}
    row.update(extra)
    return row


class TestOurAirportsSource:
    """Test cases for the OurAirports normalizer."""

    def test_inclusion_rule(self, built):
        airports, report = built

        assert list(airports) == ['KAAA', 'KJFK', '00A', 'KXYZ', 'KLMN', 'KDDD', 'KEEE']
        # Medium airport without runways, foreign airport, 8 character ident
        assert 'KBBB' not in airports
        assert 'EGLL' not in airports
        assert 'KTOOLONG' not in airports
        assert report.airports_read == 10
        assert report.runway_rows_read == 5
        assert report.airports_emitted == 7

    def test_small_airport_without_runways(self, built):
        airports, _ = built
        kaaa = airports['KAAA']

        assert kaaa.runways == []
        assert kaaa.aliases == ['AAA1']
        assert kaaa.latitude_deg == 0
        assert kaaa.longitude_deg == 0

    def test_quoted_comma_in_name(self, built):
        airports, _ = built
        assert airports['KXYZ'].name == 'Xray, Yankee Field'
        assert airports['KXYZ'].latitude_deg == 36.5

    def test_runways(self, built):
        airports, _ = built
        runways = airports['KJFK'].runways

        assert [r.runway_id for r in runways] == ['04L/22R', '13R/31L']
        assert runways[0].le_heading_degT == 40
        assert runways[0].he_heading_degT == 220
        assert runways[0].lighted is True
        assert runways[1].le_heading_degT == 121.9
        assert runways[1].he_heading_degT == 301.9
        assert runways[1].lighted is False

    def test_non_numeric_headings_fall_back(self, built):
        airports, _ = built
        runway = airports['KXYZ'].runways[0]

        assert runway.le_heading_degT == 90
        assert runway.he_heading_degT == 270

    def test_aliases(self, built):
        airports, _ = built

        assert airports['KJFK'].aliases == ['JFK']
        assert airports['00A'].aliases == ['K00A']
        assert airports['KXYZ'].aliases == ['ABC']
        assert airports['KEEE'].aliases == []

    def test_report_counts(self, built):
        _, report = built

        assert report.airports_without_runways == 4
        assert report.airports_with_aliases == 6
        assert report.alias_count == 6

    def test_conflicts(self, built):
        _, report = built

        assert report.conflicts == [
            AliasConflict('ABC', 'KXYZ', 'KLMN'),
            AliasConflict('00A', '00A', 'KDDD'),
        ]
        assert report.conflict_count == 2
        assert report.alias_map.resolve('ABC') == 'KXYZ'
        assert report.alias_map.resolve('00A') == '00A'
        assert report.alias_map.resolve('JFK') == 'KJFK'

    def test_summary_lines(self, built):
        _, report = built
        lines = report.summary_lines()

        assert 'Airport database created with 7 airports' in lines
        assert 'WARNING: 2 identifier conflicts detected' in lines

    def test_runways_default_to_sibling_file(self, csv_dir):
        source = OurAirportsSource(csv_dir / 'airports_test.csv')
        assert source.runways_file == csv_dir / 'runways.csv'

    def test_missing_inputs(self, csv_dir, tmp_path):
        with pytest.raises(MissingInputError):
            OurAirportsSource(tmp_path / 'airports.csv', csv_dir / 'runways_test.csv').build()
        with pytest.raises(MissingInputError):
            OurAirportsSource(csv_dir / 'airports_test.csv', tmp_path / 'runways.csv').build()

    def test_build_is_deterministic(self, csv_dir):
        source = OurAirportsSource(csv_dir / 'airports_test.csv', csv_dir / 'runways_test.csv')
        first, _ = source.build()
        second, _ = source.build()

        assert [a.to_dict() for a in first.values()] == [a.to_dict() for a in second.values()]


class TestBuildAirports:

    def test_empty_inputs(self):
        airports, report = OurAirportsSource('airports.csv').build_airports([], [])

        assert airports == {}
        assert report.airports_emitted == 0
        assert report.alias_count == 0

    @pytest.mark.parametrize('type_', ['heliport', 'seaplane_base', 'small_airport'])
    def test_types_kept_without_runways(self, type_):
        airports, _ = OurAirportsSource('airports.csv').build_airports([_airport_row('KAAA', type_)], [])
        assert list(airports) == ['KAAA']

    @pytest.mark.parametrize('type_', ['medium_airport', 'large_airport', 'closed', 'balloonport'])
    def test_types_dropped_without_runways(self, type_):
        airports, _ = OurAirportsSource('airports.csv').build_airports([_airport_row('KAAA', type_)], [])
        assert airports == {}

    def test_runways_make_any_type_eligible(self):
        runway = {'airport_ident': 'KAAA', 'le_ident': '09', 'he_ident': '27'}
        airports, _ = OurAirportsSource('airports.csv').build_airports(
            [_airport_row('KAAA', 'closed')], [runway])
        assert len(airports['KAAA'].runways) == 1

    @pytest.mark.parametrize('ident', ['AB', 'KABCD', ''])
    def test_identifier_length(self, ident):
        airports, _ = OurAirportsSource('airports.csv').build_airports([_airport_row(ident)], [])
        assert airports == {}

    def test_runway_order_is_file_order(self):
        runways = [
            {'airport_ident': 'KAAA', 'le_ident': '18', 'he_ident': '36'},
            {'airport_ident': 'KBBB', 'le_ident': '01', 'he_ident': '19'},
            {'airport_ident': 'KAAA', 'le_ident': '09', 'he_ident': '27'},
        ]
        airports, _ = OurAirportsSource('airports.csv').build_airports([_airport_row('KAAA')], runways)
        assert [r.runway_id for r in airports['KAAA'].runways] == ['18/36', '09/27']
