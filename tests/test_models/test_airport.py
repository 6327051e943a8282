from faa_navdata.models.airport import Airport
from faa_navdata.models.runway import Runway


def _row(**overrides):
    row = {
        'ident': 'KAAA',
        'type': 'small_airport',
        'name': 'Alpha Field',
        'latitude_deg': '',
        'longitude_deg': '',
        'elevation_ft': '',
        'iso_country': 'US',
        'municipality': 'Alphaville',
        'icao_code': '',
        'iata_code': '',
        'gps_code': '',
        'local_code': '',
    }
    row.update(overrides)
    return row


class TestAirport:
    """Test cases for the Airport model."""

    def test_blank_numbers_default_to_zero(self):
        airport = Airport.from_row(_row(gps_code='AAA1'))

        assert airport.ident == 'KAAA'
        assert airport.latitude_deg == 0
        assert airport.longitude_deg == 0
        assert airport.elevation_ft == 0
        assert airport.aliases == ['AAA1']
        assert airport.runways == []

    def test_alias_order_and_deduplication(self):
        airport = Airport.from_row(_row(
            ident='KJFK',
            icao_code='KJFK',
            iata_code='JFK',
            gps_code='KJFK',
            local_code='JFK',
        ))

        assert airport.aliases == ['JFK']
        assert airport.identifiers == ['KJFK', 'JFK']

    def test_all_alias_fields(self):
        airport = Airport.from_row(_row(ident='00A', icao_code='K00A', iata_code='AAX', gps_code='00AG',
                                        local_code='00AL'))
        assert airport.aliases == ['K00A', 'AAX', '00AG', '00AL']

    def test_add_alias_rejects_blank_and_primary(self):
        airport = Airport('KAAA')

        assert not airport.add_alias('')
        assert not airport.add_alias('   ')
        assert not airport.add_alias(None)
        assert not airport.add_alias('KAAA')
        assert airport.add_alias('AAA')
        assert not airport.add_alias('AAA')
        assert airport.aliases == ['AAA']

    def test_to_dict(self):
        airport = Airport.from_row(_row(latitude_deg='40.5', longitude_deg='-73.25', elevation_ft='13',
                                        gps_code='AAA1'))
        airport.add_runway(Runway('KAAA', '09', '27', 90, 270))
        data = airport.to_dict()

        assert data['icao'] == 'KAAA'
        assert data['name'] == 'Alpha Field'
        assert data['latitude_deg'] == 40.5
        assert data['longitude_deg'] == -73.25
        assert data['elevation_ft'] == 13
        assert data['aliases'] == ['AAA1']
        assert [r['runway_id'] for r in data['runways']] == ['09/27']

    def test_from_dict(self):
        airport = Airport.from_row(_row(gps_code='AAA1'))
        airport.add_runway(Runway('KAAA', '18', '36', 180, 360, 2500))

        restored = Airport.from_dict(airport.to_dict())
        assert restored == airport
