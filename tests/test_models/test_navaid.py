import pytest

from faa_navdata.models.navaid import Navaid, map_navaid_type


class TestNavaidTypes:

    @pytest.mark.parametrize('source_type,expected', [
        ('VORTAC', 'VORTAC'),
        ('VOR-DME', 'VOR-DME'),
        ('VOR', 'VOR'),
        ('NDB', 'NDB'),
        ('NDB-DME', 'NDB'),
        ('TACAN', 'VORTAC'),
        ('DME', 'VOR-DME'),
        ('', 'GPS'),
        (None, 'GPS'),
        ('unknown', 'GPS'),
    ])
    def test_mapping(self, source_type, expected):
        assert map_navaid_type(source_type) == expected

    def test_priority_order(self):
        def navaid(type_):
            return Navaid('ABC', 'Test', type_, 30.0, -80.0)

        assert navaid('VORTAC').outranks(navaid('VOR-DME'))
        assert navaid('VOR-DME').outranks(navaid('VOR'))
        assert navaid('VOR').outranks(navaid('NDB'))
        assert navaid('NDB').outranks(navaid('GPS'))
        assert not navaid('VOR').outranks(navaid('VOR'))
        assert not navaid('NDB').outranks(navaid('VORTAC'))


class TestNavaidSerialization:

    def test_optional_fields_are_omitted(self):
        data = Navaid('MCN', 'Macon', 'VOR-DME', 32.69, -83.65).to_dict()

        assert data == {
            'identifier': 'MCN',
            'name': 'Macon',
            'type': 'VOR-DME',
            'latitude_deg': 32.69,
            'longitude_deg': -83.65,
        }

    def test_round_trip_with_optional_fields(self):
        navaid = Navaid('ATL', 'Atlanta', 'VORTAC', 33.63, -84.44, elevation_ft=1000,
                        frequency_khz=116900, magnetic_variation=-4.1, usage_type='BOTH',
                        associated_airport='KATL')

        assert Navaid.from_dict(navaid.to_dict()) == navaid

    def test_from_dict_defaults(self):
        navaid = Navaid.from_dict({'identifier': 'XYZ', 'latitude_deg': 1.0, 'longitude_deg': 2.0, 'extra': 1})

        assert navaid.name == 'XYZ'
        assert navaid.type == 'GPS'
