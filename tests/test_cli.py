"""
End-to-end tests for the builder entry points.
"""

import json

import pytest

from faa_navdata.cli import build_airports_main, build_airways_main, build_fixes_main, build_navaids_main


@pytest.mark.parametrize('main', [build_airports_main, build_navaids_main, build_airways_main, build_fixes_main])
def test_no_arguments_prints_usage(main, capsys):
    assert main([]) == 0
    assert 'usage' in capsys.readouterr().out.lower()


@pytest.mark.parametrize('main', [build_airports_main, build_navaids_main, build_airways_main, build_fixes_main])
def test_missing_input_fails(main, tmp_path):
    output = tmp_path / 'out.json'

    assert main([str(tmp_path / 'missing.csv'), '-o', str(output)]) == 1
    assert not output.exists()


def test_build_airports(csv_dir, tmp_path):
    output = tmp_path / 'airport-database.json'
    aliases = tmp_path / 'airport-aliases.json'

    status = build_airports_main([
        str(csv_dir / 'airports_test.csv'),
        '--runways', str(csv_dir / 'runways_test.csv'),
        '-o', str(output),
        '--aliases', str(aliases),
    ])
    assert status == 0

    data = json.loads(output.read_text(encoding='utf-8'))
    assert list(data) == ['KAAA', 'KJFK', '00A', 'KXYZ', 'KLMN', 'KDDD', 'KEEE']
    assert data['KAAA']['aliases'] == ['AAA1']
    assert data['KAAA']['runways'] == []
    assert data['KEEE']['runways'][0]['le_heading_degT'] == 180

    alias_map = json.loads(aliases.read_text(encoding='utf-8'))
    assert alias_map['ABC'] == 'KXYZ'
    assert alias_map['00A'] == '00A'


@pytest.fixture
def builder_arguments(csv_dir, tmp_path, cifp_lines):
    """Input arguments for each builder, without the output option."""
    cifp_file = tmp_path / 'FAACIFP18'
    cifp_file.write_text('\n'.join(cifp_lines))
    navaids_output = tmp_path / 'navaid-database.json'
    build_navaids_main([str(csv_dir / 'navaids_test.csv'), '-o', str(navaids_output)])

    return {
        'airports': (build_airports_main, [str(csv_dir / 'airports_test.csv'),
                                           '--runways', str(csv_dir / 'runways_test.csv')]),
        'navaids': (build_navaids_main, [str(csv_dir / 'navaids_test.csv')]),
        'airways': (build_airways_main, [str(cifp_file), '--navaids', str(navaids_output)]),
        'fixes': (build_fixes_main, [str(csv_dir / 'fix_base_test.csv')]),
    }


@pytest.mark.parametrize('builder', ['airports', 'navaids', 'airways', 'fixes'])
def test_builds_are_idempotent(builder, builder_arguments, tmp_path):
    main, arguments = builder_arguments[builder]
    outputs = [tmp_path / 'first.json', tmp_path / 'second.json']
    for output in outputs:
        assert main(arguments + ['-o', str(output)]) == 0

    assert outputs[0].read_bytes() == outputs[1].read_bytes()
    assert json.loads(outputs[0].read_text(encoding='utf-8'))


def test_build_navaids_then_airways(csv_dir, tmp_path, cifp_lines):
    navaids_output = tmp_path / 'navaid-database.json'
    assert build_navaids_main([str(csv_dir / 'navaids_test.csv'), '-o', str(navaids_output)]) == 0

    navaids = json.loads(navaids_output.read_text(encoding='utf-8'))
    assert navaids['ATL']['type'] == 'VORTAC'
    assert 'elevation_ft' not in navaids['MCN']

    cifp_file = tmp_path / 'FAACIFP18'
    cifp_file.write_text('\n'.join(cifp_lines))
    airways_output = tmp_path / 'airways-database.json'

    status = build_airways_main([str(cifp_file), '--navaids', str(navaids_output), '-o', str(airways_output)])
    assert status == 0

    airways = json.loads(airways_output.read_text(encoding='utf-8'))
    assert list(airways) == ['V1']
    assert [s['fix_identifier'] for s in airways['V1']['segments']] == ['ATL', 'BOSCO', 'MCN']
    assert airways['V1']['segments'][1]['maximum_altitude'] is None


def test_build_airways_without_navaid_database(tmp_path, cifp_lines):
    cifp_file = tmp_path / 'FAACIFP18'
    cifp_file.write_text('\n'.join(cifp_lines))

    status = build_airways_main([str(cifp_file), '--navaids', str(tmp_path / 'missing.json'),
                                 '-o', str(tmp_path / 'airways.json')])
    assert status == 1


def test_build_fixes(csv_dir, tmp_path):
    output = tmp_path / 'vfr-waypoints-database.json'

    assert build_fixes_main([str(csv_dir / 'fix_base_test.csv'), '-o', str(output)]) == 0

    fixes = json.loads(output.read_text(encoding='utf-8'))
    assert list(fixes) == ['BOSCO', 'MERIT', 'VPSOU', 'ABCDE']
    assert fixes['MERIT']['latitude_deg'] == 40.189849


def test_build_fixes_with_unusable_header(tmp_path):
    fixes_file = tmp_path / 'FIX_BASE.csv'
    fixes_file.write_text('NAME,STATE\nALPHA,FL\n')

    assert build_fixes_main([str(fixes_file), '-o', str(tmp_path / 'fixes.json')]) == 1


def test_build_navaids_with_empty_extract(tmp_path):
    navaids_file = tmp_path / 'navaids.csv'
    navaids_file.write_text('')

    assert build_navaids_main([str(navaids_file), '-o', str(tmp_path / 'navaids.json')]) == 1


def test_build_airways_with_malformed_navaid_database(tmp_path, cifp_lines):
    cifp_file = tmp_path / 'FAACIFP18'
    cifp_file.write_text('\n'.join(cifp_lines))
    navaids_file = tmp_path / 'navaid-database.json'
    navaids_file.write_text('{"ATL": {"identifier": "ATL"}}')

    status = build_airways_main([str(cifp_file), '--navaids', str(navaids_file),
                                 '-o', str(tmp_path / 'airways.json')])
    assert status == 1
