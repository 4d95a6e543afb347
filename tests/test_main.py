import json
import logging

import pytest

from ipinsight import __version__
from ipinsight.main import EXIT_INVALID_INPUT, create_parser, run


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parser_modes_are_exclusive() -> None:
    parser = create_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(['--ip', '8.8.8.8', '--serve'])


def test_version(capsys) -> None:
    with pytest.raises(SystemExit):
        run(['--version'])
    assert __version__ in capsys.readouterr().out


def test_invalid_address_exit_code(capsys) -> None:
    assert run(['--ip', '256.1.1.1', '--log-level', 'WARNING']) == EXIT_INVALID_INPUT
    assert 'Invalid IP address format' in capsys.readouterr().err


def test_private_address_json(capsys) -> None:
    assert run(['--ip', '10.0.0.1', '--json', '--log-level', 'ERROR']) == 0

    out = capsys.readouterr().out
    profile = json.loads(out[out.index('{'):])
    assert profile['ip'] == '10.0.0.1'
    assert profile['country_code'] == 'CN'
    assert profile['city'] == 'Beijing'


def test_private_address_summary(capsys) -> None:
    assert run(['--ip', '192.168.1.5', '--log-level', 'ERROR']) == 0

    out = capsys.readouterr().out
    assert '192.168.1.5' in out
    assert 'Placeholder data' in out


def test_configuration_error_exit_code(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv('IPINSIGHT_CONFIG', str(tmp_path / 'absent.yaml'))
    assert run(['--ip', '8.8.8.8']) == 1
    assert 'Configuration error' in capsys.readouterr().err


def test_status_without_telemetry(capsys) -> None:
    assert run(['--status', '--log-level', 'ERROR']) == 0

    out = capsys.readouterr().out
    assert 'ipgeolocation' in out
    assert 'SKIPPED' in out
    assert 'DISABLED' in out
