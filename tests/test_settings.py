"""
Tests for settings loading and small helpers
"""
import os
import pytest
import yaml

import settings as settings_module
from settings import get_database_uri, load_settings, verify_settings
from utils import file_name_from_path, is_hex_color, unique_ids


@pytest.fixture(autouse=True)
def reset_settings_cache():
    yield
    settings_module._cached_settings = None


class TestLoadSettings:
    def test_defaults_written_when_missing(self, tmp_path):
        config_file = tmp_path / 'conf' / 'settings.yaml'
        settings = load_settings(force=True, config_file=str(config_file))
        assert config_file.exists()
        assert settings['server']['port'] == 8080
        assert yaml.safe_load(config_file.read_text())['cors']['allowed_hosts'] == ['localhost', '127.0.0.1']

    def test_file_values_merge_over_defaults(self, tmp_path):
        config_file = tmp_path / 'settings.yaml'
        config_file.write_text(yaml.dump({'server': {'port': 9000}}))
        settings = load_settings(force=True, config_file=str(config_file))
        assert settings['server'] == {'host': '127.0.0.1', 'port': 9000}
        assert 'database' in settings

    def test_database_uri_is_absolute(self):
        uri = get_database_uri({'database': {'path': 'x.sqlite3'}})
        assert uri == 'sqlite:///' + os.path.abspath('x.sqlite3')


class TestVerifySettings:
    @pytest.mark.parametrize('port', [0, 70000, '8080', None])
    def test_bad_port(self, port):
        success, errors = verify_settings('server', {'port': port})
        assert not success
        assert errors[0]['path'] == 'server/port'

    def test_good_values(self):
        assert verify_settings('server', {'port': 8080}) == (True, [])
        assert verify_settings('cors', {'allowed_hosts': ['localhost']}) == (True, [])

    def test_bad_hosts(self):
        success, _ = verify_settings('cors', {'allowed_hosts': 'localhost'})
        assert not success


class TestUtils:
    @pytest.mark.parametrize('color, expected', [
        ('#A1b2C3', True),
        ('#000000', True),
        ('A1B2C3', False),
        ('#A1B2C', False),
        ('#A1B2C3\n', False),
        (123456, False),
    ])
    def test_is_hex_color(self, color, expected):
        assert is_hex_color(color) is expected

    @pytest.mark.parametrize('path, expected', [
        ('/music/take5.mp3', 'take5'),
        ('/music/archive.tar.gz', 'archive.tar'),
        ('/home/user/.bashrc', ''),
        ('/usr/bin/make', 'make'),
    ])
    def test_file_name_from_path(self, path, expected):
        assert file_name_from_path(path) == expected

    def test_unique_ids_keeps_order(self):
        assert unique_ids([3, 1, 3, 2, 1]) == [3, 1, 2]
        assert unique_ids(None) == []
