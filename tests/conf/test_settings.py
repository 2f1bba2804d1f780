from pathlib import Path

import pytest
from pydantic import ValidationError

from binser import Reader, TooLongError, Writer
from binser.conf import UNITTESTS_SETTINGS_FILEPATH, CodecSettings, get_global_settings
from binser.conf.get_settings import _load_settings_singleton, _reset_settings_singleton

FIXTURES_DIR = Path(__file__).parent.parent / 'utils_modules' / 'fixtures'


@pytest.fixture
def fresh_settings(monkeypatch):
    _reset_settings_singleton()
    yield monkeypatch
    _reset_settings_singleton()


def test_defaults():
    settings = CodecSettings()
    assert settings.DEFAULT_VARINT_BITS == 64
    assert settings.COLLECTION_COUNT_BITS == 64
    assert settings.MAX_COLLECTION_LENGTH is None


@pytest.mark.parametrize('field', ['DEFAULT_VARINT_BITS', 'COLLECTION_COUNT_BITS'])
@pytest.mark.parametrize('bits', [0, 7, 24, 512])
def test_unsupported_bits(field, bits):
    with pytest.raises(ValidationError):
        CodecSettings(**{field: bits})


def test_negative_max_collection_length():
    with pytest.raises(ValidationError):
        CodecSettings(MAX_COLLECTION_LENGTH=-1)


def test_unknown_key():
    with pytest.raises(ValidationError):
        CodecSettings(UNKNOWN=1)


def test_frozen():
    settings = CodecSettings()
    with pytest.raises(ValidationError):
        settings.DEFAULT_VARINT_BITS = 32  # type: ignore[misc]


def test_unittests_settings(fresh_settings):
    fresh_settings.setenv('BINSER_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
    settings = get_global_settings()
    assert settings.MAX_COLLECTION_LENGTH == 1_000_000
    assert settings.DEFAULT_VARINT_BITS == 64
    assert get_global_settings() is settings


def test_loading_another_source_fails(fresh_settings):
    fresh_settings.setenv('BINSER_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
    get_global_settings()
    with pytest.raises(Exception, match='loading config twice with a different file'):
        _load_settings_singleton(str(FIXTURES_DIR / 'default_extends.yml'))


def test_settings_drive_the_codec(fresh_settings):
    fresh_settings.setenv('BINSER_CONFIG_YAML', str(FIXTURES_DIR / 'default_extends.yml'))
    assert get_global_settings().COLLECTION_COUNT_BITS == 32

    writer = Writer()
    writer.write_varint_list([1, 2])
    assert writer.to_hex() == '020102'

    with pytest.raises(TooLongError):
        Reader('ffffffff0f', settings=CodecSettings(MAX_COLLECTION_LENGTH=10)).read_varint_list()
