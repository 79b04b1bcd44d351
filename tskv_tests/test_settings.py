from pathlib import Path

import pytest
from pydantic import ValidationError

from tskv.conf import DEFAULT_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH, get_settings
from tskv.conf.settings import StorageBackend, TskvSettings
from tskv.log import LoggingOutput
from tskv.storage import MemoryKVStorage, create_storage

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


def test_valid_settings_from_yaml() -> None:
    expected = TskvSettings(
        STORAGE_BACKEND=StorageBackend.ROCKSDB,
        ROCKSDB_PATH='/var/lib/tskv',
        ROCKSDB_CACHE_CAPACITY=1048576,
        ROCKSDB_COLUMN_FAMILY='metrics',
        LOG_OUTPUT=LoggingOutput.JSON,
        LOG_DEBUG=True,
    )
    assert TskvSettings.from_yaml(filepath=str(FIXTURES_DIR / 'valid_settings.yml')) == expected


def test_extended_settings_from_yaml() -> None:
    settings = TskvSettings.from_yaml(filepath=str(FIXTURES_DIR / 'extended_settings.yml'))
    assert settings.ROCKSDB_PATH == '/var/lib/tskv'
    assert settings.ROCKSDB_COLUMN_FAMILY == 'metrics-v2'
    assert settings.LOG_DEBUG is False


@pytest.mark.parametrize(['filename', 'error'], [
    ('invalid_cache_settings.yml', 'ROCKSDB_CACHE_CAPACITY must be positive, got 0'),
    ('unknown_key_settings.yml', 'Extra inputs are not permitted'),
])
def test_invalid_settings_from_yaml(filename: str, error: str) -> None:
    with pytest.raises(ValidationError) as exc_info:
        TskvSettings.from_yaml(filepath=str(FIXTURES_DIR / filename))
    assert error in str(exc_info.value)


def test_missing_yaml_file() -> None:
    with pytest.raises(ValueError):
        TskvSettings.from_yaml(filepath=str(FIXTURES_DIR / 'missing.yml'))


def test_settings_are_frozen() -> None:
    settings = TskvSettings()
    with pytest.raises(ValidationError):
        settings.LOG_DEBUG = True  # type: ignore[misc]


def test_packaged_settings() -> None:
    default = TskvSettings.from_yaml(filepath=DEFAULT_SETTINGS_FILEPATH)
    assert default.STORAGE_BACKEND is StorageBackend.ROCKSDB
    unittests = TskvSettings.from_yaml(filepath=UNITTESTS_SETTINGS_FILEPATH)
    assert unittests.STORAGE_BACKEND is StorageBackend.MEMORY
    assert unittests.ROCKSDB_COLUMN_FAMILY == default.ROCKSDB_COLUMN_FAMILY
    assert unittests.LOG_OUTPUT is LoggingOutput.NULL


def test_global_settings_singleton(monkeypatch: pytest.MonkeyPatch) -> None:
    get_settings._reset_settings_singleton()
    try:
        monkeypatch.setenv('TSKV_CONFIG_YAML', UNITTESTS_SETTINGS_FILEPATH)
        settings = get_settings.get_global_settings()
        assert settings is get_settings.get_global_settings()
        assert get_settings.get_settings_source() == UNITTESTS_SETTINGS_FILEPATH

        monkeypatch.setenv('TSKV_CONFIG_YAML', str(FIXTURES_DIR / 'valid_settings.yml'))
        with pytest.raises(Exception, match='loading config twice with a different file'):
            get_settings.get_global_settings()
    finally:
        get_settings._reset_settings_singleton()


def test_create_storage_from_global_settings() -> None:
    # conftest points TSKV_CONFIG_YAML at the unittests settings, which use the memory backend
    get_settings._reset_settings_singleton()
    try:
        assert isinstance(create_storage(), MemoryKVStorage)
    finally:
        get_settings._reset_settings_singleton()


def test_create_memory_storage() -> None:
    assert isinstance(create_storage(TskvSettings(STORAGE_BACKEND=StorageBackend.MEMORY)), MemoryKVStorage)


def test_recursive_extends() -> None:
    with pytest.raises(ValueError, match='recursive extensions'):
        TskvSettings.from_yaml(filepath=str(FIXTURES_DIR / 'recursive_settings.yml'))


def test_extends_absolute_path(tmp_path: Path) -> None:
    filepath = tmp_path / 'settings.yml'
    filepath.write_text(f'extends: {FIXTURES_DIR / "valid_settings.yml"}\n\nROCKSDB_PATH: /srv/tskv\n')
    settings = TskvSettings.from_yaml(filepath=str(filepath))
    assert settings.ROCKSDB_PATH == '/srv/tskv'
    assert settings.ROCKSDB_COLUMN_FAMILY == 'metrics'
