# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import Optional

from tskv.conf.settings import StorageBackend, TskvSettings
from tskv.storage.kv_storage import KVStorage, incr_key
from tskv.storage.memory_storage import MemoryKVStorage
from tskv.storage.rocksdb_storage import RocksDBKVStorage, RocksDBStorage


def create_storage(settings: Optional[TskvSettings] = None) -> KVStorage:
    """Build the KVStorage selected by the settings, the global settings are used when none are given."""
    if settings is None:
        from tskv.conf.get_settings import get_global_settings
        settings = get_global_settings()

    match settings.STORAGE_BACKEND:
        case StorageBackend.MEMORY:
            return MemoryKVStorage()
        case StorageBackend.ROCKSDB:
            if settings.ROCKSDB_PATH is None:
                rocksdb_storage = RocksDBStorage.create_temp(cache_capacity=settings.ROCKSDB_CACHE_CAPACITY)
            else:
                rocksdb_storage = RocksDBStorage(
                    path=settings.ROCKSDB_PATH,
                    cache_capacity=settings.ROCKSDB_CACHE_CAPACITY,
                )
            return RocksDBKVStorage(rocksdb_storage, cf_name=settings.ROCKSDB_COLUMN_FAMILY.encode('ascii'))
        case _:
            raise NotImplementedError(settings.STORAGE_BACKEND)


__all__ = [
    'KVStorage',
    'MemoryKVStorage',
    'RocksDBKVStorage',
    'RocksDBStorage',
    'create_storage',
    'incr_key',
]
