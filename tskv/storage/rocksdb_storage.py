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

from __future__ import annotations

import os
import tempfile
from typing import TYPE_CHECKING, Iterable, Iterator

from structlog import get_logger
from typing_extensions import assert_never

from tskv.storage.kv_storage import KVStorage

if TYPE_CHECKING:  # pragma: no cover
    import rocksdb

logger = get_logger()
_DB_NAME = 'tskv.db'


class RocksDBStorage:
    """ Opens a RocksDB database with all its existing column families.

    Give clients the option to create column families.
    """
    def __init__(
        self,
        path: str | tempfile.TemporaryDirectory,
        cache_capacity: int | None = None,
    ) -> None:
        import rocksdb

        self.log = logger.new()
        # We have to keep a reference to the TemporaryDirectory because it is cleaned up when garbage collected.
        self.path, self.temp_dir = self._get_path_and_temp_dir(path)

        db_path = os.path.join(self.path, _DB_NAME)
        lru_cache = cache_capacity and rocksdb.LRUCache(cache_capacity)
        table_factory = rocksdb.BlockBasedTableFactory(block_cache=lru_cache)
        options = rocksdb.Options(
            table_factory=table_factory,
            create_if_missing=True,
            compression=rocksdb.CompressionType.no_compression,
        )

        cf_names: list[bytes]
        try:
            # get the list of existing column families
            cf_names = rocksdb.list_column_families(db_path, options)
        except rocksdb.errors.RocksIOError:
            # this means the db doesn't exist, a repair will create one
            rocksdb.repair_db(db_path, options)
            cf_names = []

        # we need to open all column families
        column_families = {cf: rocksdb.ColumnFamilyOptions() for cf in cf_names}

        self._db = rocksdb.DB(db_path, options, column_families=column_families)
        self.log.info('starting rocksdb', path=self.path)
        self.log.debug('open db', cf_list=[cf.name.decode('ascii') for cf in self._db.column_families])

    @staticmethod
    def create_temp(cache_capacity: int | None = None) -> RocksDBStorage:
        """Create a RocksDBStorage instance with a temporary directory."""
        return RocksDBStorage(path=tempfile.TemporaryDirectory(), cache_capacity=cache_capacity)

    @staticmethod
    def _get_path_and_temp_dir(
        path: str | tempfile.TemporaryDirectory,
    ) -> tuple[str, tempfile.TemporaryDirectory | None]:
        match path:
            case str():
                os.makedirs(path, exist_ok=True)
                return path, None
            case tempfile.TemporaryDirectory():
                return path.name, path
            case _:
                assert_never(path)

    def get_db(self) -> rocksdb.DB:
        return self._db

    def get_or_create_column_family(self, cf_name: bytes) -> rocksdb.ColumnFamilyHandle:
        import rocksdb

        cf = self._db.get_column_family(cf_name)
        if cf is None:
            cf = self._db.create_column_family(cf_name, rocksdb.ColumnFamilyOptions())
        return cf

    def close(self) -> None:
        self._db.close()


class RocksDBKVStorage(KVStorage):
    """ KVStorage backed by a single column family of a RocksDB database.

    It works nicely because rocksdb uses a tree sorted by key under the hood.
    """

    def __init__(self, rocksdb_storage: RocksDBStorage, *, cf_name: bytes) -> None:
        self._rocksdb_storage = rocksdb_storage
        self._db = rocksdb_storage.get_db()
        self._cf_name = cf_name
        self.log = logger.new(cf=cf_name.decode('ascii'))
        self._cf = rocksdb_storage.get_or_create_column_family(cf_name)
        self.log.debug('got column family', is_valid=self._cf.is_valid, id=self._cf.id)

    def get(self, key: bytes) -> bytes | None:
        return self._db.get((self._cf, key))

    def put(self, key: bytes, value: bytes) -> None:
        self._db.put((self._cf, key), value)

    def delete(self, key: bytes) -> None:
        self._db.delete((self._cf, key))

    def write_batch(self, puts: Iterable[tuple[bytes, bytes]], deletes: Iterable[bytes] = ()) -> None:
        import rocksdb
        batch = rocksdb.WriteBatch()
        for key, value in puts:
            batch.put((self._cf, key), value)
        for key in deletes:
            batch.delete((self._cf, key))
        self._db.write(batch)

    def iter_from(self, start: bytes, *, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]:
        it = self._db.iteritems(self._cf)
        if reverse:
            it = reversed(it)
            it.seek_for_prev(start)
        else:
            it.seek(start)
        for (_, key), value in it:
            yield key, value

    def iter_last(self) -> Iterator[tuple[bytes, bytes]]:
        it = reversed(self._db.iteritems(self._cf))
        it.seek_to_last()
        for (_, key), value in it:
            yield key, value

    def clear(self) -> None:
        old_id = self._cf.id
        self.log.debug('drop existing column family')
        self._db.drop_column_family(self._cf)
        del self._cf
        self._cf = self._rocksdb_storage.get_or_create_column_family(self._cf_name)
        assert self._cf.is_valid
        self.log.debug('got new column family', id=self._cf.id, old_id=old_id)

    def close(self) -> None:
        self._rocksdb_storage.close()
