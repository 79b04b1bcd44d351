import importlib.util
import shutil
import tempfile
import unittest

from structlog import get_logger

from tskv.storage import KVStorage, MemoryKVStorage, RocksDBKVStorage, RocksDBStorage

logger = get_logger()

HAS_ROCKSDB = importlib.util.find_spec('rocksdb') is not None
skip_without_rocksdb = unittest.skipUnless(HAS_ROCKSDB, 'python-rocksdb is not installed')


class TestCase(unittest.TestCase):
    """ Base test case, subclasses choose the storage backend by overriding `create_kv_storage`.
    """

    def setUp(self) -> None:
        super().setUp()
        self.log = logger.new(test=self.id())
        self.tmpdirs: list[str] = []
        self.storages: list[KVStorage] = []

    def tearDown(self) -> None:
        for storage in self.storages:
            storage.close()
        for tmpdir in self.tmpdirs:
            shutil.rmtree(tmpdir, ignore_errors=True)
        super().tearDown()

    def mkdtemp(self) -> str:
        tmpdir = tempfile.mkdtemp()
        self.tmpdirs.append(tmpdir)
        return tmpdir

    def create_kv_storage(self) -> KVStorage:
        storage = MemoryKVStorage()
        self.storages.append(storage)
        return storage


class RocksDBTestCase(TestCase):
    def create_kv_storage(self) -> KVStorage:
        rocksdb_storage = RocksDBStorage(path=self.mkdtemp())
        storage = RocksDBKVStorage(rocksdb_storage, cf_name=b'tskv-test')
        self.storages.append(storage)
        return storage
