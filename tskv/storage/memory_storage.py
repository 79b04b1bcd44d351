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

from typing import Iterable, Iterator

from sortedcontainers import SortedDict
from structlog import get_logger

from tskv.storage.kv_storage import KVStorage

logger = get_logger()


class MemoryKVStorage(KVStorage):
    """ KVStorage kept in a sorted dict, nothing is persisted.

    Mostly useful for tests and for short-lived processes.
    """

    _data: 'SortedDict[bytes, bytes]'

    def __init__(self) -> None:
        self.log = logger.new()
        self._data = SortedDict()

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def put(self, key: bytes, value: bytes) -> None:
        self._data[key] = value

    def delete(self, key: bytes) -> None:
        self._data.pop(key, None)

    def write_batch(self, puts: Iterable[tuple[bytes, bytes]], deletes: Iterable[bytes] = ()) -> None:
        # materialize first so a failing iterable leaves the store untouched
        puts = list(puts)
        deletes = list(deletes)
        self._data.update(puts)
        for key in deletes:
            self._data.pop(key, None)

    def iter_from(self, start: bytes, *, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]:
        if reverse:
            keys = self._data.irange(maximum=start, reverse=True)
        else:
            keys = self._data.irange(minimum=start)
        for key in keys:
            yield key, self._data[key]

    def iter_last(self) -> Iterator[tuple[bytes, bytes]]:
        for key in reversed(self._data):
            yield key, self._data[key]

    def clear(self) -> None:
        self.log.debug('clear', size=len(self._data))
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)
