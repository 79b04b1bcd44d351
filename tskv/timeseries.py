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

from typing import Iterable, Iterator, Optional

from structlog import get_logger

from tskv.encoding import (
    KeyNamespace,
    decode_series_key,
    decode_series_name,
    decode_value,
    encode_series_key,
    encode_series_name,
    encode_value,
    series_key_prefix,
)
from tskv.encoding.consts import MAX_TIMESTAMP, MIN_TIMESTAMP
from tskv.exception import CorruptedData
from tskv.storage import KVStorage

logger = get_logger()


def _to_bytes(data: str) -> bytes:
    return data.encode('utf-8')


def _from_bytes(data: bytes) -> str:
    try:
        return data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise CorruptedData.wrap(e) from e


class TimeSeriesStore:
    """ Time-series samples kept in a sorted key-value store.

    Every sample is stored under its series data key with the encoded value as the store value:

        key   = ['2'][name][timestamp]
        value = '%.3f' % value

    and every series that ever received a sample is registered under its series name key, with an empty value:

        key   = ['1'][name]

    Since the timestamp is the fixed-width tail of the key, the samples of a series are stored in chronological order,
    so a range query is a single seek followed by a forward (or reverse) scan.

    Names are opaque: the keys of a series whose name extends another one (`cpu` and `cpua`) share a prefix and can be
    interleaved, scans decode every key under the prefix and only keep the ones of the requested series.
    """

    def __init__(self, storage: KVStorage) -> None:
        self.log = logger.new()
        self._storage = storage

    @staticmethod
    def _check_name(name: str) -> None:
        if not name:
            raise ValueError('series name must not be empty')

    def put(self, name: str, timestamp: int, value: float) -> None:
        """Store one sample, replacing any sample of the same series at the same timestamp."""
        self.put_many(name, [(timestamp, value)])

    def put_many(self, name: str, samples: Iterable[tuple[int, float]]) -> None:
        """Store many samples of one series in a single batch."""
        self._check_name(name)
        puts = [
            (_to_bytes(encode_series_key(name, timestamp)), _to_bytes(encode_value(value)))
            for timestamp, value in samples
        ]
        if not puts:
            return
        puts.append((_to_bytes(encode_series_name(name)), b''))
        self._storage.write_batch(puts)
        self.log.debug('put samples', name=name, count=len(puts) - 1)

    def get(self, name: str, timestamp: int) -> Optional[float]:
        """Get the value of the sample at `timestamp`, or None if there is none."""
        self._check_name(name)
        raw = self._storage.get(_to_bytes(encode_series_key(name, timestamp)))
        if raw is None:
            return None
        return decode_value(_from_bytes(raw))

    def delete(self, name: str, timestamp: int) -> None:
        """Delete the sample at `timestamp`, the series stays registered."""
        self._check_name(name)
        self._storage.delete(_to_bytes(encode_series_key(name, timestamp)))

    def _iter_keys(self, name: str, start: Optional[int], end: Optional[int],
                   *, reverse: bool) -> Iterator[tuple[int, bytes, bytes]]:
        """Iterate over (timestamp, raw key, raw value) of the samples of `name` within [start, end]."""
        self._check_name(name)
        # bounds outside the representable window are clamped, they cannot match any stored sample
        if (start is not None and start > MAX_TIMESTAMP) or (end is not None and end < MIN_TIMESTAMP):
            return
        if start is not None and end is not None and start > end:
            return
        if start is not None and start <= MIN_TIMESTAMP:
            start = None
        if end is not None and end >= MAX_TIMESTAMP:
            end = None
        prefix = _to_bytes(series_key_prefix(name))
        if reverse:
            if end is None:
                it = self._storage.iter_prefix(prefix, reverse=True)
            else:
                it = self._storage.iter_from(_to_bytes(encode_series_key(name, end)), reverse=True)
        else:
            if start is None:
                it = self._storage.iter_prefix(prefix)
            else:
                it = self._storage.iter_from(_to_bytes(encode_series_key(name, start)))

        for key, value in it:
            if not key.startswith(prefix):
                break
            key_name, timestamp = decode_series_key(_from_bytes(key))
            if key_name != name:
                # sample of another series whose name starts with `name`
                continue
            if reverse and start is not None and timestamp < start:
                break
            if not reverse and end is not None and timestamp > end:
                break
            yield timestamp, key, value

    def query(self, name: str, start: Optional[int] = None, end: Optional[int] = None,
              *, reverse: bool = False) -> Iterator[tuple[int, float]]:
        """ Iterate over the (timestamp, value) samples of a series with `start <= timestamp <= end`.

        Both bounds are optional. Samples come oldest first, or newest first with `reverse=True`. A corrupted record
        raises `CorruptedData` instead of being skipped.
        """
        for timestamp, _, value in self._iter_keys(name, start, end, reverse=reverse):
            yield timestamp, decode_value(_from_bytes(value))

    def get_newest(self, name: str) -> Optional[tuple[int, float]]:
        """Get the most recent sample of a series, or None if it has none."""
        return next(self.query(name, reverse=True), None)

    def iter_series(self) -> Iterator[str]:
        """Iterate over the registered series names, sorted."""
        prefix = _to_bytes(KeyNamespace.SERIES_NAME.prefix())
        for key, _ in self._storage.iter_prefix(prefix):
            yield decode_series_name(_from_bytes(key))

    def has_series(self, name: str) -> bool:
        self._check_name(name)
        return self._storage.get(_to_bytes(encode_series_name(name))) is not None

    def drop_series(self, name: str) -> int:
        """Delete every sample of a series and unregister it, returning how many samples were deleted."""
        keys = [key for _, key, _ in self._iter_keys(name, None, None, reverse=False)]
        self._storage.write_batch([], keys + [_to_bytes(encode_series_name(name))])
        self.log.info('drop series', name=name, samples=len(keys))
        return len(keys)
