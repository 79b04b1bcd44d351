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

from abc import ABC, abstractmethod
from typing import Iterable, Iterator


def incr_key(key: bytes) -> bytes:
    """ Numerically increment the key as if it were a big-endian number.

    The result is the smallest key of the same length that is greater than every key starting with `key`, which makes
    it the exclusive upper bound of a prefix scan.

    >>> incr_key(b'2cpu')
    b'2cpv'

    >>> incr_key(bytes.fromhex('00ff')).hex()
    '0100'

    >>> incr_key(bytes.fromhex('ffff')).hex()
    Traceback (most recent call last):
     ...
    ValueError: cannot increment anymore
    """
    a = bytearray(key)
    for i in reversed(range(len(a))):
        if a[i] != 0xff:
            a[i] += 1
            break
        a[i] = 0x00
    else:
        raise ValueError('cannot increment anymore')
    return bytes(a)


class KVStorage(ABC):
    """ An ordered key-value store of byte strings.

    Keys are kept sorted by bytewise comparison, which is what makes range and prefix scans possible. Implementations
    do not synchronize access, callers must not use the same instance from more than one thread at a time.
    """

    @abstractmethod
    def get(self, key: bytes) -> bytes | None:
        """Get the value with the provided key, or None if it doesn't exist."""
        raise NotImplementedError

    @abstractmethod
    def put(self, key: bytes, value: bytes) -> None:
        """Put the value with the provided key, replacing any previous value."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: bytes) -> None:
        """Delete the value with the provided key, it is not an error if it doesn't exist."""
        raise NotImplementedError

    @abstractmethod
    def write_batch(self, puts: Iterable[tuple[bytes, bytes]], deletes: Iterable[bytes] = ()) -> None:
        """Apply all puts and then all deletes, atomically when the backend supports it."""
        raise NotImplementedError

    @abstractmethod
    def iter_from(self, start: bytes, *, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]:
        """ Iterate over (key, value) pairs in key order, starting from `start`.

        Going forward the first key is the smallest one `>= start`, in reverse the first key is the greatest one
        `<= start`. The store must not be modified while the iterator is in use.
        """
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove every key."""
        raise NotImplementedError

    def iter_prefix(self, prefix: bytes, *, reverse: bool = False) -> Iterator[tuple[bytes, bytes]]:
        """Iterate over the pairs whose key starts with `prefix`, in key order."""
        if reverse:
            try:
                it = self.iter_from(incr_key(prefix), reverse=True)
            except ValueError:
                # the prefix is all 0xff, nothing sorts after its keys
                it = self.iter_last()
        else:
            it = self.iter_from(prefix)
        for key, value in it:
            if not key.startswith(prefix):
                if reverse and key > prefix:
                    # seek_for_prev may land exactly on the incremented prefix
                    continue
                break
            yield key, value

    @abstractmethod
    def iter_last(self) -> Iterator[tuple[bytes, bytes]]:
        """Iterate over every pair from the greatest key down."""
        raise NotImplementedError

    def close(self) -> None:
        pass
