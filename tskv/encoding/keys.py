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

"""
This module maps every kind of key to its namespace discriminant, so a raw key can be decoded without knowing in
advance which kind of entity it belongs to.

Each kind of key is a plain frozen record tagged with its `KeyNamespace`. Encoding and decoding dispatch on that tag
through `_CODECS`, which has exactly one entry per namespace.

>>> encode_key(SeriesDataKey('cpu.load', 1449308052))
'2cpu.load0000010'
>>> decode_key('2cpu.load0000010')
SeriesDataKey(name='cpu.load', timestamp=1449308052)
>>> decode_key('1cpu.load')
SeriesNameKey(name='cpu.load')
>>> decode_key('4user:42')
HashEntryKey(key='user:42')

>>> decode_key('9cpu.load')
Traceback (most recent call last):
 ...
tskv.exception.UnknownNamespace: unknown key namespace '9'
"""

from dataclasses import dataclass
from typing import Callable, ClassVar, NamedTuple, TypeAlias, Union

from tskv.encoding.hash_table import decode_hash_key, decode_hash_name, encode_hash_key, encode_hash_name
from tskv.encoding.namespace import KeyNamespace, namespace_of
from tskv.encoding.series import decode_series_key, decode_series_name, encode_series_key, encode_series_name


@dataclass(frozen=True, slots=True)
class SeriesNameKey:
    namespace: ClassVar[KeyNamespace] = KeyNamespace.SERIES_NAME
    name: str


@dataclass(frozen=True, slots=True)
class SeriesDataKey:
    namespace: ClassVar[KeyNamespace] = KeyNamespace.SERIES_DATA
    name: str
    timestamp: int


@dataclass(frozen=True, slots=True)
class HashNameKey:
    namespace: ClassVar[KeyNamespace] = KeyNamespace.HASH_NAME
    name: str


@dataclass(frozen=True, slots=True)
class HashEntryKey:
    namespace: ClassVar[KeyNamespace] = KeyNamespace.HASH_KEY
    key: str


Key: TypeAlias = Union[SeriesNameKey, SeriesDataKey, HashNameKey, HashEntryKey]


class _KeyCodec(NamedTuple):
    encode: Callable[[Key], str]
    decode: Callable[[str], Key]


_CODECS: dict[KeyNamespace, _KeyCodec] = {
    KeyNamespace.SERIES_NAME: _KeyCodec(
        encode=lambda k: encode_series_name(k.name),
        decode=lambda s: SeriesNameKey(decode_series_name(s)),
    ),
    KeyNamespace.SERIES_DATA: _KeyCodec(
        encode=lambda k: encode_series_key(k.name, k.timestamp),
        decode=lambda s: SeriesDataKey(*decode_series_key(s)),
    ),
    KeyNamespace.HASH_NAME: _KeyCodec(
        encode=lambda k: encode_hash_name(k.name),
        decode=lambda s: HashNameKey(decode_hash_name(s)),
    ),
    KeyNamespace.HASH_KEY: _KeyCodec(
        encode=lambda k: encode_hash_key(k.key),
        decode=lambda s: HashEntryKey(decode_hash_key(s)),
    ),
}

assert set(_CODECS) == set(KeyNamespace)


def encode_key(key: Key) -> str:
    """Encode any kind of key, using the codec of its namespace."""
    return _CODECS[key.namespace].encode(key)


def decode_key(data: str) -> Key:
    """Decode any kind of key, picking the codec from its first character."""
    return _CODECS[namespace_of(data)].decode(data)
