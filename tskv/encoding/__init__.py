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
This package holds the encoding of entities into the keys and values of a sorted key-value store.

Each submodule deals with one kind of entity and looks like this:

    def encode_x(value: ValueType) -> str:
        ...

    def decode_x(data: str) -> ValueType:
        ...

Decoders raise a subclass of `tskv.exception.CorruptedData` when the data does not have the expected shape.
Encoders raise `ValueError` when the value cannot be represented at all.
"""

from tskv.encoding.hash_table import decode_hash_key, decode_hash_name, encode_hash_key, encode_hash_name
from tskv.encoding.keys import (
    HashEntryKey,
    HashNameKey,
    Key,
    SeriesDataKey,
    SeriesNameKey,
    decode_key,
    encode_key,
)
from tskv.encoding.namespace import KeyNamespace, namespace_of
from tskv.encoding.series import (
    decode_series_key,
    decode_series_name,
    encode_series_key,
    encode_series_name,
    series_key_prefix,
)
from tskv.encoding.timestamp import decode_timestamp, encode_timestamp
from tskv.encoding.value import decode_value, encode_value

__all__ = [
    'HashEntryKey',
    'HashNameKey',
    'Key',
    'KeyNamespace',
    'SeriesDataKey',
    'SeriesNameKey',
    'decode_hash_key',
    'decode_hash_name',
    'decode_key',
    'decode_series_key',
    'decode_series_name',
    'decode_timestamp',
    'decode_value',
    'encode_hash_key',
    'encode_hash_name',
    'encode_key',
    'encode_series_key',
    'encode_series_name',
    'encode_timestamp',
    'encode_value',
    'namespace_of',
    'series_key_prefix',
]
